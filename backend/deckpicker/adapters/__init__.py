# Adapters layer - Concrete implementations (AnkiConnect, collection file, sample data)

from .anki_collection import AnkiCollectionError, AnkiCollectionReader
from .anki_connect import AnkiConnectAdapter, AnkiConnectError
from .in_memory_metadata import InMemoryDeckMetadata
from .local_sample_deck import LocalSampleDeckAdapter

__all__ = [
    "AnkiCollectionError",
    "AnkiCollectionReader",
    "AnkiConnectAdapter",
    "AnkiConnectError",
    "InMemoryDeckMetadata",
    "LocalSampleDeckAdapter",
]
