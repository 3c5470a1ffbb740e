# Ports layer - Abstract interfaces (Protocols)

from .deck_metadata import DeckMetadataSource
from .deck_source import DeckCollectionSnapshot, DeckCollectionSource
from .eta_estimator import EtaEstimator

__all__ = [
    "DeckCollectionSnapshot",
    "DeckCollectionSource",
    "DeckMetadataSource",
    "EtaEstimator",
]
