"""Port interface for deck collection sources (Anki integration)."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from deckpicker.domain.entities.deck_node import DeckNode
from deckpicker.domain.value_objects.review_rates import ReviewRates
from deckpicker.ports.deck_metadata import DeckMetadataSource


@dataclass(frozen=True)
class DeckCollectionSnapshot:
    """Point-in-time view of a collection's decks.

    The tree and the metadata are read together so a deck list build sees
    collapse flags and card counts from the same moment.
    """

    tree: tuple[DeckNode, ...]
    metadata: DeckMetadataSource
    review_rates: ReviewRates = field(default_factory=ReviewRates)


@runtime_checkable
class DeckCollectionSource(Protocol):
    """Port for loading deck collections.

    Abstracts the collection backend (AnkiConnect, a collection file,
    or bundled sample data).
    """

    async def load_snapshot(self) -> DeckCollectionSnapshot:
        """Read the deck tree and its metadata.

        Returns:
            Snapshot with the due tree, metadata and review rates
        """
        ...

    async def close(self) -> None:
        """Release connections held by the source."""
        ...
