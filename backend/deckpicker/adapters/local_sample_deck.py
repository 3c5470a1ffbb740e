"""Local sample deck adapter for development and testing.

This adapter bypasses Anki by loading decks from an embedded JSON file.
Use DECK_SOURCE=local to enable.
"""

import json
from importlib import resources
from pathlib import Path

from deckpicker.adapters.in_memory_metadata import InMemoryDeckMetadata
from deckpicker.domain.entities.deck import Deck
from deckpicker.domain.services.deck_tree_builder import build_deck_tree
from deckpicker.domain.value_objects.deck_stats import DeckStats
from deckpicker.ports.deck_source import DeckCollectionSnapshot


class LocalSampleDeckAdapter:
    """DeckCollectionSource implementation with an embedded sample collection.

    Collapse and filtered flags come from the sample data, so the deck
    list shows hidden subdecks and a filtered deck without Anki running.

    This adapter is useful for:
    - Development without Anki running
    - API tests without Anki dependency
    - Demo environments
    """

    def __init__(self, data: dict | None = None) -> None:
        """Initialize adapter.

        Args:
            data: Collection data in the sample JSON layout; the bundled
                sample is loaded when omitted
        """
        self._data = data if data is not None else self._load_data()

    def _load_data(self) -> dict:
        """Load the sample collection from package data.

        Uses importlib.resources for reliable package data access.
        Falls back to file path if running outside package context.
        """
        try:
            data_path = resources.files("deckpicker.adapters.data").joinpath(
                "sample_collection.json"
            )
            with data_path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (ModuleNotFoundError, FileNotFoundError, TypeError):
            file_path = Path(__file__).parent / "data" / "sample_collection.json"
            with open(file_path, encoding="utf-8") as f:
                return json.load(f)

    async def load_snapshot(self) -> DeckCollectionSnapshot:
        """Build a snapshot from the sample data."""
        entries = self._data.get("decks", [])
        decks = [
            Deck(
                deck_id=entry["id"],
                name=entry["name"],
                collapsed=entry.get("collapsed", False),
                dynamic=entry.get("dyn", False),
            )
            for entry in entries
        ]
        stats = [
            DeckStats(
                deck_id=entry["id"],
                name=entry["name"],
                new_count=entry.get("new", 0),
                learn_count=entry.get("learn", 0),
                review_count=entry.get("review", 0),
                card_count=entry.get("cards", 0),
            )
            for entry in entries
        ]
        metadata = InMemoryDeckMetadata(
            decks=decks,
            decks_with_cards=[s.deck_id for s in stats if s.has_cards],
            current_deck_id=self._data.get("current_deck_id"),
        )
        return DeckCollectionSnapshot(tree=tuple(build_deck_tree(stats)), metadata=metadata)

    async def wait_for_connection(self, timeout: float = 30.0) -> bool:
        """Always connected (no external dependency)."""
        return True

    async def close(self) -> None:
        """No-op cleanup."""
        pass
