"""Deck tree node with due counts."""

from dataclasses import dataclass, field

from deckpicker.domain.constants import DECK_NAME_SEPARATOR


@dataclass(frozen=True)
class DeckNode:
    """One deck in the due tree.

    Counts are for the deck as supplied; whether they include descendants
    is up to whoever built the tree. ``depth`` must match the actual
    nesting level (0 for top-level decks) and is not recomputed.
    """

    deck_id: int
    name: str
    depth: int = 0
    new_count: int = 0
    learn_count: int = 0
    review_count: int = 0
    children: tuple["DeckNode", ...] = field(default_factory=tuple)

    @property
    def name_component(self) -> str:
        """Last path segment of the deck name."""
        return self.name.rsplit(DECK_NAME_SEPARATOR, 1)[-1]

    @property
    def has_children(self) -> bool:
        return bool(self.children)
