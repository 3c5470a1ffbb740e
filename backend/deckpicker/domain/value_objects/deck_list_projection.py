"""Deck list projection value object."""

from dataclasses import dataclass, field

from .due_totals import DueTotals
from .visible_row import VisibleRow


@dataclass(frozen=True)
class DeckListProjection:
    """Result of one deck list build.

    Immutable: a rebuild produces a new projection instead of mutating
    this one, so readers holding a reference always see a consistent list.
    """

    rows: tuple[VisibleRow, ...] = ()
    totals: DueTotals = field(default_factory=DueTotals)
    has_subdecks: bool = False

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def deck_ids(self) -> list[int]:
        return [row.deck_id for row in self.rows]

    def index_of(self, deck_id: int) -> int | None:
        """Row index of a deck, or None if the deck is not visible."""
        for position, row in enumerate(self.rows):
            if row.deck_id == deck_id:
                return position
        return None
