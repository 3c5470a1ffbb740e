"""Deck statistics value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeckStats:
    """Immutable value object representing card counts for one deck.

    Represents the three card categories that Anki tracks:
    - new: Cards never reviewed
    - learn: Cards in learning/relearning phase
    - review: Review cards due today

    Counts cover the deck alone, not its subdecks. ``card_count`` is the
    number of cards assigned to the deck regardless of due state.
    """

    deck_id: int
    name: str
    new_count: int = 0
    learn_count: int = 0
    review_count: int = 0
    card_count: int = 0

    @property
    def total_count(self) -> int:
        """Total cards available for study."""
        return self.new_count + self.learn_count + self.review_count

    @property
    def has_cards(self) -> bool:
        """Whether any card is assigned to the deck."""
        return self.card_count > 0
