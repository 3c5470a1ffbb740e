"""Due totals value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DueTotals:
    """Running new/learn/review sums for the top-level decks of a deck list."""

    new: int = 0
    learn: int = 0
    review: int = 0

    @property
    def total(self) -> int:
        return self.new + self.learn + self.review

    def as_vector(self) -> tuple[int, int, int]:
        """Counts in scheduler order: (new, learn, review)."""
        return (self.new, self.learn, self.review)
