"""Domain value objects - immutable objects without identity."""

from .deck_list_projection import DeckListProjection
from .deck_stats import DeckStats
from .due_totals import DueTotals
from .review_rates import ReviewRates
from .visible_row import ExpanderState, VisibleRow

__all__ = [
    "DeckListProjection",
    "DeckStats",
    "DueTotals",
    "ExpanderState",
    "ReviewRates",
    "VisibleRow",
]
