# Domain layer - Business logic (NO external dependencies)

from .entities import Deck, DeckNode
from .value_objects import (
    DeckListProjection,
    DeckStats,
    DueTotals,
    ExpanderState,
    ReviewRates,
    VisibleRow,
)

__all__ = [
    "Deck",
    "DeckListProjection",
    "DeckNode",
    "DeckStats",
    "DueTotals",
    "ExpanderState",
    "ReviewRates",
    "VisibleRow",
]
