"""Domain entities - objects with identity."""

from .deck import Deck
from .deck_node import DeckNode

__all__ = ["Deck", "DeckNode"]
