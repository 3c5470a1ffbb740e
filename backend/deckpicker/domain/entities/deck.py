"""Deck entity representing a deck's stored metadata."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Deck:
    """Anki deck record.

    Attributes:
        deck_id: Unique deck identifier from Anki
        name: Full deck name including parents (e.g. 'Japanese::Kanji')
        collapsed: Whether the deck's children are hidden in the deck list
        dynamic: Whether this is a filtered deck built from a search
    """

    deck_id: int
    name: str
    collapsed: bool = False
    dynamic: bool = False
