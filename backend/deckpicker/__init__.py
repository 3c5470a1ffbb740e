"""deckpicker - deck list projection for Anki collections."""

__version__ = "0.1.0"
