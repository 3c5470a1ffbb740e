"""API layer - FastAPI routes and dependencies."""

from .dependencies import (
    DeckSourceDep,
    cleanup_dependencies,
    get_deck_source,
    init_dependencies,
)
from .routes import decks_router

__all__ = [
    # Routes
    "decks_router",
    # Dependencies
    "init_dependencies",
    "cleanup_dependencies",
    "get_deck_source",
    # Type aliases
    "DeckSourceDep",
]
