"""API routes module."""

from .decks import router as decks_router

__all__ = ["decks_router"]
