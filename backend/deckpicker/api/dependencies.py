"""FastAPI dependency injection module.

Provides the deck collection source singleton for API routes.
Uses lifespan events for initialization and cleanup.
"""

import logging
from typing import Annotated

from fastapi import Depends

from deckpicker.composition import create_deck_source
from deckpicker.ports.deck_source import DeckCollectionSource

logger = logging.getLogger(__name__)

# Singleton stored at module level
_deck_source: DeckCollectionSource | None = None


async def init_dependencies(source_type: str | None = None) -> None:
    """Initialize singleton dependencies.

    Called during FastAPI lifespan startup.

    Args:
        source_type: Overrides DECK_SOURCE when given
    """
    global _deck_source

    _deck_source = create_deck_source(source_type)
    logger.info(f"Using deck source {type(_deck_source).__name__}")

    # Wait for Anki to be available (with retries)
    wait_for_connection = getattr(_deck_source, "wait_for_connection", None)
    if wait_for_connection is not None:
        connected = await wait_for_connection()
        if not connected:
            logger.warning("Deck source not available at startup - will retry on requests")


async def cleanup_dependencies() -> None:
    """Cleanup dependencies on shutdown.

    Called during FastAPI lifespan shutdown.
    """
    global _deck_source

    if _deck_source is not None:
        await _deck_source.close()
        _deck_source = None


def get_deck_source() -> DeckCollectionSource:
    """Dependency: Get DeckCollectionSource instance."""
    if _deck_source is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _deck_source


# Type alias for dependency injection
DeckSourceDep = Annotated[DeckCollectionSource, Depends(get_deck_source)]
