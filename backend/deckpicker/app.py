"""
Deck Picker Backend - FastAPI Application

Deck list for Anki collections: nested decks flattened into display rows.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (parent of backend/)
# Must happen before importing modules that use environment variables
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from deckpicker.api.dependencies import cleanup_dependencies, init_dependencies  # noqa: E402
from deckpicker.api.routes import decks_router  # noqa: E402
from deckpicker.config import (  # noqa: E402
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    get_cors_allow_credentials,
    get_cors_origins,
    get_log_level,
)

logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for startup/shutdown events.

    Startup:
    - Create the deck source and wait for Anki

    Shutdown:
    - Close HTTP connections
    """
    logger.info("Starting deck picker backend...")

    await init_dependencies()
    logger.info("Dependencies initialized")

    yield

    logger.info("Shutting down deck picker backend...")
    await cleanup_dependencies()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Deck Picker API",
    description="Deck list for Anki collections",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration - loaded from environment with restrictive defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=get_cors_allow_credentials(),
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register API routers
app.include_router(decks_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "deckpicker-backend",
        "version": "0.1.0",
    }
