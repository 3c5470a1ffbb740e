"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
Production defaults are restrictive for security.
"""

import logging
import os

VALID_DECK_SOURCES = ("anki", "collection", "local")


def get_deck_source_type() -> str:
    """Get deck source type.

    Environment variable: DECK_SOURCE
    Options:
        - 'anki': Use AnkiConnect (default, requires Anki running)
        - 'collection': Read a collection.anki2 file directly
        - 'local': Use bundled sample collection (no Anki required)
    """
    return os.getenv("DECK_SOURCE", "anki").lower()


def get_anki_url() -> str:
    """Get AnkiConnect URL.

    Environment variable: ANKI_CONNECT_URL
    Default is localhost:8765 for local development.
    In Docker, set ANKI_CONNECT_URL=http://anki:8765
    """
    return os.getenv("ANKI_CONNECT_URL", "http://localhost:8765")


def get_anki_timeout() -> float:
    """Get AnkiConnect request timeout in seconds.

    Environment variable: ANKI_CONNECT_TIMEOUT
    """
    return float(os.getenv("ANKI_CONNECT_TIMEOUT", "5.0"))


def get_anki_retry_attempts() -> int:
    """Get attempts per AnkiConnect action on transport failures.

    Environment variable: ANKI_RETRY_ATTEMPTS
    """
    return int(os.getenv("ANKI_RETRY_ATTEMPTS", "3"))


def get_collection_path() -> str:
    """Get path of the Anki collection file.

    Environment variable: ANKI_COLLECTION_PATH
    Required when DECK_SOURCE=collection.
    """
    return os.getenv("ANKI_COLLECTION_PATH", "")


def get_log_level() -> int:
    """Get logging level.

    Environment variable: LOG_LEVEL
    Default: INFO. Unknown names fall back to INFO.
    """
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins from environment.

    Environment variable: CORS_ORIGINS (comma-separated)
    Default: localhost ports 3000-3001 for development
    """
    default_origins = "http://localhost:3000,http://localhost:3001"
    origins_str = os.getenv("CORS_ORIGINS", default_origins)
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def get_cors_allow_credentials() -> bool:
    """Get CORS allow_credentials setting.

    Environment variable: CORS_ALLOW_CREDENTIALS
    Default: false, the API is read-only and needs no cookies
    """
    return os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"


# Read-only API
CORS_ALLOWED_METHODS = ["GET", "OPTIONS"]

CORS_ALLOWED_HEADERS = [
    "Accept",
    "Accept-Language",
    "Content-Type",
]
