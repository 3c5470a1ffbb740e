"""
Shared Domain Constants.

Central location for reserved identifiers and scheduling defaults used
across domain services.
"""

# =============================================================================
# Deck Identifiers
# =============================================================================

DEFAULT_DECK_ID = 1  # Anki's reserved "Default" deck
DECK_NAME_SEPARATOR = "::"  # Parent::Child naming used by Anki


# =============================================================================
# Study Time Estimation
# =============================================================================
# Used when the collection has no recent review history.

DEFAULT_REVIEW_SUCCESS_RATE = 0.9
DEFAULT_REVIEW_SECONDS = 10.0
DEFAULT_LEARN_SUCCESS_RATE = 0.93
DEFAULT_LEARN_SECONDS = 8.0

ETA_HISTORY_DAYS = 10  # Review log window for measured rates
