"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here to maintain
hexagonal architecture (domain NEVER imports from adapters).
"""

from deckpicker.adapters.anki_collection import AnkiCollectionReader
from deckpicker.adapters.anki_connect import AnkiConnectAdapter
from deckpicker.adapters.local_sample_deck import LocalSampleDeckAdapter
from deckpicker.config import (
    VALID_DECK_SOURCES,
    get_anki_retry_attempts,
    get_anki_timeout,
    get_anki_url,
    get_collection_path,
    get_deck_source_type,
)
from deckpicker.domain.services.deck_list_projector import DeckListProjector
from deckpicker.domain.services.study_time_estimator import StudyTimeEstimator
from deckpicker.domain.value_objects.review_rates import ReviewRates
from deckpicker.ports.deck_source import DeckCollectionSource


def create_deck_source(source_type: str | None = None) -> DeckCollectionSource:
    """Create the configured deck collection source.

    Args:
        source_type: 'anki', 'collection' or 'local'; read from
            DECK_SOURCE when omitted

    Returns:
        Deck collection source adapter

    Raises:
        ValueError: If the source type is unknown or its settings are missing
    """
    source_type = source_type or get_deck_source_type()

    if source_type == "local":
        return LocalSampleDeckAdapter()
    if source_type == "anki":
        return AnkiConnectAdapter(
            url=get_anki_url(),
            timeout=get_anki_timeout(),
            max_attempts=get_anki_retry_attempts(),
        )
    if source_type == "collection":
        path = get_collection_path()
        if not path:
            raise ValueError("ANKI_COLLECTION_PATH must be set when DECK_SOURCE=collection")
        return AnkiCollectionReader(path)

    raise ValueError(
        f"Invalid DECK_SOURCE: '{source_type}'. Valid options: {', '.join(VALID_DECK_SOURCES)}"
    )


def create_deck_list_projector(rates: ReviewRates | None = None) -> DeckListProjector:
    """Create DeckListProjector with a study time estimator.

    Args:
        rates: Review rates measured from the collection, defaults otherwise

    Returns:
        DeckListProjector configured with StudyTimeEstimator
    """
    return DeckListProjector(eta_estimator=StudyTimeEstimator(rates))
