"""Deck list API routes."""

import logging

import httpx
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from deckpicker.adapters.anki_collection import AnkiCollectionError
from deckpicker.adapters.anki_connect import AnkiConnectError
from deckpicker.api.dependencies import DeckSourceDep
from deckpicker.composition import create_deck_list_projector
from deckpicker.domain.services.deck_list_projector import DeckListProjector
from deckpicker.domain.value_objects.visible_row import VisibleRow
from deckpicker.infrastructure.retry import PermanentError, RetryableError
from deckpicker.ports.deck_source import DeckCollectionSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/decks", tags=["decks"])

SOURCE_ERRORS = (
    AnkiConnectError,
    AnkiCollectionError,
    RetryableError,
    PermanentError,
    httpx.HTTPError,
)


# =============================================================================
# Response Models
# =============================================================================


class DeckRow(BaseModel):
    """One visible row of the deck list."""

    deck_id: int
    name: str
    full_name: str
    depth: int
    new_count: int
    learn_count: int
    review_count: int
    expander: str
    is_current: bool
    is_dynamic: bool


class DueTotalsInfo(BaseModel):
    """Due counts summed over top-level decks."""

    new_count: int
    learn_count: int
    review_count: int
    total_count: int


class DeckListResponse(BaseModel):
    """Response for the deck list."""

    rows: list[DeckRow]
    totals: DueTotalsInfo
    has_subdecks: bool
    eta_minutes: int


class DeckPositionResponse(BaseModel):
    """Row index a deck resolves to."""

    deck_id: int
    position: int


# =============================================================================
# Helpers
# =============================================================================


async def _build_projector(deck_source: DeckCollectionSource) -> DeckListProjector:
    """Load a fresh snapshot and build the deck list from it."""
    try:
        snapshot = await deck_source.load_snapshot()
    except SOURCE_ERRORS as e:
        logger.warning(f"Deck source unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": {
                    "code": "DECKS_UNAVAILABLE",
                    "message": f"Could not read decks: {str(e)}",
                }
            },
        ) from None

    projector = create_deck_list_projector(snapshot.review_rates)
    projector.build(snapshot.tree, snapshot.metadata)
    return projector


def _to_row(row: VisibleRow) -> DeckRow:
    node = row.node
    return DeckRow(
        deck_id=node.deck_id,
        name=node.name_component,
        full_name=node.name,
        depth=row.indent,
        new_count=node.new_count,
        learn_count=node.learn_count,
        review_count=node.review_count,
        expander=row.expander.value,
        is_current=row.is_current,
        is_dynamic=row.is_dynamic,
    )


# =============================================================================
# Routes
# =============================================================================


@router.get(
    "",
    response_model=DeckListResponse,
    responses={
        503: {"description": "Deck source unavailable"},
    },
)
async def list_decks(deck_source: DeckSourceDep) -> DeckListResponse:
    """Get the deck list as shown in the deck picker.

    Rows are in display order; decks under collapsed parents and the
    empty default deck are left out.
    """
    projector = await _build_projector(deck_source)
    totals = projector.totals

    return DeckListResponse(
        rows=[_to_row(row) for row in projector.rows],
        totals=DueTotalsInfo(
            new_count=totals.new,
            learn_count=totals.learn,
            review_count=totals.review,
            total_count=projector.total_due(),
        ),
        has_subdecks=projector.has_subdecks,
        eta_minutes=projector.eta(),
    )


@router.get(
    "/{deck_id}/position",
    response_model=DeckPositionResponse,
    responses={
        503: {"description": "Deck source unavailable"},
    },
)
async def get_deck_position(deck_id: int, deck_source: DeckSourceDep) -> DeckPositionResponse:
    """Get the row a deck is shown on.

    Hidden decks resolve to their nearest visible parent; unknown decks
    resolve to the first row.
    """
    projector = await _build_projector(deck_source)
    return DeckPositionResponse(deck_id=deck_id, position=projector.find_deck_position(deck_id))
