"""Tests for deck list API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from deckpicker.adapters.anki_connect import AnkiConnectError
from deckpicker.adapters.local_sample_deck import LocalSampleDeckAdapter
from deckpicker.api.dependencies import cleanup_dependencies, get_deck_source, init_dependencies
from deckpicker.app import app
from deckpicker.infrastructure.retry import PermanentError
from helpers import SAMPLE_GEOGRAPHY, SAMPLE_JLPT_N5, SAMPLE_KANJI, SAMPLE_LEECHES


class BrokenSource:
    """Deck source whose Anki is unreachable."""

    async def load_snapshot(self):
        raise AnkiConnectError("collection is not available")

    async def close(self):
        pass


@pytest.fixture
async def client(sample_source):
    """Provide an async test client serving the sample collection."""
    app.dependency_overrides[get_deck_source] = lambda: sample_source

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_list_decks(client):
    response = await client.get("/api/decks")

    assert response.status_code == 200
    data = response.json()
    assert len(data["rows"]) == 6
    assert data["rows"][0]["deck_id"] == SAMPLE_GEOGRAPHY
    assert data["rows"][1]["name"] == "Capitals"
    assert data["rows"][1]["full_name"] == "Geography::Capitals"
    assert data["rows"][1]["depth"] == 1
    assert data["totals"] == {
        "new_count": 23,
        "learn_count": 4,
        "review_count": 59,
        "total_count": 86,
    }
    assert data["has_subdecks"] is True
    assert isinstance(data["eta_minutes"], int)
    assert data["eta_minutes"] > 0

    by_id = {row["deck_id"]: row for row in data["rows"]}
    assert by_id[SAMPLE_KANJI]["expander"] == "collapsed"
    assert by_id[SAMPLE_KANJI]["is_current"] is True
    assert by_id[SAMPLE_LEECHES]["is_dynamic"] is True


async def test_position_of_hidden_deck_is_its_parent_row(client):
    response = await client.get(f"/api/decks/{SAMPLE_JLPT_N5}/position")

    assert response.status_code == 200
    assert response.json() == {"deck_id": SAMPLE_JLPT_N5, "position": 3}


async def test_position_of_unknown_deck_is_first_row(client):
    response = await client.get("/api/decks/999/position")

    assert response.status_code == 200
    assert response.json()["position"] == 0


async def test_source_failure_returns_503(client):
    app.dependency_overrides[get_deck_source] = lambda: BrokenSource()

    response = await client.get("/api/decks")

    assert response.status_code == 503
    assert response.json()["detail"]["error"]["code"] == "DECKS_UNAVAILABLE"


async def test_init_and_cleanup_dependencies():
    await init_dependencies("local")
    assert isinstance(get_deck_source(), LocalSampleDeckAdapter)

    await cleanup_dependencies()
    with pytest.raises(RuntimeError, match="not initialized"):
        get_deck_source()


async def test_rejected_source_request_returns_503(client):
    class RejectingSource(BrokenSource):
        async def load_snapshot(self):
            raise PermanentError("AnkiConnect rejected deckNamesAndIds with HTTP 403")

    app.dependency_overrides[get_deck_source] = lambda: RejectingSource()

    response = await client.get("/api/decks")

    assert response.status_code == 503
    assert "HTTP 403" in response.json()["detail"]["error"]["message"]
