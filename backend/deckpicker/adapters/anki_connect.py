"""AnkiConnect adapter for deck collection reads."""

import asyncio
import logging
from typing import Any

import httpx

from deckpicker.adapters.in_memory_metadata import InMemoryDeckMetadata
from deckpicker.domain.entities.deck import Deck
from deckpicker.domain.services.deck_tree_builder import build_deck_tree
from deckpicker.domain.value_objects.deck_stats import DeckStats
from deckpicker.infrastructure.retry import PermanentError, TransientError, retry_operation
from deckpicker.ports.deck_source import DeckCollectionSnapshot

logger = logging.getLogger(__name__)


class AnkiConnectError(Exception):
    """AnkiConnect API error."""

    pass


class AnkiConnectAdapter:
    """AnkiConnect API adapter implementing DeckCollectionSource protocol.

    Communicates with Anki desktop via AnkiConnect addon API.
    Uses lazy client initialization for connection reuse.

    AnkiConnect does not expose collapse flags, filtered-deck flags or
    the selected deck, so snapshots report every deck as expanded and
    non-dynamic with no current deck.
    """

    def __init__(
        self,
        url: str = "http://localhost:8765",
        timeout: float = 5.0,
        max_attempts: int = 3,
        initial_wait: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize adapter.

        Args:
            url: AnkiConnect API URL
            timeout: Request timeout in seconds
            max_attempts: Attempts per action on transient failures
            initial_wait: Initial backoff between attempts in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._url = url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._initial_wait = initial_wait
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazy client initialization for connection reuse."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    async def _post(self, payload: dict) -> Any:
        """Send one request; server errors are transient, client errors permanent."""
        client = await self._get_client()
        try:
            response = await client.post(self._url, json=payload)
        except httpx.TransportError as e:
            raise TransientError(f"AnkiConnect unreachable at {self._url}: {e}") from e
        if response.is_server_error:
            raise TransientError(f"AnkiConnect returned HTTP {response.status_code}")
        if response.is_client_error:
            raise PermanentError(
                f"AnkiConnect rejected {payload['action']} with HTTP {response.status_code}"
            )
        return response.json()

    async def _invoke(self, action: str, **params: Any) -> Any:
        """Call AnkiConnect action, retrying transport failures and server errors.

        Args:
            action: AnkiConnect action name
            **params: Action parameters

        Returns:
            Action result

        Raises:
            AnkiConnectError: If API returns an error
            PermanentError: If AnkiConnect rejects the request (HTTP 4xx)
            TransientError: If Anki stays unreachable after all attempts
        """
        payload = {"action": action, "version": 6, "params": params}
        result = await retry_operation(
            self._post,
            payload,
            max_attempts=self._max_attempts,
            initial_wait=self._initial_wait,
            on_retry=lambda attempt, exc: logger.info(f"{action} attempt {attempt} failed: {exc}"),
        )
        if result.get("error"):
            raise AnkiConnectError(result["error"])
        return result.get("result")

    async def wait_for_connection(
        self,
        max_retries: int = 10,
        retry_delay: float = 1.0,
    ) -> bool:
        """Wait for Anki to become available with retries.

        Args:
            max_retries: Maximum number of connection attempts
            retry_delay: Seconds to wait between retries

        Returns:
            True if connection successful, False if all retries exhausted
        """
        logger.info(f"Waiting for AnkiConnect at {self._url}...")

        for attempt in range(max_retries):
            try:
                client = await self._get_client()
                response = await client.post(self._url, json={"action": "version", "version": 6})
                if response.status_code == 200:
                    logger.info(f"AnkiConnect available (attempt {attempt + 1})")
                    return True
                logger.warning(
                    f"AnkiConnect bad status {response.status_code} "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
            except httpx.TransportError as e:
                logger.warning(f"AnkiConnect not ready (attempt {attempt + 1}/{max_retries}): {e}")

            if attempt < max_retries - 1:
                await asyncio.sleep(retry_delay)

        logger.error(f"AnkiConnect unavailable after {max_retries} attempts")
        return False

    async def get_deck_ids(self) -> dict[str, int]:
        """Get deck name to id mapping."""
        return await self._invoke("deckNamesAndIds") or {}

    async def get_deck_stats(self) -> list[DeckStats]:
        """Get per-deck new, learn and review counts.

        Counts from getDeckStats cover the deck alone; ``total_in_deck``
        is the number of cards assigned to it.
        """
        deck_ids = await self.get_deck_ids()
        if not deck_ids:
            return []

        result = await self._invoke("getDeckStats", decks=list(deck_ids))
        stats = []
        for info in (result or {}).values():
            stats.append(
                DeckStats(
                    deck_id=int(info["deck_id"]),
                    name=info["name"],
                    new_count=info.get("new_count", 0),
                    learn_count=info.get("learn_count", 0),
                    review_count=info.get("review_count", 0),
                    card_count=info.get("total_in_deck", 0),
                )
            )
        return stats

    async def load_snapshot(self) -> DeckCollectionSnapshot:
        """Read deck tree and metadata from Anki."""
        stats = await self.get_deck_stats()
        metadata = InMemoryDeckMetadata(
            decks=[Deck(deck_id=s.deck_id, name=s.name) for s in stats],
            decks_with_cards=[s.deck_id for s in stats if s.has_cards],
        )
        logger.debug(f"Loaded {len(stats)} decks from AnkiConnect")
        return DeckCollectionSnapshot(tree=tuple(build_deck_tree(stats)), metadata=metadata)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
