"""SQLite adapter reading decks straight from an Anki collection file.

Supports the legacy collection schema (Anki 2.1.28 and earlier), where deck
metadata is stored as JSON in the ``col`` table. The file is opened
read-only, so Anki may keep it open while the deck list is built.
"""

import asyncio
import json
import logging
import sqlite3
import time
from pathlib import Path

from deckpicker.adapters.in_memory_metadata import InMemoryDeckMetadata
from deckpicker.domain.constants import ETA_HISTORY_DAYS
from deckpicker.domain.entities.deck import Deck
from deckpicker.domain.services.deck_tree_builder import build_deck_tree
from deckpicker.domain.value_objects.deck_stats import DeckStats
from deckpicker.domain.value_objects.review_rates import ReviewRates
from deckpicker.ports.deck_source import DeckCollectionSnapshot

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400
LEARN_AHEAD_SECONDS = 1200  # Anki shows learning cards due within 20 minutes

# Anki queue values
QUEUE_NEW = 0
QUEUE_LEARN = 1
QUEUE_REVIEW = 2
QUEUE_DAY_LEARN = 3

# Revlog entry types
REVLOG_LEARN = 0
REVLOG_REVIEW = 1


class AnkiCollectionError(Exception):
    """Collection file missing or in an unsupported format."""

    pass


class AnkiCollectionReader:
    """Collection file adapter implementing DeckCollectionSource protocol.

    Reads decks, per-deck due counts, card existence and review rates in
    one pass and returns them as an in-memory snapshot. Queries run in a
    worker thread to avoid blocking the event loop.

    Daily new/review limits from deck options are not applied.
    """

    def __init__(self, collection_path: str | Path):
        """Initialize reader.

        Args:
            collection_path: Path to collection.anki2
        """
        self._path = Path(collection_path)

    @property
    def path(self) -> Path:
        return self._path

    def _connect(self) -> sqlite3.Connection:
        if not self._path.is_file():
            raise AnkiCollectionError(f"Collection not found: {self._path}")
        conn = sqlite3.connect(f"file:{self._path}?mode=ro", uri=True)
        conn.row_factory = sqlite3.Row
        return conn

    async def load_snapshot(self) -> DeckCollectionSnapshot:
        """Read deck tree and metadata from the collection file."""
        return await asyncio.to_thread(self.read_snapshot)

    def read_snapshot(self, now: float | None = None) -> DeckCollectionSnapshot:
        """Read a snapshot synchronously.

        Args:
            now: Unix time used for due calculations (defaults to current time)

        Raises:
            AnkiCollectionError: If the file is missing or not a legacy collection
        """
        now = time.time() if now is None else now
        conn = self._connect()
        try:
            row = conn.execute("SELECT crt, conf, decks FROM col").fetchone()
            if row is None:
                raise AnkiCollectionError(f"Collection has no col row: {self._path}")
            decks = self._parse_decks(row["decks"])
            current_deck_id = self._parse_current_deck(row["conf"])

            today = int((now - row["crt"]) // SECONDS_PER_DAY)
            stats = self._read_deck_stats(conn, decks, today, now)
            rates = self._read_review_rates(conn, now)
        except sqlite3.DatabaseError as e:
            raise AnkiCollectionError(f"Unreadable collection {self._path}: {e}") from e
        finally:
            conn.close()

        metadata = InMemoryDeckMetadata(
            decks=decks,
            decks_with_cards=[s.deck_id for s in stats if s.has_cards],
            current_deck_id=current_deck_id,
        )
        logger.debug(f"Read {len(decks)} decks from {self._path}")
        return DeckCollectionSnapshot(
            tree=tuple(build_deck_tree(stats)),
            metadata=metadata,
            review_rates=rates,
        )

    def _parse_decks(self, decks_json: str | None) -> list[Deck]:
        if not decks_json:
            raise AnkiCollectionError(
                f"Unsupported collection schema (no deck JSON) in {self._path}"
            )
        raw = json.loads(decks_json)
        return [
            Deck(
                deck_id=int(info["id"]),
                name=info["name"],
                collapsed=bool(info.get("collapsed", False)),
                dynamic=bool(info.get("dyn", 0)),
            )
            for info in raw.values()
        ]

    @staticmethod
    def _parse_current_deck(conf_json: str | None) -> int | None:
        if not conf_json:
            return None
        current = json.loads(conf_json).get("curDeck")
        return int(current) if current is not None else None

    @staticmethod
    def _read_deck_stats(
        conn: sqlite3.Connection,
        decks: list[Deck],
        today: int,
        now: float,
    ) -> list[DeckStats]:
        """Count new, learning and review cards due today per deck."""
        counts = {
            r["did"]: r
            for r in conn.execute(
                """
                SELECT did,
                       COUNT(*) AS cards,
                       SUM(CASE WHEN queue = ? THEN 1 ELSE 0 END) AS new,
                       SUM(CASE WHEN (queue = ? AND due <= ?)
                                  OR (queue = ? AND due <= ?) THEN 1 ELSE 0 END) AS learn,
                       SUM(CASE WHEN queue = ? AND due <= ? THEN 1 ELSE 0 END) AS review
                FROM cards
                GROUP BY did
                """,
                (
                    QUEUE_NEW,
                    QUEUE_LEARN,
                    int(now) + LEARN_AHEAD_SECONDS,
                    QUEUE_DAY_LEARN,
                    today,
                    QUEUE_REVIEW,
                    today,
                ),
            )
        }
        stats = []
        for deck in decks:
            row = counts.get(deck.deck_id)
            stats.append(
                DeckStats(
                    deck_id=deck.deck_id,
                    name=deck.name,
                    new_count=row["new"] if row else 0,
                    learn_count=row["learn"] if row else 0,
                    review_count=row["review"] if row else 0,
                    card_count=row["cards"] if row else 0,
                )
            )
        return stats

    @staticmethod
    def _read_review_rates(conn: sqlite3.Connection, now: float) -> ReviewRates:
        """Measure answer rates over the recent review log.

        Falls back to default rates for categories without history. A
        learning success rate of zero also falls back, since new cards
        would never graduate.
        """
        since_ms = int((now - ETA_HISTORY_DAYS * SECONDS_PER_DAY) * 1000)
        defaults = ReviewRates()

        def measure(entry_type: int) -> tuple[float | None, float | None]:
            row = conn.execute(
                "SELECT AVG(CASE WHEN ease > 1 THEN 1.0 ELSE 0.0 END), AVG(time) "
                "FROM revlog WHERE type = ? AND id > ?",
                (entry_type, since_ms),
            ).fetchone()
            return row[0], row[1]

        review_rate, review_ms = measure(REVLOG_REVIEW)
        learn_rate, learn_ms = measure(REVLOG_LEARN)
        if learn_rate == 0:
            logger.info("Every recent learning answer failed, using default learning rate")
            learn_rate = None

        return ReviewRates(
            review_success_rate=(
                defaults.review_success_rate if review_rate is None else review_rate
            ),
            review_seconds=defaults.review_seconds if review_ms is None else review_ms / 1000,
            learn_success_rate=defaults.learn_success_rate if learn_rate is None else learn_rate,
            learn_seconds=defaults.learn_seconds if learn_ms is None else learn_ms / 1000,
        )

    async def close(self) -> None:
        """Nothing to release; connections are opened per read."""
        pass
