"""In-memory deck metadata adapter."""

from collections.abc import Iterable

from deckpicker.domain.constants import DECK_NAME_SEPARATOR
from deckpicker.domain.entities.deck import Deck


class InMemoryDeckMetadata:
    """DeckMetadataSource implementation backed by plain collections.

    Collection sources read everything they need up front and wrap it in
    this adapter, so a deck list build never waits on I/O. Ancestors are
    resolved from ``Parent::Child`` names, ignoring case.
    """

    def __init__(
        self,
        decks: Iterable[Deck],
        decks_with_cards: Iterable[int] = (),
        current_deck_id: int | None = None,
    ) -> None:
        """Initialize metadata.

        Args:
            decks: Every deck in the collection
            decks_with_cards: Ids of decks that have at least one card
            current_deck_id: Currently selected deck, if any
        """
        self._by_id: dict[int, Deck] = {}
        self._by_name: dict[str, Deck] = {}
        for deck in decks:
            self._by_id[deck.deck_id] = deck
            self._by_name[deck.name.casefold()] = deck
        self._decks_with_cards = frozenset(decks_with_cards)
        self._current_deck_id = current_deck_id

    @property
    def decks(self) -> list[Deck]:
        return list(self._by_id.values())

    def get(self, deck_id: int) -> Deck | None:
        return self._by_id.get(deck_id)

    def is_collapsed(self, deck_id: int) -> bool:
        deck = self._by_id.get(deck_id)
        return deck.collapsed if deck else False

    def ancestor_chain(self, deck_id: int) -> list[Deck]:
        """Get ancestors farthest first; missing intermediate decks are skipped."""
        deck = self._by_id.get(deck_id)
        if deck is None:
            return []
        parts = deck.name.casefold().split(DECK_NAME_SEPARATOR)
        chain = []
        for end in range(1, len(parts)):
            parent = self._by_name.get(DECK_NAME_SEPARATOR.join(parts[:end]))
            if parent is not None:
                chain.append(parent)
        return chain

    def has_cards(self, deck_id: int) -> bool:
        return deck_id in self._decks_with_cards

    def is_dynamic(self, deck_id: int) -> bool:
        deck = self._by_id.get(deck_id)
        return deck.dynamic if deck else False

    def current_deck_id(self) -> int | None:
        return self._current_deck_id
