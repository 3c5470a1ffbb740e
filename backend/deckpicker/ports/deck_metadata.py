"""Port interface for deck metadata lookups used by the deck list."""

from typing import Protocol, runtime_checkable

from deckpicker.domain.entities.deck import Deck


@runtime_checkable
class DeckMetadataSource(Protocol):
    """Port for per-deck metadata reads.

    Read-only and synchronous: the deck list projector calls it many
    times while building, so implementations should answer from memory
    (or a snapshot) rather than perform I/O per call.
    """

    def is_collapsed(self, deck_id: int) -> bool:
        """Whether the deck's children are hidden."""
        ...

    def ancestor_chain(self, deck_id: int) -> list[Deck]:
        """Get the deck's ancestors, farthest first.

        Args:
            deck_id: Deck to look up

        Returns:
            Ancestors from the top-level deck down to the immediate
            parent. Empty for top-level or unknown decks.
        """
        ...

    def has_cards(self, deck_id: int) -> bool:
        """Whether any card is assigned to the deck."""
        ...

    def is_dynamic(self, deck_id: int) -> bool:
        """Whether the deck is a filtered deck."""
        ...

    def current_deck_id(self) -> int | None:
        """Get the currently selected deck, or None if none is selected."""
        ...
