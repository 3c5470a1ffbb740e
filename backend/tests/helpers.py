"""Builders for deck trees and metadata used across tests."""

from collections.abc import Iterable, Iterator

from deckpicker.adapters.in_memory_metadata import InMemoryDeckMetadata
from deckpicker.domain.entities.deck import Deck
from deckpicker.domain.entities.deck_node import DeckNode


def deck(
    deck_id: int,
    name: str,
    counts: tuple[int, int, int] = (0, 0, 0),
    children: Iterable[DeckNode] = (),
) -> DeckNode:
    """Build a DeckNode with depth taken from its Parent::Child name."""
    new, learn, review = counts
    return DeckNode(
        deck_id=deck_id,
        name=name,
        depth=name.count("::"),
        new_count=new,
        learn_count=learn,
        review_count=review,
        children=tuple(children),
    )


def walk(nodes: Iterable[DeckNode]) -> Iterator[DeckNode]:
    """Pre-order traversal of a forest."""
    for node in nodes:
        yield node
        yield from walk(node.children)


def metadata_for(
    forest: Iterable[DeckNode],
    collapsed: Iterable[int] = (),
    dynamic: Iterable[int] = (),
    with_cards: Iterable[int] | None = None,
    current: int | None = None,
) -> InMemoryDeckMetadata:
    """Metadata for every deck in a forest.

    Every deck has cards unless ``with_cards`` says otherwise.
    """
    nodes = list(walk(forest))
    collapsed = set(collapsed)
    dynamic = set(dynamic)
    decks = [
        Deck(
            deck_id=n.deck_id,
            name=n.name,
            collapsed=n.deck_id in collapsed,
            dynamic=n.deck_id in dynamic,
        )
        for n in nodes
    ]
    if with_cards is None:
        with_cards = [n.deck_id for n in nodes]
    return InMemoryDeckMetadata(decks, decks_with_cards=with_cards, current_deck_id=current)


class FixedEta:
    """EtaEstimator fake recording the counts it was asked about."""

    def __init__(self, minutes: int = 7):
        self.minutes = minutes
        self.calls: list[tuple[int, int, int]] = []

    def eta(self, counts: tuple[int, int, int]) -> int:
        self.calls.append(counts)
        return self.minutes


# Deck ids in the bundled sample collection
SAMPLE_JAPANESE = 1500000000001
SAMPLE_VOCABULARY = 1500000000002
SAMPLE_KANJI = 1500000000003
SAMPLE_JLPT_N5 = 1500000000004
SAMPLE_GEOGRAPHY = 1500000000005
SAMPLE_CAPITALS = 1500000000006
SAMPLE_LEECHES = 1500000000007
