"""Deck tree builder: nests flat deck stats into a due tree."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from deckpicker.domain.constants import DECK_NAME_SEPARATOR
from deckpicker.domain.entities.deck_node import DeckNode
from deckpicker.domain.value_objects.deck_stats import DeckStats

logger = logging.getLogger(__name__)


@dataclass
class _Branch:
    """Mutable node used while assembling the tree."""

    stats: DeckStats
    children: list["_Branch"] = field(default_factory=list)


def deck_sort_key(name: str) -> list[str]:
    """Sort key matching Anki's deck list order (case-insensitive, by path)."""
    return [part.casefold() for part in name.split(DECK_NAME_SEPARATOR)]


def build_deck_tree(stats: Iterable[DeckStats], aggregate: bool = True) -> list[DeckNode]:
    """Build a deck due tree from per-deck counts.

    Decks are nested by their ``Parent::Child`` names and ordered by name.
    Names match case-insensitively, as in Anki, so ``lang::Verbs`` nests
    under ``Lang``.
    A deck whose parent is missing is attached to its nearest existing
    ancestor, or to the top level if there is none.

    Args:
        stats: Per-deck counts (counts exclude subdecks)
        aggregate: If True, each node's counts include its subdecks

    Returns:
        Top-level deck nodes with depth set from actual nesting
    """
    ordered = sorted(stats, key=lambda s: deck_sort_key(s.name))
    branches: dict[str, _Branch] = {}
    roots: list[_Branch] = []

    for deck_stats in ordered:
        key = deck_stats.name.casefold()
        if key in branches:
            logger.warning(f"Duplicate deck name '{deck_stats.name}', keeping first")
            continue
        branch = _Branch(deck_stats)
        branches[key] = branch

        parent = _find_parent(deck_stats.name, branches)
        if parent is None:
            if DECK_NAME_SEPARATOR in deck_stats.name:
                logger.warning(f"Deck '{deck_stats.name}' has no parent deck, placing at top level")
            roots.append(branch)
        else:
            parent.children.append(branch)

    return [_freeze(branch, 0, aggregate) for branch in roots]


def _find_parent(name: str, branches: dict[str, _Branch]) -> _Branch | None:
    """Find the nearest existing ancestor by case-insensitive name prefix."""
    parts = name.casefold().split(DECK_NAME_SEPARATOR)
    for end in range(len(parts) - 1, 0, -1):
        parent = branches.get(DECK_NAME_SEPARATOR.join(parts[:end]))
        if parent is not None:
            if end < len(parts) - 1:
                logger.warning(f"Deck '{name}' is missing intermediate parents")
            return parent
    return None


def _freeze(branch: _Branch, depth: int, aggregate: bool) -> DeckNode:
    children = tuple(_freeze(child, depth + 1, aggregate) for child in branch.children)
    new = branch.stats.new_count
    learn = branch.stats.learn_count
    review = branch.stats.review_count
    if aggregate:
        new += sum(child.new_count for child in children)
        learn += sum(child.learn_count for child in children)
        review += sum(child.review_count for child in children)
    return DeckNode(
        deck_id=branch.stats.deck_id,
        name=branch.stats.name,
        depth=depth,
        new_count=new,
        learn_count=learn,
        review_count=review,
        children=children,
    )
