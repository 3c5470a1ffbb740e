"""Deck list projector: flattens a deck due tree into visible rows."""

import logging
from collections.abc import Callable, Iterator, Sequence

from deckpicker.domain.constants import DEFAULT_DECK_ID
from deckpicker.domain.entities.deck_node import DeckNode
from deckpicker.domain.value_objects.deck_list_projection import DeckListProjection
from deckpicker.domain.value_objects.due_totals import DueTotals
from deckpicker.domain.value_objects.visible_row import ExpanderState, VisibleRow
from deckpicker.ports.deck_metadata import DeckMetadataSource
from deckpicker.ports.eta_estimator import EtaEstimator

logger = logging.getLogger(__name__)

ProjectionListener = Callable[[DeckListProjection], None]


class DeckListProjector:
    """Builds the deck list shown in the deck picker.

    Responsibilities:
    - Pre-order flattening of the deck tree
    - Hiding the empty default deck and decks under collapsed parents
    - Summing due counts of the top-level decks
    - Mapping a deck id back to its row (or its nearest visible parent)

    Every build replaces the projection wholesale. The projector keeps the
    metadata source of the last build for position lookups. Not thread
    safe: callers must not build concurrently on one instance.
    """

    def __init__(
        self,
        eta_estimator: EtaEstimator | None = None,
        default_deck_id: int = DEFAULT_DECK_ID,
    ):
        """Initialize projector.

        Args:
            eta_estimator: Port for study time estimates (required by eta())
            default_deck_id: Reserved id of the default deck
        """
        self._eta_estimator = eta_estimator
        self._default_deck_id = default_deck_id
        self._metadata: DeckMetadataSource | None = None
        self._projection = DeckListProjection()
        self._listeners: list[ProjectionListener] = []

    @property
    def projection(self) -> DeckListProjection:
        """Projection produced by the most recent build."""
        return self._projection

    @property
    def rows(self) -> tuple[VisibleRow, ...]:
        return self._projection.rows

    @property
    def totals(self) -> DueTotals:
        return self._projection.totals

    @property
    def has_subdecks(self) -> bool:
        return self._projection.has_subdecks

    def add_listener(self, listener: ProjectionListener) -> None:
        """Register a callback invoked with each new projection."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ProjectionListener) -> None:
        self._listeners.remove(listener)

    def build(
        self,
        nodes: Sequence[DeckNode],
        metadata: DeckMetadataSource,
    ) -> DeckListProjection:
        """Build a new deck list from a deck tree.

        Walks the tree in pre-order. A node whose ancestor chain contains a
        collapsed deck ends the walk of its whole sibling group; the walk
        then resumes after the parent. Siblings share that ancestor, so the
        rest of the group would be hidden anyway.

        Args:
            nodes: Top-level decks in display order
            metadata: Port for collapse flags, ancestors and card existence

        Returns:
            The new projection (also available as ``projection``)
        """
        self._metadata = metadata
        visible: list[DeckNode] = []
        new = learn = review = 0
        has_subdecks = False

        stack: list[tuple[Sequence[DeckNode], Iterator[DeckNode]]] = [(nodes, iter(nodes))]
        while stack:
            siblings, remaining = stack[-1]
            node = next(remaining, None)
            if node is None:
                stack.pop()
                continue

            if self._is_hidden_default_deck(node, len(siblings), metadata):
                continue

            ancestors = metadata.ancestor_chain(node.deck_id)
            if ancestors:
                has_subdecks = True
            if any(metadata.is_collapsed(parent.deck_id) for parent in ancestors):
                stack.pop()
                continue

            visible.append(node)
            if node.depth == 0:
                new += node.new_count
                learn += node.learn_count
                review += node.review_count

            if node.children:
                stack.append((node.children, iter(node.children)))

        current_deck_id = metadata.current_deck_id()
        rows = tuple(
            VisibleRow(
                node=node,
                expander=self._expander_state(node, has_subdecks, metadata),
                is_current=node.deck_id == current_deck_id,
                is_dynamic=metadata.is_dynamic(node.deck_id),
            )
            for node in visible
        )
        self._projection = DeckListProjection(
            rows=rows,
            totals=DueTotals(new=new, learn=learn, review=review),
            has_subdecks=has_subdecks,
        )
        logger.debug(
            f"Built deck list: {len(rows)} rows, {self._projection.totals.total} due, "
            f"subdecks={has_subdecks}"
        )

        for listener in list(self._listeners):
            listener(self._projection)
        return self._projection

    def find_deck_position(self, deck_id: int) -> int:
        """Get the row index of a deck.

        A deck hidden under a collapsed parent resolves to the row of its
        nearest visible ancestor. A deck that is neither visible nor has
        ancestors (unknown id) resolves to row 0.

        Args:
            deck_id: Deck to locate

        Returns:
            Row index in the current projection
        """
        while True:
            position = self._projection.index_of(deck_id)
            if position is not None:
                return position
            if self._metadata is None:
                return 0
            parents = self._metadata.ancestor_chain(deck_id)
            if not parents:
                return 0
            deck_id = parents[-1].deck_id

    def total_due(self) -> int:
        """Total new, learning and review cards in the top-level decks."""
        return self._projection.totals.total

    def eta(self) -> int:
        """Estimated minutes to study every due card in the list.

        Raises:
            RuntimeError: If the projector has no ETA estimator
        """
        if self._eta_estimator is None:
            raise RuntimeError("No ETA estimator configured for this deck list")
        return self._eta_estimator.eta(self._projection.totals.as_vector())

    def _is_hidden_default_deck(
        self,
        node: DeckNode,
        sibling_count: int,
        metadata: DeckMetadataSource,
    ) -> bool:
        """Check whether the default deck should be left out.

        The default deck is hidden when it is empty, unless it is the only
        deck or has subdecks. The card query only runs when needed.
        """
        if node.deck_id != self._default_deck_id:
            return False
        if sibling_count <= 1 or node.has_children:
            return False
        return not metadata.has_cards(node.deck_id)

    @staticmethod
    def _expander_state(
        node: DeckNode,
        has_subdecks: bool,
        metadata: DeckMetadataSource,
    ) -> ExpanderState:
        if not has_subdecks:
            return ExpanderState.HIDDEN
        if metadata.is_collapsed(node.deck_id):
            return ExpanderState.COLLAPSED
        if node.has_children:
            return ExpanderState.EXPANDED
        return ExpanderState.NONE
