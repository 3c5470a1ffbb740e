"""Visible row value object for the flattened deck list."""

from dataclasses import dataclass
from enum import StrEnum

from deckpicker.domain.entities.deck_node import DeckNode


class ExpanderState(StrEnum):
    """Expander shown next to a deck name.

    - HIDDEN: no deck in the list has subdecks, so no expander column
    - COLLAPSED: deck is collapsed, expander offers to expand it
    - EXPANDED: deck shows its children, expander offers to collapse it
    - NONE: leaf deck, empty expander slot kept for alignment
    """

    HIDDEN = "hidden"
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"
    NONE = "none"


@dataclass(frozen=True)
class VisibleRow:
    """A deck node as it appears in the deck list.

    Attributes:
        node: The deck tree node shown on this row
        expander: Expander state derived from collapse flag and children
        is_current: Whether this is the currently selected deck
        is_dynamic: Whether this is a filtered deck
    """

    node: DeckNode
    expander: ExpanderState = ExpanderState.HIDDEN
    is_current: bool = False
    is_dynamic: bool = False

    @property
    def deck_id(self) -> int:
        return self.node.deck_id

    @property
    def indent(self) -> int:
        """Indentation in abstract units, one per nesting level."""
        return self.node.depth
