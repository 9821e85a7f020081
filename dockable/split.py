"""Split directions and descriptions of where a moved tab should go."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from dockable.indices import NodeIndex, SurfaceIndex, TabIndex
from dockable.window_state import Rect


class Split(Enum):
    """Direction in which a new node is placed relative to the node being split."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    def is_top_bottom(self) -> bool:
        """Whether the split stacks nodes vertically."""
        return self in (Split.ABOVE, Split.BELOW)

    def is_left_right(self) -> bool:
        """Whether the split places nodes side by side."""
        return self in (Split.LEFT, Split.RIGHT)


@dataclass(frozen=True)
class TabInsertSplit:
    """Insert a tab by splitting the target node in the given direction."""

    split: Split


@dataclass(frozen=True)
class TabInsertAt:
    """Insert a tab at the given position of the target leaf."""

    index: TabIndex


@dataclass(frozen=True)
class TabAppend:
    """Append a tab to the end of the target leaf."""


TabInsert = Union[TabInsertSplit, TabInsertAt, TabAppend]


@dataclass(frozen=True)
class WindowDestination:
    """Move a tab into a new window occupying ``rect``."""

    rect: Rect

    def is_window(self) -> bool:
        """Always true: this destination creates a window."""
        return True


@dataclass(frozen=True)
class NodeDestination:
    """Move a tab into an existing node, inserted as ``insert`` describes."""

    surface: SurfaceIndex
    node: NodeIndex
    insert: TabInsert

    def is_window(self) -> bool:
        """Always false: the tab goes into an existing node."""
        return False


@dataclass(frozen=True)
class EmptySurfaceDestination:
    """Move a tab onto a surface whose tree is empty."""

    surface: SurfaceIndex

    def is_window(self) -> bool:
        """Always false: the tab goes onto an existing surface."""
        return False


TabDestination = Union[WindowDestination, NodeDestination, EmptySurfaceDestination]