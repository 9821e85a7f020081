"""Nodes of a dock tree: empty slots, leaves holding tabs, and split parents."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dockable.indices import TabIndex
from dockable.split import Split
from dockable.window_state import Rect


class Node:
    """Common behaviour of every kind of node in a tree."""

    def is_empty(self) -> bool:
        """Whether this is an empty node."""
        return False

    def is_leaf(self) -> bool:
        """Whether this node holds tabs."""
        return False

    def is_horizontal(self) -> bool:
        """Whether this is a parent split side by side."""
        return False

    def is_vertical(self) -> bool:
        """Whether this is a parent split top to bottom."""
        return False

    def is_parent(self) -> bool:
        """Whether this node is either kind of parent."""
        return self.is_horizontal() or self.is_vertical()

    def is_collapsed(self) -> bool:
        """Whether this node (or every node below it) is collapsed."""
        return False

    def collapsed_leaf_count(self) -> int:
        """Number of layers of collapsed leaves at or below this node."""
        return 0

    def set_collapsed(self, collapsed: bool) -> None:
        """Set the collapsed state; empty nodes have none."""
        raise TypeError("node was empty")

    def set_collapsed_leaf_count(self, count: int) -> None:
        """Set the collapsed leaf count; only parents hold one."""
        raise TypeError("node was neither vertical nor horizontal")

    def get_rect(self) -> Rect | None:
        """The area the node occupies, or ``None`` for an empty node."""
        return None

    def set_rect(self, rect: Rect) -> None:
        """Set the area the node occupies; ignored by empty nodes."""

    def tabs_count(self) -> int:
        """Number of tabs held by this node."""
        return 0

    def iter_tabs(self) -> Iterator[Any]:
        """Iterate over the tabs of this node; empty unless it is a leaf."""
        return iter(())

    def append_tab(self, tab: Any) -> None:
        """Add ``tab`` at the end and make it active."""
        raise TypeError("node was not a leaf")

    def insert_tab(self, index: TabIndex, tab: Any) -> None:
        """Insert ``tab`` at ``index`` and make it active."""
        raise TypeError("node was not a leaf")

    def remove_tab(self, tab_index: TabIndex) -> Any:
        """Remove and return the tab at ``tab_index``; ``None`` unless a leaf."""
        return None

    def split(self, split: Split, fraction: float) -> ParentNode:
        """Return the parent node that takes this node's place after a split.

        The parent inherits this node's collapsed state; this node itself is
        left unchanged and becomes one of the parent's children.
        """
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"fraction must be in 0..=1, got {fraction}")
        kind = HorizontalNode if split.is_left_right() else VerticalNode
        return kind(
            fraction=fraction,
            fully_collapsed=self.is_collapsed(),
            collapsed_leaves=self.collapsed_leaf_count(),
        )

    def filter_map_tabs(self, function: Callable[[Any], Any]) -> Node:
        """Return a new node with each tab mapped by ``function``.

        Tabs for which ``function`` returns ``None`` are dropped; a leaf left
        with no tabs becomes an empty node.
        """
        return dataclasses.replace(self)  # type: ignore[type-var]

    def map_tabs(self, function: Callable[[Any], Any]) -> Node:
        """Return a new node with every tab mapped by ``function``."""
        return dataclasses.replace(self)  # type: ignore[type-var]

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Node:
        """Return a new node keeping only tabs that satisfy ``predicate``."""
        return self.filter_map_tabs(lambda tab: tab if predicate(tab) else None)

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> Node:
        """Drop tabs failing ``predicate`` in place.

        Returns the node that should stand in this one's position: itself,
        or a new empty node if a leaf lost all its tabs.
        """
        return self


@dataclass
class EmptyNode(Node):
    """A slot of the tree with nothing in it."""

    def is_empty(self) -> bool:
        return True


@dataclass
class LeafNode(Node):
    """A node holding tabs."""

    tabs: list[Any] = field(default_factory=list)
    active: TabIndex = field(default_factory=lambda: TabIndex(0))
    rect: Rect = Rect.NOTHING
    viewport: Rect = Rect.NOTHING
    scroll: float = 0.0
    collapsed: bool = False

    def is_leaf(self) -> bool:
        return True

    def is_collapsed(self) -> bool:
        return self.collapsed

    def collapsed_leaf_count(self) -> int:
        return 1 if self.collapsed else 0

    def set_collapsed(self, collapsed: bool) -> None:
        self.collapsed = collapsed

    def get_rect(self) -> Rect | None:
        return self.rect

    def set_rect(self, rect: Rect) -> None:
        self.rect = rect

    def tabs_count(self) -> int:
        return len(self.tabs)

    def iter_tabs(self) -> Iterator[Any]:
        return iter(self.tabs)

    def append_tab(self, tab: Any) -> None:
        self.active = TabIndex(len(self.tabs))
        self.tabs.append(tab)

    def insert_tab(self, index: TabIndex, tab: Any) -> None:
        if index.value > len(self.tabs):
            raise IndexError(
                f"insertion index {index.value} exceeds tab count {len(self.tabs)}"
            )
        self.tabs.insert(index.value, tab)
        self.active = index

    def remove_tab(self, tab_index: TabIndex) -> Any:
        if tab_index.value >= len(self.tabs):
            raise IndexError(
                f"tab index {tab_index.value} out of range for {len(self.tabs)} tabs"
            )
        if tab_index <= self.active:
            self.active = TabIndex(max(self.active.value - 1, 0))
        return self.tabs.pop(tab_index.value)

    def _with_tabs(self, tabs: list[Any]) -> Node:
        if not tabs:
            return EmptyNode()
        return dataclasses.replace(self, tabs=tabs)

    def filter_map_tabs(self, function: Callable[[Any], Any]) -> Node:
        mapped = (function(tab) for tab in self.tabs)
        return self._with_tabs([tab for tab in mapped if tab is not None])

    def map_tabs(self, function: Callable[[Any], Any]) -> Node:
        return self._with_tabs([function(tab) for tab in self.tabs])

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Node:
        return self._with_tabs([tab for tab in self.tabs if predicate(tab)])

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> Node:
        self.tabs[:] = [tab for tab in self.tabs if predicate(tab)]
        return self if self.tabs else EmptyNode()


@dataclass
class ParentNode(Node):
    """A node split into two children."""

    fraction: float = 0.5
    rect: Rect = Rect.NOTHING
    fully_collapsed: bool = False
    collapsed_leaves: int = 0

    def is_collapsed(self) -> bool:
        return self.fully_collapsed

    def collapsed_leaf_count(self) -> int:
        return self.collapsed_leaves

    def set_collapsed(self, collapsed: bool) -> None:
        self.fully_collapsed = collapsed

    def set_collapsed_leaf_count(self, count: int) -> None:
        self.collapsed_leaves = count

    def get_rect(self) -> Rect | None:
        return self.rect

    def set_rect(self, rect: Rect) -> None:
        self.rect = rect


@dataclass
class HorizontalNode(ParentNode):
    """Parent whose left child takes ``fraction`` of the width."""

    def is_horizontal(self) -> bool:
        return True


@dataclass
class VerticalNode(ParentNode):
    """Parent whose top child takes ``fraction`` of the height."""

    def is_vertical(self) -> bool:
        return True


def leaf(tab: Any) -> LeafNode:
    """A leaf holding the single ``tab``."""
    return LeafNode(tabs=[tab])


def leaf_with(tabs: Iterable[Any]) -> LeafNode:
    """A leaf holding ``tabs``, the first of them active."""
    return LeafNode(tabs=list(tabs))