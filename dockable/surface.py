"""Surfaces: the areas of a dock state in which node trees are laid out."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from dockable.indices import NodeIndex
from dockable.node import Node
from dockable.tree import Tree
from dockable.window_state import WindowState


class Surface:
    """Common behaviour of the empty, main and window surfaces."""

    def is_empty(self) -> bool:
        """Whether this is an empty (null) surface."""
        return False

    def node_tree(self) -> Tree | None:
        """The tree of this surface, or ``None`` for an empty surface."""
        return None

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over the nodes of this surface's tree; empty if there is none."""
        tree = self.node_tree()
        return iter(tree) if tree is not None else iter(())

    def iter_all_tabs(self) -> Iterator[tuple[NodeIndex, Any]]:
        """Iterate over every tab together with the index of its node."""
        for index, node in enumerate(self.iter_nodes()):
            for tab in node.iter_tabs():
                yield NodeIndex(index), tab

    def filter_map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        """New surface with tabs mapped by ``function``; ``None`` results are dropped."""
        return EmptySurface()

    def map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        """New surface with every tab mapped by ``function``."""
        return EmptySurface()

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        """New surface keeping only tabs that satisfy ``predicate``."""
        return EmptySurface()

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        """Drop, in place, every tab failing ``predicate``.

        Returns the surface that should stand in this one's position: itself,
        or a new empty surface if its tree ended up with no nodes.
        """
        return self


@dataclass(eq=False)
class EmptySurface(Surface):
    """A surface with nothing inside it."""

    def is_empty(self) -> bool:
        return True


@dataclass(eq=False)
class MainSurface(Surface):
    """The single main surface of a dock state."""

    tree: Tree

    def node_tree(self) -> Tree | None:
        return self.tree

    def filter_map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        return MainSurface(self.tree.filter_map_tabs(function))

    def map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        return MainSurface(self.tree.map_tabs(function))

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        return MainSurface(self.tree.filter_tabs(predicate))

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        self.tree.retain_tabs(predicate)
        return EmptySurface() if self.tree.is_empty() else self


@dataclass(eq=False)
class WindowSurface(Surface):
    """A floating window surface with its own tree and window state."""

    tree: Tree
    state: WindowState

    def node_tree(self) -> Tree | None:
        return self.tree

    def _wrap(self, tree: Tree) -> Surface:
        if tree.is_empty():
            return EmptySurface()
        return WindowSurface(tree, copy.copy(self.state))

    def filter_map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        return self._wrap(self.tree.filter_map_tabs(function))

    def map_tabs(self, function: Callable[[Any], Any]) -> Surface:
        return self._wrap(self.tree.map_tabs(function))

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        return self._wrap(self.tree.filter_tabs(predicate))

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> Surface:
        self.tree.retain_tabs(predicate)
        return EmptySurface() if self.tree.is_empty() else self