"""Binary tree of dock nodes stored as a flat heap.

The root lives at index 0; the left child of node ``n`` is at ``2n + 1``
and the right child at ``2n + 2``. For horizontal parents the left child
is the left node; for vertical parents the left child is the top node.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from dockable.indices import NodeIndex, TabIndex
from dockable.node import EmptyNode, LeafNode, Node, leaf, leaf_with
from dockable.split import Split
from dockable.window_state import Rect


class Tree:
    """Hierarchy of splits and tab-holding leaves on one surface."""

    def __init__(self, tabs: Iterable[Any] = ()) -> None:
        """Create a tree whose root leaf holds ``tabs``."""
        self._nodes: list[Node] = [leaf_with(tabs)]
        self._focused_node: NodeIndex | None = None
        self.collapsed: bool = False
        self.collapsed_leaf_count: int = 0

    @classmethod
    def empty(cls) -> Tree:
        """A tree with no nodes at all."""
        tree = cls()
        tree._nodes = []
        return tree

    @classmethod
    def _from_nodes(cls, nodes: list[Node], source: Tree) -> Tree:
        tree = cls()
        tree._nodes = nodes
        tree._focused_node = source._focused_node
        tree.collapsed = source.collapsed
        tree.collapsed_leaf_count = source.collapsed_leaf_count
        return tree

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self._nodes)}, focused={self._focused_node})"

    def __len__(self) -> int:
        """Number of nodes, empty ones included."""
        return len(self._nodes)

    def __getitem__(self, index: NodeIndex) -> Node:
        return self._nodes[index.value]

    def __setitem__(self, index: NodeIndex, node: Node) -> None:
        self._nodes[index.value] = node

    def __iter__(self) -> Iterator[Node]:
        """Iterate over all nodes, empty ones included."""
        return iter(self._nodes)

    def is_empty(self) -> bool:
        """Whether the tree has no nodes."""
        return not self._nodes

    def find_active(self) -> tuple[Rect, Any] | None:
        """Viewport and active tab of the first leaf that has one."""
        for node in self._nodes:
            if isinstance(node, LeafNode) and node.active.value < len(node.tabs):
                return node.viewport, node.tabs[node.active.value]
        return None

    def breadth_first_indices(self) -> Iterator[NodeIndex]:
        """Indices of all nodes in breadth-first order."""
        return (NodeIndex(i) for i in range(len(self._nodes)))

    def tabs(self) -> Iterator[Any]:
        """Iterate over every tab in node order."""
        for node in self._nodes:
            yield from node.iter_tabs()

    def num_tabs(self) -> int:
        """Total number of tabs in the tree."""
        return sum(node.tabs_count() for node in self._nodes)

    def root_node(self) -> Node | None:
        """The root node, or ``None`` if the tree is empty."""
        return self._nodes[0] if self._nodes else None

    def split_tabs(
        self, parent: NodeIndex, split: Split, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` putting a new leaf with ``tabs`` in direction ``split``."""
        return self.split(parent, split, fraction, leaf_with(tabs))

    def split_above(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` putting a new leaf with ``tabs`` above it."""
        return self.split(parent, Split.ABOVE, fraction, leaf_with(tabs))

    def split_below(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` putting a new leaf with ``tabs`` below it."""
        return self.split(parent, Split.BELOW, fraction, leaf_with(tabs))

    def split_left(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` putting a new leaf with ``tabs`` to its left."""
        return self.split(parent, Split.LEFT, fraction, leaf_with(tabs))

    def split_right(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Any]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` putting a new leaf with ``tabs`` to its right."""
        return self.split(parent, Split.RIGHT, fraction, leaf_with(tabs))

    def split(
        self, parent: NodeIndex, split: Split, fraction: float, new: Node
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` into the old content and ``new``.

        ``fraction`` (0..=1) is the share of the area kept by the old node.
        Returns the indices of the old node and the new node.
        """
        old = self[parent]
        replacement = old.split(split, fraction)
        if not (old.is_leaf() or old.is_parent()):
            raise ValueError("cannot split an empty node")
        if new.tabs_count() == 0:
            raise ValueError("the new node must be a leaf with at least one tab")
        self[parent] = replacement

        last = max(
            (i for i, node in enumerate(self._nodes) if not node.is_empty()), default=0
        )
        size = (1 << (NodeIndex(last).level() + 1)) - 1
        del self._nodes[size:]
        self._nodes.extend(EmptyNode() for _ in range(size - len(self._nodes)))

        if split in (Split.LEFT, Split.ABOVE):
            old_index, new_index = parent.right(), parent.left()
        else:
            old_index, new_index = parent.left(), parent.right()

        if old.is_parent():
            levels_to_move = NodeIndex(len(self._nodes)).level() - old_index.level()
            for level in reversed(range(1, levels_to_move)):
                old_start = parent.children_at(level).start
                new_start = old_index.children_at(level).start
                length = 1 << level
                moved = self._nodes[old_start : old_start + length]
                self._nodes[old_start : old_start + length] = self._nodes[
                    new_start : new_start + length
                ]
                self._nodes[new_start : new_start + length] = moved

        self[old_index] = old
        self[new_index] = new
        self._focused_node = new_index
        self.node_update_collapsed(new_index)
        return old_index, new_index

    def _node_or_none(self, index: NodeIndex) -> Node | None:
        return self._nodes[index.value] if index.value < len(self._nodes) else None

    def _first_leaf(self, top: NodeIndex) -> NodeIndex | None:
        left, right = top.left(), top.right()
        left_node, right_node = self._node_or_none(left), self._node_or_none(right)
        if left_node is not None and left_node.is_leaf():
            return left
        if right_node is not None and right_node.is_leaf():
            return right
        left_parent = left_node is not None and left_node.is_parent()
        right_parent = right_node is not None and right_node.is_parent()
        if left_parent and right_parent:
            found = self._first_leaf(left)
            return found if found is not None else self._first_leaf(right)
        if left_parent:
            return self._first_leaf(left)
        if right_parent:
            return self._first_leaf(right)
        return None

    def find_active_focused(self) -> tuple[Rect, Any] | None:
        """Viewport and active tab of the focused leaf, if any."""
        if self._focused_node is None:
            return None
        node = self._node_or_none(self._focused_node)
        if isinstance(node, LeafNode) and node.active.value < len(node.tabs):
            return node.viewport, node.tabs[node.active.value]
        return None

    def focused_leaf(self) -> NodeIndex | None:
        """Index of the focused leaf, or ``None``."""
        return self._focused_node

    def set_focused_node(self, node_index: NodeIndex) -> None:
        """Focus ``node_index`` if it is a leaf, otherwise clear the focus."""
        node = self._node_or_none(node_index)
        self._focused_node = node_index if node is not None and node.is_leaf() else None

    def remove_leaf(self, node: NodeIndex) -> None:
        """Remove the leaf at ``node``, promoting its sibling into the parent's place."""
        if self.is_empty():
            raise ValueError("cannot remove a leaf from an empty tree")
        if not self[node].is_leaf():
            raise ValueError(f"node {node.value} is not a leaf")

        parent = node.parent()
        if parent is None:
            self._nodes.clear()
            return

        if node == self._focused_node:
            self._focused_node = None
            current = node
            while (ancestor := current.parent()) is not None:
                sibling = ancestor.right() if current.is_left() else ancestor.left()
                sibling_node = self._node_or_none(sibling)
                if sibling_node is not None and sibling_node.is_leaf():
                    self._focused_node = sibling
                    break
                found = self._first_leaf(sibling)
                if found is not None:
                    self._focused_node = found
                    break
                current = ancestor

        self[parent] = EmptyNode()
        self[node] = EmptyNode()

        source_half = (
            NodeIndex.children_right if node.is_left() else NodeIndex.children_left
        )
        level = 0
        while True:
            for dst, src in zip(
                parent.children_at(level), source_half(parent, level + 1)
            ):
                if src >= len(self._nodes):
                    return
                if self._focused_node == NodeIndex(src):
                    self._focused_node = NodeIndex(dst)
                self._nodes[dst] = self._nodes[src]
                self._nodes[src] = EmptyNode()
            level += 1

    def push_to_first_leaf(self, tab: Any) -> None:
        """Add ``tab`` to the first leaf, or fill the first empty slot with it."""
        for index, node in enumerate(self._nodes):
            if node.is_leaf():
                node.append_tab(tab)
                self._focused_node = NodeIndex(index)
                return
            if node.is_empty():
                self._nodes[index] = leaf(tab)
                self._focused_node = NodeIndex(index)
                return
        if self._nodes:
            raise ValueError("tree has neither a leaf nor an empty slot")
        self._nodes.append(leaf(tab))
        self._focused_node = NodeIndex(0)

    def set_active_tab(self, node_index: NodeIndex, tab_index: TabIndex) -> None:
        """Make ``tab_index`` active in the leaf at ``node_index``, if it is one."""
        node = self._node_or_none(node_index)
        if isinstance(node, LeafNode):
            node.active = tab_index

    def push_to_focused_leaf(self, tab: Any) -> None:
        """Add ``tab`` to the focused leaf, else the first leaf, else a new one."""
        if not self._nodes:
            self._nodes.append(leaf(tab))
            self._focused_node = NodeIndex.root()
            return
        focused = self._focused_node
        if focused is None:
            self.push_to_first_leaf(tab)
            return
        node = self[focused]
        if node.is_empty():
            self[focused] = leaf(tab)
        elif node.is_leaf():
            node.append_tab(tab)
        else:
            self.push_to_first_leaf(tab)

    def remove_tab(self, location: tuple[NodeIndex, TabIndex]) -> Any:
        """Remove and return the tab at ``(node, tab)``; drop the leaf if emptied."""
        node_index, tab_index = location
        node = self[node_index]
        tab = node.remove_tab(tab_index)
        if node.tabs_count() == 0:
            self.remove_leaf(node_index)
        return tab

    def _rebuilt(self, transform: Callable[[Node], Node]) -> Tree:
        emptied: set[NodeIndex] = set()
        nodes: list[Node] = []
        for index, node in enumerate(self._nodes):
            result = transform(node)
            if result.is_empty() and not node.is_empty():
                emptied.add(NodeIndex(index))
            nodes.append(result)
        tree = Tree._from_nodes(nodes, self)
        tree._balance(emptied)
        return tree

    def filter_map_tabs(self, function: Callable[[Any], Any]) -> Tree:
        """New tree with tabs mapped by ``function``; ``None`` results are dropped."""
        return self._rebuilt(lambda node: node.filter_map_tabs(function))

    def map_tabs(self, function: Callable[[Any], Any]) -> Tree:
        """New tree with every tab mapped by ``function``."""
        return self._rebuilt(lambda node: node.map_tabs(function))

    def filter_tabs(self, predicate: Callable[[Any], bool]) -> Tree:
        """New tree keeping only tabs that satisfy ``predicate``."""
        return self._rebuilt(lambda node: node.filter_tabs(predicate))

    def retain_tabs(self, predicate: Callable[[Any], bool]) -> None:
        """Drop, in place, every tab failing ``predicate`` and rebalance."""
        emptied: set[NodeIndex] = set()
        for index, node in enumerate(self._nodes):
            result = node.retain_tabs(predicate)
            self._nodes[index] = result
            if result.is_empty():
                emptied.add(NodeIndex(index))
        self._balance(emptied)

    def _balance(self, emptied_nodes: set[NodeIndex]) -> None:
        while emptied_nodes:
            emptied_parents: set[NodeIndex] = set()
            parents = (index.parent() for index in sorted(emptied_nodes, key=lambda i: i.value))
            for parent in parents:
                if parent is None:
                    continue
                left, right = parent.left(), parent.right()
                if self[left].is_empty() and self[right].is_empty():
                    self[parent] = EmptyNode()
                    emptied_parents.add(parent)
                elif self[left].is_empty():
                    self[parent], self[right] = self[right], self[parent]
                    self[right] = EmptyNode()
                elif self[right].is_empty():
                    self[parent], self[left] = self[left], self[parent]
                    self[left] = EmptyNode()
            emptied_nodes = emptied_parents

    def _refresh_counts(self, parent: NodeIndex) -> None:
        left_count = self[parent.left()].collapsed_leaf_count()
        right_count = self[parent.right()].collapsed_leaf_count()
        if self[parent].is_horizontal():
            self[parent].set_collapsed_leaf_count(max(left_count, right_count))
        else:
            self[parent].set_collapsed_leaf_count(left_count + right_count)

    def node_update_collapsed(self, node_index: NodeIndex) -> None:
        """Propagate the collapsed state of ``node_index`` up to the root."""
        if not self[node_index].is_collapsed():
            parent = node_index.parent()
            while parent is not None:
                self[parent].set_collapsed(False)
                self._refresh_counts(parent)
                parent = parent.parent()
            self.collapsed = False
            self.collapsed_leaf_count = self[NodeIndex.root()].collapsed_leaf_count()
            return

        parent = node_index.parent()
        while parent is not None:
            self._refresh_counts(parent)
            if self[parent.left()].is_collapsed() and self[parent.right()].is_collapsed():
                self[parent].set_collapsed(True)
            parent = parent.parent()
        root = self.root_node()
        if root is not None and root.is_collapsed():
            self.collapsed = True
            self.collapsed_leaf_count = root.collapsed_leaf_count()

    def find_tab(self, needle_tab: Any) -> tuple[NodeIndex, TabIndex] | None:
        """Location of the first tab equal to ``needle_tab``, or ``None``."""
        for node_index, node in enumerate(self._nodes):
            for tab_index, tab in enumerate(node.iter_tabs()):
                if tab == needle_tab:
                    return NodeIndex(node_index), TabIndex(tab_index)
        return None