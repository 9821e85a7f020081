"""Index types for surfaces, nodes and tabs in a dock layout."""

from __future__ import annotations

from dataclasses import dataclass


def _check_non_negative(value: int) -> None:
    if value < 0:
        raise ValueError(f"index must be non-negative, got {value}")


@dataclass(frozen=True)
class SurfaceIndex:
    """Position of a surface inside a dock state."""

    value: int

    def __post_init__(self) -> None:
        _check_non_negative(self.value)

    @classmethod
    def main(cls) -> SurfaceIndex:
        """Index of the main surface."""
        return cls(0)

    def is_main(self) -> bool:
        """Whether this index refers to the main surface."""
        return self.value == 0


@dataclass(frozen=True)
class NodeIndex:
    """Position of a node inside a tree stored as a flat binary heap.

    The root is at 0; the left child of ``n`` is at ``2n + 1`` and the
    right child at ``2n + 2``.
    """

    value: int

    def __post_init__(self) -> None:
        _check_non_negative(self.value)

    @classmethod
    def root(cls) -> NodeIndex:
        """Index of the root node."""
        return cls(0)

    def left(self) -> NodeIndex:
        """Index of the left child."""
        return NodeIndex(self.value * 2 + 1)

    def right(self) -> NodeIndex:
        """Index of the right child."""
        return NodeIndex(self.value * 2 + 2)

    def parent(self) -> NodeIndex | None:
        """Index of the parent, or ``None`` for the root."""
        if self.value == 0:
            return None
        return NodeIndex((self.value - 1) // 2)

    def level(self) -> int:
        """Number of nodes from the root down to this one, inclusive."""
        return (self.value + 1).bit_length()

    def is_left(self) -> bool:
        """Whether this node is the left child of its parent."""
        return self.value % 2 != 0

    def is_right(self) -> bool:
        """Whether this node is the right child of its parent (true for the root)."""
        return self.value % 2 == 0

    def children_at(self, level: int) -> range:
        """Indices of all descendants ``level`` levels below this node."""
        base = 1 << level
        return range((self.value + 1) * base - 1, (self.value + 2) * base - 1)

    def children_left(self, level: int) -> range:
        """Left half of :meth:`children_at` for ``level``."""
        base = 1 << level
        start = (self.value + 1) * base - 1
        return range(start, (self.value + 1) * base + base // 2 - 1)

    def children_right(self, level: int) -> range:
        """Right half of :meth:`children_at` for ``level``."""
        base = 1 << level
        start = (self.value + 1) * base + base // 2 - 1
        return range(start, (self.value + 2) * base - 1)


@dataclass(frozen=True, order=True)
class TabIndex:
    """Position of a tab inside a leaf node."""

    value: int

    def __post_init__(self) -> None:
        _check_non_negative(self.value)