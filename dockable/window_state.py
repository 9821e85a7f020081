"""Geometry primitives and the state of a floating window surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Pos2:
    """A point in screen coordinates."""

    x: float
    y: float

    def __add__(self, offset: Vec2) -> Pos2:
        if not isinstance(offset, Vec2):
            return NotImplemented
        return Pos2(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: Pos2) -> Vec2:
        if not isinstance(other, Pos2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Pos2
    max: Pos2

    @classmethod
    def from_min_size(cls, min: Pos2, size: Vec2) -> Rect:  # noqa: A002
        """Build a rectangle from its top-left corner and size."""
        return cls(min, min + size)

    def size(self) -> Vec2:
        """Width and height of the rectangle."""
        return self.max - self.min


Rect.NOTHING = Rect(Pos2(math.inf, math.inf), Pos2(-math.inf, -math.inf))


@dataclass
class WindowState:
    """State of a window surface; also the handle used to move and resize it."""

    _screen_rect: Rect | None = field(default=None, init=False)
    _dragged: bool = field(default=False, init=False)
    _next_position: Pos2 | None = field(default=None, init=False)
    _next_size: Vec2 | None = field(default=None, init=False)
    _expanded_height: float | None = field(default=None, init=False)
    _new: bool = field(default=True, init=False)
    _minimized: bool = field(default=False, init=False)

    def set_position(self, position: Pos2) -> WindowState:
        """Request the window be placed at ``position`` on the next frame."""
        self._next_position = position
        return self

    def set_size(self, size: Vec2) -> WindowState:
        """Request the window take ``size`` on the next frame."""
        self._next_size = size
        return self

    def rect(self) -> Rect:
        """The area the window last occupied, or ``Rect.NOTHING`` if never shown."""
        return self._screen_rect if self._screen_rect is not None else Rect.NOTHING

    def dragged(self) -> bool:
        """Whether the window was being dragged in the last frame."""
        return self._dragged

    def set_expanded_height(self, height: float) -> WindowState:
        """Remember the height the window had before it was collapsed."""
        self._expanded_height = height
        return self

    def set_new(self, new: bool) -> WindowState:
        """Mark whether the window is being drawn for the first time."""
        self._new = new
        return self

    @property
    def is_new(self) -> bool:
        """Whether the window has not been drawn yet."""
        return self._new

    def take_next_position(self) -> Pos2 | None:
        """Return and clear the pending position."""
        position, self._next_position = self._next_position, None
        return position

    def take_next_size(self) -> Vec2 | None:
        """Return and clear the pending size."""
        size, self._next_size = self._next_size, None
        return size

    def take_expanded_height(self) -> float | None:
        """Return and clear the remembered expanded height."""
        height, self._expanded_height = self._expanded_height, None
        return height

    def toggle_minimized(self) -> None:
        """Flip the minimized state."""
        self._minimized = not self._minimized

    def is_minimized(self) -> bool:
        """Whether the window is minimized."""
        return self._minimized