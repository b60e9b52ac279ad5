"""Plain 2D geometry types and engine-wide constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

MOVE_SPEED = 200

QUADTREE_MAX_LEVELS = 5
QUADTREE_MAX_OBJECTS = 5

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080


@dataclass
class Vector2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.left + self.width * 0.5, self.top + self.height * 0.5)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap with a non-empty area.

        Negative widths and heights are allowed; touching edges do not count.
        """
        inter_left = max(min(self.left, self.right), min(other.left, other.right))
        inter_right = min(max(self.left, self.right), max(other.left, other.right))
        inter_top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        inter_bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        return inter_left < inter_right and inter_top < inter_bottom


def intersection_rect(first: Rect, second: Rect) -> Rect:
    """Return the rectangle spanned by the two middle edges on each axis."""
    xs = sorted((first.left, first.right, second.left, second.right))
    ys = sorted((first.top, first.bottom, second.top, second.bottom))
    return Rect(xs[1], ys[1], xs[2] - xs[1], ys[2] - ys[1])