"""Debug shapes drawn for one frame, and console logging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from tileforge.geometry import Rect, Vector2

Colour = tuple[int, int, int]

WHITE: Colour = (255, 255, 255)
RED: Colour = (255, 0, 0)

OUTLINE_THICKNESS = 3.0


class DebugSurface(Protocol):
    def draw_rect_outline(self, rect: Rect, colour: Colour, thickness: float) -> None: ...

    def draw_line(self, start: Vector2, end: Vector2, colour: Colour) -> None: ...


@dataclass(frozen=True)
class DebugRect:
    rect: Rect
    colour: Colour
    thickness: float = OUTLINE_THICKNESS


@dataclass(frozen=True)
class DebugLine:
    start: Vector2
    end: Vector2
    colour: Colour


class DebugOverlay:
    """Collects outlines and lines, draws them once, then forgets them."""

    def __init__(self) -> None:
        self._rects: list[DebugRect] = []
        self._lines: list[DebugLine] = []

    @property
    def pending_rects(self) -> tuple[DebugRect, ...]:
        return tuple(self._rects)

    @property
    def pending_lines(self) -> tuple[DebugLine, ...]:
        return tuple(self._lines)

    def draw(self, window: DebugSurface) -> None:
        for item in self._rects:
            window.draw_rect_outline(item.rect, item.colour, item.thickness)
        self._rects.clear()
        for line in self._lines:
            window.draw_line(line.start, line.end, line.colour)
        self._lines.clear()

    def draw_rect(self, rect: Rect, colour: Colour = WHITE) -> None:
        snapshot = Rect(rect.left, rect.top, rect.width, rect.height)
        self._rects.append(DebugRect(snapshot, colour))

    def draw_line(self, start: Vector2, end: Vector2, colour: Colour = WHITE) -> None:
        self._lines.append(
            DebugLine(Vector2(start.x, start.y), Vector2(end.x, end.y), colour)
        )


def log(message: str) -> None:
    print(message)


def log_warning(message: str) -> None:
    print(f"WARNING: {message}")


def log_error(message: str) -> None:
    print(f"ERROR: {message}")