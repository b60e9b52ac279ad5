"""Frame-based sprite animation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass
class FrameData:
    """One frame: a region of a texture and how long it is shown."""

    id: int
    x: int
    y: int
    width: int
    height: int
    display_time_seconds: float


class FacingDirection(Enum):
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()


class Animation:
    """A looping sequence of frames facing a given direction."""

    def __init__(self, direction: FacingDirection) -> None:
        self._frames: list[FrameData] = []
        self._index = 0
        self._time = 0.0
        self._direction = direction

    @property
    def direction(self) -> FacingDirection:
        return self._direction

    @property
    def frames(self) -> tuple[FrameData, ...]:
        return tuple(self._frames)

    def add_frame(
        self,
        texture_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        frame_time: float,
    ) -> None:
        self._frames.append(FrameData(texture_id, x, y, width, height, frame_time))

    @property
    def current_frame(self) -> FrameData | None:
        """The frame currently shown, or None if there are no frames."""
        if not self._frames:
            return None
        return self._frames[self._index]

    def update_frame(self, delta_time: float) -> bool:
        """Advance time; return True if the animation moved to a new frame."""
        if not self._frames:
            return False
        self._time += delta_time
        if self._time >= self._frames[self._index].display_time_seconds:
            self._time = 0.0
            self._index = (self._index + 1) % len(self._frames)
            return True
        return False

    def reset(self) -> None:
        self._index = 0
        self._time = 0.0

    def set_direction(self, direction: FacingDirection) -> None:
        """Face a new direction, mirroring every frame horizontally if it changed."""
        if self._direction == direction:
            return
        self._direction = direction
        for frame in self._frames:
            frame.x += frame.width
            frame.width = -frame.width