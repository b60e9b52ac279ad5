"""Component base class and the position transform component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tileforge.geometry import Vector2

if TYPE_CHECKING:
    from tileforge.game_object import GameObject


def _as_vector(x: float | Vector2, y: float | None) -> Vector2:
    if isinstance(x, Vector2):
        return Vector2(x.x, x.y)
    if y is None:
        raise TypeError("a y value is required unless a Vector2 is given")
    return Vector2(x, y)


class Component:
    """Behaviour attached to a game object; hooks do nothing by default."""

    def __init__(self, owner: GameObject) -> None:
        self.owner = owner

    def awake(self) -> None:
        """Called when the owner is created."""

    def start(self) -> None:
        """Called after every new object has been woken."""

    def update(self, delta_time: float) -> None:
        """Called once per frame."""

    def late_update(self, delta_time: float) -> None:
        """Called once per frame after every update."""


class Transform(Component):
    """Position of an object, and whether it is fixed in place."""

    def __init__(self, owner: GameObject, is_static: bool = False) -> None:
        super().__init__(owner)
        self.position = Vector2(0.0, 0.0)
        self.is_static = is_static

    def set_position(self, x: float | Vector2, y: float | None = None) -> None:
        self.position = _as_vector(x, y)

    def add_position(self, x: float | Vector2, y: float | None = None) -> None:
        self.position = self.position + _as_vector(x, y)

    def set_x(self, x: float) -> None:
        self.position.x = x

    def set_y(self, y: float) -> None:
        self.position.y = y

    def add_x(self, x: float) -> None:
        self.position.x += x

    def add_y(self, y: float) -> None:
        self.position.y += y