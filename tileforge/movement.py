"""Keyboard-driven movement component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tileforge.animation import FacingDirection
from tileforge.animator import AnimationState, Animator
from tileforge.components import Component
from tileforge.geometry import MOVE_SPEED

if TYPE_CHECKING:
    from tileforge.game_object import GameObject
    from tileforge.input import Input


class KeyboardMovement(Component):
    """Moves the owner with the Left/Right/Up/Down bindings and picks its animation."""

    def __init__(self, owner: GameObject, input_handler: Input) -> None:
        super().__init__(owner)
        self.input = input_handler
        self.move_speed: int = MOVE_SPEED
        self._animator: Animator | None = None

    def awake(self) -> None:
        self._animator = self.owner.get_component(Animator)

    def update(self, delta_time: float) -> None:
        x_move = 0
        if self.input.is_key_pressed("Left"):
            x_move = -self.move_speed
            self._face(FacingDirection.LEFT)
        elif self.input.is_key_pressed("Right"):
            x_move = self.move_speed
            self._face(FacingDirection.RIGHT)

        y_move = 0
        if self.input.is_key_pressed("Up"):
            y_move = -self.move_speed
        elif self.input.is_key_pressed("Down"):
            y_move = self.move_speed

        if self._animator is not None:
            moving = x_move != 0 or y_move != 0
            self._animator.set_animation_state(
                AnimationState.WALK if moving else AnimationState.IDLE
            )

        self.owner.transform.add_position(x_move * delta_time, y_move * delta_time)

    def _face(self, direction: FacingDirection) -> None:
        if self._animator is not None:
            self._animator.set_animation_direction(direction)