"""Component that plays animations on the owner's sprite."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from tileforge.animation import Animation, FacingDirection
from tileforge.components import Component
from tileforge.sprite import Sprite

if TYPE_CHECKING:
    from tileforge.game_object import GameObject


class AnimationState(Enum):
    NONE = auto()
    IDLE = auto()
    WALK = auto()


class Animator(Component):
    """Holds one animation per state and feeds the current frame to the sprite."""

    def __init__(self, owner: GameObject) -> None:
        super().__init__(owner)
        self._sprite: Sprite | None = None
        self._animations: dict[AnimationState, Animation] = {}
        self._state = AnimationState.NONE
        self._current: Animation | None = None

    @property
    def animation_state(self) -> AnimationState:
        return self._state

    @property
    def animation(self) -> Animation | None:
        """The animation currently playing."""
        return self._current

    def awake(self) -> None:
        self._sprite = self.owner.get_component(Sprite)

    def update(self, delta_time: float) -> None:
        if self._state is AnimationState.NONE or self._current is None:
            return
        if not self._current.update_frame(delta_time):
            return
        frame = self._current.current_frame
        if frame is not None and self._sprite is not None:
            self._sprite.load(frame.id)
            self._sprite.set_texture_rect(frame.x, frame.y, frame.width, frame.height)

    def add_animation(self, state: AnimationState, animation: Animation) -> None:
        """Register an animation; a state already registered keeps its first one."""
        self._animations.setdefault(state, animation)
        if self._state is AnimationState.NONE:
            self.set_animation_state(state)

    def set_animation_state(self, state: AnimationState) -> None:
        if self._state is state:
            return
        animation = self._animations.get(state)
        if animation is None:
            return
        self._state = state
        self._current = animation
        animation.reset()

    def set_animation_direction(self, direction: FacingDirection) -> None:
        if self._state is not AnimationState.NONE and self._current is not None:
            self._current.set_direction(direction)