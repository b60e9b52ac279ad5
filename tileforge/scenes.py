"""Scenes and the state machine that switches between them."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any


class Scene(ABC):
    """One screen of the game. Only creation and destruction must be provided."""

    is_active: bool = False
    frames_completed: int = 0

    @abstractmethod
    def on_create(self) -> None:
        """Called once when the scene is added to a state machine."""

    @abstractmethod
    def on_destroy(self) -> None:
        """Called once when the scene is removed from a state machine."""

    def on_activate(self) -> None:
        """Called whenever the scene becomes the current one."""
        self.is_active = True

    def on_deactivate(self) -> None:
        """Called whenever another scene replaces this one."""
        self.is_active = False

    def update(self, delta_time: float) -> None:
        """Called once per frame while current."""

    def late_update(self, delta_time: float) -> None:
        """Called once per frame after update while current; counts frames."""
        self.frames_completed += 1

    def draw(self, window: Any) -> None:
        """Draw the scene onto the window."""


class SceneStateMachine:
    """Holds scenes by id and forwards the frame loop to the current one."""

    def __init__(self) -> None:
        self._scenes: dict[int, Scene] = {}
        self._current: Scene | None = None
        self._ids = itertools.count()

    @property
    def current(self) -> Scene | None:
        """The scene receiving updates, or None."""
        return self._current

    def __contains__(self, scene_id: object) -> bool:
        return scene_id in self._scenes

    def __len__(self) -> int:
        return len(self._scenes)

    def add(self, scene: Scene) -> int:
        """Store the scene, create it and return its id."""
        scene_id = next(self._ids)
        self._scenes[scene_id] = scene
        scene.on_create()
        return scene_id

    def switch_to(self, scene_id: int) -> None:
        """Make the scene with this id current; unknown ids are ignored."""
        scene = self._scenes.get(scene_id)
        if scene is None:
            return
        if self._current is not None:
            self._current.on_deactivate()
        self._current = scene
        scene.on_activate()

    def remove(self, scene_id: int) -> None:
        """Destroy and forget the scene with this id, if any."""
        scene = self._scenes.pop(scene_id, None)
        if scene is None:
            return
        if self._current is scene:
            self._current = None
        scene.on_destroy()

    def update(self, delta_time: float) -> None:
        if self._current is not None:
            self._current.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        if self._current is not None:
            self._current.late_update(delta_time)

    def draw(self, window: Any) -> None:
        if self._current is not None:
            self._current.draw(window)