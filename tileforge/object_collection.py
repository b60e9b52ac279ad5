"""The set of live game objects in a scene."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tileforge.collision_system import CollisionSystem
from tileforge.debug import DebugOverlay
from tileforge.drawable_system import DrawableSystem
from tileforge.game_object import GameObject


class ObjectCollection:
    """Holds objects, brings new ones to life and drops removed ones."""

    def __init__(self) -> None:
        self.debug_overlay = DebugOverlay()
        self._objects: list[GameObject] = []
        self._new_objects: list[GameObject] = []
        self._drawables = DrawableSystem()
        self._collidables = CollisionSystem(self.debug_overlay)

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    def add(self, objects: GameObject | Iterable[GameObject]) -> None:
        """Queue one object or several; they join on the next process_new_objects."""
        if isinstance(objects, GameObject):
            self._new_objects.append(objects)
        else:
            self._new_objects.extend(objects)

    def update(self, delta_time: float) -> None:
        for obj in self._objects:
            obj.update(delta_time)
        self._collidables.update()

    def late_update(self, delta_time: float) -> None:
        for obj in self._objects:
            obj.late_update(delta_time)

    def draw(self, window: Any) -> None:
        self._drawables.draw(window)

    def process_new_objects(self) -> None:
        if not self._new_objects:
            return
        for obj in self._new_objects:
            obj.awake()
        for obj in self._new_objects:
            obj.start()
        self._objects.extend(self._new_objects)
        self._drawables.add(self._new_objects)
        self._collidables.add(self._new_objects)
        self._new_objects.clear()

    def process_removals(self) -> None:
        remaining = [obj for obj in self._objects if not obj.is_queued_for_removal()]
        if len(remaining) == len(self._objects):
            return
        self._objects = remaining
        self._drawables.process_removals()
        self._collidables.process_removals()