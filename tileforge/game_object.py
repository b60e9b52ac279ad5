"""Game objects: containers of components."""

from __future__ import annotations

import itertools
from typing import Any, TypeVar

from tileforge.components import Component, Transform
from tileforge.drawable import Drawable

C = TypeVar("C", bound=Component)


class GameObject:
    """An entity made of components, always holding a Transform."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self._queued_for_removal = False
        self._components: list[Component] = []
        self.drawable: Drawable | None = None
        self.instance_id: int = next(GameObject._ids)
        self.transform: Transform = self.add_component(Transform)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def awake(self) -> None:
        """Wake components; use to make sure required components are present."""
        for component in reversed(self._components):
            component.awake()

    def start(self) -> None:
        """Start components; called after awake, use to initialise state."""
        for component in reversed(self._components):
            component.start()

    def update(self, delta_time: float) -> None:
        for component in reversed(self._components):
            component.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        for component in reversed(self._components):
            component.late_update(delta_time)

    def draw(self, window: Any) -> None:
        if self.drawable is None:
            raise RuntimeError("object has no drawable component")
        self.drawable.draw(window)

    def queue_for_removal(self) -> None:
        self._queued_for_removal = True

    def is_queued_for_removal(self) -> bool:
        return self._queued_for_removal

    def add_component(self, component_type: type[C], *args: Any) -> C:
        """Add a component of the type, or return the one already present."""
        existing = self.get_component(component_type)
        if existing is not None:
            return existing
        component = component_type(self, *args)
        self._components.append(component)
        if isinstance(component, Drawable):
            self.drawable = component
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first component that is an instance of the type."""
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None