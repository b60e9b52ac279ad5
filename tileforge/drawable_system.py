"""Keeps drawables grouped by layer and draws them in order."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter
from typing import Any

from tileforge.drawable import Drawable, DrawLayer
from tileforge.game_object import GameObject


class DrawableSystem:
    """Draws layers in ascending order, each sorted by sort order."""

    def __init__(self) -> None:
        self._layers: dict[DrawLayer, list[Drawable]] = {}

    def add(self, objects: Iterable[GameObject]) -> None:
        for obj in objects:
            drawable = obj.drawable
            if drawable is not None:
                self._layers.setdefault(drawable.draw_layer, []).append(drawable)

    def process_removals(self) -> None:
        for items in self._layers.values():
            items[:] = [d for d in items if not d.is_queued_for_removal()]

    def draw(self, window: Any) -> None:
        for layer in sorted(self._layers):
            items = self._layers[layer]
            items.sort(key=attrgetter("sort_order"))
            for drawable in items:
                drawable.draw(window)

    def drawables(self, layer: DrawLayer) -> tuple[Drawable, ...]:
        """The drawables held in one layer."""
        return tuple(self._layers.get(layer, ()))