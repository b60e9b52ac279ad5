"""Quadtree spatial index for box colliders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tileforge.debug import RED
from tileforge.geometry import (
    QUADTREE_MAX_LEVELS,
    QUADTREE_MAX_OBJECTS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Rect,
)

if TYPE_CHECKING:
    from tileforge.colliders import BoxCollider
    from tileforge.debug import DebugOverlay

THIS_TREE = -1
CHILD_NE = 0
CHILD_NW = 1
CHILD_SW = 2
CHILD_SE = 3


class Quadtree:
    """Splits its area into four once it holds more than max_objects colliders."""

    def __init__(
        self,
        max_objects: int = QUADTREE_MAX_OBJECTS,
        max_levels: int = QUADTREE_MAX_LEVELS,
        level: int = 0,
        bounds: Rect | None = None,
        parent: Quadtree | None = None,
    ) -> None:
        self.max_objects = max_objects
        self.max_levels = max_levels
        self.level = level
        self._bounds = (
            Rect(0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT) if bounds is None else bounds
        )
        self.parent = parent
        self._children: tuple[Quadtree, ...] = ()
        self.objects: list[BoxCollider] = []

    @property
    def bounds(self) -> Rect:
        return self._bounds

    @property
    def children(self) -> tuple[Quadtree, ...]:
        return self._children

    def insert(self, collider: BoxCollider) -> None:
        if self._children:
            index = self._child_index(collider.collidable)
            if index != THIS_TREE:
                self._children[index].insert(collider)
                return

        self.objects.append(collider)

        if (
            len(self.objects) > self.max_objects
            and self.level < self.max_levels
            and not self._children
        ):
            self._split()
            kept: list[BoxCollider] = []
            for obj in self.objects:
                index = self._child_index(obj.collidable)
                if index == THIS_TREE:
                    kept.append(obj)
                else:
                    self._children[index].insert(obj)
            self.objects = kept

    def remove(self, collider: BoxCollider) -> None:
        index = self._child_index(collider.collidable)
        if index != THIS_TREE and self._children:
            self._children[index].remove(collider)
            return
        target = collider.owner.instance_id
        for position, obj in enumerate(self.objects):
            if obj.owner.instance_id == target:
                del self.objects[position]
                return

    def clear(self) -> None:
        self.objects.clear()
        for child in self._children:
            child.clear()
        self._children = ()

    def search(self, area: Rect) -> list[BoxCollider]:
        """Return every stored collider whose box overlaps the area."""
        candidates: list[BoxCollider] = []
        self._search_in_area(area, candidates)
        return [c for c in candidates if area.intersects(c.collidable)]

    def contains_none(self) -> bool:
        return any(child.contains_none() for child in self._children) or any(
            obj is None for obj in self.objects
        )

    def draw_debug(self, overlay: DebugOverlay) -> None:
        for child in self._children:
            child.draw_debug(overlay)
        overlay.draw_rect(self._bounds, RED)

    def _search_in_area(self, area: Rect, found: list[BoxCollider]) -> None:
        found.extend(self.objects)
        if not self._children:
            return
        index = self._child_index(area)
        if index == THIS_TREE:
            for child in self._children:
                if child.bounds.intersects(area):
                    child._search_in_area(area, found)
        else:
            self._children[index]._search_in_area(area, found)

    def _child_index(self, rect: Rect) -> int:
        vertical = self._bounds.left + self._bounds.width * 0.5
        horizontal = self._bounds.top + self._bounds.height * 0.5

        north = rect.top < horizontal and rect.top + rect.height < horizontal
        south = rect.top > horizontal and rect.top + rect.height > horizontal
        west = rect.left < vertical and rect.left + rect.width < vertical
        east = rect.left > vertical and rect.left + rect.width > vertical

        if east:
            if north:
                return CHILD_NE
            if south:
                return CHILD_SE
        elif west:
            if north:
                return CHILD_NW
            if south:
                return CHILD_SW
        return THIS_TREE

    def _split(self) -> None:
        b = self._bounds
        w = b.width / 2
        h = b.height / 2
        level = self.level + 1
        regions = {
            CHILD_NE: Rect(b.left + w, b.top, w, h),
            CHILD_NW: Rect(b.left, b.top, w, h),
            CHILD_SW: Rect(b.left, b.top + h, w, h),
            CHILD_SE: Rect(b.left + w, b.top + h, w, h),
        }
        self._children = tuple(
            Quadtree(self.max_objects, self.max_levels, level, regions[i], self)
            for i in sorted(regions)
        )