"""Collision components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from tileforge.components import Component
from tileforge.geometry import Rect, Vector2, intersection_rect

if TYPE_CHECKING:
    from tileforge.game_object import GameObject


class CollisionLayer(IntEnum):
    """Collision layers; each value is also the layer's bit position."""

    DEFAULT = 1
    PLAYER = 2
    TILE = 3


@dataclass
class Manifold:
    """Result of an intersection test."""

    colliding: bool = False
    other: Rect | None = None


class Collider(Component, ABC):
    """A component that can test for and resolve collisions."""

    def __init__(
        self, owner: GameObject, layer: CollisionLayer = CollisionLayer.DEFAULT
    ) -> None:
        super().__init__(owner)
        self.layer = layer

    @abstractmethod
    def intersects(self, other: Collider) -> Manifold:
        """Test this collider against another."""

    @abstractmethod
    def resolve_overlap(self, manifold: Manifold) -> None:
        """Move the owner out of the overlap described by the manifold."""


class BoxCollider(Collider):
    """An axis-aligned box centred on the owner's position plus an offset."""

    def __init__(
        self,
        owner: GameObject,
        aabb: Rect | None = None,
        layer: CollisionLayer = CollisionLayer.DEFAULT,
        offset: Vector2 | None = None,
    ) -> None:
        super().__init__(owner, layer)
        self._aabb = Rect() if aabb is None else Rect(aabb.left, aabb.top, aabb.width, aabb.height)
        self.offset = Vector2() if offset is None else Vector2(offset.x, offset.y)

    def set_collidable(self, rect: Rect) -> None:
        self._aabb = Rect(rect.left, rect.top, rect.width, rect.height)
        self._sync_position()

    @property
    def collidable(self) -> Rect:
        """The box, moved to follow the owner's current position."""
        self._sync_position()
        return self._aabb

    def intersects(self, other: Collider) -> Manifold:
        if not isinstance(other, BoxCollider):
            return Manifold()
        mine = self.collidable
        theirs = other.collidable
        if mine.intersects(theirs):
            return Manifold(colliding=True, other=theirs)
        return Manifold()

    def resolve_overlap(self, manifold: Manifold) -> None:
        transform = self.owner.transform
        if transform.is_static:
            return
        if manifold.other is None:
            raise ValueError("manifold has no rectangle to resolve against")

        mine = self.collidable
        theirs = manifold.other
        x_diff = mine.center.x - theirs.center.x
        y_diff = mine.center.y - theirs.center.y
        overlap = intersection_rect(mine, theirs)

        if abs(overlap.height) > abs(overlap.width):
            if x_diff > 0:
                resolve = theirs.right - mine.left
            else:
                resolve = -(mine.right - theirs.left)
            transform.add_position(resolve, 0)
        else:
            if y_diff > 0:
                resolve = theirs.bottom - mine.top
            else:
                resolve = -(mine.bottom - theirs.top)
            transform.add_position(0, resolve)

    def _sync_position(self) -> None:
        pos = self.owner.transform.position
        self._aabb.left = pos.x - self._aabb.width / 2 + self.offset.x
        self._aabb.top = pos.y - self._aabb.height / 2 + self.offset.y