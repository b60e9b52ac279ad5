"""Finds and resolves collisions between box colliders each frame."""

from __future__ import annotations

from collections.abc import Iterable

from tileforge.bitmask import Bitmask
from tileforge.colliders import BoxCollider, CollisionLayer
from tileforge.debug import RED, DebugOverlay
from tileforge.game_object import GameObject
from tileforge.quadtree import Quadtree


def _default_layer_masks() -> dict[CollisionLayer, Bitmask]:
    default = Bitmask()
    default.set_bit(CollisionLayer.DEFAULT)
    player = Bitmask()
    player.set_bit(CollisionLayer.DEFAULT)
    player.set_bit(CollisionLayer.TILE)
    return {
        CollisionLayer.DEFAULT: default,
        CollisionLayer.TILE: Bitmask(),
        CollisionLayer.PLAYER: player,
    }


class CollisionSystem:
    """Pushes moving colliders out of the colliders their layer collides with."""

    def __init__(self, overlay: DebugOverlay | None = None) -> None:
        self.overlay = overlay
        self.collision_layers = _default_layer_masks()
        self._collidables: dict[CollisionLayer, list[BoxCollider]] = {}
        self._tree = Quadtree()

    @property
    def tree(self) -> Quadtree:
        return self._tree

    def add(self, objects: Iterable[GameObject]) -> None:
        for obj in objects:
            collider = obj.get_component(BoxCollider)
            if collider is not None:
                self._collidables.setdefault(collider.layer, []).append(collider)

    def process_removals(self) -> None:
        for colliders in self._collidables.values():
            colliders[:] = [c for c in colliders if not c.owner.is_queued_for_removal()]

    def update(self) -> None:
        self._tree.clear()
        for layer in sorted(self._collidables):
            for collider in self._collidables[layer]:
                self._tree.insert(collider)
        self._resolve()

    def _mask(self, layer: CollisionLayer) -> Bitmask:
        return self.collision_layers.get(layer, Bitmask())

    def _resolve(self) -> None:
        for layer in sorted(self._collidables):
            if self._mask(layer).bits == 0:
                continue
            for collider in self._collidables[layer]:
                if collider.owner.transform.is_static:
                    continue
                for other in self._tree.search(collider.collidable):
                    if other.owner.instance_id == collider.owner.instance_id:
                        continue
                    if not self._mask(collider.layer).get_bit(other.layer):
                        continue
                    manifold = collider.intersects(other)
                    if not manifold.colliding:
                        continue
                    if self.overlay is not None:
                        self.overlay.draw_rect(other.collidable, RED)
                        self.overlay.draw_rect(collider.collidable, RED)
                    collider.resolve_overlap(manifold)