"""Textured sprite component."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from tileforge.components import Component
from tileforge.drawable import Drawable
from tileforge.geometry import Rect, Vector2

if TYPE_CHECKING:
    from tileforge.game_object import GameObject
    from tileforge.resources import ResourceAllocator


class Sprite(Component, Drawable):
    """Draws a region of a texture centred on the owner's position."""

    def __init__(
        self,
        owner: GameObject,
        allocator: ResourceAllocator[Any],
        file_path: str | None = None,
    ) -> None:
        super().__init__(owner)
        self.allocator = allocator
        self.texture: Any = None
        self.texture_id = -1
        self.texture_rect = Rect()
        self.scale = Vector2(1.0, 1.0)
        self.position = Vector2()
        if file_path is not None:
            self.load(file_path)

    def load(self, source: str | int) -> None:
        """Use the texture at a file path or with an allocator id."""
        resource_id = self.allocator.add(source) if isinstance(source, str) else source
        if resource_id < 0 or resource_id == self.texture_id:
            return
        texture = self.allocator.get(resource_id)
        if texture is None:
            raise KeyError(f"no texture with id {resource_id}")
        if self.texture is None and self.texture_rect == Rect():
            width, height = texture.get_size()
            self.texture_rect = Rect(0, 0, width, height)
        self.texture = texture
        self.texture_id = resource_id

    def set_texture_rect(
        self,
        x: int | Rect,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if isinstance(x, Rect):
            self.texture_rect = Rect(x.left, x.top, x.width, x.height)
            return
        if y is None or width is None or height is None:
            raise TypeError("x, y, width and height are all required")
        self.texture_rect = Rect(x, y, width, height)

    def set_scale(self, x: float, y: float) -> None:
        self.scale = Vector2(x, y)

    def late_update(self, delta_time: float) -> None:
        pos = self.owner.transform.position
        rect = self.texture_rect
        self.position = Vector2(
            pos.x - abs(rect.width) * 0.5 * self.scale.x,
            pos.y - abs(rect.height) * 0.5 * self.scale.y,
        )

    def frame_image(self) -> pygame.Surface | None:
        """The texture region, mirrored and scaled as it will be drawn."""
        if self.texture is None:
            return None
        rect = self.texture_rect
        region = pygame.Rect(
            int(min(rect.left, rect.right)),
            int(min(rect.top, rect.bottom)),
            int(abs(rect.width)),
            int(abs(rect.height)),
        ).clip(self.texture.get_rect())
        if region.width == 0 or region.height == 0:
            return None
        image = self.texture.subsurface(region)
        flip_x = (rect.width < 0) != (self.scale.x < 0)
        flip_y = (rect.height < 0) != (self.scale.y < 0)
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        size = (
            round(region.width * abs(self.scale.x)),
            round(region.height * abs(self.scale.y)),
        )
        if size != region.size:
            image = pygame.transform.scale(image, size)
        return image

    def draw(self, window: Any) -> None:
        image = self.frame_image()
        if image is None:
            return
        window.draw(image, Vector2(self.position.x, self.position.y))

    def is_queued_for_removal(self) -> bool:
        return self.owner.is_queued_for_removal()