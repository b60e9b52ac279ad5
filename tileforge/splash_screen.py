"""A cover image shown for a moment before switching to another scene."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from tileforge.debug import log_warning
from tileforge.geometry import Vector2
from tileforge.resources import ResourceAllocator, ResourceLoadError
from tileforge.scenes import Scene

if TYPE_CHECKING:
    from tileforge.scenes import SceneStateMachine
    from tileforge.working_directory import WorkingDirectory

COVER_FILE = "TanksCover.PNG"
COVER_SCALE = 0.5
SHOW_FOR_SECONDS = 1.0


class SplashScreen(Scene):
    """Shows the cover centred in the window, then switches scenes."""

    def __init__(
        self,
        working_dir: WorkingDirectory,
        state_machine: SceneStateMachine,
        window: Any,
        texture_allocator: ResourceAllocator[Any],
    ) -> None:
        self.working_dir = working_dir
        self.state_machine = state_machine
        self.window = window
        self.texture_allocator = texture_allocator
        self.switch_to_state = 0
        self.current_seconds = 0.0
        self.show_for_seconds = SHOW_FOR_SECONDS
        self.image: pygame.Surface | None = None
        self.position = Vector2()

    def on_create(self) -> None:
        try:
            texture_id = self.texture_allocator.add(self.working_dir.resolve(COVER_FILE))
        except ResourceLoadError as exc:
            log_warning(str(exc))
            return
        texture = self.texture_allocator.get(texture_id)
        if texture is None:
            return
        width, height = texture.get_size()
        scaled = (round(width * COVER_SCALE), round(height * COVER_SCALE))
        self.image = pygame.transform.scale(texture, scaled)
        centre = self.window.centre
        self.position = Vector2(
            centre.x - width * 0.5 * COVER_SCALE,
            centre.y - height * 0.5 * COVER_SCALE,
        )

    def on_destroy(self) -> None:
        """Drop the scaled cover image."""
        self.image = None

    def on_activate(self) -> None:
        super().on_activate()
        self.current_seconds = 0.0

    def set_switch_to_scene(self, scene_id: int) -> None:
        self.switch_to_state = scene_id

    def update(self, delta_time: float) -> None:
        self.current_seconds += delta_time
        if self.current_seconds >= self.show_for_seconds:
            self.state_machine.switch_to(self.switch_to_state)

    def draw(self, window: Any) -> None:
        if self.image is not None:
            window.draw(self.image, Vector2(self.position.x, self.position.y))