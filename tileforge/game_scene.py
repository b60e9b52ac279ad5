"""The playable scene: a tile map and a player-controlled viking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tileforge.animation import Animation, FacingDirection
from tileforge.animator import AnimationState, Animator
from tileforge.colliders import BoxCollider, CollisionLayer
from tileforge.debug import log_warning
from tileforge.drawable import DrawLayer
from tileforge.game_object import GameObject
from tileforge.geometry import Rect, Vector2
from tileforge.movement import KeyboardMovement
from tileforge.object_collection import ObjectCollection
from tileforge.resources import ResourceAllocator, ResourceLoadError
from tileforge.scenes import Scene
from tileforge.sprite import Sprite
from tileforge.tilemap import TileMapParser

if TYPE_CHECKING:
    from tileforge.input import Input
    from tileforge.working_directory import WorkingDirectory

PLAYER_SHEET = "viking_sheet.png"
MAP_FILE = "Test Map 1 - Copy.tmx"
MAP_OFFSET = Vector2(0, 400)
PLAYER_START = Vector2(50, 650)

FRAME_WIDTH = 165
FRAME_HEIGHT = 145
IDLE_FRAME_SECONDS = 0.2
WALK_FRAME_SECONDS = 0.15
IDLE_FRAMES = ((600, 0), (800, 0), (0, 145), (200, 145))
WALK_FRAMES = ((600, 290), (800, 290), (0, 435), (200, 435), (400, 435))


def _animation(texture_id: int, origins: tuple[tuple[int, int], ...], seconds: float) -> Animation:
    animation = Animation(FacingDirection.RIGHT)
    for x, y in origins:
        animation.add_frame(texture_id, x, y, FRAME_WIDTH, FRAME_HEIGHT, seconds)
    return animation


class GameScene(Scene):
    """Loads the level and the player, then runs the object collection."""

    def __init__(
        self,
        working_dir: WorkingDirectory,
        input_handler: Input,
        texture_allocator: ResourceAllocator[Any],
    ) -> None:
        self.working_dir = working_dir
        self.input = input_handler
        self.texture_allocator = texture_allocator
        self.objects = ObjectCollection()
        self.map_parser = TileMapParser(texture_allocator)
        self.player: GameObject | None = None

    def _load_texture(self, name: str) -> int:
        try:
            return self.texture_allocator.add(self.working_dir.resolve(name))
        except ResourceLoadError as exc:
            log_warning(str(exc))
            return -1

    def on_create(self) -> None:
        player = GameObject()

        sprite = player.add_component(Sprite, self.texture_allocator)
        sprite.draw_layer = DrawLayer.ENTITIES

        player.add_component(KeyboardMovement, self.input)
        animator = player.add_component(Animator)

        texture_id = self._load_texture(PLAYER_SHEET)
        animator.add_animation(
            AnimationState.WALK, _animation(texture_id, WALK_FRAMES, WALK_FRAME_SECONDS)
        )
        animator.add_animation(
            AnimationState.IDLE, _animation(texture_id, IDLE_FRAMES, IDLE_FRAME_SECONDS)
        )

        level_tiles = self.map_parser.parse(self.working_dir.resolve(MAP_FILE), MAP_OFFSET)

        player.add_component(
            BoxCollider,
            Rect(0, 0, FRAME_WIDTH // 2, FRAME_HEIGHT / 1.5),
            CollisionLayer.PLAYER,
        )
        player.transform.set_position(PLAYER_START)

        self.objects.add(level_tiles)
        self.objects.add(player)
        self.player = player

    def on_destroy(self) -> None:
        """Nothing to release."""

    def update(self, delta_time: float) -> None:
        self.objects.process_removals()
        self.objects.process_new_objects()
        self.objects.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        self.objects.late_update(delta_time)

    def draw(self, window: Any) -> None:
        self.objects.draw(window)
        self.objects.debug_overlay.draw(window)