import pygame
import pytest

from tileforge.animator import AnimationState, Animator
from tileforge.colliders import BoxCollider, CollisionLayer
from tileforge.drawable import DrawLayer
from tileforge.game_scene import MAP_FILE, PLAYER_SHEET, GameScene
from tileforge.input import Input
from tileforge.resources import ResourceAllocator
from tileforge.sprite import Sprite
from tileforge.working_directory import WorkingDirectory

MAP = """<?xml version="1.0" encoding="UTF-8"?>
<map width="4" height="2" tilewidth="16" tileheight="16">
 <tileset firstgid="1" tilewidth="16" tileheight="16" tilecount="4" columns="2">
  <image source="tiles.png" width="32" height="32"/>
 </tileset>
 <layer name="Ground" width="4" height="2">
  <data encoding="csv">
1,2,0,0,
0,0,3,4
</data>
 </layer>
 <layer name="Collisions" width="4" height="2" visible="0">
  <data encoding="csv">
0,0,0,0,
0,0,0,1
</data>
 </layer>
</map>
"""

RIGHT_KEY = 2


class FakeWindow:
    def __init__(self):
        self.images = []
        self.outlines = []
        self.lines = []

    def draw(self, image, position):
        self.images.append((image, position))

    def draw_rect_outline(self, rect, colour, thickness):
        self.outlines.append(rect)

    def draw_line(self, start, end, colour):
        self.lines.append((start, end))


@pytest.fixture
def loaded_paths():
    return []


@pytest.fixture
def held():
    return set()


@pytest.fixture
def input_handler(held):
    handler = Input(key_state=lambda code: code in held)
    handler.add_mapping("Right", RIGHT_KEY)
    return handler


@pytest.fixture
def scene(tmp_path, loaded_paths, input_handler):
    (tmp_path / MAP_FILE).write_text(MAP)

    def loader(path):
        loaded_paths.append(path)
        return pygame.Surface((1000, 600))

    game_scene = GameScene(
        WorkingDirectory(tmp_path), input_handler, ResourceAllocator(loader)
    )
    game_scene.on_create()
    return game_scene


def test_player_sheet_loaded_from_working_directory(tmp_path, scene, loaded_paths):
    assert loaded_paths[0] == WorkingDirectory(tmp_path).resolve(PLAYER_SHEET)
    assert "tiles.png" in loaded_paths


def test_objects_join_on_first_update(scene):
    assert scene.objects.objects == ()
    scene.update(0.0)
    assert scene.player in scene.objects.objects
    assert len(scene.objects.objects) == 6


def test_player_components(scene):
    player = scene.player
    assert player.get_component(Sprite).draw_layer is DrawLayer.ENTITIES
    assert player.get_component(BoxCollider).layer is CollisionLayer.PLAYER
    assert tuple(player.transform.position) == (50, 650)


def test_player_starts_walking_then_idles(scene):
    animator = scene.player.get_component(Animator)
    assert animator.animation_state is AnimationState.WALK
    scene.update(0.0)
    assert animator.animation_state is AnimationState.IDLE


def test_right_key_moves_player(scene, held, input_handler):
    scene.update(0.0)
    held.add(RIGHT_KEY)
    input_handler.update()
    scene.update(0.5)
    animator = scene.player.get_component(Animator)
    assert scene.player.transform.position.x == 150.0
    assert scene.player.transform.position.y == 650
    assert animator.animation_state is AnimationState.WALK


def test_draw_shows_visible_tiles(scene):
    window = FakeWindow()
    scene.update(0.0)
    scene.late_update(0.0)
    scene.draw(window)
    assert len(window.images) == 4
    assert window.outlines == []


def test_missing_map_raises(tmp_path, input_handler):
    game_scene = GameScene(
        WorkingDirectory(tmp_path / "nowhere"),
        input_handler,
        ResourceAllocator(lambda path: pygame.Surface((1, 1))),
    )
    with pytest.raises(FileNotFoundError):
        game_scene.on_create()