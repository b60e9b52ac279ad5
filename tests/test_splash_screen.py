import pygame
import pytest

from tileforge.geometry import Vector2
from tileforge.resources import ResourceAllocator
from tileforge.scenes import Scene, SceneStateMachine
from tileforge.splash_screen import COVER_FILE, SplashScreen
from tileforge.working_directory import WorkingDirectory


class FakeWindow:
    def __init__(self):
        self.centre = Vector2(100, 50)
        self.drawn = []

    def draw(self, image, position):
        self.drawn.append((image, position))


class Target(Scene):
    def __init__(self):
        self.activated = 0

    def on_create(self):
        pass

    def on_destroy(self):
        pass

    def on_activate(self):
        self.activated += 1


@pytest.fixture
def loaded_paths():
    return []


@pytest.fixture
def allocator(loaded_paths):
    def loader(path):
        loaded_paths.append(path)
        return pygame.Surface((40, 20))

    return ResourceAllocator(loader)


@pytest.fixture
def setup(tmp_path, allocator):
    machine = SceneStateMachine()
    window = FakeWindow()
    splash = SplashScreen(WorkingDirectory(tmp_path), machine, window, allocator)
    splash_id = machine.add(splash)
    target = Target()
    target_id = machine.add(target)
    splash.set_switch_to_scene(target_id)
    machine.switch_to(splash_id)
    return machine, window, splash, target


def test_loads_cover_from_working_directory(tmp_path, setup, loaded_paths):
    assert loaded_paths == [WorkingDirectory(tmp_path).resolve(COVER_FILE)]


def test_cover_is_halved_and_centred(setup):
    machine, window, splash, _ = setup
    width, height = splash.image.get_size()
    assert (width, height) == (20, 10)
    assert splash.position.x + width / 2 == window.centre.x
    assert splash.position.y + height / 2 == window.centre.y


def test_draw_blits_cover(setup):
    machine, window, splash, _ = setup
    machine.draw(window)
    assert len(window.drawn) == 1
    image, position = window.drawn[0]
    assert image is splash.image
    assert position == splash.position


def test_switches_after_show_time(setup):
    machine, _, splash, target = setup
    machine.update(0.5)
    assert machine.current is splash
    machine.update(0.5)
    assert machine.current is target
    assert target.activated == 1


def test_activation_resets_timer(setup):
    machine, _, splash, target = setup
    splash.update(0.9)
    splash.on_activate()
    assert splash.current_seconds == 0.0
    machine.update(0.9)
    assert machine.current is splash


def test_missing_cover_draws_nothing(tmp_path):
    def loader(path):
        raise FileNotFoundError(path)

    machine = SceneStateMachine()
    window = FakeWindow()
    splash = SplashScreen(
        WorkingDirectory(tmp_path), machine, window, ResourceAllocator(loader)
    )
    machine.switch_to(machine.add(splash))
    machine.draw(window)
    assert splash.image is None
    assert window.drawn == []