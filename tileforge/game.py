"""The game: window, input, resources and scenes, run in a loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from tileforge.game_scene import GameScene
from tileforge.input import Input
from tileforge.resources import ResourceAllocator
from tileforge.scenes import SceneStateMachine
from tileforge.splash_screen import SplashScreen
from tileforge.window import Window
from tileforge.working_directory import WorkingDirectory

WINDOW_TITLE = "Game Window"

KEY_BINDINGS = (
    ("Left", pygame.K_LEFT),
    ("Left", pygame.K_a),
    ("Right", pygame.K_RIGHT),
    ("Right", pygame.K_d),
    ("Up", pygame.K_UP),
    ("Up", pygame.K_w),
    ("Down", pygame.K_DOWN),
    ("Down", pygame.K_s),
    ("Esc", pygame.K_ESCAPE),
)


class Game:
    """Opens the window, sets up the scenes and starts on the splash screen."""

    def __init__(self) -> None:
        self.window = Window(WINDOW_TITLE)
        self.working_dir = WorkingDirectory()
        self.texture_allocator: ResourceAllocator[pygame.Surface] = ResourceAllocator(
            pygame.image.load
        )
        self.input = Input()
        for name, key in KEY_BINDINGS:
            self.input.add_mapping(name, key)

        self.scenes = SceneStateMachine()
        splash = SplashScreen(
            self.working_dir, self.scenes, self.window, self.texture_allocator
        )
        splash_id = self.scenes.add(splash)
        game_id = self.scenes.add(
            GameScene(self.working_dir, self.input, self.texture_allocator)
        )
        splash.set_switch_to_scene(game_id)
        self.scenes.switch_to(splash_id)

        self._clock = pygame.time.Clock()
        self.delta_time = self._clock.tick() / 1000.0

    def update(self) -> None:
        self.window.update()
        self.scenes.update(self.delta_time)

    def late_update(self) -> None:
        self.scenes.late_update(self.delta_time)

    def draw(self) -> None:
        self.window.begin_draw()
        self.scenes.draw(self.window)
        self.window.end_draw()

    def is_running(self) -> bool:
        return self.window.is_open()

    def calculate_delta_time(self) -> None:
        """Measure the seconds since the previous call."""
        self.delta_time = self._clock.tick() / 1000.0

    def capture_input(self) -> None:
        self.input.update()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until its window is closed."""
    parser = argparse.ArgumentParser(
        prog="tileforge", description="Run the tile map game."
    )
    parser.parse_args(argv)

    game = Game()
    while game.is_running():
        game.capture_input()
        game.update()
        if not game.is_running():
            break
        game.late_update()
        game.draw()
        game.calculate_delta_time()
    return 0