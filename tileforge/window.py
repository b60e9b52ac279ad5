"""The game window, drawn with pygame."""

from __future__ import annotations

import pygame

from tileforge.debug import WHITE, Colour
from tileforge.geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Rect, Vector2


class Window:
    """A fixed-size window cleared to white at the start of every frame."""

    def __init__(
        self,
        title: str = "Game Window",
        size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
    ) -> None:
        pygame.display.init()
        self._surface = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        self._open = True

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def update(self) -> None:
        """Handle pending window events; a close request closes the window."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()

    def begin_draw(self) -> None:
        self._surface.fill(WHITE)

    def draw(self, image: pygame.Surface, position: Vector2) -> None:
        self._surface.blit(image, (round(position.x), round(position.y)))

    def draw_rect_outline(self, rect: Rect, colour: Colour, thickness: float) -> None:
        """Outline a rectangle, the outline lying just outside its edges."""
        width = max(1, round(thickness))
        left = round(min(rect.left, rect.right))
        top = round(min(rect.top, rect.bottom))
        outline = pygame.Rect(
            left - width,
            top - width,
            round(abs(rect.width)) + 2 * width,
            round(abs(rect.height)) + 2 * width,
        )
        pygame.draw.rect(self._surface, colour, outline, width)

    def draw_line(self, start: Vector2, end: Vector2, colour: Colour) -> None:
        pygame.draw.line(
            self._surface,
            colour,
            (round(start.x), round(start.y)),
            (round(end.x), round(end.y)),
        )

    def end_draw(self) -> None:
        pygame.display.flip()

    def is_open(self) -> bool:
        return self._open

    @property
    def centre(self) -> Vector2:
        """The centre of the window in whole pixels."""
        width, height = self._surface.get_size()
        return Vector2(width // 2, height // 2)