"""Named key bindings with per-frame pressed, down and up queries."""

from __future__ import annotations

from typing import Callable

from tileforge.bitmask import WIDTH, Bitmask

KeyState = Callable[[int], bool]


def _pygame_key_state(key_code: int) -> bool:
    import pygame

    return bool(pygame.key.get_pressed()[key_code])


class Input:
    """Maps names such as "Left" to one or more key codes.

    ``key_state`` tells whether a key code is held right now; by default the
    keyboard state reported by pygame is used.
    """

    def __init__(self, key_state: KeyState | None = None) -> None:
        self._key_state = key_state or _pygame_key_state
        self._positions: dict[str, int] = {}
        self._bindings: dict[str, list[int]] = {}
        self._this_frame = Bitmask()
        self._last_frame = Bitmask()

    def update(self) -> None:
        """Sample the keys; call once per frame before querying."""
        self._last_frame.set_mask(self._this_frame)
        for name, position in self._positions.items():
            held = any(self._key_state(code) for code in self._bindings[name])
            self._this_frame.set_bit(position, held)

    def add_mapping(self, key_name: str, key_code: int) -> None:
        """Bind a key code to a name; a name may have several codes."""
        if key_name in self._bindings:
            self._bindings[key_name].append(key_code)
            return
        position = len(self._positions) + 1
        if position >= WIDTH:
            raise ValueError(f"no room for more than {WIDTH - 1} key names")
        self._positions[key_name] = position
        self._bindings[key_name] = [key_code]

    def is_key_pressed(self, key_name: str) -> bool:
        """True while any key bound to the name is held."""
        position = self._positions.get(key_name)
        if position is None:
            return False
        return self._this_frame.get_bit(position)

    def is_key_down(self, key_name: str) -> bool:
        """True only in the frame the name became pressed."""
        position = self._positions.get(key_name)
        if position is None:
            return False
        return self._this_frame.get_bit(position) and not self._last_frame.get_bit(position)

    def is_key_up(self, key_name: str) -> bool:
        """True only in the frame the name was released."""
        position = self._positions.get(key_name)
        if position is None:
            return False
        return not self._this_frame.get_bit(position) and self._last_frame.get_bit(position)