"""A fixed-width 32-bit mask."""

from __future__ import annotations

WIDTH = 32
_FULL = (1 << WIDTH) - 1


def _check_position(pos: int) -> None:
    if not 0 <= pos < WIDTH:
        raise ValueError(f"bit position {pos} outside 0..{WIDTH - 1}")


class Bitmask:
    """Set of up to 32 flags stored in a single unsigned integer."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        self._bits = bits & _FULL

    @property
    def bits(self) -> int:
        """The whole mask as an unsigned 32-bit integer."""
        return self._bits

    def set_mask(self, other: Bitmask) -> None:
        """Copy all bits from another mask."""
        self._bits = other.bits

    def get_bit(self, pos: int) -> bool:
        _check_position(pos)
        return bool(self._bits & (1 << pos))

    def set_bit(self, pos: int, on: bool = True) -> None:
        _check_position(pos)
        if on:
            self._bits |= 1 << pos
        else:
            self.clear_bit(pos)

    def clear_bit(self, pos: int) -> None:
        _check_position(pos)
        self._bits &= ~(1 << pos) & _FULL

    def clear(self) -> None:
        self._bits = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmask):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bitmask({self._bits:#010x})"