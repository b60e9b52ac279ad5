"""Small text helpers."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_integer(text: str) -> bool:
    """Return True if the whole text is a base-10 integer with optional sign."""
    return _INTEGER.fullmatch(text) is not None