"""Base for components that can be drawn to a window."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any


class DrawLayer(IntEnum):
    """Draw layers; lower values are drawn first."""

    DEFAULT = 0
    BACKGROUND = 1
    FOREGROUND = 2
    ENTITIES = 3


class Drawable(ABC):
    """Something drawn in a layer, ordered inside the layer by sort order.

    The defaults live on the class so that the mixin needs no initialiser
    when combined with other bases.
    """

    sort_order: int = 0
    draw_layer: DrawLayer = DrawLayer.DEFAULT

    @abstractmethod
    def draw(self, window: Any) -> None:
        """Draw onto the window."""

    @abstractmethod
    def is_queued_for_removal(self) -> bool:
        """Return True once the drawable should no longer be drawn."""