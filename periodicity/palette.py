"""Window dimensions, UI colours and scaling helpers."""

from __future__ import annotations

import math
from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The colour without its alpha channel."""
        return (self.r, self.g, self.b)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)

BASE = Color(43, 49, 55)
ALT_BASE = Color(36, 41, 46)
LIGHTER = Color(43, 49, 55)
ENCAPSULATION_REGIONS = Color(29, 33, 37)
BUTTON = Color(4, 66, 137)
BUTTON_PRESSED = Color(127, 184, 251)
BUTTON_HOVERED = Color(0, 92, 197)
ALT_BUTTON = Color(243, 88, 2)
ALT_BUTTON_HOVERED = Color(243, 103, 25)
ALT_BUTTON_PRESSED = Color(239, 157, 112)
MAIN_OUTLINE_CLR = Color(24, 26, 28)
OFF_OUTLINE_CLR = Color(107, 117, 127)
LEGENDARY = Color(250, 214, 104)
EPIC = Color(112, 36, 163)
MAIN_TEXT_CLR = Color(246, 248, 250)
OFF_TEXT_CLR = Color(101, 126, 150)
MIASMA_COLOR = Color(125, 185, 112)
INFERNUM_COLOR = Color(233, 103, 6)
XP_COLOR = Color(98, 67, 211)

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080

_REFERENCE_WIDTH = 1920
_REFERENCE_HEIGHT = 1080


def get_scale() -> int:
    """Integer UI scale of the window relative to a 1920x1080 layout, at least 1."""
    scale_w = WINDOW_WIDTH / _REFERENCE_WIDTH
    scale_h = WINDOW_HEIGHT / _REFERENCE_HEIGHT
    return max(int(math.floor(min(scale_w, scale_h))), 1)


def scaled(scale: int, x: int) -> int:
    """Scale a layout coordinate."""
    return x * scale