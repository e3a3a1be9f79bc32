"""Small helpers: random placement, stat names and text wrapping."""

from __future__ import annotations

import random
from typing import Callable, Optional

from periodicity.palette import EPIC

_STAT_NAMES = {
    2: "chaos",
    3: "solidity",
    4: "vitality",
    5: "haste",
    6: "will",
}

_STAT_COLORS = {
    2: EPIC.rgb,
    3: (122, 122, 115),
    4: (224, 65, 52),
    5: (240, 190, 88),
    6: (198, 38, 65),
}


def random_point_in_rect(width: int, height: int) -> tuple[int, int]:
    """A random point with 0 <= x < width and 0 <= y < height.

    Raises ValueError if either dimension is not positive.
    """
    return random.randrange(width), random.randrange(height)


def get_stat(n: int) -> Optional[str]:
    """Name of the stat shown in panel row ``n``, if any."""
    return _STAT_NAMES.get(n)


def get_stat_color(n: int) -> Optional[tuple[int, int, int]]:
    """Text colour of the stat shown in panel row ``n``, if any."""
    return _STAT_COLORS.get(n)


def wrap_text(text: str, measure: Callable[[str], float], max_width: float) -> str:
    """Greedily wrap words so that each line's measured width fits ``max_width``.

    A single word wider than ``max_width`` is kept on its own line.
    """
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if measure(candidate) > max_width:
            if line:
                lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return "\n".join(lines)