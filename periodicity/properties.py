"""Interface entity properties held by the entity manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from periodicity.palette import Color

RGB = tuple[int, int, int]


class PropertiesEnum(Enum):
    RECT = auto()
    TEXT = auto()
    HEALTHBAR = auto()
    CASTBAR = auto()
    STATE = auto()
    TOOLTIP_DATA = auto()
    CLICKABLE = auto()


class ClickAction(Enum):
    RUN_BUTTON = auto()
    OTHER_BUTTON = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()


@dataclass
class PId:
    """Identity of an entity; every entity has exactly one."""

    id: int
    tag: str


@dataclass
class ColorPair:
    """A fill colour and an optional outline colour."""

    fill: RGB
    outline: Optional[RGB] = None

    @classmethod
    def from_colors(cls, fill: Color, outline: Optional[Color] = None) -> "ColorPair":
        return cls(fill=fill.rgb, outline=outline.rgb if outline is not None else None)


def _default_colors(fill: RGB, outline: RGB):
    return field(default_factory=lambda: ColorPair(fill, outline))


@dataclass
class PRect:
    id: int
    x: int = 10
    y: int = 10
    width: int = 10
    height: int = 10
    colors: ColorPair = _default_colors((19, 81, 150), (24, 26, 28))
    pressed_color: Optional[ColorPair] = None
    hovered_color: Optional[ColorPair] = None
    pressed: Optional[bool] = None
    hovered: Optional[bool] = None
    draw: bool = False
    strata: int = 0


@dataclass
class PText:
    id: int
    text: str = "Run Code"
    scale: int = 1
    x: int = 50
    y: int = 50
    colors: ColorPair = _default_colors((255, 255, 255), (0, 0, 0))
    draw: bool = False
    strata: int = 0
    lifetime: Optional[float] = None


@dataclass
class PHealthbar:
    id: int
    x: int = 10
    y: int = 10
    width: int = 10
    height: int = 10
    base_colors: ColorPair = _default_colors((254, 0, 0), (0, 0, 0))
    inner_colors: ColorPair = _default_colors((0, 254, 0), (0, 0, 0))
    draw: bool = True
    strata: int = 20
    gem_entity_id: Optional[int] = None


@dataclass
class PCastbar:
    id: int
    x: int = 10
    y: int = 10
    width: int = 10
    height: int = 10
    cast_progress: float = 0.0
    base_colors: ColorPair = _default_colors((254, 0, 0), (0, 0, 0))
    inner_colors: ColorPair = _default_colors((0, 254, 0), (0, 0, 0))
    icon_name: str = "miasma"
    draw: bool = True
    strata: int = 20


@dataclass
class PState:
    id: int
    state_vec: list[int] = field(default_factory=lambda: [0] * 500)


@dataclass
class PTooltipData:
    id: int
    header: str = "asd"
    body: str = "asd"
    x: int = 10
    y: int = 10
    width: int = 10
    height: int = 10
    icon: Optional[str] = None


@dataclass
class PClickable:
    id: int
    clickable: bool = True
    rect_reference_id: Optional[int] = None
    action: ClickAction = ClickAction.RUN_BUTTON