"""Drawing of the interface, sprites and combat text onto a pygame surface."""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import pygame

from periodicity.animation import AnimatedSprite, SpriteDraw
from periodicity.entities import EntityManager
from periodicity.g_entities import GameEntityManager
from periodicity.g_properties import GPAction, get_spell_data
from periodicity.helpers import wrap_text
from periodicity.palette import (
    BASE,
    BLACK,
    ENCAPSULATION_REGIONS,
    EPIC,
    WHITE,
    XP_COLOR,
    get_scale,
    scaled,
)
from periodicity.properties import ColorPair, PHealthbar, PRect, PText

if TYPE_CHECKING:
    from periodicity.world import World

DrawableItem = Union[PRect, PText, PHealthbar]
RGB = tuple[int, int, int]

_TEXT_FONT = "text"
_TOOLTIP_FONT = "tooltip"
_OUTLINE_THICKNESS = 2
_ICON_STRATA = 9999


def build_draw_list(em: EntityManager) -> list[DrawableItem]:
    """Visible rectangles, texts and health bars, ordered by strata.

    Items of equal strata keep the order rectangles, texts, health bars.
    """
    items: list[DrawableItem] = [
        rect for rects in em.rectangles.values() for rect in rects if rect.draw
    ]
    items.extend(text for texts in em.texts.values() for text in texts if text.draw)
    items.extend(bar for bar in em.healthbars.values() if bar.draw)
    items.sort(key=lambda item: item.strata)
    return items


def rect_colors(rect: PRect) -> ColorPair:
    """Colours a rectangle is drawn with, given its pressed and hovered marks."""
    if rect.pressed is True:
        return rect.pressed_color if rect.pressed_color is not None else rect.colors
    if rect.hovered is True:
        return rect.hovered_color if rect.hovered_color is not None else rect.colors
    return rect.colors


def health_ratio(gem: GameEntityManager, healthbar: PHealthbar) -> float:
    """Fraction of health left for the entity a health bar follows; 1.0 if none."""
    if healthbar.gem_entity_id is None:
        return 1.0
    stats = gem.stats.get(healthbar.gem_entity_id)
    if stats is None:
        return 1.0
    return stats.health_curr / max(stats.health_max, 1)


def cast_progress(action: GPAction) -> float:
    """How far an action has progressed, from 0.0 to 1.0."""
    total = max(action.time_action_takes, 1)
    remaining = min(action.time_remaining, action.time_action_takes)
    return 1.0 - remaining / total


def _window_scale(world: World) -> int:
    return max(
        int(math.floor(min(world.window_width / 1920, world.window_height / 1080))),
        1,
    )


class Renderer:
    """Draws a world onto a surface.

    ``text_font`` is used for interface and combat text, ``tooltip_font`` for
    tooltips; either may be None for pygame's default font. Raises
    FileNotFoundError if a given font file does not exist.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        text_font: Optional[str | os.PathLike] = None,
        tooltip_font: Optional[str | os.PathLike] = None,
    ) -> None:
        for path in (text_font, tooltip_font):
            if path is not None and not Path(path).is_file():
                raise FileNotFoundError(f"Failed to load font {path}")
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self._font_paths = {_TEXT_FONT: text_font, _TOOLTIP_FONT: tooltip_font}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def _font(self, kind: str, size: int) -> pygame.font.Font:
        key = (kind, size)
        font = self._fonts.get(key)
        if font is None:
            path = self._font_paths[kind]
            font = pygame.font.Font(os.fspath(path) if path is not None else None, size)
            self._fonts[key] = font
        return font

    # ----- primitives ---------------------------------------------------

    def _draw_box(self, x: float, y: float, width: float, height: float, fill: RGB,
                  outline: Optional[RGB], thickness: int) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        if rect.width > 0 and rect.height > 0:
            pygame.draw.rect(self.surface, fill, rect)
        if outline is not None and thickness > 0:
            frame = rect.inflate(2 * thickness, 2 * thickness)
            pygame.draw.rect(self.surface, outline, frame, thickness)

    def _draw_text(self, text: str, font: pygame.font.Font, position: tuple[float, float],
                   fill: RGB, outline: Optional[RGB] = None, thickness: int = 0) -> None:
        x, y = position
        offsets = [
            (dx, dy)
            for dx in (-thickness, 0, thickness)
            for dy in (-thickness, 0, thickness)
            if (dx, dy) != (0, 0)
        ]
        for line_no, line in enumerate(text.split("\n")):
            if not line:
                continue
            line_y = y + line_no * font.get_linesize()
            if outline is not None and thickness > 0:
                edge = font.render(line, True, outline)
                for dx, dy in offsets:
                    self.surface.blit(edge, (x + dx, line_y + dy))
            self.surface.blit(font.render(line, True, fill), (x, line_y))

    def _blit_sprite(self, draw: SpriteDraw, desaturate: bool = False) -> None:
        texture = draw.texture
        source = pygame.Rect(draw.source_rect).clip(texture.get_rect())
        if source.width == 0 or source.height == 0:
            return
        image = texture.subsurface(source)
        sx, sy = draw.scale
        size = (round(source.width * sx), round(source.height * sy))
        if size[0] <= 0 or size[1] <= 0:
            return
        if size != source.size:
            image = pygame.transform.scale(image, size)
        if desaturate:
            image = pygame.transform.grayscale(image)
        self.surface.blit(image, draw.position)

    # ----- items --------------------------------------------------------

    def _draw_rect(self, rect: PRect) -> None:
        colors = rect_colors(rect)
        self._draw_box(rect.x, rect.y, rect.width, rect.height, colors.fill,
                       colors.outline, _OUTLINE_THICKNESS)

    def _draw_ptext(self, text: PText) -> None:
        font = self._font(_TEXT_FONT, text.scale * 20)
        self._draw_text(text.text, font, (text.x, text.y), text.colors.fill,
                        text.colors.outline, 1)

    def _draw_healthbar(self, world: World, bar: PHealthbar) -> None:
        ratio = health_ratio(world.gem, bar)
        self._draw_box(bar.x, bar.y, bar.width, bar.height, bar.base_colors.fill,
                       bar.base_colors.outline, _OUTLINE_THICKNESS)
        inner_width = max(bar.width * ratio, 0.0)
        self._draw_box(bar.x, bar.y, inner_width, bar.height, bar.inner_colors.fill,
                       None, 0)

    def _draw_item(self, world: World, item: DrawableItem) -> None:
        if isinstance(item, PRect):
            self._draw_rect(item)
        elif isinstance(item, PText):
            self._draw_ptext(item)
        else:
            self._draw_healthbar(world, item)

    def _draw_player_castbar(self, world: World) -> None:
        gem, em = world.gem, world.em
        if gem.player_id is None:
            raise LookupError("no player entity")
        em_player = em.get_player_id()
        if em_player is None:
            raise LookupError("no player interface entity")

        queue = gem.actionqueue[gem.player_id].queue
        if not queue:
            return
        current = queue[0]
        if current.time_remaining == 0:
            queue.pop(0)
            return

        castbar = em.castbars[em_player]
        spell = get_spell_data(current.spell) if current.spell is not None else None
        if spell is None:
            raise ValueError(f"action {current.action_tag!r} has no spell data")

        filled = max(castbar.width * cast_progress(current), 0.0)
        self._draw_box(castbar.x, castbar.y, castbar.width, castbar.height,
                       castbar.base_colors.fill, castbar.base_colors.outline,
                       _OUTLINE_THICKNESS)
        self._draw_box(castbar.x, castbar.y, filled, castbar.height,
                       spell.colors.fill, None, 0)

        texture = world.anims.textures.get(current.action_tag)
        if texture is not None:
            icon = AnimatedSprite(
                texture_id=current.action_tag,
                frame_width=texture.get_width(),
                frame_height=texture.get_height(),
                position=(castbar.x + castbar.width, castbar.y),
                inanimate=True,
                strata=_ICON_STRATA,
                desired_width=castbar.height,
                desired_height=castbar.height,
            )
            draw = world.anims.get_drawable(icon)
            if draw is not None:
                self._blit_sprite(draw)

    def _draw_tooltips(self, world: World, mouse_pos: tuple[int, int]) -> None:
        scale = get_scale()

        def s(x: int) -> int:
            return scaled(scale, x)

        mouse_x, mouse_y = mouse_pos
        for data in list(world.em.tooltip_data.values()):
            inside = (
                data.x <= mouse_x <= data.x + data.width
                and data.y <= mouse_y <= data.y + data.height
            )
            if not inside:
                continue
            tooltip_x = s(1920 - 1044) - s(10)
            tooltip_y = s(532 + 250)
            tooltip_w = s(517)

            header_font = self._font(_TOOLTIP_FONT, 60)
            header_w = header_font.size(data.header)[0]
            self._draw_text(
                data.header,
                header_font,
                (tooltip_x + (tooltip_w - header_w) / 2.0, tooltip_y + s(10)),
                EPIC.rgb,
            )

            body_font = self._font(_TOOLTIP_FONT, 40)
            body = wrap_text(
                data.body,
                lambda line: body_font.size(line)[0],
                tooltip_w - 2.0 * s(10),
            )
            self._draw_text(body, body_font, (tooltip_x + s(10), tooltip_y + s(80)),
                            WHITE.rgb)

            if data.icon is None:
                continue
            texture = world.anims.textures.get(data.icon)
            if texture is None:
                continue
            icon = AnimatedSprite(
                texture_id=data.icon,
                frame_width=texture.get_width(),
                frame_height=texture.get_height(),
                position=(tooltip_x, tooltip_y),
                inanimate=True,
                strata=_ICON_STRATA,
                desired_width=s(64),
                desired_height=s(64),
            )
            draw = world.anims.get_drawable(icon)
            if draw is not None:
                self._blit_sprite(draw)

    def _draw_sprites(self, world: World) -> None:
        gem = world.gem
        for draw in world.anims.get_drawables():
            entity = gem.texture_to_entity.get(draw.texture_id)
            mortality = gem.mortalities.get(entity) if entity is not None else None
            alive = mortality.is_alive if mortality is not None else True
            self._blit_sprite(draw, desaturate=not alive)

    def _draw_xp_bar(self, world: World) -> None:
        scale = _window_scale(world)

        def s(x: int) -> int:
            return x * scale

        if world.gem.player_id is None:
            raise LookupError("no player entity")
        level = world.gem.levels[world.gem.player_id]
        coefficient = level.next_level_xp // level.curr_xp

        self._draw_box(s(10), s(930), s(502), s(50), ENCAPSULATION_REGIONS.rgb,
                       BLACK.rgb, _OUTLINE_THICKNESS)
        self._draw_box(s(10), s(930), s(502 // coefficient), s(50), XP_COLOR.rgb,
                       None, 0)
        font = self._font(_TEXT_FONT, s(50))
        self._draw_text(str(level.curr_level), font, (s(10 + 502 + 40), s(920)),
                        XP_COLOR.rgb, BLACK.rgb, 2)

    def _draw_floating_texts(self, world: World) -> None:
        for ft in world.floating_texts:
            font = self._font(_TEXT_FONT, ft.scale)
            self._draw_text(ft.value, font, ft.position, ft.color.rgb,
                            ft.outline.rgb, 1)

    # ----- frame --------------------------------------------------------

    def draw_frame(self, world: World, mouse_pos: tuple[int, int]) -> None:
        """Draw one complete frame of ``world``.

        A finished action at the head of the player's queue is removed.
        Raises LookupError when the world has no player.
        """
        self.surface.fill(BASE.rgb)
        for item in build_draw_list(world.em):
            self._draw_item(world, item)
        self._draw_player_castbar(world)
        self._draw_tooltips(world, mouse_pos)
        self._draw_sprites(world)
        self._draw_xp_bar(world)
        self._draw_floating_texts(world)