"""Construction of the interface: buttons, panels, bars and scenery sprites."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from periodicity.animation import AnimatedSprite
from periodicity.palette import (
    ALT_BUTTON_HOVERED,
    ALT_BUTTON_PRESSED,
    BLACK,
    BUTTON,
    BUTTON_HOVERED,
    BUTTON_PRESSED,
    ENCAPSULATION_REGIONS,
    MAIN_OUTLINE_CLR,
    MAIN_TEXT_CLR,
    get_scale,
)
from periodicity.properties import ClickAction, ColorPair, PropertiesEnum

if TYPE_CHECKING:
    from periodicity.world import World

_PANEL_FILL = (29, 33, 37)
_BLACK_RGB = (0, 0, 0)
_BAR_BASE = ColorPair((64, 64, 64), _BLACK_RGB)

_SIDE_BUTTONS = (
    ("A", ClickAction.A),
    ("B", ClickAction.B),
    ("C", ClickAction.C),
    ("D", ClickAction.D),
    ("E", ClickAction.E),
    ("F", ClickAction.F),
    ("G", ClickAction.G),
    ("H", ClickAction.H),
)
_UNLABELLED = {"G", "H"}
_BUTTON_COLS = 4
_BUTTON_SPACING = 2

MIASMA_TOOLTIP = (
    "    A contagious metaphysical impurity. \n"
    "Spreads to any nearby enemies each time it \n"
    "deals damage, haste does not affect its \n"
    "tickrate."
)
RUN_BUTTON_TOOLTIP = (
    "Runs the code that is currently placed in the text editor section. "
    "Be careful! Arbitrary code execution can be dangerous."
)


def _window_scale(world: World) -> int:
    return max(
        int(math.floor(min(world.window_width / 1920, world.window_height / 1080))),
        1,
    )


def build_interface(world: World) -> None:
    """Create the game entities and every interface element and scenery sprite.

    Textures are not loaded here; sprites refer to them by id.
    """
    world.init_game()
    create_run_button(world)
    create_side_buttons(world)
    spawn_player(world)
    init_gui(world)


def create_run_button(world: World) -> int:
    """Create the run button and return its entity id."""
    scale = get_scale()
    em = world.em
    eid = em.create_button("run_button")

    rect = em.rectangles[eid][-1]
    rect.x = 10 * scale
    rect.y = 61 * scale
    rect.width = 200 * scale
    rect.height = 50 * scale
    rect.colors = ColorPair.from_colors(BUTTON, BLACK)
    rect.pressed_color = ColorPair.from_colors(BUTTON_PRESSED)
    rect.hovered_color = ColorPair.from_colors(BUTTON_HOVERED)
    rect.draw = True
    rect.hovered = False
    rect.strata = 10

    text = em.texts[eid][-1]
    text.scale = scale
    text.x = 15 * scale
    text.y = 61 * scale
    text.colors = ColorPair.from_colors(MAIN_TEXT_CLR, BLACK)
    text.draw = True
    text.strata = 15

    tooltip = em.tooltip_data[eid]
    tooltip.header = "Run Code Button"
    tooltip.body = RUN_BUTTON_TOOLTIP
    tooltip.x = 10 * scale
    tooltip.y = 50 * scale
    tooltip.width = 200 * scale
    tooltip.height = 50 * scale
    tooltip.icon = None

    clickable = em.clickables[eid]
    clickable.clickable = True
    clickable.action = ClickAction.RUN_BUTTON
    clickable.rect_reference_id = rect.id
    return eid


def create_side_buttons(world: World) -> list[int]:
    """Create the grid of lettered buttons and return their entity ids.

    The grid spans from the right of the run button to the right edge of the
    ``textbox_encap`` rectangle if one exists. Raises ValueError if that span
    is too narrow to hold the spacing between columns.
    """
    scale = get_scale()
    em = world.em

    run_x = 20 * scale
    run_width = 200 * scale
    run_y = 10 * scale
    button_height = 50 * scale
    left_x = run_x + run_width

    textbox = em.rects_by_tag("textbox_encap")
    if textbox:
        right_x = textbox[-1].x + textbox[-1].width
    else:
        right_x = left_x + 400 * scale

    total_width = max(right_x - left_x, 0)
    total_spacing = _BUTTON_SPACING * (_BUTTON_COLS - 1)
    if total_width < total_spacing:
        raise ValueError("not enough room for the side buttons")
    button_width = (total_width - total_spacing) // _BUTTON_COLS

    created = []
    for i, (label, action) in enumerate(_SIDE_BUTTONS):
        row, col = divmod(i, _BUTTON_COLS)
        button_x = left_x + col * (button_width + _BUTTON_SPACING)
        button_y = run_y + row * (button_height + _BUTTON_SPACING)

        eid = em.create_button(f"{label.lower()}_button")

        rect = em.rectangles[eid][-1]
        rect.x = button_x
        rect.y = button_y
        rect.width = button_width
        rect.height = button_height
        rect.colors = ColorPair.from_colors(ENCAPSULATION_REGIONS, BLACK)
        rect.pressed_color = ColorPair.from_colors(ALT_BUTTON_PRESSED)
        rect.hovered_color = ColorPair.from_colors(ALT_BUTTON_HOVERED)
        rect.draw = True
        rect.hovered = False
        rect.strata = 10

        if label not in _UNLABELLED:
            text = em.texts[eid][-1]
            text.scale = max(scale - 1, 1) * 2
            text.x = button_x + 5 * scale
            text.y = button_y
            text.text = label
            text.colors = ColorPair.from_colors(MAIN_TEXT_CLR, MAIN_OUTLINE_CLR)
            text.draw = True
            text.strata = 15

        tooltip = em.tooltip_data[eid]
        tooltip.header = label
        tooltip.body = f"{label} button functionality."
        tooltip.x = button_x
        tooltip.y = button_y
        tooltip.width = button_width
        tooltip.height = button_height
        tooltip.icon = None

        clickable = em.clickables[eid]
        clickable.clickable = True
        clickable.action = action
        clickable.rect_reference_id = rect.id
        created.append(eid)
    return created


def _scenery(texture_id: str, width: int, height: int, position, strata: int,
             size: tuple[int, int], *, finished: bool = True) -> AnimatedSprite:
    return AnimatedSprite(
        texture_id=texture_id,
        frame_width=width,
        frame_height=height,
        total_frames=1,
        current_frame=0,
        frame_time=None,
        position=position,
        inanimate=True,
        strata=strata,
        desired_width=size[0],
        desired_height=size[1],
        play_once=False,
        finished=finished,
    )


def _panel_rect(world: World, eid: int, x: int, y: int, width: int, height: int,
                strata: int) -> None:
    world.em.add_property_to_entity(PropertiesEnum.RECT, eid)
    rect = world.em.rectangles[eid][0]
    rect.width = width
    rect.height = height
    rect.x = x
    rect.y = y
    rect.colors = ColorPair(_PANEL_FILL, _BLACK_RGB)
    rect.draw = True
    rect.strata = strata


def init_gui(world: World) -> None:
    """Create the landscape, enemy panel, tooltip region and their sprites."""
    scale = _window_scale(world)
    em = world.em
    anims = world.anims

    def s(x: int) -> int:
        return x * scale

    landscape = em.add_entity("landscape")
    _panel_rect(world, landscape, s(1920 - 1044) - s(10), s(10), s(1044), s(532), 5)

    anims.add_animation_instance(
        _scenery("rainier_background_2", 1024, 512, (s(1920 - 1044), s(20)), 5,
                 (s(1024), s(512)), finished=False)
    )
    anims.add_animation_instance(
        _scenery("Alpe", 64, 64, (s(1500), s(207)), 10, (s(256), s(256)))
    )
    anims.add_animation_instance(
        _scenery("ground_overlay3", 1024, 512, (s(1920 - 1044), s(20)), 10,
                 (s(1024), s(512)))
    )

    enemy_region = em.add_entity("enemy_info_region")
    _panel_rect(world, enemy_region, s(1920 - 512) - s(10), s(532 + 20), s(512),
                s(200), 10)

    em.add_property_to_entity(PropertiesEnum.TEXT, enemy_region)
    text = em.texts[enemy_region][0]
    text.scale = scale
    text.x = s(1920 - 510) - s(10)
    text.y = s(532 + 20)
    text.colors = ColorPair((255, 255, 255), _BLACK_RGB)
    text.draw = True
    text.strata = 10
    text.text = "Alpine Terror"

    em.add_property_to_entity(PropertiesEnum.HEALTHBAR, enemy_region)
    bar = em.healthbars[enemy_region]
    bar.x = s(1920) - s(517)
    bar.y = s(532 + 60)
    bar.width = s(502)
    bar.height = s(50)
    bar.draw = True
    bar.strata = 30
    bar.base_colors = ColorPair(_BAR_BASE.fill, _BAR_BASE.outline)
    bar.inner_colors = ColorPair((255, 100, 100), _BLACK_RGB)
    bar.gem_entity_id = world.gem.get_entity_id_from_name("alpine_terror")

    tooltip_region = em.add_entity("tooltip")
    _panel_rect(world, tooltip_region, s(1920 - 1044) - s(10), s(532 + 250),
                s(517), s(200), 10)

    anims.add_animation_instance(
        _scenery("tree_icon", 64, 64, (s(550), s(70)), 30, (s(32), s(32)))
    )
    anims.add_animation_instance(
        _scenery("stats", 64, 64, (s(455), s(70)), 30, (s(32), s(32)))
    )


def spawn_player(world: World) -> int:
    """Create the player's interface entity and sprite; return the entity id."""
    scale = get_scale()
    em = world.em

    def s(x: int) -> int:
        return x * scale

    player = em.add_entity("player")

    world.anims.add_animation_instance(
        AnimatedSprite(
            texture_id="my_warlock",
            frame_width=64,
            frame_height=64,
            total_frames=1,
            current_frame=0,
            frame_time=None,
            position=(s(1000), s(207)),
            inanimate=True,
            strata=10,
            desired_width=s(256),
            desired_height=s(256),
            play_once=True,
            finished=False,
        )
    )

    _panel_rect(world, player, s(1920 - 1044) - s(10), s(532 + 20), s(517), s(200), 10)

    em.add_property_to_entity(PropertiesEnum.TEXT, player)
    text = em.texts[player][0]
    text.text = "Player Info"
    text.scale = scale
    text.x = s(1920 - 1042) - s(10)
    text.y = s(532 + 20)
    text.colors = ColorPair((255, 255, 255), _BLACK_RGB)
    text.draw = True
    text.strata = 10

    em.add_property_to_entity(PropertiesEnum.HEALTHBAR, player)
    bar = em.healthbars[player]
    bar.x = s(1920) - s(1047)
    bar.y = s(532 + 60)
    bar.width = s(502)
    bar.height = s(50)
    bar.draw = True
    bar.strata = 30
    bar.base_colors = ColorPair(_BAR_BASE.fill, _BAR_BASE.outline)
    bar.inner_colors = ColorPair((255, 100, 100), _BLACK_RGB)
    bar.gem_entity_id = world.gem.get_entity_id_from_name("player")

    em.add_property_to_entity(PropertiesEnum.CASTBAR, player)
    cast = em.castbars[player]
    cast.x = s(1920) - s(1047)
    cast.y = s(532 + 120)
    cast.width = s(452)
    cast.height = s(50)
    cast.cast_progress = 0.8
    cast.draw = True
    cast.strata = 30
    cast.base_colors = ColorPair(_BAR_BASE.fill, _BAR_BASE.outline)
    cast.inner_colors = ColorPair((100, 100, 255), _BLACK_RGB)
    cast.icon_name = "miasma"

    em.add_property_to_entity(PropertiesEnum.TOOLTIP_DATA, player)
    tooltip = em.tooltip_data[player]
    tooltip.header = "Miasma"
    tooltip.body = MIASMA_TOOLTIP
    tooltip.x = s(1920) - s(1047)
    tooltip.y = s(532 + 120)
    tooltip.width = s(502)
    tooltip.height = s(50)
    tooltip.icon = "miasma"

    em.add_property_to_entity(PropertiesEnum.STATE, player)
    return player