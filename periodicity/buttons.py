"""What each interface button does when it is clicked."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from periodicity.animation import AnimatedSprite
from periodicity.g_properties import Actions, GPAction, Spells
from periodicity.helpers import get_stat, get_stat_color
from periodicity.palette import ALT_BASE, Color, get_scale
from periodicity.properties import ClickAction, ColorPair, PropertiesEnum

if TYPE_CHECKING:
    from periodicity.world import World

logger = logging.getLogger(__name__)

_CAST_FRAMES = 12
_STATS_PANEL_SLOT = 2
_STATS_PANEL_ROWS = range(1, 7)
_FIRST_ROW_COLOR = Color(29, 33, 37)


def _press(world: World, tag: str) -> None:
    rects = world.em.rects_by_tag(tag)
    if not rects:
        raise LookupError(f"no button tagged {tag!r}")
    rects[0].pressed = True


def _player_id(world: World) -> int:
    if world.gem.player_id is None:
        raise LookupError("no player entity")
    return world.gem.player_id


def _queue_spell(world: World, tag: str, spell: Spells) -> None:
    gem = world.gem
    player = _player_id(world)
    target = gem.targets.get(player)
    other = next((eid for eid in gem.gids if eid != player), None)
    if other is None or target is None:
        logger.info("No non-player entity found or player target not found.")
        return
    target.target_entity = other

    action = GPAction(
        id=gem.next_pid(),
        action=Actions.CASTING_SPELL,
        action_tag=tag,
        time_action_takes=2000,
        time_remaining=2000,
        spell=spell,
    )
    gem.actions[player] = GPAction(**vars(action))
    queue = gem.actionqueue[player].queue
    queue.append(action)
    logger.info("%s added to action queue", tag)

    scale = get_scale()
    world.anims.remove_sprite_by_texture("my_warlock")
    world.anims.remove_sprite_by_texture("Miasma_anim2")
    cast_seconds = queue[0].time_action_takes / 1000.0
    world.anims.add_animation_instance(
        AnimatedSprite(
            texture_id="Miasma_anim2",
            frame_width=64,
            frame_height=64,
            total_frames=_CAST_FRAMES,
            current_frame=0,
            frame_time=cast_seconds / _CAST_FRAMES,
            position=(1000 * scale, 207 * scale),
            inanimate=False,
            strata=20,
            desired_width=256 * scale,
            desired_height=256 * scale,
            play_once=True,
        )
    )


def _run_button(world: World) -> None:
    _press(world, "run_button")


def _a_button(world: World) -> None:
    _press(world, "a_button")
    _queue_spell(world, "miasma", Spells.MIASMA)


def _b_button(world: World) -> None:
    _press(world, "b_button")
    _queue_spell(world, "infernum", Spells.INFERNUM)


def _c_button(world: World) -> None:
    _press(world, "c_button")
    enemy = world.gem.get_entity_id_from_name("alpine_terror")
    stats = world.gem.stats.get(enemy)
    if stats is not None:
        stats.health_curr = max(stats.health_curr - 5, 0)


def _close_stats_panel(world: World) -> None:
    for row in _STATS_PANEL_ROWS:
        world.em.purge_entity_by_tag(f"encap_{row}")
        world.em.purge_entity_by_tag(f"encap_icon_{row}")
        stat_name = get_stat(row)
        if stat_name is not None:
            world.anims.remove_sprite_by_texture(stat_name)


def _open_stats_panel(world: World) -> None:
    em = world.em
    scale = get_scale()
    for row in _STATS_PANEL_ROWS:
        rect_eid = em.add_entity(f"encap_{row}")
        em.add_property_to_entity(PropertiesEnum.RECT, rect_eid)
        color = _FIRST_ROW_COLOR if row == 1 else ALT_BASE
        rect = em.rectangles[rect_eid][0]
        rect.width = 610 * scale
        rect.height = 120 * scale
        rect.x = 10 * scale
        rect.y = 120 * row * scale
        rect.colors = ColorPair(color.rgb, (0, 0, 0))
        rect.draw = True
        rect.strata = 10

        stat_name = get_stat(row)
        if stat_name is None:
            continue
        value = world.player_stat(row)

        icon_eid = em.add_entity(f"encap_icon_{row}")
        em.add_property_to_entity(PropertiesEnum.TEXT, icon_eid)
        text = em.texts[icon_eid][0]
        text.text = f"{stat_name}: {value}"
        text.x = 140 * scale
        text.y = (120 * row + 30) * scale
        text.scale = 3 * scale
        text.colors = ColorPair(get_stat_color(row) or (255, 255, 255), (0, 0, 0))
        text.draw = True
        text.strata = 21

        world.anims.add_animation_instance(
            AnimatedSprite(
                texture_id=stat_name,
                frame_width=64,
                frame_height=64,
                total_frames=12,
                current_frame=0,
                frame_time=None,
                position=(10 * scale, 120 * row * scale),
                inanimate=False,
                strata=20,
                desired_width=120 * scale,
                desired_height=120 * scale,
                play_once=True,
            )
        )


def _g_button(world: World) -> None:
    rects = world.em.rects_by_tag("g_button")
    if rects:
        rects[0].pressed = True

    if world.state[_STATS_PANEL_SLOT] == 1:
        world.state[_STATS_PANEL_SLOT] = 0
        _close_stats_panel(world)
        return
    world.state[_STATS_PANEL_SLOT] = 1
    _open_stats_panel(world)


def _h_button(world: World) -> None:
    _press(world, "h_button")


_HANDLERS: dict[ClickAction, Callable[[World], None]] = {
    ClickAction.RUN_BUTTON: _run_button,
    ClickAction.A: _a_button,
    ClickAction.B: _b_button,
    ClickAction.C: _c_button,
    ClickAction.G: _g_button,
    ClickAction.H: _h_button,
}


def branch_from_click(world: World, action: ClickAction) -> None:
    """Carry out the effect of clicking a button with ``action``.

    Actions without an effect are ignored. Raises LookupError when a button
    that must exist for the action is missing.
    """
    logger.debug("%s button pressed", action.name)
    handler = _HANDLERS.get(action)
    if handler is not None:
        handler(world)