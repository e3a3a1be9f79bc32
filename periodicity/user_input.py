"""Mouse state tracking and the clicks and hovers it drives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from periodicity.buttons import branch_from_click
from periodicity.entities import EntityManager
from periodicity.properties import PRect

if TYPE_CHECKING:
    from periodicity.world import World

_LEFT_BUTTON = 1


@dataclass
class InputState:
    """Mouse position, left button state this frame and last, and quit requests."""

    mouse_x: int = 0
    mouse_y: int = 0
    lmb_down: bool = False
    lmb_was_down: bool = False
    quit_requested: bool = False

    @property
    def mouse_pos(self) -> tuple[int, int]:
        return (self.mouse_x, self.mouse_y)


def _contains(rect: PRect, x: int, y: int) -> bool:
    return rect.x <= x <= rect.x + rect.width and rect.y <= y <= rect.y + rect.height


def handle_event(state: InputState, event: pygame.event.Event) -> None:
    """Record the effect of one window event on ``state``."""
    if event.type == pygame.QUIT:
        state.quit_requested = True
    elif event.type == pygame.MOUSEMOTION:
        state.mouse_x, state.mouse_y = event.pos
    elif event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == _LEFT_BUTTON:
            state.lmb_down = True
    elif event.type == pygame.MOUSEBUTTONUP:
        if event.button == _LEFT_BUTTON:
            state.lmb_down = False


def set_hovered_flags(em: EntityManager, mouse_x: int, mouse_y: int) -> None:
    """Mark rectangles under the mouse as hovered and clear last frame's marks."""
    for rects in em.rectangles.values():
        for rect in rects:
            if rect.hovered is not None:
                rect.hovered = None
            if _contains(rect, mouse_x, mouse_y):
                rect.hovered = True


def press_buttons(world: World, mouse_x: int, mouse_y: int) -> None:
    """Fire the action of every button whose rectangle holds the mouse."""
    em = world.em
    clicked = [
        eid
        for eid in em.get_all_buttons()
        if (rect := em.button_rect(eid)) is not None
        and _contains(rect, mouse_x, mouse_y)
    ]
    for eid in clicked:
        clickable = em.clickables.get(eid)
        if clickable is not None:
            branch_from_click(world, clickable.action)


def release_buttons(em: EntityManager) -> None:
    """Clear the pressed mark on every button rectangle that has one."""
    for eid in em.get_all_buttons():
        for rect in em.rectangles.get(eid, []):
            if rect.pressed is not None:
                rect.pressed = False


def process_input(world: World, state: InputState) -> None:
    """Update hover marks and act on left-button presses and releases."""
    set_hovered_flags(world.em, state.mouse_x, state.mouse_y)
    if state.lmb_down and not state.lmb_was_down:
        press_buttons(world, state.mouse_x, state.mouse_y)
    elif not state.lmb_down and state.lmb_was_down:
        release_buttons(world.em)
    state.lmb_was_down = state.lmb_down