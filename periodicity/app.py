"""The game window and its main loop."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

import pygame

from periodicity.layout import build_interface
from periodicity.palette import WINDOW_HEIGHT, WINDOW_WIDTH
from periodicity.render import Renderer
from periodicity.user_input import InputState, handle_event, process_input
from periodicity.world import World

TITLE = "Periodicity"
DEFAULT_ASSETS = Path("src") / "assets"
FRAME_RATE = 60


class Game:
    """A window showing a world, driven by mouse input.

    With ``assets_dir`` the fonts ``gb.ttf`` and ``lilex.ttf`` and the
    sprites folder are loaded from it; without it default fonts are used and
    no textures are loaded. Raises FileNotFoundError if a font or the
    sprites folder is missing.
    """

    def __init__(self, assets_dir: Optional[str | os.PathLike] = DEFAULT_ASSETS) -> None:
        text_font = tooltip_font = None
        if assets_dir is not None:
            assets = Path(assets_dir)
            text_font = assets / "gb.ttf"
            tooltip_font = assets / "lilex.ttf"
            for font in (text_font, tooltip_font):
                if not font.is_file():
                    raise FileNotFoundError(f"Failed to load font {font}")

        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.renderer = Renderer(self.screen, text_font, tooltip_font)

        self.world = World(window_width=WINDOW_WIDTH, window_height=WINDOW_HEIGHT)
        build_interface(self.world)
        if assets_dir is not None:
            self.world.anims.load_textures(Path(assets_dir) / "sprites")

        self.input = InputState()
        self.clock = pygame.time.Clock()
        self.running = True

    def _frame(self) -> None:
        for event in pygame.event.get():
            handle_event(self.input, event)
        process_input(self.world, self.input)

        dt = self.clock.tick(FRAME_RATE) / 1000.0
        self.world.tick(dt)

        self.renderer.draw_frame(self.world, self.input.mouse_pos)
        pygame.display.flip()

        if self.input.quit_requested:
            self.running = False

    def run(self) -> None:
        """Run frames until the window is closed, then shut pygame down."""
        try:
            while self.running:
                self._frame()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="periodicity", description="Play Periodicity.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=DEFAULT_ASSETS,
        help="folder holding the fonts and the sprites folder",
    )
    args = parser.parse_args(argv)
    Game(args.assets).run()
    return 0