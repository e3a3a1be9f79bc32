"""Sprite sheets and the animated sprites drawn from them."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pygame

logger = logging.getLogger(__name__)

_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg"}


@dataclass
class AnimatedSprite:
    """A sprite cut from a horizontal strip of equally sized frames."""

    texture_id: str
    frame_width: int
    frame_height: int
    total_frames: int = 1
    current_frame: int = 0
    frame_time: Optional[float] = None
    time_accumulator: float = 0.0
    position: tuple[int, int] = (0, 0)
    inanimate: bool = False
    strata: int = 0
    desired_width: Optional[int] = None
    desired_height: Optional[int] = None
    play_once: bool = False
    finished: bool = False
    velocity: tuple[float, float] = (0.0, 0.0)
    lifetime: Optional[float] = None


@dataclass
class SpriteDraw:
    """What to draw for one sprite: which part of which texture, where, at what scale."""

    texture_id: str
    texture: pygame.Surface
    source_rect: tuple[int, int, int, int]
    position: tuple[float, float]
    scale: tuple[float, float] = (1.0, 1.0)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class Animation:
    """Loaded textures and the sprites currently alive."""

    textures: dict[str, pygame.Surface] = field(default_factory=dict)
    active: list[AnimatedSprite] = field(default_factory=list)

    def load_texture(self, texture_id: str, filepath: str | os.PathLike) -> None:
        """Load an image file as the texture ``texture_id``.

        Raises OSError if the image cannot be loaded.
        """
        try:
            self.textures[texture_id] = pygame.image.load(os.fspath(filepath))
        except (pygame.error, OSError) as exc:
            raise OSError(f"Failed to load texture {filepath}") from exc

    def add_animation_instance(self, sprite: AnimatedSprite) -> None:
        self.active.append(sprite)

    def remove_sprite_by_texture(self, texture_id: str) -> None:
        self.active = [s for s in self.active if s.texture_id != texture_id]

    def update(self, dt: float) -> None:
        """Advance lifetimes, positions and frames by ``dt`` seconds."""
        for sprite in self.active:
            if sprite.lifetime is not None:
                sprite.lifetime -= dt
                if sprite.lifetime <= 0.0:
                    sprite.finished = True

            x, y = sprite.position
            vx, vy = sprite.velocity
            sprite.position = (
                max(_round_half_away(x + vx * dt), 0),
                max(_round_half_away(y + vy * dt), 0),
            )

            if sprite.inanimate or sprite.finished:
                continue

            sprite.time_accumulator += dt
            if sprite.frame_time is None or sprite.time_accumulator < sprite.frame_time:
                continue
            sprite.time_accumulator -= sprite.frame_time
            if sprite.current_frame + 1 >= sprite.total_frames:
                if sprite.play_once:
                    sprite.finished = True
                else:
                    sprite.current_frame = 0
            else:
                sprite.current_frame += 1

        self.active = [
            s for s in self.active if not (s.lifetime is not None and s.finished)
        ]

    def get_drawables(self) -> list[SpriteDraw]:
        """Draw descriptions of active sprites with loaded textures, lowest strata first."""
        drawables = (
            self.get_drawable(sprite)
            for sprite in sorted(self.active, key=lambda s: s.strata)
        )
        return [d for d in drawables if d is not None]

    def get_drawable(self, sprite: AnimatedSprite) -> Optional[SpriteDraw]:
        """Draw description of one sprite, or None if its texture is not loaded."""
        texture = self.textures.get(sprite.texture_id)
        if texture is None:
            return None
        scale = (1.0, 1.0)
        if sprite.desired_width is not None and sprite.desired_height is not None:
            scale = (
                sprite.desired_width / sprite.frame_width,
                sprite.desired_height / sprite.frame_height,
            )
        return SpriteDraw(
            texture_id=sprite.texture_id,
            texture=texture,
            source_rect=(
                sprite.current_frame * sprite.frame_width,
                0,
                sprite.frame_width,
                sprite.frame_height,
            ),
            position=(float(sprite.position[0]), float(sprite.position[1])),
            scale=scale,
        )

    def load_textures(self, folder_path: str | os.PathLike) -> None:
        """Load every png/jpg/jpeg file of a folder, keyed by file stem.

        Files that fail to load are logged and skipped; a missing folder raises OSError.
        """
        for path in sorted(Path(folder_path).iterdir()):
            if not path.is_file() or path.suffix not in _IMAGE_SUFFIXES:
                continue
            try:
                self.load_texture(path.stem, path)
            except OSError as exc:
                logger.error("Failed to load texture %s: %s", path, exc.__cause__ or exc)
            else:
                logger.info("Loaded texture: %s", path)