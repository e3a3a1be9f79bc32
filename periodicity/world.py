"""Gameplay state and the systems that advance it each frame."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from periodicity.animation import AnimatedSprite, Animation
from periodicity.entities import EntityManager
from periodicity.g_entities import GameEntityManager
from periodicity.g_properties import (
    Allegiances,
    GPActionQueue,
    GPAllegiance,
    GPBuffBar,
    GPDebuff,
    GPDebuffBar,
    GPLevel,
    GPMortality,
    GPStats,
    GPTarget,
    Spells,
    get_spell_data,
    get_spelldata_from_string,
)
from periodicity.helpers import random_point_in_rect
from periodicity.palette import (
    BLACK,
    WHITE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Color,
    get_scale,
)

logger = logging.getLogger(__name__)

# One megabyte of 32-bit slots.
STATE_SIZE = 1024 * 1024 // 4

# Slots of World.state.
STATE_MIASMA = 0
STATE_INFERNUM = 1
STATE_STATS_PANEL = 2

_DAMAGE_COLORS = {
    "miasma": Color(1, 255, 150),
    "infernum": Color(255, 125, 10),
    "umbra_mortis": Color(148, 114, 201),
}


@dataclass
class Damage:
    """A pending hit of ``amt`` points on ``target``."""

    amt: int
    target: int
    damager: int
    damage_type: str


@dataclass
class FloatingText:
    """A combat number that drifts and fades out."""

    value: str
    position: tuple[float, float]
    velocity: tuple[float, float]
    scale: int
    color: Color
    outline: Color
    lifetime: float


def get_color_from_type(dtype: str) -> Optional[Color]:
    """Colour of combat text for a damage type, or None if the type has none."""
    return _DAMAGE_COLORS.get(dtype)


@dataclass
class World:
    """Everything the game simulates, without any window attached."""

    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    state: list[int] = field(default_factory=lambda: [0] * STATE_SIZE)
    em: EntityManager = field(default_factory=EntityManager)
    gem: GameEntityManager = field(default_factory=GameEntityManager)
    em_gem_link: dict[int, int] = field(default_factory=dict)
    anims: Animation = field(default_factory=Animation)
    damage_queue: list[Damage] = field(default_factory=list)
    floating_texts: list[FloatingText] = field(default_factory=list)
    time_elapsed: float = 0.0
    delta_time: float = 0.0
    time_elapsed_ms: int = 0
    delta_time_ms: int = 0
    miasma_has_spawned: bool = False

    # ----- construction -------------------------------------------------

    def init_game(self) -> None:
        """Create the player and the enemy."""
        self._create_player()
        self._create_enemy()

    def _create_player(self) -> None:
        gem = self.gem
        pgid = gem.add_entity("player")
        gem.mortalities[pgid] = GPMortality(gem.next_pid(), True)
        gem.allegiances[pgid] = GPAllegiance(gem.next_pid(), Allegiances.PLAYER)
        gem.stats[pgid] = GPStats(
            id=gem.next_pid(),
            health_max=100,
            health_curr=80,
            chaos=1,
            solidity=1,
            vitality=1,
            haste=1,
            will=1,
            volatility=1,
        )
        gem.targets[pgid] = GPTarget(gem.next_pid(), None)
        gem.buffbars[pgid] = GPBuffBar(gem.next_pid())
        gem.debuffbars[pgid] = GPDebuffBar(gem.next_pid())
        gem.actionqueue[pgid] = GPActionQueue(gem.next_pid())
        gem.player_id = pgid

        em_player = self.em.get_player_id()
        if em_player is not None:
            self.em_gem_link[em_player] = pgid

        gem.levels[pgid] = GPLevel(
            id=gem.next_pid(), curr_level=5, curr_xp=50, next_level_xp=100
        )

    def _create_enemy(self) -> None:
        gem = self.gem
        enemy_id = gem.add_entity("alpine_terror")
        gem.texture_to_entity["Alpe"] = enemy_id
        gem.mortalities[enemy_id] = GPMortality(gem.next_pid(), True)

        level = 2
        level_pid = gem.next_pid()
        gem.levels[level_pid] = GPLevel(
            id=level_pid, curr_level=level, curr_xp=0, next_level_xp=100
        )

        gem.allegiances[enemy_id] = GPAllegiance(gem.next_pid(), Allegiances.ENEMY)
        gem.stats[enemy_id] = GPStats(
            id=gem.next_pid(),
            health_max=100 * (2 * level),
            health_curr=100 * (2 * level),
            chaos=1 * level,
            solidity=2 * level,
            vitality=2 * level,
            haste=1 * level,
            will=1 * level,
            volatility=1 * level,
        )
        gem.targets[enemy_id] = GPTarget(gem.next_pid(), None)
        gem.buffbars[enemy_id] = GPBuffBar(gem.next_pid())
        gem.debuffbars[enemy_id] = GPDebuffBar(gem.next_pid())
        gem.actionqueue[enemy_id] = GPActionQueue(gem.next_pid())

    # ----- lookups ------------------------------------------------------

    def _player(self) -> int:
        if self.gem.player_id is None:
            raise LookupError("no player entity")
        return self.gem.player_id

    def _enemy(self) -> int:
        enemy = self.gem.get_enemy()
        if enemy is None:
            raise LookupError("no enemy entity")
        return enemy

    def _scale(self) -> int:
        return max(
            int(math.floor(min(self.window_width / 1920, self.window_height / 1080))),
            1,
        )

    def player_stat(self, n: int) -> Optional[int]:
        """Value of the player stat shown in panel row ``n``, if any."""
        stats = self.gem.stats[self._player()]
        return {
            2: stats.chaos,
            3: stats.solidity,
            4: stats.vitality,
            5: stats.haste,
            6: stats.will,
        }.get(n)

    # ----- systems ------------------------------------------------------

    def s_debuffs(self) -> None:
        """Apply queued spells and let enemy debuffs deal their damage."""
        self._state_checker()

        for enemy in self.gem.get_all_enemies():
            bar = self.gem.debuffbars.get(enemy)
            if bar is None or not bar.debuffs:
                continue

            bar.debuffs = [d for d in bar.debuffs if d.time_left > 0]

            for debuff in bar.debuffs:
                spell = get_spelldata_from_string(debuff.name)
                if spell is not None and enemy in self.gem.stats:
                    dt_sec = self.delta_time_ms / 1000.0
                    debuff.pending_damage += spell.dps * dt_sec * spell.coefficient
                    whole = int(math.floor(debuff.pending_damage))
                    debuff.pending_damage -= whole
                    self.damage_queue.append(
                        Damage(whole, enemy, self._player(), debuff.name)
                    )
                debuff.time_left = max(debuff.time_left - self.delta_time_ms, 0)

    def s_damage(self) -> None:
        """Resolve the damage queue against entity health."""
        for event in self.damage_queue:
            stats = self.gem.stats.get(event.target)
            if stats is not None:
                if stats.health_curr > event.amt:
                    logger.debug("%d damage to entity %d", event.amt, event.target)
                    stats.health_curr -= event.amt
                else:
                    stats.health_curr = 0
            self._floating_combat_text(event.amt, event.damage_type)
        self.damage_queue.clear()

    def s_mortality(self) -> None:
        """Mark every entity with no health left as dead."""
        for entity_id, stats in self.gem.stats.items():
            if stats.health_curr == 0:
                mortality = self.gem.mortalities.get(entity_id)
                if mortality is not None:
                    mortality.is_alive = False

    def _floating_combat_text(self, amt: int, dtype: str) -> None:
        if amt == 0:
            return
        scale = self._scale()
        color = get_color_from_type(dtype) or WHITE
        px, py = random_point_in_rect(400 * scale, 200 * scale)
        self.floating_texts.append(
            FloatingText(
                value=str(amt),
                position=(float(px + 1400 * scale), float(py + 200 * scale)),
                velocity=(0.0, -30.0),
                scale=50 * scale,
                color=color,
                outline=BLACK,
                lifetime=1.0,
            )
        )

    def _state_checker(self) -> None:
        if self.state[STATE_MIASMA] == 1:
            self._miasma()
            self.state[STATE_MIASMA] = 0
        if self.state[STATE_INFERNUM] == 1:
            self._infernum()
            self.state[STATE_INFERNUM] = 0

    def _miasma(self) -> None:
        enemy = self._enemy()
        pid = self.gem.next_pid()
        self.gem.debuffbars[enemy].debuffs.append(
            GPDebuff(
                id=pid,
                name="miasma",
                total_duration=4000,
                time_left=4000,
                stacks=1,
                pending_damage=0.0,
            )
        )
        self._add_icon_to_debuffbar("miasma")

    def _infernum(self) -> None:
        enemy = self._enemy()
        pid = self.gem.next_pid()
        spell = get_spell_data(Spells.INFERNUM)
        self.damage_queue.append(
            Damage(spell.upfront_dam, enemy, self._player(), "infernum")
        )
        self.gem.debuffbars[enemy].debuffs.append(
            GPDebuff(
                id=pid,
                name="infernum",
                total_duration=spell.duration * 1000,
                time_left=spell.duration * 1000,
                stacks=1,
                pending_damage=0.0,
            )
        )
        self._add_icon_to_debuffbar("infernum")

    def _add_icon_to_debuffbar(self, spellname: str) -> None:
        scale = get_scale()
        enemy = self._enemy()
        slot = len(self.gem.debuffbars[enemy].debuffs) - 1
        duration = float(get_spelldata_from_string(spellname).duration)
        self.anims.add_animation_instance(
            AnimatedSprite(
                texture_id=spellname,
                frame_width=64,
                frame_height=64,
                total_frames=1,
                current_frame=0,
                frame_time=duration,
                position=(1403 * scale + slot * 64 * scale, 647 * scale),
                inanimate=True,
                strata=30,
                desired_width=64 * scale,
                desired_height=64 * scale,
                play_once=True,
                lifetime=duration,
            )
        )

    def update_game(self) -> None:
        """Move combat text, advance the player's cast and spawn projectiles."""
        dt = self.delta_time
        for ft in self.floating_texts:
            ft.position = (
                ft.position[0] + ft.velocity[0] * dt,
                ft.position[1] + ft.velocity[1] * dt,
            )
            ft.lifetime -= dt
        self.floating_texts = [ft for ft in self.floating_texts if ft.lifetime > 0.0]

        if self.gem.player_id is not None:
            queue = self.gem.actionqueue.get(self.gem.player_id)
            if queue is not None and queue.queue:
                current = queue.queue[0]
                dt_ms = int(dt * 1000.0)
                current.time_remaining = max(current.time_remaining - dt_ms, 0)
                if current.time_remaining == 0:
                    if current.action_tag == "miasma":
                        self.state[STATE_MIASMA] = 1
                    elif current.action_tag == "infernum":
                        self.state[STATE_INFERNUM] = 1
                    queue.queue.pop(0)

        if not self.miasma_has_spawned:
            cast = next(
                (s for s in self.anims.active if s.texture_id == "Miasma_anim2"), None
            )
            if (
                cast is not None
                and cast.current_frame == cast.total_frames - 2
                and cast.play_once
            ):
                self.miasma_has_spawned = True
                scale = get_scale()
                self.anims.add_animation_instance(
                    AnimatedSprite(
                        texture_id="miasma_proj_anim2",
                        frame_width=64,
                        frame_height=64,
                        total_frames=2,
                        current_frame=0,
                        frame_time=0.2,
                        position=(1050 * scale, 250 * scale),
                        inanimate=False,
                        strata=50,
                        desired_width=256 * scale,
                        desired_height=256 * scale,
                        play_once=False,
                        velocity=(600.0, 0.0),
                        lifetime=1.2,
                    )
                )

        if not any(s.texture_id == "miasma_proj_anim2" for s in self.anims.active):
            self.miasma_has_spawned = False

    def tick(self, dt: float) -> None:
        """Advance the clocks by ``dt`` seconds and run every game system once."""
        self.delta_time = dt
        self.delta_time_ms = max(int(dt * 1000), 1)
        self.time_elapsed += dt
        self.time_elapsed_ms += self.delta_time_ms

        self.s_mortality()
        self.s_debuffs()
        self.s_damage()
        self.update_game()
        self.anims.update(dt)