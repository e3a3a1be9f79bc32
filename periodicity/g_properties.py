"""Gameplay properties: stats, allegiances, buffs, actions and spells."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from periodicity.palette import INFERNUM_COLOR, MAIN_OUTLINE_CLR, MIASMA_COLOR
from periodicity.properties import ColorPair


class Allegiances(Enum):
    PLAYER = auto()
    ENEMY = auto()
    NEUTRAL = auto()


class StatsEnum(Enum):
    CHAOS = auto()
    SOLIDITY = auto()
    VITALITY = auto()
    HASTE = auto()
    WILL = auto()
    VOLATILITY = auto()


class Actions(Enum):
    CASTING_SPELL = auto()
    TRAVELING = auto()
    MINING = auto()


class Spells(Enum):
    MIASMA = auto()
    INFERNUM = auto()
    UMBRA_MORTIS = auto()


@dataclass
class GPId:
    id: int
    tag: str


@dataclass
class GPAllegiance:
    id: int
    allegiance: Allegiances


@dataclass
class GPMortality:
    id: int
    is_alive: bool = True


@dataclass
class GPStats:
    id: int
    health_max: int
    health_curr: int
    chaos: int
    solidity: int
    vitality: int
    haste: int
    will: int
    volatility: int


@dataclass
class GPTarget:
    id: int
    target_entity: Optional[int] = None


@dataclass
class GPBuff:
    id: int
    name: str
    duration: int
    stacks: int


@dataclass
class GPBuffBar:
    id: int
    buffs: list[GPBuff] = field(default_factory=list)


@dataclass
class GPDebuff:
    id: int
    name: str
    total_duration: int
    time_left: int
    stacks: int
    pending_damage: float = 0.0


@dataclass
class GPDebuffBar:
    id: int
    debuffs: list[GPDebuff] = field(default_factory=list)


@dataclass
class GPAction:
    id: int
    action: Actions
    action_tag: str
    time_action_takes: int
    time_remaining: int
    spell: Optional[Spells] = None


@dataclass
class GPActionQueue:
    id: int
    queue: list[GPAction] = field(default_factory=list)


@dataclass(frozen=True)
class SpellData:
    icon: str
    colors: ColorPair
    upfront_dam: int
    coefficient: int
    dps: int
    duration: int


@dataclass
class GPLevel:
    id: int
    curr_level: int
    curr_xp: int
    next_level_xp: int


_SPELL_NAMES = {
    "miasma": Spells.MIASMA,
    "Miasma": Spells.MIASMA,
    "infernum": Spells.INFERNUM,
    "Infernum": Spells.INFERNUM,
}


def get_spelldata_from_string(spell: str) -> Optional[SpellData]:
    """Spell data for a spell name, or None if the name is unknown."""
    found = _SPELL_NAMES.get(spell)
    return get_spell_data(found) if found is not None else None


def get_spell_data(spell: Spells) -> Optional[SpellData]:
    """Spell data for a spell, or None for spells without data."""
    if spell is Spells.MIASMA:
        return SpellData(
            icon="miasma",
            colors=ColorPair.from_colors(MIASMA_COLOR, MAIN_OUTLINE_CLR),
            upfront_dam=0,
            coefficient=3,
            dps=5,
            duration=5,
        )
    if spell is Spells.INFERNUM:
        return SpellData(
            icon="infernum",
            colors=ColorPair.from_colors(INFERNUM_COLOR, MAIN_OUTLINE_CLR),
            upfront_dam=5,
            coefficient=2,
            dps=1,
            duration=10,
        )
    return None