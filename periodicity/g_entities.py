"""Store of gameplay entities and their properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from periodicity.g_properties import (
    Allegiances,
    GPAction,
    GPActionQueue,
    GPAllegiance,
    GPBuff,
    GPBuffBar,
    GPDebuff,
    GPDebuffBar,
    GPId,
    GPLevel,
    GPMortality,
    GPStats,
    GPTarget,
)


@dataclass
class GameEntityManager:
    """Gameplay entities keyed by entity id, one map per property kind."""

    gids: dict[int, GPId] = field(default_factory=dict)
    mortalities: dict[int, GPMortality] = field(default_factory=dict)
    allegiances: dict[int, GPAllegiance] = field(default_factory=dict)
    stats: dict[int, GPStats] = field(default_factory=dict)
    targets: dict[int, GPTarget] = field(default_factory=dict)
    buffs: dict[int, GPBuff] = field(default_factory=dict)
    buffbars: dict[int, GPBuffBar] = field(default_factory=dict)
    debuffs: dict[int, GPDebuff] = field(default_factory=dict)
    debuffbars: dict[int, GPDebuffBar] = field(default_factory=dict)
    actions: dict[int, GPAction] = field(default_factory=dict)
    actionqueue: dict[int, GPActionQueue] = field(default_factory=dict)
    levels: dict[int, GPLevel] = field(default_factory=dict)
    texture_to_entity: dict[str, int] = field(default_factory=dict)
    player_id: Optional[int] = None
    _entity_counter: int = field(default=0, repr=False)
    _property_counter: int = field(default=0, repr=False)

    def get_entity_id_from_name(self, tag: str) -> int:
        """Id of the first entity with ``tag``; a new entity is created if none has it."""
        found = next((eid for eid, gid in self.gids.items() if gid.tag == tag), None)
        return found if found is not None else self.add_entity(tag)

    def get_enemy(self) -> Optional[int]:
        """The first entity allied with the enemy, if any."""
        return next(iter(self.get_all_enemies()), None)

    def get_all_enemies(self) -> list[int]:
        return [
            eid
            for eid, allegiance in self.allegiances.items()
            if allegiance.allegiance is Allegiances.ENEMY
        ]

    def add_entity(self, tag: Optional[str] = None) -> int:
        """Create an entity; without a tag it is tagged ``entity_<id>``."""
        eid = self.next_eid()
        self.gids[eid] = GPId(eid, tag if tag is not None else f"entity_{eid}")
        return eid

    def next_eid(self) -> int:
        eid = self._entity_counter
        self._entity_counter += 1
        return eid

    def next_pid(self) -> int:
        pid = self._property_counter
        self._property_counter += 1
        return pid