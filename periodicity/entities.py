"""Store of interface entities and their drawable and clickable properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from periodicity.properties import (
    ClickAction,
    PCastbar,
    PClickable,
    PHealthbar,
    PId,
    PRect,
    PropertiesEnum,
    PState,
    PText,
    PTooltipData,
)


@dataclass
class EntityManager:
    """Interface entities keyed by entity id, one map per property kind.

    Rectangles and texts allow several per entity; the other properties
    allow at most one.
    """

    ids: dict[int, PId] = field(default_factory=dict)
    rectangles: dict[int, list[PRect]] = field(default_factory=dict)
    texts: dict[int, list[PText]] = field(default_factory=dict)
    healthbars: dict[int, PHealthbar] = field(default_factory=dict)
    castbars: dict[int, PCastbar] = field(default_factory=dict)
    state_vecs: dict[int, PState] = field(default_factory=dict)
    tooltip_data: dict[int, PTooltipData] = field(default_factory=dict)
    clickables: dict[int, PClickable] = field(default_factory=dict)
    _entity_counter: int = field(default=0, repr=False)
    _property_counter: int = field(default=0, repr=False)

    def add_entity(self, tag: Optional[str] = None) -> int:
        """Create an entity; without a tag it is tagged ``entity_<id>``."""
        eid = self.next_eid()
        self.ids[eid] = PId(eid, tag if tag is not None else f"entity_{eid}")
        return eid

    def next_eid(self) -> int:
        eid = self._entity_counter
        self._entity_counter += 1
        return eid

    def next_pid(self) -> int:
        pid = self._property_counter
        self._property_counter += 1
        return pid

    def add_property_to_entity(self, prop: PropertiesEnum, entity_id: int) -> None:
        """Attach a property with default values to an entity."""
        adders = {
            PropertiesEnum.RECT: self._add_rect,
            PropertiesEnum.TEXT: self._add_text,
            PropertiesEnum.HEALTHBAR: self._add_healthbar,
            PropertiesEnum.CASTBAR: self._add_castbar,
            PropertiesEnum.STATE: self._add_state,
            PropertiesEnum.TOOLTIP_DATA: self._add_tooltip,
            PropertiesEnum.CLICKABLE: self._add_clickable,
        }
        adders[prop](entity_id)

    def _add_rect(self, entity_id: int) -> None:
        self.rectangles.setdefault(entity_id, []).append(PRect(id=self.next_pid()))

    def _add_text(self, entity_id: int) -> None:
        self.texts.setdefault(entity_id, []).append(PText(id=self.next_pid()))

    def _add_healthbar(self, entity_id: int) -> None:
        self.healthbars[entity_id] = PHealthbar(id=self.next_pid())

    def _add_castbar(self, entity_id: int) -> None:
        self.castbars[entity_id] = PCastbar(id=self.next_pid())

    def _add_state(self, entity_id: int) -> None:
        self.state_vecs[entity_id] = PState(id=self.next_pid())

    def _add_tooltip(self, entity_id: int) -> None:
        self.tooltip_data[entity_id] = PTooltipData(id=self.next_pid())

    def _add_clickable(self, entity_id: int) -> None:
        self.clickables[entity_id] = PClickable(
            id=self.next_pid(), clickable=True, action=ClickAction.RUN_BUTTON
        )

    def purge_entity_by_tag(self, tag: str) -> None:
        """Remove the first entity carrying ``tag``, if there is one."""
        entity_id = self.get_id_by_tag(tag)
        if entity_id is not None:
            self.purge_entity_by_id(entity_id)

    def purge_entity_by_id(self, entity_id: int) -> None:
        """Remove an entity and every property it holds."""
        for store in (
            self.ids,
            self.rectangles,
            self.texts,
            self.healthbars,
            self.castbars,
            self.state_vecs,
            self.tooltip_data,
            self.clickables,
        ):
            store.pop(entity_id, None)

    def get_id_by_tag(self, tag: str) -> Optional[int]:
        return next((eid for eid, pid in self.ids.items() if pid.tag == tag), None)

    def get_player_id(self) -> Optional[int]:
        return self.get_id_by_tag("player")

    def button_rect(self, entity_id: int) -> Optional[PRect]:
        """The rectangle a clickable entity refers to, if it has one."""
        clickable = self.clickables.get(entity_id)
        if clickable is None or clickable.rect_reference_id is None:
            return None
        rects = self.rectangles.get(entity_id, [])
        return next((r for r in rects if r.id == clickable.rect_reference_id), None)

    def rects_by_tag(self, tag: str) -> Optional[list[PRect]]:
        """Rectangles of the first entity carrying ``tag``."""
        entity_id = self.get_id_by_tag(tag)
        if entity_id is None:
            return None
        return self.rectangles.get(entity_id)

    def create_button(self, tag: Optional[str] = None) -> int:
        """Create an entity with a rectangle, text, tooltip and click handler."""
        eid = self.add_entity(tag)
        self._add_rect(eid)
        self._add_text(eid)
        self._add_tooltip(eid)
        self._add_clickable(eid)
        return eid

    def get_all_buttons(self) -> list[int]:
        """Ids of entities that have all the parts of a button."""
        return [
            eid
            for eid in self.ids
            if eid in self.rectangles
            and eid in self.texts
            and eid in self.tooltip_data
            and eid in self.clickables
        ]