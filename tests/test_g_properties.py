import pytest

from periodicity.g_properties import (
    Actions,
    GPAction,
    GPActionQueue,
    GPBuffBar,
    GPDebuff,
    GPDebuffBar,
    Spells,
    get_spell_data,
    get_spelldata_from_string,
)
from periodicity.palette import INFERNUM_COLOR, MAIN_OUTLINE_CLR, MIASMA_COLOR


def test_miasma_data():
    data = get_spell_data(Spells.MIASMA)
    assert data.icon == "miasma"
    assert (data.upfront_dam, data.coefficient, data.dps, data.duration) == (0, 3, 5, 5)
    assert data.colors.fill == MIASMA_COLOR.rgb
    assert data.colors.outline == MAIN_OUTLINE_CLR.rgb


def test_infernum_data():
    data = get_spell_data(Spells.INFERNUM)
    assert data.icon == "infernum"
    assert (data.upfront_dam, data.coefficient, data.dps, data.duration) == (5, 2, 1, 10)
    assert data.colors.fill == INFERNUM_COLOR.rgb


def test_umbra_mortis_has_no_data():
    assert get_spell_data(Spells.UMBRA_MORTIS) is None


@pytest.mark.parametrize(
    "name,spell",
    [
        ("miasma", Spells.MIASMA),
        ("Miasma", Spells.MIASMA),
        ("infernum", Spells.INFERNUM),
        ("Infernum", Spells.INFERNUM),
    ],
)
def test_lookup_by_name(name, spell):
    assert get_spelldata_from_string(name) == get_spell_data(spell)


@pytest.mark.parametrize("name", ["MIASMA", "umbra_mortis", ""])
def test_unknown_names(name):
    assert get_spelldata_from_string(name) is None


def test_containers_start_empty_and_independent():
    a, b = GPBuffBar(id=0), GPBuffBar(id=1)
    a.buffs.append(object())
    assert b.buffs == []
    assert GPDebuffBar(id=0).debuffs == []
    assert GPActionQueue(id=0).queue == []


def test_debuff_pending_damage_defaults_to_zero():
    debuff = GPDebuff(id=0, name="miasma", total_duration=4000, time_left=4000, stacks=1)
    assert debuff.pending_damage == 0.0


def test_action_equality_for_copies():
    a = GPAction(0, Actions.CASTING_SPELL, "miasma", 2000, 2000, Spells.MIASMA)
    b = GPAction(0, Actions.CASTING_SPELL, "miasma", 2000, 2000, Spells.MIASMA)
    assert a == b
    b.time_remaining = 1000
    assert a.time_remaining == 2000