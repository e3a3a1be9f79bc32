import copy

import pytest

from periodicity.buttons import branch_from_click
from periodicity.g_properties import Actions, GPActionQueue, GPTarget, Spells
from periodicity.properties import ClickAction
from periodicity.world import World


def _world_with_buttons(*tags):
    world = World()
    world.init_game()
    for tag in tags:
        world.em.create_button(tag)
    return world


def _sprites(world, texture_id):
    return [s for s in world.anims.active if s.texture_id == texture_id]


def test_run_button_marks_pressed():
    world = _world_with_buttons("run_button")
    branch_from_click(world, ClickAction.RUN_BUTTON)
    assert world.em.rects_by_tag("run_button")[0].pressed is True


def test_run_button_missing_raises():
    world = _world_with_buttons()
    with pytest.raises(LookupError):
        branch_from_click(world, ClickAction.RUN_BUTTON)


def test_a_button_queues_miasma_and_targets_enemy():
    world = _world_with_buttons("a_button")
    player = world.gem.player_id
    enemy = world.gem.get_enemy()
    branch_from_click(world, ClickAction.A)

    assert world.em.rects_by_tag("a_button")[0].pressed is True
    assert world.gem.targets[player].target_entity == enemy
    queue = world.gem.actionqueue[player].queue
    assert len(queue) == 1
    assert queue[0].action_tag == "miasma"
    assert queue[0].spell is Spells.MIASMA
    assert queue[0].action is Actions.CASTING_SPELL
    assert queue[0].time_action_takes == 2000
    assert world.gem.actions[player] == queue[0]
    assert world.gem.actions[player] is not queue[0]


def test_a_button_replaces_player_sprite_with_cast_animation():
    from periodicity.animation import AnimatedSprite

    world = _world_with_buttons("a_button")
    world.anims.add_animation_instance(AnimatedSprite("my_warlock", 64, 64))
    branch_from_click(world, ClickAction.A)

    assert _sprites(world, "my_warlock") == []
    cast = _sprites(world, "Miasma_anim2")
    assert len(cast) == 1
    assert cast[0].total_frames == 12
    assert cast[0].frame_time == pytest.approx(2.0 / 12)
    assert cast[0].play_once is True


def test_a_button_twice_keeps_single_cast_animation():
    world = _world_with_buttons("a_button")
    branch_from_click(world, ClickAction.A)
    branch_from_click(world, ClickAction.A)
    assert len(_sprites(world, "Miasma_anim2")) == 1
    assert len(world.gem.actionqueue[world.gem.player_id].queue) == 2


def test_a_button_without_other_entity_queues_nothing():
    world = World()
    world.em.create_button("a_button")
    player = world.gem.add_entity("player")
    world.gem.player_id = player
    world.gem.targets[player] = GPTarget(world.gem.next_pid())
    world.gem.actionqueue[player] = GPActionQueue(world.gem.next_pid())

    branch_from_click(world, ClickAction.A)

    assert world.gem.targets[player].target_entity is None
    assert world.gem.actionqueue[player].queue == []
    assert world.gem.actions == {}
    assert _sprites(world, "Miasma_anim2") == []


def test_b_button_queues_infernum():
    world = _world_with_buttons("b_button")
    player = world.gem.player_id
    branch_from_click(world, ClickAction.B)

    queue = world.gem.actionqueue[player].queue
    assert [a.action_tag for a in queue] == ["infernum"]
    assert queue[0].spell is Spells.INFERNUM
    assert world.gem.targets[player].target_entity == world.gem.get_enemy()
    assert world.em.rects_by_tag("b_button")[0].pressed is True


def test_c_button_damages_enemy_by_five():
    world = _world_with_buttons("c_button")
    enemy = world.gem.get_enemy()
    before = world.gem.stats[enemy].health_curr
    branch_from_click(world, ClickAction.C)
    assert world.gem.stats[enemy].health_curr == before - 5
    assert world.em.rects_by_tag("c_button")[0].pressed is True


def test_c_button_health_never_negative():
    world = _world_with_buttons("c_button")
    enemy = world.gem.get_enemy()
    world.gem.stats[enemy].health_curr = 3
    branch_from_click(world, ClickAction.C)
    assert world.gem.stats[enemy].health_curr == 0


def test_d_button_changes_nothing():
    world = _world_with_buttons("d_button")
    before = copy.deepcopy(world)
    branch_from_click(world, ClickAction.D)
    assert world == before


def test_g_button_opens_stats_panel():
    world = _world_with_buttons("g_button")
    branch_from_click(world, ClickAction.G)

    assert world.state[2] == 1
    assert world.em.rects_by_tag("g_button")[0].pressed is True
    for row in range(1, 7):
        assert world.em.get_id_by_tag(f"encap_{row}") is not None
    assert world.em.get_id_by_tag("encap_icon_1") is None
    chaos_eid = world.em.get_id_by_tag("encap_icon_2")
    assert world.em.texts[chaos_eid][0].text == "chaos: 1"
    assert world.em.texts[chaos_eid][0].draw is True
    for name in ("chaos", "solidity", "vitality", "haste", "will"):
        assert len(_sprites(world, name)) == 1


def test_g_button_second_click_closes_panel():
    world = _world_with_buttons()
    ids_before = dict(world.em.ids)
    branch_from_click(world, ClickAction.G)
    branch_from_click(world, ClickAction.G)

    assert world.state[2] == 0
    assert world.em.ids == ids_before
    assert world.em.rectangles == {}
    assert world.em.texts == {}
    assert world.anims.active == []


def test_h_button_marks_pressed():
    world = _world_with_buttons("h_button")
    branch_from_click(world, ClickAction.H)
    assert world.em.rects_by_tag("h_button")[0].pressed is True