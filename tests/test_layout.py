import pytest

from periodicity.layout import (
    build_interface,
    create_run_button,
    create_side_buttons,
    init_gui,
    spawn_player,
)
from periodicity.properties import ClickAction, PropertiesEnum
from periodicity.world import World


def _built_world():
    world = World()
    build_interface(world)
    return world


def test_run_button_geometry_and_click_target():
    world = World()
    eid = create_run_button(world)
    em = world.em
    rect = em.rectangles[eid][-1]
    assert (rect.x, rect.y, rect.width, rect.height) == (10, 61, 200, 50)
    assert em.button_rect(eid) is rect
    assert em.clickables[eid].action is ClickAction.RUN_BUTTON
    assert em.tooltip_data[eid].header == "Run Code Button"
    assert rect.hovered is False and rect.draw


def test_side_buttons_tags_and_actions():
    world = World()
    ids = create_side_buttons(world)
    em = world.em
    tags = [em.ids[eid].tag for eid in ids]
    assert tags == [f"{c}_button" for c in "abcdefgh"]
    actions = [em.clickables[eid].action for eid in ids]
    assert actions == [
        ClickAction.A, ClickAction.B, ClickAction.C, ClickAction.D,
        ClickAction.E, ClickAction.F, ClickAction.G, ClickAction.H,
    ]
    for eid in ids:
        assert em.button_rect(eid) is em.rectangles[eid][-1]


def test_side_buttons_form_a_regular_grid():
    world = World()
    ids = create_side_buttons(world)
    rects = [world.em.rectangles[eid][-1] for eid in ids]
    widths = {r.width for r in rects}
    assert len(widths) == 1
    width = widths.pop()
    for row in range(2):
        row_rects = rects[row * 4:(row + 1) * 4]
        assert len({r.y for r in row_rects}) == 1
        xs = [r.x for r in row_rects]
        assert [b - a for a, b in zip(xs, xs[1:])] == [width + 2] * 3
    assert rects[4].y - rects[0].y == rects[0].height + 2
    assert rects[0].x == rects[4].x


def test_side_buttons_fit_textbox_region():
    world = World()
    tb = world.em.add_entity("textbox_encap")
    world.em.add_property_to_entity(PropertiesEnum.RECT, tb)
    box = world.em.rectangles[tb][0]
    box.x = 300
    box.width = 600
    ids = create_side_buttons(world)
    last_col = world.em.rectangles[ids[3]][-1]
    assert last_col.x + last_col.width <= box.x + box.width
    first = world.em.rectangles[ids[0]][-1]
    assert first.x == 220


def test_side_buttons_too_narrow_raises():
    world = World()
    tb = world.em.add_entity("textbox_encap")
    world.em.add_property_to_entity(PropertiesEnum.RECT, tb)
    box = world.em.rectangles[tb][0]
    box.x = 0
    box.width = 0
    with pytest.raises(ValueError):
        create_side_buttons(world)


def test_g_and_h_buttons_have_no_label():
    world = World()
    ids = create_side_buttons(world)
    texts = {world.em.ids[eid].tag: world.em.texts[eid][-1] for eid in ids}
    assert texts["a_button"].text == "A"
    assert texts["a_button"].draw
    assert not texts["g_button"].draw
    assert not texts["h_button"].draw
    assert world.em.tooltip_data[ids[1]].body == "B button functionality."


def test_spawn_player_builds_panel():
    world = World()
    world.init_game()
    player = spawn_player(world)
    em = world.em
    assert em.get_player_id() == player
    assert em.healthbars[player].gem_entity_id == world.gem.player_id
    assert em.castbars[player].icon_name == "miasma"
    assert em.castbars[player].cast_progress == pytest.approx(0.8)
    assert em.tooltip_data[player].header == "Miasma"
    assert em.tooltip_data[player].icon == "miasma"
    assert len(em.state_vecs[player].state_vec) == 500
    assert em.texts[player][0].text == "Player Info"
    assert [s.texture_id for s in world.anims.active] == ["my_warlock"]


def test_init_gui_links_enemy_healthbar():
    world = World()
    world.init_game()
    init_gui(world)
    em = world.em
    region = em.get_id_by_tag("enemy_info_region")
    enemy = world.gem.get_entity_id_from_name("alpine_terror")
    assert em.healthbars[region].gem_entity_id == enemy
    assert em.texts[region][0].text == "Alpine Terror"
    assert em.get_id_by_tag("tooltip") in em.rectangles
    assert em.get_id_by_tag("landscape") in em.rectangles


def test_init_gui_creates_missing_enemy_entity():
    world = World()
    init_gui(world)
    region = world.em.get_id_by_tag("enemy_info_region")
    linked = world.em.healthbars[region].gem_entity_id
    assert world.gem.gids[linked].tag == "alpine_terror"


def test_init_gui_sprites():
    world = World()
    world.init_game()
    init_gui(world)
    ids = [s.texture_id for s in world.anims.active]
    assert ids == [
        "rainier_background_2", "Alpe", "ground_overlay3", "tree_icon", "stats",
    ]
    assert all(s.inanimate for s in world.anims.active)


def test_build_interface_buttons_and_entities():
    world = _built_world()
    em = world.em
    buttons = em.get_all_buttons()
    assert len(buttons) == 9
    assert world.gem.player_id is not None
    assert world.gem.get_enemy() is not None
    assert em.get_player_id() is not None
    textures = {s.texture_id for s in world.anims.active}
    assert {"my_warlock", "Alpe", "stats"} <= textures


def test_build_interface_buttons_are_clickable_within_rects():
    world = _built_world()
    em = world.em
    for eid in em.get_all_buttons():
        rect = em.button_rect(eid)
        assert rect.width > 0 and rect.height > 0
        assert em.clickables[eid].clickable
        assert rect.strata == 10
        assert rect.pressed_color is not None and rect.hovered_color is not None