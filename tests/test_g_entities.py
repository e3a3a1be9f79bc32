from periodicity.g_entities import GameEntityManager
from periodicity.g_properties import Allegiances, GPAllegiance


def test_add_entity_ids_are_sequential_from_zero():
    gem = GameEntityManager()
    ids = [gem.add_entity(f"e{n}") for n in range(5)]
    assert ids == list(range(5))
    assert [gem.gids[i].tag for i in ids] == [f"e{n}" for n in range(5)]


def test_default_tag():
    gem = GameEntityManager()
    eid = gem.add_entity()
    assert gem.gids[eid].tag == f"entity_{eid}"
    assert gem.gids[eid].id == eid


def test_property_ids_independent_of_entity_ids():
    gem = GameEntityManager()
    gem.add_entity("player")
    gem.add_entity("other")
    assert gem.next_pid() == 0
    assert gem.next_pid() == 1
    assert gem.next_eid() == 2


def test_get_entity_id_from_name_finds_existing():
    gem = GameEntityManager()
    gem.add_entity("player")
    enemy = gem.add_entity("alpine_terror")
    assert gem.get_entity_id_from_name("alpine_terror") == enemy
    assert len(gem.gids) == 2


def test_get_entity_id_from_name_creates_missing():
    gem = GameEntityManager()
    gem.add_entity("player")
    new_id = gem.get_entity_id_from_name("alpine_terror")
    assert gem.gids[new_id].tag == "alpine_terror"
    assert len(gem.gids) == 2
    assert gem.get_entity_id_from_name("alpine_terror") == new_id


def test_no_enemy_when_empty():
    gem = GameEntityManager()
    assert gem.get_enemy() is None
    assert gem.get_all_enemies() == []


def test_enemies_are_found_by_allegiance():
    gem = GameEntityManager()
    player = gem.add_entity("player")
    first = gem.add_entity("a")
    second = gem.add_entity("b")
    gem.allegiances[player] = GPAllegiance(gem.next_pid(), Allegiances.PLAYER)
    gem.allegiances[first] = GPAllegiance(gem.next_pid(), Allegiances.ENEMY)
    gem.allegiances[second] = GPAllegiance(gem.next_pid(), Allegiances.ENEMY)
    assert sorted(gem.get_all_enemies()) == [first, second]
    assert gem.get_enemy() in (first, second)
    assert player not in gem.get_all_enemies()


def test_new_manager_has_no_player():
    gem = GameEntityManager()
    assert gem.player_id is None
    assert gem.stats == {}