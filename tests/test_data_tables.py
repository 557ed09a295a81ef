from squaregame.data_tables import (
    QUAD_VERTEX_COUNT,
    EntityData,
    SquareType,
    initialize_entity_data,
)
from squaregame.utility import RED, WHITE, YELLOW


def test_every_square_type_has_data():
    assert set(initialize_entity_data()) == set(SquareType)


def test_stats_match_table():
    for data in initialize_entity_data().values():
        assert data.hitpoints == 100
        assert data.speed == 200.0


def test_quads_cover_sixteen_pixel_square():
    for data in initialize_entity_data().values():
        assert len(data.quad) == QUAD_VERTEX_COUNT
        corners = {vertex.position for vertex in data.quad}
        assert corners == {(0.0, 0.0), (16.0, 0.0), (16.0, 16.0), (0.0, 16.0)}


def test_player_is_yellow_and_enemy_red():
    table = initialize_entity_data()
    assert {v.color for v in table[SquareType.SELF].quad} == {YELLOW}
    assert {v.color for v in table[SquareType.ENEMY0].quad} == {RED}


def test_tables_are_independent():
    first = initialize_entity_data()
    first[SquareType.SELF].hitpoints = 1
    assert initialize_entity_data()[SquareType.SELF].hitpoints == 100


def test_default_entity_data_has_white_quad():
    data = EntityData()
    assert len(data.quad) == QUAD_VERTEX_COUNT
    assert {v.color for v in data.quad} == {WHITE}
    assert data.hitpoints == 0