import itertools
import random

import pytest

from levelsmith.exporter import (
    credits_text,
    export_text,
    goal_text,
    level_text_text,
    opening_text,
    player_text,
    shadows_limit_text,
    spikes_text,
    water_text,
)
from levelsmith.tilemap import Tilemap
from levelsmith.tileset import Tileset, TileType

PLAYER = 0
GOAL = 1
WATER = 2
SPIKE_T = 4
SPIKE_R = 7
PLATFORM = 11
OPENING = 31
CREDITS = 32
TEXT1 = 33
TEXT2 = 34


def _interact(*placements):
    tilemap = Tilemap()
    for x, y, tile_id in placements:
        tilemap.set_tile(Tileset.INTERACT, x, y, tile_id)
    return tilemap.get_cells()[Tileset.INTERACT]


def test_shadows_limit_empty_means_zero():
    assert shadows_limit_text("") == "[shadows_limit]\n0\n"


def test_shadows_limit_value():
    assert shadows_limit_text("3") == "[shadows_limit]\n3\n"


def test_player_text_position():
    assert player_text(_interact((2, 3, PLAYER))) == "[player]\npos = (16,24)\n\n"


def test_water_level_from_row():
    text = water_text(_interact((5, 0, WATER)))
    assert text == "[water]\nwater_level = 0\n\n"


def test_spikes_take_consecutive_ids():
    cells = _interact((0, 0, SPIKE_T), (1, 0, SPIKE_T))
    text = spikes_text(cells, itertools.count())
    assert text.count("[killbox]\n") == 2
    assert "id = 0\n" in text and "id = 1\n" in text
    assert "parent = 0\n" in text and "parent = 1\n" in text
    assert text.count("atlas_coords = (3,4)\n") == 2


def test_spike_right_collision_box():
    text = spikes_text(_interact((0, 0, SPIKE_R)), itertools.count())
    assert "collision_box = (4,0,4,8)\n" in text
    assert text.endswith("tint = (255,0,0,255)\n")


def test_spikes_ignore_other_tiles():
    cells = _interact((0, 0, PLATFORM), (1, 1, PLAYER))
    assert spikes_text(cells, itertools.count()) == ""


def test_goal_uses_given_ids():
    text = goal_text(_interact((1, 1, GOAL)), iter([7]))
    assert text.startswith("[goal]\nid = 7\n")
    assert "parent = 7\n" in text
    assert "((0,4),0.08);((0,5),0.08)" in text
    assert text.endswith("((1,4),0.08)\n\n")


def test_level_text_replaces_spaces():
    text = level_text_text(_interact((0, 0, TEXT1)), TileType.TEXT1, "hello big world")
    assert "content = hello@big@world\n" in text
    assert text.startswith("[text]\n")


def test_level_text_filters_by_type():
    cells = _interact((0, 0, TEXT2))
    assert level_text_text(cells, TileType.TEXT1, "abc") == ""
    assert "content = abc\n" in level_text_text(cells, TileType.TEXT2, "abc")


def test_opening_and_credits_markers():
    cells = _interact((0, 0, OPENING), (3, 3, CREDITS))
    assert opening_text(cells) == "[opening]\n\n"
    assert credits_text(cells) == "[credits]\n\n"


def test_export_empty_map_is_only_shadows():
    cells = Tilemap().get_cells()
    assert export_text(cells, "", "", "", "", random.Random(1)) == "[shadows_limit]\n0\n"


def test_export_shares_ids_between_spikes_and_goal():
    tilemap = Tilemap()
    tilemap.set_tile(Tileset.INTERACT, 0, 0, GOAL)
    tilemap.set_tile(Tileset.INTERACT, 5, 5, SPIKE_T)
    text = export_text(tilemap.get_cells(), "", "", "", "2", random.Random(0))
    killbox = text.index("[killbox]\nid = 0\n")
    goal = text.index("[goal]\nid = 1\n")
    assert killbox < goal
    assert text.endswith("[shadows_limit]\n2\n")


def test_export_section_order_and_no_mutation():
    tilemap = Tilemap()
    tilemap.set_tile(Tileset.BLOCKS, 0, 0, 0)
    tilemap.set_tile(Tileset.BACKGROUND, 1, 1, 0)
    tilemap.set_tile(Tileset.INTERACT, 2, 2, PLATFORM)
    cells = tilemap.get_cells()
    before = {ts: [list(c) for c in grid] for ts, grid in cells.items()}
    text = export_text(cells, "", "", "", "", random.Random(0))
    assert cells == before
    assert text.index("[sprite]") < text.index("[physics_body]")
    assert "one_way = true\n" in text
    assert text.count("[physics_body]") == 2


def test_export_missing_layer_raises():
    cells = Tilemap().get_cells()
    del cells[Tileset.INTERACT]
    with pytest.raises(KeyError):
        export_text(cells, "", "", "", "", random.Random(0))