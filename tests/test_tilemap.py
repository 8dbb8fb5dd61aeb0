import pytest

from levelsmith.tilemap import (
    CREDITS_TILE_ID,
    DATA_LENGTH,
    GOAL_TILE_ID,
    OPENING_TILE_ID,
    PLAYER_TILE_ID,
    Tilemap,
    cell_at_pixel,
)
from levelsmith.tileset import (
    TILEMAP_ORIGIN_X,
    TILEMAP_ORIGIN_Y,
    TILEMAP_PIXEL_SIZE_X,
    TILEMAP_PIXEL_SIZE_Y,
    TILEMAP_SIZE_X,
    TILEMAP_SIZE_Y,
    Tileset,
)


def test_new_map_is_empty():
    tm = Tilemap()
    cells = tm.get_cells()
    assert set(cells) == set(Tileset)
    for grid in cells.values():
        assert len(grid) == TILEMAP_SIZE_X
        assert all(len(col) == TILEMAP_SIZE_Y for col in grid)
        assert all(v is None for col in grid for v in col)


def test_set_and_get_tile():
    tm = Tilemap()
    tm.set_tile(Tileset.BLOCKS, 3, 5, 12)
    assert tm.get_tile(Tileset.BLOCKS, 3, 5) == 12
    assert tm.get_tile(Tileset.BACKGROUND, 3, 5) is None


def test_out_of_range_cell_raises():
    tm = Tilemap()
    with pytest.raises(IndexError):
        tm.set_tile(Tileset.BLOCKS, TILEMAP_SIZE_X, 0, 1)
    with pytest.raises(IndexError):
        tm.get_tile(Tileset.BLOCKS, 0, -1)


def test_get_cells_is_a_copy():
    tm = Tilemap()
    cells = tm.get_cells()
    cells[Tileset.BLOCKS][0][0] = 7
    assert tm.get_tile(Tileset.BLOCKS, 0, 0) is None


def test_player_is_unique():
    tm = Tilemap()
    tm.set_tile(Tileset.INTERACT, 1, 1, PLAYER_TILE_ID)
    tm.set_tile(Tileset.INTERACT, 4, 2, PLAYER_TILE_ID)
    assert tm.get_tile(Tileset.INTERACT, 1, 1) is None
    assert tm.get_tile(Tileset.INTERACT, 4, 2) == PLAYER_TILE_ID


def test_unique_only_applies_to_interact_layer():
    tm = Tilemap()
    tm.set_tile(Tileset.BLOCKS, 1, 1, PLAYER_TILE_ID)
    tm.set_tile(Tileset.BLOCKS, 2, 2, PLAYER_TILE_ID)
    assert tm.get_tile(Tileset.BLOCKS, 1, 1) == PLAYER_TILE_ID
    assert tm.get_tile(Tileset.BLOCKS, 2, 2) == PLAYER_TILE_ID


def test_clearing_unique_forgets_its_place():
    tm = Tilemap()
    tm.set_tile(Tileset.INTERACT, 1, 1, GOAL_TILE_ID)
    tm.set_tile(Tileset.INTERACT, 1, 1, None)
    tm.set_tile(Tileset.INTERACT, 1, 1, 5)
    tm.set_tile(Tileset.INTERACT, 6, 6, GOAL_TILE_ID)
    assert tm.get_tile(Tileset.INTERACT, 1, 1) == 5
    assert tm.get_tile(Tileset.INTERACT, 6, 6) == GOAL_TILE_ID


def test_opening_and_credits_tracked_separately():
    tm = Tilemap()
    tm.set_tile(Tileset.INTERACT, 0, 0, OPENING_TILE_ID)
    tm.set_tile(Tileset.INTERACT, 1, 0, CREDITS_TILE_ID)
    tm.set_tile(Tileset.INTERACT, 1, 0, None)
    tm.set_tile(Tileset.INTERACT, 2, 0, OPENING_TILE_ID)
    assert tm.get_tile(Tileset.INTERACT, 0, 0) is None
    assert tm.get_tile(Tileset.INTERACT, 2, 0) == OPENING_TILE_ID


def test_empty_data_encoding():
    data = Tilemap().to_data()
    assert len(data) == DATA_LENGTH
    assert data == "1" * DATA_LENGTH


def test_data_layout_is_column_major_per_tileset():
    tm = Tilemap()
    tm.set_tile(Tileset.BLOCKS, 0, 1, 0)
    tm.set_tile(Tileset.INTERACT, 1, 0, 0)
    data = tm.to_data()
    assert data[1] == "2"
    assert data[2 * TILEMAP_SIZE_X * TILEMAP_SIZE_Y + TILEMAP_SIZE_Y] == "2"


def test_round_trip():
    tm = Tilemap()
    tm.set_tile(Tileset.BLOCKS, 0, 0, 63)
    tm.set_tile(Tileset.BACKGROUND, 39, 21, 10)
    tm.set_tile(Tileset.INTERACT, 20, 10, PLAYER_TILE_ID)
    other = Tilemap()
    other.load_data(tm.to_data() + "5@hello@@")
    assert other.get_cells() == tm.get_cells()
    assert other.to_data() == tm.to_data()


def test_loaded_unique_tiles_are_tracked():
    tm = Tilemap()
    tm.set_tile(Tileset.INTERACT, 3, 3, PLAYER_TILE_ID)
    other = Tilemap()
    other.load_data(tm.to_data())
    other.set_tile(Tileset.INTERACT, 7, 7, PLAYER_TILE_ID)
    assert other.get_tile(Tileset.INTERACT, 3, 3) is None
    assert other.get_tile(Tileset.INTERACT, 7, 7) == PLAYER_TILE_ID


def test_load_short_data_raises():
    with pytest.raises(ValueError):
        Tilemap().load_data("1" * (DATA_LENGTH - 1))


def test_cell_at_pixel_inside():
    assert cell_at_pixel(TILEMAP_ORIGIN_X, TILEMAP_ORIGIN_Y) == (0, 0)
    last = cell_at_pixel(
        TILEMAP_ORIGIN_X + TILEMAP_PIXEL_SIZE_X - 1,
        TILEMAP_ORIGIN_Y + TILEMAP_PIXEL_SIZE_Y - 1,
    )
    assert last == (TILEMAP_SIZE_X - 1, TILEMAP_SIZE_Y - 1)


@pytest.mark.parametrize(
    "x, y",
    [
        (TILEMAP_ORIGIN_X - 1, TILEMAP_ORIGIN_Y),
        (TILEMAP_ORIGIN_X, TILEMAP_ORIGIN_Y - 1),
        (TILEMAP_ORIGIN_X + TILEMAP_PIXEL_SIZE_X, TILEMAP_ORIGIN_Y),
        (TILEMAP_ORIGIN_X, TILEMAP_ORIGIN_Y + TILEMAP_PIXEL_SIZE_Y),
    ],
)
def test_cell_at_pixel_outside(x, y):
    assert cell_at_pixel(x, y) is None