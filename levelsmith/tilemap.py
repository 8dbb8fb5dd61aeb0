"""The painted level grid: one layer of tile ids per tileset."""

from __future__ import annotations

from typing import Optional

from levelsmith.tileset import (
    CELL_SIZE_X,
    CELL_SIZE_Y,
    TILEMAP_ORIGIN_X,
    TILEMAP_ORIGIN_Y,
    TILEMAP_PIXEL_SIZE_X,
    TILEMAP_PIXEL_SIZE_Y,
    TILEMAP_SIZE_X,
    TILEMAP_SIZE_Y,
    Tileset,
)

# Offset added to a tile id to store it as one character; empty is -1.
_DATA_OFFSET = 50
_EMPTY_CODE = -1

PLAYER_TILE_ID = 0
GOAL_TILE_ID = 1
WATER_TILE_ID = 2
OPENING_TILE_ID = 31
CREDITS_TILE_ID = 32
TEXT_1_TILE_ID = 33
TEXT_2_TILE_ID = 34
TEXT_3_TILE_ID = 35

# Interact tiles that may appear at most once on a map.
UNIQUE_TILE_IDS = frozenset(
    {
        PLAYER_TILE_ID,
        GOAL_TILE_ID,
        WATER_TILE_ID,
        OPENING_TILE_ID,
        CREDITS_TILE_ID,
        TEXT_1_TILE_ID,
        TEXT_2_TILE_ID,
        TEXT_3_TILE_ID,
    }
)

DATA_LENGTH = len(Tileset) * TILEMAP_SIZE_X * TILEMAP_SIZE_Y

Grid = list[list[Optional[int]]]


def _empty_grid() -> Grid:
    return [[None] * TILEMAP_SIZE_Y for _ in range(TILEMAP_SIZE_X)]


def cell_at_pixel(x: int, y: int) -> Optional[tuple[int, int]]:
    """Return the tilemap cell under a window pixel, or None if outside."""
    if not (
        TILEMAP_ORIGIN_X <= x < TILEMAP_ORIGIN_X + TILEMAP_PIXEL_SIZE_X
        and TILEMAP_ORIGIN_Y <= y < TILEMAP_ORIGIN_Y + TILEMAP_PIXEL_SIZE_Y
    ):
        return None
    return (
        (x - TILEMAP_ORIGIN_X) // CELL_SIZE_X,
        (y - TILEMAP_ORIGIN_Y) // CELL_SIZE_Y,
    )


class Tilemap:
    """A level of TILEMAP_SIZE_X by TILEMAP_SIZE_Y cells in every tileset.

    Cells hold a tile id or None when empty.  Unique interact tiles such as
    the player or the goal are kept to a single cell: placing one again
    removes the previous copy.
    """

    def __init__(self) -> None:
        self._cells: dict[Tileset, Grid] = {ts: _empty_grid() for ts in Tileset}
        self._unique: dict[int, tuple[int, int]] = {}

    @staticmethod
    def _check_cell(x: int, y: int) -> None:
        if not (0 <= x < TILEMAP_SIZE_X and 0 <= y < TILEMAP_SIZE_Y):
            raise IndexError(f"cell ({x}, {y}) is outside the tilemap")

    def set_tile(
        self, tileset: Tileset, x: int, y: int, tile_id: Optional[int]
    ) -> None:
        """Put a tile in a cell; None empties it."""
        self._check_cell(x, y)
        grid = self._cells[tileset]
        if tileset is Tileset.INTERACT:
            current = grid[x][y]
            if tile_id is None and current in UNIQUE_TILE_IDS:
                self._unique.pop(current, None)
            if tile_id in UNIQUE_TILE_IDS:
                previous = self._unique.get(tile_id)
                if previous is not None:
                    px, py = previous
                    grid[px][py] = None
                self._unique[tile_id] = (x, y)
        grid[x][y] = tile_id

    def get_tile(self, tileset: Tileset, x: int, y: int) -> Optional[int]:
        """Return the tile id in a cell, or None if it is empty."""
        self._check_cell(x, y)
        return self._cells[tileset][x][y]

    def get_cells(self) -> dict[Tileset, Grid]:
        """Return a copy of every layer, indexed [x][y]."""
        return {ts: [list(column) for column in grid] for ts, grid in self._cells.items()}

    def to_data(self) -> str:
        """Encode the map as one character per cell, tileset by tileset."""
        return "".join(
            chr((_EMPTY_CODE if tile_id is None else tile_id) + _DATA_OFFSET)
            for ts in Tileset
            for column in self._cells[ts]
            for tile_id in column
        )

    def load_data(self, data: str) -> None:
        """Replace the map with one decoded from the start of ``data``.

        Characters beyond the encoded map are ignored.
        """
        if len(data) < DATA_LENGTH:
            raise ValueError(
                f"tilemap data needs {DATA_LENGTH} characters, got {len(data)}"
            )
        cells: dict[Tileset, Grid] = {}
        unique: dict[int, tuple[int, int]] = {}
        chars = iter(data)
        for ts in Tileset:
            grid = _empty_grid()
            for x in range(TILEMAP_SIZE_X):
                for y in range(TILEMAP_SIZE_Y):
                    code = ord(next(chars)) - _DATA_OFFSET
                    tile_id = None if code == _EMPTY_CODE else code
                    grid[x][y] = tile_id
                    if ts is Tileset.INTERACT and tile_id in UNIQUE_TILE_IDS:
                        unique[tile_id] = (x, y)
            cells[ts] = grid
        self._cells = cells
        self._unique = unique