"""Scene-file sections for the blocks, platforms and background layers.

Every function takes one layer of a tilemap, a grid of tile ids indexed
``[x][y]`` with ``None`` for empty cells, and returns the text of the
matching scene entries.  The grid passed in is never modified.
"""

from __future__ import annotations

import struct
from typing import Callable, Iterator, Optional, Protocol

from levelsmith.tileset import (
    SPRITESHEET_CELL_X,
    SPRITESHEET_CELL_Y,
    Tile,
    Tileset,
    TileType,
    get_tile_data,
)

Grid = list[list[Optional[int]]]

_RED_TINT = "tint = (255,0,0,255)\n"
_GREEN_TINT = "tint = (0,255,0,255)\n"

_GRASS_PHASE_DIFF = 0.3
_STAR_MIN_DURATION = 20
_STAR_MAX_DURATION = 100
_STAR_DURATION_UNIT = 100.0


class RandomSource(Protocol):
    """Anything with ``randint`` such as :class:`random.Random`."""

    def randint(self, a: int, b: int) -> int: ...


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _float_text(value: float) -> str:
    return f"{_f32(value):.6f}"


def _pos_line(x: int, y: int) -> str:
    return f"pos = ({x * SPRITESHEET_CELL_X},{y * SPRITESHEET_CELL_Y})\n"


def _coords_text(x: int, y: int) -> str:
    return f"({x},{y})"


def _tiles(cells: Grid, tileset: Tileset) -> Iterator[tuple[int, int, Tile]]:
    """Yield (x, y, tile) for every filled cell, column by column."""
    for x, column in enumerate(cells):
        for y, tile_id in enumerate(column):
            if tile_id is not None:
                yield x, y, get_tile_data(tileset, tile_id)


def _tiles_of_type(
    cells: Grid, tileset: Tileset, tile_type: TileType
) -> Iterator[tuple[int, int, Tile]]:
    return ((x, y, tile) for x, y, tile in _tiles(cells, tileset) if tile.type is tile_type)


def _copy(cells: Grid) -> Grid:
    return [list(column) for column in cells]


def _first_cell(
    grid: Grid, accept: Callable[[int], bool]
) -> Optional[tuple[int, int]]:
    for x, column in enumerate(grid):
        for y, tile_id in enumerate(column):
            if tile_id is not None and accept(tile_id):
                return x, y
    return None


def _sprite_entry(x: int, y: int, coords: tuple[int, int], tint: str) -> str:
    return (
        "[sprite]\n"
        + _pos_line(x, y)
        + f"atlas_coords = {_coords_text(*coords)}\n"
        + tint
        + "\n"
    )


def blocks_sprites_text(cells: Grid) -> str:
    """Return a red sprite for every block tile."""
    return "".join(
        _sprite_entry(x, y, tile.spritesheet_coords, _RED_TINT)
        for x, y, tile in _tiles(cells, Tileset.BLOCKS)
    )


def _take_block(grid: Grid, x0: int, y0: int) -> str:
    """Remove the rectangle of blocks starting at a cell and describe it."""
    column = grid[x0]
    height = 0
    while y0 + height < len(column) and column[y0 + height] is not None:
        column[y0 + height] = None
        height += 1

    rows = range(y0, y0 + height)
    width = 1
    for next_column in grid[x0 + 1 :]:
        if any(next_column[y] is None for y in rows):
            break
        for y in rows:
            next_column[y] = None
        width += 1

    return (
        "[physics_body]\n"
        + _pos_line(x0, y0)
        + "type = fixed\n"
        + f"collision_box = (0,0,{width * SPRITESHEET_CELL_X},"
        f"{height * SPRITESHEET_CELL_Y})\n"
        + "collision_layer = 00000100\n"
    )


def physics_bodies_text(cells: Grid) -> str:
    """Merge block tiles into rectangular fixed bodies and describe them."""
    grid = _copy(cells)
    parts: list[str] = []
    while (start := _first_cell(grid, lambda _id: True)) is not None:
        parts.append(_take_block(grid, *start))
        parts.append("\n")
    return "".join(parts)


def _is_platform(tile_id: int) -> bool:
    return get_tile_data(Tileset.INTERACT, tile_id).type is TileType.PLATFORM


def platform_sprites_text(cells: Grid) -> str:
    """Return a red sprite for every platform tile of the interact layer."""
    return "".join(
        _sprite_entry(x, y, tile.spritesheet_coords, _RED_TINT)
        for x, y, tile in _tiles_of_type(cells, Tileset.INTERACT, TileType.PLATFORM)
    )


def _take_platform(grid: Grid, x0: int, y0: int) -> str:
    """Remove the run of platforms starting at a cell and describe it."""
    length = 0
    for column in grid[x0:]:
        tile_id = column[y0]
        if tile_id is None or not _is_platform(tile_id):
            break
        column[y0] = None
        length += 1
    return (
        "[physics_body]\n"
        + _pos_line(x0, y0)
        + "type = fixed\n"
        + "one_way = true\n"
        + f"collision_box = (0,0,{length * SPRITESHEET_CELL_X},"
        f"{SPRITESHEET_CELL_Y // 2})\n"
        + "collision_layer = 00001000\n"
    )


def platform_bodies_text(cells: Grid) -> str:
    """Merge horizontal runs of platforms into one-way bodies."""
    grid = _copy(cells)
    parts: list[str] = []
    while (start := _first_cell(grid, _is_platform)) is not None:
        parts.append(_take_platform(grid, *start))
        parts.append("\n")
    return "".join(parts)


def bg_props_text(cells: Grid) -> str:
    """Return a green sprite for every background prop."""
    return "".join(
        _sprite_entry(x, y, tile.spritesheet_coords, _GREEN_TINT)
        for x, y, tile in _tiles_of_type(cells, Tileset.BACKGROUND, TileType.PROP)
    )


def _two_frames(tile: Tile) -> tuple[str, str]:
    cx, cy = tile.spritesheet_coords
    return _coords_text(cx, cy), _coords_text(cx, cy + 1)


def bg_grass_text(cells: Grid) -> str:
    """Return an animated sprite for every grass tile, phased by column."""
    parts: list[str] = []
    for x, y, tile in _tiles_of_type(cells, Tileset.BACKGROUND, TileType.GRASS):
        frame_1, frame_2 = _two_frames(tile)
        phase = _f32(_f32(x) * _f32(_GRASS_PHASE_DIFF))
        parts.append(
            "[sprite]\n"
            + _pos_line(x, y)
            + f"atlas_coords = {frame_1}\n"
            + _RED_TINT
            + f"animation = ({frame_1},1.5);({frame_2},1.0);"
            f"({frame_1},1.0);({frame_2},0.75)\n"
            + f"animation_starting_phase = {_float_text(phase)}\n"
            + "\n"
        )
    return "".join(parts)


def bg_waterfall_text(cells: Grid) -> str:
    """Return a two-frame animated sprite for every waterfall tile."""
    parts: list[str] = []
    for x, y, tile in _tiles_of_type(cells, Tileset.BACKGROUND, TileType.WATERFALL):
        frame_1, frame_2 = _two_frames(tile)
        parts.append(
            "[sprite]\n"
            + _pos_line(x, y)
            + f"atlas_coords = {frame_1}\n"
            + _GREEN_TINT
            + f"animation = ({frame_1},0.15);({frame_2},0.15)\n"
            + "\n"
        )
    return "".join(parts)


def bg_stars_text(cells: Grid, rng: RandomSource) -> str:
    """Return a twinkling sprite for every star with random frame times."""
    parts: list[str] = []
    for x, y, tile in _tiles_of_type(cells, Tileset.BACKGROUND, TileType.STAR):
        frame_1, frame_2 = _two_frames(tile)
        durations = [
            _float_text(
                _f32(rng.randint(_STAR_MIN_DURATION, _STAR_MAX_DURATION))
                / _f32(_STAR_DURATION_UNIT)
            )
            for _ in range(4)
        ]
        frames = (frame_1, frame_2, frame_1, frame_2)
        animation = ";".join(
            f"({frame},{duration})" for frame, duration in zip(frames, durations)
        )
        parts.append(
            "[sprite]\n"
            + _pos_line(x, y)
            + f"atlas_coords = {frame_1}\n"
            + _GREEN_TINT
            + f"animation = {animation}\n"
            + "\n"
        )
    return "".join(parts)


def _emitters_text(cells: Grid, tile_type: TileType, header: str) -> str:
    return "".join(
        f"[{header}]\n" + _pos_line(x, y) + "\n"
        for x, y, _tile in _tiles_of_type(cells, Tileset.BACKGROUND, tile_type)
    )


def bg_leaves_text(cells: Grid) -> str:
    """Return a falling-leaves emitter for every leaves tile."""
    return _emitters_text(cells, TileType.LEAVES, "falling_leaves")


def bg_drips_text(cells: Grid) -> str:
    """Return a water-drip emitter for every drip tile."""
    return _emitters_text(cells, TileType.DRIP, "water_drip")


def bg_puffs_text(cells: Grid) -> str:
    """Return a puff emitter for every puff tile."""
    return _emitters_text(cells, TileType.PUFF, "puff")