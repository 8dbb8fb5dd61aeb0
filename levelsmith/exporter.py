"""Scene-file sections for the interact layer and the whole scene export."""

from __future__ import annotations

import itertools
import random
from typing import Iterator, Optional

from levelsmith.sections import (
    RandomSource,
    bg_drips_text,
    bg_grass_text,
    bg_leaves_text,
    bg_props_text,
    bg_puffs_text,
    bg_stars_text,
    bg_waterfall_text,
    blocks_sprites_text,
    physics_bodies_text,
    platform_bodies_text,
    platform_sprites_text,
)
from levelsmith.tileset import (
    EXPORT_SPACE_CHAR,
    SPRITESHEET_CELL_X,
    SPRITESHEET_CELL_Y,
    Tileset,
    TileType,
    get_tile_data,
)

Grid = list[list[Optional[int]]]

_CX = SPRITESHEET_CELL_X
_CY = SPRITESHEET_CELL_Y

# Collision box (x, y, width, height) and atlas cell of every spike kind.
_SPIKES: dict[TileType, tuple[tuple[int, int, int, int], tuple[int, int]]] = {
    TileType.SPIKE_T: ((0, 0, _CX, _CY // 2), (3, 4)),
    TileType.SPIKE_B: ((0, _CY // 2, _CX, _CY // 2), (3, 5)),
    TileType.SPIKE_L: ((0, 0, _CX // 2, _CY), (3, 6)),
    TileType.SPIKE_R: ((_CX // 2, 0, _CX // 2, _CY), (3, 7)),
    TileType.SPIKE_V_T: ((_CX // 4, _CY // 4, _CX // 2, _CY // 4 * 3), (4, 4)),
    TileType.SPIKE_V_M: ((_CX // 4, 0, _CX // 2, _CY), (4, 5)),
    TileType.SPIKE_V_B: ((_CX // 4, 0, _CX // 2, _CY // 4 * 3), (4, 6)),
    TileType.SPIKE_H_L: ((_CX // 4, _CY // 4, _CX // 4 * 3, _CY // 2), (5, 4)),
    TileType.SPIKE_H_M: ((0, _CY // 4, _CX, _CY // 2), (5, 5)),
    TileType.SPIKE_H_R: ((0, _CY // 4, _CX // 4 * 3, _CY // 2), (5, 6)),
}

_GOAL_FRAMES = ((0, 4), (0, 5), (0, 6), (1, 6), (2, 6), (2, 5), (2, 4), (1, 4))
_GOAL_FRAME_TIME = "0.08"


def _pos_line(x: int, y: int) -> str:
    return f"pos = ({x * _CX},{y * _CY})\n"


def _interact_cells(cells: Grid) -> Iterator[tuple[int, int, TileType]]:
    """Yield (x, y, type) for every filled interact cell, column by column."""
    for x, column in enumerate(cells):
        for y, tile_id in enumerate(column):
            if tile_id is not None:
                yield x, y, get_tile_data(Tileset.INTERACT, tile_id).type


def _cells_of_type(cells: Grid, tile_type: TileType) -> Iterator[tuple[int, int]]:
    return ((x, y) for x, y, kind in _interact_cells(cells) if kind is tile_type)


def spikes_text(cells: Grid, ids: Iterator[int]) -> str:
    """Return a killbox with a child sprite for every spike tile.

    Each killbox takes its id from ``ids``.
    """
    parts: list[str] = []
    for x, y, kind in _interact_cells(cells):
        spike = _SPIKES.get(kind)
        if spike is None:
            continue
        (bx, by, bw, bh), (ax, ay) = spike
        entity_id = next(ids)
        parts.append(
            "[killbox]\n"
            f"id = {entity_id}\n"
            + _pos_line(x, y)
            + f"collision_box = ({bx},{by},{bw},{bh})\n"
            "collision_mask = 00000011\n\n"
            "[sprite]\n"
            f"parent = {entity_id}\n"
            f"atlas_coords = ({ax},{ay})\n"
            "tint = (255,0,0,255)\n"
        )
    return "".join(parts)


def water_text(cells: Grid) -> str:
    """Return a water entry at the height of every water tile."""
    return "".join(
        f"[water]\nwater_level = {y * _CY}\n\n"
        for _x, y in _cells_of_type(cells, TileType.WATER)
    )


def player_text(cells: Grid) -> str:
    """Return a player entry for every player tile."""
    return "".join(
        "[player]\n" + _pos_line(x, y) + "\n"
        for x, y in _cells_of_type(cells, TileType.PLAYER)
    )


def goal_text(cells: Grid, ids: Iterator[int]) -> str:
    """Return a goal area with an animated child sprite for every goal tile."""
    animation = ";".join(
        f"(({fx},{fy}),{_GOAL_FRAME_TIME})" for fx, fy in _GOAL_FRAMES
    )
    parts: list[str] = []
    for x, y in _cells_of_type(cells, TileType.GOAL):
        entity_id = next(ids)
        parts.append(
            "[goal]\n"
            f"id = {entity_id}\n"
            + _pos_line(x, y)
            + f"collision_box = (0,0,{_CX},{_CY})\n"
            "collision_mask = 00000011\n"
            "[sprite]\n"
            f"parent = {entity_id}\n"
            "atlas_coords = (0,4)\n"
            "tint = (255,0,0,255)\n"
            f"animation = {animation}\n"
            "\n"
        )
    return "".join(parts)


def level_text_text(cells: Grid, tile_type: TileType, text: str) -> str:
    """Return a text entry holding ``text`` for every tile of ``tile_type``.

    Spaces are written as the export space character.
    """
    content = text.replace(" ", EXPORT_SPACE_CHAR)
    return "".join(
        "[text]\n" + _pos_line(x, y) + f"content = {content}\n\n"
        for x, y in _cells_of_type(cells, tile_type)
    )


def opening_text(cells: Grid) -> str:
    """Return an opening-scene marker for every opening tile."""
    return "".join("[opening]\n\n" for _ in _cells_of_type(cells, TileType.OPENING))


def credits_text(cells: Grid) -> str:
    """Return a credits-scene marker for every credits tile."""
    return "".join("[credits]\n\n" for _ in _cells_of_type(cells, TileType.CREDITS))


def shadows_limit_text(shadows: str) -> str:
    """Return the shadows-limit entry; an empty value means zero."""
    return f"[shadows_limit]\n{shadows or '0'}\n"


def export_text(
    cells: dict[Tileset, Grid],
    text_1: str,
    text_2: str,
    text_3: str,
    shadows: str,
    rng: Optional[RandomSource] = None,
) -> str:
    """Return the whole scene file for a level's layers and settings."""
    if rng is None:
        rng = random.Random()
    background = cells[Tileset.BACKGROUND]
    blocks = cells[Tileset.BLOCKS]
    interact = cells[Tileset.INTERACT]
    ids = itertools.count()
    return "".join(
        [
            bg_props_text(background),
            bg_grass_text(background),
            bg_waterfall_text(background),
            bg_stars_text(background, rng),
            bg_leaves_text(background),
            bg_drips_text(background),
            bg_puffs_text(background),
            blocks_sprites_text(blocks),
            physics_bodies_text(blocks),
            spikes_text(interact, ids),
            water_text(interact),
            player_text(interact),
            goal_text(interact, ids),
            level_text_text(interact, TileType.TEXT1, text_1),
            level_text_text(interact, TileType.TEXT2, text_2),
            level_text_text(interact, TileType.TEXT3, text_3),
            opening_text(interact),
            credits_text(interact),
            platform_sprites_text(interact),
            platform_bodies_text(interact),
            shadows_limit_text(shadows),
        ]
    )