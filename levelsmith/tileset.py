"""Tile catalogues for the three editor tilesets and the palette layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

# Level and window geometry
EDITOR_FPS = 60
LEVEL_SIZE_X = 1280
LEVEL_SIZE_Y = 704
EDITOR_WINDOW_SIZE_X = LEVEL_SIZE_X + 8
EDITOR_WINDOW_SIZE_Y = LEVEL_SIZE_Y + 232
EDITOR_WINDOW_TITLE = "Level Editor"

# Spritesheet
SPRITESHEET_PATH = "assets/textures/spritesheet.png"
SPRITESHEET_CELL_X = 8
SPRITESHEET_CELL_Y = 8

# On-screen size of one cell
CELL_SIZE_X = 32
CELL_SIZE_Y = 32

# Tilemap
TILEMAP_ORIGIN_X = 4
TILEMAP_ORIGIN_Y = 4
TILEMAP_PIXEL_SIZE_X = LEVEL_SIZE_X
TILEMAP_PIXEL_SIZE_Y = LEVEL_SIZE_Y
TILEMAP_SIZE_X = 40
TILEMAP_SIZE_Y = 22

# Tileset palette
TILESET_ORIGIN_X = 4
TILESET_ORIGIN_Y = TILEMAP_ORIGIN_Y + TILEMAP_PIXEL_SIZE_Y + 48
TILESET_ROWS = 4

# Text and widgets
FONT_SIZE = 20
TEXT_SPACING = 2
INPUT_MAX_LENGTH = 50
INPUT_MARGIN = 4
INPUT_UNDERLINE_DIST = 2
INPUT_HOLD_KEY_START = 0.5
INPUT_HOLD_KEY_PERIOD = 0.05
INPUT_BLINK_TIME = 0.5

POPUP_WIDTH = 300
POPUP_HEIGHT = 132
POPUP_PADDING = 16
POPUP_LINE_SPACING = 6
POPUP_BUTTON_WIDTH = 100.0
POPUP_BUTTON_HEIGHT = 32.0

# Colours as (r, g, b, a)
FG_COLOR = (192, 202, 245, 255)
BG_COLOR = (26, 27, 38, 255)
PRIMARY_COLOR = (65, 166, 181, 255)
HOVERED_COLOR = (115, 218, 202, 255)
FOCUSED_COLOR = (187, 154, 247, 255)
CELL_HIGHLIGHT_COLOR = (255, 255, 255, 32)
POPUP_BACKGROUND_SCREEN = (0, 0, 0, 128)

EXPORT_SPACE_CHAR = "@"
PROJ_TEXT_SEPARATOR = "@"


class Tileset(Enum):
    """The three layers a level is painted on, in storage order."""

    BLOCKS = 0
    BACKGROUND = 1
    INTERACT = 2


class TileType(Enum):
    """What a tile means when the level is exported."""

    NULL = 0
    PROP = auto()
    GRASS = auto()
    WATERFALL = auto()
    STAR = auto()
    WATER = auto()
    DRIP = auto()
    LEAVES = auto()
    PUFF = auto()
    BLOCK = auto()
    PLATFORM = auto()
    PLAYER = auto()
    GOAL = auto()
    SPIKE_T = auto()
    SPIKE_B = auto()
    SPIKE_L = auto()
    SPIKE_R = auto()
    SPIKE_V_T = auto()
    SPIKE_V_M = auto()
    SPIKE_V_B = auto()
    SPIKE_H_L = auto()
    SPIKE_H_M = auto()
    SPIKE_H_R = auto()
    BUTTON1 = auto()
    BUTTON2 = auto()
    BUTTON3 = auto()
    GATE1 = auto()
    GATE2 = auto()
    GATE3 = auto()
    TEXT1 = auto()
    TEXT2 = auto()
    TEXT3 = auto()
    OPENING = auto()
    CREDITS = auto()


@dataclass(frozen=True)
class Tile:
    """A palette entry: its spritesheet cell and its meaning."""

    spritesheet_coords: tuple[int, int]
    type: TileType


def _block_tiles() -> list[Tile]:
    return [
        Tile((i, row), TileType.BLOCK) for i in range(16) for row in range(4)
    ]


def _background_tiles() -> list[Tile]:
    t = TileType
    tiles: list[Tile] = []
    # grass
    for i in range(4):
        tiles += [Tile((i, 8), t.GRASS), Tile((i, 10), t.GRASS)]
    # stones
    for i in range(4, 6):
        tiles += [Tile((i, row), t.PROP) for row in range(8, 12)]
    # mushrooms, bushes and trees
    for i in range(6):
        tiles += [Tile((i, row), t.PROP) for row in range(12, 16)]
    # pipes, chains and drips
    for i in range(6, 9):
        tiles += [Tile((i, row), t.PROP) for row in range(8, 12)]
    tiles += [
        Tile((10, 8), t.PROP),
        Tile((10, 9), t.PROP),
        Tile((10, 10), t.PROP),
        Tile((11, 10), t.DRIP),
        Tile((11, 8), t.PROP),
        Tile((11, 9), t.PROP),
        Tile((13, 11), t.LEAVES),
        Tile((9, 15), t.PUFF),
    ]
    # waterfalls
    for x in (12, 14, 13, 15):
        tiles += [Tile((x, 8), t.PROP), Tile((x, 9), t.WATERFALL)]
    # stars
    tiles += [Tile((i, 12), t.STAR) for i in range(6, 9)]
    tiles += [Tile((i, 14), t.PROP) for i in range(6, 9)]
    return tiles


def _interact_tiles() -> list[Tile]:
    t = TileType
    gap = Tile((10, 11), t.NULL)
    return [
        Tile((1, 5), t.PLAYER),  # id 0
        Tile((0, 4), t.GOAL),  # id 1
        Tile((7, 4), t.WATER),  # id 2
        gap,
        # spikes and platforms
        Tile((3, 4), t.SPIKE_T),
        Tile((3, 5), t.SPIKE_B),
        Tile((3, 6), t.SPIKE_L),
        Tile((3, 7), t.SPIKE_R),
        Tile((4, 4), t.SPIKE_V_T),
        Tile((4, 5), t.SPIKE_V_M),
        Tile((4, 6), t.SPIKE_V_B),
        Tile((4, 7), t.PLATFORM),
        Tile((5, 4), t.SPIKE_H_L),
        Tile((5, 5), t.SPIKE_H_M),
        Tile((5, 6), t.SPIKE_H_R),
        Tile((5, 7), t.PLATFORM),
        Tile((0, 7), t.PLATFORM),
        Tile((1, 7), t.PLATFORM),
        Tile((2, 7), t.PLATFORM),
        Tile((6, 7), t.PLATFORM),
        # gates
        Tile((6, 4), t.BUTTON1),
        Tile((6, 5), t.GATE1),
        Tile((6, 6), t.GATE1),
        gap,
        Tile((6, 4), t.BUTTON2),
        Tile((6, 5), t.GATE2),
        Tile((6, 6), t.GATE2),
        gap,
        Tile((6, 4), t.BUTTON3),
        Tile((6, 5), t.GATE3),
        Tile((6, 6), t.GATE3),
        # opening and credits scene markers
        Tile((10, 15), t.OPENING),  # id 31
        Tile((11, 12), t.CREDITS),  # id 32
        # text labels
        Tile((10, 12), t.TEXT1),  # id 33
        Tile((10, 13), t.TEXT2),  # id 34
        Tile((10, 14), t.TEXT3),  # id 35
    ]


_TILES: dict[Tileset, tuple[Tile, ...]] = {
    Tileset.BLOCKS: tuple(_block_tiles()),
    Tileset.BACKGROUND: tuple(_background_tiles()),
    Tileset.INTERACT: tuple(_interact_tiles()),
}


def get_tile_data(tileset: Tileset, tile_id: int) -> Tile:
    """Return the tile with the given id; raise IndexError if there is none."""
    tiles = _TILES[tileset]
    if not 0 <= tile_id < len(tiles):
        raise IndexError(f"no tile {tile_id} in tileset {tileset.name}")
    return tiles[tile_id]


def get_tile_sprite_coords(tileset: Tileset, tile_id: int) -> tuple[int, int]:
    """Return the spritesheet cell of a tile."""
    return get_tile_data(tileset, tile_id).spritesheet_coords


def tile_count(tileset: Tileset) -> int:
    """Return how many tiles a tileset holds."""
    return len(_TILES[tileset])


def tile_position(tile_id: int) -> tuple[int, int]:
    """Return the top-left pixel of a tile in the palette, column-major."""
    column, row = divmod(tile_id, TILESET_ROWS)
    return (
        TILESET_ORIGIN_X + CELL_SIZE_X * column,
        TILESET_ORIGIN_Y + CELL_SIZE_Y * row,
    )


def tile_id_at(tileset: Tileset, x: float, y: float) -> Optional[int]:
    """Return the id of the selectable palette tile under a pixel, or None."""
    if (
        x < TILESET_ORIGIN_X
        or y < TILESET_ORIGIN_Y
        or y > TILESET_ORIGIN_Y + CELL_SIZE_Y * TILESET_ROWS
    ):
        return None
    offset_x = int(x - TILESET_ORIGIN_X)
    offset_y = int(y - TILESET_ORIGIN_Y)
    tile_id = (offset_x // CELL_SIZE_X) * TILESET_ROWS + offset_y // CELL_SIZE_Y
    if tile_id >= tile_count(tileset):
        return None
    if get_tile_data(tileset, tile_id).type is TileType.NULL:
        return None
    return tile_id


@dataclass
class TileSelection:
    """The active tileset and the tile picked in each tileset."""

    tileset: Tileset = Tileset.BLOCKS
    _chosen: dict[Tileset, Optional[int]] = field(init=False, repr=False)

    def __init__(self) -> None:
        self.tileset = Tileset.BLOCKS
        self._chosen = {ts: None for ts in Tileset}

    def selected(self) -> Optional[int]:
        """Return the tile chosen in the active tileset, or None."""
        return self._chosen[self.tileset]

    def select(self, tile_id: Optional[int]) -> None:
        """Choose a tile in the active tileset; None clears the choice."""
        self._chosen[self.tileset] = tile_id

    def toggle(self, tile_id: int) -> None:
        """Choose a tile, or clear the choice if it is already chosen."""
        if self._chosen[self.tileset] == tile_id:
            self._chosen[self.tileset] = None
        else:
            self._chosen[self.tileset] = tile_id