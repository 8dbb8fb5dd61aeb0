# levelsmith

Tools for building levels for a small 2D platformer and for turning them into
the scene files the game loads. A level is painted on three layers of tiles
(blocks, background and interactive objects) on a 40×22 grid of 8×8 pixel
cells.

## Installing

```
pip install .
```

Tests run with `pip install .[test]` followed by `pytest`.

## Modules

- `levelsmith.tileset`: the `Tileset` and `TileType` enums, the tile
  catalogue of each tileset (`get_tile_data`, `get_tile_sprite_coords`,
  `tile_count`), the palette layout (`tile_position`, `tile_id_at`) and
  `TileSelection`, the active tileset and the tile picked in each one.
- `levelsmith.tilemap`: `Tilemap`, one grid of tile ids per tileset (`None` for
  an empty cell). On the interact layer the player, goal, water, opening
  marker, credits marker and each of the three text labels may appear only
  once: placing one again with `set_tile` removes the earlier copy.
  `to_data` and `load_data` encode and decode the map as one character per
  cell. `cell_at_pixel` maps a window pixel to a cell.
- `levelsmith.sections`: scene text for block sprites, merged rectangular
  block bodies, platform sprites, one-way platform bodies, background props,
  animated grass, waterfalls and stars, and the leaves, drip and puff
  emitters.
- `levelsmith.exporter`: scene text for spikes, water, the player, the goal,
  text labels (spaces written as `@`), opening and credits markers and the
  shadow limit, and `export_text`, which puts the whole scene file together.
- `levelsmith.project`: `Project`, a tilemap with its shadow limit and three
  texts; `save_project`, `load_project` and `export_project` write and read
  `.lvproj` project files and write `.dat` scene files.
- `levelsmith.widgets`: the state and logic of editor widgets (`Button`,
  `TextInput`, `Popup` with `PopupManager`, `CursorManager`, `Rect`), driven
  by the caller with mouse and keyboard state.
- `levelsmith.cli`: the `levelsmith` command.

## Using it from Python

```python
import random

from levelsmith.tileset import Tileset
from levelsmith.project import Project, save_project, load_project, export_project

project = Project()
project.tilemap.set_tile(Tileset.BLOCKS, 0, 21, 0)
project.tilemap.set_tile(Tileset.INTERACT, 2, 20, 0)  # the player
project.text_1 = "hello there"
project.shadows = "3"

save_project(project, "my-level.lvproj")
restored = load_project("my-level.lvproj")
export_project(restored, "my-level.dat", random.Random(1))
```

Star animations get random frame durations. `export_text`, `Project.export`
and `export_project` take an optional `rng` (anything with `randint`, such as
`random.Random`) for repeatable output; `bg_stars_text` requires one.

## Command line

```
levelsmith --help
```

Every command takes a level name. Projects are kept as
`<projects-dir>/<name>.lvproj` (default `editor/level-projects`) and scenes
are written to `<scenes-dir>/<name>.dat` (default `assets/scenes`); set these
with `--projects-dir` and `--scenes-dir` before the command.

- `levelsmith new NAME [--force] [--shadows N] [--text-1 T] [--text-2 T] [--text-3 T]`
  creates an empty project and prints its path.
- `levelsmith set NAME [--shadows N] [--text-1 T] [--text-2 T] [--text-3 T]`
  changes the shadow limit or texts.
- `levelsmith paint NAME {blocks,background,interact} X Y TILE` puts a tile id
  in a cell, or empties it with `none`. Palette gaps are refused.
- `levelsmith export NAME [--seed S]` writes the scene file and prints its path.
- `levelsmith show NAME` prints the shadow limit, the texts and the number of
  filled cells on each layer.

The shadow limit must be digits without a leading zero; texts are at most 50
characters and may not contain `@`. Errors are reported on standard error
with exit status 1.

## What it does not do

There is no graphical editor: nothing draws the tilemap, the palette or the
widgets, and nothing reads a mouse or keyboard. The widget classes hold only
state and logic. Levels are painted cell by cell through `Tilemap.set_tile`
or `levelsmith paint`.