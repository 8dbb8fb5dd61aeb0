"""Command-line front end for creating, painting and exporting level projects."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from levelsmith.project import (
    PROJECT_SUFFIX,
    PROJECTS_DIR,
    SCENE_SUFFIX,
    SCENES_DIR,
    Project,
    export_project,
    load_project,
    save_project,
)
from levelsmith.tilemap import TILEMAP_SIZE_X, TILEMAP_SIZE_Y
from levelsmith.tileset import (
    PROJ_TEXT_SEPARATOR,
    Tileset,
    TileType,
    get_tile_data,
)
from levelsmith.widgets import TextInput

_TEXT_FIELDS = ("text_1", "text_2", "text_3")


class CommandError(Exception):
    """A command could not be carried out."""


def _checked_field(value: str, *, number: bool, what: str) -> str:
    """Accept a value only if the matching editor input would take it whole."""
    field_input = TextInput(number_input=number)
    for char in value:
        if not field_input.type_char(char):
            if number:
                raise CommandError(
                    f"{what} must be a number without leading zeros, got {value!r}"
                )
            raise CommandError(f"{what} is too long: {value!r}")
    if not number and PROJ_TEXT_SEPARATOR in value:
        raise CommandError(f"{what} may not contain {PROJ_TEXT_SEPARATOR!r}")
    return field_input.text()


def _apply_fields(project: Project, args: argparse.Namespace) -> None:
    if args.shadows is not None:
        project.shadows = _checked_field(args.shadows, number=True, what="shadows")
    for index, name in enumerate(_TEXT_FIELDS, start=1):
        value = getattr(args, name)
        if value is not None:
            setattr(
                project,
                name,
                _checked_field(value, number=False, what=f"text {index}"),
            )


def _level_name(args: argparse.Namespace) -> str:
    if not args.name:
        raise CommandError("a level name is required")
    return args.name


def _project_path(args: argparse.Namespace) -> Path:
    return Path(args.projects_dir) / f"{_level_name(args)}{PROJECT_SUFFIX}"


def _scene_path(args: argparse.Namespace) -> Path:
    return Path(args.scenes_dir) / f"{_level_name(args)}{SCENE_SUFFIX}"


def _save(project: Project, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    save_project(project, path)


def _cmd_new(args: argparse.Namespace) -> int:
    path = _project_path(args)
    if path.exists() and not args.force:
        raise CommandError(f"{path} already exists; use --force to replace it")
    project = Project()
    _apply_fields(project, args)
    _save(project, path)
    print(path)
    return 0


def _cmd_set(args: argparse.Namespace) -> int:
    path = _project_path(args)
    project = load_project(path)
    _apply_fields(project, args)
    _save(project, path)
    return 0


def _parse_tile(tileset: Tileset, value: str) -> Optional[int]:
    if value.lower() in ("none", "-1"):
        return None
    try:
        tile_id = int(value)
    except ValueError:
        raise CommandError(f"tile must be an id or 'none', got {value!r}") from None
    if get_tile_data(tileset, tile_id).type is TileType.NULL:
        raise CommandError(f"tile {tile_id} of {tileset.name.lower()} is not usable")
    return tile_id


def _cmd_paint(args: argparse.Namespace) -> int:
    path = _project_path(args)
    project = load_project(path)
    tileset = Tileset[args.tileset.upper()]
    tile_id = _parse_tile(tileset, args.tile)
    project.tilemap.set_tile(tileset, args.x, args.y, tile_id)
    _save(project, path)
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    project = load_project(_project_path(args))
    scene = _scene_path(args)
    scene.parent.mkdir(parents=True, exist_ok=True)
    rng = None if args.seed is None else random.Random(args.seed)
    export_project(project, scene, rng)
    print(scene)
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    project = load_project(_project_path(args))
    print(f"shadows: {project.shadows or '0'}")
    for index, name in enumerate(_TEXT_FIELDS, start=1):
        print(f"text {index}: {getattr(project, name)}")
    cells = project.tilemap.get_cells()
    for tileset in Tileset:
        filled = sum(
            tile_id is not None for column in cells[tileset] for tile_id in column
        )
        print(f"{tileset.name.lower()}: {filled}")
    return 0


def _add_field_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--shadows", help="shadow limit of the level")
    parser.add_argument("--text-1", dest="text_1", help="first level text")
    parser.add_argument("--text-2", dest="text_2", help="second level text")
    parser.add_argument("--text-3", dest="text_3", help="third level text")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levelsmith", description="Edit and export level projects."
    )
    parser.add_argument(
        "--projects-dir", default=PROJECTS_DIR, help="where project files live"
    )
    parser.add_argument(
        "--scenes-dir", default=SCENES_DIR, help="where scene files are written"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def command(
        name: str, handler: Callable[[argparse.Namespace], int], help_text: str
    ) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("name", help="level name")
        sub.set_defaults(handler=handler)
        return sub

    new = command("new", _cmd_new, "create an empty project")
    _add_field_options(new)
    new.add_argument("--force", action="store_true", help="replace an existing project")

    set_cmd = command("set", _cmd_set, "change the shadow limit or texts")
    _add_field_options(set_cmd)

    paint = command("paint", _cmd_paint, "put a tile in a cell, or empty it")
    paint.add_argument(
        "tileset", choices=[ts.name.lower() for ts in Tileset], help="layer to paint"
    )
    paint.add_argument("x", type=int, help=f"column, 0 to {TILEMAP_SIZE_X - 1}")
    paint.add_argument("y", type=int, help=f"row, 0 to {TILEMAP_SIZE_Y - 1}")
    paint.add_argument("tile", help="tile id, or 'none' to empty the cell")

    export = command("export", _cmd_export, "write the scene file")
    export.add_argument("--seed", type=int, help="seed for star twinkle times")

    command("show", _cmd_show, "print the project's settings and tile counts")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (CommandError, OSError, ValueError, IndexError) as exc:
        print(f"levelsmith: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())