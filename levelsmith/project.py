"""Level projects: the painted map plus its texts, saved and exported."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from levelsmith.exporter import export_text
from levelsmith.sections import RandomSource
from levelsmith.tilemap import DATA_LENGTH, Tilemap
from levelsmith.tileset import PROJ_TEXT_SEPARATOR

PROJECTS_DIR = "editor/level-projects"
PROJECT_SUFFIX = ".lvproj"
SCENES_DIR = "assets/scenes"
SCENE_SUFFIX = ".dat"

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Project:
    """A level being edited: its tilemap, shadow limit and three texts."""

    tilemap: Tilemap = field(default_factory=Tilemap)
    shadows: str = ""
    text_1: str = ""
    text_2: str = ""
    text_3: str = ""

    def to_data(self) -> str:
        """Encode the project as the map data followed by the texts."""
        texts = PROJ_TEXT_SEPARATOR.join(
            (self.shadows, self.text_1, self.text_2, self.text_3)
        )
        return self.tilemap.to_data() + texts

    @classmethod
    def from_data(cls, data: str) -> "Project":
        """Decode a project written by :meth:`to_data`."""
        tilemap = Tilemap()
        tilemap.load_data(data)
        parts = data[DATA_LENGTH:].split(PROJ_TEXT_SEPARATOR, 3)
        if len(parts) != 4:
            raise ValueError(
                "project data needs three text separators after the map"
            )
        shadows, text_1, text_2, text_3 = parts
        return cls(tilemap, shadows, text_1, text_2, text_3)

    def export(self, rng: Optional[RandomSource] = None) -> str:
        """Return the scene file for this project."""
        return export_text(
            self.tilemap.get_cells(),
            self.text_1,
            self.text_2,
            self.text_3,
            self.shadows,
            rng,
        )


def save_project(project: Project, path: PathLike) -> None:
    """Write a project file."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(project.to_data())


def load_project(path: PathLike) -> Project:
    """Read a project file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return Project.from_data(handle.read())


def export_project(
    project: Project, path: PathLike, rng: Optional[RandomSource] = None
) -> None:
    """Write the scene file of a project."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(project.export(rng))