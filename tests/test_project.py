import random

import pytest

from levelsmith.project import (
    Project,
    export_project,
    load_project,
    save_project,
)
from levelsmith.tilemap import DATA_LENGTH, Tilemap
from levelsmith.tileset import Tileset


def _sample_project():
    tilemap = Tilemap()
    tilemap.set_tile(Tileset.BLOCKS, 0, 0, 5)
    tilemap.set_tile(Tileset.BACKGROUND, 2, 3, 1)
    tilemap.set_tile(Tileset.INTERACT, 4, 4, 0)
    return Project(tilemap, "3", "first text", "second", "third")


def test_to_data_layout():
    project = _sample_project()
    data = project.to_data()
    assert data.endswith("3@first text@second@third")
    assert len(data) == DATA_LENGTH + len("3@first text@second@third")
    assert data[:DATA_LENGTH] == project.tilemap.to_data()


def test_round_trip():
    project = _sample_project()
    loaded = Project.from_data(project.to_data())
    assert loaded.shadows == "3"
    assert loaded.text_1 == "first text"
    assert loaded.text_2 == "second"
    assert loaded.text_3 == "third"
    assert loaded.tilemap.get_cells() == project.tilemap.get_cells()


def test_last_text_keeps_separators():
    project = Project(text_3="a@b")
    loaded = Project.from_data(project.to_data())
    assert loaded.text_3 == "a@b"
    assert loaded.text_1 == ""


def test_missing_separators_raise():
    data = Tilemap().to_data() + "3@only"
    with pytest.raises(ValueError):
        Project.from_data(data)


def test_short_data_raises():
    with pytest.raises(ValueError):
        Project.from_data("abc")


def test_save_and_load(tmp_path):
    project = _sample_project()
    path = tmp_path / "level.lvproj"
    save_project(project, path)
    loaded = load_project(path)
    assert loaded.to_data() == project.to_data()


def test_export_project_writes_export(tmp_path):
    project = _sample_project()
    path = tmp_path / "level.dat"
    export_project(project, path, random.Random(7))
    written = path.read_text(encoding="utf-8")
    assert written == project.export(random.Random(7))
    assert written.endswith("[shadows_limit]\n3\n")
    assert "[player]\n" in written


def test_export_empty_project():
    assert Project().export(random.Random(0)) == "[shadows_limit]\n0\n"