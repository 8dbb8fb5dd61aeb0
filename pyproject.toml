[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "levelsmith"
version = "0.1.0"
description = "Tile-based level projects and scene export for a 2D platformer"
requires-python = ">=3.10"
dependencies = []
keywords = ["level editor", "tilemap", "platformer", "game development", "scene export"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
levelsmith = "levelsmith.cli:main"

[tool.setuptools.packages.find]
include = ["levelsmith*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
