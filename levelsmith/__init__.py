"""Tile-based level projects, editor widget logic and scene export for a 2D platformer."""

__version__ = "0.1.0"
__all__ = ["__version__"]