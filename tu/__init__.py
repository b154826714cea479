"""Top-level package for tu.

This package title-cases song, album and artist metadata following the
NY Times Manual of Style, and derives tag values from file names and track
order. The main entry points are `convert` and `TitleCaser`.
"""

from .text import TitleCaser, convert

__all__ = ["TitleCaser", "convert", "__version__"]

__version__ = "0.1.0"
