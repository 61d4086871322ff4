"""Identicon value components.

Re-exports the small immutable dataclasses threaded through the pipeline:
:class:`Cell` for grid entries, :class:`Point` / :class:`Rect` for canvas
geometry and :class:`Color` for the fill. Stages never modify an instance;
they build new ones and return a new :class:`grid_identicon.state.ImageState`.
"""

from .cell import Cell
from .color import Color
from .geometry import Point, Rect

__all__ = [
    "Cell",
    "Color",
    "Point",
    "Rect",
]
