"""Immutable ``ImageState`` dataclass.

This module defines the frozen :class:`ImageState` threaded through the
identicon pipeline. Every stage is a pure function that takes an
``ImageState`` and returns a *new* one with one more field populated; nothing
is updated in place. A state is created per generation request, passes
through each stage exactly once and is discarded after rendering.

Design notes:

* Sequences are **persistent vectors** (``pyrsistent.PVector``) so a state
  can be shared freely between callers and threads.
* ``color``, ``grid`` and ``pixel_map`` start as ``None`` and are filled in by
  the color, grid and pixel map systems respectively. The cell filter
  replaces ``grid`` with its even-valued subset.
* ``config`` travels with the state so the pixel mapper and renderer agree on
  ``side_length`` / ``cell_size``.

See :mod:`grid_identicon.pipeline` for the order in which systems run.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap

from grid_identicon.components import Color
from grid_identicon.config import CanvasConfig, DEFAULT_CONFIG
from grid_identicon.types import Digest, Grid, PixelMap


@dataclass(frozen=True)
class ImageState:
    """Immutable identicon state.

    Attributes:
        digest (Digest): Hash bytes of the input string, in hash order.
        config (CanvasConfig): Grid density and cell size used downstream.
        color (Color | None): Fill color, set by the color system.
        grid (Grid | None): ``Cell`` entries, all of them after the grid
            system and only painted ones after the filter system.
        pixel_map (PixelMap | None): One ``Rect`` per painted cell, in grid order.
    """

    digest: Digest = pvector()
    config: CanvasConfig = DEFAULT_CONFIG

    color: Optional[Color] = None
    grid: Optional[Grid] = None
    pixel_map: Optional[PixelMap] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every field that is not
            ``None``.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            description = description.set(field, value)
        return description
