"""Deterministic GitHub-style identicons.

A string is hashed, the first three digest bytes pick the color, the digest
is folded into a left-right symmetric 5x5 grid, odd cells are dropped and the
rest are painted as squares on a blank canvas.

>>> from grid_identicon import generate, render
>>> result = generate("Timothy")
>>> result.color.rgb
(130, 5, 44)
>>> png = render(result.color, result.pixel_map)
"""

from grid_identicon.config import CanvasConfig
from grid_identicon.errors import IdenticonError, InvalidConfigError
from grid_identicon.pipeline import (
    FilledPixelMap,
    build_from_digest,
    build_image_state,
    generate,
    generate_image,
    generate_random,
)
from grid_identicon.renderer.canvas import render
from grid_identicon.state import ImageState

__all__ = [
    "CanvasConfig",
    "FilledPixelMap",
    "IdenticonError",
    "ImageState",
    "InvalidConfigError",
    "build_from_digest",
    "build_image_state",
    "generate",
    "generate_image",
    "generate_random",
    "render",
]
