"""Pipeline orchestration.

This module wires the systems together in their only valid order and exposes
the public entry points. Each step is pure and returns a *new*
:class:`grid_identicon.state.ImageState`:

1. ``initialize_image_state`` hashes the input string into the digest.
2. ``color_system`` picks the fill from ``digest[0:3]``.
3. ``grid_system`` chunks and mirrors the digest into the 5x5 grid.
4. ``filter_system`` keeps only even-valued cells.
5. ``pixel_map_system`` turns surviving cells into canvas rectangles.

Rendering happens separately (:mod:`grid_identicon.renderer`) so callers can
inspect or cache the pixel map without paying for image encoding.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from pyrsistent import pvector

from grid_identicon.components import Color
from grid_identicon.config import CanvasConfig, DEFAULT_CONFIG, DEFAULT_FORMAT
from grid_identicon.digest import bytes_list
from grid_identicon.renderer.canvas import render
from grid_identicon.seed import random_string
from grid_identicon.state import ImageState
from grid_identicon.systems.color import color_system
from grid_identicon.systems.filter import filter_system
from grid_identicon.systems.grid import grid_system
from grid_identicon.systems.pixel_map import pixel_map_system
from grid_identicon.types import ImageFormat, PixelMap, System

logger = logging.getLogger(__name__)

SYSTEMS: Tuple[System, ...] = (
    color_system,
    grid_system,
    filter_system,
    pixel_map_system,
)


@dataclass(frozen=True)
class FilledPixelMap:
    """Fill color and painted rectangles, with the config they were mapped for."""

    color: Color
    pixel_map: PixelMap
    config: CanvasConfig = DEFAULT_CONFIG

    def render(
        self,
        config: Optional[CanvasConfig] = None,
        fmt: ImageFormat = DEFAULT_FORMAT,
    ) -> bytes:
        """Encode the icon, on the canvas it was mapped for unless ``config`` is given."""
        return render(self.color, self.pixel_map, config or self.config, fmt)


def initialize_image_state(
    string: Union[str, bytes], config: CanvasConfig = DEFAULT_CONFIG
) -> ImageState:
    """Return a fresh state holding only the digest of ``string``."""
    return ImageState(digest=bytes_list(string), config=config)


def run_systems(state: ImageState) -> ImageState:
    """Apply every pipeline system to ``state`` in order."""
    for system in SYSTEMS:
        state = system(state)
    return state


def build_image_state(
    string: Union[str, bytes], config: CanvasConfig = DEFAULT_CONFIG
) -> ImageState:
    """Run the full pipeline for ``string`` and return the final state.

    Any string is valid, including the empty one.
    """
    state = run_systems(initialize_image_state(string, config))
    logger.debug(
        "built identicon state: color=%s painted=%d",
        state.color,
        len(state.pixel_map or ()),
    )
    return state


def build_from_digest(
    digest: Iterable[int], config: CanvasConfig = DEFAULT_CONFIG
) -> ImageState:
    """Run the pipeline on raw digest bytes, bypassing hashing.

    Raises:
        ValueError: If a value is outside 0..255 or fewer than three bytes
            are given (no color can be picked).
    """
    values = pvector(digest)
    if any(
        isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255
        for v in values
    ):
        raise ValueError(f"Digest values must be bytes in 0..255: {list(values)}")
    if len(values) < 3:
        raise ValueError(f"Digest must hold at least 3 bytes, got {len(values)}")
    return run_systems(ImageState(digest=values, config=config))


def generate(
    string: Union[str, bytes], config: CanvasConfig = DEFAULT_CONFIG
) -> FilledPixelMap:
    """Derive the color and pixel map for ``string``.

    Deterministic: the same string and config always give an equal result.
    """
    state = build_image_state(string, config)
    assert state.color is not None and state.pixel_map is not None
    return FilledPixelMap(
        color=state.color, pixel_map=state.pixel_map, config=state.config
    )


def generate_random(
    config: CanvasConfig = DEFAULT_CONFIG,
) -> Tuple[str, FilledPixelMap]:
    """Generate an identicon for a fresh random seed string.

    Returns:
        Tuple[str, FilledPixelMap]: The seed used and its result, so the
        caller can reproduce the icon later.
    """
    seed = random_string()
    return seed, generate(seed, config)


def generate_image(
    string: Union[str, bytes],
    config: CanvasConfig = DEFAULT_CONFIG,
    fmt: ImageFormat = DEFAULT_FORMAT,
) -> bytes:
    """Generate and encode the identicon for ``string`` in one call."""
    return generate(string, config).render(fmt=fmt)
