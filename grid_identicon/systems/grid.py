"""Grid construction system.

Partitions the digest into rows of ``CHUNK_SIZE`` bytes and mirrors each row
so the icon is left-right symmetric. With MD5 (16 bytes) and rows of 3 this
yields five rows of five cells; the sixteenth byte is dropped. The drop is
kept on purpose: padding instead would change every existing identicon.
"""

from dataclasses import replace
from itertools import chain

from pyrsistent import pvector

from grid_identicon.components import Cell
from grid_identicon.config import CHUNK_SIZE
from grid_identicon.state import ImageState
from grid_identicon.utils.grid import chunk, mirror_row


def grid_system(state: ImageState) -> ImageState:
    """Build the full grid of ``Cell(value, index)`` entries.

    Args:
        state (ImageState): State carrying a digest.

    Returns:
        ImageState: New state whose ``grid`` holds every cell, indexed
        row-major from 0 in the order the mirrored rows were concatenated.
    """
    rows = [mirror_row(row) for row in chunk(state.digest, CHUNK_SIZE)]
    grid = pvector(
        Cell(value, index) for index, value in enumerate(chain.from_iterable(rows))
    )
    return replace(state, grid=grid)
