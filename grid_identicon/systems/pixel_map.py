"""Pixel map system.

Converts each surviving cell into the canvas rectangle it covers. The
rectangle depends only on the cell's original ``index`` and the state's
``CanvasConfig``, never on how many cells survived filtering.
"""

from dataclasses import replace

from pyrsistent import pvector

from grid_identicon.state import ImageState
from grid_identicon.utils.grid import cell_rect


def pixel_map_system(state: ImageState) -> ImageState:
    """Compute ``pixel_map`` from the (filtered) grid.

    For a cell at ``index``: ``row = index // side_length``,
    ``col = index % side_length``, ``top_left = (col * cell_size,
    row * cell_size)`` and ``bottom_right = top_left + (cell_size, cell_size)``.

    Args:
        state (ImageState): State with ``grid`` populated.

    Returns:
        ImageState: New state whose ``pixel_map`` has one ``Rect`` per grid
        cell, in grid order. A missing grid maps to an empty pixel map.
    """
    side_length = state.config.side_length
    cell_size = state.config.cell_size
    pixel_map = pvector(
        cell_rect(cell.index, side_length, cell_size) for cell in state.grid or ()
    )
    return replace(state, pixel_map=pixel_map)
