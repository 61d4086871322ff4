from dataclasses import replace

from pyrsistent import pvector

from grid_identicon.state import ImageState


def filter_system(state: ImageState) -> ImageState:
    """Drop odd-valued cells, leaving those to be painted.

    Order and original indices are preserved; indices are not renumbered.
    A state without a grid is returned unchanged.
    """
    if state.grid is None:
        return state
    return replace(state, grid=pvector(cell for cell in state.grid if cell.painted))
