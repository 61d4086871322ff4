"""Grid math helpers.

Pure functions shared by the grid and pixel map systems: chunking the digest
into rows, mirroring a row about its last element, and converting between a
cell's row-major index and its (column, row) position.
"""

from typing import List, Sequence, Tuple

from grid_identicon.components import Point, Rect


def chunk(values: Sequence[int], size: int) -> List[Tuple[int, ...]]:
    """Split ``values`` into consecutive non-overlapping groups of ``size``.

    A trailing group shorter than ``size`` is dropped, not padded.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    full = len(values) - len(values) % size
    return [tuple(values[i : i + size]) for i in range(0, full, size)]


def mirror_row(row: Sequence[int]) -> Tuple[int, ...]:
    """Mirror ``row`` about its last element: ``(a, b, c) -> (a, b, c, b, a)``."""
    head = tuple(row)
    return head + head[-2::-1] if head else head


def mirrored_length(chunk_size: int) -> int:
    """Length of a row of ``chunk_size`` values after :func:`mirror_row`."""
    return 2 * chunk_size - 1


def index_to_position(index: int, side_length: int) -> Point:
    """Return the (column, row) of a row-major ``index`` as a ``Point``."""
    row, col = divmod(index, side_length)
    return Point(col, row)


def position_to_index(pos: Point, side_length: int) -> int:
    """Inverse of :func:`index_to_position`."""
    return pos.y * side_length + pos.x


def cell_rect(index: int, side_length: int, cell_size: int) -> Rect:
    """Canvas rectangle covered by the cell at ``index``."""
    pos = index_to_position(index, side_length)
    top_left = Point(pos.x * cell_size, pos.y * cell_size)
    bottom_right = Point(top_left.x + cell_size, top_left.y + cell_size)
    return Rect(top_left, bottom_right)
