import pytest

from grid_identicon.components import Point, Rect
from grid_identicon.utils.grid import (
    cell_rect,
    chunk,
    index_to_position,
    mirror_row,
    mirrored_length,
    position_to_index,
)


@pytest.mark.parametrize(
    "values, size, expected",
    [
        ([1, 2, 3, 4, 5, 6], 3, [(1, 2, 3), (4, 5, 6)]),
        ([1, 2, 3, 4, 5, 6, 7], 3, [(1, 2, 3), (4, 5, 6)]),
        ([1, 2], 3, []),
        ([], 3, []),
        ([1, 2, 3, 4], 2, [(1, 2), (3, 4)]),
    ],
)
def test_chunk(values: list[int], size: int, expected: list[tuple[int, ...]]) -> None:
    assert chunk(values, size) == expected


def test_chunk_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        chunk([1, 2, 3], 0)


@pytest.mark.parametrize(
    "row, expected",
    [
        ((130, 5, 44), (130, 5, 44, 5, 130)),
        ((1, 2), (1, 2, 1)),
        ((9,), (9,)),
        ((), ()),
    ],
)
def test_mirror_row(row: tuple[int, ...], expected: tuple[int, ...]) -> None:
    assert mirror_row(row) == expected


def test_mirrored_row_is_symmetric() -> None:
    row = mirror_row((3, 8, 1))
    assert row[0] == row[4]
    assert row[1] == row[3]
    assert len(row) == mirrored_length(3) == 5


@pytest.mark.parametrize("side_length", [1, 3, 5, 8])
def test_index_position_round_trip(side_length: int) -> None:
    for index in range(side_length * side_length):
        pos = index_to_position(index, side_length)
        assert 0 <= pos.x < side_length
        assert position_to_index(pos, side_length) == index


def test_index_to_position() -> None:
    assert index_to_position(7, 5) == Point(2, 1)


def test_cell_rect() -> None:
    assert cell_rect(4, 5, 50) == Rect(Point(200, 0), Point(250, 50))
    assert cell_rect(24, 5, 50).as_tuple() == ((200, 200), (250, 250))
