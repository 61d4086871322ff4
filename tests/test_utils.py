from typing import List, Tuple

from pyrsistent import pvector

from grid_identicon.config import CanvasConfig, DEFAULT_CONFIG
from grid_identicon.state import ImageState

# MD5("Timothy")
TIMOTHY = "Timothy"
TIMOTHY_DIGEST: List[int] = [
    130, 5, 44, 217, 64, 146, 195, 100, 255, 140, 88, 232, 60, 34, 6, 5,
]
TIMOTHY_SIGNATURE = "82052CD94092C364FF8C58E83C220605"

TIMOTHY_GRID: List[Tuple[int, int]] = [
    (130, 0), (5, 1), (44, 2), (5, 3), (130, 4),
    (217, 5), (64, 6), (146, 7), (64, 8), (217, 9),
    (195, 10), (100, 11), (255, 12), (100, 13), (195, 14),
    (140, 15), (88, 16), (232, 17), (88, 18), (140, 19),
    (60, 20), (34, 21), (6, 22), (34, 23), (60, 24),
]  # fmt: skip

TIMOTHY_FILTERED_GRID: List[Tuple[int, int]] = [
    (130, 0), (44, 2), (130, 4), (64, 6), (146, 7), (64, 8), (100, 11),
    (100, 13), (140, 15), (88, 16), (232, 17), (88, 18), (140, 19),
    (60, 20), (34, 21), (6, 22), (34, 23), (60, 24),
]  # fmt: skip

TIMOTHY_PIXEL_MAP: List[Tuple[Tuple[int, int], Tuple[int, int]]] = [
    ((0, 0), (50, 50)), ((100, 0), (150, 50)), ((200, 0), (250, 50)),
    ((50, 50), (100, 100)), ((100, 50), (150, 100)), ((150, 50), (200, 100)),
    ((50, 100), (100, 150)), ((150, 100), (200, 150)),
    ((0, 150), (50, 200)), ((50, 150), (100, 200)), ((100, 150), (150, 200)),
    ((150, 150), (200, 200)), ((200, 150), (250, 200)),
    ((0, 200), (50, 250)), ((50, 200), (100, 250)), ((100, 200), (150, 250)),
    ((150, 200), (200, 250)), ((200, 200), (250, 250)),
]  # fmt: skip


def make_digest_state(
    digest: List[int] = TIMOTHY_DIGEST, config: CanvasConfig = DEFAULT_CONFIG
) -> ImageState:
    """Fresh state holding only ``digest`` (no hashing involved)."""
    return ImageState(digest=pvector(digest), config=config)


def grid_tuples(state: ImageState) -> List[Tuple[int, int]]:
    return [tuple(cell) for cell in state.grid or ()]  # type: ignore[misc]


def pixel_map_tuples(
    state: ImageState,
) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    return [rect.as_tuple() for rect in state.pixel_map or ()]
