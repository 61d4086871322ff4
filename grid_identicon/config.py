"""Canvas configuration.

:class:`CanvasConfig` fixes how densely the grid is laid out and how large
each cell is drawn. It is validated eagerly on construction so that an
invalid configuration is reported to the caller instead of producing a
zero-size canvas further down the pipeline.
"""

from dataclasses import dataclass, replace
from typing import Any, Tuple

from grid_identicon.errors import InvalidConfigError
from grid_identicon.types import ImageFormat, RGB
from grid_identicon.utils.grid import mirrored_length


# Digest bytes per grid row before mirroring (a, b, c -> a, b, c, b, a).
CHUNK_SIZE = 3

DEFAULT_SIDE_LENGTH = mirrored_length(CHUNK_SIZE)
DEFAULT_CELL_SIZE = 50
DEFAULT_BACKGROUND: RGB = (255, 255, 255)
DEFAULT_FORMAT = ImageFormat.PNG


def _check_positive_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(
            f"{name} must be a positive integer, got {type(value).__name__}"
        )
    if value <= 0:
        raise InvalidConfigError(f"{name} must be a positive integer, got {value}")


def _check_rgb(name: str, value: Any) -> None:
    try:
        channels = tuple(value)
    except TypeError:
        raise InvalidConfigError(
            f"{name} must be an RGB triple, got {value!r}"
        ) from None
    if len(channels) != 3 or not all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
        for c in channels
    ):
        raise InvalidConfigError(f"{name} must be an RGB triple, got {value!r}")


@dataclass(frozen=True)
class CanvasConfig:
    """Grid density and rendering scale.

    Attributes:
        side_length (int): Cells per row / column of the square grid.
        cell_size (int): Width and height of one cell in pixels.
        background (RGB): Canvas color behind unpainted cells.

    Raises:
        InvalidConfigError: If ``side_length`` or ``cell_size`` is not a
            positive integer, ``side_length`` differs from the width of a
            mirrored grid row, or ``background`` is not an RGB triple.
    """

    side_length: int = DEFAULT_SIDE_LENGTH
    cell_size: int = DEFAULT_CELL_SIZE
    background: RGB = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        _check_positive_int("side_length", self.side_length)
        if self.side_length != DEFAULT_SIDE_LENGTH:
            raise InvalidConfigError(
                f"side_length must be {DEFAULT_SIDE_LENGTH} (rows of {CHUNK_SIZE} "
                f"digest bytes mirrored), got {self.side_length}"
            )
        _check_positive_int("cell_size", self.cell_size)
        _check_rgb("background", self.background)
        object.__setattr__(self, "background", tuple(self.background))

    @property
    def canvas_size(self) -> int:
        """Canvas width (== height) in pixels."""
        return self.side_length * self.cell_size

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.canvas_size, self.canvas_size)

    def with_cell_size(self, cell_size: int) -> "CanvasConfig":
        return replace(self, cell_size=cell_size)


DEFAULT_CONFIG = CanvasConfig()
