"""Canvas geometry components.

``Point`` is a pixel coordinate on the rendered canvas, ``Rect`` an
axis-aligned rectangle spanning ``top_left`` (inclusive) to ``bottom_right``
(exclusive). Both are immutable and unpack like plain tuples.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Point:
    """Pixel coordinate.

    Attributes:
        x: Column in pixels (0 at left).
        y: Row in pixels (0 at top).
    """

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rect:
    """Filled rectangle for one painted cell."""

    top_left: Point
    bottom_right: Point

    def __iter__(self) -> Iterator[Point]:
        yield self.top_left
        yield self.bottom_right

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def as_tuple(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (tuple(self.top_left), tuple(self.bottom_right))  # type: ignore[return-value]
