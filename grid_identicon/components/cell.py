"""Cell component.

One ``(value, index)`` entry of the identicon grid. ``value`` is the digest
byte mirrored into this cell and ``index`` its row-major position in the
square grid. Indices survive filtering unchanged so later stages can still
locate the cell on the canvas.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Cell:
    """Grid cell.

    Attributes:
        value: Digest byte (0..255) occupying the cell.
        index: Row-major position in the square grid (0 at top-left).
    """

    value: int
    index: int

    def __iter__(self) -> Iterator[int]:
        yield self.value
        yield self.index

    @property
    def painted(self) -> bool:
        """True if the cell survives the parity filter (even value)."""
        return self.value % 2 == 0
