"""Fill color component."""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Color:
    """RGB triple picked from the first three digest bytes.

    Attributes:
        r: Red channel (0..255).
        g: Green channel (0..255).
        b: Blue channel (0..255).
    """

    r: int
    g: int
    b: int

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """CSS style ``#rrggbb`` string."""
        return "#{:02x}{:02x}{:02x}".format(self.r, self.g, self.b)
