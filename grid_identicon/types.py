"""Common type aliases and enumerations.

``Digest``, ``Grid`` and ``PixelMap`` are the persistent sequences stored on
:class:`grid_identicon.state.ImageState`; ``System`` is the signature every
pipeline stage implements.
"""

from enum import StrEnum
from typing import Callable, Tuple, TYPE_CHECKING

from pyrsistent.typing import PVector


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from grid_identicon.state import ImageState
    from grid_identicon.components import Cell, Rect

Byte = int
RGB = Tuple[int, int, int]

Digest = PVector[Byte]
Grid = PVector["Cell"]
PixelMap = PVector["Rect"]

System = Callable[["ImageState"], "ImageState"]


class ImageFormat(StrEnum):
    """Raster encodings accepted by the renderer (Pillow format names)."""

    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    WEBP = "WEBP"
