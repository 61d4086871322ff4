import base64

import numpy as np
import numpy.typing as npt
from typing import Sequence

from grid_identicon.config import CanvasConfig

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


def to_base64(data: bytes) -> str:
    """
    Standard base64 text for encoded image bytes.
    """
    return base64.b64encode(data).decode("ascii")


def to_data_uri(data: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{to_base64(data)}"


def color_mask(arr: UInt8Array, color: Sequence[int]) -> BoolArray:
    """
    Boolean (H, W) mask of pixels exactly equal to ``color``.
    """
    target: UInt8Array = np.asarray(tuple(color), dtype=np.uint8)
    return np.all(arr[..., :3] == target, axis=-1)


def painted_cells(
    arr: UInt8Array, color: Sequence[int], config: CanvasConfig
) -> BoolArray:
    """
    Recover the painted stencil (side_length x side_length) from a rendered
    canvas by sampling the center pixel of every cell.
    """
    mask = color_mask(arr, color)
    half = config.cell_size // 2
    centers = np.arange(config.side_length) * config.cell_size + half
    return mask[np.ix_(centers, centers)]
