import io
import logging
from typing import Iterable, Optional, Sequence, Union

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from grid_identicon.components import Color, Rect
from grid_identicon.config import CanvasConfig, DEFAULT_CONFIG, DEFAULT_FORMAT
from grid_identicon.types import ImageFormat, RGB

logger = logging.getLogger(__name__)

ColorLike = Union[Color, Sequence[int]]
UInt8Array = npt.NDArray[np.uint8]


def render_image(
    color: ColorLike,
    pixel_map: Iterable[Rect],
    config: CanvasConfig = DEFAULT_CONFIG,
) -> Image.Image:
    """
    Paints every rectangle of ``pixel_map`` onto a blank square canvas.

    Each rectangle covers ``top_left`` inclusive to ``bottom_right`` exclusive.
    Pillow's ``rectangle`` includes its second corner, hence the ``- 1``.
    """
    fill: RGB = tuple(color)  # type: ignore[assignment]
    img = Image.new("RGB", config.dimensions, config.background)
    draw = ImageDraw.Draw(img)

    painted = 0
    for top_left, bottom_right in pixel_map:
        x0, y0 = top_left
        x1, y1 = bottom_right
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=fill)
        painted += 1

    logger.debug(
        "rendered %d cells on %dx%d canvas", painted, *config.dimensions
    )
    return img


def encode_image(img: Image.Image, fmt: ImageFormat = DEFAULT_FORMAT) -> bytes:
    buffer = io.BytesIO()
    img.save(buffer, format=ImageFormat(fmt).value)
    return buffer.getvalue()


def render(
    color: ColorLike,
    pixel_map: Iterable[Rect],
    config: CanvasConfig = DEFAULT_CONFIG,
    fmt: ImageFormat = DEFAULT_FORMAT,
) -> bytes:
    """
    Renders and encodes the identicon, returning the raw image bytes (PNG by default).
    """
    return encode_image(render_image(color, pixel_map, config), fmt)


def render_array(
    color: ColorLike,
    pixel_map: Iterable[Rect],
    config: CanvasConfig = DEFAULT_CONFIG,
) -> UInt8Array:
    """
    Renders to an ``(H, W, 3)`` uint8 array instead of an encoded image.
    """
    return np.asarray(render_image(color, pixel_map, config), dtype=np.uint8)


class IdenticonRenderer:
    config: CanvasConfig
    fmt: ImageFormat

    def __init__(
        self,
        config: Optional[CanvasConfig] = None,
        fmt: ImageFormat = DEFAULT_FORMAT,
    ):
        self.config = config or DEFAULT_CONFIG
        self.fmt = ImageFormat(fmt)

    def render_image(self, color: ColorLike, pixel_map: Iterable[Rect]) -> Image.Image:
        return render_image(color, pixel_map, self.config)

    def render(self, color: ColorLike, pixel_map: Iterable[Rect]) -> bytes:
        return render(color, pixel_map, self.config, self.fmt)
