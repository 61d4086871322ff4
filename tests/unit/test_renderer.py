import io

import numpy as np
import pytest
from PIL import Image
from pyrsistent import pvector

from grid_identicon.components import Color, Point, Rect
from grid_identicon.config import CanvasConfig
from grid_identicon.renderer import (
    IdenticonRenderer,
    render,
    render_array,
    render_image,
)
from grid_identicon.types import ImageFormat
from grid_identicon.utils.image import color_mask

RED = Color(200, 0, 0)
WHITE = (255, 255, 255)


def test_render_returns_png_bytes() -> None:
    data = render(RED, [Rect(Point(0, 0), Point(50, 50))])
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    img = Image.open(io.BytesIO(data))
    assert img.size == (250, 250)


def test_render_empty_pixel_map_is_blank() -> None:
    arr = render_array(RED, pvector())
    assert arr.shape == (250, 250, 3)
    assert np.all(arr == 255)


def test_render_rect_covers_exactly_one_cell() -> None:
    arr = render_array(RED, [Rect(Point(50, 50), Point(100, 100))])
    mask = color_mask(arr, RED)
    assert mask.sum() == 50 * 50
    assert mask[50, 50] and mask[99, 99]
    assert not mask[100, 100]
    assert not mask[49, 49]


def test_render_adjacent_rects_do_not_overlap() -> None:
    rects = [
        Rect(Point(0, 0), Point(10, 10)),
        Rect(Point(10, 0), Point(20, 10)),
    ]
    config = CanvasConfig(cell_size=10)
    arr = render_array(RED, rects, config)
    assert color_mask(arr, RED).sum() == 200
    assert color_mask(arr, WHITE).sum() == 50 * 50 - 200


def test_render_accepts_plain_tuples() -> None:
    arr = render_array((1, 2, 3), [((0, 0), (50, 50))])  # type: ignore[list-item]
    assert tuple(arr[0, 0]) == (1, 2, 3)


def test_render_canvas_follows_config() -> None:
    config = CanvasConfig(side_length=5, cell_size=4, background=(0, 0, 0))
    img = render_image(RED, [], config)
    assert img.size == (20, 20)
    assert img.getpixel((0, 0)) == (0, 0, 0)


@pytest.mark.parametrize("fmt", [ImageFormat.PNG, ImageFormat.BMP, ImageFormat.GIF])
def test_render_formats(fmt: ImageFormat) -> None:
    data = render(RED, [], fmt=fmt)
    img = Image.open(io.BytesIO(data))
    assert img.format == fmt.value


def test_identicon_renderer_object() -> None:
    config = CanvasConfig(cell_size=2)
    renderer = IdenticonRenderer(config)
    img = renderer.render_image(RED, [Rect(Point(0, 0), Point(2, 2))])
    assert img.size == (10, 10)
    assert img.getpixel((1, 1)) == RED.rgb
    assert renderer.render(RED, []).startswith(b"\x89PNG")


def test_identicon_renderer_defaults() -> None:
    renderer = IdenticonRenderer()
    assert renderer.config == CanvasConfig()
    assert renderer.fmt == ImageFormat.PNG
