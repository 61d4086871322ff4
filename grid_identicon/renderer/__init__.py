"""Rendering subpackage.

Turns a color and pixel map into a raster image. The renderer focuses on:

* A blank square canvas of ``side_length * cell_size`` pixels per axis.
* Flat filled rectangles, one per painted cell, in a single color.
* Pillow for drawing / encoding and NumPy for array output.

See :mod:`grid_identicon.renderer.canvas` for the drawing routines.
"""

from .canvas import IdenticonRenderer, encode_image, render, render_array, render_image

__all__ = [
    "IdenticonRenderer",
    "encode_image",
    "render",
    "render_array",
    "render_image",
]
