from dataclasses import replace

from grid_identicon.components import Color
from grid_identicon.state import ImageState


def color_system(state: ImageState) -> ImageState:
    """Set ``color`` from the first three digest bytes.

    The digest source always yields more than three bytes; a shorter digest
    is a programming error rather than a runtime condition.
    """
    assert len(state.digest) >= 3, "digest must hold at least 3 bytes"
    r, g, b = state.digest[0], state.digest[1], state.digest[2]
    return replace(state, color=Color(r, g, b))
