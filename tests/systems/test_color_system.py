from grid_identicon.components import Color
from grid_identicon.systems.color import color_system
from tests.test_utils import make_digest_state


def test_color_system_picks_first_three_bytes() -> None:
    state = make_digest_state()
    new_state = color_system(state)
    assert new_state.color == Color(130, 5, 44)
    assert new_state.color.rgb == (130, 5, 44)


def test_color_system_returns_new_state() -> None:
    state = make_digest_state()
    new_state = color_system(state)
    assert state.color is None
    assert new_state is not state
    assert new_state.digest == state.digest


def test_color_system_ignores_rest_of_digest() -> None:
    state = make_digest_state([1, 2, 3, 255, 255, 255])
    assert color_system(state).color == Color(1, 2, 3)


def test_color_hex() -> None:
    assert Color(130, 5, 44).hex == "#82052c"
    assert Color(0, 0, 0).hex == "#000000"
