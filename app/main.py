import streamlit as st

from dataclasses import asdict

from grid_identicon.config import CanvasConfig, DEFAULT_CELL_SIZE
from grid_identicon.digest import string_signature
from grid_identicon.errors import InvalidConfigError
from grid_identicon.pipeline import build_image_state
from grid_identicon.renderer import render
from grid_identicon.seed import random_string
from grid_identicon.state import ImageState
from grid_identicon.utils.image import to_data_uri

st.set_page_config(layout="wide", page_title="Grid Identicon")


def set_default_seed() -> None:
    if "seed" not in st.session_state:
        st.session_state["seed"] = random_string()


def get_config_from_widgets() -> CanvasConfig:
    cell_size = st.slider("Cell size", 1, 100, DEFAULT_CELL_SIZE, key="cell_size")
    return CanvasConfig(cell_size=int(cell_size))


# --------- Main App ---------

set_default_seed()
tab_icon, tab_config, tab_state = st.tabs(["Identicon", "Config", "State"])

with tab_config:
    try:
        st.session_state["config"] = get_config_from_widgets()
    except InvalidConfigError as e:
        st.error(str(e))

config: CanvasConfig = st.session_state.get("config", CanvasConfig())

with tab_icon:
    left_col, right_col = st.columns([0.5, 0.5])

    with left_col:
        if st.button("🎲 Random", key="random_btn", use_container_width=True):
            st.session_state["seed"] = random_string()
        seed: str = st.text_input("String", key="seed")
        st.caption(string_signature(seed))

    state: ImageState = build_image_state(seed, config)

    with right_col:
        if state.color is not None and state.pixel_map is not None:
            png = render(state.color, state.pixel_map, config)
            st.image(png)
            st.markdown(
                f'<a href="{to_data_uri(png)}" download="identicon.png">Download PNG</a>',
                unsafe_allow_html=True,
            )
            st.info(f"{state.color.hex}  ·  {len(state.pixel_map)} cells", icon="🎨")

with tab_state:
    st.json(
        {
            "digest": list(state.digest),
            "color": list(state.color) if state.color else None,
            "grid": [list(cell) for cell in state.grid or ()],
            "pixel_map": [rect.as_tuple() for rect in state.pixel_map or ()],
            "config": asdict(state.config),
        }
    )
