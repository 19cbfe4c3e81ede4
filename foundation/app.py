"""Interactive foundation drawing page.

    streamlit run foundation/app.py

The seven inputs feed one FoundationConfig snapshot; the drawing and the
specifications are recomputed from it on every rerun.
"""
import streamlit as st

from foundation.config import FoundationConfig, default_config, update_config
from foundation.constants import PARAM_LIMITS, PARAM_STEPS, PARAM_LABELS, DEFAULTS
from foundation.metrics import compute_specs, format_specs
from foundation.gen_drawings import render_view

VIEW_LABELS = {"Plan View": "plan", "Section View": "section"}


def read_inputs(config: FoundationConfig) -> FoundationConfig:
    """Number inputs in a four-column grid, each routed through update_config."""
    cols = st.columns(4)
    for i, (key, (lo, hi)) in enumerate(PARAM_LIMITS.items()):
        with cols[i % 4]:
            raw = st.number_input(PARAM_LABELS[key], min_value=lo, max_value=hi,
                                  value=DEFAULTS[key], step=PARAM_STEPS[key])
        config = update_config(config, key, raw)
    return config


st.set_page_config(page_title="Foundation Technical Drawing", layout="wide")
st.title("Foundation Technical Drawing")

if "config" not in st.session_state:
    st.session_state.config = default_config()
st.session_state.config = read_inputs(st.session_state.config)
config = st.session_state.config

label = st.radio("View", list(VIEW_LABELS), horizontal=True)
svg = render_view(config, VIEW_LABELS[label])
st.markdown(f'<div style="overflow:auto">{svg}</div>', unsafe_allow_html=True)

st.subheader("Specifications")
for col, (caption, text) in zip(st.columns(3), format_specs(compute_specs(config)).items()):
    col.markdown(f"**{caption}:** {text}")
