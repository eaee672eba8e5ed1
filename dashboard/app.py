"""
dashboard/app.py
----------------
Streamlit page — Climate Scenes
Three buttons switch between three annotated line charts
(global temperature, CO2 emissions, ice extent).

Run from PROJECT ROOT:
  streamlit run dashboard/app.py
"""

import sys
import logging
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import streamlit as st

from config import LOG_FORMAT, LOG_LEVEL, PROCESSED_DIR
from processing.loader import read_scene_csv
from scenes.catalog import SCENES
from scenes.state import SceneSwitcher

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

# ── PAGE CONFIG ───────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Climate Scenes",
    page_icon="🌡️",
    layout="centered",
)

st.markdown("""
<style>
  .block-container { max-width: 900px !important; padding-top: 1.5rem !important; }

  #chart-title {
    font-size: 1.6rem;
    font-weight: 600;
    color: #1A2E3B;
    margin: 0.5rem 0 0.25rem 0;
  }
  #scene-description {
    color: #607D8B;
    font-size: 0.95rem;
    line-height: 1.5;
    margin-bottom: 1rem;
  }

  /* ── Scene buttons ── */
  .stButton > button {
    width: 100%;
    border-radius: 8px !important;
    border: 1.5px solid #28a745 !important;
    color: #28a745 !important;
    font-weight: 600 !important;
  }
  .stButton > button:hover {
    background-color: #28a745 !important;
    color: #FFFFFF !important;
  }

  [data-testid="stPlotlyChart"] {
    background-color: #FFFFFF !important;
    border: 1px solid #E1E8ED !important;
    border-radius: 10px !important;
    padding: 8px !important;
  }
</style>
""", unsafe_allow_html=True)


# ── CACHED LOADER ─────────────────────────────────────────────────────────────

@st.cache_data(show_spinner="Loading scene data…")
def load_cached(path: str, value_column: str):
    return read_scene_csv(path, value_column)


def cached_loader(scene, data_dir):
    return load_cached(str(Path(data_dir) / scene.file), scene.value_column)


# ── STATE ─────────────────────────────────────────────────────────────────────

if "switcher" not in st.session_state:
    switcher = SceneSwitcher()
    switcher.render(switcher.state.scene_id, PROCESSED_DIR, cached_loader)
    st.session_state.switcher = switcher

switcher = st.session_state.switcher


# ── SCENE BUTTONS ─────────────────────────────────────────────────────────────

st.markdown("## Climate Change Over Time")

cols = st.columns(len(SCENES))
for col, (scene_id, scene) in zip(cols, sorted(SCENES.items())):
    with col:
        if st.button(f"Scene {scene_id}", key=f"scene{scene_id}-btn", help=scene.title):
            switcher.render(scene_id, PROCESSED_DIR, cached_loader)

scene = switcher.scene
st.markdown(f'<div id="chart-title">{scene.title}</div>', unsafe_allow_html=True)
st.markdown(f'<div id="scene-description">{scene.description}</div>', unsafe_allow_html=True)


# ── CHART ─────────────────────────────────────────────────────────────────────

if switcher.figure is not None:
    st.plotly_chart(
        switcher.figure,
        width="content",
        config={'displayModeBar': False, 'displaylogo': False},
    )
elif switcher.error:
    st.error(f"❌ Could not draw this scene: {switcher.error}")
    st.caption(f"Expected `{scene.file}` in `{PROCESSED_DIR}`. "
               "Run `python main.py preprocess` to create it.")

with st.expander("📖 About the data", expanded=False):
    st.markdown(f"""
**File:** `{scene.file}`
**Column plotted:** `{scene.value_column}`

The value axis is padded by one unit above and below the observed range so the
line never touches the frame. Callouts mark the first and most recent years.
    """)


# ── FOOTER ────────────────────────────────────────────────────────────────────
st.markdown("""
<div style="text-align: center; color: #64748b; padding: 2rem 0 0 0; font-size: 0.85rem;">
    Climate Scenes | Built with Streamlit & Plotly
</div>
""", unsafe_allow_html=True)
