"""
state.py
--------
Which scene is on screen, as an explicit value instead of a global.

States are {Scene1, Scene2, Scene3}; the only transition is "user picked scene
N". Every pick bumps ``generation``. A rendered figure is only committed to the
surface if it was produced for the current generation, so a slow load for an
older pick can never overwrite the chart the user asked for last.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import plotly.graph_objects as go

from config import PROCESSED_DIR
from processing.loader import load_scene_data
from scenes.catalog import get_scene
from utils.errors import SceneError
from visualization.scene_chart import render_scene

logger = logging.getLogger(__name__)

DEFAULT_SCENE = 1


@dataclass(frozen=True)
class AppState:
    scene_id: int
    generation: int = 0


def initial_state() -> AppState:
    return AppState(scene_id=DEFAULT_SCENE, generation=0)


def transition(state: AppState, scene_id: int) -> AppState:
    """Select ``scene_id``. Raises UnknownSceneError for ids outside the catalog."""
    get_scene(scene_id)
    return AppState(scene_id=scene_id, generation=state.generation + 1)


def render_state(state: AppState, data_dir=PROCESSED_DIR,
                 loader: Callable = load_scene_data, show_title=False) -> go.Figure:
    """Pure render: load and draw the scene named by ``state``."""
    scene = get_scene(state.scene_id)
    data = loader(scene, data_dir)
    return render_scene(data, scene, show_title=show_title)


class SceneSwitcher:
    """Holds the current AppState and the figure currently on the surface."""

    def __init__(self, state: Optional[AppState] = None):
        self.state = state or initial_state()
        self.figure: Optional[go.Figure] = None
        self.error: Optional[str] = None

    @property
    def scene(self):
        return get_scene(self.state.scene_id)

    def select(self, scene_id: int) -> AppState:
        """Switch scenes and wipe whatever was drawn before."""
        previous = self.state.scene_id
        self.state = transition(self.state, scene_id)
        self.figure = None
        self.error = None
        logger.info(f"Scene {previous} → {scene_id} (generation {self.state.generation})")
        return self.state

    def commit(self, generation: int, figure: go.Figure) -> bool:
        if generation != self.state.generation:
            logger.warning(f"Discarding stale render for generation {generation} "
                           f"(current is {self.state.generation})")
            return False
        self.figure = figure
        return True

    def fail(self, generation: int, message: str) -> bool:
        if generation != self.state.generation:
            return False
        self.figure = None
        self.error = message
        return True

    def render(self, scene_id: int, data_dir=PROCESSED_DIR,
               loader: Callable = load_scene_data) -> Optional[go.Figure]:
        """
        Select ``scene_id`` then load and draw it.

        A load or render failure leaves the surface empty and keeps the message
        in ``self.error``.
        """
        state = self.select(scene_id)
        try:
            fig = render_state(state, data_dir, loader)
        except SceneError as e:
            logger.error(f"Scene {scene_id} failed to render: {e}")
            self.fail(state.generation, str(e))
            return None
        self.commit(state.generation, fig)
        return self.figure
