"""
catalog.py
----------
The three fixed scenes: which CSV to read, which column to plot, the title,
the narrative text and the two callouts drawn on top of the line.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from utils.errors import UnknownSceneError

DIRECTIONS = ("left", "right", "up", "down")


@dataclass(frozen=True)
class Annotation:
    year: int
    value: float
    direction: str
    text: str
    x_end: Optional[float] = None   # explicit leader-line end, plot-area px
    y_end: Optional[float] = None

    def __post_init__(self):
        if self.direction not in DIRECTIONS:
            raise ValueError(f"Unknown annotation direction: {self.direction!r}")


@dataclass(frozen=True)
class Scene:
    id: int
    file: str
    value_column: str
    title: str
    description: str
    annotations: Tuple[Annotation, ...] = field(default_factory=tuple)


SCENES: Dict[int, Scene] = {
    1: Scene(
        id=1,
        file="processed_temperature.csv",
        value_column="Temperature (°C)",
        title="Global Temperature Trends",
        description=(
            "This scene highlights global temperature trends over the past decades, "
            "showing the steady rise in temperature anomalies."
        ),
        annotations=(
            Annotation(2023, 14.8, "left", "Recent high temperature"),
            Annotation(1960, 13.9, "up", "Starting point, also the lowest point"),
        ),
    ),
    2: Scene(
        id=2,
        file="processed_co2.csv",
        value_column="CO2",
        title="CO2 Emissions Over Time",
        description=(
            "This scene illustrates the rise in CO2 emissions over the past decades. "
            "Notice how the increase in CO2 emissions is correlated with the increase "
            "in global temperatures."
        ),
        annotations=(
            Annotation(2023, 32, "left", "Peak CO2 levels"),
            Annotation(1960, 10, "up", "Initial CO2 levels"),
        ),
    ),
    3: Scene(
        id=3,
        file="processed_ice.csv",
        value_column="IceExtent",
        title="Ice Extent Over Time",
        description=(
            "This scene shows the reduction in ice extent over the past decades. "
            "Once again, notice how the decrease in the ice extent is mirrored by the "
            "increase in both global temperatures and CO2 levels."
        ),
        annotations=(
            Annotation(1960, 16, "up", "Initial ice extent"),
            Annotation(2023, 14.7, "left", "Recent ice extent"),
        ),
    ),
}


def get_scene(scene_id: int) -> Scene:
    try:
        return SCENES[scene_id]
    except KeyError:
        raise UnknownSceneError(
            f"Scene {scene_id!r} does not exist (choose from {sorted(SCENES)})"
        ) from None
