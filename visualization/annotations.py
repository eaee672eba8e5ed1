"""
annotations.py
--------------
Callouts drawn on a scene chart: a short leader line from a data point to a
text label.

Geometry is worked out in plot-area pixels (origin top-left, y grows
downward) and then expressed as plotly annotations anchored at the data point
with pixel offsets, so the drawn figure matches the computed geometry.
"""

from dataclasses import dataclass
from typing import Dict, List

from config import ANNOTATION_OFFSET, LABEL_LIFT


@dataclass(frozen=True)
class LeaderLine:
    x1: float
    y1: float
    x2: float
    y2: float
    text: str
    text_anchor: str   # 'start' or 'end'

    @property
    def dx(self) -> float:
        return self.x2 - self.x1

    @property
    def dy(self) -> float:
        return self.y2 - self.y1

    @property
    def label_xy(self):
        return self.x2, self.y2 - LABEL_LIFT


def leader_line_end(direction, x, y, x_end=None, y_end=None, offset=ANNOTATION_OFFSET):
    """
    End point of a leader line starting at (x, y).

    Explicit coordinates win. Otherwise x moves left for 'left' and right for
    every other direction; y moves up for 'up', down for 'down' and stays put
    for 'left'/'right'.
    """
    if x_end is None:
        x_end = x - offset if direction == 'left' else x + offset
    if y_end is None:
        if direction == 'up':
            y_end = y - offset
        elif direction == 'down':
            y_end = y + offset
        else:
            y_end = y
    return float(x_end), float(y_end)


def place_annotation(annotation, x_scale, y_scale, offset=ANNOTATION_OFFSET) -> LeaderLine:
    x1 = float(x_scale(annotation.year))
    y1 = float(y_scale(annotation.value))
    x2, y2 = leader_line_end(annotation.direction, x1, y1,
                             annotation.x_end, annotation.y_end, offset)
    return LeaderLine(
        x1=x1, y1=y1, x2=x2, y2=y2,
        text=annotation.text,
        text_anchor='end' if annotation.direction == 'left' else 'start',
    )


def to_plotly(annotation, line: LeaderLine, color: str = "#333333") -> List[Dict]:
    """Two plotly annotation dicts: the leader line, then its label."""
    lx, ly = line.label_xy
    leader = dict(
        x=annotation.year, y=annotation.value,
        xref='x', yref='y',
        axref='pixel', ayref='pixel',
        ax=line.dx, ay=line.dy,       # plotly pixel offsets also grow downward
        text='',
        showarrow=True,
        arrowhead=0,
        arrowwidth=1,
        arrowcolor=color,
        standoff=0,
        startstandoff=0,
        name='annotation-line',
    )
    label = dict(
        x=annotation.year, y=annotation.value,
        xref='x', yref='y',
        xshift=lx - line.x1,
        yshift=-(ly - line.y1),       # yshift is positive upward
        text=line.text,
        showarrow=False,
        xanchor='right' if line.text_anchor == 'end' else 'left',
        yanchor='middle',
        font=dict(size=12, color=color),
        name='annotation',
    )
    return [leader, label]
