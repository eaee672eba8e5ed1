import pandas as pd
import plotly.graph_objects as go
import pytest

from config import LINE_COLOR
from processing.loader import load_scene_data
from scenes.catalog import SCENES, Scene
from utils.errors import EmptySeriesError
from visualization.scene_chart import render_scene, scene_geometry


def frame(rows):
    return pd.DataFrame(rows, columns=["Year", "value"])


@pytest.mark.parametrize("scene_id", [1, 2, 3])
def test_point_count_matches_csv_rows(data_dir, fixture_rows, scene_id):
    scene = SCENES[scene_id]
    fig = render_scene(load_scene_data(scene, data_dir), scene)
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert len(fig.data[0].x) == len(fixture_rows[scene_id])


def test_three_row_temperature_example():
    fig = render_scene(frame([(1960, 13.9), (1990, 14.2), (2023, 14.8)]), SCENES[1])
    assert tuple(fig.layout.xaxis.range) == (1960, 2023)
    assert tuple(fig.layout.yaxis.range) == pytest.approx((12.9, 15.8))


@pytest.mark.parametrize("scene_id", [1, 2, 3])
def test_domains_follow_data(data_dir, scene_id):
    scene = SCENES[scene_id]
    data = load_scene_data(scene, data_dir)
    fig = render_scene(data, scene)
    assert tuple(fig.layout.xaxis.range) == (data["Year"].min(), data["Year"].max())
    assert tuple(fig.layout.yaxis.range) == pytest.approx(
        (data["value"].min() - 1, data["value"].max() + 1))


def test_line_style_and_axis_labels():
    fig = render_scene(frame([(1960, 10.0), (2023, 32.0)]), SCENES[2])
    trace = fig.data[0]
    assert trace.mode == "lines"
    assert trace.line.color == LINE_COLOR
    assert trace.line.width == 2
    assert fig.layout.xaxis.title.text == "Year"
    assert fig.layout.xaxis.tickformat == "d"
    assert fig.layout.yaxis.title.text == "CO2"


def test_each_callout_draws_a_line_and_a_label():
    scene = SCENES[3]
    fig = render_scene(frame([(1960, 16.0), (2023, 14.7)]), scene)
    assert len(fig.layout.annotations) == 2 * len(scene.annotations)
    labels = [a.text for a in fig.layout.annotations if a.text]
    assert labels == [a.text for a in scene.annotations]


def test_leader_lines_use_default_offsets():
    fig = render_scene(frame([(1960, 13.9), (2023, 14.8)]), SCENES[1])
    leaders = [a for a in fig.layout.annotations if a.showarrow]
    # "left" then "up"
    assert (leaders[0].ax, leaders[0].ay) == pytest.approx((-30, 0))
    assert (leaders[1].ax, leaders[1].ay) == pytest.approx((30, -30))


def test_explicit_end_coordinates_are_used():
    from scenes.catalog import Annotation
    scene = Scene(id=9, file="x.csv", value_column="v", title="T", description="D",
                  annotations=(Annotation(2000, 5.0, "right", "here", x_end=10.0, y_end=20.0),))
    data = frame([(2000, 5.0), (2010, 7.0)])
    geom = scene_geometry(data, scene)
    line = geom.leader_lines[0]
    assert (line.x2, line.y2) == (10.0, 20.0)

    fig = render_scene(data, scene)
    leader = fig.layout.annotations[0]
    assert (leader.ax, leader.ay) == pytest.approx((10.0 - line.x1, 20.0 - line.y1))


def test_title_and_description_travel_in_meta():
    fig = render_scene(frame([(1960, 16.0), (2023, 14.7)]), SCENES[3])
    assert fig.layout.meta["title"] == "Ice Extent Over Time"
    assert fig.layout.meta["scene_id"] == 3
    assert fig.layout.title.text is None


def test_title_drawn_inside_keeps_plot_area():
    fig = render_scene(frame([(1960, 16.0), (2023, 14.7)]), SCENES[3], show_title=True)
    assert fig.layout.title.text == "Ice Extent Over Time"
    assert fig.layout.height - fig.layout.margin.t - fig.layout.margin.b == 430
    assert fig.layout.width - fig.layout.margin.l - fig.layout.margin.r == 700


def test_empty_data_is_rejected():
    with pytest.raises(EmptySeriesError):
        render_scene(frame([]), SCENES[1])


def test_single_year_renders():
    fig = render_scene(frame([(2000, 3.0)]), SCENES[2])
    assert tuple(fig.layout.yaxis.range) == (2.0, 4.0)
