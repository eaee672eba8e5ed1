import plotly.graph_objects as go
import pytest

from utils.io_utils import save_figure


def test_html_export_lands_in_output_dir(tmp_path):
    out = save_figure(go.Figure(), "scene1", output_dir=tmp_path / "outputs")
    assert out == tmp_path / "outputs" / "scene1.html"
    assert out.exists()


def test_unknown_format_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_figure(go.Figure(), "x", fmt="gif", output_dir=tmp_path)
    assert not any(tmp_path.iterdir())
