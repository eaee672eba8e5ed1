"""Shared fixtures: small scene CSVs written to a temporary data directory."""

import pytest

from scenes.catalog import SCENES

FIXTURE_ROWS = {
    1: [(1960, 13.9), (1990, 14.2), (2023, 14.8)],
    2: [(1960, 10.0), (1975, 16.5), (2000, 24.0), (2023, 32.0)],
    3: [(1960, 16.0), (1980, 15.6), (2000, 15.1), (2010, 14.9), (2023, 14.7)],
}


def write_csv(path, header, rows):
    lines = [",".join(header)] + [",".join(str(v) for v in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """A processed-data directory holding one fixture CSV per scene."""
    d = tmp_path / "processed"
    d.mkdir()
    for scene_id, rows in FIXTURE_ROWS.items():
        scene = SCENES[scene_id]
        write_csv(d / scene.file, ["Year", scene.value_column], rows)
    return d


@pytest.fixture
def fixture_rows():
    return FIXTURE_ROWS
