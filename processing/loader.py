"""
loader.py
---------
Read one scene's CSV into a two-column frame of (Year, value) pairs.

Columns are type-inferred by pandas; anything that still is not numeric in the
year or value column is coerced to NaN and the row is dropped, as are rows
with an infinite year/value or a fractional year. Rows come back
sorted by year (stable, so duplicate years keep their file order).
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from config import YEAR_COLUMN
from utils.errors import SceneDataError

logger = logging.getLogger(__name__)

VALUE_COLUMN = "value"


def read_scene_csv(path: Union[str, Path], value_column: str) -> pd.DataFrame:
    """Load ``path`` and return a frame with ``Year`` (int) and ``value`` (float)."""
    path = Path(path)
    try:
        raw = pd.read_csv(path, encoding="utf-8")
    except FileNotFoundError as e:
        raise SceneDataError(f"Data file not found: {path}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise SceneDataError(f"Could not parse {path.name}: {e}") from e

    missing = [c for c in (YEAR_COLUMN, value_column) if c not in raw.columns]
    if missing:
        raise SceneDataError(
            f"{path.name} is missing column(s) {missing}; found {list(raw.columns)}"
        )

    df = pd.DataFrame({
        YEAR_COLUMN: pd.to_numeric(raw[YEAR_COLUMN], errors='coerce'),
        VALUE_COLUMN: pd.to_numeric(raw[value_column], errors='coerce'),
    }).replace([np.inf, -np.inf], np.nan)

    n_before = len(df)
    df = df.dropna()
    dropped = n_before - len(df)
    if dropped:
        logger.warning(f"{path.name}: dropped {dropped} row(s) with non-numeric year/value")

    whole = df[YEAR_COLUMN] == np.floor(df[YEAR_COLUMN])
    if not whole.all():
        logger.warning(f"{path.name}: dropped {(~whole).sum()} row(s) with a fractional year")
        df = df[whole]

    df = df.astype({YEAR_COLUMN: int, VALUE_COLUMN: float})
    df = df.sort_values(YEAR_COLUMN, kind='mergesort').reset_index(drop=True)

    logger.info(f"Loaded {path.name}: {len(df)} rows | column '{value_column}'")
    return df


def load_scene_data(scene, data_dir: Union[str, Path]) -> pd.DataFrame:
    """Load the CSV that belongs to ``scene`` from ``data_dir``."""
    return read_scene_csv(Path(data_dir) / scene.file, scene.value_column)
