"""
preprocess.py
-------------
Turn a raw climate series into the ``processed_*.csv`` shape the scenes read.

Raw input: any CSV with either a ``Year`` column or a date column
(``Date`` / ``date`` / ``timestamp``) plus one value column. Monthly or daily
readings are averaged per year.

Output: ``data/processed/processed_<name>.csv`` with columns ``Year,<value column>``.

Flow:
  raw CSV → normalise year column → drop missing → annual mean → sort → save
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from config import PROCESSED_DIR, YEAR_COLUMN
from utils.errors import SceneDataError, EmptySeriesError

logger = logging.getLogger(__name__)

DATE_COLUMNS = ['Date', 'date', 'timestamp']


# ── STEP 1: LOAD ──────────────────────────────────────────────────────────────

def load_raw(path: Union[str, Path]) -> pd.DataFrame:
    """Load one raw CSV."""
    path = Path(path)
    try:
        df = pd.read_csv(path)
    except FileNotFoundError as e:
        raise SceneDataError(f"Raw file not found: {path}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise SceneDataError(f"Could not parse {path.name}: {e}") from e

    logger.info(f"Raw {path.name}: {len(df):,} rows | columns: {list(df.columns)}")
    return df


# ── STEP 2: NORMALISE YEAR COLUMN ─────────────────────────────────────────────

def normalise_year(df: pd.DataFrame) -> pd.DataFrame:
    """
    Make sure a numeric ``Year`` column exists.
    Handles: Year already present, or a parseable date column.
    """
    df = df.copy()
    if YEAR_COLUMN in df.columns:
        df[YEAR_COLUMN] = pd.to_numeric(df[YEAR_COLUMN], errors='coerce')
        return df

    for col in DATE_COLUMNS:
        if col in df.columns:
            stamps = pd.to_datetime(df[col], errors='coerce')
            df[YEAR_COLUMN] = stamps.dt.year
            logger.info(f"Derived '{YEAR_COLUMN}' from '{col}'")
            return df

    raise SceneDataError(
        f"No '{YEAR_COLUMN}' or date column found; columns: {list(df.columns)}"
    )


# ── STEP 3: ANNUAL MEANS ──────────────────────────────────────────────────────

def annual_means(df: pd.DataFrame, value_column: str) -> pd.DataFrame:
    """Collapse readings to one mean value per year."""
    if value_column not in df.columns:
        raise SceneDataError(
            f"Value column '{value_column}' not found; columns: {list(df.columns)}"
        )

    clean = pd.DataFrame({
        YEAR_COLUMN: df[YEAR_COLUMN],
        value_column: pd.to_numeric(df[value_column], errors='coerce'),
    }).replace([np.inf, -np.inf], np.nan).dropna()

    dropped = len(df) - len(clean)
    if dropped:
        logger.info(f"Dropped {dropped:,} rows with missing year/value")

    if clean.empty:
        raise EmptySeriesError(f"No usable '{value_column}' readings")

    clean = clean.astype({YEAR_COLUMN: int})
    yearly = (
        clean.groupby(YEAR_COLUMN, as_index=False)[value_column]
        .mean()
        .sort_values(YEAR_COLUMN)
        .reset_index(drop=True)
    )
    logger.info(f"Annual series: {len(yearly)} years "
                f"({yearly[YEAR_COLUMN].min()}–{yearly[YEAR_COLUMN].max()})")
    return yearly


# ── STEP 4: SAVE ──────────────────────────────────────────────────────────────

def save_processed(df: pd.DataFrame, out_path: Union[str, Path]) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False, encoding="utf-8")
    logger.info(f"Saved {out_path.name} ({len(df):,} rows)")
    return out_path


# ── PIPELINE ──────────────────────────────────────────────────────────────────

def preprocess_file(raw_path, value_column: str, out_path=None) -> Path:
    """Run the full raw → processed pipeline for one series."""
    if out_path is None:
        stem = Path(raw_path).stem.lower()
        out_path = PROCESSED_DIR / f"processed_{stem}.csv"

    df = load_raw(raw_path)
    df = normalise_year(df)
    yearly = annual_means(df, value_column)
    return save_processed(yearly, out_path)
