#!/usr/bin/env python3
"""
Climate Scenes - command line entry point
Run:
  python main.py render [--format html|png|svg] [--scene N]
  python main.py preprocess --raw data/raw/temperature_monthly.csv --column "Temperature (°C)"
      --out data/processed/processed_temperature.csv   (replaces the 1960-2023 sample)
  streamlit run dashboard/app.py
"""
import argparse
import logging
import sys
from pathlib import Path

from config import LOG_FORMAT, LOG_LEVEL, OUTPUT_DIR, PROCESSED_DIR
from processing.preprocess import preprocess_file
from scenes.catalog import SCENES
from scenes.state import AppState, render_state
from utils.errors import SceneError
from utils.io_utils import FORMATS, save_figure

logger = logging.getLogger(__name__)


def render_all(scene_ids, fmt="html", data_dir=PROCESSED_DIR, output_dir=OUTPUT_DIR):
    """Render each scene to ``output_dir``. Returns the number of failures."""
    failures = 0
    for scene_id in scene_ids:
        try:
            fig = render_state(AppState(scene_id=scene_id), data_dir, show_title=True)
        except SceneError as e:
            logger.error(f"Scene {scene_id}: {e}")
            failures += 1
            continue
        save_figure(fig, f"scene{scene_id}", fmt=fmt, output_dir=output_dir)
    return failures


def build_parser():
    parser = argparse.ArgumentParser(description="Render the climate scenes.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_render = sub.add_parser("render", help="write every scene chart to disk")
    p_render.add_argument("--scene", type=int, choices=sorted(SCENES), action="append",
                          help="scene id to render (repeatable; default: all)")
    p_render.add_argument("--format", choices=FORMATS, default="html")
    p_render.add_argument("--data-dir", type=Path, default=PROCESSED_DIR)
    p_render.add_argument("--output-dir", type=Path, default=OUTPUT_DIR)

    p_pre = sub.add_parser("preprocess", help="raw series → processed_*.csv")
    p_pre.add_argument("--raw", type=Path, required=True)
    p_pre.add_argument("--column", required=True, help="value column to keep")
    p_pre.add_argument("--out", type=Path, default=None)
    return parser


def main(argv=None):
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    args = build_parser().parse_args(argv)

    if args.command == "render":
        scene_ids = args.scene or sorted(SCENES)
        logger.info(f" Rendering scenes {scene_ids} as {args.format}")
        failures = render_all(scene_ids, args.format, args.data_dir, args.output_dir)
        if failures:
            logger.error(f" {failures} scene(s) failed")
            return 1
        logger.info(f" Done. Check {args.output_dir}/")
        return 0

    try:
        out = preprocess_file(args.raw, args.column, args.out)
    except SceneError as e:
        logger.error(f"Preprocessing failed: {e}")
        return 1
    logger.info(f" Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
