import logging
from pathlib import Path

from config import OUTPUT_DIR

logger = logging.getLogger(__name__)

FORMATS = ("html", "png", "svg")


def save_figure(fig, name, fmt="html", output_dir=OUTPUT_DIR) -> Path:
    """Save a figure as HTML, or as a static image through kaleido."""
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format {fmt!r}; choose from {FORMATS}")
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    fname = output_dir / f"{name}.{fmt}"
    if fmt == "html":
        fig.write_html(fname, include_plotlyjs="cdn")
    else:
        fig.write_image(fname)
    logger.info(f"Saved {fname}")
    return fname
