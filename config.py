import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
RAW_DIR = DATA_DIR / "raw"
PROCESSED_DIR = Path(os.getenv("SCENES_DATA_DIR", DATA_DIR / "processed"))
OUTPUT_DIR = Path(os.getenv("SCENES_OUTPUT_DIR", BASE_DIR / "outputs"))

LOG_LEVEL = os.getenv("SCENES_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Chart frame (px)
CHART_WIDTH = 800
CHART_HEIGHT = 500
MARGIN = {"top": 20, "right": 30, "bottom": 50, "left": 70}
PLOT_WIDTH = CHART_WIDTH - MARGIN["left"] - MARGIN["right"]
PLOT_HEIGHT = CHART_HEIGHT - MARGIN["top"] - MARGIN["bottom"]

# Styling
LINE_COLOR = "#28a745"
LINE_WIDTH = 2
ANNOTATION_OFFSET = 30   # leader-line length when no explicit end is given
LABEL_LIFT = 10          # label sits this far above the leader-line end
VALUE_PADDING = 1        # value axis is padded by this much on both sides

YEAR_COLUMN = "Year"
