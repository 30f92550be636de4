"""Shared configuration: paths, canvas constants, logging setup."""

import logging
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Where the analytics dataset is read from and where snapshots are written.
#
# Env vars:
# - FLIGHTMAP_DATA_PATH   -> local JSON dataset
# - FLIGHTMAP_DATA_URL    -> remote JSON dataset (takes precedence over the path)
# - FLIGHTMAP_OUTPUT_DIR  -> directory where map snapshots are written
_default_data_path = PROJECT_ROOT / "data" / "analytics_results.json"
DATA_PATH = Path(os.getenv("FLIGHTMAP_DATA_PATH", _default_data_path))
DATA_URL = os.getenv("FLIGHTMAP_DATA_URL") or None

_default_output_dir = PROJECT_ROOT / "output"
OUTPUT_DIR = Path(os.getenv("FLIGHTMAP_OUTPUT_DIR", _default_output_dir))

# Logical map canvas
CANVAS_WIDTH = 1000.0
CANVAS_HEIGHT = 500.0
# Latitude at which the Mercator transform reaches the canvas edge.
MAX_LATITUDE = 85.05112878

# Viewport bounds (8x in, 2x out from the full extent)
MIN_VIEW_WIDTH = CANVAS_WIDTH / 8
MAX_VIEW_WIDTH = CANVAS_WIDTH * 2
MIN_VIEW_HEIGHT = CANVAS_HEIGHT / 8
MAX_VIEW_HEIGHT = CANVAS_HEIGHT * 2
ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.25

# KPIs
ANIMATION_DURATION_MS = 1500.0
SIGNATURE_ROUTE_COUNT = 4
TOP_ENTITY_COUNT = 10
MAX_RENDERED_ROUTES = 2000
MAX_RENDERED_AIRPORTS = 2000

# HTTP
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
RETRY_BACKOFF = 2

HEADERS = {
    "User-Agent": "flightmap/0.1 (+https://github.com/flightmap)",
    "Accept": "application/json, text/plain, */*",
    "Cache-Control": "no-store",
}


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("flightmap")
