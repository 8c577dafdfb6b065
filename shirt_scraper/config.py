# shirt_scraper/config.py
from __future__ import annotations

from pathlib import Path


# -----------------------------
# Defaults (CLI)
# -----------------------------

ENTRY_URL = "http://shirts4mike.com/shirts.php"
SITE_ORIGIN = "http://shirts4mike.com/"

DEFAULT_OUT_DIR = Path("data")
DEFAULT_ERROR_LOG = Path("scraper-error.log")

# Environment overrides read by the CLI
ENV_URL = "SHIRT_SCRAPER_URL"
ENV_OUT_DIR = "SHIRT_SCRAPER_OUT_DIR"
ENV_ERROR_LOG = "SHIRT_SCRAPER_LOG"


# -----------------------------
# HTTP / scraping
# -----------------------------

UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

REQUEST_TIMEOUT = 30


# -----------------------------
# Selectors
# -----------------------------

LINK_PREFIX = "shirt.php?id="
LINK_SELECTOR = f'a[href^="{LINK_PREFIX}"]'

SHIRT_IMAGE_SELECTOR = ".shirt-picture img"
SHIRT_PRICE_SELECTOR = ".shirt-details .price"


# -----------------------------
# CSV schema
# -----------------------------

CSV_COLUMNS = [
    "title",
    "price",
    "imageURL",
    "URL",
    "time",
]

CSV_GLOB = "*.csv"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
