# shirt_scraper/utils_debug.py
from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def _enabled() -> bool:
    return os.getenv("SHIRT_SCRAPER_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def dbg(tag: str, **kv: Any) -> None:
    """
    One key=value line per event, only when SHIRT_SCRAPER_DEBUG is set.

    Lines go to SHIRT_SCRAPER_DEBUG_LOG when given, else stdout.
    """
    if not _enabled():
        return

    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    line = " ".join([f"{ts} [{tag}]"] + [f"{k}={v!r}" for k, v in kv.items()])

    log_path = os.getenv("SHIRT_SCRAPER_DEBUG_LOG", "").strip()
    if log_path:
        try:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
            return
        except OSError:
            # fall back to stdout
            pass
    print(line)
