# shirt_scraper/storage/csv_output.py
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from shirt_scraper.config import CSV_COLUMNS, CSV_GLOB
from shirt_scraper.errors import WriteError
from shirt_scraper.models import ShirtRecord
from shirt_scraper.utils import date_stamp
from shirt_scraper.utils_debug import dbg


def output_filename(day: Optional[date] = None) -> str:
    return f"{date_stamp(day)}.csv"


def records_frame(records: Iterable[ShirtRecord]) -> pd.DataFrame:
    """
    Records in a stable column order: title, price, imageURL, URL, time.
    """
    rows = [rec.as_row() for rec in records]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def _previous_snapshot(out_dir: Path) -> Optional[Path]:
    matches = sorted(out_dir.glob(CSV_GLOB))
    return matches[0] if matches else None


def write_records(
    records: Iterable[ShirtRecord],
    out_dir: Path,
    *,
    today: Optional[date] = None,
) -> Path:
    """
    Write today's snapshot to out_dir/<YYYY-MM-DD>.csv.

    Any CSV already in out_dir (first match) is removed first so the
    directory holds one snapshot. Failures surface as WriteError.
    """
    out_dir = Path(out_dir)
    target = out_dir / output_filename(today)

    try:
        csv_text = records_frame(records).to_csv(index=False)
    except Exception as exc:
        raise WriteError(target, f"could not serialize records: {exc}") from exc

    try:
        previous = _previous_snapshot(out_dir)
        if previous is not None:
            previous.unlink()
            dbg("csv", removed=str(previous))

        target.write_text(csv_text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(target, str(exc)) from exc

    dbg("csv", wrote=str(target), bytes=len(csv_text))
    return target
