# shirt_scraper/storage/error_log.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from shirt_scraper.config import DEFAULT_ERROR_LOG
from shirt_scraper.errors import ErrorKind
from shirt_scraper.utils import js_date_string
from shirt_scraper.utils_debug import dbg


def _message_for(error: BaseException) -> str:
    kind = getattr(error, "kind", ErrorKind.UNKNOWN)

    if kind == ErrorKind.CONNECTION:
        return str(error)

    if kind == ErrorKind.NETWORK:
        url = getattr(error, "url", "")
        return f"Request to {url} failed."

    if kind == ErrorKind.WRITE:
        return f"There has been a problem writing the CSV file: {error}"

    return f"There has been a problem with your fetch operation: {error}"


def format_error(error: BaseException, *, when: Optional[datetime] = None) -> str:
    """
    One log block:

      Sun Oct 18 2026 14:03:01 GMT+0000 (Coordinated Universal Time)
      Connection error: There's been a 404 error. Cannot connect to ...
      <blank line>
    """
    return f"{js_date_string(when)}\n{_message_for(error)}\n\n"


def log_error(
    error: BaseException,
    *,
    log_file: Path = DEFAULT_ERROR_LOG,
    when: Optional[datetime] = None,
) -> None:
    """
    Append a human-readable entry for `error`. Best effort: a log file that
    cannot be written is only reported through dbg().
    """
    block = format_error(error, when=when)
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(block)
    except OSError as exc:
        dbg("error_log", log_file=str(log_file), error=str(exc))
