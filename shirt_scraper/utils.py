# shirt_scraper/utils.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from .config import DATE_FORMAT, TIME_FORMAT


_UTC_ABBREVIATIONS = {"UTC", "GMT", "Z", "UTC+00:00"}


def _now_local() -> datetime:
    return datetime.now().astimezone()


def absolute_url(origin: str, href: str) -> str:
    """
    "http://shirts4mike.com/" + "shirt.php?id=101" -> "http://shirts4mike.com/shirt.php?id=101"

    A leading slash on href does not produce a double slash.
    """
    href = (href or "").strip()
    if not href:
        return ""
    return origin.rstrip("/") + "/" + href.lstrip("/")


def time_stamp(now: Optional[datetime] = None) -> str:
    return (now or _now_local()).strftime(TIME_FORMAT)


def date_stamp(day: Optional[date] = None) -> str:
    return (day or _now_local().date()).strftime(DATE_FORMAT)


def js_date_string(when: Optional[datetime] = None) -> str:
    """
    Render a timestamp the way JavaScript's Date.toString() does:
      "Sun Oct 18 2026 14:03:01 GMT+0000 (Coordinated Universal Time)"
    Naive datetimes are treated as local time. Only UTC gets its long
    zone name; other zones keep the abbreviation tzname() gives.
    """
    dt = when or _now_local()
    if dt.tzinfo is None:
        dt = dt.astimezone()
    offset = dt.strftime("%z") or "+0000"
    zone = dt.tzname() or "UTC"
    if offset == "+0000" and zone in _UTC_ABBREVIATIONS:
        zone = "Coordinated Universal Time"
    return f"{dt.strftime('%a %b %d %Y %H:%M:%S')} GMT{offset} ({zone})"
