# shirt_scraper/scrape/http.py
from __future__ import annotations

import cloudscraper
import requests

from shirt_scraper.config import REQUEST_TIMEOUT, UA
from shirt_scraper.errors import HttpStatusError, NetworkError
from shirt_scraper.utils_debug import dbg


def fetch_html(url: str, *, timeout: float = REQUEST_TIMEOUT) -> str:
    """
    Fetch a URL and return its HTML text.

    Raises:
      HttpStatusError - the server answered with a non-2xx status
      NetworkError    - the request could not be completed at all

    Single attempt, no retry.
    """
    headers = {
        "User-Agent": UA,
    }

    scraper = cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "linux", "mobile": False}
    )

    try:
        resp = scraper.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        resp = exc.response
        status = resp.status_code if resp is not None else 0
        dbg("fetch", url=url, status=status)
        raise HttpStatusError(status, (resp.url if resp is not None else "") or url) from exc
    except requests.RequestException as exc:
        dbg("fetch", url=url, error=str(exc))
        raise NetworkError(url, str(exc)) from exc

    dbg("fetch", url=url, status=resp.status_code, size=len(resp.text))
    return resp.text
