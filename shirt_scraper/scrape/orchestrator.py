# shirt_scraper/scrape/orchestrator.py
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional

from ..config import DEFAULT_ERROR_LOG, DEFAULT_OUT_DIR, ENTRY_URL, REQUEST_TIMEOUT, SITE_ORIGIN
from ..errors import ScraperError
from ..models import LinkResult, RunSummary
from ..storage.csv_output import write_records
from ..storage.error_log import log_error
from ..utils_debug import dbg

from ..scrape.http import fetch_html
from ..scrape.links import extract_links
from ..scrape.shirt import extract_record


ProgressCB = Callable[[int, int, str], None]


def _as_scraper_error(exc: Exception) -> ScraperError:
    """Anything we did not raise ourselves is reported as an unknown failure."""
    if isinstance(exc, ScraperError):
        return exc
    err = ScraperError(str(exc) or exc.__class__.__name__)
    err.__cause__ = exc
    return err


def scrape_listing(
    entry_url: str = ENTRY_URL,
    *,
    origin: str = SITE_ORIGIN,
    timeout: float = REQUEST_TIMEOUT,
) -> List[str]:
    html = fetch_html(entry_url, timeout=timeout)
    links = extract_links(html, origin=origin)
    dbg("listing", url=entry_url, links=len(links))
    return links


def scrape_one(
    url: str,
    *,
    origin: str = SITE_ORIGIN,
    timeout: float = REQUEST_TIMEOUT,
) -> LinkResult:
    """
    Fetch + extract one shirt page. Never raises: the failure, if any,
    travels back inside the LinkResult.
    """
    try:
        html = fetch_html(url, timeout=timeout)
        record = extract_record(html, origin=origin)
    except Exception as exc:
        err = _as_scraper_error(exc)
        dbg("link", url=url, kind=err.kind.value, error=str(err))
        return LinkResult(url=url, error=err)

    record.url = url
    dbg("link", url=url, title=record.title)
    return LinkResult(url=url, record=record)


def scrape_all(
    urls: List[str],
    *,
    origin: str = SITE_ORIGIN,
    timeout: float = REQUEST_TIMEOUT,
    progress_cb: Optional[ProgressCB] = None,
) -> List[LinkResult]:
    """
    Scrape every link at once and wait for all of them.

    Results come back in the order of `urls`, whatever order the
    requests finish in. One thread per link, no cap.
    """
    if not urls:
        return []

    total = len(urls)
    done = 0
    lock = threading.Lock()

    def _track(fut) -> None:
        nonlocal done
        with lock:
            done += 1
            count = done
        if progress_cb:
            res = fut.result()
            state = "ok" if res.ok else "failed"
            progress_cb(count, total, f"Fetched ({count}/{total}) • {state}\n{res.url}")

    with ThreadPoolExecutor(max_workers=total) as pool:
        futures = []
        for url in urls:
            fut = pool.submit(scrape_one, url, origin=origin, timeout=timeout)
            fut.add_done_callback(_track)
            futures.append(fut)

        results = [fut.result() for fut in futures]

    return results


def run_scrape(
    *,
    entry_url: str = ENTRY_URL,
    out_dir: Path = DEFAULT_OUT_DIR,
    log_file: Path = DEFAULT_ERROR_LOG,
    origin: str = SITE_ORIGIN,
    timeout: float = REQUEST_TIMEOUT,
    progress_cb: Optional[ProgressCB] = None,
) -> RunSummary:
    """
    listing -> links -> shirt pages (concurrent) -> CSV snapshot.

    Every failure is appended to `log_file` and kept on the summary;
    nothing here raises for a failed fetch or write.
    """
    summary = RunSummary(entry_url=entry_url)
    out_dir = Path(out_dir)

    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        # write_records reports the unusable directory as a WriteError
        dbg("out_dir", out_dir=str(out_dir), error=str(exc))

    def _fail(err: ScraperError) -> None:
        summary.errors.append(err)
        log_error(err, log_file=log_file)

    if progress_cb:
        progress_cb(0, 0, f"Fetching listing\n{entry_url}")

    try:
        summary.links = scrape_listing(entry_url, origin=origin, timeout=timeout)
    except Exception as exc:
        _fail(_as_scraper_error(exc))
        return summary

    summary.results = scrape_all(
        summary.links,
        origin=origin,
        timeout=timeout,
        progress_cb=progress_cb,
    )

    for res in summary.results:
        if res.error is not None:
            _fail(res.error)

    try:
        summary.output_path = write_records(summary.records, out_dir)
    except ScraperError as exc:
        _fail(exc)
        return summary

    if progress_cb:
        total = len(summary.links)
        progress_cb(total, total, f"Done ({total}/{total}) ✅\nWrote: {summary.output_path}")

    return summary
