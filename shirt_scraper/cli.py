# shirt_scraper/cli.py
from __future__ import annotations

import argparse
import os
from pathlib import Path

from shirt_scraper.config import (
    DEFAULT_ERROR_LOG,
    DEFAULT_OUT_DIR,
    ENTRY_URL,
    ENV_ERROR_LOG,
    ENV_OUT_DIR,
    ENV_URL,
    REQUEST_TIMEOUT,
)
from shirt_scraper.scrape.orchestrator import run_scrape


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scrape the shirts listing into a dated CSV snapshot.")
    p.add_argument("--url", default=os.environ.get(ENV_URL, ENTRY_URL), help="Listing page URL")
    p.add_argument(
        "--out-dir",
        default=os.environ.get(ENV_OUT_DIR, str(DEFAULT_OUT_DIR)),
        help="Directory holding the CSV snapshot (default: data)",
    )
    p.add_argument(
        "--log-file",
        default=os.environ.get(ENV_ERROR_LOG, str(DEFAULT_ERROR_LOG)),
        help="Error log, appended to (default: scraper-error.log)",
    )
    p.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help="Per-request timeout in seconds")
    p.add_argument("--ui", action="store_true", help="Launch Textual UI")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    out_dir = Path(args.out_dir).expanduser().resolve()
    log_file = Path(args.log_file).expanduser().resolve()

    if args.ui:
        # imported here so plain runs don't pay for textual
        from shirt_scraper.ui.app import ScrapeApp

        app = ScrapeApp(entry_url=args.url, out_dir=out_dir, log_file=log_file, timeout=args.timeout)
        app.run()
        return

    # Failures end up in the error log; the exit status stays 0.
    run_scrape(
        entry_url=args.url,
        out_dir=out_dir,
        log_file=log_file,
        timeout=args.timeout,
        progress_cb=None,
    )


if __name__ == "__main__":
    main()
