from __future__ import annotations

import asyncio
from pathlib import Path

import pandas as pd
import pytest

from conftest import ENTRY, listing_html, shirt_html

from shirt_scraper import cli
from shirt_scraper.config import DEFAULT_OUT_DIR, ENTRY_URL
from shirt_scraper.errors import HttpStatusError
from shirt_scraper.models import LinkResult, ShirtRecord
from shirt_scraper.storage.csv_output import output_filename
from shirt_scraper.ui.app import ScrapeApp, format_result_details


def test_defaults(monkeypatch) -> None:
    for var in ("SHIRT_SCRAPER_URL", "SHIRT_SCRAPER_OUT_DIR", "SHIRT_SCRAPER_LOG"):
        monkeypatch.delenv(var, raising=False)

    args = cli.parse_args([])

    assert args.url == ENTRY_URL
    assert args.out_dir == str(DEFAULT_OUT_DIR)
    assert args.ui is False


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SHIRT_SCRAPER_URL", "http://localhost/shirts.php")
    monkeypatch.setenv("SHIRT_SCRAPER_OUT_DIR", "/tmp/out")

    args = cli.parse_args([])

    assert args.url == "http://localhost/shirts.php"
    assert args.out_dir == "/tmp/out"


def test_main_runs_pipeline(fake_site, tmp_path: Path) -> None:
    fake_site.pages[ENTRY] = (200, listing_html(101))
    fake_site.pages["http://shirts4mike.com/shirt.php?id=101"] = (
        200,
        shirt_html("Guzzle Shirt", "$19.99", "/shirts/guzzle.jpg"),
    )
    out_dir = tmp_path / "data"

    cli.main(["--url", ENTRY, "--out-dir", str(out_dir), "--log-file", str(tmp_path / "err.log")])

    df = pd.read_csv(out_dir / output_filename(), dtype=str, keep_default_na=False)
    assert df["title"].tolist() == ["Guzzle Shirt"]


def test_main_swallows_failures(fake_site, tmp_path: Path) -> None:
    fake_site.pages[ENTRY] = (503, "down")
    log = tmp_path / "err.log"

    cli.main(["--url", ENTRY, "--out-dir", str(tmp_path / "data"), "--log-file", str(log)])

    assert "503" in log.read_text(encoding="utf-8")


class TestResultDetails:
    def test_nothing_selected(self) -> None:
        assert format_result_details(None) == "Select a row…"

    def test_ok_result(self) -> None:
        rec = ShirtRecord("Guzzle Shirt", "$19.99", "http://x/g.jpg", "http://x/shirt.php?id=1", "10:00:00")
        text = format_result_details(LinkResult(url=rec.url, record=rec))
        assert "[b]Guzzle Shirt[/b]" in text
        assert "Price: $19.99" in text

    def test_failed_result(self) -> None:
        err = HttpStatusError(404, "http://x/shirt.php?id=2")
        text = format_result_details(LinkResult(url="http://x/shirt.php?id=2", error=err))
        assert "Failed" in text
        assert "404" in text


class TestScrapeAppRefresh:
    def test_refresh_ignored_while_scraping(self) -> None:
        app = ScrapeApp()
        started: list[object] = []
        app.run_worker = lambda work, **kwargs: started.append(work)

        app._scraping = True
        app.start_scrape()

        assert started == []

    def test_first_scrape_starts_worker(self) -> None:
        app = ScrapeApp()
        started: list[object] = []

        def _run_worker(work, **kwargs):
            work.close()
            started.append(work)

        app.run_worker = _run_worker

        app.start_scrape()
        app.start_scrape()

        assert len(started) == 1
        assert app._scraping is True

    def test_flag_cleared_when_scrape_fails(self) -> None:
        app = ScrapeApp()

        async def _boom() -> None:
            raise RuntimeError("worker died")

        app._run_scrape = _boom
        app._scraping = True

        with pytest.raises(RuntimeError):
            asyncio.run(app._scrape_worker())

        assert app._scraping is False
