# shirt_scraper/ui/app.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional
import asyncio
import webbrowser

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Header, Footer, DataTable, Static
from textual.binding import Binding

from shirt_scraper.config import DEFAULT_ERROR_LOG, DEFAULT_OUT_DIR, ENTRY_URL, REQUEST_TIMEOUT
from shirt_scraper.models import LinkResult, RunSummary
from shirt_scraper.scrape.orchestrator import run_scrape


def format_result_details(result: Optional[LinkResult]) -> str:
    if result is None:
        return "Select a row…"

    if not result.ok:
        return "\n".join(
            [
                "[b]Failed[/b]",
                "",
                f"URL: {result.url}",
                f"Error: {result.error}",
            ]
        )

    rec = result.record
    return "\n".join(
        [
            f"[b]{rec.title or 'N/A'}[/b]",
            "",
            f"URL: {rec.url}",
            f"Price: {rec.price or 'N/A'}",
            f"Image: {rec.image_url or 'N/A'}",
            f"Scraped at: {rec.time}",
        ]
    )


# ----------------------------
# Small UI widgets
# ----------------------------

class StatCard(Static):
    def __init__(self, label: str, icon: str = ""):
        super().__init__()
        self.label = label
        self.icon = icon

    def update_value(self, v: str) -> None:
        self.update(f"{self.icon} {self.label}\n[b]{v}[/b]")


class Details(Static):
    can_focus = True

    def show_result(self, result: Optional[LinkResult]) -> None:
        self.update(format_result_details(result))
        self.scroll_home()


# ----------------------------
# Main App
# ----------------------------

class ScrapeApp(App):
    CSS = """
    Screen {
        background: #101417;
        color: #e8eef2;
    }

    #stats_row {
        height: 4;
        margin: 1 1 1 1;
    }

    StatCard {
        width: 1fr;
        border: tall #2d3a45;
        padding: 0 2;
        background: #0b0f12;
    }

    #left_pane {
        width: 2fr;
        margin-right: 1;
    }

    #top_details {
        height: 4;
        border: tall #2d3a45;
        padding: 0 1;
        margin-bottom: 1;
        background: #0b0f12;
    }

    #list_box {
        height: 1fr;
        border: tall #2d3a45;
    }

    #details_box {
        width: 1fr;
        border: tall #2d3a45;
        padding: 0 1;
        background: #0b0f12;
    }

    DataTable {
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("enter", "focus_details", "Details"),
        Binding("escape", "focus_list", "List"),
        Binding("O", "open_url", "Open"),
    ]

    def __init__(
        self,
        *,
        entry_url: str = ENTRY_URL,
        out_dir: Path = DEFAULT_OUT_DIR,
        log_file: Path = DEFAULT_ERROR_LOG,
        timeout: float = REQUEST_TIMEOUT,
    ):
        super().__init__()
        self.entry_url = entry_url
        self.out_dir = Path(out_dir)
        self.log_file = Path(log_file)
        self.timeout = timeout

        self.summary: Optional[RunSummary] = None
        self.row_lookup: dict[str, LinkResult] = {}
        self._scraping = False

    # ----------------------------

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal(id="stats_row"):
            self.card_links = StatCard("Links", "🔗")
            self.card_scraped = StatCard("Scraped", "✅")
            self.card_failed = StatCard("Failed", "⚠️")
            yield self.card_links
            yield self.card_scraped
            yield self.card_failed

        with Horizontal():
            with Container(id="left_pane"):
                self.top_details = Details("Ready.", id="top_details")
                yield self.top_details

                self.table = DataTable(zebra_stripes=True, id="list_box")
                yield self.table

            with Container(id="details_box"):
                self.side_details = Details("Select a row…", id="side_details")
                yield self.side_details

        yield Footer()

    def on_mount(self) -> None:
        self.table.add_column("", width=2)
        self.table.add_column("Title")
        self.table.add_column("Price")

        self.table.cursor_type = "row"
        self.table.focus()

        self.apply_view()
        self.call_after_refresh(self.start_scrape)

    # ----------------------------

    def apply_view(self) -> None:
        self.table.clear()
        self.row_lookup.clear()

        results = self.summary.results if self.summary else []

        # link order; a link listed twice gets its own row
        for i, res in enumerate(results):
            key = f"{i}:{res.url}"
            self.row_lookup[key] = res
            if res.ok:
                self.table.add_row("✅", res.record.title or "N/A", res.record.price, key=key)
            else:
                self.table.add_row("⚠️", res.url, "-", key=key)

        if self.table.row_count:
            self.table.cursor_coordinate = (0, 0)

        links = len(self.summary.links) if self.summary else 0
        scraped = len(self.summary.records) if self.summary else 0
        failed = self.summary.failed if self.summary else 0

        self.card_links.update_value(str(links))
        self.card_scraped.update_value(str(scraped))
        self.card_failed.update_value(str(failed))

    # ----------------------------
    # Actions
    # ----------------------------

    def action_focus_details(self) -> None:
        self.side_details.focus()

    def action_focus_list(self) -> None:
        self.table.focus()

    def action_open_url(self) -> None:
        if not self.table.row_count:
            return
        row_key = self.table.coordinate_to_cell_key(self.table.cursor_coordinate).row_key
        res = self.row_lookup.get(row_key.value or "")
        if res and res.url:
            webbrowser.open(res.url)

    async def action_refresh(self) -> None:
        self.start_scrape()

    def start_scrape(self) -> None:
        # one run at a time: its executor thread cannot be cancelled
        if self._scraping:
            return
        self._scraping = True
        self.run_worker(self._scrape_worker())

    async def _scrape_worker(self) -> None:
        try:
            await self._run_scrape()
        finally:
            self._scraping = False

    async def _run_scrape(self) -> None:
        loop = asyncio.get_running_loop()
        self.top_details.update("[b]Scraping…[/b]")

        def progress_cb(i: int, n: int, msg: str) -> None:
            pct = int((i / n) * 100) if n else 0
            self.call_from_thread(self.top_details.update, f"[b]Scraping…[/b] {pct}%\n{msg}")

        def _do() -> RunSummary:
            return run_scrape(
                entry_url=self.entry_url,
                out_dir=self.out_dir,
                log_file=self.log_file,
                timeout=self.timeout,
                progress_cb=progress_cb,
            )

        self.summary = await loop.run_in_executor(None, _do)
        self.apply_view()

        if self.summary.output_path:
            self.top_details.update(f"✅ Scrape finished.\nWrote: {self.summary.output_path}")
        else:
            self.top_details.update(f"⚠️ Scrape finished without output.\nSee: {self.log_file}")

    def on_data_table_row_highlighted(self, event: Any) -> None:
        key = event.row_key.value if event.row_key else ""
        self.side_details.show_result(self.row_lookup.get(key))
