# shirt_scraper/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from shirt_scraper.errors import ScraperError


@dataclass
class ShirtRecord:
    """
    Row model for CSV export + UI display.

    `url` is left blank by the extractor; the orchestrator fills it in
    because the item page has no reliable self-reference.
    """
    title: str
    price: str
    image_url: str
    url: str
    time: str

    def as_row(self) -> dict:
        return {
            "title": self.title,
            "price": self.price,
            "imageURL": self.image_url,
            "URL": self.url,
            "time": self.time,
        }


@dataclass
class LinkResult:
    """
    Outcome for one discovered link: a record or the error that stopped it.
    """
    url: str
    record: Optional[ShirtRecord] = None
    error: Optional[ScraperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.record is not None


@dataclass
class RunSummary:
    entry_url: str
    links: list[str] = field(default_factory=list)
    results: list[LinkResult] = field(default_factory=list)
    output_path: Optional[Path] = None
    errors: list[ScraperError] = field(default_factory=list)

    @property
    def records(self) -> list[ShirtRecord]:
        # link order, failures dropped
        return [r.record for r in self.results if r.ok and r.record is not None]

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)
