# shirt_scraper/scrape/links.py
from __future__ import annotations

from typing import List

from shirt_scraper.config import LINK_SELECTOR, SITE_ORIGIN
from shirt_scraper.scrape.page_query import parse_page
from shirt_scraper.utils import absolute_url


def extract_links(html: str, *, origin: str = SITE_ORIGIN) -> List[str]:
    """
    Absolute URLs for every <a href="shirt.php?id=..."> on the listing page.

    Document order is kept and repeats are not removed: a shirt linked
    twice is scraped twice.
    """
    page = parse_page(html)
    return [absolute_url(origin, href) for href in page.attrs(LINK_SELECTOR, "href")]
