# shirt_scraper/scrape/shirt.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from shirt_scraper.config import SHIRT_IMAGE_SELECTOR, SHIRT_PRICE_SELECTOR, SITE_ORIGIN
from shirt_scraper.models import ShirtRecord
from shirt_scraper.scrape.page_query import parse_page
from shirt_scraper.utils import absolute_url, time_stamp


def extract_record(
    html: str,
    *,
    origin: str = SITE_ORIGIN,
    now: Optional[datetime] = None,
) -> ShirtRecord:
    """
    Scrape a single shirt page.

    - title:     alt of the image inside .shirt-picture
    - image_url: origin + src of that image
    - price:     text of .price inside .shirt-details
    - time:      HH:MM:SS at extraction
    - url:       left blank, the caller knows where the page came from

    Absent nodes give empty fields; nothing is validated.
    """
    page = parse_page(html)

    return ShirtRecord(
        title=page.attr(SHIRT_IMAGE_SELECTOR, "alt"),
        price=page.text(SHIRT_PRICE_SELECTOR),
        image_url=absolute_url(origin, page.attr(SHIRT_IMAGE_SELECTOR, "src")),
        url="",
        time=time_stamp(now),
    )
