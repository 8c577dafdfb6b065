"""Shared fixtures: canned shirts4mike pages and a fake cloudscraper session.

``fake_site`` replaces ``cloudscraper.create_scraper`` so every ``fetch_html``
call is answered from an in-memory ``{url: page}`` map. A page is either
``(status, html)``, ``(status, html, delay_seconds)`` or an exception
instance to raise from ``get``.
"""

from __future__ import annotations

import time
from typing import Any, Dict

import pytest
import requests

from shirt_scraper.scrape import http as http_mod


ORIGIN = "http://shirts4mike.com/"
ENTRY = "http://shirts4mike.com/shirts.php"


def listing_html(*ids: int) -> str:
    anchors = "\n".join(
        f'<li><a href="shirt.php?id={i}"><img src="img/shirts/shirt-{i}.jpg" alt="Shirt {i}"></a></li>'
        for i in ids
    )
    return f"""\
<!DOCTYPE html>
<html>
<head><title>Mike's Full Catalog of Shirts</title></head>
<body>
  <a href="index.php">Home</a>
  <a href="shirts.php">Shirts</a>
  <ul class="products">
{anchors}
  </ul>
  <a href="contact.php">Contact</a>
</body>
</html>
"""


def shirt_html(title: str, price: str, src: str) -> str:
    return f"""\
<!DOCTYPE html>
<html>
<body>
  <div class="section page">
    <div class="wrapper">
      <div class="shirt-picture">
        <span><img src="{src}" alt="{title}"></span>
      </div>
      <div class="shirt-details">
        <h1><span class="price">{price}</span> {title}</h1>
      </div>
    </div>
  </div>
</body>
</html>
"""


def make_response(url: str, status: int = 200, text: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeScraper:
    def __init__(self, pages: Dict[str, Any]):
        self.pages = pages
        self.calls: list[dict] = []

    def get(self, url: str, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        page = self.pages.get(url, (404, "Not Found"))
        if isinstance(page, Exception):
            raise page
        status, text, *rest = page
        if rest:
            time.sleep(rest[0])
        return make_response(url, status, text)


@pytest.fixture
def fake_site(monkeypatch):
    """Install a FakeScraper; returns it so tests can fill ``pages``."""
    scraper = FakeScraper({})
    monkeypatch.setattr(http_mod.cloudscraper, "create_scraper", lambda **kwargs: scraper)
    return scraper
