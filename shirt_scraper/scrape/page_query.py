# shirt_scraper/scrape/page_query.py
from __future__ import annotations

from typing import List, Protocol

from bs4 import BeautifulSoup


class PageQuery(Protocol):
    """
    The little bit of DOM access the extractors need.

    Selectors are CSS. Missing nodes/attributes come back as "" (or []),
    never as an exception.
    """

    def attrs(self, selector: str, name: str) -> List[str]: ...

    def attr(self, selector: str, name: str) -> str: ...

    def text(self, selector: str) -> str: ...


class SoupPageQuery:
    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")

    def attrs(self, selector: str, name: str) -> List[str]:
        out: List[str] = []
        for node in self.soup.select(selector):
            value = node.get(name)
            if value is None:
                continue
            # multi-valued attributes (class) come back as lists
            if isinstance(value, list):
                value = " ".join(value)
            out.append(str(value))
        return out

    def attr(self, selector: str, name: str) -> str:
        node = self.soup.select_one(selector)
        if node is None:
            return ""
        value = node.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return str(value) if value is not None else ""

    def text(self, selector: str) -> str:
        return "".join(node.get_text() for node in self.soup.select(selector))


def parse_page(html: str) -> PageQuery:
    return SoupPageQuery(html)
