"""Tests for ``fetch_html``: success, HTTP status failures, transport failures."""

from __future__ import annotations

import pytest
import requests

from shirt_scraper.config import UA
from shirt_scraper.errors import ErrorKind, HttpStatusError, NetworkError
from shirt_scraper.scrape.http import fetch_html


class TestFetchHtml:
    def test_ok_response_returns_text(self, fake_site) -> None:
        fake_site.pages["http://shirts4mike.com/shirts.php"] = (200, "<html>hi</html>")

        assert fetch_html("http://shirts4mike.com/shirts.php") == "<html>hi</html>"

    def test_sends_user_agent_and_timeout(self, fake_site) -> None:
        fake_site.pages["http://shirts4mike.com/shirts.php"] = (200, "")

        fetch_html("http://shirts4mike.com/shirts.php", timeout=5)

        call = fake_site.calls[0]
        assert call["headers"]["User-Agent"] == UA
        assert call["timeout"] == 5

    def test_404_raises_http_status_error(self, fake_site) -> None:
        url = "http://shirts4mike.com/shirt.php?id=999"
        fake_site.pages[url] = (404, "Not Found")

        with pytest.raises(HttpStatusError) as info:
            fetch_html(url)

        err = info.value
        assert err.status == 404
        assert err.url == url
        assert err.kind is ErrorKind.CONNECTION
        assert "404" in str(err)
        assert url in str(err)
        assert str(err).startswith("Connection error:")

    def test_500_is_also_a_status_error(self, fake_site) -> None:
        url = "http://shirts4mike.com/shirts.php"
        fake_site.pages[url] = (500, "boom")

        with pytest.raises(HttpStatusError) as info:
            fetch_html(url)
        assert info.value.status == 500

    def test_connection_failure_raises_network_error(self, fake_site) -> None:
        url = "http://shirts4mike.com/shirts.php"
        fake_site.pages[url] = requests.ConnectionError("getaddrinfo ENOTFOUND shirts4mike.com")

        with pytest.raises(NetworkError) as info:
            fetch_html(url)

        err = info.value
        assert err.kind is ErrorKind.NETWORK
        assert err.url == url
        assert "ENOTFOUND" in err.reason
        assert str(err).startswith(f"request to {url} failed")

    def test_timeout_is_a_network_error(self, fake_site) -> None:
        url = "http://shirts4mike.com/shirts.php"
        fake_site.pages[url] = requests.Timeout("read timed out")

        with pytest.raises(NetworkError):
            fetch_html(url)
