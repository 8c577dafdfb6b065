# shirt_scraper/errors.py
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Union


class ErrorKind(str, Enum):
    CONNECTION = "connection"
    NETWORK = "network"
    WRITE = "write"
    UNKNOWN = "unknown"


class ScraperError(Exception):
    """
    Base for every failure the pipeline knows how to report.

    The error log switches on `kind`, so subclasses only need to set it.
    """
    kind: ErrorKind = ErrorKind.UNKNOWN


class HttpStatusError(ScraperError):
    """The server answered, but not with a 2xx status."""
    kind = ErrorKind.CONNECTION

    def __init__(self, status: int, url: str):
        self.status = status
        self.url = url
        super().__init__(
            f"Connection error: There's been a {status} error. Cannot connect to {url}."
        )


class NetworkError(ScraperError):
    """The request never completed (DNS, refused connection, timeout)."""
    kind = ErrorKind.NETWORK

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__(f"request to {url} failed, reason: {reason}")


class WriteError(ScraperError):
    kind = ErrorKind.WRITE

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"could not write {self.path}: {reason}")
