import sqlite3
from pathlib import Path
from typing import Callable, Optional

import pytest
import requests

from fetch_inputs import input_url


def make_response(status: int, body: bytes = b"", url: str = "") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = body
    r._content_consumed = True
    r.encoding = "utf-8"
    r.url = url
    return r


class FakeSession:
    """Stands in for requests.Session, answering GETs per day."""

    def __init__(
        self,
        days: Optional[dict[int, tuple[int, bytes]]] = None,
        before_response: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.days = days or {}
        self.before_response = before_response
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.streamed: list[bool] = []

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *_) -> None:
        pass

    @property
    def requested_days(self) -> list[int]:
        return [int(url.split("/")[-2]) for url, _ in self.requests]

    def get(
        self, url: str, headers: Optional[dict[str, str]] = None, stream: bool = False
    ) -> requests.Response:
        self.requests.append((url, dict(headers or {})))
        self.streamed.append(stream)
        day = int(url.split("/")[-2])
        assert url == input_url(day)

        if self.before_response is not None:
            self.before_response(day)

        status, body = self.days.get(day, (404, b"Not Found"))
        return make_response(status, body, url)


def make_cookie_db(
    path: Path, rows: list[tuple[str, Optional[str], str, str]]
) -> None:
    db = sqlite3.connect(path)
    db.execute(
        """CREATE TABLE moz_cookies
        (id INTEGER PRIMARY KEY, name TEXT, value TEXT, host TEXT, path TEXT)"""
    )
    db.executemany(
        "INSERT INTO moz_cookies (name, value, host, path) VALUES (?, ?, ?, ?)", rows
    )
    db.commit()
    db.close()


@pytest.fixture
def firefox_home(tmp_path: Path) -> Path:
    """A home directory with `work` and `default` firefox profiles."""
    home = tmp_path / "home"
    firefox = home / ".mozilla" / "firefox"

    work = firefox / "abc123.work"
    work.mkdir(parents=True)
    make_cookie_db(
        work / "cookies.sqlite",
        [
            ("session", "work-cookie", ".adventofcode.com", "/"),
            ("session", "other-site", ".example.com", "/"),
        ],
    )

    default = firefox / "xyz789.default"
    default.mkdir()
    make_cookie_db(
        default / "cookies.sqlite",
        [("session", "default-cookie", ".adventofcode.com", "/")],
    )

    return home
