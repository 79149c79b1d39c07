import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional, Self
from urllib.parse import quote

from . import config
from .errors import CookieStoreError, HomeDirectoryError, ProfileNotFoundError

logger = logging.getLogger(__name__)


def find_profile_dir(profile: str, home: Optional[Path] = None) -> Path:
    """Return the first firefox profile directory whose extension is `profile`.

    Profile directories are named `<random>.<name>`, so `abc123.work` is
    selected by `work`. Entries are scanned in name order.
    """
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as err:
            raise HomeDirectoryError("idk where your home dir is") from err

    firefox_dir = home / config.firefox_profiles_dir

    with os.scandir(firefox_dir) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if not entry.is_dir(follow_symlinks=False):
            continue

        _, dot, ext = entry.name.lstrip(".").rpartition(".")
        if dot and ext == profile:
            return Path(entry.path)

    raise ProfileNotFoundError(f"couldn't find firefox profile dir in {firefox_dir}")


class CookieStore:
    """Read-only view of a firefox `cookies.sqlite`.

    The database is opened immutable so a running browser holding the file
    is left alone. Writes made by the browser while we read may be missed.
    """

    __slots__ = ("_db",)

    def __init__(self, file: Path) -> None:
        try:
            path = str(file)
            path.encode("utf-8")
        except UnicodeEncodeError as err:
            raise CookieStoreError(
                "your firefox dir should probably have a utf-8 path"
            ) from err

        try:
            self._db = sqlite3.connect(
                f"file:{quote(path)}?mode=ro&immutable=1",
                uri=True,
                check_same_thread=False,
            )
        except sqlite3.Error as err:
            raise CookieStoreError(f"couldn't open cookie database {file}") from err

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def close(self) -> None:
        self._db.close()

    def session_cookie(self, host: str = config.site_host) -> str:
        try:
            row = self._db.execute(
                """SELECT value
                FROM moz_cookies
                WHERE host = ? AND path = '/' AND name = 'session'""",
                (host,),
            ).fetchone()
        except sqlite3.Error as err:
            raise CookieStoreError(f"couldn't query cookies for {host}") from err

        if row is None:
            raise CookieStoreError(f"query returned no rows for {host}")

        if not isinstance(row[0], str):
            raise CookieStoreError(
                f"session cookie for {host} is {type(row[0]).__name__}, not text"
            )

        return row[0]


def get_session_cookie(profile: str, home: Optional[Path] = None) -> str:
    """Resolve the adventofcode.com session cookie as a `Cookie` header value."""
    profile_dir = find_profile_dir(profile, home)
    logger.info("Using firefox profile %s", profile_dir)

    with CookieStore(profile_dir / config.cookie_db_name) as store:
        cookie = store.session_cookie()

    return f"session={cookie}"
