import argparse
import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, Sequence

import requests

from . import config
from .cookies import get_session_cookie
from .errors import FetchError
from .fetch import fetch_all


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        "aoc-fetch-inputs",
        description="download advent of code inputs using a firefox session cookie",
    )
    parser.add_argument(
        "--firefox-profile",
        "-f",
        default=config.default_profile,
        help="suffix of the firefox profile directory to take the session cookie from",
    )
    parser.add_argument(
        "--target-directory",
        "-t",
        type=Path,
        default=Path(config.default_target_directory),
        help="directory the day-NN-input.txt files are written to",
    )

    return parser.parse_args(argv)


def error_chain(err: BaseException) -> Iterator[BaseException]:
    seen = set()
    e: Optional[BaseException] = err

    while e is not None and id(e) not in seen:
        seen.add(id(e))
        yield e
        if e.__cause__ is not None:
            e = e.__cause__
        elif not e.__suppress_context__:
            e = e.__context__
        else:
            e = None


def report_error(err: BaseException) -> None:
    for i, e in enumerate(error_chain(err)):
        prefix = "error" if i == 0 else "caused by"
        print(f"{prefix}: {str(e) or type(e).__name__}", file=sys.stderr)


def run(firefox_profile: str, target_directory: Path) -> None:
    session_cookie = get_session_cookie(firefox_profile)

    with requests.Session() as client:
        if not target_directory.is_dir():
            try:
                os.mkdir(target_directory)
            except OSError as err:
                raise FetchError(
                    f"couldn't create target directory {target_directory}"
                ) from err

        fetch_all(client, session_cookie, target_directory)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(encoding="utf-8", level=logging.INFO)

    parsed = parse_args(argv)

    try:
        run(parsed.firefox_profile, parsed.target_directory)
    except Exception as err:
        report_error(err)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
