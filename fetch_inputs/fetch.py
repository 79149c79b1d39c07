import enum
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

import requests

from . import config

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class FetchOutcome(enum.Enum):
    # input is on disk, either from an earlier run or just written
    SATISFIED = "satisfied"
    # site answered 404, later days are not attempted
    NOT_YET_PUBLISHED = "not_yet_published"

    @property
    def should_continue(self) -> bool:
        return self is FetchOutcome.SATISFIED


def input_path(target_directory: Path, day: int) -> Path:
    return target_directory / config.input_filename_template.format(day=day)


def input_url(day: int, year: int | str = config.year) -> str:
    return config.input_url_template.format(year=year, day=day)


def fetch_input(
    client: requests.Session,
    session_cookie: str,
    target_directory: Path,
    day: int,
) -> FetchOutcome:
    dest_path = input_path(target_directory, day)

    if dest_path.is_file():
        if dest_path.stat().st_size == 0:
            logger.info("Deleting empty file %s", dest_path)
            dest_path.unlink()
        else:
            logger.info(
                "Already got non-empty file %s, skipping day %s", dest_path, day
            )
            return FetchOutcome.SATISFIED

    with client.get(
        input_url(day),
        headers={"Cookie": session_cookie, "User-Agent": config.user_agent},
        stream=True,
    ) as r:
        if r.status_code == requests.codes.not_found:
            logger.info("Input for day %s not found, try again tomorrow", day)
            return FetchOutcome.NOT_YET_PUBLISHED
        elif not r.ok:
            logger.error("Unsuccessful response for day %s (%s)", day, r.status_code)
            # raw body, byte for byte
            sys.stdout.flush()
            sys.stdout.buffer.write(r.content)
            sys.stdout.buffer.flush()

        r.raise_for_status()

        try:
            f = open(dest_path, "xb")
        except FileExistsError:
            logger.info(
                "Non-empty file %s just showed up, skipping day %s", dest_path, day
            )
            return FetchOutcome.SATISFIED

        with f:
            for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                f.write(chunk)

    logger.info("Day %s: wrote %s", day, dest_path)
    return FetchOutcome.SATISFIED


def fetch_all(
    client: requests.Session,
    session_cookie: str,
    target_directory: Path,
    days: Iterable[int] = range(config.first_day, config.last_day + 1),
) -> list[tuple[int, FetchOutcome]]:
    """Fetch each day in order, stopping at the first unpublished one."""
    outcomes = []

    for day in days:
        outcome = fetch_input(client, session_cookie, target_directory, day)
        outcomes.append((day, outcome))
        if not outcome.should_continue:
            break

    return outcomes
