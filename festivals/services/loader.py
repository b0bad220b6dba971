"""Loader - feeds festival lines through the parser into an agenda.

By default a malformed line aborts the whole load. Callers that prefer
to keep going can pass skip_invalid=True and each bad line is logged
and skipped instead.
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import closing
from datetime import date
from importlib import resources
from pathlib import Path

from festivals.domain import FormatError, ResourceError
from festivals.domain.value_objects import Clock
from festivals.services.parser import parse_line
from festivals.settings import Settings
from festivals.stores.interfaces import Agenda

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "festivals.data"
BUNDLED_RESOURCE = "festivales.csv"


def load_festivals(
    lines: Iterable[str],
    agenda: Agenda,
    *,
    clock: Clock = date.today,
    skip_invalid: bool = False,
) -> int:
    """Parse every non-blank line and add the result to ``agenda``.

    Returns the number of festivals added.

    Raises:
        FormatError: If a line is malformed and ``skip_invalid`` is false.
            The message is prefixed with the line number.
    """
    added = 0
    skipped = 0
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            festival = parse_line(line, clock=clock)
        except FormatError as exc:
            if not skip_invalid:
                raise FormatError(
                    exc.code,
                    f"line {number}: {exc.message}",
                    line=exc.line,
                    line_number=number,
                ) from exc
            logger.warning("Skipping line %d: %s", number, exc)
            skipped += 1
            continue
        agenda.add_festival(festival)
        logger.debug("Added %s starting %s", festival.name, festival.start_date)
        added += 1

    logger.info("Loaded %d festivals (%d skipped)", added, skipped)
    return added


def read_resource_lines(path: Path | None = None) -> Iterator[str]:
    """Yield the lines of ``path``, or of the bundled festival file.

    The file is closed once the lines are exhausted or iteration stops early.

    Raises:
        ResourceError: If the file cannot be opened or read.
    """
    if path is None:
        source = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_RESOURCE)
    else:
        source = Path(path)
    try:
        with source.open(encoding="utf-8") as handle:
            for line in handle:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(str(source), str(exc)) from exc


def load_bundled_festivals(
    agenda: Agenda,
    settings: Settings | None = None,
    clock: Clock = date.today,
) -> int:
    """Load the configured festival file (the bundled one by default)."""
    settings = settings or Settings.from_env()
    with closing(read_resource_lines(settings.resource)) as lines:
        return load_festivals(
            lines,
            agenda,
            clock=clock,
            skip_invalid=settings.skip_invalid_lines,
        )
