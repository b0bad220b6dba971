"""Line parser - turns one text line into a Festival.

Line format (``:`` is the only delimiter and cannot be escaped)::

    name : venue : dd-mm-yyyy : duration : style1 [: style2 ...]

Whitespace around the line and around every field is ignored.
"""

from datetime import date, timedelta

from festivals.domain import ErrorCode, Festival, FormatError, Style
from festivals.domain.value_objects import Clock, title_case_words

FIELD_SEPARATOR = ":"
DATE_SEPARATOR = "-"
REQUIRED_FIELDS = ("name", "venue", "start date", "duration")


def parse_line(line: str, clock: Clock = date.today) -> Festival:
    """Parse a festival line.

    Raises:
        FormatError: If a required field is missing or blank, the date or
            duration is malformed, or a style is unknown.
    """
    fields = _split_fields(line)
    if len(fields) < len(REQUIRED_FIELDS):
        missing = ", ".join(REQUIRED_FIELDS[len(fields):])
        raise FormatError(
            ErrorCode.MISSING_FIELD,
            f"Expected at least {len(REQUIRED_FIELDS)} fields, missing {missing}",
            line=line,
        )

    name = _parse_name(fields[0], line)
    venue = _parse_venue(fields[1], line)
    start_date = _parse_date(fields[2], line)
    duration = _parse_duration(fields[3], start_date, line)
    styles = {_parse_style(token, line) for token in fields[4:]}

    return Festival(
        name=name,
        venue=venue,
        start_date=start_date,
        duration_days=duration,
        styles=styles,
        clock=clock,
    )


def _split_fields(line: str) -> list[str]:
    fields = line.strip().split(FIELD_SEPARATOR)
    # A trailing separator leaves empty fields behind; they carry no data.
    while fields and not fields[-1]:
        fields.pop()
    return fields


def _parse_name(raw: str, line: str) -> str:
    name = title_case_words(raw)
    if not name:
        raise FormatError(ErrorCode.EMPTY_FIELD, "Festival name is blank", line=line)
    return name


def _parse_venue(raw: str, line: str) -> str:
    venue = raw.strip().upper()
    if not venue:
        raise FormatError(ErrorCode.EMPTY_FIELD, "Festival venue is blank", line=line)
    return venue


def _parse_date(raw: str, line: str) -> date:
    parts = raw.split(DATE_SEPARATOR)
    if len(parts) != 3:
        raise FormatError(
            ErrorCode.INVALID_DATE,
            f"Start date {raw.strip()!r} is not in dd-mm-yyyy form",
            line=line,
        )
    try:
        day, month, year = (_parse_int(part) for part in parts)
        return date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise FormatError(
            ErrorCode.INVALID_DATE,
            f"Start date {raw.strip()!r} is not a valid date",
            line=line,
        ) from exc


def _parse_duration(raw: str, start_date: date, line: str) -> int:
    try:
        duration = _parse_int(raw)
    except ValueError as exc:
        raise FormatError(
            ErrorCode.INVALID_DURATION,
            f"Duration {raw.strip()!r} is not a number",
            line=line,
        ) from exc
    if duration < 1:
        raise FormatError(
            ErrorCode.INVALID_DURATION,
            f"Duration {duration} must be at least one day",
            line=line,
        )
    try:
        start_date + timedelta(days=duration)
    except OverflowError as exc:
        raise FormatError(
            ErrorCode.INVALID_DURATION,
            f"Duration {duration} runs past the last supported date",
            line=line,
        ) from exc
    return duration


def _parse_style(token: str, line: str) -> Style:
    try:
        return Style.from_token(token)
    except ValueError as exc:
        raise FormatError(
            ErrorCode.UNKNOWN_STYLE,
            f"Unknown style {token.strip()!r}",
            line=line,
        ) from exc


def _parse_int(raw: str) -> int:
    """Parse an optionally signed run of ASCII digits."""
    value = raw.strip()
    if not (value.isascii() and value.lstrip("+-").isdigit()):
        raise ValueError(f"invalid integer {value!r}")
    return int(value)
