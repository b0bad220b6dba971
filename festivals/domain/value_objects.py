"""Domain primitives that enforce validity at creation time."""

from collections.abc import Callable
from datetime import date
from enum import Enum
from typing import Self

Clock = Callable[[], date]

# English abbreviations regardless of the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class Style(Enum):
    """Musical styles a festival can be tagged with."""

    ROCK = "ROCK"
    POP = "POP"
    INDIE = "INDIE"
    PUNK = "PUNK"
    HIPHOP = "HIPHOP"
    BLUES = "BLUES"
    FUSION = "FUSION"
    RAP = "RAP"
    ELECTRONICA = "ELECTRONICA"
    FLAMENCO = "FLAMENCO"

    @classmethod
    def from_token(cls, token: str) -> Self:
        """Resolve a raw style token, ignoring case and surrounding blanks.

        Raises:
            ValueError: If the token is not a known style.
        """
        return cls(token.strip().upper())

    def __str__(self) -> str:
        return self.value


def title_case_words(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest."""
    return " ".join(word[0].upper() + word[1:].lower() for word in text.split())


def format_day(value: date) -> str:
    """Render a date as ``d Mon yyyy``, e.g. ``28 Feb 2022``."""
    return f"{value.day} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"
