"""Domain models for the festival agenda.

These are pure domain objects with no knowledge of the text format they
are parsed from. Parsing lives in festivals/services/parser.py.
"""

from calendar import Month
from dataclasses import dataclass, field
from datetime import date, timedelta

from festivals.domain.value_objects import Clock, Style, format_day, title_case_words

SEPARATOR = "-" * 60


@dataclass(frozen=True)
class Festival:
    """Domain representation of a Festival.

    Every field is fixed at construction except the style set, which can
    only grow through add_style().
    """

    name: str
    venue: str
    start_date: date
    duration_days: int
    styles: frozenset[Style] = field(default=frozenset(), hash=False)
    clock: Clock = field(default=date.today, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Festival name cannot be blank")
        if not self.venue.strip():
            raise ValueError("Festival venue cannot be blank")
        if self.duration_days < 1:
            raise ValueError("Festival duration must be at least one day")
        try:
            self.start_date + timedelta(days=self.duration_days)
        except OverflowError as exc:
            raise ValueError("Festival ends past the last supported date") from exc
        object.__setattr__(self, "name", title_case_words(self.name))
        object.__setattr__(self, "venue", self.venue.upper())
        object.__setattr__(self, "styles", frozenset(self.styles))

    def add_style(self, style: Style) -> None:
        """Tag the festival with another style. Adding a known style is a no-op."""
        if style not in self.styles:
            object.__setattr__(self, "styles", self.styles | {style})

    def month(self) -> Month:
        return Month(self.start_date.month)

    def starts_before(self, other: "Festival") -> bool:
        return self.start_date < other.start_date

    def starts_after(self, other: "Festival") -> bool:
        return self.start_date > other.start_date

    def starts_on_same_day(self, other: "Festival") -> bool:
        return self.start_date == other.start_date

    def end_date(self) -> date:
        """Last day the festival is running."""
        return self.start_date + timedelta(days=self.duration_days - 1)

    def end_boundary(self) -> date:
        """Day after the last active day, used for the completion check."""
        return self.start_date + timedelta(days=self.duration_days)

    def has_concluded(self) -> bool:
        return self.end_boundary() < self.clock()

    def days_remaining(self) -> int:
        return (self.end_boundary() - self.clock()).days

    def ordered_styles(self) -> list[Style]:
        """Styles in declaration order of the Style enum."""
        return [style for style in Style if style in self.styles]

    def render(self) -> str:
        """Text block used to display the festival.

        The date line shows the first and last active days followed by the
        year, then either ``(concluido)`` or the days left until the end.
        """
        styles = "{" + ", ".join(str(style) for style in self.ordered_styles()) + "}"
        if self.has_concluded():
            status = " (concluido)"
        else:
            status = f" (quedan {self.days_remaining()} días)"
        return (
            f"{self.name} {styles}\n"
            f"{self.venue}\n"
            f"{format_day(self.start_date)} - {format_day(self.end_date())}"
            f" {self.start_date.year}{status}\n"
            f"{SEPARATOR}"
        )

    def __str__(self) -> str:
        return self.render()


def festival_sort_key(festival: Festival) -> tuple[date, str]:
    """Chronological ordering, ties broken by name."""
    return festival.start_date, festival.name
