"""In-memory implementation of the Agenda."""

from bisect import insort
from calendar import Month

from festivals.domain import Festival, Style
from festivals.domain.models import festival_sort_key
from festivals.stores.interfaces import Agenda


class InMemoryAgenda(Agenda):
    """Agenda that keeps festivals grouped by month, each month in date order."""

    def __init__(self) -> None:
        self._by_month: dict[Month, list[Festival]] = {}

    def add_festival(self, festival: Festival) -> None:
        insort(
            self._by_month.setdefault(festival.month(), []),
            festival,
            key=festival_sort_key,
        )

    def festivals(self) -> list[Festival]:
        """Return all festivals ordered by start date."""
        return sorted(
            (festival for month in self._by_month.values() for festival in month),
            key=festival_sort_key,
        )

    def festivals_in_month(self, month: Month) -> list[Festival]:
        return list(self._by_month.get(month, []))

    def festivals_with_style(self, style: Style) -> list[Festival]:
        return [festival for festival in self.festivals() if style in festival.styles]

    def __len__(self) -> int:
        return sum(len(month) for month in self._by_month.values())

    def __str__(self) -> str:
        return "\n".join(festival.render() for festival in self.festivals())
