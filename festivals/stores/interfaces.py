"""Store interfaces (repository pattern).

The loader only needs somewhere to put festivals; stores must be
swappable and hold domain models.
"""

from abc import ABC, abstractmethod

from festivals.domain import Festival


class Agenda(ABC):
    """Interface for a collection that festivals are loaded into."""

    @abstractmethod
    def add_festival(self, festival: Festival) -> None:
        """Store a festival."""
        ...
