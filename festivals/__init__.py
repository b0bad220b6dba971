"""Music festival agenda: parse festival lines and query the results."""

from festivals.domain import ErrorCode, Festival, FormatError, ResourceError, Style
from festivals.services import load_bundled_festivals, load_festivals, parse_line
from festivals.stores import Agenda, InMemoryAgenda

__version__ = "0.1.0"

__all__ = [
    "Festival",
    "Style",
    "ErrorCode",
    "FormatError",
    "ResourceError",
    "Agenda",
    "InMemoryAgenda",
    "parse_line",
    "load_festivals",
    "load_bundled_festivals",
]
