from festivals.services.loader import load_bundled_festivals, load_festivals, read_resource_lines
from festivals.services.parser import parse_line

__all__ = [
    "parse_line",
    "load_festivals",
    "load_bundled_festivals",
    "read_resource_lines",
]
