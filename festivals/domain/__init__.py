from festivals.domain.errors import DomainError, ErrorCode, FormatError, ResourceError
from festivals.domain.models import Festival
from festivals.domain.value_objects import Clock, Style

__all__ = [
    "Festival",
    "Style",
    "Clock",
    "ErrorCode",
    "DomainError",
    "FormatError",
    "ResourceError",
]
