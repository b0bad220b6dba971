"""Domain error codes for the festivals package."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    EMPTY_FIELD = "EMPTY_FIELD"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DURATION = "INVALID_DURATION"
    UNKNOWN_STYLE = "UNKNOWN_STYLE"
    RESOURCE_UNAVAILABLE = "RESOURCE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class FormatError(DomainError):
    """Raised when a festival line cannot be turned into a Festival."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        line: str = "",
        line_number: int | None = None,
    ) -> None:
        super().__init__(code=code, message=message)
        self.line = line
        self.line_number = line_number


class ResourceError(DomainError):
    """Raised when the source of festival lines cannot be read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.RESOURCE_UNAVAILABLE,
            message=f"Cannot read festivals from {source}: {reason}",
        )
        self.source = source
