"""Runtime configuration read from the environment."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "FESTIVALS_"


class Settings(BaseModel):
    """Settings for loading and displaying the festival agenda."""

    resource: Path | None = Field(
        default=None, description="Festival file to load instead of the bundled one"
    )
    skip_invalid_lines: bool = Field(
        default=False, description="Log and skip malformed lines instead of aborting"
    )
    log_level: str = Field(default="WARNING", description="Level for the festivals logger")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from FESTIVALS_* variables, ignoring blank ones."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name.upper()].strip()
            for name in cls.model_fields
            if environ.get(ENV_PREFIX + name.upper(), "").strip()
        }
        return cls.model_validate(values)
