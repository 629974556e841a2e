"""Configuration models for the changes aggregator.

This module contains the Pydantic models that carry the options of a single
aggregation run.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from allchanges.changes.naming import DEFAULT_DIRECTORY
from allchanges.changes.versions import VersionRange, parse_bound


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "allchanges"})

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'.")
        return level


class AggregatorConfig(BaseModel):
    """Options for one aggregation run."""

    directory: Path = Path(DEFAULT_DIRECTORY)  # Input and output directory
    start_version: str | None = None  # Inclusive lower bound
    end_version: str | None = None  # Inclusive upper bound
    build_from_files: bool = False  # Ignore existing aggregates
    dry_run: bool = False

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("start_version", "end_version")
    @classmethod
    def validate_version_bound(cls, v: str | None) -> str | None:
        """Validate a version bound, treating blank values as unset."""
        if v is None or not v.strip():
            return None
        parse_bound(v)
        return v.strip()

    @property
    def target_dir(self) -> Path:
        """Absolute path of the input/output directory."""
        return self.directory.expanduser().resolve()

    @property
    def version_range(self) -> VersionRange:
        return VersionRange.from_bounds(self.start_version, self.end_version)
