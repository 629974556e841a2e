"""Data models for changelog aggregation."""

from dataclasses import dataclass, field
from pathlib import Path

from allchanges.changes.versions import VersionRange

# Version string -> trimmed changelog content
VersionMap = dict[str, str]


@dataclass
class AggregationResult:
    """Outcome of one aggregation run."""

    target_dir: Path
    build_from_files: bool = False
    dry_run: bool = False
    version_range: VersionRange = field(default_factory=VersionRange)
    base_file: Path | None = None
    base_entries: int = 0
    individual_files_found: int = 0
    individual_files_read: int = 0
    total_entries: int = 0
    versions: list[str] = field(default_factory=list)
    output_path: Path | None = None
    content: str = ""
    written: bool = False

    @property
    def is_empty(self) -> bool:
        """True when nothing survived filtering and no output was produced."""
        return not self.versions

    @property
    def min_version(self) -> str | None:
        return self.versions[0] if self.versions else None

    @property
    def max_version(self) -> str | None:
        return self.versions[-1] if self.versions else None

    @property
    def build_mode(self) -> str:
        if self.build_from_files:
            return "Build From Files (-b)"
        return "Merge/Update (Default)"
