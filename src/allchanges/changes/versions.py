"""Version coercion, ordering and range filtering for changelog entries.

Changelog versions are free-form strings that usually look like semantic
versions ("1.5.90", "2.0.0-beta.1", "v3"). Comparison happens on a coerced
``packaging.version.Version`` built from the first numeric ``X[.Y[.Z]]`` run
found in the string, so pre-release and build suffixes never affect ordering.
"""

import functools
import re
from collections.abc import Iterable
from dataclasses import dataclass

from packaging.version import InvalidVersion, Version

# First run of up to three numeric components that is not part of a longer digit run
_COERCE_PATTERN = re.compile(r"(?:^|\D)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|\D)")

# Bounds like "1" or "v1.2" that name a whole release series
_PARTIAL_BOUND_PATTERN = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?\s*$")


def coerce_version(text: str) -> Version | None:
    """Coerce a loosely formatted version string into a comparable Version.

    Args:
        text: Version string such as "1.2", "v2.0.0-beta" or "release-3.1.4"

    Returns:
        Version with exactly three release components, or None when the string
        holds no numeric version at all
    """
    match = _COERCE_PATTERN.search(text)
    if not match:
        return None
    major, minor, patch = (int(part or 0) for part in match.groups())
    return Version(f"{major}.{minor}.{patch}")


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings, returning -1, 0 or 1.

    Coercible versions sort before uncoercible ones. Two uncoercible versions
    fall back to plain string comparison.
    """
    coerced_a = coerce_version(a)
    coerced_b = coerce_version(b)
    if coerced_a is not None and coerced_b is not None:
        return (coerced_a > coerced_b) - (coerced_a < coerced_b)
    if coerced_a is not None:
        return -1
    if coerced_b is not None:
        return 1
    return (a > b) - (a < b)


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Sort version strings ascending.

    The sort is stable: versions that coerce to the same value keep the order
    in which they were supplied.
    """
    return sorted(versions, key=functools.cmp_to_key(compare_versions))


def parse_bound(text: str) -> Version:
    """Parse a user supplied range bound.

    Bounds follow PEP 440: "1.0.post1" is accepted while semver-only forms
    such as "1.2.x" or "1.0.0-alpha.beta" are not.

    Raises:
        ValueError: If the bound is not a valid version
    """
    try:
        return Version(text.strip())
    except InvalidVersion as e:
        raise ValueError(f"'{text}' is not a valid version") from e


def _series_ceiling(text: str) -> Version | None:
    """Return the exclusive ceiling for a partial bound ("1.2" -> 1.3.0), if partial."""
    match = _PARTIAL_BOUND_PATTERN.match(text)
    if not match:
        return None
    major, minor = match.groups()
    if minor is None:
        return Version(f"{int(major) + 1}.0.0")
    return Version(f"{major}.{int(minor) + 1}.0")


@dataclass(frozen=True)
class VersionRange:
    """Inclusive version range with optional bounds."""

    start: str | None = None
    end: str | None = None

    @classmethod
    def from_bounds(cls, start: str | None, end: str | None) -> "VersionRange":
        """Build a range, treating blank bounds as unset and validating the rest."""
        start = start.strip() if start and start.strip() else None
        end = end.strip() if end and end.strip() else None
        for bound in (start, end):
            if bound is not None:
                parse_bound(bound)
        return cls(start=start, end=end)

    @property
    def is_empty(self) -> bool:
        """True when neither bound is set."""
        return self.start is None and self.end is None

    def describe(self) -> str:
        """Render the range the way it is reported to the user."""
        parts = []
        if self.start is not None:
            parts.append(f">={self.start}")
        if self.end is not None:
            parts.append(f"<={self.end}")
        return " ".join(parts)

    def contains(self, version: str) -> bool:
        """Check whether a version string falls inside the range.

        The version is coerced first; versions that cannot be coerced are never
        contained in a range.
        """
        coerced = coerce_version(version)
        if coerced is None:
            return False
        if self.start is not None and coerced < parse_bound(self.start):
            return False
        if self.end is not None:
            ceiling = _series_ceiling(self.end)
            if ceiling is not None:
                return coerced < ceiling
            return coerced <= parse_bound(self.end)
        return True


def filter_versions(version_map: dict[str, str], version_range: VersionRange) -> dict[str, str]:
    """Keep only the entries whose version falls inside the range.

    An empty range keeps every entry.
    """
    if version_range.is_empty:
        return dict(version_map)
    return {
        version: content
        for version, content in version_map.items()
        if version_range.contains(version)
    }
