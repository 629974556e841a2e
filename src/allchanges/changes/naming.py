"""File naming conventions for individual and aggregated changelog files.

Individual files are named ``CHANGES-<version>.md``; aggregates are named
``ALL_CHANGES--<min>-to--<max>.md`` and may pick up a ``-copy-N`` suffix when a
fresh build would otherwise clobber an existing file.
"""

import re
from pathlib import Path

DEFAULT_DIRECTORY = "./CHANGES"
FILE_ENCODING = "utf-8"

INDIVIDUAL_FILE_PREFIX = "CHANGES-"
INDIVIDUAL_FILE_SUFFIX = ".md"
AGGREGATED_FILE_PREFIX = "ALL_CHANGES--"
AGGREGATED_FILE_SEPARATOR = "-to--"
AGGREGATED_FILE_SUFFIX = ".md"

HEADER_TEMPLATE = "# CHANGES-{version}.md"
ENTRY_SEPARATOR = "\n---\n"

_INDIVIDUAL_PATTERN = re.compile(
    rf"^{re.escape(INDIVIDUAL_FILE_PREFIX)}(.+){re.escape(INDIVIDUAL_FILE_SUFFIX)}$"
)
_AGGREGATE_PATTERN = re.compile(
    rf"^{re.escape(AGGREGATED_FILE_PREFIX)}([0-9a-zA-Z.-]+)"
    rf"{re.escape(AGGREGATED_FILE_SEPARATOR)}"
    rf"([0-9a-zA-Z.-]+){re.escape(AGGREGATED_FILE_SUFFIX)}$"
)
# Copies and backups of an aggregate ("...-copy-2.md", "...-BACKUP-to--...md")
_COPY_MARKER_PATTERN = re.compile(r"-(?:copy|backup)(?:-|$)", re.IGNORECASE)


def is_individual_filename(name: str) -> bool:
    return name.startswith(INDIVIDUAL_FILE_PREFIX) and name.endswith(INDIVIDUAL_FILE_SUFFIX)


def extract_version(name: str) -> str | None:
    """Extract the version from an individual file name.

    Args:
        name: File name or path, e.g. "CHANGES-1.2.3.md"

    Returns:
        The version string, or None if the name does not carry one
    """
    basename = Path(name).name
    match = _INDIVIDUAL_PATTERN.match(basename)
    return match.group(1) if match else None


def is_aggregate_filename(name: str) -> bool:
    return name.startswith(AGGREGATED_FILE_PREFIX) and name.endswith(AGGREGATED_FILE_SUFFIX)


def extract_aggregate_end_version(name: str) -> str | None:
    """Extract the trailing (maximum) version token of an aggregate file name.

    Names where either version token contains characters outside
    ``[0-9a-zA-Z.-]`` or a copy/backup marker do not count as aggregates and
    yield None.
    """
    match = _AGGREGATE_PATTERN.match(name)
    if not match:
        return None
    start_version, end_version = match.groups()
    if _COPY_MARKER_PATTERN.search(start_version) or _COPY_MARKER_PATTERN.search(end_version):
        return None
    return end_version


def aggregate_filename(min_version: str, max_version: str) -> str:
    return (
        f"{AGGREGATED_FILE_PREFIX}{min_version}{AGGREGATED_FILE_SEPARATOR}"
        f"{max_version}{AGGREGATED_FILE_SUFFIX}"
    )


def copy_filename(base_name: str, counter: int) -> str:
    """Return the ``-copy-N`` variant of an aggregate file name."""
    stem = base_name.removesuffix(AGGREGATED_FILE_SUFFIX)
    return f"{stem}-copy-{counter}{AGGREGATED_FILE_SUFFIX}"


def entry_header(version: str) -> str:
    return HEADER_TEMPLATE.format(version=version)
