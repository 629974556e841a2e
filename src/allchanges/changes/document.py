"""Rendering and parsing of aggregated changelog documents.

An aggregate is a sequence of entries joined by a line holding only ``---``.
Each entry starts with a ``# CHANGES-<version>.md`` header, a blank line and the
entry's content.
"""

import re
from collections.abc import Sequence

from allchanges.changes.models import VersionMap
from allchanges.changes.naming import ENTRY_SEPARATOR, entry_header

_SEPARATOR_LINE_PATTERN = re.compile(r"^([ \t]*---[ \t]*\r?)$", re.MULTILINE)
_HEADER_PATTERN = re.compile(r"^\s*#\s*CHANGES-(.+)\.md[ \t]*(?:\r?\n|$)")


def render_aggregate(versions: Sequence[str], version_map: VersionMap) -> str:
    """Render sorted versions into a single aggregate document.

    Args:
        versions: Versions in output order
        version_map: Content for every version in ``versions``

    Returns:
        The document text, without a trailing separator
    """
    blocks = [f"{entry_header(version)}\n\n{version_map[version].strip()}" for version in versions]
    return ENTRY_SEPARATOR.join(blocks)


def parse_aggregate(text: str) -> VersionMap:
    """Parse an aggregate document back into a version map.

    Text before the first entry header is discarded. A separator line that is
    not followed by a header belongs to the current entry's content and is kept
    together with the blank lines around it.
    """
    version_map: VersionMap = {}
    current_version: str | None = None
    current_content = ""

    # Odd indexes hold the separator lines themselves
    pieces = _SEPARATOR_LINE_PATTERN.split(text)
    for index in range(0, len(pieces), 2):
        segment = pieces[index]
        header = _HEADER_PATTERN.match(segment)
        if header:
            if current_version is not None:
                version_map[current_version] = current_content.strip()
            current_version = header.group(1).strip()
            current_content = segment[header.end() :]
        elif current_version is not None:
            current_content += pieces[index - 1] + segment

    if current_version is not None:
        version_map[current_version] = current_content.strip()

    return version_map
