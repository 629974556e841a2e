"""Tests for changelog file naming."""

import pytest

from allchanges.changes.naming import (
    aggregate_filename,
    copy_filename,
    entry_header,
    extract_aggregate_end_version,
    extract_version,
    is_aggregate_filename,
    is_individual_filename,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        pytest.param("CHANGES-1.2.3.md", "1.2.3", id="plain"),
        pytest.param("CHANGES-2.0.0-beta.1.md", "2.0.0-beta.1", id="prerelease"),
        pytest.param("/some/dir/CHANGES-0.9.md", "0.9", id="full_path"),
        pytest.param("CHANGES-.md", None, id="empty_version"),
        pytest.param("changes-1.0.0.md", None, id="wrong_case"),
        pytest.param("CHANGES-1.0.0.txt", None, id="wrong_suffix"),
    ],
)
def test_extract_version(name, expected):
    """Should extract the version part of individual file names."""
    assert extract_version(name) == expected


def test_is_individual_filename():
    """Should match on prefix and suffix only."""
    assert is_individual_filename("CHANGES-1.0.0.md")
    assert is_individual_filename("CHANGES-.md")
    assert not is_individual_filename("ALL_CHANGES--1.0.0-to--2.0.0.md")
    assert not is_individual_filename("README.md")


def test_is_aggregate_filename():
    """Should recognise aggregate file names."""
    assert is_aggregate_filename("ALL_CHANGES--1.0.0-to--2.0.0.md")
    assert not is_aggregate_filename("CHANGES-1.0.0.md")


@pytest.mark.parametrize(
    "name,expected",
    [
        pytest.param("ALL_CHANGES--1.0.0-to--2.0.0.md", "2.0.0", id="release"),
        pytest.param("ALL_CHANGES--1.0.0-to--2.0.0-rc.1.md", "2.0.0-rc.1", id="prerelease"),
        pytest.param("ALL_CHANGES--1.0.0-to--2.0.0-copy-1.md", None, id="copy_marker"),
        pytest.param("ALL_CHANGES--1.0.0-to--2.0.0-BACKUP-old.md", None, id="backup_marker"),
        pytest.param("ALL_CHANGES--1.0.0-to--2.0.0-backup.md", None, id="trailing_backup"),
        pytest.param("ALL_CHANGES--1.0.0-to--2.0.0 (1).md", None, id="invalid_chars"),
        pytest.param("ALL_CHANGES--0.1.0-copy-2-to--3.0.0.md", None, id="copy_in_start"),
        pytest.param("ALL_CHANGES--1.0.0-BACKUP-to--2.0.0.md", None, id="backup_in_start"),
        pytest.param("ALL_CHANGES--1.0.0 (1)-to--2.0.0.md", None, id="invalid_start_chars"),
        pytest.param("ALL_CHANGES--1.0.0.md", None, id="missing_separator"),
    ],
)
def test_extract_aggregate_end_version(name, expected):
    """Should only accept names whose version tokens are both clean."""
    assert extract_aggregate_end_version(name) == expected


def test_aggregate_filename():
    """Should build the aggregate name from the version span."""
    assert aggregate_filename("1.0.0", "1.1.0") == "ALL_CHANGES--1.0.0-to--1.1.0.md"


def test_copy_filename():
    """Should insert the copy counter before the suffix."""
    base = "ALL_CHANGES--1.0.0-to--2.0.0.md"
    assert copy_filename(base, 1) == "ALL_CHANGES--1.0.0-to--2.0.0-copy-1.md"
    assert copy_filename(base, 2) == "ALL_CHANGES--1.0.0-to--2.0.0-copy-2.md"


def test_entry_header():
    """Should substitute the version into the header template."""
    assert entry_header("1.5.90") == "# CHANGES-1.5.90.md"
