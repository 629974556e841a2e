import logging
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from allchanges.changes.aggregator import ChangesAggregator
from allchanges.system.file_manager import FileManager


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default structlog configuration and root handlers after each test."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def changes_dir(tmp_path: Path) -> Path:
    """Provide an empty changes directory."""
    directory = tmp_path / "CHANGES"
    directory.mkdir()
    return directory


@pytest.fixture
def write_changes(changes_dir: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes a file into the changes directory."""

    def _write(name: str, content: str) -> Path:
        path = changes_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def file_manager(changes_dir: Path) -> FileManager:
    """Provide a FileManager scoped to the changes directory."""
    return FileManager(changes_dir)


@pytest.fixture
def aggregator(file_manager: FileManager) -> ChangesAggregator:
    """Provide a ChangesAggregator backed by the temporary changes directory."""
    return ChangesAggregator(file_manager)
