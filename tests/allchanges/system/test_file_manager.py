from pathlib import Path

import pytest

from allchanges.system.file_manager import FileManager


def test_ensure_directory_creates_parents(tmp_path):
    """Should create the base directory and its parents"""
    file_manager = FileManager(tmp_path / "nested" / "CHANGES")
    file_manager.ensure_directory()
    assert (tmp_path / "nested" / "CHANGES").is_dir()


def test_ensure_directory_is_idempotent(file_manager):
    """Should not fail when the directory already exists"""
    file_manager.ensure_directory()
    file_manager.ensure_directory()
    assert file_manager.base_path.is_dir()


def test_ensure_directory_fails_below_a_file(tmp_path):
    """Should raise OSError when a file blocks the directory path"""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(OSError):
        FileManager(blocker / "CHANGES").ensure_directory()


def test_write_file(file_manager):
    """Should write content to a file and return its path"""
    path = file_manager.write_file("test_file.md", "Hello, world!")
    assert path == file_manager.base_path / "test_file.md"
    assert path.read_text(encoding="utf-8") == "Hello, world!"


def test_read_file(file_manager):
    """Should read content from a file"""
    (file_manager.base_path / "test_read.md").write_text("Read this. ✓", encoding="utf-8")
    assert file_manager.read_file("test_read.md") == "Read this. ✓"


def test_read_missing_file(file_manager):
    """Should raise FileNotFoundError for missing files"""
    with pytest.raises(FileNotFoundError):
        file_manager.read_file("missing.md")


def test_list_directory_contents_sorted(file_manager):
    """Should list file names in sorted order"""
    for name in ["b.md", "a.md", "c.md"]:
        (file_manager.base_path / name).write_text("")
    assert file_manager.list_directory_contents() == ["a.md", "b.md", "c.md"]


def test_list_missing_directory(tmp_path):
    """Should raise FileNotFoundError when the directory is missing"""
    with pytest.raises(FileNotFoundError):
        FileManager(tmp_path / "missing").list_directory_contents()


def test_file_exists(file_manager):
    """Should report files but not directories"""
    (file_manager.base_path / "present.md").write_text("")
    (file_manager.base_path / "subdir").mkdir()
    assert file_manager.file_exists("present.md")
    assert not file_manager.file_exists("absent.md")
    assert not file_manager.file_exists("subdir")


def test_path_for(file_manager):
    """Should join names onto the base path"""
    assert file_manager.path_for("x.md") == Path(file_manager.base_path) / "x.md"
