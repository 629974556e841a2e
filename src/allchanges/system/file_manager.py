from pathlib import Path

from allchanges.changes.naming import FILE_ENCODING


class FileManager:
    """Manages file system operations within a single changes directory."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        """Return the full path of a file within the base_path."""
        return self.base_path / name

    def ensure_directory(self) -> None:
        """Create the base_path (and parents) if it doesn't exist."""
        self.base_path.mkdir(parents=True, exist_ok=True)

    def list_directory_contents(self) -> list[str]:
        """List the file names in the base_path, sorted.

        Raises:
            FileNotFoundError: If the base_path does not exist
        """
        return sorted(p.name for p in self.base_path.iterdir())

    def file_exists(self, name: str) -> bool:
        """Check if a file exists within the base_path."""
        return self.path_for(name).is_file()

    def read_file(self, name: str, encoding: str = FILE_ENCODING) -> str:
        """Read content from a file within the base_path."""
        return self.path_for(name).read_text(encoding=encoding)

    def write_file(self, name: str, content: str, encoding: str = FILE_ENCODING) -> Path:
        """Write content to a file within the base_path, returning its path."""
        full_path = self.path_for(name)
        full_path.write_text(content, encoding=encoding)
        return full_path
