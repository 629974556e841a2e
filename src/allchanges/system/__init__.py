"""System domain package.

This package contains system-level components:
- FileManager: File system operations scoped to the changes directory
- StructlogConfigurator: Structured logging configuration
"""

from allchanges.system import structlog_configurator
from allchanges.system.file_manager import FileManager

__all__ = [
    "FileManager",
    "structlog_configurator",
]
