"""
errors.py - Exception Definitions

Fatal errors abort a run before any statistics exist. Per-item failures are
ordinary OSError instances caught and recorded by the engine.
"""

from pathlib import Path


class OrganizerError(Exception):
    """Base class for errors that stop a run"""


class PathNotFoundError(OrganizerError, FileNotFoundError):
    """Root path does not exist"""

    def __init__(self, path: Path):
        super().__init__(f"Path does not exist: {path}")
        self.path = path


class RootNotDirectoryError(OrganizerError, NotADirectoryError):
    """Root path exists but is not a directory"""

    def __init__(self, path: Path):
        super().__init__(f"Path is not a directory: {path}")
        self.path = path


class RootAccessError(OrganizerError):
    """Root path could not be inspected (permission denied, I/O error)"""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot access path {path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryReadError(OrganizerError):
    """A directory could not be read while collecting files"""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to read directory {path}: {reason}")
        self.path = path
        self.reason = reason


class OutputDirectoryError(OrganizerError):
    """Top-level output directory could not be created"""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to create output directory {path}: {reason}")
        self.path = path
        self.reason = reason


class DestinationExistsError(FileExistsError):
    """Destination file already exists in its bucket (per-item, recoverable)"""

    def __init__(self, dst: Path):
        super().__init__(f"destination already exists: {dst}")
        self.dst = dst
