"""
models_fs.py - Core Data Structure Definitions

Contains:
- OperationMode: Move or copy
- OrganizeOptions: Options for a single run
- OrganizerResult: Immutable outcome of a run
- ProgressSink: Progress observer and its no-op / callback implementations
- PathEntry: One row of a directory listing
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional
from enum import Enum


OUTPUT_DIR_NAME = "Organized"      # Output folder created under the root
NO_EXTENSION = "NO_EXTENSION"      # Bucket for files without an extension
NO_FILES_SUMMARY = "No files found to organize."


class OperationMode(Enum):
    """File operation mode"""
    MOVE = "move"
    COPY = "copy"

    @property
    def verb(self) -> str:
        """Past tense verb used in summaries"""
        return "moved" if self is OperationMode.MOVE else "copied"

    @property
    def participle(self) -> str:
        """Present participle used in headers"""
        return "Moving" if self is OperationMode.MOVE else "Copying"


def normalize_exclusions(names: Optional[Iterable[str]]) -> FrozenSet[str]:
    """
    Build an exclusion set from raw names

    Args:
        names: Folder or file names (any case, surrounding whitespace allowed)

    Returns:
        Lower-cased, trimmed names with empty entries dropped
    """
    if not names:
        return frozenset()
    return frozenset(n.strip().lower() for n in names if n and n.strip())


def parse_exclusions(text: str) -> FrozenSet[str]:
    """Parse a comma-separated exclusion string (as typed in the GUI)"""
    return normalize_exclusions(text.split(",")) if text else frozenset()


@dataclass
class OrganizeOptions:
    """Organize options configuration"""
    mode: OperationMode = OperationMode.MOVE
    exclusions: FrozenSet[str] = field(default_factory=frozenset)
    output_dir_name: str = OUTPUT_DIR_NAME

    def __post_init__(self):
        self.exclusions = normalize_exclusions(self.exclusions)


@dataclass(frozen=True)
class OrganizerResult:
    """Outcome of one organize run; never mutated after it is returned"""
    total_moved: int                                # Files moved or copied
    folders_created: int                            # Bucket folders created by this run
    extension_map: Dict[str, List[str]]             # Bucket -> file names placed there
    summary: str                                    # Human-readable summary
    errors: Optional[List[str]] = None              # Per-item errors, None if none occurred
    output_dir: Optional[Path] = None               # None when nothing was organized

    @classmethod
    def empty(cls) -> "OrganizerResult":
        """Result for a run that found no eligible files"""
        return cls(
            total_moved=0,
            folders_created=0,
            extension_map={},
            summary=NO_FILES_SUMMARY,
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors) if self.errors else 0


class ProgressSink:
    """
    Progress observer

    Called once per file with (current, total) before the file is processed.
    Implementations must not touch engine state.
    """

    def report(self, current: int, total: int) -> None:
        raise NotImplementedError


class NullProgressSink(ProgressSink):
    """Progress sink that ignores all events"""

    def report(self, current: int, total: int) -> None:
        pass


class CallbackProgressSink(ProgressSink):
    """Adapts a plain callable to the ProgressSink interface"""

    def __init__(self, callback: Callable[[int, int], None]):
        self._callback = callback

    def report(self, current: int, total: int) -> None:
        self._callback(current, total)


@dataclass
class PathEntry:
    """Directory listing entry"""
    name: str                       # Base name
    is_dir: bool                    # Whether it is a directory
    size: Optional[int] = None      # File size (bytes), None for folders or unreadable entries
    error: Optional[str] = None     # Read error, if any

    @property
    def kind(self) -> str:
        return "Folder" if self.is_dir else "File"
