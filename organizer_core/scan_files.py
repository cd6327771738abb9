"""
scan_files.py - File Scanning Module

Provides recursive file collection and plain directory listing
"""

from pathlib import Path
from typing import FrozenSet, List, Optional, Union
import logging
import os

from .errors import DirectoryReadError, PathNotFoundError
from .models_fs import OUTPUT_DIR_NAME, PathEntry
from .safety_checks import is_excluded_name

logger = logging.getLogger(__name__)


def collect_files(
    root: Path,
    exclusions: Optional[FrozenSet[str]] = None,
    output_dir_name: str = OUTPUT_DIR_NAME,
) -> List[Path]:
    """
    Recursively collect every eligible regular file under root

    The whole list is built before returning, so callers can move files
    without disturbing the walk.

    Args:
        root: Validated root directory
        exclusions: Lower-cased base names to skip (files and directories)
        output_dir_name: Organizer output folder, always skipped

    Returns:
        File paths in depth-first, name-sorted order

    Raises:
        DirectoryReadError: Any directory could not be read
    """
    exclusions = exclusions or frozenset()
    root = Path(root)

    def on_error(err: OSError):
        raise DirectoryReadError(Path(err.filename or root), err.strerror or str(err)) from err

    results: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        current_dir = Path(dirpath)

        # Pruning dirnames in place keeps os.walk out of excluded directories
        dirnames[:] = sorted(
            d for d in dirnames
            if not is_excluded_name(d, output_dir_name, exclusions)
        )

        for filename in sorted(filenames):
            filepath = current_dir / filename
            if is_excluded_name(filename, output_dir_name, exclusions):
                logger.debug("Skipping excluded file %s", filepath)
                continue
            # Regular files only (symlinks to regular files included);
            # FIFOs, sockets, devices and dangling links are left alone
            if not filepath.is_file():
                logger.debug("Skipping non-regular file %s", filepath)
                continue
            results.append(filepath)

    logger.debug("Collected %d files under %s", len(results), root)
    return results


def list_path(path: Union[str, Path]) -> List[PathEntry]:
    """
    List a path for display

    Args:
        path: File or directory

    Returns:
        A single entry for a file, or one entry per child of a directory
        (sorted by name)

    Raises:
        PathNotFoundError: Path does not exist
        DirectoryReadError: Directory could not be read
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise PathNotFoundError(path)

    if not path.is_dir():
        return [_entry_for(path)]

    try:
        children = list(path.iterdir())
    except OSError as e:
        raise DirectoryReadError(path, e.strerror or str(e)) from e

    entries = [_entry_for(child) for child in children]
    entries.sort(key=lambda e: e.name)
    return entries


def _entry_for(path: Path) -> PathEntry:
    try:
        if path.is_dir():
            return PathEntry(name=path.name, is_dir=True)
        return PathEntry(name=path.name, is_dir=False, size=path.stat().st_size)
    except OSError as e:
        return PathEntry(name=path.name, is_dir=False, error=e.strerror or str(e))


def format_entry(entry: PathEntry) -> str:
    """Format a listing entry as a single line"""
    if entry.error:
        return f"{entry.kind:<7} {entry.name} (error: {entry.error})"
    if entry.size is None:
        return f"{entry.kind:<7} {entry.name}"
    return f"{entry.kind:<7} {entry.name} ({entry.size} bytes)"
