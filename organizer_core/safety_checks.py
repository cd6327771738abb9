"""
safety_checks.py - Safety Check Module

Provides checks performed before touching the filesystem
"""

from pathlib import Path
from typing import Union
import os
import stat

from .errors import (
    PathNotFoundError,
    RootNotDirectoryError,
    RootAccessError,
    DestinationExistsError,
)


def validate_root(path: Union[str, Path]) -> Path:
    """
    Validate the root directory of a run

    Args:
        path: Path to check

    Returns:
        Absolute root path

    Raises:
        PathNotFoundError: Path does not exist
        RootNotDirectoryError: Path exists but is not a directory
        RootAccessError: Path could not be inspected
    """
    root = Path(path).expanduser()
    try:
        st = os.stat(root)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise PathNotFoundError(root) from e
    except OSError as e:
        raise RootAccessError(root, e.strerror or str(e)) from e
    if not stat.S_ISDIR(st.st_mode):
        raise RootNotDirectoryError(root)
    try:
        return root.resolve()
    except OSError as e:
        raise RootAccessError(root, e.strerror or str(e)) from e


def check_destination_free(dst: Path) -> None:
    """
    Refuse to place a file over an existing entry

    Broken symlinks count as existing, so lexists is used instead of exists.

    Raises:
        DestinationExistsError: Something already exists at dst
    """
    if os.path.lexists(dst):
        raise DestinationExistsError(dst)


def is_excluded_name(name: str, output_dir_name: str, exclusions) -> bool:
    """
    Check if a base name must be skipped during traversal

    Args:
        name: Base name of a file or directory
        output_dir_name: Name of the organizer's own output folder
        exclusions: Lower-cased exclusion set

    Returns:
        Whether the entry is excluded
    """
    lowered = name.lower()
    return lowered == output_dir_name.lower() or lowered in exclusions
