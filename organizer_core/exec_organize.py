"""
exec_organize.py - Organize Execution Module

Responsibilities:
- Validate root and collect files before any change is made
- Create bucket folders on demand
- Move or copy each file, recording per-file failures without stopping
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
import logging
import os
import shutil

from .bucket_rules import classify_extension
from .errors import OutputDirectoryError
from .models_fs import (
    OperationMode,
    OrganizeOptions,
    OrganizerResult,
    ProgressSink,
    NullProgressSink,
)
from .safety_checks import validate_root, check_destination_free
from .scan_files import collect_files

logger = logging.getLogger(__name__)


def organize(
    root: Union[str, Path],
    mode: OperationMode = OperationMode.MOVE,
    exclusions: Optional[Iterable[str]] = None,
    progress_sink: Optional[ProgressSink] = None,
) -> OrganizerResult:
    """
    Organize all files under root into per-extension folders

    Args:
        root: Directory to organize
        mode: Move or copy
        exclusions: File or folder names to skip (case-insensitive)
        progress_sink: Receives (current, total) before each file

    Returns:
        Result of the run, including per-file errors

    Raises:
        OrganizerError: Run could not start (bad root, unreadable directory,
            output folder not creatable)
    """
    options = OrganizeOptions(mode=mode, exclusions=exclusions)
    return organize_with_options(root, options, progress_sink)


def organize_with_options(
    root: Union[str, Path],
    options: OrganizeOptions,
    progress_sink: Optional[ProgressSink] = None,
) -> OrganizerResult:
    """Same as organize(), with all settings taken from an OrganizeOptions"""
    sink = progress_sink or NullProgressSink()
    mode = options.mode

    root = validate_root(root)
    files = collect_files(root, options.exclusions, options.output_dir_name)
    total = len(files)

    if total == 0:
        logger.info("No files to organize under %s", root)
        return OrganizerResult.empty()

    output_dir = root / options.output_dir_name
    try:
        output_dir.mkdir(exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(output_dir, e.strerror or str(e)) from e

    logger.info("Organizing %d files under %s (mode=%s)", total, root, mode.value)

    total_moved = 0
    created_buckets = set()
    extension_map: Dict[str, List[str]] = {}
    errors: List[str] = []

    for i, src in enumerate(files):
        sink.report(i + 1, total)

        bucket = classify_extension(src)
        bucket_dir = output_dir / bucket

        # Not cached: a failed bucket is retried for the next file that needs it
        try:
            if _ensure_dir(bucket_dir):
                created_buckets.add(bucket)
        except OSError as e:
            msg = f"Failed to create folder '{bucket}': {e.strerror or e}"
            logger.warning(msg)
            errors.append(msg)
            continue

        dst = bucket_dir / src.name
        try:
            if mode is OperationMode.COPY:
                _copy_file(src, dst)
            else:
                _move_file(src, dst)
        except OSError as e:
            msg = f"Failed to {mode.value} '{src.name}': {e.strerror or e}"
            logger.warning(msg)
            errors.append(msg)
            continue

        logger.debug("%s %s -> %s", mode.verb, src, dst)
        total_moved += 1
        extension_map.setdefault(bucket, []).append(src.name)

    summary = build_summary(mode, total_moved, len(created_buckets), extension_map)
    logger.info(
        "Organize finished: %d %s, %d folders created, %d errors",
        total_moved, mode.verb, len(created_buckets), len(errors),
    )

    return OrganizerResult(
        total_moved=total_moved,
        folders_created=len(created_buckets),
        extension_map=extension_map,
        summary=summary,
        errors=errors or None,
        output_dir=output_dir,
    )


def _ensure_dir(directory: Path) -> bool:
    """Create directory if missing; returns True if this call created it"""
    if directory.is_dir():
        return False
    try:
        directory.mkdir()
    except FileExistsError:
        # Lost a race with another process, or a non-directory is in the way
        if directory.is_dir():
            return False
        raise
    return True


def _move_file(src: Path, dst: Path) -> None:
    check_destination_free(dst)
    os.rename(src, dst)


def _copy_file(src: Path, dst: Path) -> None:
    """Copy content and metadata; a partial copy is removed on failure"""
    check_destination_free(dst)
    with open(src, "rb") as fsrc:
        # "xb" still refuses to replace a file created after the check
        fdst = open(dst, "xb")
        try:
            with fdst:
                shutil.copyfileobj(fsrc, fdst)
            shutil.copystat(src, dst)
        except OSError:
            os.unlink(dst)
            raise


def build_summary(
    mode: OperationMode,
    total_moved: int,
    folders_created: int,
    extension_map: Dict[str, List[str]],
) -> str:
    """
    Generate run summary

    Bucket lines follow the map's iteration order, which callers should
    treat as unordered.
    """
    lines = [
        f"Successfully {mode.verb} {total_moved} {_plural(total_moved, 'file')}.",
        f"Folders created: {folders_created}",
    ]
    if extension_map:
        lines.append("")
        lines.append("Files by extension:")
        for bucket, names in extension_map.items():
            lines.append(f"  {bucket}: {len(names)} {_plural(len(names), 'file')}")
    return "\n".join(lines)


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"
