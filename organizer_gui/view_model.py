"""
view_model.py - GUI State

Holds everything the window shows or edits. The engine only ever receives
the OrganizeOptions built here and hands back an OrganizerResult; it never
sees this object. Kept free of Qt so it can be tested headless.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from organizer_core import (
    OperationMode,
    OrganizeOptions,
    OrganizerResult,
    PathEntry,
    bucket_breakdown,
    parse_exclusions,
)


@dataclass
class OrganizerViewModel:
    """State of the organizer window"""
    directory: str = ""                         # Folder picker text
    exclusions_text: str = ""                   # Comma-separated exclusions field
    mode: OperationMode = OperationMode.MOVE    # Move/Copy toggle
    listing: List[PathEntry] = field(default_factory=list)
    running: bool = False
    run_mode: OperationMode = OperationMode.MOVE  # Mode of the current or last run
    progress_current: int = 0
    progress_total: int = 0
    result: Optional[OrganizerResult] = None
    last_error: Optional[str] = None

    def set_copy_mode(self, copy: bool) -> None:
        self.mode = OperationMode.COPY if copy else OperationMode.MOVE

    @property
    def root_path(self) -> Optional[Path]:
        text = self.directory.strip()
        return Path(text) if text else None

    def input_problem(self) -> Optional[str]:
        """Return a warning for the user, or None if a run can start"""
        if self.running:
            return "An organize run is already in progress"
        root = self.root_path
        if root is None:
            return "Please select a directory first"
        if not root.is_dir():
            return f"Directory does not exist: {root}"
        return None

    def build_options(self) -> OrganizeOptions:
        return OrganizeOptions(mode=self.mode, exclusions=parse_exclusions(self.exclusions_text))

    def confirmation_message(self) -> str:
        return (
            f"Move all files under {self.root_path} into per-extension folders?\n\n"
            "This action cannot be undone!"
        )

    # Run lifecycle

    def begin_run(self) -> None:
        self.running = True
        self.run_mode = self.mode
        self.progress_current = 0
        self.progress_total = 0
        self.result = None
        self.last_error = None

    def on_progress(self, current: int, total: int) -> None:
        self.progress_current = current
        self.progress_total = total

    def finish(self, result: OrganizerResult) -> None:
        self.running = False
        self.result = result

    def fail(self, message: str) -> None:
        self.running = False
        self.last_error = message

    # Presentation helpers

    @property
    def progress_text(self) -> str:
        if not self.progress_total:
            return ""
        return f"Processing file {self.progress_current} of {self.progress_total}"

    def totals_text(self) -> str:
        if self.result is None:
            return ""
        return (
            f"{self.run_mode.verb.capitalize()}: {self.result.total_moved}    "
            f"Folders created: {self.result.folders_created}    "
            f"Errors: {self.result.error_count}"
        )

    def bucket_rows(self) -> List[Tuple[str, int]]:
        if self.result is None:
            return []
        return bucket_breakdown(self.result)

    def error_lines(self) -> List[str]:
        if self.result is None or not self.result.errors:
            return []
        return list(self.result.errors)
