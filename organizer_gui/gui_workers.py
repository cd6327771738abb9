"""
gui_workers.py - GUI Worker Threads

Runs listing and organizing in the background to avoid blocking the UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from organizer_core import (
    OrganizeOptions,
    ProgressSink,
    list_path,
    organize_with_options,
)


class SignalProgressSink(ProgressSink):
    """Forwards engine progress to a Qt signal"""

    def __init__(self, signal):
        self._signal = signal

    def report(self, current: int, total: int) -> None:
        self._signal.emit(current, total)


class ListWorker(QThread):
    """Directory listing worker thread"""

    # Signals
    finished = Signal(list)         # Complete, returns PathEntry list
    error = Signal(str)             # Error message

    def __init__(self, path: Path, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.path = path

    def run(self):
        try:
            self.finished.emit(list_path(self.path))
        except Exception as e:
            self.error.emit(str(e))


class OrganizeWorker(QThread):
    """Organize execution worker thread"""

    # Signals
    progress = Signal(int, int)     # current, total
    finished = Signal(object)       # OrganizerResult
    error = Signal(str)             # Error message

    def __init__(
        self,
        root: Path,
        options: OrganizeOptions,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.root = root
        self.options = options

    def run(self):
        try:
            result = organize_with_options(
                self.root,
                self.options,
                progress_sink=SignalProgressSink(self.progress),
            )
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))
