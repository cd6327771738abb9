"""
gui_mainwindow.py - GUI Main Window

Single panel:
1. Folder selection, exclusions and Move/Copy toggle
2. Contents of the selected folder
3. Progress and results of the last run
"""

from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QRadioButton, QButtonGroup,
    QTableWidget, QTableWidgetItem, QTextEdit, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox, QSplitter,
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QColor

from organizer_core import OperationMode, OrganizerResult, PathEntry
from .gui_workers import ListWorker, OrganizeWorker
from .view_model import OrganizerViewModel


class OrganizerPanel(QWidget):
    """Organize by extension panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.model = OrganizerViewModel()
        self.list_worker: Optional[ListWorker] = None
        self.organize_worker: Optional[OrganizeWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Settings group
        settings_group = QGroupBox("Settings")
        settings_layout = QGridLayout(settings_group)

        settings_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select the folder to organize...")
        self.dir_edit.editingFinished.connect(self._refresh_listing)
        settings_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        settings_layout.addWidget(QLabel("Exclude:"), 1, 0)
        self.exclude_edit = QLineEdit()
        self.exclude_edit.setPlaceholderText("Comma-separated folder or file names, e.g. node_modules, .git")
        settings_layout.addWidget(self.exclude_edit, 1, 1, 1, 2)

        mode_layout = QHBoxLayout()
        self.move_radio = QRadioButton("Move")
        self.copy_radio = QRadioButton("Copy")
        self.move_radio.setChecked(True)
        self.mode_group = QButtonGroup(self)
        self.mode_group.addButton(self.move_radio)
        self.mode_group.addButton(self.copy_radio)
        mode_layout.addWidget(QLabel("Mode:"))
        mode_layout.addWidget(self.move_radio)
        mode_layout.addWidget(self.copy_radio)
        mode_layout.addStretch()
        settings_layout.addLayout(mode_layout, 2, 0, 1, 3)

        layout.addWidget(settings_group)

        splitter = QSplitter(Qt.Orientation.Vertical)

        # Folder contents
        self.listing_table = QTableWidget()
        self.listing_table.setColumnCount(3)
        self.listing_table.setHorizontalHeaderLabels(["Name", "Type", "Size"])
        self.listing_table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.listing_table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        self.listing_table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.listing_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        splitter.addWidget(self.listing_table)

        # Results
        results_group = QGroupBox("Results")
        results_layout = QVBoxLayout(results_group)

        self.totals_label = QLabel("")
        results_layout.addWidget(self.totals_label)

        results_row = QHBoxLayout()
        self.bucket_table = QTableWidget()
        self.bucket_table.setColumnCount(2)
        self.bucket_table.setHorizontalHeaderLabels(["Folder", "Files"])
        self.bucket_table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.bucket_table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        results_row.addWidget(self.bucket_table, 1)

        self.summary_text = QTextEdit()
        self.summary_text.setReadOnly(True)
        results_row.addWidget(self.summary_text, 2)
        results_layout.addLayout(results_row)

        self.errors_text = QTextEdit()
        self.errors_text.setReadOnly(True)
        self.errors_text.setVisible(False)
        results_layout.addWidget(self.errors_text)

        splitter.addWidget(results_group)
        layout.addWidget(splitter, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.organize_btn = QPushButton("Organize")
        self.organize_btn.clicked.connect(self._do_organize)
        self.organize_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.organize_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)
            self._refresh_listing()

    def _sync_model(self):
        """Copy widget values into the view-model"""
        self.model.directory = self.dir_edit.text()
        self.model.exclusions_text = self.exclude_edit.text()
        self.model.set_copy_mode(self.copy_radio.isChecked())

    def _refresh_listing(self):
        """List the selected folder in the background"""
        self._sync_model()
        root = self.model.root_path
        if root is None or not root.exists():
            self.listing_table.setRowCount(0)
            return

        self.list_worker = ListWorker(root)
        self.list_worker.finished.connect(self._on_list_finished)
        self.list_worker.error.connect(self._on_list_error)
        self.list_worker.start()

    @Slot(list)
    def _on_list_finished(self, entries: List[PathEntry]):
        """Listing complete"""
        self.model.listing = entries
        self.listing_table.setRowCount(len(entries))
        for i, entry in enumerate(entries):
            self.listing_table.setItem(i, 0, QTableWidgetItem(entry.name))
            self.listing_table.setItem(i, 1, QTableWidgetItem(entry.kind))
            if entry.error:
                size_item = QTableWidgetItem(entry.error)
                size_item.setForeground(QColor(200, 0, 0))
            elif entry.size is None:
                size_item = QTableWidgetItem("")
            else:
                size_item = QTableWidgetItem(f"{entry.size} bytes")
            self.listing_table.setItem(i, 2, size_item)
        self.status_label.setText(f"{len(entries)} entries")

    @Slot(str)
    def _on_list_error(self, error: str):
        """Listing error"""
        self.listing_table.setRowCount(0)
        self.status_label.setText(f"Cannot list folder: {error}")

    def _do_organize(self):
        """Start an organize run"""
        self._sync_model()
        problem = self.model.input_problem()
        if problem:
            QMessageBox.warning(self, "Warning", problem)
            return

        if self.model.mode is OperationMode.MOVE:
            reply = QMessageBox.question(
                self, "Confirm",
                self.model.confirmation_message(),
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
            )
            if reply != QMessageBox.StandardButton.Yes:
                return

        self.model.begin_run()
        self._set_inputs_enabled(False)
        self.organize_btn.setText("Organizing...")
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate until the first file
        self.status_label.setText("Collecting files...")

        self.organize_worker = OrganizeWorker(self.model.root_path, self.model.build_options())
        self.organize_worker.progress.connect(self._on_organize_progress)
        self.organize_worker.finished.connect(self._on_organize_finished)
        self.organize_worker.error.connect(self._on_organize_error)
        self.organize_worker.start()

    def _set_inputs_enabled(self, enabled: bool):
        for widget in (self.organize_btn, self.browse_btn, self.dir_edit,
                       self.exclude_edit, self.move_radio, self.copy_radio):
            widget.setEnabled(enabled)

    @Slot(int, int)
    def _on_organize_progress(self, current: int, total: int):
        """Execution progress update"""
        self.model.on_progress(current, total)
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(current)
        self.status_label.setText(self.model.progress_text)

    @Slot(object)
    def _on_organize_finished(self, result: OrganizerResult):
        """Execution complete"""
        self.model.finish(result)
        self._set_inputs_enabled(True)
        self.organize_btn.setText("Organize")
        self.progress_bar.setVisible(False)

        self.totals_label.setText(self.model.totals_text())
        rows = self.model.bucket_rows()
        self.bucket_table.setRowCount(len(rows))
        for i, (bucket, count) in enumerate(rows):
            self.bucket_table.setItem(i, 0, QTableWidgetItem(bucket))
            self.bucket_table.setItem(i, 1, QTableWidgetItem(str(count)))
        self.summary_text.setPlainText(result.summary)

        errors = self.model.error_lines()
        self.errors_text.setVisible(bool(errors))
        self.errors_text.setPlainText("\n".join(errors))

        self.status_label.setText("Complete" if not errors else f"Complete with {len(errors)} errors")
        self._refresh_listing()

    @Slot(str)
    def _on_organize_error(self, error: str):
        """Execution error"""
        self.model.fail(error)
        self._set_inputs_enabled(True)
        self.organize_btn.setText("Organize")
        self.progress_bar.setVisible(False)
        self.status_label.setText("Failed")
        QMessageBox.critical(self, "Error", f"Organize failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Extension Organizer")
        self.setMinimumSize(800, 600)

        self.panel = OrganizerPanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
