"""
gui_mainwindow.py - GUI Main Window

Single page: pick a file or folder, preview the date-based names, execute.
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from core import (
    RenameOptions, RenameResult, DateSource, StampitError,
    check_date_format, DEFAULT_DATE_FORMAT
)
from .gui_workers import ScanWorker, RenameWorker


SOURCE_CHOICES = [
    ("EXIF, then modified date", DateSource.AUTO),
    ("EXIF only", DateSource.EXIF_ONLY),
    ("Modified date only", DateSource.MODIFIED_ONLY),
]

COLOR_OK = QColor(0, 150, 0)
COLOR_CONFLICT = QColor(200, 150, 0)
COLOR_MUTED = QColor(150, 150, 150)
COLOR_ERROR = QColor(200, 0, 0)


class RenamePanel(QWidget):
    """Date rename panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.files: List[Path] = []
        self.previewed = False
        self.scan_worker: Optional[ScanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Source settings group
        source_group = QGroupBox("Files")
        source_layout = QGridLayout(source_group)

        source_layout.addWidget(QLabel("Path:"), 0, 0)
        self.path_edit = QLineEdit()
        self.path_edit.setPlaceholderText("Select a file or folder...")
        source_layout.addWidget(self.path_edit, 0, 1)
        self.browse_dir_btn = QPushButton("Folder...")
        self.browse_dir_btn.clicked.connect(self._browse_directory)
        source_layout.addWidget(self.browse_dir_btn, 0, 2)
        self.browse_file_btn = QPushButton("File...")
        self.browse_file_btn.clicked.connect(self._browse_file)
        source_layout.addWidget(self.browse_file_btn, 0, 3)

        self.hidden_check = QCheckBox("Include Hidden Files")
        source_layout.addWidget(self.hidden_check, 1, 0, 1, 2)

        self.scan_btn = QPushButton("Scan")
        self.scan_btn.clicked.connect(self._do_scan)
        source_layout.addWidget(self.scan_btn, 2, 0, 1, 4)

        layout.addWidget(source_group)

        # Naming settings group
        name_group = QGroupBox("Naming Settings")
        name_layout = QGridLayout(name_group)

        name_layout.addWidget(QLabel("Date Source:"), 0, 0)
        self.source_combo = QComboBox()
        self.source_combo.addItems([label for label, _ in SOURCE_CHOICES])
        name_layout.addWidget(self.source_combo, 0, 1)

        name_layout.addWidget(QLabel("Date Format:"), 1, 0)
        self.format_edit = QLineEdit(DEFAULT_DATE_FORMAT)
        self.format_edit.textChanged.connect(self._on_settings_changed)
        name_layout.addWidget(self.format_edit, 1, 1)
        self.sample_label = QLabel("")
        name_layout.addWidget(self.sample_label, 1, 2)
        self.source_combo.currentIndexChanged.connect(self._on_settings_changed)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        self.preview_btn.setEnabled(False)
        name_layout.addWidget(self.preview_btn, 2, 0, 1, 3)

        layout.addWidget(name_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Date Source", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self._do_cancel)
        self.cancel_btn.setVisible(False)
        bottom_layout.addWidget(self.cancel_btn)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        self._on_settings_changed()

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.path_edit.setText(directory)

    def _browse_file(self):
        """Browse and select a single file"""
        file_path, _ = QFileDialog.getOpenFileName(self, "Select File")
        if file_path:
            self.path_edit.setText(file_path)

    def _current_options(self, dry_run: bool) -> RenameOptions:
        """Build rename options from the widgets"""
        return RenameOptions(
            date_format=self.format_edit.text(),
            source=SOURCE_CHOICES[self.source_combo.currentIndex()][1],
            include_hidden=self.hidden_check.isChecked(),
            dry_run=dry_run,
        )

    def _on_settings_changed(self, *args):
        """Format or source changed, the old preview no longer applies"""
        try:
            sample = check_date_format(self.format_edit.text())
            self.sample_label.setText(f"e.g. {sample}")
            self.sample_label.setStyleSheet("")
        except StampitError as e:
            self.sample_label.setText(e.reason)
            self.sample_label.setStyleSheet("color: #c00000;")
        self.previewed = False
        self.execute_btn.setEnabled(False)

    def _set_busy(self, busy: bool):
        self.scan_btn.setEnabled(not busy)
        self.preview_btn.setEnabled(not busy and bool(self.files))
        self.execute_btn.setEnabled(not busy and self.previewed)
        self.cancel_btn.setVisible(busy)
        self.progress_bar.setVisible(busy)

    def _do_scan(self):
        """Execute scan"""
        path_text = self.path_edit.text().strip()
        if not path_text:
            QMessageBox.warning(self, "Warning", "Please select a file or folder first")
            return

        self.previewed = False
        self._set_busy(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        # Start scan thread
        self.scan_worker = ScanWorker(Path(path_text), include_hidden=self.hidden_check.isChecked())
        self.scan_worker.progress.connect(self._on_scan_progress)
        self.scan_worker.finished.connect(self._on_scan_finished)
        self.scan_worker.error.connect(self._on_scan_error)
        self.scan_worker.start()

    @Slot(str)
    def _on_scan_progress(self, msg: str):
        """Scan progress update"""
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(list)
    def _on_scan_finished(self, files: List[Path]):
        """Scan complete"""
        self.files = files
        self._set_busy(False)

        self.table.setRowCount(len(files))
        for i, path in enumerate(files):
            self._set_row(i, path.name, "", "", "")

        if files:
            self.status_label.setText(f"Found {len(files)} files")
        else:
            self.status_label.setText("No files found")

    @Slot(str)
    def _on_scan_error(self, error: str):
        """Scan error"""
        self._set_busy(False)
        QMessageBox.critical(self, "Error", f"Scan failed: {error}")

    def _set_row(self, row: int, name: str, new_name: str, source: str, status: str,
                 color: Optional[QColor] = None):
        self.table.setItem(row, 0, QTableWidgetItem(name))
        self.table.setItem(row, 1, QTableWidgetItem(new_name))
        self.table.setItem(row, 2, QTableWidgetItem(source))
        status_item = QTableWidgetItem(status)
        if color is not None:
            status_item.setForeground(color)
        self.table.setItem(row, 3, status_item)

    def _start_rename(self, dry_run: bool):
        try:
            check_date_format(self.format_edit.text())
        except StampitError as e:
            QMessageBox.warning(self, "Warning", str(e))
            return

        self._set_busy(True)
        self.progress_bar.setRange(0, len(self.files))

        self.rename_worker = RenameWorker(list(self.files), self._current_options(dry_run))
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    def _do_preview(self):
        """Generate preview"""
        if self.files:
            self._start_rename(dry_run=True)

    def _do_execute(self):
        """Execute rename"""
        if not self.files or not self.previewed:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to rename up to {len(self.files)} files?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self._start_rename(dry_run=False)

    def _do_cancel(self):
        for worker in (self.scan_worker, self.rename_worker):
            if worker is not None and worker.isRunning():
                worker.cancel()

    @Slot(int, str, str)
    def _on_rename_progress(self, index: int, status: str, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(index)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Preview or execution complete"""
        self._fill_table(result)

        if result.dry_run:
            self.previewed = result.success_count > 0
            self._set_busy(False)
            self.status_label.setText(
                f"Will rename {result.success_count} files "
                f"(already named: {result.unchanged_count}, no date: {result.skipped_count})"
            )
            return

        self.previewed = False
        self._set_busy(False)
        QMessageBox.information(self, "Complete", result.summary())

        # Renamed paths are stale, a new scan is needed
        self.files = []
        self.preview_btn.setEnabled(False)
        self.status_label.setText("Complete")

    def _fill_table(self, result: RenameResult):
        rows = {str(path): i for i, path in enumerate(self.files)}

        for op in result.success:
            row = rows.get(str(op.src))
            if row is None:
                continue
            if result.dry_run:
                status = "Conflict Resolved" if op.note else "Will Rename"
            else:
                status = "Renamed"
            self._set_row(row, op.src.name, op.dst.name, op.source, status,
                          COLOR_CONFLICT if op.note else COLOR_OK)

        for op in result.unchanged:
            row = rows.get(str(op.src))
            if row is not None:
                self._set_row(row, op.src.name, op.dst.name, op.source, "No Change", COLOR_MUTED)

        for path in result.skipped:
            row = rows.get(str(path))
            if row is not None:
                self._set_row(row, path.name, "", "", "No Date", COLOR_MUTED)

        for path, error in result.failed:
            row = rows.get(str(path))
            if row is not None:
                self._set_row(row, path.name, "", "", f"Failed: {error}", COLOR_ERROR)

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self._set_busy(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("stampit - Rename by Date")
        self.setMinimumSize(800, 600)

        self.panel = RenamePanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
