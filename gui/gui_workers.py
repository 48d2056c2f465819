"""
gui_workers.py - GUI Worker Threads

Runs scanning and renaming in the background to avoid blocking UI
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtCore import QThread, Signal, QObject

from core import (
    check_root, iter_targets, process_files,
    RenameOptions, RenameResult, StampitError
)


class ScanWorker(QThread):
    """File scanning worker thread"""

    # Signals
    progress = Signal(str)          # Progress message
    finished = Signal(list)         # Complete, returns path list
    error = Signal(str)             # Error message

    def __init__(
        self,
        root: Path,
        include_hidden: bool = False,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.root = root
        self.include_hidden = include_hidden
        self._cancelled = False

    def cancel(self):
        """Cancel scan"""
        self._cancelled = True

    def run(self):
        try:
            root = check_root(self.root)
            files: List[Path] = []
            for path in iter_targets(root, self.include_hidden):
                if self._cancelled:
                    self.finished.emit([])
                    return
                self.progress.emit(str(path))
                files.append(path)
            self.finished.emit(files)
        except StampitError as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Date resolution + rename worker thread (dry_run gives the preview)"""

    # Signals
    progress = Signal(int, str, str)    # index, status, message
    finished = Signal(object)           # RenameResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        files: List[Path],
        options: RenameOptions,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.files = files
        self.options = options
        self._cancelled = False

    def cancel(self):
        """Stop after the current file"""
        self._cancelled = True

    def run(self):
        result = RenameResult()

        def progress_callback(index: int, status: str, message: str):
            self.progress.emit(index, status, message)
            if self._cancelled:
                raise InterruptedError("Rename cancelled")

        try:
            process_files(self.files, self.options, progress_callback, result=result)
        except InterruptedError:
            pass
        except (OSError, StampitError) as e:
            self.error.emit(str(e))
            return

        # Partial results are still reported after a cancel
        self.finished.emit(result)
