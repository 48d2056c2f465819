"""
gui_entry.py - GUI Entry

Launch the stampit window
"""

import sys

from PySide6.QtWidgets import QApplication

from .gui_mainwindow import MainWindow


def main():
    """GUI main entry"""
    app = QApplication(sys.argv)
    app.setApplicationName("stampit")
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()

    return app.exec()
