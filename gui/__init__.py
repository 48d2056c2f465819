"""
gui - PySide6 front end for stampit
"""

from .gui_entry import main

__all__ = ["main"]
