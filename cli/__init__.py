"""
cli - Command Line Interface for stampit
"""

from .cli_entry import main

__all__ = ["main"]
