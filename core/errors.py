"""
errors.py - Error Types

Only real failures live here. A file without a usable date is not an error,
resolvers return None for it.
"""

from pathlib import Path


class StampitError(Exception):
    """Base class for all stampit errors"""


class InvalidRootError(StampitError):
    """The path given to a run does not exist or is not a file/directory"""

    def __init__(self, path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Path '{path}' {reason}.")


class InvalidFormatError(StampitError):
    """The date format template cannot produce a usable file name"""

    def __init__(self, date_format: str, reason: str):
        self.date_format = date_format
        self.reason = reason
        super().__init__(f"Invalid date format '{date_format}': {reason}")


class NameExhaustedError(StampitError):
    """Every counter value up to the limit is already taken in the directory"""

    def __init__(self, original: Path, formatted_date: str, limit: int):
        self.original = original
        self.formatted_date = formatted_date
        self.limit = limit
        super().__init__(
            f"Cannot find available name for {formatted_date} "
            f"(tried over {limit} times)"
        )
