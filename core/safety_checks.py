"""
safety_checks.py - Safety Check Module

Checks the date format template before any file is touched
"""

from datetime import datetime
from typing import Tuple, Optional
import os

from .errors import InvalidFormatError

# Sample date with every field distinct, used to render the template once
SAMPLE_DATE = datetime(2001, 2, 3, 4, 5, 6)

# Characters no file name may contain
SEPARATOR_CHARS = "/\0"

# Characters Windows additionally forbids
WINDOWS_INVALID_CHARS = '<>:"\\|?*'

# Windows reserved device names
RESERVED_NAMES = {
    'CON', 'PRN', 'AUX', 'NUL',
    'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
    'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
}


def is_valid_filename(name: str, portable: Optional[bool] = None) -> Tuple[bool, Optional[str]]:
    """
    Check if a file stem is valid

    Args:
        name: File name without extension
        portable: Also apply the Windows rules (invalid characters and
            reserved device names). Defaults to True only on Windows.

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if portable is None:
        portable = os.name == "nt"

    invalid_chars = SEPARATOR_CHARS + WINDOWS_INVALID_CHARS if portable else SEPARATOR_CHARS
    for char in invalid_chars:
        if char in name:
            return False, f"Filename contains invalid character: {char!r}"

    # Trailing space or dot
    if name.endswith(' ') or name.endswith('.'):
        return False, "Filename cannot end with space or dot"

    name_upper = name.upper().split('.')[0]
    if portable and name_upper in RESERVED_NAMES:
        return False, f"Filename is a Windows reserved name: {name_upper}"

    # Leave room for a counter and an extension
    if len(name) > 200:
        return False, "Filename exceeds 200 characters"

    return True, None


def check_date_format(date_format: str, portable: Optional[bool] = None) -> str:
    """
    Check that a date format renders to a usable file name

    Args:
        date_format: strftime template
        portable: See is_valid_filename

    Returns:
        The sample rendering

    Raises:
        InvalidFormatError: Empty template, rendering error, or invalid name
    """
    if not date_format:
        raise InvalidFormatError(date_format, "format cannot be empty")

    try:
        sample = SAMPLE_DATE.strftime(date_format)
    except ValueError as e:
        raise InvalidFormatError(date_format, str(e)) from e

    valid, error = is_valid_filename(sample, portable)
    if not valid:
        raise InvalidFormatError(date_format, f"renders to '{sample}': {error}")

    return sample
