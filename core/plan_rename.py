"""
plan_rename.py - Destination Name Module

Responsibilities:
- Build date-based target names ({date}.{ext}, {date}-{n}.{ext})
- Conflict detection against the live filesystem (adds -1, -2...)
"""

from pathlib import Path
from typing import Optional
import os

from .errors import NameExhaustedError
from .models_fs import DEFAULT_MAX_COUNTER


def normalized_extension(original: Path) -> str:
    """Lower-cased suffix without the dot, empty string if there is none"""
    return Path(original).suffix[1:].lower()


def build_target_name(formatted_date: str, original: Path, counter: int = 0) -> str:
    """
    Build a target file name

    Args:
        formatted_date: Formatted date used as the stem
        original: Original path (only its extension is used)
        counter: Conflict counter, 0 for none

    Returns:
        File name such as "2021-05-03_14.22.10.jpg" or "2021-05-03_14.22.10-1.jpg"
    """
    ext = normalized_extension(original)
    if counter:
        return f"{formatted_date}-{counter}.{ext}"
    return f"{formatted_date}.{ext}"


def is_own_slot(candidate: Path, original: Path) -> bool:
    """
    Whether the candidate path is where the original file already lives

    On case-insensitive filesystems "a.JPG" and "a.jpg" name the same file,
    which is only trusted when samefile confirms it.
    """
    if candidate == original:
        return True
    if candidate.parent != original.parent or candidate.name.lower() != original.name.lower():
        return False
    try:
        return os.path.samefile(candidate, original)
    except OSError:
        return False


def find_destination(
    original: Path,
    formatted_date: str,
    max_counter: int = DEFAULT_MAX_COUNTER
) -> Optional[Path]:
    """
    Find a free destination for a file in its own directory

    Args:
        original: File to rename
        formatted_date: Formatted date used as the stem
        max_counter: Highest counter tried before giving up

    Returns:
        Destination path, or None if the original has no parent directory

    Raises:
        NameExhaustedError: All counters up to max_counter are taken
    """
    original = Path(original)
    parent = original.parent
    if original == parent:
        return None

    candidate = parent / build_target_name(formatted_date, original)

    counter = 1
    while candidate.exists() and not is_own_slot(candidate, original):
        if counter > max_counter:
            raise NameExhaustedError(original, formatted_date, max_counter)
        candidate = parent / build_target_name(formatted_date, original, counter)
        counter += 1

    return candidate
