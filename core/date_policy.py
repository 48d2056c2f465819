"""
date_policy.py - Date Resolution Policy

Chooses which readers are tried for a file and in what order.
"""

from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .models_fs import DateSource
from .exif_date import format_exif_date
from .modified_date import format_modified_date


# (name, formatter) pairs; formatter(path, date_format) -> Optional[str]
Resolver = Tuple[str, Callable[[Path, str], Optional[str]]]

EXIF_RESOLVER: Resolver = ("exif", format_exif_date)
MODIFIED_RESOLVER: Resolver = ("modified", format_modified_date)


def resolvers_for(source: DateSource) -> List[Resolver]:
    """
    Get the ordered resolver list for a date source

    Args:
        source: Date source

    Returns:
        Resolvers to try, first match wins
    """
    if source == DateSource.EXIF_ONLY:
        return [EXIF_RESOLVER]
    elif source == DateSource.MODIFIED_ONLY:
        return [MODIFIED_RESOLVER]
    # Capture time is more faithful than a write time touched by copies
    return [EXIF_RESOLVER, MODIFIED_RESOLVER]


def first_resolved(
    resolvers: List[Resolver],
    file_path: Path,
    date_format: str
) -> Tuple[Optional[str], Optional[str]]:
    """
    Try resolvers in order and stop at the first that yields a date

    Returns:
        (formatted date, resolver name), or (None, None)
    """
    for name, resolve in resolvers:
        formatted = resolve(file_path, date_format)
        if formatted is not None:
            return formatted, name
    return None, None


def resolve_date_with_source(
    file_path: Path,
    source: DateSource,
    date_format: str
) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a date and report which reader produced it"""
    return first_resolved(resolvers_for(source), Path(file_path), date_format)


def resolve_date(file_path: Path, source: DateSource, date_format: str) -> Optional[str]:
    """
    Resolve the formatted date of a file

    Args:
        file_path: File to inspect
        source: Date source
        date_format: strftime template

    Returns:
        Formatted date, or None if no selected reader has one
    """
    formatted, _ = resolve_date_with_source(file_path, source, date_format)
    return formatted
