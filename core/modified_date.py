"""
modified_date.py - Filesystem Modification Date Reader
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)


def read_modified_date(file_path: Path) -> Optional[datetime]:
    """
    Read the last modification time of a file as local time

    Args:
        file_path: File to inspect

    Returns:
        Timezone-aware local datetime (whole seconds), or None if unavailable
    """
    try:
        mtime = os.stat(file_path).st_mtime
    except OSError as e:
        logger.debug("Cannot stat %s: %s", file_path, e)
        return None

    # Instants before the epoch are treated as unavailable
    if mtime < 0:
        return None

    try:
        utc_time = datetime.fromtimestamp(int(mtime), tz=timezone.utc)
        return utc_time.astimezone()
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("Modification time of %s out of range: %s", file_path, e)
        return None


def format_modified_date(file_path: Path, date_format: str) -> Optional[str]:
    """
    Format the modification date of a file

    Args:
        file_path: File to inspect
        date_format: strftime template

    Returns:
        Formatted date, or None if the modification time cannot be read
    """
    modified = read_modified_date(file_path)
    if modified is None:
        return None
    return modified.strftime(date_format)
