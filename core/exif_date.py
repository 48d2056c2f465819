"""
exif_date.py - EXIF Capture Date Reader

Reads the original capture date (EXIF DateTimeOriginal) of a file.
Every kind of failure yields None: most files handed to the tool are not
images, so a missing or broken EXIF block is the normal case.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union
import logging

import exifread

logger = logging.getLogger(__name__)

EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"
CAPTURE_DATE_TAG = "EXIF DateTimeOriginal"

# TIFF field type for 7-bit ASCII text
ASCII_FIELD_TYPE = 2


def _decode_text(value: Union[str, bytes, list, tuple]) -> Optional[str]:
    """Turn an exifread ASCII value into text, first entry if there are several"""
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    return None


def parse_exif_date(text: str) -> Optional[datetime]:
    """
    Parse EXIF date text (YYYY:MM:DD HH:MM:SS)

    Args:
        text: Date text as stored in the tag

    Returns:
        Naive datetime, or None if the text does not match exactly
    """
    try:
        return datetime.strptime(text, EXIF_DATE_FORMAT)
    except ValueError:
        return None


def read_capture_date(file_path: Path) -> Optional[datetime]:
    """
    Read DateTimeOriginal from the primary image's EXIF block

    Args:
        file_path: File to inspect

    Returns:
        Naive capture datetime, or None if unavailable
    """
    try:
        with open(file_path, "rb") as f:
            try:
                tags = exifread.process_file(f, details=False)
            except Exception as e:
                logger.debug("Cannot decode EXIF in %s: %s", file_path, e)
                return None
    except OSError as e:
        logger.debug("Cannot open %s: %s", file_path, e)
        return None

    tag = tags.get(CAPTURE_DATE_TAG)
    if tag is None:
        return None

    if getattr(tag, "field_type", None) != ASCII_FIELD_TYPE:
        logger.debug("%s in %s is not text", CAPTURE_DATE_TAG, file_path)
        return None

    text = _decode_text(tag.values)
    if text is None:
        return None

    parsed = parse_exif_date(text)
    if parsed is None:
        logger.debug("Unparseable capture date %r in %s", text, file_path)
    return parsed


def format_exif_date(file_path: Path, date_format: str) -> Optional[str]:
    """
    Format the EXIF capture date of a file

    Args:
        file_path: File to inspect
        date_format: strftime template

    Returns:
        Formatted date, or None if the file has no usable capture date
    """
    capture_date = read_capture_date(file_path)
    if capture_date is None:
        return None
    return capture_date.strftime(date_format)
