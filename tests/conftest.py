"""
Shared fixtures: minimal JPEG files carrying an EXIF DateTimeOriginal tag.
"""

import os
import struct
from datetime import datetime
from pathlib import Path

import pytest


TAG_EXIF_OFFSET = 0x8769
TAG_DATETIME_ORIGINAL = 0x9003
TYPE_ASCII = 2
TYPE_LONG = 4


def build_tiff(date_value=b"2021:05:03 14:22:10", field_type=TYPE_ASCII) -> bytes:
    """Little-endian TIFF block: IFD0 -> EXIF sub-IFD -> DateTimeOriginal"""
    header = b"II*\x00" + struct.pack("<I", 8)

    # IFD0 at 8: one entry pointing at the sub-IFD (2 + 12 + 4 = 18 bytes)
    sub_ifd_offset = 8 + 18
    ifd0 = (
        struct.pack("<H", 1)
        + struct.pack("<HHII", TAG_EXIF_OFFSET, TYPE_LONG, 1, sub_ifd_offset)
        + struct.pack("<I", 0)
    )

    data_offset = sub_ifd_offset + 18
    if field_type == TYPE_ASCII:
        data = date_value + b"\x00"
        entry = struct.pack("<HHII", TAG_DATETIME_ORIGINAL, TYPE_ASCII, len(data), data_offset)
    else:
        data = b""
        entry = struct.pack("<HHII", TAG_DATETIME_ORIGINAL, TYPE_LONG, 1, 1620051730)

    sub_ifd = struct.pack("<H", 1) + entry + struct.pack("<I", 0)
    return header + ifd0 + sub_ifd + data


def build_jpeg(tiff: bytes) -> bytes:
    """Wrap a TIFF block in a JPEG APP1 segment"""
    payload = b"Exif\x00\x00" + tiff
    app1 = b"\xff\xe1" + struct.pack(">H", len(payload) + 2) + payload
    return b"\xff\xd8" + app1 + b"\xff\xd9"


@pytest.fixture
def make_jpeg():
    """Factory writing an EXIF JPEG to disk"""
    def _make(path: Path, date_value=b"2021:05:03 14:22:10", field_type=TYPE_ASCII) -> Path:
        path.write_bytes(build_jpeg(build_tiff(date_value, field_type)))
        return path
    return _make


@pytest.fixture
def make_file():
    """Factory writing a plain file with a given local modification time"""
    def _make(path: Path, modified: datetime = datetime(2022, 1, 1, 0, 0, 0), content=b"notes") -> Path:
        path.write_bytes(content)
        ts = modified.timestamp()
        os.utime(path, (ts, ts))
        return path
    return _make
