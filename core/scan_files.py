"""
scan_files.py - File Scanning Module

Provides root validation and lazy recursive file listing
"""

from pathlib import Path
from typing import Iterator
import logging
import os

from .errors import InvalidRootError

logger = logging.getLogger(__name__)


def is_hidden(path: Path) -> bool:
    """Whether the file name starts with a dot (e.g. .DS_Store)"""
    return Path(path).name.startswith('.')


def check_root(path) -> Path:
    """
    Validate the path a run starts from

    Args:
        path: File or directory path

    Returns:
        The path as a Path object

    Raises:
        InvalidRootError: Path does not exist, or is neither file nor directory
    """
    root = Path(path)
    if not root.exists():
        raise InvalidRootError(path, "does not exist")
    if not root.is_file() and not root.is_dir():
        raise InvalidRootError(path, "is neither a file nor a directory")
    return root


def collect_files(root: Path) -> Iterator[Path]:
    """
    Recursively yield regular files under a directory

    Directories and file names are visited in sorted order. Nothing is
    filtered here.

    Args:
        root: Root directory

    Raises:
        InvalidRootError: The root directory itself cannot be listed
    """
    root = Path(root)

    def on_error(error: OSError):
        if error.filename is None or Path(error.filename) == root:
            raise InvalidRootError(root, f"cannot be listed: {error.strerror}")
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        current_dir = Path(dirpath)

        # Sorting in place also fixes the order os.walk descends in
        dirnames.sort()

        for filename in sorted(filenames):
            filepath = current_dir / filename
            if filepath.is_file():
                yield filepath


def iter_targets(root: Path, include_hidden: bool = False) -> Iterator[Path]:
    """
    Yield the files a run should process

    Args:
        root: Validated root (see check_root)
        include_hidden: Whether to include dotfiles

    Returns:
        The root itself if it is a file, otherwise the files under it
    """
    root = Path(root)
    files = [root] if root.is_file() else collect_files(root)

    for filepath in files:
        # Skip hidden files
        if not include_hidden and is_hidden(filepath):
            logger.debug("Skipping hidden file %s", filepath)
            continue
        yield filepath
