"""
models_fs.py - Core Data Structure Definitions

Contains:
- DateSource: Where the timestamp for a file comes from
- RenameOp: Single rename operation
- RenameOptions: Rename options configuration
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from enum import Enum


DEFAULT_DATE_FORMAT = "%Y-%m-%d_%H.%M.%S"
DEFAULT_MAX_COUNTER = 10000


class DateSource(Enum):
    """Date source enumeration"""
    AUTO = "auto"              # EXIF first, modification time as fallback
    EXIF_ONLY = "exif"         # EXIF DateTimeOriginal only
    MODIFIED_ONLY = "modified" # Filesystem modification time only


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    date: str = ""                  # Formatted date the name was built from
    source: str = ""                # Reader that produced the date ("exif" or "modified")
    note: str = ""                  # Note (e.g., conflict resolution explanation)

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src == self.dst


@dataclass
class RenameOptions:
    """Rename options configuration"""
    # Date resolution
    date_format: str = DEFAULT_DATE_FORMAT
    source: DateSource = DateSource.AUTO

    # Scanning
    include_hidden: bool = False    # Whether to include dotfiles

    # Conflict handling
    max_counter: int = DEFAULT_MAX_COUNTER

    # Execution options
    dry_run: bool = True            # Preview only, do not actually execute
    log_dir: Optional[Path] = None  # Where to save the JSON result log
