"""
core - stampit Core Module

Provides date resolution (EXIF / modification time), file scanning and
collision-safe date-based renaming.
"""

from .models_fs import (
    RenameOp,
    RenameOptions,
    DateSource,
    DEFAULT_DATE_FORMAT,
    DEFAULT_MAX_COUNTER,
)

from .errors import (
    StampitError,
    InvalidRootError,
    InvalidFormatError,
    NameExhaustedError,
)

from .exif_date import (
    read_capture_date,
    format_exif_date,
    parse_exif_date,
)

from .modified_date import (
    read_modified_date,
    format_modified_date,
)

from .date_policy import (
    resolve_date,
    resolve_date_with_source,
    resolvers_for,
    first_resolved,
)

from .scan_files import (
    check_root,
    collect_files,
    iter_targets,
    is_hidden,
)

from .plan_rename import (
    build_target_name,
    find_destination,
)

from .exec_rename import (
    commit_rename,
    process_files,
    save_result_log,
    RenameResult,
)

from .safety_checks import (
    check_date_format,
    is_valid_filename,
)

__all__ = [
    # Data models
    "RenameOp",
    "RenameOptions",
    "DateSource",
    "RenameResult",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_MAX_COUNTER",

    # Errors
    "StampitError",
    "InvalidRootError",
    "InvalidFormatError",
    "NameExhaustedError",

    # Date resolution
    "read_capture_date",
    "format_exif_date",
    "parse_exif_date",
    "read_modified_date",
    "format_modified_date",
    "resolve_date",
    "resolve_date_with_source",
    "resolvers_for",
    "first_resolved",

    # Scanning
    "check_root",
    "collect_files",
    "iter_targets",
    "is_hidden",

    # Naming and execution
    "build_target_name",
    "find_destination",
    "commit_rename",
    "process_files",
    "save_result_log",

    # Safety checks
    "check_date_format",
    "is_valid_filename",
]
