"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Commit a single date-based rename (or preview it in dry_run)
- Run the resolve + rename pipeline over a sequence of files
- Exception handling and result logging
"""

from pathlib import Path
from typing import Iterable, List, Tuple, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime
import json
import logging
import os

from .models_fs import RenameOp, RenameOptions, DEFAULT_MAX_COUNTER
from .errors import NameExhaustedError
from .date_policy import resolve_date_with_source
from .plan_rename import build_target_name, find_destination

logger = logging.getLogger(__name__)

# Statuses passed to progress callbacks
STATUS_RENAMED = "renamed"
STATUS_PREVIEW = "preview"
STATUS_UNCHANGED = "unchanged"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"


@dataclass
class RenameResult:
    """Rename execution result"""
    dry_run: bool = False
    success: List[RenameOp] = field(default_factory=list)
    unchanged: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)  # (path, error_msg)
    skipped: List[Path] = field(default_factory=list)             # No date available

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def unchanged_count(self) -> int:
        return len(self.unchanged)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Preview Result:" if self.dry_run else "Execution Result:",
            f"  - {'Would rename' if self.dry_run else 'Renamed'}: {self.success_count}",
            f"  - Already named: {self.unchanged_count}",
            f"  - No date: {self.skipped_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for path, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {path.name}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def commit_rename(
    original_path: Path,
    formatted_date: str,
    dry_run: bool = False,
    max_counter: int = DEFAULT_MAX_COUNTER
) -> Optional[RenameOp]:
    """
    Rename a file to its date-based name in the same directory

    Args:
        original_path: File to rename
        formatted_date: Formatted date used as the new stem
        dry_run: Only compute the destination, do not touch the filesystem
        max_counter: Highest conflict counter tried

    Returns:
        The operation (performed, or planned in dry_run), or None if the
        path has no parent directory

    Raises:
        OSError: The rename itself failed
        NameExhaustedError: No free name was found
    """
    original_path = Path(original_path)
    dst = find_destination(original_path, formatted_date, max_counter)
    if dst is None:
        return None

    op = RenameOp(src=original_path, dst=dst, date=formatted_date)
    if op.dst.name != build_target_name(formatted_date, original_path) and not op.is_same:
        op.note = f"conflict resolved: {dst.name}"

    if dry_run:
        return op

    # Also runs when dst == original_path, a self-rename leaves the file in place
    os.rename(original_path, dst)
    return op


def process_files(
    paths: Iterable[Path],
    options: Optional[RenameOptions] = None,
    progress_callback: Optional[Callable[[int, str, str], None]] = None,
    result: Optional[RenameResult] = None
) -> RenameResult:
    """
    Resolve dates and rename files one by one

    A failure for one file is recorded and the run continues.

    Args:
        paths: Files to process
        options: Rename options
        progress_callback: Progress callback (index, status, message)
        result: Result object to fill (lets callers keep partial results)

    Returns:
        Execution result
    """
    if options is None:
        options = RenameOptions()
    if result is None:
        result = RenameResult()
    result.dry_run = options.dry_run

    def report(index: int, status: str, message: str):
        if progress_callback:
            progress_callback(index, status, message)

    for index, file_path in enumerate(paths, start=1):
        file_path = Path(file_path)
        formatted, source = resolve_date_with_source(file_path, options.source, options.date_format)

        if formatted is None:
            result.skipped.append(file_path)
            report(index, STATUS_SKIPPED, f"No date information available for '{file_path}'.")
            continue

        try:
            op = commit_rename(file_path, formatted, options.dry_run, options.max_counter)
        except (OSError, NameExhaustedError) as e:
            logger.debug("Rename of %s failed", file_path, exc_info=True)
            result.failed.append((file_path, str(e)))
            report(index, STATUS_FAILED, f"Error renaming file '{file_path}': {e}")
            continue

        if op is None:
            continue
        op.source = source

        if op.is_same:
            result.unchanged.append(op)
            report(index, STATUS_UNCHANGED, f"'{file_path}' already has its date name ({formatted}).")
        elif options.dry_run:
            result.success.append(op)
            report(index, STATUS_PREVIEW, f"[Preview] '{op.src}' -> '{op.dst}' ({source} date {formatted})")
        else:
            result.success.append(op)
            report(index, STATUS_RENAMED, f"Renamed '{op.src}' to '{op.dst}'")

    if options.log_dir and not options.dry_run:
        log_file = save_result_log(result, options.log_dir)
        logger.info("Result log saved to %s", log_file)

    return result


def save_result_log(result: RenameResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    log_file = log_dir / f"rename_result_{timestamp}.json"
    counter = 1
    while log_file.exists():
        log_file = log_dir / f"rename_result_{timestamp}-{counter}.json"
        counter += 1

    data = {
        "timestamp": timestamp,
        "dry_run": result.dry_run,
        "success_count": result.success_count,
        "unchanged_count": result.unchanged_count,
        "failed_count": result.failed_count,
        "skipped_count": result.skipped_count,
        "success": [
            {"src": str(op.src), "dst": str(op.dst), "date": op.date, "source": op.source}
            for op in result.success
        ],
        "failed": [
            {"src": str(path), "error": error}
            for path, error in result.failed
        ],
        "skipped": [str(path) for path in result.skipped],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file
