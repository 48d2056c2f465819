"""
cli_entry.py - CLI Entry Point

Rename files using the EXIF capture date or the last modified date.
"""

import argparse
import sys
from pathlib import Path

from core import (
    check_root, check_date_format, iter_targets, process_files,
    RenameOptions, DateSource, StampitError, DEFAULT_DATE_FORMAT, DEFAULT_MAX_COUNTER
)
from core.exec_rename import STATUS_FAILED, STATUS_PREVIEW

from .log_setup import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="stampit",
        description="Rename files using EXIF or last modified date.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show what would be renamed
  stampit ./photos

  # Rename, EXIF dates only
  stampit ./photos --exif --write

  # Custom format from the modification time
  stampit notes.txt --modified --format "%Y%m%d-%H%M%S" --write
"""
    )

    parser.add_argument("path", type=str, help="Path to a file or directory.")

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--exif", "-e", dest="exif_only", action="store_true",
                              help="Only use EXIF date for renaming (cannot be used with --modified)")
    source_group.add_argument("--modified", "-m", dest="modified_only", action="store_true",
                              help="Only use modified date for renaming (cannot be used with --exif)")

    parser.add_argument("--format", "-f", dest="date_format", type=str, default=DEFAULT_DATE_FORMAT,
                        help="Specify a custom date format (default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--write", "-w", action="store_true", help="Rename files to the parsed date")
    parser.add_argument("--include-hidden", action="store_true", help="Include dotfiles")
    parser.add_argument("--portable", action="store_true",
                        help="Reject formats that are not valid file names on Windows")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Save a JSON result log of written renames in this directory")
    parser.add_argument("--max-counter", type=int, default=DEFAULT_MAX_COUNTER,
                        help="Give up on a file after this many name conflicts (default: %(default)s)")

    return parser


def options_from_args(args) -> RenameOptions:
    """Build rename options from parsed arguments"""
    if args.exif_only:
        source = DateSource.EXIF_ONLY
    elif args.modified_only:
        source = DateSource.MODIFIED_ONLY
    else:
        source = DateSource.AUTO

    return RenameOptions(
        date_format=args.date_format,
        source=source,
        include_hidden=args.include_hidden,
        max_counter=args.max_counter,
        dry_run=not args.write,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )


def print_settings(args, options: RenameOptions):
    """Echo the run settings"""
    print(f"Path: {args.path}")
    print(f"Date Source: {options.source.value}")
    print(f"Date Format: {options.date_format}")
    print(f"Include Hidden: {options.include_hidden}")
    print(f"Write: {not options.dry_run}")
    print()


def run(args) -> int:
    """Run a rename pass, return the exit status"""
    options = options_from_args(args)

    if args.verbose:
        print_settings(args, options)

    try:
        check_date_format(options.date_format, args.portable or None)
        root = check_root(args.path)
    except StampitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    def progress_callback(index: int, status: str, message: str):
        if status == STATUS_FAILED:
            print(message, file=sys.stderr)
        elif args.verbose or status == STATUS_PREVIEW:
            print(message)

    try:
        result = process_files(iter_targets(root, options.include_hidden), options, progress_callback)
    except StampitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose or options.dry_run:
        print()
        print(result.summary())
        if options.dry_run:
            print("\n[Preview mode] Use --write to rename")

    return 0 if result.failed_count == 0 else 1


def main(argv=None):
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.max_counter < 1:
        parser.error("--max-counter must be at least 1")

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
