"""
Tests for the command line entry point
"""

import os
from datetime import datetime
from unittest.mock import patch

import pytest

from cli.cli_entry import create_parser, main, options_from_args
from core import DateSource


def listing(directory):
    return sorted(p.name for p in directory.iterdir())


def test_defaults():
    options = options_from_args(create_parser().parse_args(["photos"]))
    assert options.source == DateSource.AUTO
    assert options.date_format == "%Y-%m-%d_%H.%M.%S"
    assert options.dry_run


def test_source_flags():
    parser = create_parser()
    assert options_from_args(parser.parse_args(["p", "-e"])).source == DateSource.EXIF_ONLY
    assert options_from_args(parser.parse_args(["p", "--modified"])).source == DateSource.MODIFIED_ONLY


def test_exif_and_modified_are_exclusive(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path), "--exif", "--modified"])
    assert exc_info.value.code == 2


def test_missing_path_fails(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main([str(missing), "--write"]) == 1
    err = capsys.readouterr().err
    assert "does not exist" in err


def test_bad_format_fails_before_touching_files(tmp_path, make_file, capsys):
    make_file(tmp_path / "notes.txt")
    assert main([str(tmp_path), "-m", "-f", "%Y/%m", "--write"]) == 1
    assert listing(tmp_path) == ["notes.txt"]
    assert "Invalid date format" in capsys.readouterr().err


def test_dry_run_prints_preview(tmp_path, make_jpeg, capsys):
    make_jpeg(tmp_path / "IMG_0001.JPG")

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "[Preview]" in out
    assert "2021-05-03_14.22.10.jpg" in out
    assert listing(tmp_path) == ["IMG_0001.JPG"]


def test_write_renames(tmp_path, make_jpeg, make_file):
    make_jpeg(tmp_path / "IMG_0001.JPG")
    make_jpeg(tmp_path / "IMG_0002.JPG")
    make_file(tmp_path / "notes.txt", datetime(2022, 1, 1, 0, 0, 0))

    assert main([str(tmp_path), "--write"]) == 0

    assert listing(tmp_path) == [
        "2021-05-03_14.22.10-1.jpg",
        "2021-05-03_14.22.10.jpg",
        "2022-01-01_00.00.00.txt",
    ]


def test_verbose_reports_every_file(tmp_path, make_jpeg, capsys):
    make_jpeg(tmp_path / "IMG_0001.JPG")
    (tmp_path / "notes.txt").write_text("text")

    assert main([str(tmp_path), "-e", "-v", "-w"]) == 0

    out = capsys.readouterr().out
    assert "Date Source: exif" in out
    assert "Renamed" in out
    assert "No date information available" in out


def test_single_file_path(tmp_path, make_file):
    notes = make_file(tmp_path / "notes.txt", datetime(2022, 1, 1, 0, 0, 0))
    assert main([str(notes), "-m", "-w"]) == 0
    assert listing(tmp_path) == ["2022-01-01_00.00.00.txt"]


def test_unreadable_root_fails(tmp_path, make_file, capsys):
    make_file(tmp_path / "notes.txt")

    def walk(top, onerror=None):
        onerror(PermissionError(13, "Permission denied", str(top)))
        return iter(())

    with patch("core.scan_files.os.walk", side_effect=walk):
        assert main([str(tmp_path), "-m", "-w"]) == 1

    assert "cannot be listed" in capsys.readouterr().err
    assert listing(tmp_path) == ["notes.txt"]


@pytest.mark.skipif(os.name == "nt", reason="':' is never valid on Windows")
def test_colon_format_allowed_on_posix(tmp_path, make_file):
    make_file(tmp_path / "notes.txt", datetime(2022, 1, 1, 0, 0, 0))
    assert main([str(tmp_path), "-m", "-f", "%Y-%m-%d %H:%M:%S", "-w"]) == 0
    assert listing(tmp_path) == ["2022-01-01 00:00:00.txt"]


def test_portable_rejects_colon(tmp_path, make_file, capsys):
    make_file(tmp_path / "notes.txt")
    assert main([str(tmp_path), "-m", "-f", "%H:%M", "--portable", "-w"]) == 1
    assert listing(tmp_path) == ["notes.txt"]
    assert "invalid character" in capsys.readouterr().err
