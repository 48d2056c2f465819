"""
Tests for root validation and file enumeration
"""

import logging
import os
from unittest.mock import patch

import pytest

from core import InvalidRootError, check_root, collect_files, is_hidden, iter_targets


@pytest.fixture
def tree(tmp_path):
    """
    tmp_path/
        b.jpg
        .DS_Store
        a/
            c.txt
            .hidden/
                d.png
    """
    (tmp_path / "b.jpg").write_bytes(b"b")
    (tmp_path / ".DS_Store").write_bytes(b"ds")
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "c.txt").write_bytes(b"c")
    (tmp_path / "a" / ".hidden").mkdir()
    (tmp_path / "a" / ".hidden" / "d.png").write_bytes(b"d")
    return tmp_path


def test_check_root_missing(tmp_path):
    with pytest.raises(InvalidRootError) as exc_info:
        check_root(tmp_path / "missing")
    assert "does not exist" in str(exc_info.value)


def test_check_root_accepts_file_and_directory(tmp_path):
    f = tmp_path / "f.txt"
    f.write_text("x")
    assert check_root(f) == f
    assert check_root(str(tmp_path)) == tmp_path


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs os.mkfifo")
def test_check_root_rejects_special_file(tmp_path):
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)
    with pytest.raises(InvalidRootError) as exc_info:
        check_root(fifo)
    assert "neither a file nor a directory" in str(exc_info.value)


def test_collect_files_is_recursive_and_unfiltered(tree):
    names = [p.relative_to(tree).as_posix() for p in collect_files(tree)]
    assert names == [".DS_Store", "b.jpg", "a/c.txt", "a/.hidden/d.png"]


def test_collect_files_is_lazy(tree):
    files = collect_files(tree)
    assert not isinstance(files, list)
    assert next(iter(files)).name == ".DS_Store"


def test_iter_targets_skips_dotfiles(tree):
    names = [p.relative_to(tree).as_posix() for p in iter_targets(tree)]
    # Only file names are filtered, hidden directories are still entered
    assert names == ["b.jpg", "a/c.txt", "a/.hidden/d.png"]


def test_iter_targets_include_hidden(tree):
    names = [p.name for p in iter_targets(tree, include_hidden=True)]
    assert ".DS_Store" in names


def test_iter_targets_single_file(tree):
    assert list(iter_targets(tree / "b.jpg")) == [tree / "b.jpg"]
    assert list(iter_targets(tree / ".DS_Store")) == []


def test_is_hidden(tmp_path):
    assert is_hidden(tmp_path / ".DS_Store")
    assert not is_hidden(tmp_path / "IMG_0001.JPG")


def denied_walk(denied):
    """os.walk stand-in reporting `denied` as unreadable, then listing the top"""
    def _walk(top, onerror=None):
        onerror(PermissionError(13, "Permission denied", str(denied)))
        yield str(top), [], sorted(p.name for p in os.scandir(top) if p.is_file())
    return _walk


def test_unreadable_root_is_fatal(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    with patch("core.scan_files.os.walk", side_effect=denied_walk(tmp_path)):
        with pytest.raises(InvalidRootError) as exc_info:
            list(collect_files(tmp_path))
    assert "cannot be listed" in str(exc_info.value)


def test_unreadable_subdirectory_is_skipped(tmp_path, caplog):
    (tmp_path / "a.txt").write_text("a")
    locked = tmp_path / "locked"
    with patch("core.scan_files.os.walk", side_effect=denied_walk(locked)):
        with caplog.at_level(logging.WARNING, logger="core.scan_files"):
            files = list(collect_files(tmp_path))
    assert files == [tmp_path / "a.txt"]
    assert "Skipping unreadable directory" in caplog.text
