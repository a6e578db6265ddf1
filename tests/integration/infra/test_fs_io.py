from __future__ import annotations

"""
Integration tests for the filesystem infrastructure against a real disk.
"""

import os
from unittest.mock import patch

from dircraft.infra import fs as fs_mod
from dircraft.infra.fs import LocalFileSystem, normalize_path, safe_mkdir


def test_make_dirs_is_recursive_and_idempotent(tmp_path) -> None:
    target = tmp_path / "a" / "b" / "c"
    local = LocalFileSystem()

    local.make_dirs(str(target))
    local.make_dirs(str(target))

    assert target.is_dir()


def test_write_empty_file_truncates_existing(tmp_path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("previous content", encoding="utf-8")

    LocalFileSystem().write_empty_file(str(target))

    assert target.read_bytes() == b""


def test_read_text_utf8(tmp_path) -> None:
    target = tmp_path / "tree.txt"
    target.write_text("app/\n└── main.py", encoding="utf-8")

    assert LocalFileSystem().read_text(str(target)) == "app/\n└── main.py"


def test_user_data_dir_on_unix(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    with patch.object(fs_mod.os, "name", "posix"):
        path = fs_mod.get_user_data_dir()

    assert path == os.path.join(str(tmp_path), ".dircraft")
    assert os.path.isdir(path)


def test_normalize_path_blank_uses_fallback(tmp_path) -> None:
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


def test_normalize_path_expands_home(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert normalize_path("~/proj", "/unused") == os.path.join(str(tmp_path), "proj")


def test_safe_mkdir_reports_failure(tmp_path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("x", encoding="utf-8")

    ok, err = safe_mkdir(str(blocker / "child"))

    assert ok is False
    assert err
