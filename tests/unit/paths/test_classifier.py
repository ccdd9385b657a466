from __future__ import annotations

import os
from pathlib import Path

import pytest

from openfolder.paths import classifier, is_directory, is_rooted


def test_is_directory_true_for_existing_directory(tmp_path: Path) -> None:
    assert is_directory(str(tmp_path)) is True


def test_is_directory_false_for_existing_file(tmp_path: Path) -> None:
    file_path = tmp_path / "app.proj"
    file_path.write_text("<Project />")

    assert is_directory(str(file_path)) is False


def test_is_directory_uses_trailing_separator_when_path_is_missing(tmp_path: Path) -> None:
    missing = tmp_path / "not-built"

    assert is_directory(str(missing) + os.sep) is True
    assert is_directory(str(missing)) is False


def test_is_directory_uses_trailing_separator_when_stat_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_stat(path: str) -> os.stat_result:
        raise PermissionError("denied")

    monkeypatch.setattr(classifier.os, "stat", failing_stat)

    assert is_directory("/restricted/") is True
    assert is_directory("/restricted/app.proj") is False


def test_is_rooted_for_absolute_path() -> None:
    assert is_rooted(os.path.abspath("app.proj")) is True


def test_is_rooted_false_for_relative_path() -> None:
    assert is_rooted("bin/out.bin") is False


def test_is_rooted_defaults_to_true_when_query_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_pure_path(path: str) -> None:
        raise OSError("cannot parse")

    monkeypatch.setattr(classifier, "PurePath", failing_pure_path)

    assert is_rooted("bin/out.bin") is True
