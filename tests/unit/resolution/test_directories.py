from __future__ import annotations

import os
from pathlib import Path

import pytest
from result import is_ok

from openfolder.resolution import first_existing_directory


def test_returns_nearest_existing_ancestor(tmp_path: Path) -> None:
    existing = tmp_path / "a"
    existing.mkdir()

    result = first_existing_directory(existing / "b" / "c")

    assert is_ok(result)
    assert result.unwrap() == existing


def test_returns_directory_itself_when_it_exists(tmp_path: Path) -> None:
    assert first_existing_directory(tmp_path).unwrap() == tmp_path


def test_returns_containing_directory_of_existing_file(tmp_path: Path) -> None:
    file_path = tmp_path / "app.proj"
    file_path.write_text("<Project />")

    assert first_existing_directory(str(file_path)).unwrap() == tmp_path


def test_reaches_filesystem_root(tmp_path: Path) -> None:
    result = first_existing_directory(Path(tmp_path.anchor) / "definitely-missing-openfolder" / "x")

    assert result.unwrap() == Path(tmp_path.anchor)


def test_relative_path_yields_absolute_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = first_existing_directory("missing/app.proj")

    assert result.unwrap() == Path(os.getcwd())
    assert result.unwrap().is_absolute()
