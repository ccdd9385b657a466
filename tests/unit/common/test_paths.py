from __future__ import annotations

from pathlib import Path

import pytest

from openfolder.common import get_data_directory


def test_get_data_directory_prefers_xdg_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))

    assert get_data_directory() == tmp_path / "xdg-data" / "openfolder"


def test_get_data_directory_defaults_to_local_share(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert get_data_directory("custom") == tmp_path / ".local" / "share" / "custom"
