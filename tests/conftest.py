from pathlib import Path

import pytest

from gridwrap import config


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "gridwrap" / "config.toml"
    monkeypatch.setattr(config, "USER_CONFIG_PATH", path)
    monkeypatch.delenv("GRIDWRAP_WIDTH", raising=False)
    monkeypatch.delenv("GRIDWRAP_INDENT", raising=False)
    return path
