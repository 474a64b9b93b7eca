"""Pytest configuration and fixtures for legendaly tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def isolate_legendaly_paths(monkeypatch, tmp_path) -> Path:
    """Point data and config directories at a per-test temp location."""
    import legendaly.config

    home = tmp_path / "legendaly-home"
    config_dir = tmp_path / "config"
    monkeypatch.setenv("LEGENDALY_HOME", str(home))
    monkeypatch.setattr(legendaly.config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(legendaly.config, "CONFIG_PATH", config_dir / "config.toml")
    monkeypatch.setattr(legendaly.config, "_cached_config", None)

    for name in (
        "TONE",
        "LANGUAGE",
        "MODEL",
        "QUOTE_COUNT",
        "CATEGORY",
        "USER_PROMPT",
        "FETCH_INTERVAL",
        "DISPLAY_TIME",
        "VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)

    return home


@pytest.fixture
def log_files(tmp_path) -> tuple[Path, Path]:
    """Rolling log and session echoes file inside the temp directory."""
    logs = tmp_path / "logs"
    echoes = tmp_path / "echoes"
    logs.mkdir()
    echoes.mkdir()
    return logs / "legendaly.log", echoes / "20250101000000000-epic-en.echoes"
