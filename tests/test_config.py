"""Tests for settings resolution and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest  # type: ignore
import yaml

from talentrank.config import Settings, configure_logging, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in ("TALENTRANK_STORE", "UPLOAD_DIR", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def write_config(tmp_path: Path, data: dict) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


def test_defaults() -> None:
    settings = load_settings()
    assert settings == Settings()
    assert settings.top_contributions == 15
    assert settings.diff_limit == 10


def test_yaml_sections(tmp_path: Path) -> None:
    path = write_config(tmp_path, {
        "storage": {"path": "data/store.json", "upload_dir": "files"},
        "logging": {"level": "DEBUG"},
        "ranking": {"top_contributions": 5, "diff_limit": 3},
    })
    settings = load_settings(path)
    assert settings.store_path == "data/store.json"
    assert settings.upload_dir == "files"
    assert settings.log_level == "DEBUG"
    assert settings.top_contributions == 5
    assert settings.diff_limit == 3


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = write_config(tmp_path, {"storage": {"path": "data/store.json"}})
    monkeypatch.setenv("TALENTRANK_STORE", "/srv/talentrank.json")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    settings = load_settings(path)
    assert settings.store_path == "/srv/talentrank.json"
    assert settings.log_level == "WARNING"


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(str(path)) == Settings()


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "missing.yaml"))


def test_configure_logging_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "talentrank.log"
    configure_logging(Settings(log_level="debug", log_file=str(log_file)))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    logging.getLogger("talentrank.test").info("hello")
    for handler in root.handlers:
        handler.flush()
    assert "INFO - talentrank.test - hello" in log_file.read_text(encoding="utf-8")
