"""
Runtime configuration.

Settings are resolved in three layers: built‑in defaults, an optional
YAML file, then environment variables (a ``.env`` file in the working
directory is loaded first).  The YAML file may contain the sections::

    storage:
      path: runtime_data/talentrank.json
      upload_dir: uploads
    logging:
      level: INFO
      file: talentrank.log
    ranking:
      top_contributions: 15
      diff_limit: 10

Recognised environment variables are ``TALENTRANK_STORE``,
``UPLOAD_DIR``, ``LOG_LEVEL`` and ``LOG_FILE``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .rank.inconsistency import MAX_DIFF_TOKENS
from .rank.similarity import TOP_CONTRIBUTIONS


@dataclass
class Settings:
    store_path: str = "runtime_data/talentrank.json"
    upload_dir: str = "uploads"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    top_contributions: int = TOP_CONTRIBUTIONS
    diff_limit: int = MAX_DIFF_TOKENS


def load_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(config_path: Optional[str] = None) -> Settings:
    """Build :class:`Settings` from defaults, a YAML file and the environment.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
    """
    load_dotenv()
    settings = Settings()
    if config_path:
        path = Path(config_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        cfg = load_config(path)
        storage_cfg = cfg.get("storage", {}) or {}
        log_cfg = cfg.get("logging", {}) or {}
        ranking_cfg = cfg.get("ranking", {}) or {}
        settings.store_path = storage_cfg.get("path", settings.store_path)
        settings.upload_dir = storage_cfg.get("upload_dir", settings.upload_dir)
        settings.log_level = str(log_cfg.get("level", settings.log_level))
        settings.log_file = log_cfg.get("file", settings.log_file)
        settings.top_contributions = int(ranking_cfg.get("top_contributions", settings.top_contributions))
        settings.diff_limit = int(ranking_cfg.get("diff_limit", settings.diff_limit))

    settings.store_path = os.getenv("TALENTRANK_STORE") or settings.store_path
    settings.upload_dir = os.getenv("UPLOAD_DIR") or settings.upload_dir
    settings.log_level = os.getenv("LOG_LEVEL") or settings.log_level
    settings.log_file = os.getenv("LOG_FILE") or settings.log_file
    return settings


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handlers: list = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )
