# -*- coding: utf-8 -*-
"""Reading and writing the global reference store (config.json)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..providers.store import load_document, save_document
from .config import GlobalConfig
from .paths import Paths

logger = logging.getLogger(__name__)


def get_config_path(paths: Optional[Paths] = None) -> Path:
    """Return the config.json path."""
    if paths is None:
        paths = Paths.from_env()
    return paths.global_config_file


def load_global_config(path: Optional[Path] = None) -> GlobalConfig:
    """Load config.json; absent or malformed yields a fresh default."""
    if path is None:
        path = get_config_path()
    return load_document(path, GlobalConfig)


def save_global_config(
    config: GlobalConfig,
    path: Optional[Path] = None,
) -> None:
    """Bump ``updated_at`` and write config.json (whole file)."""
    if path is None:
        path = get_config_path()
    config.touch()
    save_document(path, config)
    logger.debug("Saved global config to %s", path)
