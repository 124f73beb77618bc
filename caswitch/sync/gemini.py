# -*- coding: utf-8 -*-
"""Gemini: regenerate ~/.gemini/.env.

settings.json next to it belongs to the user and is never touched.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import dotenv_values

from ..constant import GEMINI_ENV_FILE
from ..providers.models import GeminiActiveConfig
from ..utils import write_text
from .base import Synchronizer

logger = logging.getLogger(__name__)

_NEEDS_QUOTES = re.compile(r"[\s#\"'\\]")


def env_value(value: str) -> str:
    """Quote a value that dotenv would otherwise cut at ``#`` or a newline."""
    if not _NEEDS_QUOTES.search(value):
        return value
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def render_env(config: GeminiActiveConfig) -> str:
    """One ``KEY=value`` line per present field; absent fields emit nothing."""
    lines = []
    if config.base_url:
        lines.append(f"GOOGLE_GEMINI_BASE_URL={env_value(config.base_url)}")
    lines.append(f"GEMINI_API_KEY={env_value(config.api_key)}")
    if config.model:
        lines.append(f"GEMINI_MODEL={env_value(config.model)}")
    return "\n".join(lines) + "\n"


class GeminiSynchronizer(Synchronizer[GeminiActiveConfig]):
    family = "gemini"

    def __init__(self, gemini_dir: Path):
        self.gemini_dir = Path(gemini_dir)
        self.env_file = self.gemini_dir / GEMINI_ENV_FILE

    def target_paths(self) -> List[Path]:
        return [self.env_file]

    def sync(self, config: GeminiActiveConfig) -> List[Path]:
        write_text(self.env_file, render_env(config))
        logger.info(
            "Synced gemini site '%s' to %s",
            config.site,
            self.env_file,
        )
        return [self.env_file]

    def read_env(self) -> Dict[str, Optional[str]]:
        """Parse the current .env; empty when it does not exist."""
        if not self.env_file.is_file():
            return {}
        return dict(dotenv_values(self.env_file))
