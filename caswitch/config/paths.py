# -*- coding: utf-8 -*-
"""Filesystem layout: caswitch's own documents and each tool's targets."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from ..constant import (
    CLAUDE_DIR,
    CLAUDE_SETTINGS_FILE,
    CLAUDE_STORE_FILE,
    CODEX_DIR,
    CODEX_STORE_FILE,
    DEFAULT_WORKING_DIR,
    GEMINI_DIR,
    GEMINI_STORE_FILE,
    GLOBAL_CONFIG_FILE,
    HOME_ENV,
    OPENCODE_DIR,
    OPENCODE_STORE_FILE,
    WORKING_DIR_ENV,
)
from ..errors import ConfigError


def resolve_home_dir() -> Path:
    """``$CASWITCH_HOME`` or the user's home directory."""
    override = os.environ.get(HOME_ENV, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigError("Cannot determine the home directory") from exc


class Paths(BaseModel):
    working_dir: Path
    home_dir: Path

    @classmethod
    def from_env(
        cls,
        working_dir: Optional[Path] = None,
        home_dir: Optional[Path] = None,
    ) -> "Paths":
        if home_dir is None:
            home_dir = resolve_home_dir()
        if working_dir is None:
            raw = os.environ.get(WORKING_DIR_ENV, "").strip()
            working_dir = Path(raw or DEFAULT_WORKING_DIR)
        return cls(
            working_dir=Path(working_dir).expanduser().resolve(),
            home_dir=Path(home_dir),
        )

    # caswitch documents
    @property
    def global_config_file(self) -> Path:
        return self.working_dir / GLOBAL_CONFIG_FILE

    @property
    def claude_store_file(self) -> Path:
        return self.working_dir / CLAUDE_STORE_FILE

    @property
    def codex_store_file(self) -> Path:
        return self.working_dir / CODEX_STORE_FILE

    @property
    def gemini_store_file(self) -> Path:
        return self.working_dir / GEMINI_STORE_FILE

    @property
    def opencode_store_file(self) -> Path:
        return self.working_dir / OPENCODE_STORE_FILE

    # external tool directories
    @property
    def claude_dir(self) -> Path:
        return self.home_dir / CLAUDE_DIR

    @property
    def claude_settings_file(self) -> Path:
        return self.claude_dir / CLAUDE_SETTINGS_FILE

    @property
    def codex_dir(self) -> Path:
        return self.home_dir / CODEX_DIR

    @property
    def gemini_dir(self) -> Path:
        return self.home_dir / GEMINI_DIR

    @property
    def opencode_dir(self) -> Path:
        return self.home_dir / OPENCODE_DIR
