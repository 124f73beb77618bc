# -*- coding: utf-8 -*-
"""OpenCode: generate opencode.json (global or project scope).

Only the provider definitions referenced by the active main / small roles
are embedded. The file may be committed to a project repository, so no
other stored provider (and none of its keys) is ever written out.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from ..constant import OPENCODE_DIR, OPENCODE_JSON, OPENCODE_SCHEMA_URL
from ..providers.models import OpenCodeActiveConfig
from ..utils import write_json
from .base import Synchronizer

logger = logging.getLogger(__name__)


def build_document(config: OpenCodeActiveConfig) -> Dict[str, Any]:
    providers = {
        name: provider.to_opencode()
        for name, provider in config.providers.items()
    }
    return {
        "$schema": OPENCODE_SCHEMA_URL,
        "theme": "tokyonight",
        "autoupdate": False,
        "provider": providers,
        "tools": {
            "get-current-session-id": True,
            "webfetch": True,
        },
        "agent": {},
        "mcp": {},
    }


def project_target(project_dir: Path) -> Path:
    return Path(project_dir) / OPENCODE_DIR / OPENCODE_JSON


class OpenCodeSynchronizer(Synchronizer[OpenCodeActiveConfig]):
    family = "opencode"

    def __init__(self, opencode_dir: Path):
        self.opencode_dir = Path(opencode_dir)
        self.opencode_json = self.opencode_dir / OPENCODE_JSON

    def target_paths(self) -> List[Path]:
        return [self.opencode_json]

    def _write(self, path: Path, config: OpenCodeActiveConfig) -> Path:
        write_json(path, build_document(config))
        logger.info(
            "Synced opencode main=%s/%s small=%s/%s to %s",
            config.main.provider,
            config.main.model,
            config.small.provider,
            config.small.model,
            path,
        )
        return path

    def sync(self, config: OpenCodeActiveConfig) -> List[Path]:
        return [self._write(self.opencode_json, config)]

    def apply(
        self,
        config: OpenCodeActiveConfig,
        project_dir: Path,
    ) -> List[Path]:
        """Write the same document under ``<project_dir>/.opencode/``."""
        return [self._write(project_target(project_dir), config)]
