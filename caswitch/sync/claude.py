# -*- coding: utf-8 -*-
"""Claude: deep-merge the active site into ~/.claude/settings.json.

settings.json is shared with the user and with Claude Code itself, so only
the keys listed here are owned. They are stripped (top level and ``env``)
before the fresh values for the current mode are merged into ``env``;
switching between standard and Vertex mode therefore leaves no residue.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from ..providers.models import ClaudeActiveConfig
from ..utils import read_json_object, write_json
from .base import Synchronizer

logger = logging.getLogger(__name__)

# Owned at the top level (older releases wrote them there).
OWNED_TOP_LEVEL_KEYS = (
    "ANTHROPIC_AUTH_TOKEN",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_VERTEX_BASE_URL",
    "ANTHROPIC_VERTEX_PROJECT_ID",
    "CLAUDE_CODE_USE_VERTEX",
    "CLAUDE_CODE_SKIP_VERTEX_AUTH",
)

OWNED_ENV_KEYS = OWNED_TOP_LEVEL_KEYS + (
    "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC",
    "ANTHROPIC_MODEL",
)


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Merge *source* into *target* in place.

    Object-into-object recurses; any other value overwrites.
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            deep_merge(current, value)
        else:
            target[key] = value


def build_env(config: ClaudeActiveConfig) -> Dict[str, str]:
    """The ``env`` entries owned for the currently active mode."""
    env = {"ANTHROPIC_AUTH_TOKEN": config.token}
    vertex = config.vertex
    if vertex.enabled:
        env["CLAUDE_CODE_USE_VERTEX"] = "1"
        if vertex.project_id:
            env["ANTHROPIC_VERTEX_PROJECT_ID"] = vertex.project_id
        if vertex.base_url:
            env["ANTHROPIC_VERTEX_BASE_URL"] = vertex.base_url
        if vertex.skip_auth:
            env["CLAUDE_CODE_SKIP_VERTEX_AUTH"] = "1"
        env["CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC"] = "1"
    elif config.base_url:
        env["ANTHROPIC_BASE_URL"] = config.base_url
    if config.model:
        env["ANTHROPIC_MODEL"] = config.model
    return env


def strip_owned_keys(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Remove every owned key; guarantees ``settings["env"]`` is a dict."""
    for key in OWNED_TOP_LEVEL_KEYS:
        settings.pop(key, None)
    env = settings.get("env")
    if not isinstance(env, dict):
        env = {}
        settings["env"] = env
    for key in OWNED_ENV_KEYS:
        env.pop(key, None)
    return settings


def merge_settings(
    settings: Dict[str, Any],
    config: ClaudeActiveConfig,
) -> Dict[str, Any]:
    """Strip owned keys from *settings* then merge the fresh ``env``."""
    strip_owned_keys(settings)
    deep_merge(settings, {"env": build_env(config)})
    return settings


class ClaudeSynchronizer(Synchronizer[ClaudeActiveConfig]):
    family = "claude"

    def __init__(self, settings_file: Path):
        self.settings_file = Path(settings_file)

    def target_paths(self) -> List[Path]:
        return [self.settings_file]

    def sync(self, config: ClaudeActiveConfig) -> List[Path]:
        settings = read_json_object(self.settings_file) or {}
        merge_settings(settings, config)
        write_json(self.settings_file, settings)
        logger.info(
            "Synced claude site '%s' (%s mode) to %s",
            config.site,
            "vertex" if config.vertex.enabled else "standard",
            self.settings_file,
        )
        return [self.settings_file]
