# -*- coding: utf-8 -*-
"""Codex: regenerate ~/.codex/config.toml and ~/.codex/auth.json.

Both files are fully owned and rebuilt from scratch on every sync. They are
written one after the other; a failure on the second leaves the first
already updated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import toml

from ..constant import CODEX_AUTH_JSON, CODEX_CONFIG_TOML
from ..providers.models import CodexActiveConfig
from ..utils import dump_json, write_text
from .base import Synchronizer

logger = logging.getLogger(__name__)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def toml_basic_string(value: str) -> str:
    """TOML basic string; control characters become ``\\uXXXX`` escapes."""
    out = []
    for char in value:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


class CodexTomlEncoder(toml.TomlEncoder):
    def __init__(self):
        super().__init__()
        self.dump_funcs[str] = toml_basic_string


def build_config(config: CodexActiveConfig) -> Dict[str, Any]:
    """config.toml as a dict: top-level keys first, then the provider table."""
    provider = config.provider_id
    data: Dict[str, Any] = {"model_provider": provider}
    for key in (
        "model",
        "model_reasoning_effort",
        "network_access",
        "disable_response_storage",
    ):
        value = getattr(config, key)
        if value is not None:
            data[key] = value

    table: Dict[str, Any] = {"name": provider}
    if config.base_url is not None:
        table["base_url"] = config.base_url
    if config.wire_api is not None:
        table["wire_api"] = config.wire_api
    table["requires_openai_auth"] = True
    data["model_providers"] = {provider: table}
    return data


def render_config_toml(config: CodexActiveConfig) -> str:
    return toml.dumps(build_config(config), encoder=CodexTomlEncoder())


def render_auth_json(config: CodexActiveConfig) -> str:
    return dump_json({"OPENAI_API_KEY": config.api_key})


class CodexSynchronizer(Synchronizer[CodexActiveConfig]):
    family = "codex"

    def __init__(self, codex_dir: Path):
        self.codex_dir = Path(codex_dir)
        self.config_toml = self.codex_dir / CODEX_CONFIG_TOML
        self.auth_json = self.codex_dir / CODEX_AUTH_JSON

    def target_paths(self) -> List[Path]:
        return [self.auth_json, self.config_toml]

    def sync(self, config: CodexActiveConfig) -> List[Path]:
        write_text(self.auth_json, render_auth_json(config))
        write_text(self.config_toml, render_config_toml(config))
        logger.info(
            "Synced codex site '%s' (provider '%s') to %s",
            config.site,
            config.provider_id,
            self.codex_dir,
        )
        return [self.auth_json, self.config_toml]
