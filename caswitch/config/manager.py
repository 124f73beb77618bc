# -*- coding: utf-8 -*-
"""ConfigManager: the composition root.

Owns the global reference store (config.json), one credential store and one
synchronizer per family, and implements the switch / get-active flow:

    validate -> write reference -> resolve -> synchronize

Errors propagate unchanged. There is no rollback: if synchronizing fails
after the reference was written, the reference stays updated and the
external files stay stale until the next successful sync.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from pydantic import BaseModel

from ..constant import FAMILIES
from ..errors import ConfigError
from ..providers.models import (
    ClaudeActiveConfig,
    ClaudeActiveReference,
    CodexActiveConfig,
    CodexActiveReference,
    GeminiActiveConfig,
    GeminiActiveReference,
    OpenCodeActiveConfig,
    OpenCodeActiveReference,
    OpenCodeModelReference,
)
from ..providers.opencode_store import OpenCodeStore
from ..providers.resolver import (
    resolve_claude,
    resolve_codex,
    resolve_gemini,
    resolve_opencode,
)
from ..providers.store import ClaudeStore, CodexStore, GeminiStore
from ..sync.base import Synchronizer
from ..sync.claude import ClaudeSynchronizer
from ..sync.codex import CodexSynchronizer
from ..sync.gemini import GeminiSynchronizer
from ..sync.opencode import OpenCodeSynchronizer
from .config import GlobalConfig
from .paths import Paths
from .utils import load_global_config, save_global_config

logger = logging.getLogger(__name__)


class _Binding(NamedTuple):
    store: Any
    resolve: Callable[[BaseModel, BaseModel], BaseModel]
    synchronizer: Synchronizer


class ConfigManager:
    def __init__(self, paths: Optional[Paths] = None):
        self.paths = paths if paths is not None else Paths.from_env()

        self.claude = ClaudeStore(self.paths.claude_store_file)
        self.codex = CodexStore(self.paths.codex_store_file)
        self.gemini = GeminiStore(self.paths.gemini_store_file)
        self.opencode = OpenCodeStore(self.paths.opencode_store_file)

        self.claude_sync = ClaudeSynchronizer(self.paths.claude_settings_file)
        self.codex_sync = CodexSynchronizer(self.paths.codex_dir)
        self.gemini_sync = GeminiSynchronizer(self.paths.gemini_dir)
        self.opencode_sync = OpenCodeSynchronizer(self.paths.opencode_dir)

        self._bindings: Dict[str, _Binding] = {
            "claude": _Binding(self.claude, resolve_claude, self.claude_sync),
            "codex": _Binding(self.codex, resolve_codex, self.codex_sync),
            "gemini": _Binding(self.gemini, resolve_gemini, self.gemini_sync),
            "opencode": _Binding(
                self.opencode,
                resolve_opencode,
                self.opencode_sync,
            ),
        }

    # ------------------------------------------------------------------
    # Global reference store (config.json)
    # ------------------------------------------------------------------

    def read_global_config(self) -> GlobalConfig:
        return load_global_config(self.paths.global_config_file)

    def write_global_config(self, config: GlobalConfig) -> None:
        save_global_config(config, self.paths.global_config_file)

    def has_any_active(self) -> bool:
        active = self.read_global_config().active
        return any(
            getattr(active, family) is not None for family in FAMILIES
        )

    # ------------------------------------------------------------------
    # Family-independent flow
    # ------------------------------------------------------------------

    def _resolve(self, family: str, reference: BaseModel) -> BaseModel:
        binding = self._bindings[family]
        return binding.resolve(reference, binding.store.read())

    def _get_active(self, family: str) -> Optional[BaseModel]:
        reference = getattr(self.read_global_config().active, family)
        if reference is None:
            return None
        return self._resolve(family, reference)

    def _require_active(self, family: str) -> BaseModel:
        active = self._get_active(family)
        if active is None:
            raise ConfigError(f"No active {family} configuration")
        return active

    def _switch(self, family: str, reference: BaseModel) -> BaseModel:
        # raises NotFound before anything is written
        self._resolve(family, reference)

        config = self.read_global_config()
        setattr(config.active, family, reference)
        self.write_global_config(config)
        logger.info("Switched %s to %s", family, reference.model_dump())

        active = self._require_active(family)
        self._bindings[family].synchronizer.sync(active)
        return active

    def _sync(self, family: str) -> List[Path]:
        active = self._require_active(family)
        return self._bindings[family].synchronizer.sync(active)

    def _clear(self, family: str) -> None:
        config = self.read_global_config()
        setattr(config.active, family, None)
        self.write_global_config(config)
        logger.info("Cleared active %s configuration", family)

    # ------------------------------------------------------------------
    # Claude
    # ------------------------------------------------------------------

    def switch_claude(self, site: str, token_name: str) -> ClaudeActiveConfig:
        reference = ClaudeActiveReference(site=site, token_name=token_name)
        return self._switch("claude", reference)

    def get_active_claude(self) -> Optional[ClaudeActiveConfig]:
        return self._get_active("claude")

    def sync_claude(self) -> List[Path]:
        return self._sync("claude")

    def clear_claude_active(self) -> None:
        self._clear("claude")

    # ------------------------------------------------------------------
    # Codex
    # ------------------------------------------------------------------

    def switch_codex(self, site: str, api_key_name: str) -> CodexActiveConfig:
        reference = CodexActiveReference(site=site, api_key_name=api_key_name)
        return self._switch("codex", reference)

    def get_active_codex(self) -> Optional[CodexActiveConfig]:
        return self._get_active("codex")

    def sync_codex(self) -> List[Path]:
        return self._sync("codex")

    def clear_codex_active(self) -> None:
        self._clear("codex")

    # ------------------------------------------------------------------
    # Gemini
    # ------------------------------------------------------------------

    def switch_gemini(
        self,
        site: str,
        api_key_name: str,
    ) -> GeminiActiveConfig:
        reference = GeminiActiveReference(site=site, api_key_name=api_key_name)
        return self._switch("gemini", reference)

    def get_active_gemini(self) -> Optional[GeminiActiveConfig]:
        return self._get_active("gemini")

    def sync_gemini(self) -> List[Path]:
        return self._sync("gemini")

    def clear_gemini_active(self) -> None:
        self._clear("gemini")

    # ------------------------------------------------------------------
    # OpenCode
    # ------------------------------------------------------------------

    def switch_opencode(
        self,
        main_provider: str,
        main_model: str,
        small_provider: str,
        small_model: str,
    ) -> OpenCodeActiveConfig:
        reference = OpenCodeActiveReference(
            main=OpenCodeModelReference(
                provider=main_provider,
                model=main_model,
            ),
            small=OpenCodeModelReference(
                provider=small_provider,
                model=small_model,
            ),
        )
        return self._switch("opencode", reference)

    def get_active_opencode(self) -> Optional[OpenCodeActiveConfig]:
        return self._get_active("opencode")

    def sync_opencode(self) -> List[Path]:
        return self._sync("opencode")

    def apply_opencode(self, project_dir: Optional[Path] = None) -> List[Path]:
        """Write the active OpenCode config into a project directory.

        Defaults to the current working directory.
        """
        active = self._require_active("opencode")
        if project_dir is None:
            project_dir = Path.cwd()
        return self.opencode_sync.apply(active, project_dir)

    def clear_opencode_active(self) -> None:
        self._clear("opencode")
