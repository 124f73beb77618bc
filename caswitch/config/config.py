# -*- coding: utf-8 -*-
from typing import Optional

from pydantic import BaseModel, Field

from ..constant import CONFIG_VERSION
from ..providers.models import (
    ClaudeActiveReference,
    CodexActiveReference,
    GeminiActiveReference,
    OpenCodeActiveReference,
    now_timestamp,
)


class ActiveConfigs(BaseModel):
    """One optional active reference per family."""

    claude: Optional[ClaudeActiveReference] = None
    codex: Optional[CodexActiveReference] = None
    gemini: Optional[GeminiActiveReference] = None
    opencode: Optional[OpenCodeActiveReference] = None


class ConfigMetadata(BaseModel):
    created_at: str = Field(default_factory=now_timestamp)
    updated_at: str = Field(default_factory=now_timestamp)


class GlobalConfig(BaseModel):
    """Root config (config.json)."""

    version: str = CONFIG_VERSION
    active: ActiveConfigs = Field(default_factory=ActiveConfigs)
    metadata: ConfigMetadata = Field(default_factory=ConfigMetadata)

    def touch(self) -> None:
        self.metadata.updated_at = now_timestamp()
