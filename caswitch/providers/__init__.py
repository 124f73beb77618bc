# -*- coding: utf-8 -*-
"""Provider management: models, credential stores + resolvers."""

from .models import (
    ClaudeActiveConfig,
    ClaudeActiveReference,
    ClaudeConfig,
    ClaudeSettingsPatch,
    ClaudeSite,
    CodexActiveConfig,
    CodexActiveReference,
    CodexConfig,
    CodexSettingsPatch,
    CodexSite,
    GeminiActiveConfig,
    GeminiActiveReference,
    GeminiConfig,
    GeminiSettingsPatch,
    GeminiSite,
    OpenCodeActiveConfig,
    OpenCodeActiveReference,
    OpenCodeConfig,
    OpenCodeModelInfo,
    OpenCodeModelLimit,
    OpenCodeModelReference,
    OpenCodeProvider,
    OpenCodeProviderPatch,
    SiteMetadata,
    SiteMetadataPatch,
    VertexConfig,
)
from .opencode_store import OpenCodeStore
from .resolver import (
    resolve_claude,
    resolve_codex,
    resolve_gemini,
    resolve_opencode,
)
from .store import (
    ClaudeStore,
    CodexStore,
    GeminiStore,
    SiteStore,
)

__all__ = [
    # models
    "ClaudeActiveConfig",
    "ClaudeActiveReference",
    "ClaudeConfig",
    "ClaudeSettingsPatch",
    "ClaudeSite",
    "CodexActiveConfig",
    "CodexActiveReference",
    "CodexConfig",
    "CodexSettingsPatch",
    "CodexSite",
    "GeminiActiveConfig",
    "GeminiActiveReference",
    "GeminiConfig",
    "GeminiSettingsPatch",
    "GeminiSite",
    "OpenCodeActiveConfig",
    "OpenCodeActiveReference",
    "OpenCodeConfig",
    "OpenCodeModelInfo",
    "OpenCodeModelLimit",
    "OpenCodeModelReference",
    "OpenCodeProvider",
    "OpenCodeProviderPatch",
    "SiteMetadata",
    "SiteMetadataPatch",
    "VertexConfig",
    # stores
    "ClaudeStore",
    "CodexStore",
    "GeminiStore",
    "OpenCodeStore",
    "SiteStore",
    # resolvers
    "resolve_claude",
    "resolve_codex",
    "resolve_gemini",
    "resolve_opencode",
]
