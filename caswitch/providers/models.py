# -*- coding: utf-8 -*-
"""Pydantic data models for sites, providers and resolved configs."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constant import CONFIG_VERSION


def now_timestamp() -> str:
    """RFC 3339 timestamp (UTC) used for created_at / updated_at."""
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Shared site pieces
# ---------------------------------------------------------------------------


class SiteMetadata(BaseModel):
    """Display metadata of a site."""

    url: str = Field(..., description="Site URL (informational)")
    description: Optional[str] = Field(
        default=None,
        description="Free-text description",
    )
    created_at: str = Field(default_factory=now_timestamp)
    updated_at: str = Field(default_factory=now_timestamp)


class BaseSite(BaseModel):
    """A named API endpoint holding a map of named secrets.

    Subclasses name their secret map through ``SECRET_FIELD`` so the
    on-disk key matches what each family has always used
    (``tokens`` for Claude, ``api_keys`` elsewhere).
    """

    SECRET_FIELD: ClassVar[str] = "api_keys"

    metadata: SiteMetadata

    @property
    def secrets(self) -> Dict[str, str]:
        return getattr(self, self.SECRET_FIELD)

    def get_secret(self, name: str) -> Optional[str]:
        return self.secrets.get(name)

    def touch(self) -> None:
        self.metadata.updated_at = now_timestamp()


# ---------------------------------------------------------------------------
# Claude
# ---------------------------------------------------------------------------


class VertexConfig(BaseModel):
    """Vertex AI mode of a Claude site."""

    enabled: bool = False
    project_id: Optional[str] = None
    base_url: Optional[str] = None
    skip_auth: bool = False


class ClaudeSiteConfig(BaseModel):
    base_url: Optional[str] = None
    model: Optional[str] = None
    vertex: VertexConfig = Field(default_factory=VertexConfig)


class ClaudeSite(BaseSite):
    SECRET_FIELD: ClassVar[str] = "tokens"

    tokens: Dict[str, str] = Field(default_factory=dict)
    config: ClaudeSiteConfig = Field(default_factory=ClaudeSiteConfig)


class ClaudeConfig(BaseModel):
    """Top-level structure of claude.json."""

    version: str = CONFIG_VERSION
    sites: Dict[str, ClaudeSite] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Codex
# ---------------------------------------------------------------------------


class CodexSiteConfig(BaseModel):
    base_url: Optional[str] = None
    model: Optional[str] = None
    model_reasoning_effort: Optional[str] = None
    model_provider: Optional[str] = Field(
        default=None,
        description="Provider id in config.toml; defaults to the site name",
    )
    network_access: Optional[str] = Field(
        default=None,
        description='"enabled" or "disabled"',
    )
    disable_response_storage: Optional[bool] = None
    wire_api: Optional[str] = Field(
        default=None,
        description='Wire protocol, e.g. "responses"',
    )


class CodexSite(BaseSite):
    api_keys: Dict[str, str] = Field(default_factory=dict)
    config: CodexSiteConfig = Field(default_factory=CodexSiteConfig)


class CodexConfig(BaseModel):
    """Top-level structure of codex.json."""

    version: str = CONFIG_VERSION
    sites: Dict[str, CodexSite] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Gemini
# ---------------------------------------------------------------------------


class GeminiSiteConfig(BaseModel):
    base_url: Optional[str] = None
    model: Optional[str] = None


class GeminiSite(BaseSite):
    api_keys: Dict[str, str] = Field(default_factory=dict)
    config: GeminiSiteConfig = Field(default_factory=GeminiSiteConfig)


class GeminiConfig(BaseModel):
    """Top-level structure of gemini.json."""

    version: str = CONFIG_VERSION
    sites: Dict[str, GeminiSite] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# OpenCode
# ---------------------------------------------------------------------------


class OpenCodeModelLimit(BaseModel):
    context: Optional[int] = None
    output: Optional[int] = None


class OpenCodeModelInfo(BaseModel):
    """A model entry exactly as opencode.json expects it."""

    name: str = Field(..., description="Human-readable model name")
    limit: Optional[OpenCodeModelLimit] = None


class OpenCodeProviderOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(..., alias="baseURL")
    api_key: str = Field(..., alias="apiKey")


class ProviderMetadata(BaseModel):
    """Internal bookkeeping; never written to the synced opencode.json."""

    description: Optional[str] = None
    created_at: str = Field(default_factory=now_timestamp)
    updated_at: str = Field(default_factory=now_timestamp)


class OpenCodeProvider(BaseModel):
    npm: Optional[str] = Field(
        default=None,
        description='AI SDK package, e.g. "@ai-sdk/openai-compatible"',
    )
    name: str
    options: OpenCodeProviderOptions
    models: Dict[str, OpenCodeModelInfo] = Field(default_factory=dict)
    metadata: ProviderMetadata = Field(default_factory=ProviderMetadata)

    def touch(self) -> None:
        self.metadata.updated_at = now_timestamp()

    def to_opencode(self) -> dict:
        """Provider definition in opencode.json shape (no metadata)."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"metadata"},
        )


class OpenCodeConfig(BaseModel):
    """Top-level structure of the opencode.json credential store."""

    version: str = CONFIG_VERSION
    providers: Dict[str, OpenCodeProvider] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Active references (stored in config.json)
# ---------------------------------------------------------------------------


class ClaudeActiveReference(BaseModel):
    site: str
    token_name: str


class CodexActiveReference(BaseModel):
    site: str
    api_key_name: str


class GeminiActiveReference(BaseModel):
    site: str
    api_key_name: str


class OpenCodeModelReference(BaseModel):
    """One role (main or small) of the OpenCode selection."""

    provider: str
    model: str


class OpenCodeActiveReference(BaseModel):
    main: OpenCodeModelReference
    small: OpenCodeModelReference


# ---------------------------------------------------------------------------
# Resolved (runtime) configurations; never persisted
# ---------------------------------------------------------------------------


class ClaudeActiveConfig(BaseModel):
    site: str
    site_url: str
    site_description: Optional[str] = None
    token_name: str
    token: str
    base_url: Optional[str] = None
    model: Optional[str] = None
    vertex: VertexConfig = Field(default_factory=VertexConfig)


class CodexActiveConfig(BaseModel):
    site: str
    site_url: str
    site_description: Optional[str] = None
    api_key_name: str
    api_key: str
    base_url: Optional[str] = None
    model: Optional[str] = None
    model_reasoning_effort: Optional[str] = None
    model_provider: Optional[str] = None
    network_access: Optional[str] = None
    disable_response_storage: Optional[bool] = None
    wire_api: Optional[str] = None

    @property
    def provider_id(self) -> str:
        """``model_provider`` or, when unset, the site name."""
        return self.model_provider or self.site


class GeminiActiveConfig(BaseModel):
    site: str
    site_url: str
    site_description: Optional[str] = None
    api_key_name: str
    api_key: str
    base_url: Optional[str] = None
    model: Optional[str] = None


class OpenCodeResolvedRole(BaseModel):
    """A role dereferenced to its provider endpoint and model entry."""

    provider: str
    model: str
    model_info: OpenCodeModelInfo
    base_url: str
    api_key: str


class OpenCodeActiveConfig(BaseModel):
    main: OpenCodeResolvedRole
    small: OpenCodeResolvedRole
    providers: Dict[str, OpenCodeProvider] = Field(
        default_factory=dict,
        description="Only the providers referenced by main / small",
    )


# ---------------------------------------------------------------------------
# Sparse patches: None = leave untouched, "" = clear
# ---------------------------------------------------------------------------


class SiteMetadataPatch(BaseModel):
    url: Optional[str] = None
    description: Optional[str] = None


class ClaudeSettingsPatch(BaseModel):
    base_url: Optional[str] = None
    model: Optional[str] = None
    vertex: Optional[VertexConfig] = Field(
        default=None,
        description="Replaces the whole vertex record when set",
    )


class CodexSettingsPatch(BaseModel):
    base_url: Optional[str] = None
    model: Optional[str] = None
    model_reasoning_effort: Optional[str] = None
    model_provider: Optional[str] = None
    network_access: Optional[str] = None
    disable_response_storage: Optional[bool] = None
    wire_api: Optional[str] = None


class GeminiSettingsPatch(BaseModel):
    base_url: Optional[str] = None
    model: Optional[str] = None


class OpenCodeProviderPatch(BaseModel):
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    npm: Optional[str] = None
    description: Optional[str] = None


def apply_patch(target: BaseModel, patch: BaseModel) -> bool:
    """Apply a sparse *patch* onto *target* in place.

    ``None`` leaves a field untouched; an empty string clears an optional
    field (required fields ignore it). Returns whether anything changed.
    """
    fields = type(target).model_fields
    changed = False
    for name in type(patch).model_fields:
        value = getattr(patch, name)
        if value is None or name not in fields:
            continue
        if value == "":
            if fields[name].is_required():
                continue
            value = None
        setattr(target, name, value)
        changed = True
    return changed
