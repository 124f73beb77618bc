# -*- coding: utf-8 -*-
"""Resolve active references against a store document.

Each resolver is a pure function of (reference, document): no file access,
no side effects. A reference whose site, secret, provider or model is absent
raises the matching ``NotFoundError`` subclass.
"""

from __future__ import annotations

from ..errors import (
    ModelNotFoundError,
    ProviderNotFoundError,
    SecretNotFoundError,
    SiteNotFoundError,
)
from .models import (
    ClaudeActiveConfig,
    ClaudeActiveReference,
    ClaudeConfig,
    CodexActiveConfig,
    CodexActiveReference,
    CodexConfig,
    GeminiActiveConfig,
    GeminiActiveReference,
    GeminiConfig,
    OpenCodeActiveConfig,
    OpenCodeActiveReference,
    OpenCodeConfig,
    OpenCodeModelReference,
    OpenCodeResolvedRole,
)


def _lookup(document, site_name: str, secret_name: str):
    """Return ``(site, secret)`` or raise the specific NotFound."""
    site = document.sites.get(site_name)
    if site is None:
        raise SiteNotFoundError(site_name)
    secret = site.get_secret(secret_name)
    if secret is None:
        raise SecretNotFoundError(site_name, secret_name)
    return site, secret


def resolve_claude(
    reference: ClaudeActiveReference,
    document: ClaudeConfig,
) -> ClaudeActiveConfig:
    site, token = _lookup(document, reference.site, reference.token_name)
    return ClaudeActiveConfig(
        site=reference.site,
        site_url=site.metadata.url,
        site_description=site.metadata.description,
        token_name=reference.token_name,
        token=token,
        base_url=site.config.base_url,
        model=site.config.model,
        vertex=site.config.vertex.model_copy(),
    )


def resolve_codex(
    reference: CodexActiveReference,
    document: CodexConfig,
) -> CodexActiveConfig:
    site, api_key = _lookup(document, reference.site, reference.api_key_name)
    return CodexActiveConfig(
        site=reference.site,
        site_url=site.metadata.url,
        site_description=site.metadata.description,
        api_key_name=reference.api_key_name,
        api_key=api_key,
        **site.config.model_dump(),
    )


def resolve_gemini(
    reference: GeminiActiveReference,
    document: GeminiConfig,
) -> GeminiActiveConfig:
    site, api_key = _lookup(document, reference.site, reference.api_key_name)
    return GeminiActiveConfig(
        site=reference.site,
        site_url=site.metadata.url,
        site_description=site.metadata.description,
        api_key_name=reference.api_key_name,
        api_key=api_key,
        base_url=site.config.base_url,
        model=site.config.model,
    )


def _resolve_role(
    role: OpenCodeModelReference,
    document: OpenCodeConfig,
) -> OpenCodeResolvedRole:
    provider = document.providers.get(role.provider)
    if provider is None:
        raise ProviderNotFoundError(role.provider)
    info = provider.models.get(role.model)
    if info is None:
        raise ModelNotFoundError(role.provider, role.model)
    return OpenCodeResolvedRole(
        provider=role.provider,
        model=role.model,
        model_info=info.model_copy(deep=True),
        base_url=provider.options.base_url,
        api_key=provider.options.api_key,
    )


def resolve_opencode(
    reference: OpenCodeActiveReference,
    document: OpenCodeConfig,
) -> OpenCodeActiveConfig:
    """Resolve both roles; keep only the providers they reference."""
    main = _resolve_role(reference.main, document)
    small = _resolve_role(reference.small, document)
    providers = {
        name: document.providers[name].model_copy(deep=True)
        for name in dict.fromkeys((main.provider, small.provider))
    }
    return OpenCodeActiveConfig(main=main, small=small, providers=providers)
