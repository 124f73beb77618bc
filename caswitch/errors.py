# -*- coding: utf-8 -*-
"""Error taxonomy shared by stores, resolvers, synchronizers and the CLI."""

from __future__ import annotations


class ConfigError(Exception):
    """Root of every error raised by caswitch."""


# ---------------------------------------------------------------------------
# NotFound
# ---------------------------------------------------------------------------


class NotFoundError(ConfigError):
    """A site, secret, provider or model is absent at lookup time."""


class SiteNotFoundError(NotFoundError):
    def __init__(self, site: str):
        self.site = site
        super().__init__(f"Site '{site}' not found")


class SecretNotFoundError(NotFoundError):
    def __init__(self, site: str, name: str):
        self.site = site
        self.name = name
        super().__init__(f"Secret '{name}' not found in site '{site}'")


class ProviderNotFoundError(NotFoundError):
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Provider '{provider}' not found")


class ModelNotFoundError(NotFoundError):
    def __init__(self, provider: str, model: str):
        self.provider = provider
        self.model = model
        super().__init__(
            f"Model '{model}' not found in provider '{provider}'",
        )


# ---------------------------------------------------------------------------
# AlreadyExists
# ---------------------------------------------------------------------------


class AlreadyExistsError(ConfigError):
    """Duplicate add."""


class SiteExistsError(AlreadyExistsError):
    def __init__(self, site: str):
        self.site = site
        super().__init__(f"Site '{site}' already exists")


class SecretExistsError(AlreadyExistsError):
    def __init__(self, site: str, name: str):
        self.site = site
        self.name = name
        super().__init__(f"Secret '{name}' already exists in site '{site}'")


class ProviderExistsError(AlreadyExistsError):
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Provider '{provider}' already exists")


class ModelExistsError(AlreadyExistsError):
    def __init__(self, provider: str, model: str):
        self.provider = provider
        self.model = model
        super().__init__(
            f"Model '{model}' already exists in provider '{provider}'",
        )


# ---------------------------------------------------------------------------
# Persistence / sync
# ---------------------------------------------------------------------------


class SerializationError(ConfigError):
    """A document could not be serialized (or strictly parsed)."""


class SyncError(ConfigError):
    """Writing a store or an external target file failed."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
