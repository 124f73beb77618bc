# -*- coding: utf-8 -*-
"""Reading and writing the OpenCode provider store (opencode.json).

Unlike the site-based families, an OpenCode provider carries a single API
key and a map of models; an active selection cites a (provider, model)
pair for each of the main and small roles.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ..errors import (
    ModelExistsError,
    ModelNotFoundError,
    ProviderExistsError,
    ProviderNotFoundError,
)
from .models import (
    OpenCodeConfig,
    OpenCodeModelInfo,
    OpenCodeProvider,
    OpenCodeProviderOptions,
    OpenCodeProviderPatch,
    ProviderMetadata,
)
from .store import load_document, save_document

logger = logging.getLogger(__name__)


class OpenCodeStore:
    family = "opencode"

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> OpenCodeConfig:
        return load_document(self.path, OpenCodeConfig)

    def write(self, document: OpenCodeConfig) -> None:
        save_document(self.path, document)
        logger.debug("Saved opencode store to %s", self.path)

    @staticmethod
    def _require_provider(
        document: OpenCodeConfig,
        name: str,
    ) -> OpenCodeProvider:
        provider = document.providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------

    def list_providers(self) -> Dict[str, OpenCodeProvider]:
        return dict(self.read().providers)

    def get_provider(self, name: str) -> Optional[OpenCodeProvider]:
        return self.read().providers.get(name)

    def add_provider(
        self,
        name: str,
        base_url: str,
        api_key: str,
        npm: Optional[str] = None,
        description: Optional[str] = None,
    ) -> OpenCodeProvider:
        document = self.read()
        if name in document.providers:
            raise ProviderExistsError(name)
        provider = OpenCodeProvider(
            npm=npm or None,
            name=name,
            options=OpenCodeProviderOptions(base_url=base_url, api_key=api_key),
            metadata=ProviderMetadata(description=description or None),
        )
        document.providers[name] = provider
        self.write(document)
        logger.info("Added opencode provider '%s'", name)
        return provider

    def update_provider(
        self,
        name: str,
        patch: OpenCodeProviderPatch,
    ) -> OpenCodeProvider:
        """Apply a sparse patch.

        ``base_url`` and ``api_key`` are required, so an empty string leaves
        them unchanged; ``npm`` and ``description`` are cleared by it.
        """
        document = self.read()
        provider = self._require_provider(document, name)
        if patch.base_url:
            provider.options.base_url = patch.base_url
        if patch.api_key:
            provider.options.api_key = patch.api_key
        if patch.npm is not None:
            provider.npm = patch.npm or None
        if patch.description is not None:
            provider.metadata.description = patch.description or None
        provider.touch()
        self.write(document)
        return provider

    def remove_provider(self, name: str) -> OpenCodeProvider:
        document = self.read()
        provider = document.providers.pop(name, None)
        if provider is None:
            raise ProviderNotFoundError(name)
        self.write(document)
        logger.info("Removed opencode provider '%s'", name)
        return provider

    # ------------------------------------------------------------------
    # Models
    # ------------------------------------------------------------------

    def get_models(self, provider_name: str) -> Dict[str, OpenCodeModelInfo]:
        provider = self._require_provider(self.read(), provider_name)
        return dict(provider.models)

    def add_model(
        self,
        provider_name: str,
        model_id: str,
        info: OpenCodeModelInfo,
    ) -> None:
        document = self.read()
        provider = self._require_provider(document, provider_name)
        if model_id in provider.models:
            raise ModelExistsError(provider_name, model_id)
        provider.models[model_id] = info
        provider.touch()
        self.write(document)

    def update_model(
        self,
        provider_name: str,
        model_id: str,
        info: OpenCodeModelInfo,
    ) -> None:
        document = self.read()
        provider = self._require_provider(document, provider_name)
        if model_id not in provider.models:
            raise ModelNotFoundError(provider_name, model_id)
        provider.models[model_id] = info
        provider.touch()
        self.write(document)

    def remove_model(self, provider_name: str, model_id: str) -> None:
        document = self.read()
        provider = self._require_provider(document, provider_name)
        if provider.models.pop(model_id, None) is None:
            raise ModelNotFoundError(provider_name, model_id)
        provider.touch()
        self.write(document)
