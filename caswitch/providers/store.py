# -*- coding: utf-8 -*-
"""Reading and writing the per-family site stores (claude.json, ...).

Every mutator follows the same cycle: read the whole document, modify it,
write the whole document back. There is no batching and no locking; two
processes editing the same store concurrently can lose an update.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import (
    SecretExistsError,
    SecretNotFoundError,
    SerializationError,
    SiteExistsError,
    SiteNotFoundError,
)
from ..utils import read_json_object, write_json
from .models import (
    BaseSite,
    ClaudeConfig,
    ClaudeSettingsPatch,
    ClaudeSite,
    CodexConfig,
    CodexSettingsPatch,
    CodexSite,
    GeminiConfig,
    GeminiSettingsPatch,
    GeminiSite,
    SiteMetadata,
    SiteMetadataPatch,
    apply_patch,
)

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", bound=BaseModel)
SiteT = TypeVar("SiteT", bound=BaseSite)


def load_document(path: Path, document_cls: Type[DocT]) -> DocT:
    """Load a store document, falling back to an empty one.

    A missing file, invalid JSON, or a document that does not match the
    schema all yield ``document_cls()``.
    """
    raw = read_json_object(path)
    if raw is None:
        return document_cls()
    try:
        return document_cls.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            "Ignoring %s: does not match %s (%d errors)",
            path,
            document_cls.__name__,
            exc.error_count(),
        )
        return document_cls()


def save_document(path: Path, document: BaseModel) -> None:
    """Serialize *document* and write it to *path* (whole file)."""
    try:
        data = document.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
        )
    except PydanticSerializationError as exc:
        raise SerializationError(
            f"Cannot serialize {type(document).__name__}: {exc}",
        ) from exc
    write_json(path, data)


class SiteStore(Generic[DocT, SiteT]):
    """Credential store of one site-based family."""

    family: str = ""
    document_cls: Type[DocT]
    site_cls: Type[SiteT]
    settings_patch_cls: Type[BaseModel]

    def __init__(self, path: Path):
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Load / Save
    # ------------------------------------------------------------------

    def read(self) -> DocT:
        return load_document(self.path, self.document_cls)

    def write(self, document: DocT) -> None:
        save_document(self.path, document)
        logger.debug("Saved %s store to %s", self.family, self.path)

    # ------------------------------------------------------------------
    # Sites
    # ------------------------------------------------------------------

    def list_sites(self) -> Dict[str, SiteT]:
        return dict(self.read().sites)

    def get_site(self, name: str) -> Optional[SiteT]:
        return self.read().sites.get(name)

    @staticmethod
    def _require_site(document, name: str):
        site = document.sites.get(name)
        if site is None:
            raise SiteNotFoundError(name)
        return site

    def add_site(
        self,
        name: str,
        url: str,
        description: Optional[str] = None,
    ) -> SiteT:
        document = self.read()
        if name in document.sites:
            raise SiteExistsError(name)
        site = self.site_cls(
            metadata=SiteMetadata(url=url, description=description or None),
        )
        document.sites[name] = site
        self.write(document)
        logger.info("Added %s site '%s'", self.family, name)
        return site

    def update_site_metadata(self, name: str, patch: SiteMetadataPatch) -> SiteT:
        document = self.read()
        site = self._require_site(document, name)
        apply_patch(site.metadata, patch)
        site.touch()
        self.write(document)
        return site

    def update_site_config(self, name: str, patch: BaseModel) -> SiteT:
        if not isinstance(patch, self.settings_patch_cls):
            raise TypeError(
                f"{self.family} settings expect "
                f"{self.settings_patch_cls.__name__}",
            )
        document = self.read()
        site = self._require_site(document, name)
        apply_patch(site.config, patch)
        site.touch()
        self.write(document)
        return site

    def remove_site(self, name: str) -> SiteT:
        """Remove a site.

        Active references pointing at it are left in place and fail on
        their next resolution.
        """
        document = self.read()
        site = document.sites.pop(name, None)
        if site is None:
            raise SiteNotFoundError(name)
        self.write(document)
        logger.info("Removed %s site '%s'", self.family, name)
        return site

    # ------------------------------------------------------------------
    # Secrets
    # ------------------------------------------------------------------

    def get_secrets(self, site_name: str) -> Dict[str, str]:
        return dict(self._require_site(self.read(), site_name).secrets)

    def add_secret(self, site_name: str, name: str, value: str) -> None:
        document = self.read()
        site = self._require_site(document, site_name)
        if name in site.secrets:
            raise SecretExistsError(site_name, name)
        site.secrets[name] = value
        site.touch()
        self.write(document)

    def update_secret(self, site_name: str, name: str, value: str) -> None:
        document = self.read()
        site = self._require_site(document, site_name)
        if name not in site.secrets:
            raise SecretNotFoundError(site_name, name)
        site.secrets[name] = value
        site.touch()
        self.write(document)

    def remove_secret(self, site_name: str, name: str) -> None:
        document = self.read()
        site = self._require_site(document, site_name)
        if site.secrets.pop(name, None) is None:
            raise SecretNotFoundError(site_name, name)
        site.touch()
        self.write(document)


class ClaudeStore(SiteStore[ClaudeConfig, ClaudeSite]):
    family = "claude"
    document_cls = ClaudeConfig
    site_cls = ClaudeSite
    settings_patch_cls = ClaudeSettingsPatch


class CodexStore(SiteStore[CodexConfig, CodexSite]):
    family = "codex"
    document_cls = CodexConfig
    site_cls = CodexSite
    settings_patch_cls = CodexSettingsPatch


class GeminiStore(SiteStore[GeminiConfig, GeminiSite]):
    family = "gemini"
    document_cls = GeminiConfig
    site_cls = GeminiSite
    settings_patch_cls = GeminiSettingsPatch
