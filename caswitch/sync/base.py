# -*- coding: utf-8 -*-
"""Base class for projecting an active config into a tool's own files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, List, TypeVar

from pydantic import BaseModel

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class Synchronizer(ABC, Generic[ConfigT]):
    """Writes one family's active configuration to the external tool.

    A failed write raises :class:`~caswitch.errors.SyncError` and aborts the
    remaining writes of the same call; files already written stay written.
    """

    family: str = ""

    @abstractmethod
    def sync(self, config: ConfigT) -> List[Path]:
        """Write every target file. Returns the paths written, in order."""

    @abstractmethod
    def target_paths(self) -> List[Path]:
        """Files this synchronizer writes (or merges into)."""
