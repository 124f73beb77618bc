# -*- coding: utf-8 -*-
"""Synchronizers projecting active configs into each tool's own files."""

from .base import Synchronizer
from .claude import ClaudeSynchronizer
from .codex import CodexSynchronizer
from .gemini import GeminiSynchronizer
from .opencode import OpenCodeSynchronizer

__all__ = [
    "ClaudeSynchronizer",
    "CodexSynchronizer",
    "GeminiSynchronizer",
    "OpenCodeSynchronizer",
    "Synchronizer",
]
