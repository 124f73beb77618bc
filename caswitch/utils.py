# -*- coding: utf-8 -*-
"""Small file helpers shared by stores and synchronizers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .errors import SyncError

logger = logging.getLogger(__name__)


def read_json_object(path: Path) -> Optional[dict]:
    """Return the JSON object stored at *path*.

    Returns ``None`` when the file is missing, unreadable as JSON, or does
    not hold an object; callers fall back to a default document.
    """
    if not path.is_file():
        return None
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as exc:
        logger.warning("Ignoring malformed JSON in %s: %s", path, exc)
        return None
    if not isinstance(raw, dict):
        logger.warning("Ignoring %s: top-level value is not an object", path)
        return None
    return raw


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_text(path: Path, content: str) -> None:
    """Write *content* to *path*, creating parent directories first.

    Any ``OSError`` is raised as :class:`SyncError`.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as exc:
        raise SyncError(path, str(exc)) from exc
    logger.debug("Wrote %s (%d bytes)", path, len(content))


def write_json(path: Path, data: Any) -> None:
    write_text(path, dump_json(data))


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
