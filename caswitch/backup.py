# -*- coding: utf-8 -*-
"""Point-in-time snapshots of caswitch documents and tool config files.

Files are captured as opaque text, grouped by category and keyed by their
path relative to the category root. Stores are read as raw documents; no
resolution or synchronization takes place.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from .config.paths import Paths
from .constant import (
    CLAUDE_SETTINGS_FILE,
    CODEX_AUTH_JSON,
    CODEX_CONFIG_TOML,
    CONFIG_VERSION,
    GEMINI_ENV_FILE,
    GEMINI_SETTINGS_FILE,
    OPENCODE_JSON,
)
from .errors import ConfigError, SerializationError
from .providers.models import now_timestamp
from .utils import dump_json, write_text

logger = logging.getLogger(__name__)


class CategoryPaths(BaseModel):
    name: str
    root: Path
    files: List[str] = Field(default_factory=list)
    directories: List[str] = Field(default_factory=list)


class BackupSnapshot(BaseModel):
    version: str = CONFIG_VERSION
    created_at: str = Field(default_factory=now_timestamp)
    categories: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    def file_count(self) -> int:
        return sum(len(files) for files in self.categories.values())


def backup_categories(paths: Paths) -> Dict[str, CategoryPaths]:
    return {
        "caswitch": CategoryPaths(
            name="caswitch documents",
            root=paths.working_dir,
            files=[
                p.name
                for p in (
                    paths.global_config_file,
                    paths.claude_store_file,
                    paths.codex_store_file,
                    paths.gemini_store_file,
                    paths.opencode_store_file,
                )
            ],
        ),
        "claude": CategoryPaths(
            name="Claude Code",
            root=paths.claude_dir,
            files=[CLAUDE_SETTINGS_FILE, "CLAUDE.md"],
            directories=["agents", "commands", "skills"],
        ),
        "codex": CategoryPaths(
            name="Codex",
            root=paths.codex_dir,
            files=[CODEX_CONFIG_TOML, CODEX_AUTH_JSON, "AGENTS.md"],
        ),
        "gemini": CategoryPaths(
            name="Gemini CLI",
            root=paths.gemini_dir,
            files=[GEMINI_ENV_FILE, GEMINI_SETTINGS_FILE],
        ),
        "opencode": CategoryPaths(
            name="OpenCode",
            root=paths.opencode_dir,
            files=[OPENCODE_JSON],
        ),
    }


def _select(
    categories: Dict[str, CategoryPaths],
    names: Optional[Iterable[str]],
) -> List[Tuple[str, CategoryPaths]]:
    if names is None:
        return list(categories.items())
    selected = []
    for name in names:
        if name not in categories:
            raise ConfigError(f"Unknown backup category '{name}'")
        selected.append((name, categories[name]))
    return selected


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning("Skipping non-text file %s", path)
        return None
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc


def collect_category(category: CategoryPaths) -> Dict[str, str]:
    collected: Dict[str, str] = {}
    for name in category.files:
        path = category.root / name
        if path.is_file():
            text = _read_text(path)
            if text is not None:
                collected[name] = text
    for name in category.directories:
        directory = category.root / name
        if not directory.is_dir():
            continue
        for path in sorted(directory.rglob("*")):
            if not path.is_file():
                continue
            text = _read_text(path)
            if text is not None:
                key = path.relative_to(category.root).as_posix()
                collected[key] = text
    return collected


def collect_backup_data(
    paths: Paths,
    categories: Optional[Iterable[str]] = None,
) -> BackupSnapshot:
    snapshot = BackupSnapshot()
    for name, category in _select(backup_categories(paths), categories):
        files = collect_category(category)
        snapshot.categories[name] = files
        logger.debug("Collected %d file(s) for %s", len(files), name)
    return snapshot


def _safe_target(root: Path, relative: str) -> Path:
    rel = PurePosixPath(relative)
    if rel.is_absolute() or ".." in rel.parts:
        raise ConfigError(f"Refusing to restore outside {root}: {relative}")
    return root.joinpath(*rel.parts)


def restore_backup_data(
    paths: Paths,
    snapshot: BackupSnapshot,
    categories: Optional[Iterable[str]] = None,
) -> List[Path]:
    """Write every captured file back under its category root.

    Files absent from the snapshot are left alone.
    """
    known = backup_categories(paths)
    if categories is None:
        categories = list(snapshot.categories)
    written: List[Path] = []
    for name, category in _select(known, categories):
        for relative, text in snapshot.categories.get(name, {}).items():
            target = _safe_target(category.root, relative)
            write_text(target, text)
            written.append(target)
    logger.info("Restored %d file(s)", len(written))
    return written


def save_snapshot(path: Path, snapshot: BackupSnapshot) -> None:
    write_text(Path(path), dump_json(snapshot.model_dump(mode="json")))


def load_snapshot(path: Path) -> BackupSnapshot:
    """Strictly load a snapshot file; anything malformed is an error."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return BackupSnapshot.model_validate(raw)
    except OSError as exc:
        raise ConfigError(f"Cannot read snapshot {path}: {exc}") from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise SerializationError(f"Invalid snapshot {path}: {exc}") from exc
