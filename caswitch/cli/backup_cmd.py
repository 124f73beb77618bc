# -*- coding: utf-8 -*-
"""CLI commands for local backup snapshots."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

import click

from ..backup import (
    backup_categories,
    collect_backup_data,
    load_snapshot,
    restore_backup_data,
    save_snapshot,
)
from .utils import echo_success, get_manager, prompt_confirm, reports_errors


def _category_option():
    return click.option(
        "--category",
        "categories",
        multiple=True,
        help="Limit to a category (repeatable): caswitch, claude, codex, "
        "gemini, opencode",
    )


@click.group("backup")
def backup_group() -> None:
    """Export or restore a snapshot of every managed file.

    \b
    Examples:
      caswitch backup export snapshot.json
      caswitch backup restore snapshot.json --category claude
    """


@backup_group.command("export")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@_category_option()
@click.pass_context
@reports_errors
def export_cmd(
    ctx: click.Context,
    output: Path,
    categories: Tuple[str, ...],
) -> None:
    """Write a snapshot of the managed files to OUTPUT."""
    paths = get_manager(ctx).paths
    snapshot = collect_backup_data(paths, categories or None)
    save_snapshot(output, snapshot)
    echo_success(f"Saved {snapshot.file_count()} file(s) to {output}")


@backup_group.command("restore")
@click.argument(
    "snapshot_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@_category_option()
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@reports_errors
def restore_cmd(
    ctx: click.Context,
    snapshot_file: Path,
    categories: Tuple[str, ...],
    yes: bool,
) -> None:
    """Overwrite the managed files with the contents of SNAPSHOT_FILE."""
    paths = get_manager(ctx).paths
    snapshot = load_snapshot(snapshot_file)
    known = backup_categories(paths)
    names = list(categories) or list(snapshot.categories)
    click.echo(f"Snapshot from {snapshot.created_at}:")
    for name in names:
        root = known[name].root if name in known else "?"
        count = len(snapshot.categories.get(name, {}))
        click.echo(f"  {name:10s} {count:3d} file(s) -> {root}")
    if not yes and not prompt_confirm("Overwrite these files?"):
        click.echo("Cancelled.")
        return
    written = restore_backup_data(paths, snapshot, names)
    echo_success(f"Restored {len(written)} file(s)")
