# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional

import click

from ..errors import SiteNotFoundError
from ..providers.models import ClaudeSettingsPatch
from .site_cmd import build_site_group
from .utils import echo_success, get_manager, reports_errors

claude_group = build_site_group("claude", "Claude Code")


@claude_group.command("config")
@click.argument("site")
@click.option("--base-url", default=None, help='API base URL ("" clears)')
@click.option("--model", default=None, help='ANTHROPIC_MODEL ("" clears)')
@click.option(
    "--vertex/--no-vertex",
    "vertex_enabled",
    default=None,
    help="Enable or disable Vertex AI mode",
)
@click.option("--vertex-project-id", default=None, help="Vertex project id")
@click.option("--vertex-base-url", default=None, help="Vertex base URL")
@click.option(
    "--skip-auth/--no-skip-auth",
    default=None,
    help="CLAUDE_CODE_SKIP_VERTEX_AUTH",
)
@click.pass_context
@reports_errors
def config_cmd(
    ctx: click.Context,
    site: str,
    base_url: Optional[str],
    model: Optional[str],
    vertex_enabled: Optional[bool],
    vertex_project_id: Optional[str],
    vertex_base_url: Optional[str],
    skip_auth: Optional[bool],
) -> None:
    """Edit the Claude settings of SITE."""
    store = get_manager(ctx).claude
    current = store.get_site(site)
    if current is None:
        raise SiteNotFoundError(site)

    vertex = None
    vertex_changes = {
        "enabled": vertex_enabled,
        "project_id": vertex_project_id,
        "base_url": vertex_base_url,
        "skip_auth": skip_auth,
    }
    if any(value is not None for value in vertex_changes.values()):
        vertex = current.config.vertex.model_copy()
        for key, value in vertex_changes.items():
            if value is None:
                continue
            setattr(vertex, key, value if value != "" else None)

    patch = ClaudeSettingsPatch(base_url=base_url, model=model, vertex=vertex)
    store.update_site_config(site, patch)
    echo_success(f"Updated Claude settings of '{site}'")
