# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional

import click

from ..providers.models import CodexSettingsPatch
from .site_cmd import build_site_group
from .utils import echo_success, get_manager, reports_errors

codex_group = build_site_group("codex", "Codex")


@codex_group.command("config")
@click.argument("site")
@click.option("--base-url", default=None, help='Provider base URL ("" clears)')
@click.option("--model", default=None, help='Model name ("" clears)')
@click.option(
    "--reasoning-effort",
    "model_reasoning_effort",
    default=None,
    help="model_reasoning_effort, e.g. high",
)
@click.option(
    "--provider-id",
    "model_provider",
    default=None,
    help="Provider id in config.toml (defaults to the site name)",
)
@click.option(
    "--network-access",
    type=click.Choice(["enabled", "disabled", ""]),
    default=None,
    help="Sandbox network access",
)
@click.option(
    "--disable-response-storage/--enable-response-storage",
    default=None,
    help="disable_response_storage",
)
@click.option("--wire-api", default=None, help='Wire protocol, e.g. "responses"')
@click.pass_context
@reports_errors
def config_cmd(
    ctx: click.Context,
    site: str,
    base_url: Optional[str],
    model: Optional[str],
    model_reasoning_effort: Optional[str],
    model_provider: Optional[str],
    network_access: Optional[str],
    disable_response_storage: Optional[bool],
    wire_api: Optional[str],
) -> None:
    """Edit the Codex settings of SITE."""
    patch = CodexSettingsPatch(
        base_url=base_url,
        model=model,
        model_reasoning_effort=model_reasoning_effort,
        model_provider=model_provider,
        network_access=network_access,
        disable_response_storage=disable_response_storage,
        wire_api=wire_api,
    )
    get_manager(ctx).codex.update_site_config(site, patch)
    echo_success(f"Updated Codex settings of '{site}'")
