# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional

import click

from ..providers.models import GeminiSettingsPatch
from ..utils import mask_api_key
from .site_cmd import build_site_group
from .utils import echo_success, field_line, get_manager, reports_errors

gemini_group = build_site_group("gemini", "Gemini CLI")


@gemini_group.command("config")
@click.argument("site")
@click.option("--base-url", default=None, help='GOOGLE_GEMINI_BASE_URL ("" clears)')
@click.option("--model", default=None, help='GEMINI_MODEL ("" clears)')
@click.pass_context
@reports_errors
def config_cmd(
    ctx: click.Context,
    site: str,
    base_url: Optional[str],
    model: Optional[str],
) -> None:
    """Edit the Gemini settings of SITE."""
    patch = GeminiSettingsPatch(base_url=base_url, model=model)
    get_manager(ctx).gemini.update_site_config(site, patch)
    echo_success(f"Updated Gemini settings of '{site}'")


@gemini_group.command("env")
@click.pass_context
@reports_errors
def env_cmd(ctx: click.Context) -> None:
    """Show the variables currently written to ~/.gemini/.env."""
    synchronizer = get_manager(ctx).gemini_sync
    values = synchronizer.read_env()
    if not values:
        click.echo(f"{synchronizer.env_file}: (empty or missing)")
        return
    click.echo(f"\n=== {synchronizer.env_file} ===")
    for key, value in values.items():
        if key.endswith("API_KEY"):
            value = mask_api_key(value or "")
        click.echo(field_line(key, value))
    click.echo()
