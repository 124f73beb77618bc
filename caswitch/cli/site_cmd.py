# -*- coding: utf-8 -*-
"""Commands shared by the site-based families (claude / codex / gemini)."""
from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple

import click

from ..errors import ConfigError
from ..providers.models import SiteMetadataPatch
from ..utils import mask_api_key
from .utils import (
    echo_success,
    field_line,
    get_manager,
    prompt_choice,
    prompt_confirm,
    reports_errors,
)

# Shown masked
_SECRET_FIELDS = {"token", "api_key"}


def flatten(data: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from flatten(value, prefix=f"{name}.")
        else:
            yield name, value


def describe_active(active) -> None:
    for key, value in flatten(active.model_dump(exclude_none=True)):
        if key in _SECRET_FIELDS:
            value = mask_api_key(value)
        click.echo(field_line(key, value))


def _store(ctx: click.Context, family: str):
    return getattr(get_manager(ctx), family)


def _active_reference(ctx: click.Context, family: str):
    return getattr(get_manager(ctx).read_global_config().active, family)


def build_site_group(family: str, title: str) -> click.Group:
    """Build the ``<family>`` command group with the common commands.

    Family modules add their own ``config`` command on top.
    """

    @click.group(family, help=f"Manage {title} sites, keys and the active one.")
    def group() -> None:
        pass

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    @group.command("list")
    @click.pass_context
    @reports_errors
    def list_cmd(ctx: click.Context) -> None:
        """Show all sites, their keys (masked) and settings."""
        sites = _store(ctx, family).list_sites()
        reference = _active_reference(ctx, family)
        if not sites:
            click.echo(f"No {title} sites configured.")
            return
        click.echo(f"\n=== {title} sites ===")
        for name, site in sorted(sites.items()):
            active = reference is not None and reference.site == name
            marker = " (active)" if active else ""
            click.echo(f"\n{'─' * 44}")
            click.echo(f"  {name}{marker}")
            click.echo(f"{'─' * 44}")
            click.echo(field_line("url", site.metadata.url))
            if site.metadata.description:
                click.echo(field_line("description", site.metadata.description))
            for key, value in flatten(site.config.model_dump(exclude_none=True)):
                click.echo(field_line(key, value))
            for key_name, secret in sorted(site.secrets.items()):
                click.echo(field_line(f"key {key_name}", mask_api_key(secret)))
        click.echo()

    # ------------------------------------------------------------------
    # sites
    # ------------------------------------------------------------------

    @group.command("add-site")
    @click.argument("name")
    @click.option("--url", required=True, help="Site URL")
    @click.option("--description", default=None, help="Optional description")
    @click.pass_context
    @reports_errors
    def add_site_cmd(
        ctx: click.Context,
        name: str,
        url: str,
        description: Optional[str],
    ) -> None:
        """Add a site."""
        _store(ctx, family).add_site(name, url, description)
        echo_success(f"Added {title} site '{name}'")

    @group.command("edit-site")
    @click.argument("name")
    @click.option("--url", default=None, help="New site URL")
    @click.option(
        "--description",
        default=None,
        help='New description ("" clears it)',
    )
    @click.pass_context
    @reports_errors
    def edit_site_cmd(
        ctx: click.Context,
        name: str,
        url: Optional[str],
        description: Optional[str],
    ) -> None:
        """Update a site's URL / description."""
        patch = SiteMetadataPatch(url=url, description=description)
        _store(ctx, family).update_site_metadata(name, patch)
        echo_success(f"Updated {title} site '{name}'")

    @group.command("remove-site")
    @click.argument("name")
    @click.option("--yes", is_flag=True, help="Do not ask for confirmation")
    @click.pass_context
    @reports_errors
    def remove_site_cmd(ctx: click.Context, name: str, yes: bool) -> None:
        """Remove a site with all its keys."""
        if not yes and not prompt_confirm(f"Remove site '{name}'?"):
            click.echo("Cancelled.")
            return
        _store(ctx, family).remove_site(name)
        echo_success(f"Removed {title} site '{name}'")

    # ------------------------------------------------------------------
    # keys
    # ------------------------------------------------------------------

    @group.command("add-key")
    @click.argument("site")
    @click.argument("key_name")
    @click.option(
        "--value",
        prompt="Secret value",
        hide_input=True,
        help="Secret value (prompted when omitted)",
    )
    @click.pass_context
    @reports_errors
    def add_key_cmd(
        ctx: click.Context,
        site: str,
        key_name: str,
        value: str,
    ) -> None:
        """Add a named key/token to a site."""
        _store(ctx, family).add_secret(site, key_name, value)
        echo_success(f"Added key '{key_name}' to '{site}'")

    @group.command("update-key")
    @click.argument("site")
    @click.argument("key_name")
    @click.option(
        "--value",
        prompt="New secret value",
        hide_input=True,
        help="Secret value (prompted when omitted)",
    )
    @click.pass_context
    @reports_errors
    def update_key_cmd(
        ctx: click.Context,
        site: str,
        key_name: str,
        value: str,
    ) -> None:
        """Replace the value of an existing key."""
        _store(ctx, family).update_secret(site, key_name, value)
        echo_success(f"Updated key '{key_name}' of '{site}'")

    @group.command("remove-key")
    @click.argument("site")
    @click.argument("key_name")
    @click.option("--yes", is_flag=True, help="Do not ask for confirmation")
    @click.pass_context
    @reports_errors
    def remove_key_cmd(
        ctx: click.Context,
        site: str,
        key_name: str,
        yes: bool,
    ) -> None:
        """Remove a key from a site."""
        if not yes and not prompt_confirm(
            f"Remove key '{key_name}' from '{site}'?",
        ):
            click.echo("Cancelled.")
            return
        _store(ctx, family).remove_secret(site, key_name)
        echo_success(f"Removed key '{key_name}' from '{site}'")

    # ------------------------------------------------------------------
    # active selection
    # ------------------------------------------------------------------

    @group.command("switch")
    @click.argument("site", required=False, default=None)
    @click.argument("key_name", required=False, default=None)
    @click.pass_context
    @reports_errors
    def switch_cmd(
        ctx: click.Context,
        site: Optional[str],
        key_name: Optional[str],
    ) -> None:
        """Activate SITE / KEY_NAME and sync it to the tool's files.

        Missing arguments are asked for interactively.
        """
        store = _store(ctx, family)
        if site is None:
            sites = sorted(store.list_sites())
            if not sites:
                raise ConfigError(f"No {title} sites configured")
            site = prompt_choice("Select site", sites)
        if key_name is None:
            keys = sorted(store.get_secrets(site))
            if not keys:
                raise ConfigError(f"Site '{site}' has no keys")
            key_name = prompt_choice("Select key", keys)
        switch = getattr(get_manager(ctx), f"switch_{family}")
        switch(site, key_name)
        echo_success(f"{title}: {site} / {key_name}")

    @group.command("sync")
    @click.pass_context
    @reports_errors
    def sync_cmd(ctx: click.Context) -> None:
        """Re-write the tool's files from the active selection."""
        written = getattr(get_manager(ctx), f"sync_{family}")()
        for path in written:
            echo_success(f"Wrote {path}")

    @group.command("clear")
    @click.pass_context
    @reports_errors
    def clear_cmd(ctx: click.Context) -> None:
        """Forget the active selection (the tool's files are kept)."""
        getattr(get_manager(ctx), f"clear_{family}_active")()
        echo_success(f"Cleared active {title} selection")

    @group.command("show")
    @click.pass_context
    @reports_errors
    def show_cmd(ctx: click.Context) -> None:
        """Show the resolved active configuration."""
        active = getattr(get_manager(ctx), f"get_active_{family}")()
        if active is None:
            click.echo(f"{title}: (not configured)")
            return
        click.echo(f"\n=== Active {title} configuration ===")
        describe_active(active)
        click.echo()

    return group
