# -*- coding: utf-8 -*-
"""CLI commands for OpenCode providers, models and the main/small roles."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..errors import ConfigError
from ..providers.models import (
    OpenCodeModelInfo,
    OpenCodeModelLimit,
    OpenCodeProviderPatch,
    OpenCodeResolvedRole,
)
from ..utils import mask_api_key
from .utils import (
    echo_success,
    field_line,
    get_manager,
    prompt_choice,
    prompt_confirm,
    reports_errors,
)

DEFAULT_NPM = "@ai-sdk/openai-compatible"


@click.group("opencode")
def opencode_group() -> None:
    """Manage OpenCode providers, models and the active roles.

    \b
    Examples:
      caswitch opencode add-provider relay --base-url https://relay/v1
      caswitch opencode add-model relay gpt-4o --context 128000
      caswitch opencode switch --main relay gpt-4o --small relay gpt-4o-mini
      caswitch opencode apply ./my-project
    """


def _model_info(
    name: str,
    context: Optional[int],
    output: Optional[int],
) -> OpenCodeModelInfo:
    limit = None
    if context is not None or output is not None:
        limit = OpenCodeModelLimit(context=context, output=output)
    return OpenCodeModelInfo(name=name, limit=limit)


def _select_role(store, role: str) -> tuple:
    providers = store.list_providers()
    if not providers:
        raise ConfigError("No OpenCode providers configured")
    click.echo(f"\n{role} model:")
    provider = prompt_choice("Select provider", sorted(providers))
    models = sorted(providers[provider].models)
    if not models:
        raise ConfigError(f"Provider '{provider}' has no models")
    return provider, prompt_choice("Select model", models)


def _echo_role(label: str, role: OpenCodeResolvedRole) -> None:
    click.echo(f"  {label}:")
    click.echo(field_line("  provider", role.provider))
    click.echo(field_line("  model", f"{role.model} ({role.model_info.name})"))
    click.echo(field_line("  base URL", role.base_url))
    click.echo(field_line("  API key", mask_api_key(role.api_key)))


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@opencode_group.command("list")
@click.pass_context
@reports_errors
def list_cmd(ctx: click.Context) -> None:
    """Show all providers with their models."""
    manager = get_manager(ctx)
    providers = manager.opencode.list_providers()
    reference = manager.read_global_config().active.opencode
    if not providers:
        click.echo("No OpenCode providers configured.")
        return

    click.echo("\n=== OpenCode providers ===")
    for name, provider in sorted(providers.items()):
        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {name} ({provider.name})")
        click.echo(f"{'─' * 44}")
        click.echo(field_line("npm", provider.npm))
        click.echo(field_line("base URL", provider.options.base_url))
        click.echo(field_line("API key", mask_api_key(provider.options.api_key)))
        if provider.metadata.description:
            click.echo(field_line("description", provider.metadata.description))
        for model_id, info in sorted(provider.models.items()):
            roles = []
            if reference is not None:
                if (reference.main.provider, reference.main.model) == (
                    name,
                    model_id,
                ):
                    roles.append("main")
                if (reference.small.provider, reference.small.model) == (
                    name,
                    model_id,
                ):
                    roles.append("small")
            marker = f" [{', '.join(roles)}]" if roles else ""
            click.echo(f"    - {model_id}: {info.name}{marker}")
    click.echo()


# ---------------------------------------------------------------------------
# providers
# ---------------------------------------------------------------------------


@opencode_group.command("add-provider")
@click.argument("name")
@click.option("--base-url", required=True, help="options.baseURL")
@click.option(
    "--api-key",
    prompt="API key",
    hide_input=True,
    help="options.apiKey (prompted when omitted)",
)
@click.option("--npm", default=DEFAULT_NPM, show_default=True)
@click.option("--description", default=None)
@click.pass_context
@reports_errors
def add_provider_cmd(
    ctx: click.Context,
    name: str,
    base_url: str,
    api_key: str,
    npm: str,
    description: Optional[str],
) -> None:
    """Add a provider."""
    get_manager(ctx).opencode.add_provider(
        name,
        base_url=base_url,
        api_key=api_key,
        npm=npm,
        description=description,
    )
    echo_success(f"Added OpenCode provider '{name}'")


@opencode_group.command("edit-provider")
@click.argument("name")
@click.option("--base-url", default=None)
@click.option("--api-key", default=None)
@click.option("--npm", default=None, help='"" clears it')
@click.option("--description", default=None, help='"" clears it')
@click.pass_context
@reports_errors
def edit_provider_cmd(
    ctx: click.Context,
    name: str,
    base_url: Optional[str],
    api_key: Optional[str],
    npm: Optional[str],
    description: Optional[str],
) -> None:
    """Update a provider's endpoint, key, package or description."""
    patch = OpenCodeProviderPatch(
        base_url=base_url,
        api_key=api_key,
        npm=npm,
        description=description,
    )
    get_manager(ctx).opencode.update_provider(name, patch)
    echo_success(f"Updated OpenCode provider '{name}'")


@opencode_group.command("remove-provider")
@click.argument("name")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@reports_errors
def remove_provider_cmd(ctx: click.Context, name: str, yes: bool) -> None:
    """Remove a provider with all its models."""
    if not yes and not prompt_confirm(f"Remove provider '{name}'?"):
        click.echo("Cancelled.")
        return
    get_manager(ctx).opencode.remove_provider(name)
    echo_success(f"Removed OpenCode provider '{name}'")


# ---------------------------------------------------------------------------
# models
# ---------------------------------------------------------------------------


@opencode_group.command("add-model")
@click.argument("provider")
@click.argument("model_id")
@click.option("--name", "display_name", default=None, help="Display name")
@click.option("--context", type=int, default=None, help="Context limit")
@click.option("--output", type=int, default=None, help="Output limit")
@click.pass_context
@reports_errors
def add_model_cmd(
    ctx: click.Context,
    provider: str,
    model_id: str,
    display_name: Optional[str],
    context: Optional[int],
    output: Optional[int],
) -> None:
    """Add MODEL_ID to PROVIDER."""
    info = _model_info(display_name or model_id, context, output)
    get_manager(ctx).opencode.add_model(provider, model_id, info)
    echo_success(f"Added model '{model_id}' to '{provider}'")


@opencode_group.command("update-model")
@click.argument("provider")
@click.argument("model_id")
@click.option("--name", "display_name", default=None, help="Display name")
@click.option("--context", type=int, default=None, help="Context limit")
@click.option("--output", type=int, default=None, help="Output limit")
@click.pass_context
@reports_errors
def update_model_cmd(
    ctx: click.Context,
    provider: str,
    model_id: str,
    display_name: Optional[str],
    context: Optional[int],
    output: Optional[int],
) -> None:
    """Replace the entry of MODEL_ID in PROVIDER."""
    info = _model_info(display_name or model_id, context, output)
    get_manager(ctx).opencode.update_model(provider, model_id, info)
    echo_success(f"Updated model '{model_id}' of '{provider}'")


@opencode_group.command("remove-model")
@click.argument("provider")
@click.argument("model_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@reports_errors
def remove_model_cmd(
    ctx: click.Context,
    provider: str,
    model_id: str,
    yes: bool,
) -> None:
    """Remove MODEL_ID from PROVIDER."""
    if not yes and not prompt_confirm(
        f"Remove model '{model_id}' from '{provider}'?",
    ):
        click.echo("Cancelled.")
        return
    get_manager(ctx).opencode.remove_model(provider, model_id)
    echo_success(f"Removed model '{model_id}' from '{provider}'")


# ---------------------------------------------------------------------------
# active roles
# ---------------------------------------------------------------------------


@opencode_group.command("switch")
@click.option("--main", "main", nargs=2, default=None, metavar="PROVIDER MODEL")
@click.option("--small", "small", nargs=2, default=None, metavar="PROVIDER MODEL")
@click.pass_context
@reports_errors
def switch_cmd(
    ctx: click.Context,
    main: Optional[tuple],
    small: Optional[tuple],
) -> None:
    """Select the main and small models and sync opencode.json.

    Roles not given on the command line are asked for interactively;
    ``--small`` defaults to ``--main`` when only the latter is given.
    """
    manager = get_manager(ctx)
    if not small and main:
        small = main
    if not main:
        main = _select_role(manager.opencode, "Main")
    if not small:
        small = _select_role(manager.opencode, "Small")
    manager.switch_opencode(main[0], main[1], small[0], small[1])
    echo_success(
        f"OpenCode: main={main[0]}/{main[1]} small={small[0]}/{small[1]}",
    )


@opencode_group.command("sync")
@click.pass_context
@reports_errors
def sync_cmd(ctx: click.Context) -> None:
    """Re-write the global opencode.json from the active roles."""
    for path in get_manager(ctx).sync_opencode():
        echo_success(f"Wrote {path}")


@opencode_group.command("apply")
@click.argument(
    "project_dir",
    required=False,
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.pass_context
@reports_errors
def apply_cmd(ctx: click.Context, project_dir: Optional[Path]) -> None:
    """Write the active config to PROJECT_DIR/.opencode/opencode.json.

    PROJECT_DIR defaults to the current directory.
    """
    for path in get_manager(ctx).apply_opencode(project_dir):
        echo_success(f"Wrote {path}")


@opencode_group.command("clear")
@click.pass_context
@reports_errors
def clear_cmd(ctx: click.Context) -> None:
    """Forget the active roles (opencode.json is kept)."""
    get_manager(ctx).clear_opencode_active()
    echo_success("Cleared active OpenCode selection")


@opencode_group.command("show")
@click.pass_context
@reports_errors
def show_cmd(ctx: click.Context) -> None:
    """Show the resolved main / small roles."""
    active = get_manager(ctx).get_active_opencode()
    if active is None:
        click.echo("OpenCode: (not configured)")
        return
    click.echo("\n=== Active OpenCode configuration ===")
    _echo_role("main", active.main)
    _echo_role("small", active.small)
    click.echo(field_line("providers written", ", ".join(active.providers)))
    click.echo()
