# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .. import __version__
from ..config import ConfigManager, Paths
from ..constant import LOG_LEVEL_ENV
from .backup_cmd import backup_group
from .claude_cmd import claude_group
from .codex_cmd import codex_group
from .gemini_cmd import gemini_group
from .opencode_cmd import opencode_group
from .utils import field_line, get_manager, reports_errors

LOG_LEVELS = ["debug", "info", "warning", "error"]


@click.group()
@click.version_option(__version__, prog_name="caswitch")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    envvar=LOG_LEVEL_ENV,
    show_default=True,
    help="Logging verbosity",
)
@click.option(
    "--working-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding caswitch's own documents",
)
@click.option(
    "--home",
    "home_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Base directory of the tools' config dirs (~/.claude, ...)",
)
@click.pass_context
@reports_errors
def cli(
    ctx: click.Context,
    log_level: str,
    working_dir: Optional[Path],
    home_dir: Optional[Path],
) -> None:
    """Switch API endpoints and keys of Claude Code, Codex, Gemini CLI
    and OpenCode."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    paths = Paths.from_env(working_dir=working_dir, home_dir=home_dir)
    ctx.ensure_object(dict)["manager"] = ConfigManager(paths)


@cli.command("status")
@click.pass_context
@reports_errors
def status_cmd(ctx: click.Context) -> None:
    """Show the active selection of every family."""
    manager = get_manager(ctx)
    active = manager.read_global_config().active
    click.echo(f"\n=== caswitch ({manager.paths.working_dir}) ===")
    for family in ("claude", "codex", "gemini"):
        reference = getattr(active, family)
        if reference is None:
            click.echo(field_line(family, None))
            continue
        key_name = getattr(reference, "token_name", None) or getattr(
            reference,
            "api_key_name",
        )
        click.echo(field_line(family, f"{reference.site} / {key_name}"))
    if active.opencode is None:
        click.echo(field_line("opencode", None))
    else:
        main, small = active.opencode.main, active.opencode.small
        click.echo(
            field_line(
                "opencode",
                f"main={main.provider}/{main.model} "
                f"small={small.provider}/{small.model}",
            ),
        )
    click.echo()


cli.add_command(claude_group)
cli.add_command(codex_group)
cli.add_command(gemini_group)
cli.add_command(opencode_group)
cli.add_command(backup_group)


def main() -> None:
    load_dotenv()
    cli()  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
