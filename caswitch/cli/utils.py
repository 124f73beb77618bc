# -*- coding: utf-8 -*-
from __future__ import annotations

import functools
from typing import Callable, List, Optional, TypeVar

import click

from ..config import ConfigManager
from ..errors import ConfigError

F = TypeVar("F", bound=Callable)


def get_manager(ctx: click.Context) -> ConfigManager:
    """Return the ConfigManager created by the root group."""
    manager = (ctx.obj or {}).get("manager")
    if manager is None:
        manager = ConfigManager()
        ctx.ensure_object(dict)["manager"] = manager
    return manager


def echo_error(message: str) -> None:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)


def echo_success(message: str) -> None:
    click.echo(click.style(f"✓ {message}", fg="green"))


def reports_errors(func: F) -> F:
    """Turn ``ConfigError`` into a red message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigError as exc:
            echo_error(str(exc))
            raise SystemExit(1) from exc

    return wrapper  # type: ignore[return-value]


def prompt_choice(
    prompt_text: str,
    options: List[str],
    default: Optional[str] = None,
) -> str:
    """Pick one of *options* by number or by exact value."""
    for index, option in enumerate(options, start=1):
        click.echo(f"  {index}. {option}")
    numbers = [str(i) for i in range(1, len(options) + 1)]
    default_number = (
        str(options.index(default) + 1) if default in options else None
    )
    answer = click.prompt(
        prompt_text,
        type=click.Choice(numbers + options),
        default=default_number,
        show_choices=False,
    )
    if answer in numbers:
        return options[int(answer) - 1]
    return answer


def prompt_confirm(prompt_text: str, default: bool = False) -> bool:
    return click.confirm(prompt_text, default=default)


def field_line(label: str, value: Optional[object]) -> str:
    shown = "(not set)" if value is None or value == "" else value
    return f"  {label:24s}: {shown}"
