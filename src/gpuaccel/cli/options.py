"""Configuration options shared by the CLI commands."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from gpuaccel.config import AcceleratorConfig, ConfigError, split_list


def config_options(func):
    """Attach ``--config``, ``--exclude`` and ``--target`` to a command."""
    func = click.option(
        "--target",
        default=None,
        help="Comma-separated property substrings to target (replaces config)",
    )(func)
    func = click.option(
        "--exclude",
        default=None,
        help="Comma-separated selector substrings to skip (replaces config)",
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="JSON options file",
    )(func)
    return func


def load_config(
    config_path: str | None,
    exclude: str | None,
    target: str | None,
    **flags: bool | None,
) -> AcceleratorConfig:
    """Build the effective config, exiting with code 1 on a bad options file.

    ``flags`` holds ``enable_*`` overrides; ``None`` keeps the loaded value.
    """
    try:
        config = (
            AcceleratorConfig.load(Path(config_path))
            if config_path
            else AcceleratorConfig()
        )
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    changes: dict[str, object] = {k: v for k, v in flags.items() if v is not None}
    if exclude is not None:
        changes["exclude_selectors"] = split_list(exclude)
    if target is not None:
        changes["target_properties"] = split_list(target)
    return replace(config, **changes) if changes else config
