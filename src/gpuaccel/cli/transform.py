"""CLI command: gpuaccel transform -- inject GPU hints into a stylesheet."""

from __future__ import annotations

import logging
import sys

import click

from gpuaccel.cli.options import config_options, load_config
from gpuaccel.pipeline import accelerate


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Where to write the result (default: stdout)",
)
@config_options
@click.option(
    "--transform/--no-transform",
    "enable_transform",
    default=None,
    help="Inject transform: translateZ(0)",
)
@click.option(
    "--will-change/--no-will-change",
    "enable_will_change",
    default=None,
    help="Inject will-change: transform",
)
@click.option(
    "--backface/--no-backface",
    "enable_backface",
    default=None,
    help="Inject backface-visibility: hidden",
)
@click.option(
    "--perspective/--no-perspective",
    "enable_perspective",
    default=None,
    help="Inject perspective: 1000px",
)
@click.option("--compact", is_flag=True, help="Emit minified CSS")
@click.option(
    "--strict", is_flag=True, help="Fail instead of passing unparseable CSS through"
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def transform(
    source,
    output,
    config_path: str | None,
    exclude: str | None,
    target: str | None,
    enable_transform: bool | None,
    enable_will_change: bool | None,
    enable_backface: bool | None,
    enable_perspective: bool | None,
    compact: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """Inject GPU-acceleration declarations into a CSS file.

    SOURCE may be '-' to read from stdin.  When the stylesheet cannot be
    parsed it is written out unchanged (or, with --strict, the command fails).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(
        config_path,
        exclude,
        target,
        enable_transform=enable_transform,
        enable_will_change=enable_will_change,
        enable_backface=enable_backface,
        enable_perspective=enable_perspective,
    )
    if not config.any_enabled:
        click.echo(
            "Warning: every GPU declaration is disabled; rules are only re-serialized",
            err=True,
        )

    report = accelerate(source.read(), config, compact=compact)

    if report.fell_back:
        click.echo(f"Parse error: {report.error}", err=True)
        if strict:
            sys.exit(1)

    output.write(report.output)

    if not report.fell_back:
        click.echo(
            f"Accelerated {report.rules_changed} of {report.rules_total} rule block(s) "
            f"({report.rules_matched} matched)",
            err=True,
        )
