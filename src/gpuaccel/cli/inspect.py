"""CLI command: gpuaccel inspect -- show which rule blocks would be accelerated."""

from __future__ import annotations

import sys

import click

from gpuaccel.cli.options import config_options, load_config
from gpuaccel.css import CSSError, parse_stylesheet
from gpuaccel.matcher import has_target_property, is_excluded


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@config_options
def inspect(
    source, config_path: str | None, exclude: str | None, target: str | None
) -> None:
    """Parse a CSS file and list every rule block with its match status.

    Status is one of: match (would be accelerated), excluded (a selector
    contains an exclude entry), skip (no targeted property).
    """
    config = load_config(config_path, exclude, target)

    try:
        sheet = parse_stylesheet(source.read())
    except CSSError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    counts = {"match": 0, "excluded": 0, "skip": 0}
    for parents, rule in sheet.walk():
        if is_excluded(rule, config):
            status = "excluded"
        elif has_target_property(rule, config):
            status = "match"
        else:
            status = "skip"
        counts[status] += 1

        context = "".join(_at_rule_label(p) + " > " for p in parents)
        click.echo(f"{status:<9}{context}{', '.join(rule.selectors)}")

    click.echo()
    click.echo(
        f"Summary: {counts['match']} match, {counts['excluded']} excluded, "
        f"{counts['skip']} skip"
    )


def _at_rule_label(node) -> str:
    return f"@{node.name} {node.prelude}" if node.prelude else f"@{node.name}"
