"""CLI command: cssdedupe lint -- report what dedupe would drop."""

from __future__ import annotations

import sys

import click

from cssdedupe.config import DedupeConfig
from cssdedupe.parser import ParseError
from cssdedupe.processor import CssProcessor


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8", help="Text encoding of CSSFILE")
def lint(cssfile: str, encoding: str) -> None:
    """Report parse warnings and redundant declarations in CSSFILE.

    Nothing is written.  Exits with code 0 when the stylesheet is clean, or
    code 1 if anything would be dropped or the file cannot be split.
    """
    config = DedupeConfig(encoding=encoding, dry_run=True)
    processor = CssProcessor(cssfile, config=config)

    try:
        result = processor.process()
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not result.warnings and not result.removals:
        click.echo(f"OK: {processor.css_path.name} has no redundant declarations")
        sys.exit(0)

    for warning in result.warnings:
        click.echo(str(warning))
    for removal in result.removals:
        click.echo(str(removal))

    click.echo()
    click.echo(
        f"Summary: {len(result.warnings)} warning(s), "
        f"{result.duplicate_count} duplicate(s), {result.pruned_count} empty selector(s)"
    )
    sys.exit(1)
