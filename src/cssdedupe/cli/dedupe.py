"""CLI command: cssdedupe dedupe -- rewrite a stylesheet without duplicates."""

from __future__ import annotations

import sys

import click

from cssdedupe.config import DedupeConfig
from cssdedupe.parser import ParseError
from cssdedupe.processor import CssProcessor


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write to this path instead of overwriting CSSFILE",
)
@click.option("--dry-run", is_flag=True, help="Print the result instead of writing it")
@click.option("--encoding", default="utf-8", help="Text encoding of CSSFILE and the output")
def dedupe(cssfile: str, output: str | None, dry_run: bool, encoding: str) -> None:
    """Remove cascade duplicates from CSSFILE.

    The file is overwritten in place (no backup) unless --output or
    --dry-run is given.  Exits with code 1 if the stylesheet cannot be split.
    """
    config = DedupeConfig(encoding=encoding, output_path=output, dry_run=dry_run)
    processor = CssProcessor(cssfile, config=config)

    try:
        result = processor.process()
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.echo(str(warning), err=True)

    written = processor.write(result)
    if written is None:
        click.echo(result.css, nl=False)
        return

    click.echo(
        f"Removed {result.duplicate_count} duplicate declaration(s), "
        f"{result.pruned_count} empty selector(s); wrote {written}"
    )
