"""cssdedupe CLI entry point: Click group with subcommands."""

import logging

import click

from cssdedupe import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssdedupe")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline progress to stderr")
def cli(verbose: bool) -> None:
    """cssdedupe - remove redundant declarations from media-query overrides."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from cssdedupe.cli.dedupe import dedupe  # noqa: E402
from cssdedupe.cli.lint import lint  # noqa: E402

cli.add_command(dedupe)
cli.add_command(lint)
