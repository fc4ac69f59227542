# ABOUTME: CLI package for epubmeta, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from epubmeta.cli.commands import entries_cmd, inspect_cmd, scan_cmd
from epubmeta.cli.log import configure_logging
from epubmeta.cli.options import verbose_option


@click.group()
@click.version_option(package_name="epubmeta")
@verbose_option
def cli(verbose: bool) -> None:
    """epubmeta - extract bibliographic metadata from EPUB files."""
    configure_logging(verbose)


cli.add_command(inspect_cmd.inspect)
cli.add_command(scan_cmd.scan)
cli.add_command(entries_cmd.entries)
