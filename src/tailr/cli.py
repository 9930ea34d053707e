"""Command line interface for tailr."""

import logging
import sys

import click

from . import __version__, configure_logging
from .count import parse_count
from .errors import IllegalCount
from .tailr import DEFAULT_LINES, Config, run


def _count_option(unit: str):
    def callback(ctx, param, value):
        if value is None:
            return None
        try:
            return parse_count(value)
        except IllegalCount as e:
            raise click.BadParameter(f"illegal {unit} count -- {e}") from e

    return callback


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, required=True, metavar="FILES...")
@click.option(
    "-n",
    "--lines",
    metavar="LINES",
    callback=_count_option("line"),
    help="Output last K lines (default 10)",
)
@click.option("-c", "--bytes", "bytes_", metavar="BYTES", callback=_count_option("byte"), help="Output last K bytes")
@click.option("-q", "--quiet", is_flag=True, help="Suppress printing of headers")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.version_option(__version__, prog_name="tailr")
def main(files, lines, bytes_, quiet, verbose):
    """Print the last part of FILES.

    A count of K means the last K; +K starts at line or byte K, and +0
    prints the whole file.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    if lines is not None and bytes_ is not None:
        raise click.UsageError("--lines and --bytes cannot be used together")

    config = Config(
        files=tuple(files),
        lines=lines if lines is not None else parse_count(DEFAULT_LINES),
        bytes=bytes_,
        quiet=quiet,
    )
    run(config, click.get_binary_stream("stdout"), sys.stderr)
