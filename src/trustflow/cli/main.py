"""trustflow CLI -- Trust and distrust propagation over weighted graphs.

Entry point for the ``trustflow`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    propagate  -- Best-first trust/distrust propagation from a source node.
    eigentrust -- Power-iteration trust over a local trust matrix.

Usage::

    trustflow propagate -s A -p A B 0.6 -p A C 0.5 -p B C 0.4 -p C D 0.5
    trustflow propagate -s A -n A B 1.0 --format json
    trustflow eigentrust --row 0,1 --row 1,0 --pre-trust 0.5,0.5
    trustflow -v propagate -s A -p A B 0.6
"""

from __future__ import annotations

import click

from trustflow import __version__
from trustflow.cli.eigentrust_cmd import eigentrust_command
from trustflow.cli.propagate_cmd import propagate_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log engine diagnostics to stderr.",
)
def cli(verbose: bool) -> None:
    """trustflow: Trust and distrust propagation over weighted graphs.

    Compute how much trust and distrust reaches every node from a single
    source, or run EigenTrust-style power iteration over a peer matrix.
    """
    if verbose:
        from trustflow.cli.output import configure_logging
        configure_logging()


# Register all subcommands
cli.add_command(propagate_command)
cli.add_command(eigentrust_command)
