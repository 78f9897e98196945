"""Rich output formatting helpers for the trustflow CLI.

Provides terminal tables for propagation results and EigenTrust vectors,
plus the logging handler used by ``--verbose``.

Net Score Color Mapping:
    positive = green, zero = dim, negative = bold red
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from trustflow.core.propagation import PropagationRun, Result

console = Console()

_LOG_FORMAT = "%(name)s: %(message)s"


def net_score_style(net_score: float) -> str:
    """Return the Rich style string for a net score."""
    if net_score > 0.0:
        return "green"
    if net_score < 0.0:
        return "bold red"
    return "dim"


def ranked(results: Sequence[Result]) -> list[Result]:
    """Order results by net score (highest first), then by identifier."""
    return sorted(results, key=lambda r: (-r.net_score, str(r.node)))


def configure_logging(level: int = logging.DEBUG) -> logging.Handler:
    """Attach a Rich stderr handler to the ``trustflow`` logger.

    Calling this again reuses the handler installed by the first call.

    Returns:
        The installed handler, so callers can detach it again.
    """
    package_logger = logging.getLogger("trustflow")
    for existing in package_logger.handlers:
        if isinstance(existing, RichHandler):
            package_logger.setLevel(level)
            return existing

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def print_propagation_results(run: PropagationRun) -> None:
    """Print a ranked table of propagated scores.

    Args:
        run: Results and statistics of one propagation run.
    """
    header = Text.assemble(("Source: ", "bold"), (str(run.source), ""))
    console.print(Panel(header, title="Trust Propagation"))

    if not run.results:
        console.print("[dim]No nodes besides the source.[/dim]")
        return

    table = Table(title="Propagated Scores", show_header=True, header_style="bold")
    table.add_column("Node", style="bold")
    table.add_column("Trust", justify="right")
    table.add_column("Distrust", justify="right")
    table.add_column("Net", justify="right")

    for result in ranked(run.results):
        net = Text(f"{result.net_score:.4f}", style=net_score_style(result.net_score))
        table.add_row(
            str(result.node),
            f"{result.p_score:.4f}",
            f"{result.n_score:.4f}",
            net,
        )
    console.print(table)

    stats = run.stats
    console.print(
        f"  [dim]{stats.nodes} nodes, {stats.relaxations} relaxations, "
        f"{stats.pops} pops ({stats.stale_pops} stale)[/dim]"
    )


def print_eigentrust_vectors(
    trust: Sequence[float],
    distrust: Sequence[float] | None = None,
) -> None:
    """Print the EigenTrust trust (and optional distrust) vectors per peer.

    Args:
        trust: Global trust per peer.
        distrust: One-hop distrust per peer, if computed.
    """
    table = Table(title="EigenTrust Scores", show_header=True, header_style="bold")
    table.add_column("Peer", style="bold", justify="right")
    table.add_column("Trust", justify="right")
    if distrust is not None:
        table.add_column("Distrust", justify="right")

    for peer, value in enumerate(trust):
        row = [str(peer), f"{value:.4f}"]
        if distrust is not None:
            row.append(f"{distrust[peer]:.4f}")
        table.add_row(*row)
    console.print(table)
