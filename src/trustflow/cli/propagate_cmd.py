"""``trustflow propagate`` -- Propagate trust and distrust from a source node.

Builds a ``TrustGraph`` from repeated ``--positive`` / ``--negative`` edge
options, runs the propagation engine from ``--source``, and displays every
other node's trust, distrust, and net score.

Exit Codes:
    0 -- Scores computed and displayed.
    2 -- Invalid input (no edges, unknown source, rejected weight).
"""

from __future__ import annotations

import json
import sys

import click

from trustflow.core.graph import TrustGraph
from trustflow.core.propagation import PropagationEngine, PropagationRun
from trustflow.exceptions import TrustflowError

_PRECISION = 4

EdgeOption = tuple[str, str, float]


def _build_graph(
    positive_edges: tuple[EdgeOption, ...],
    negative_edges: tuple[EdgeOption, ...],
    strict: bool,
) -> TrustGraph:
    """Insert the command-line edges into a new graph.

    Raises:
        InvalidWeight: If a weight is rejected.
    """
    graph = TrustGraph(strict=strict)
    for source, target, weight in positive_edges:
        graph.add_positive_edge(source, target, weight)
    for source, target, weight in negative_edges:
        graph.add_negative_edge(source, target, weight)
    return graph


def _run_to_json(run: PropagationRun) -> dict:
    """Convert a PropagationRun to a JSON-serializable dict."""
    from trustflow.cli.output import ranked

    return {
        "source": run.source,
        "results": [r.as_dict(precision=_PRECISION) for r in ranked(run.results)],
        "stats": run.stats.as_dict(),
    }


def _fail(message: str, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)


@click.command("propagate")
@click.option(
    "--source", "-s",
    required=True,
    help="Node that trust originates from.",
)
@click.option(
    "--positive", "-p", "positive_edges",
    type=(str, str, float),
    multiple=True,
    metavar="SOURCE TARGET WEIGHT",
    help="Trust edge; may be repeated.",
)
@click.option(
    "--negative", "-n", "negative_edges",
    type=(str, str, float),
    multiple=True,
    metavar="SOURCE TARGET WEIGHT",
    help="Distrust edge; may be repeated.",
)
@click.option(
    "--lenient",
    is_flag=True,
    default=False,
    help="Accept finite weights outside [0, 1].",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def propagate_command(
    source: str,
    positive_edges: tuple[EdgeOption, ...],
    negative_edges: tuple[EdgeOption, ...],
    lenient: bool,
    output_format: str,
) -> None:
    """Propagate trust and distrust from SOURCE through a weighted graph.

    Each edge is given as three values: the rating node, the rated node,
    and the fraction of the rater's score transferred (0 to 1).

    Exit code 0 on success, 2 on invalid input.
    """
    if not positive_edges and not negative_edges:
        _fail("At least one --positive or --negative edge is required", output_format)

    try:
        graph = _build_graph(positive_edges, negative_edges, strict=not lenient)
        run = PropagationEngine().run(graph, source)
    except TrustflowError as exc:
        _fail(str(exc), output_format)
        return

    if output_format == "json":
        click.echo(json.dumps(_run_to_json(run), indent=2))
    else:
        from trustflow.cli.output import print_propagation_results
        print_propagation_results(run)

    sys.exit(0)
