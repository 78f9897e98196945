"""``trustflow eigentrust`` -- Power-iteration trust over a local trust matrix.

Each ``--row`` is one peer's comma-separated ratings of every peer. The
global trust vector is computed by repeated multiplication starting from
``--pre-trust``. If ``--distrust-row`` options are given, a one-hop
distrust vector weighted by the global trust is computed as well.

Exit Codes:
    0 -- Vectors computed and displayed.
    2 -- Malformed matrix or vector.
"""

from __future__ import annotations

import json
import sys

import click

from trustflow.core.eigentrust import DEFAULT_ITERATIONS, EigenTrustEngine
from trustflow.exceptions import InvalidMatrix, TrustflowError

_PRECISION = 4


def _parse_vector(text: str) -> list[float]:
    """Parse ``"0, 0.5, 1"`` into ``[0.0, 0.5, 1.0]``.

    Raises:
        InvalidMatrix: If any entry is not a number.
    """
    try:
        return [float(part) for part in text.split(",")]
    except ValueError:
        raise InvalidMatrix(
            f"Expected comma-separated numbers, got {text!r}"
        ) from None


def _fail(message: str, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)


@click.command("eigentrust")
@click.option(
    "--row", "rows",
    multiple=True,
    required=True,
    help="One peer's comma-separated trust ratings; repeat once per peer.",
)
@click.option(
    "--pre-trust",
    required=True,
    help="Comma-separated pre-trust distribution.",
)
@click.option(
    "--distrust-row", "distrust_rows",
    multiple=True,
    help="One peer's comma-separated distrust ratings; repeat once per peer.",
)
@click.option(
    "--iterations",
    type=click.IntRange(min=0),
    default=DEFAULT_ITERATIONS,
    show_default=True,
    help="Number of power-iteration rounds.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def eigentrust_command(
    rows: tuple[str, ...],
    pre_trust: str,
    distrust_rows: tuple[str, ...],
    iterations: int,
    output_format: str,
) -> None:
    """Compute EigenTrust-style global trust for a small peer matrix.

    Exit code 0 on success, 2 if the matrix or vectors are malformed.
    """
    engine = EigenTrustEngine(iterations=iterations)
    try:
        trust_matrix = [_parse_vector(row) for row in rows]
        distrust_matrix = [_parse_vector(row) for row in distrust_rows]
        pre_trust_vector = _parse_vector(pre_trust)
        trust = engine.trust(trust_matrix, pre_trust_vector)
        distrust = (
            engine.distrust(distrust_matrix, trust, pre_trust_vector)
            if distrust_matrix
            else None
        )
    except TrustflowError as exc:
        _fail(str(exc), output_format)
        return

    if output_format == "json":
        payload: dict = {
            "iterations": iterations,
            "trust": [round(v, _PRECISION) for v in trust],
        }
        if distrust is not None:
            payload["distrust"] = [round(v, _PRECISION) for v in distrust]
        click.echo(json.dumps(payload, indent=2))
    else:
        from trustflow.cli.output import print_eigentrust_vectors
        print_eigentrust_vectors(trust, distrust)

    sys.exit(0)
