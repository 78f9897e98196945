"""Shared fixtures for CLI tests.

Provides a Click runner, the argument list for the trust-chain example,
and isolation of the ``trustflow`` logger configured by ``--verbose``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def chain_args() -> list[str]:
    """propagate arguments for A -> B (0.6), A -> C (0.5), B -> C (0.4), C -> D (0.5)."""
    return [
        "propagate", "--source", "A",
        "-p", "A", "B", "0.6",
        "-p", "A", "C", "0.5",
        "-p", "B", "C", "0.4",
        "-p", "C", "D", "0.5",
    ]


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo any handler or level installed by ``--verbose``."""
    package_logger = logging.getLogger("trustflow")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
