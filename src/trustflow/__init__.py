"""trustflow: Single-source trust and distrust propagation over weighted graphs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
