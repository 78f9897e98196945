"""Two-channel trust graph.

This package holds the graph data model consumed by the propagation engine:

Submodules:
    models  -- Node (outgoing trust and distrust edge maps), NodeId
    graph   -- TrustGraph (edge insertion, weight and neighbour lookup)
"""

from trustflow.core.graph.models import Node, NodeId
from trustflow.core.graph.graph import TrustGraph

__all__ = [
    "Node",
    "NodeId",
    "TrustGraph",
]
