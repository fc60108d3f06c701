"""Transitive trust: path-based trust scores over weighted graphs.

Ranks or filters nodes (attestations, reputations, accounts) by the
strongest chain of attenuated trust reaching them from a source, rather
than by direct edges alone. Distrust can travel on a second channel.

Quick Start:
    from transitive_trust import TrustGraph

    graph = TrustGraph(mode="unsigned")
    graph.add_edge("A", "B", 0.6)
    graph.add_edge("B", "C", 0.4)
    graph.add_edge("C", "D", 0.5)
    graph.add_edge("A", "C", 0.5)

    graph.compute_trust_score("A", "D")  # 0.27

Channel Modes:
    - unsigned: one weight in [0, 1] per edge, trust only
    - dual: (positive, negative) weights per edge, each in [0, 1]
    - signed: one weight in (-1, 1) per edge, the sign picks the channel
"""

__version__ = "0.1.0"

# Configuration
from .config import Settings, settings

# Exceptions
from .exceptions import (
    ConfigurationError,
    InvalidNodeError,
    InvalidWeightError,
    NodeNotFoundError,
    TrustGraphError,
)

# Graph
from .graph import TrustGraph

# Logging
from .logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

# Models
from .models import ChannelMode, ChannelScores, Edge, TrustScore

# Propagation
from .propagation import GraphView, IndexedMaxPriorityQueue, propagate

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "ConfigurationError",
    "InvalidNodeError",
    "InvalidWeightError",
    "NodeNotFoundError",
    "TrustGraphError",
    # Graph
    "TrustGraph",
    # Logging
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
    # Models
    "ChannelMode",
    "ChannelScores",
    "Edge",
    "TrustScore",
    # Propagation
    "GraphView",
    "IndexedMaxPriorityQueue",
    "propagate",
]
