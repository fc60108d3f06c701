"""Single-source trust propagation over a max-product semiring.

Trust is attenuated multiplicatively along each path and the strongest
path wins. Distrust travels on a second channel gated by the net score of
each intermediate node.

Example:
    ```python
    from transitive_trust.propagation import propagate

    scores = propagate(graph, "alice")
    print(scores["carol"].effective)
    ```

References:
- Dijkstra 1959: greedy settling with a priority queue
- Guha et al. 2004: propagation of trust and distrust
"""

from .algorithms import GraphView, channel_factors, propagate
from .queue import IndexedMaxPriorityQueue

__all__ = [
    # Engine
    "GraphView",
    "channel_factors",
    "propagate",
    # Queue
    "IndexedMaxPriorityQueue",
]
