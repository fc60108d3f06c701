"""Greedy max-product trust propagation.

Computes, for every node reachable from a single source, the strongest
chain of attenuated trust (and distrust) reaching it. Path combination
multiplies edge weights, path comparison takes the maximum.

The algorithm is the max-product analogue of Dijkstra's shortest paths:
1. Every node is queued by its effective score (source = 1, others = 0).
2. The node with the highest effective score is settled; since every
   weight is at most 1 in magnitude, nothing still queued can raise it.
3. The settled node's effective score is pushed along its out-edges,
   interpolating each neighbour channel towards it by the edge weight.
4. Repeat until the queue is empty. Cycles are harmless: a node is
   settled exactly once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from transitive_trust.exceptions import NodeNotFoundError
from transitive_trust.logging import get_logger
from transitive_trust.models import ChannelMode, ChannelScores, WeightVector

from .queue import IndexedMaxPriorityQueue

logger = get_logger(__name__)


class GraphView(Protocol):
    """Read-only directed weighted graph consumed by the engine.

    The graph is responsible for validating identifiers and weights when
    they are inserted; the engine trusts what it reads.
    """

    mode: ChannelMode

    def has_node(self, node: str) -> bool: ...

    def nodes(self) -> Iterable[str]: ...

    def out_neighbors(self, node: str) -> Iterable[str]: ...

    def edge_weight(self, source: str, target: str) -> WeightVector: ...


def channel_factors(mode: ChannelMode, weight: WeightVector) -> tuple[float, float]:
    """Resolve an edge weight into (positive_factor, negative_factor).

    A zero factor means the channel is not fed by this edge.

    Args:
        mode: Channel mode of the graph the weight came from.
        weight: Scalar weight, or (positive, negative) pair for DUAL.

    Returns:
        Attenuation factors for the positive and negative channels.
    """
    if isinstance(weight, tuple):
        positive, negative = weight
        return positive, negative
    if mode is ChannelMode.SIGNED and weight < 0:
        return 0.0, -weight
    return max(weight, 0.0), 0.0


@dataclass
class _Channels:
    """Mutable per-node state for one propagation run."""

    positive: float = 0.0
    negative: float = 0.0

    @property
    def net(self) -> float:
        return self.positive - self.negative

    @property
    def effective(self) -> float:
        return max(self.positive - self.negative, 0.0)


def propagate(graph: GraphView, source: str) -> dict[str, ChannelScores]:
    """Propagate trust from ``source`` to every node of ``graph``.

    A neighbour is only considered when its net score is below the
    settled node's effective score. The negative channel is gated on that
    same effective score, so distrust only flows through a node once the
    node's net trust exceeds the distrust already accumulated downstream.

    Args:
        graph: Graph to read; must not be mutated during the call.
        source: Node trust originates from.

    Returns:
        Final channel scores for every node except the source. Nodes not
        reachable from the source score (0, 0).

    Raises:
        NodeNotFoundError: If ``source`` is not in the graph.
    """
    if not graph.has_node(source):
        raise NodeNotFoundError(source, "source")

    mode = graph.mode
    state: dict[str, _Channels] = {}
    queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()

    for node in graph.nodes():
        channels = _Channels(positive=1.0) if node == source else _Channels()
        state[node] = channels
        queue.insert(node, channels.effective)

    settled: set[str] = set()
    updates = 0

    while not queue.is_empty():
        node, _ = queue.extract_max()  # type: ignore[misc]
        settled.add(node)

        # Recomputed from state, not taken from the queue entry.
        node_score = state[node].effective
        if node_score <= 0.0:
            continue

        for neighbor in graph.out_neighbors(node):
            if neighbor in settled:
                continue
            target = state[neighbor]
            if target.net >= node_score:
                continue

            positive_factor, negative_factor = channel_factors(
                mode, graph.edge_weight(node, neighbor)
            )
            changed = False

            if positive_factor > 0.0 and node_score > target.positive:
                target.positive = min(
                    target.positive + (node_score - target.positive) * positive_factor,
                    node_score,
                )
                changed = True

            if negative_factor > 0.0 and node_score > target.negative:
                target.negative = min(
                    target.negative + (node_score - target.negative) * negative_factor,
                    node_score,
                )
                changed = True

            if changed:
                updates += 1
                queue.update_priority(neighbor, target.effective)

    logger.debug(
        "Trust propagation complete",
        source=source,
        mode=mode.value,
        nodes_settled=len(settled),
        updates_applied=updates,
    )

    return {
        node: ChannelScores(positive=channels.positive, negative=channels.negative)
        for node, channels in state.items()
        if node != source
    }
