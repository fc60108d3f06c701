"""Directed trust graph and the score queries built on it.

TrustGraph owns node and edge bookkeeping, validates everything at
insertion time, and exposes the read-only view the propagation engine
consumes. Every query runs one propagation from the source and shapes
the result.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real

from .config import settings
from .exceptions import ConfigurationError, InvalidNodeError, InvalidWeightError, NodeNotFoundError
from .logging import get_logger
from .models import ChannelMode, Edge, TrustScore, WeightVector
from .propagation import channel_factors, propagate

logger = get_logger(__name__)


def _validate_node(node: object) -> str:
    if not isinstance(node, str) or not node.strip():
        raise InvalidNodeError(node)
    return node


def _validate_weight(field: str, value: object, *, signed: bool = False) -> float:
    """Check a weight is a real number inside its mode's range.

    Unsigned weights lie in [0, 1] inclusive; signed weights in (-1, 1)
    exclusive.
    """
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise InvalidWeightError(field, value, "must be a number")

    weight = float(value)
    if signed:
        if not -1.0 < weight < 1.0:
            raise InvalidWeightError(
                field, value, "must be a number between -1 and 1 (exclusive)"
            )
    elif not 0.0 <= weight <= 1.0:
        raise InvalidWeightError(field, value, "must be a number between 0 and 1 (inclusive)")
    return weight


class TrustGraph:
    """Directed weighted graph for transitive trust queries.

    At most one edge exists per ordered (source, target) pair; adding it
    again overwrites the weight. Self-loops are accepted and never affect
    scores.

    Example:
        ```python
        graph = TrustGraph(mode="dual")
        graph.add_edge("alice", "bob", 0.6, 0.2)
        graph.add_edge("bob", "carol", 0.4, 0.1)
        graph.compute_score("alice", "carol")
        ```
    """

    def __init__(self, mode: ChannelMode | str | None = None) -> None:
        if mode is None:
            mode = settings.default_mode
        try:
            self.mode = ChannelMode(mode)
        except ValueError as e:
            valid = ", ".join(m.value for m in ChannelMode)
            raise ConfigurationError(
                f"Unknown channel mode {mode!r}; expected one of: {valid}"
            ) from e

        self._out: dict[str, list[str]] = {}
        self._edges: dict[tuple[str, str], WeightVector] = {}

    def __len__(self) -> int:
        return len(self._out)

    def __contains__(self, node: object) -> bool:
        return node in self._out

    def __iter__(self) -> Iterator[str]:
        return iter(self._out)

    def __repr__(self) -> str:
        return (
            f"TrustGraph(mode={self.mode.value!r}, nodes={len(self._out)}, "
            f"edges={len(self._edges)})"
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, node: str) -> None:
        """Add a node; adding an existing node is a no-op.

        Raises:
            InvalidNodeError: If ``node`` is not a non-empty string.
        """
        node = _validate_node(node)
        if node not in self._out:
            self._out[node] = []

    def add_edge(
        self,
        source: str,
        target: str,
        weight: float,
        negative_weight: float | None = None,
    ) -> None:
        """Add or overwrite the edge ``source -> target``.

        Missing endpoints are created.

        Args:
            source: Node the trust comes from.
            target: Node the trust goes to.
            weight: In UNSIGNED mode a weight in [0, 1]; in SIGNED mode a
                weight in (-1, 1) whose sign picks the channel; in DUAL mode
                the positive weight in [0, 1].
            negative_weight: DUAL mode only, the negative weight in [0, 1].

        Raises:
            InvalidNodeError: If either endpoint is not a non-empty string.
            InvalidWeightError: If a weight is missing, superfluous or out of range.
        """
        _validate_node(source)
        _validate_node(target)

        value: WeightVector
        if self.mode is ChannelMode.DUAL:
            if negative_weight is None:
                raise InvalidWeightError(
                    "negative_weight", None, "is required for dual-channel graphs"
                )
            value = (
                _validate_weight("positive_weight", weight),
                _validate_weight("negative_weight", negative_weight),
            )
        else:
            if negative_weight is not None:
                raise InvalidWeightError(
                    "negative_weight",
                    negative_weight,
                    f"is only accepted by dual-channel graphs, not {self.mode.value}",
                )
            value = _validate_weight("weight", weight, signed=self.mode is ChannelMode.SIGNED)

        self.add_node(source)
        self.add_node(target)

        key = (source, target)
        if key in self._edges:
            logger.debug(
                "Overwriting edge weight",
                source=source,
                target=target,
                old=self._edges[key],
                new=value,
            )
        else:
            self._out[source].append(target)
        self._edges[key] = value

    # ------------------------------------------------------------------
    # GraphView
    # ------------------------------------------------------------------

    def has_node(self, node: str) -> bool:
        return node in self._out

    def nodes(self) -> Iterable[str]:
        return self._out.keys()

    def out_neighbors(self, node: str) -> Iterable[str]:
        return self._out[node]

    def edge_weight(self, source: str, target: str) -> WeightVector:
        return self._edges[(source, target)]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_nodes(self) -> list[str]:
        """Return all nodes in insertion order."""
        return list(self._out)

    def get_edges(self) -> list[Edge]:
        """Return all edges in insertion order."""
        edges = []
        for (source, target), value in self._edges.items():
            positive, negative = channel_factors(self.mode, value)
            edges.append(
                Edge(
                    source=source,
                    target=target,
                    positive_weight=positive,
                    negative_weight=negative,
                    weight=None if self.mode is ChannelMode.DUAL else value,
                )
            )
        return edges

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def compute_trust_scores(
        self,
        source: str,
        targets: Sequence[str] | None = None,
    ) -> dict[str, TrustScore]:
        """Compute trust from ``source`` to several targets.

        Args:
            source: Node the trust originates from.
            targets: Nodes to report. Empty or None reports every node
                except the source.

        Returns:
            Mapping of target to its TrustScore, in target order.

        Raises:
            NodeNotFoundError: If the source or any target is not in the graph.
        """
        if not self.has_node(source):
            raise NodeNotFoundError(source, "source")
        for target in targets or ():
            if not self.has_node(target):
                raise NodeNotFoundError(target, "target")

        channels = propagate(self, source)

        if not targets:
            return {node: TrustScore.from_channels(c) for node, c in channels.items()}

        results: dict[str, TrustScore] = {}
        for target in targets:
            if target == source:
                results[target] = TrustScore(positive_score=1.0, negative_score=0.0, net_score=1.0)
            else:
                results[target] = TrustScore.from_channels(channels[target])
        return results

    def compute_score(self, source: str, target: str) -> TrustScore:
        """Compute positive, negative and net trust from ``source`` to ``target``.

        Raises:
            NodeNotFoundError: If either node is not in the graph.
        """
        return self.compute_trust_scores(source, [target])[target]

    def compute_trust_score(self, source: str, target: str) -> float:
        """Compute the scalar trust score, ``max(net, 0)``, from ``source`` to ``target``.

        Raises:
            NodeNotFoundError: If either node is not in the graph.
        """
        return self.compute_score(source, target).score
