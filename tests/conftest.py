"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from transitive_trust import ChannelMode, TrustGraph


@pytest.fixture
def unsigned_graph() -> TrustGraph:
    """Reference single-channel graph: A->B 0.6, B->C 0.4, C->D 0.5, A->C 0.5."""
    graph = TrustGraph(mode=ChannelMode.UNSIGNED)
    graph.add_edge("A", "B", 0.6)
    graph.add_edge("B", "C", 0.4)
    graph.add_edge("C", "D", 0.5)
    graph.add_edge("A", "C", 0.5)
    return graph


@pytest.fixture
def dual_graph() -> TrustGraph:
    """Reference dual-channel graph with the same topology as unsigned_graph."""
    graph = TrustGraph(mode=ChannelMode.DUAL)
    graph.add_edge("A", "B", 0.6, 0.2)
    graph.add_edge("B", "C", 0.4, 0.1)
    graph.add_edge("C", "D", 0.5, 0.3)
    graph.add_edge("A", "C", 0.5, 0.1)
    return graph
