"""Models and shared types for transitive trust scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChannelMode(str, Enum):
    """How an edge's weight feeds the positive and negative channels."""

    UNSIGNED = "unsigned"  # one weight in [0, 1], positive channel only
    DUAL = "dual"  # (positive, negative), each in [0, 1]
    SIGNED = "signed"  # one weight in (-1, 1), sign selects the channel


WeightVector = float | tuple[float, float]
"""Edge weight as stored by a graph: a scalar, or a (positive, negative) pair in DUAL mode."""


@dataclass(frozen=True, slots=True)
class ChannelScores:
    """Final positive and negative trust accumulated for one node."""

    positive: float = 0.0
    negative: float = 0.0

    @property
    def net(self) -> float:
        return self.positive - self.negative

    @property
    def effective(self) -> float:
        """Net score floored at zero; the value that drives further propagation."""
        return max(self.net, 0.0)


class TrustScore(BaseModel):
    """Trust from a source to one target, as reported to callers.

    Attributes:
        positive_score: Accumulated trust.
        negative_score: Accumulated distrust.
        net_score: positive_score - negative_score (may be negative).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    positive_score: float = Field(default=0.0, ge=0.0, le=1.0)
    negative_score: float = Field(default=0.0, ge=0.0, le=1.0)
    net_score: float = Field(default=0.0, ge=-1.0, le=1.0)

    @property
    def score(self) -> float:
        """Single scalar score, never negative."""
        return max(self.net_score, 0.0)

    @classmethod
    def from_channels(cls, channels: ChannelScores) -> TrustScore:
        """Build a report from the engine's per-node channel state."""
        return cls(
            positive_score=channels.positive,
            negative_score=channels.negative,
            net_score=channels.net,
        )


class Edge(BaseModel):
    """A directed edge as listed by TrustGraph.get_edges().

    For UNSIGNED and SIGNED graphs ``weight`` holds the recorded scalar and
    the channel weights are derived from it; DUAL graphs leave it None.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    target: str
    positive_weight: float = Field(ge=0.0, le=1.0)
    negative_weight: float = Field(default=0.0, ge=0.0, le=1.0)
    weight: float | None = Field(default=None, ge=-1.0, le=1.0)
