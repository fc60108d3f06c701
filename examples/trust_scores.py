#!/usr/bin/env python3
"""Transitive trust scoring demo.

Builds the same small graph in each channel mode and prints the scores
seen from node A. No external services required.
"""

from transitive_trust import ChannelMode, TrustGraph, configure_logging


def main() -> None:
    configure_logging(level="WARNING", format="text")

    print("=" * 60)
    print("Transitive Trust Demo")
    print("=" * 60)

    # =========================================================================
    # Part 1: Single channel
    # =========================================================================
    print("\n1. UNSIGNED (trust only)")
    print("-" * 60)
    unsigned = TrustGraph(mode=ChannelMode.UNSIGNED)
    unsigned.add_edge("A", "B", 0.6)
    unsigned.add_edge("B", "C", 0.4)
    unsigned.add_edge("C", "D", 0.5)
    unsigned.add_edge("A", "C", 0.5)
    for target in ("B", "C", "D"):
        print(f"  score(A, {target}) = {unsigned.compute_trust_score('A', target):.2f}")

    # =========================================================================
    # Part 2: Trust and distrust
    # =========================================================================
    print("\n2. DUAL (positive, negative)")
    print("-" * 60)
    dual = TrustGraph(mode=ChannelMode.DUAL)
    dual.add_edge("A", "B", 0.6, 0.2)
    dual.add_edge("B", "C", 0.4, 0.1)
    dual.add_edge("C", "D", 0.5, 0.3)
    dual.add_edge("A", "C", 0.5, 0.1)
    for target, score in dual.compute_trust_scores("A").items():
        print(
            f"  {target}: positive={score.positive_score:.2f} "
            f"negative={score.negative_score:.2f} net={score.net_score:.2f}"
        )

    # =========================================================================
    # Part 3: Signed weights
    # =========================================================================
    print("\n3. SIGNED (sign picks the channel)")
    print("-" * 60)
    signed = TrustGraph(mode=ChannelMode.SIGNED)
    signed.add_edge("A", "B", 0.8)
    signed.add_edge("B", "C", -0.5)
    signed.add_edge("A", "C", 0.5)
    score = signed.compute_score("A", "C")
    print(f"  C: positive={score.positive_score:.2f} negative={score.negative_score:.2f}")
    print(f"  reported score = {score.score:.2f}")


if __name__ == "__main__":
    main()
