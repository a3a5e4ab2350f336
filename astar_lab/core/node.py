# astar_lab/core/node.py
# This code defines the ScoredNode base class: a graph node carrying the three A* scores
# (general g, heuristic h, total f = g + h) and an identity used for set membership.
from __future__ import annotations
from typing import Hashable


class ScoredNode:
    """
    Base class for nodes searched by the A* engine.

    Subclasses provide:
      - key:          stable identity (e.g. a node id); scores never take part in equality
      - cost_to(n):   true edge cost to an adjacent node (non-negative for optimality)
      - estimate_to(t): heuristic distance to the target (admissible for optimality)

    Ordering compares total_score ascending, so a min-heap surfaces the lowest f first.
    """

    def __init__(self, general_score: float = 0.0, heuristic_score: float = 0.0):
        self.general_score = general_score
        self.heuristic_score = heuristic_score

    @property
    def key(self) -> Hashable:
        raise NotImplementedError

    @property
    def total_score(self) -> float:
        """f = g + h"""
        return self.general_score + self.heuristic_score

    def cost_to(self, other: "ScoredNode") -> float:
        raise NotImplementedError

    def estimate_to(self, target: "ScoredNode") -> float:
        # zero heuristic turns A* into uniform-cost search
        return 0.0

    def update_heuristic(self, target: "ScoredNode", general_score: float | None = None) -> None:
        """Recompute h toward target. general_score is passed for cost-dependent heuristics."""
        self.heuristic_score = self.estimate_to(target)

    def clear(self) -> None:
        self.general_score = 0.0
        self.heuristic_score = 0.0

    def __lt__(self, other: "ScoredNode") -> bool:
        return self.total_score < other.total_score

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScoredNode):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, g={self.general_score}, h={self.heuristic_score})"
