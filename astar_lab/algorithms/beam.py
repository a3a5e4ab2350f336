# astar_lab/algorithms/beam.py
# Beam filters: admission policies plugged into the A* engine to bound the frontier.
# Each filter is called as filter(candidate, solution, open_set, frontier) and returns True to reject.
from __future__ import annotations
import logging

logger = logging.getLogger(__name__)


def no_beam_filter(candidate, solution, open_set, frontier) -> bool:
    """Admit everything (plain A*)."""
    return False


class KBestBeam:
    """
    Keeps at most k nodes open, ranked by total score.

    When the open set is full, a candidate no better than the worst open node
    is rejected; otherwise the worst open node is evicted to make room. Evicted
    nodes are neither open nor closed, so a later expansion may rediscover them.
    Incomplete: with a narrow beam the goal can become unreachable.

    `evicted` counts evictions over the instance's lifetime, across every
    engine it is plugged into. Build one filter per run for per-run counts.
    """
    def __init__(self, k: int = 10):
        if k < 1:
            raise ValueError(f"beam width must be at least 1, got {k}")
        self.k = k
        self.evicted = 0

    def __call__(self, candidate, solution, open_set, frontier) -> bool:
        if candidate in open_set or len(open_set) < self.k:
            # improving an open node never grows the beam
            return False
        worst = frontier.worst()
        if not candidate.total_score < frontier.priority(worst):
            return True
        frontier.remove(worst)
        open_set.pop(worst, None)
        self.evicted += 1
        logger.debug(f"Beam(k={self.k}) evicted {worst!r} for {candidate!r}")
        return False

    def __repr__(self) -> str:
        return f"KBestBeam(k={self.k})"


class CostBoundBeam:
    """Rejects candidates whose total score exceeds a fixed bound."""
    def __init__(self, bound: float):
        self.bound = bound

    def __call__(self, candidate, solution, open_set, frontier) -> bool:
        return candidate.total_score > self.bound

    def __repr__(self) -> str:
        return f"CostBoundBeam(bound={self.bound})"
