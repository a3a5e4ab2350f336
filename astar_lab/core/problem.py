# Defines the capability contracts the A* engine expects from its caller (nodes, neighbors, goal test, beam filter).
# astar_lab/core/problem.py
from __future__ import annotations
from typing import Any, Dict, Hashable, Iterable, MutableMapping, Protocol, runtime_checkable


@runtime_checkable
class SearchNode(Protocol):
    """Capability set required of a node (ScoredNode satisfies it)."""
    general_score: float
    heuristic_score: float

    @property
    def total_score(self) -> float: ...
    def cost_to(self, other: Any) -> float: ...
    def update_heuristic(self, target: Any, general_score: float | None = None) -> None: ...
    def __hash__(self) -> int: ...


class NeighborEnumerator(Protocol):
    """Given a node, returns a finite iterable of its adjacent nodes. Called afresh for every expansion."""
    def __call__(self, node: SearchNode) -> Iterable[SearchNode]: ...


class SolutionVerifier(Protocol):
    """Goal test."""
    def __call__(self, node: SearchNode) -> bool: ...


# identity -> predecessor node
SolutionMap = Dict[Hashable, SearchNode]
# identity -> node value currently admitted to the frontier
OpenSet = MutableMapping[Hashable, SearchNode]


class BeamFilter(Protocol):
    """
    Admission policy invoked after a candidate's scores are updated.
    Returns True to reject the candidate (it is not admitted to the frontier).
    """
    def __call__(self, candidate: SearchNode, solution: SolutionMap, open_set: OpenSet, frontier: Any) -> bool: ...
