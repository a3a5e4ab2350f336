# astar_lab/algorithms/astar.py
# This code implements incremental A*: the caller advances the search one step() at a time,
# which allows step budgets, early exit and interleaving the search with other work.
from __future__ import annotations
import logging
import math
from typing import MutableSet, Optional

from ..core.errors import InvalidInput
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult, MeasuredRun
from ..core.problem import BeamFilter, NeighborEnumerator, OpenSet, SearchNode, SolutionMap, SolutionVerifier
from ..core.utils import reconstruct_path
from .beam import no_beam_filter

logger = logging.getLogger(__name__)


def _check_heuristic(node: SearchNode) -> None:
    h = node.heuristic_score
    if h is None or (isinstance(h, float) and math.isnan(h)):
        raise InvalidInput(f"heuristic for {node!r} is undefined ({h!r})")


class AStar:
    """
    One A* run from start_node toward target_node.

    The engine owns the frontier (min-heap by total score), the open set
    (identity -> admitted node), the closed set and the solution map
    (identity -> best known predecessor). Nodes and their neighbors belong to
    the caller; the engine only writes their general/heuristic scores.

    Any of the four containers may be passed in (empty) to swap the data
    structures, e.g. PriorityQueue(key=...) for another expansion order or an
    instrumented dict for the solution map.

    Usage:
        engine = AStar(start, target, verifier, neighbors)
        while engine.step():
            pass
        if engine.has_solution():
            path = reconstruct_path(engine.solution(), engine.node)
    """

    def __init__(
        self,
        start_node: SearchNode,
        target_node: SearchNode,
        verifier: SolutionVerifier,
        neighbor_enumerator: NeighborEnumerator,
        beam_filter: Optional[BeamFilter] = None,
        frontier: Optional[PriorityQueue] = None,
        open_set: Optional[OpenSet] = None,
        closed_set: Optional[MutableSet[SearchNode]] = None,
        solution: Optional[SolutionMap] = None,
    ):
        if not callable(verifier):
            raise InvalidInput(f"verifier must be callable, got {verifier!r}")
        if not callable(neighbor_enumerator):
            raise InvalidInput(f"neighbor enumerator must be callable, got {neighbor_enumerator!r}")
        if beam_filter is not None and not callable(beam_filter):
            raise InvalidInput(f"beam filter must be callable, got {beam_filter!r}")

        self._verifier = verifier
        self._neighbors = neighbor_enumerator
        self._beam = beam_filter or no_beam_filter
        self._target = target_node

        # caller-supplied containers must start empty
        self._frontier = frontier if frontier is not None else PriorityQueue()
        self._open: OpenSet = open_set if open_set is not None else {}
        self._closed: MutableSet[SearchNode] = closed_set if closed_set is not None else set()
        self._solution: SolutionMap = solution if solution is not None else {}
        for label, container in (("frontier", self._frontier), ("open set", self._open),
                                 ("closed set", self._closed), ("solution map", self._solution)):
            if len(container):
                raise InvalidInput(f"{label} must start empty, got {len(container)} entries")
        self._has_solution = False
        self._steps = 0

        start_node.general_score = 0
        start_node.update_heuristic(target_node, 0)
        _check_heuristic(start_node)
        self._node = start_node
        self._open[start_node] = start_node
        self._frontier.push(start_node)

    # ---- results ------------------------------------------------------------
    def has_solution(self) -> bool:
        """True once the verifier accepted a node. The accepted node is `node`."""
        return self._has_solution

    def solution(self) -> SolutionMap:
        return self._solution

    def is_finished(self) -> bool:
        return self._has_solution or not self._frontier

    # ---- introspection ------------------------------------------------------
    @property
    def node(self) -> SearchNode:
        """Node examined by the most recent step (the start node before the first step)."""
        return self._node

    @property
    def target_node(self) -> SearchNode:
        return self._target

    @property
    def solution_verifier(self) -> SolutionVerifier:
        return self._verifier

    @property
    def beam_filter(self) -> BeamFilter:
        return self._beam

    @property
    def neighbor_enumerator(self) -> NeighborEnumerator:
        return self._neighbors

    @property
    def frontier(self) -> PriorityQueue:
        return self._frontier

    @property
    def open_set(self) -> OpenSet:
        return self._open

    @property
    def closed_set(self) -> MutableSet[SearchNode]:
        return self._closed

    @property
    def steps(self) -> int:
        """Number of nodes expanded so far."""
        return self._steps

    # ---- search -------------------------------------------------------------
    def step(self) -> bool:
        """
        Examine the lowest-f frontier node and expand it unless it is a goal.
        Returns True while the caller should keep stepping. On False, check
        has_solution(): False there means the frontier ran dry.
        """
        if self._has_solution:
            return False
        if not self._frontier:
            logger.debug(f"Frontier exhausted after {self._steps} expansions")
            return False

        node = self._frontier.peek()
        self._node = node
        if self._verifier(node):
            self._has_solution = True
            logger.debug(f"Goal {node!r} accepted after {self._steps} expansions")
            return False

        self._frontier.pop()
        self._open.pop(node, None)
        self._closed.add(node)
        self._steps += 1
        logger.debug(f"Expanding {node!r} f={node.total_score} open={len(self._open)} closed={len(self._closed)}")
        self._relax_neighbors(node)
        return True

    def run(self, max_steps: Optional[int] = None) -> int:
        """Call step() until it returns False or max_steps calls were made. Returns the calls made."""
        calls = 0
        while max_steps is None or calls < max_steps:
            calls += 1
            if not self.step():
                break
        return calls

    def _relax_neighbors(self, node: SearchNode) -> None:
        for neighbor in self._neighbors(node):
            if neighbor in self._closed:
                continue
            cost = node.cost_to(neighbor)
            if cost is None:
                raise InvalidInput(f"cost_to returned None for ({node!r} -> {neighbor!r})")
            tentative = node.general_score + cost

            known = self._open.get(neighbor)
            is_new = known is None
            if not is_new and not tentative < known.general_score:
                continue

            previous = (neighbor.general_score, neighbor.heuristic_score)
            neighbor.general_score = tentative
            neighbor.update_heuristic(self._target, tentative)
            if self._beam(neighbor, self._solution, self._open, self._frontier):
                # rejected candidates keep the scores they had
                neighbor.general_score, neighbor.heuristic_score = previous
                continue

            self._solution[neighbor] = node
            self._open[neighbor] = neighbor
            self._frontier.push(neighbor)


def a_star_search(
    start: SearchNode,
    target: SearchNode,
    verifier: SolutionVerifier,
    neighbors: NeighborEnumerator,
    beam_filter: Optional[BeamFilter] = None,
    max_steps: Optional[int] = None,
    name: str = "A*",
    trace_memory: bool = True,
) -> SearchResult:
    """Run an AStar engine to completion (or until max_steps) and summarize it."""
    with MeasuredRun(trace_memory) as meter:
        engine = AStar(start, target, verifier, neighbors, beam_filter)
        engine.run(max_steps)

        if engine.has_solution():
            path = reconstruct_path(engine.solution(), engine.node)
            keys = [getattr(n, "key", n) for n in path]
            return SearchResult(name, True, keys, float(engine.node.general_score), engine.steps,
                                meter.elapsed, meter.peak_kb)

        error = None if engine.is_finished() else "step budget exhausted"
        return SearchResult(name, False, [], float("inf"), engine.steps, meter.elapsed, meter.peak_kb, error)
