# tests/test_beam.py
import pytest

from astar_lab.algorithms.astar import AStar, a_star_search
from astar_lab.algorithms.beam import CostBoundBeam, KBestBeam, no_beam_filter
from astar_lab.core.frontiers import PriorityQueue
from astar_lab.problems.romania import romania_problem
from astar_lab.problems.xy import XyNode


def _open(*scores):
    """Open set + frontier holding nodes 0..n-1 with the given g (h = 0)."""
    frontier, open_set = PriorityQueue(), {}
    for i, g in enumerate(scores):
        n = XyNode(i)
        n.general_score = g
        frontier.push(n)
        open_set[n] = n
    return open_set, frontier


def _candidate(i, g):
    n = XyNode(i)
    n.general_score = g
    return n


def test_no_beam_filter_admits_everything():
    open_set, frontier = _open(1, 2)
    assert no_beam_filter(_candidate(9, 100), {}, open_set, frontier) is False


def test_kbest_admits_while_not_full():
    beam = KBestBeam(k=3)
    open_set, frontier = _open(1, 2)
    assert beam(_candidate(9, 100), {}, open_set, frontier) is False
    assert len(open_set) == 2


def test_kbest_rejects_candidate_no_better_than_worst():
    beam = KBestBeam(k=2)
    open_set, frontier = _open(1, 5)
    assert beam(_candidate(9, 5), {}, open_set, frontier) is True
    assert beam(_candidate(9, 7), {}, open_set, frontier) is True
    assert len(open_set) == 2 and beam.evicted == 0


def test_kbest_evicts_worst_for_better_candidate():
    beam = KBestBeam(k=2)
    open_set, frontier = _open(1, 5)
    assert beam(_candidate(9, 3), {}, open_set, frontier) is False
    assert XyNode(1) not in open_set and XyNode(1) not in frontier
    assert beam.evicted == 1


def test_kbest_always_admits_improvement_of_open_node():
    beam = KBestBeam(k=2)
    open_set, frontier = _open(1, 5)
    assert beam(_candidate(1, 4), {}, open_set, frontier) is False


def test_kbest_width_must_be_positive():
    with pytest.raises(ValueError):
        KBestBeam(0)


def test_kbest_bounds_open_set_during_search():
    start, target, verifier, roads = romania_problem()
    engine = AStar(start, target, verifier, roads, KBestBeam(2))
    while engine.step():
        assert len(engine.open_set) <= 2
        assert len(engine.frontier) == len(engine.open_set)


def test_wide_beam_matches_plain_astar():
    plain = a_star_search(*romania_problem())
    wide = a_star_search(*romania_problem(), beam_filter=KBestBeam(50))
    assert wide.success and wide.cost == plain.cost == 418
    assert wide.path == plain.path


def test_cost_bound_prunes_expensive_candidates():
    tight = a_star_search(*romania_problem(), beam_filter=CostBoundBeam(300))
    assert not tight.success
    assert tight.nodes_expanded == 1, "every neighbor of Arad exceeds the bound"

    exact = a_star_search(*romania_problem(), beam_filter=CostBoundBeam(418))
    assert exact.success and exact.cost == 418
    assert repr(CostBoundBeam(418)) == "CostBoundBeam(bound=418)"


def test_kbest_evictions_accumulate_across_runs():
    beam = KBestBeam(k=2)
    open_set, frontier = _open(1, 5)
    assert beam(_candidate(9, 3), {}, open_set, frontier) is False
    open_set, frontier = _open(1, 5)
    assert beam(_candidate(9, 2), {}, open_set, frontier) is False
    assert beam.evicted == 2

    assert KBestBeam(k=2).evicted == 0, "a fresh filter starts a fresh count"
