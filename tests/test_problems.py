# tests/test_problems.py
import pytest

from astar_lab import demo
from astar_lab.algorithms.astar import a_star_search
from astar_lab.problems.checks import sanity_check_graph
from astar_lab.problems.grid import make_grid_world
from astar_lab.problems.romania import RomaniaRoads, romania_problem
from astar_lab.problems.xy import IdVerifier, NodeListEnumerator, sample_nodes


def test_xy_sample_takes_the_cheaper_branch():
    """0-2-4-10-12 (~20.12) beats 0-1-3-6-10-12 (~20.50)."""
    nodes = sample_nodes()
    result = a_star_search(nodes[0], nodes[12], IdVerifier(12), NodeListEnumerator(nodes))
    assert result.success
    assert result.path == [0, 2, 4, 10, 12]
    assert result.cost == pytest.approx(20.1212, abs=1e-3)


def test_xy_unreachable_goal():
    nodes = sample_nodes()
    # node 9 has no outgoing edges, so nothing is reachable from it
    result = a_star_search(nodes[9], nodes[0], IdVerifier(0), NodeListEnumerator(nodes))
    assert not result.success and result.nodes_expanded == 1


def test_romania_roads_share_one_node_per_city():
    roads = RomaniaRoads()
    assert roads.city("Arad") is roads.city("Arad")
    assert roads.city("Zerind") in list(roads(roads.city("Arad")))
    with pytest.raises(KeyError):
        roads.city("Atlantis")


def test_romania_heuristic_only_toward_bucharest():
    start, target, _, roads = romania_problem("Arad", "Craiova")
    start.update_heuristic(target)
    assert start.heuristic_score == 0.0
    result = a_star_search(*romania_problem("Arad", "Craiova"))
    assert result.success and result.cost == 366  # Arad-Sibiu-Rimnicu Vilcea-Craiova


def test_non_adjacent_cities_raise():
    roads = RomaniaRoads()
    with pytest.raises(KeyError):
        roads.city("Arad").cost_to(roads.city("Bucharest"))


def test_grid_world_neighbors_respect_walls():
    start, goal, verifier, world = make_grid_world()
    cells = {n.key for n in world(start)}
    assert cells == {(1, 0), (0, 1)}
    assert not world.passable((1, 3))
    assert verifier(goal) and not verifier(start)


def test_sanity_check_accepts_sample_graphs():
    start, _, _, roads = romania_problem()
    msg = sanity_check_graph(start, roads)
    assert msg.startswith("OK: visited 20 nodes")


def test_sanity_check_flags_bad_costs(make_graph):
    g = make_graph({0: {1: 1}, 1: {2: -3}})
    with pytest.raises(AssertionError, match="negative"):
        sanity_check_graph(g.nodes[0], g)
    g = make_graph({0: {1: None}})
    with pytest.raises(AssertionError, match="None"):
        sanity_check_graph(g.nodes[0], g)


def test_demo_prints_reconstructed_path(capsys, monkeypatch):
    for var in ("ASTAR_MAX_STEPS", "ASTAR_BEAM_K", "ASTAR_COST_BOUND", "ASTAR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert demo.main(["--problem", "romania"]) == 0
    out = capsys.readouterr().out
    assert "cost=418" in out
    assert "Arad -> Sibiu -> Rimnicu Vilcea -> Pitesti -> Bucharest" in out


def test_demo_reports_budget_and_failure(capsys, monkeypatch):
    for var in ("ASTAR_MAX_STEPS", "ASTAR_BEAM_K", "ASTAR_COST_BOUND", "ASTAR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert demo.main(["--problem", "grid", "--max-steps", "2"]) == 2
    assert "budget" in capsys.readouterr().out
    assert demo.main(["--problem", "xy", "--start", "9", "--goal", "0"]) == 1
    assert "no path" in capsys.readouterr().out


@pytest.mark.parametrize("flag, value", [
    ("--max-steps", "0"),
    ("--max-steps", "-3"),
    ("--max-steps", "few"),
    ("--beam-k", "0"),
])
def test_demo_rejects_non_positive_counts(capsys, monkeypatch, flag, value):
    for var in ("ASTAR_MAX_STEPS", "ASTAR_BEAM_K", "ASTAR_COST_BOUND", "ASTAR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    with pytest.raises(SystemExit) as exc:
        demo.main(["--problem", "grid", flag, value])
    assert exc.value.code == 2
    assert flag in capsys.readouterr().err
