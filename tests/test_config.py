# tests/test_config.py
import pytest

from astar_lab.algorithms.beam import CostBoundBeam, KBestBeam
from astar_lab.config import SearchSettings


def test_defaults_from_empty_environment():
    s = SearchSettings.from_env({})
    assert s == SearchSettings(max_steps=None, beam_k=None, cost_bound=None, log_level="WARNING")
    assert s.beam_filter() is None


def test_values_from_environment():
    s = SearchSettings.from_env({
        "ASTAR_MAX_STEPS": "500",
        "ASTAR_BEAM_K": " 4 ",
        "ASTAR_COST_BOUND": "418.5",
        "ASTAR_LOG_LEVEL": "debug",
    })
    assert (s.max_steps, s.beam_k, s.cost_bound, s.log_level) == (500, 4, 418.5, "DEBUG")
    beam = s.beam_filter()
    assert isinstance(beam, KBestBeam) and beam.k == 4


def test_cost_bound_used_when_no_width():
    beam = SearchSettings.from_env({"ASTAR_COST_BOUND": "100"}).beam_filter()
    assert isinstance(beam, CostBoundBeam) and beam.bound == 100.0


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ASTAR_MAX_STEPS", "7")
    monkeypatch.delenv("ASTAR_BEAM_K", raising=False)
    assert SearchSettings.from_env().max_steps == 7


@pytest.mark.parametrize("env, name", [
    ({"ASTAR_MAX_STEPS": "many"}, "ASTAR_MAX_STEPS"),
    ({"ASTAR_BEAM_K": "0"}, "ASTAR_BEAM_K"),
    ({"ASTAR_COST_BOUND": "far"}, "ASTAR_COST_BOUND"),
    ({"ASTAR_LOG_LEVEL": "LOUD"}, "ASTAR_LOG_LEVEL"),
])
def test_malformed_values_name_the_variable(env, name):
    with pytest.raises(ValueError, match=name):
        SearchSettings.from_env(env)
