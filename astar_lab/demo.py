# astar_lab/demo.py
# Demonstration driver: builds a sample graph, steps the engine to exhaustion and prints the path.
#   python -m astar_lab.demo --problem romania --beam-k 3
from __future__ import annotations

import argparse
import logging

from .algorithms.astar import AStar
from .config import SearchSettings
from .core.utils import path_cost, reconstruct_path
from .problems.grid import make_grid_world
from .problems.romania import romania_problem
from .problems.xy import IdVerifier, NodeListEnumerator, sample_nodes


def _load_problem(name: str, start: str | None, goal: str | None):
    if name == "xy":
        nodes = sample_nodes()
        s = nodes[int(start)] if start is not None else nodes[0]
        t = nodes[int(goal)] if goal is not None else nodes[-1]
        return s, t, IdVerifier(t.id), NodeListEnumerator(nodes)
    if name == "romania":
        return romania_problem(start or "Arad", goal or "Bucharest")
    return make_grid_world()


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _label(node) -> str:
    return str(getattr(node, "key", node))


def main(argv=None) -> int:
    settings = SearchSettings.from_env()
    parser = argparse.ArgumentParser(description="Run incremental A* on a sample graph")
    parser.add_argument("--problem", choices=["xy", "romania", "grid"], default="xy")
    parser.add_argument("--start", help="start node (id or city name)")
    parser.add_argument("--goal", help="goal node (id or city name)")
    parser.add_argument("--max-steps", type=_positive_int, default=settings.max_steps)
    parser.add_argument("--beam-k", type=_positive_int, default=settings.beam_k)
    parser.add_argument("--cost-bound", type=float, default=settings.cost_bound)
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    settings = SearchSettings(args.max_steps, args.beam_k, args.cost_bound, args.log_level)

    start, target, verifier, neighbors = _load_problem(args.problem, args.start, args.goal)
    engine = AStar(start, target, verifier, neighbors, settings.beam_filter())

    steps = 0
    while engine.step():
        steps += 1
        if settings.max_steps is not None and steps >= settings.max_steps:
            print(f"stopped after {steps} steps (budget); current node {_label(engine.node)}")
            return 2

    if not engine.has_solution():
        print(f"steps={steps} no path from {_label(start)} to {_label(target)}")
        return 1

    path = reconstruct_path(engine.solution(), engine.node)
    print(f"steps={steps} cost={path_cost(path):g} path: {' -> '.join(_label(n) for n in path)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
