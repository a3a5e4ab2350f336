# astar_lab/core/utils.py
#This code provides utility functions for reconstructing the solution path from the engine's predecessor map.
from __future__ import annotations
from typing import Iterable, List, Mapping


def reconstruct_path(solution: Mapping, end) -> List:
    """
    Walk predecessor links back from `end` until a node with no entry (the start),
    then reverse. Returns the nodes start -> end.
    """
    path = [end]
    seen = {end}
    cur = end
    while cur in solution:
        cur = solution[cur]
        if cur in seen:
            raise ValueError(f"Predecessor cycle through {cur!r}")
        seen.add(cur)
        path.append(cur)
    path.reverse()
    return path


def path_cost(path: Iterable) -> float:
    nodes = list(path)
    return float(sum(a.cost_to(b) for a, b in zip(nodes, nodes[1:])))
