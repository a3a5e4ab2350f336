# astar_lab/problems/xy.py
# A small 2-D coordinate graph: nodes live in a caller-owned list and refer to their neighbors by index.
from __future__ import annotations
import math
from typing import Iterable, List, Optional

from ..core.node import ScoredNode


class XyNode(ScoredNode):
    """
    Node with an integer id, planar coordinates and outgoing neighbor ids.
    Edge cost and heuristic are both Euclidean distance, so the heuristic is admissible.
    """
    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0, neighbors: Optional[List[int]] = None):
        super().__init__()
        self.id = node_id
        self.x = x
        self.y = y
        self.neighbors = list(neighbors or [])

    @property
    def key(self) -> int:
        return self.id

    def cost_to(self, other: "XyNode") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def estimate_to(self, target: "XyNode") -> float:
        return self.cost_to(target)


class NodeListEnumerator:
    """Yields the stored neighbor nodes of a node. The node list stays owned by the caller."""
    def __init__(self, nodes: List[XyNode]):
        self.nodes = nodes

    def __call__(self, node: XyNode) -> Iterable[XyNode]:
        for i in node.neighbors:
            yield self.nodes[i]


class IdVerifier:
    def __init__(self, node_id: int):
        self.node_id = node_id

    def __call__(self, node: XyNode) -> bool:
        return node.id == self.node_id


# (id, x, y, neighbor ids); a directed tree-like graph with a shortcut via node 10
_SAMPLE = [
    (0, 0, 5, [1, 2]),
    (1, 3, 6, [3]),
    (2, 4, 3, [4, 5]),
    (3, 6, 9, [6, 7]),
    (4, 7, 3, [8, 10]),
    (5, 6, 1, [8]),
    (6, 8, 6, [7, 10]),
    (7, 11, 8, [9]),
    (8, 10, 2, [11]),
    (9, 13, 6, []),
    (10, 8, 6, [12]),
    (11, 13, 0, []),
    (12, 17, 3, []),
]


def sample_nodes() -> List[XyNode]:
    return [XyNode(i, x, y, nbrs) for i, x, y, nbrs in _SAMPLE]
