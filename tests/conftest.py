# tests/conftest.py
import pytest

from astar_lab.core.node import ScoredNode


class GraphNode(ScoredNode):
    """Node of a small weighted digraph; heuristic comes from the graph's h table."""
    def __init__(self, node_id, graph):
        super().__init__()
        self.id = node_id
        self.graph = graph

    @property
    def key(self):
        return self.id

    def cost_to(self, other):
        return self.graph.edges[self.id][other.id]

    def estimate_to(self, target):
        return self.graph.h.get(self.id, 0)


class Graph:
    """Adjacency-dict graph that doubles as the neighbor enumerator and records expansions."""
    def __init__(self, edges, h=None, ids=()):
        all_ids = set(edges) | set(ids) | {v for nbrs in edges.values() for v in nbrs}
        self.edges = {i: dict(edges.get(i, {})) for i in all_ids}
        self.h = dict(h or {})
        self.nodes = {i: GraphNode(i, self) for i in all_ids}
        self.expanded = []

    def __call__(self, node):
        self.expanded.append(node.id)
        return [self.nodes[j] for j in self.edges[node.id]]

    def verifier(self, target_id):
        return lambda n: n.id == target_id


@pytest.fixture
def make_graph():
    return Graph
