# astar_lab/problems/romania.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

from ..core.node import ScoredNode


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}

SLD_TARGET = "Bucharest"


@dataclass(frozen=True)
class RomaniaMap:
    graph: Mapping[str, Mapping[str, int]]
    sld_to_bucharest: Mapping[str, int]


ROMANIA = RomaniaMap(graph=_GRAPH, sld_to_bucharest=_SLD)


# --- Nodes and enumerator ----------------------------------------------------

class CityNode(ScoredNode):
    """
    A city on the map. Edge cost is road distance; a KeyError means the two
    cities are not adjacent. The heuristic is the straight-line distance when
    the target is Bucharest, and 0 otherwise (the table only covers Bucharest).
    """
    def __init__(self, name: str, data: RomaniaMap = ROMANIA):
        super().__init__()
        self.name = name
        self.data = data

    @property
    def key(self) -> str:
        return self.name

    def cost_to(self, other: "CityNode") -> float:
        return float(self.data.graph[self.name][other.name])

    def estimate_to(self, target: "CityNode") -> float:
        if target.name != SLD_TARGET:
            return 0.0
        return float(self.data.sld_to_bucharest[self.name])


class RomaniaRoads:
    """Neighbor enumerator; hands out one shared CityNode per city."""
    def __init__(self, data: RomaniaMap = ROMANIA):
        self.data = data
        self._cities: Dict[str, CityNode] = {}

    def city(self, name: str) -> CityNode:
        if name not in self.data.graph:
            raise KeyError(f"Unknown city {name!r}")
        if name not in self._cities:
            self._cities[name] = CityNode(name, self.data)
        return self._cities[name]

    def __call__(self, node: CityNode) -> Iterable[CityNode]:
        for name in self.data.graph[node.name]:
            yield self.city(name)


def romania_problem(start: str = "Arad", goal: str = "Bucharest"):
    """
    Factory for a ready-to-use (start, target, verifier, neighbors) tuple.
    """
    roads = RomaniaRoads(ROMANIA)
    target = roads.city(goal)
    return roads.city(start), target, (lambda n: n.name == goal), roads
