# astar_lab/problems/grid.py
from __future__ import annotations
from typing import Iterable, Set, Tuple

from ..core.node import ScoredNode

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridNode(ScoredNode):
    """Cell (row, col) with unit step cost; Manhattan heuristic (admissible on a 4-neighbor grid)."""
    def __init__(self, row: int, col: int):
        super().__init__()
        self.row = row
        self.col = col

    @property
    def key(self) -> Coord:
        return (self.row, self.col)

    def cost_to(self, other: "GridNode") -> float:
        return 1.0

    def estimate_to(self, target: "GridNode") -> float:
        return float(abs(self.row - target.row) + abs(self.col - target.col))


class GridWorld:
    """
    4-neighbor grid pathfinding with walls.

    Acts as the neighbor enumerator. Every call builds fresh GridNode values,
    so the engine only ever relates them to earlier values through their key.
    """
    def __init__(self, rows: int, cols: int, walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self.walls = walls or set()

    def passable(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def __call__(self, node: GridNode) -> Iterable[GridNode]:
        for dr, dc in _MOVES.values():
            cell = (node.row + dr, node.col + dc)
            if self.passable(cell):
                yield GridNode(*cell)

def make_grid_world():
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    world = GridWorld(rows=5, cols=7, walls=walls)
    start, goal = GridNode(0, 0), GridNode(4, 6)
    return start, goal, (lambda n: n.key == goal.key), world
