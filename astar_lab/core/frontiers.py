# astar_lab/core/frontiers.py
from __future__ import annotations
import heapq

_REMOVED = object()  # placeholder for a superseded entry


class PriorityQueue:
    """
    Min-heap by key(x), holding at most one live entry per node identity.

    The key is read once, when the node is pushed. Pushing a node that is already
    present supersedes the old entry instead of mutating it in place; superseded
    entries stay in the heap and are dropped lazily when they reach the top.
    Equal keys pop in insertion order.
    """
    def __init__(self, key=None):
        self.key = key or (lambda n: n.total_score)
        self.h = []
        self.counter = 0  # tie-breaker for stability
        self.entries = {}  # node -> live [key, counter, node]

    def push(self, x):
        self._supersede(x)
        self.counter += 1
        entry = [self.key(x), self.counter, x]
        self.entries[x] = entry
        heapq.heappush(self.h, entry)

    def pop(self):
        self._prune()
        if not self.h:
            raise IndexError("pop from an empty frontier")
        x = heapq.heappop(self.h)[2]
        del self.entries[x]
        return x

    def peek(self):
        self._prune()
        if not self.h:
            raise IndexError("peek at an empty frontier")
        return self.h[0][2]

    def remove(self, x) -> bool:
        """Drop x's live entry. Returns False when x was not queued."""
        return self._supersede(x)

    def priority(self, x) -> float:
        return self.entries[x][0]

    def worst(self):
        """Live node with the highest key (latest pushed on ties). Linear scan."""
        if not self.entries:
            raise IndexError("worst of an empty frontier")
        return max(self.entries.values(), key=lambda e: (e[0], e[1]))[2]

    def __len__(self): return len(self.entries)
    def __contains__(self, x): return x in self.entries
    def __iter__(self):
        return iter([e[2] for e in self.entries.values()])

    def _supersede(self, x) -> bool:
        entry = self.entries.pop(x, None)
        if entry is None:
            return False
        entry[2] = _REMOVED
        return True

    def _prune(self):
        while self.h and self.h[0][2] is _REMOVED:
            heapq.heappop(self.h)
