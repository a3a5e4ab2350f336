# astar_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional
import math, time, tracemalloc

@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any]          # node keys, start -> goal
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """JSON-friendly dict (inf cost becomes None)."""
        row = asdict(self)
        if math.isinf(self.cost):
            row["cost"] = None
        return row

class MeasuredRun:
    """
    Context manager for wall time and (approximate) peak memory of a search run.
    Safe to query .elapsed and .peak_kb inside the with-block.
    With trace_memory=False, tracemalloc is left alone and peak_kb stays 0.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
