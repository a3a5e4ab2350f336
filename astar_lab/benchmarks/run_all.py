# astar_lab/benchmarks/run_all.py
# Compares plain A* with beam-filtered variants on the sample problems and writes results.json.
#   python -m astar_lab.benchmarks.run_all
# Reads ASTAR_MAX_STEPS, ASTAR_BEAM_K and ASTAR_COST_BOUND; unset values fall back to the default sweep.
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from ..algorithms.astar import a_star_search
from ..algorithms.beam import CostBoundBeam, KBestBeam
from ..config import SearchSettings
from ..problems.grid import make_grid_world
from ..problems.romania import romania_problem
from ..problems.xy import IdVerifier, NodeListEnumerator, sample_nodes

# ---- Defaults used when the environment leaves a setting unset --------------
BEAM_KS    = [1, 2, 4]
COST_BOUND = 450.0      # CostBoundBeam bound (Romania km)
MAX_STEPS  = 50000      # per run

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _xy_problem():
    nodes = sample_nodes()
    return nodes[0], nodes[-1], IdVerifier(nodes[-1].id), NodeListEnumerator(nodes)

def _load_problems() -> List[Tuple[str, Callable[[], Tuple[Any, Any, Any, Any]]]]:
    # factories, so every run starts from fresh node scores
    return [
        ("xy", _xy_problem),
        ("romania", romania_problem),
        ("grid", make_grid_world),
    ]

def _max_steps(settings: Optional[SearchSettings] = None) -> int:
    settings = settings or SearchSettings.from_env()
    return settings.max_steps if settings.max_steps is not None else MAX_STEPS

def _load_variants(settings: Optional[SearchSettings] = None):
    settings = settings or SearchSettings.from_env()
    ks = [settings.beam_k] if settings.beam_k is not None else BEAM_KS
    bound = settings.cost_bound if settings.cost_bound is not None else COST_BOUND
    # filters are built per run, so KBestBeam.evicted counts one run only
    variants = [("A*", lambda: None)]
    for k in ks:
        variants.append((f"Beam(k={k})", lambda k=k: KBestBeam(k)))
    variants.append((f"CostBound({bound:g})", lambda: CostBoundBeam(bound)))
    return variants

def main():
    settings = SearchSettings.from_env()
    max_steps = _max_steps(settings)
    rows = []
    for pname, factory in _load_problems():
        for vname, make_filter in _load_variants(settings):
            name = f"{pname}/{vname}"
            print(f"→ Running {name} ...")
            try:
                start, target, verifier, neighbors = factory()
                r = a_star_search(start, target, verifier, neighbors, make_filter(),
                                  max_steps=max_steps, name=name)
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
                rows.append(r.to_row())
            except Exception as e:
                print(f"  {name}: ERROR {repr(e)}")
                rows.append({
                    "algo": name,
                    "success": False,
                    "error": repr(e),
                    "path": [],
                    "nodes_expanded": None,
                    "cost": None,
                    "time_s": None,
                    "peak_kb": None,
                })

    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script
    out_path = Path(__file__).with_name("results.json")
    try:
        out_path.write_text(json.dumps(out, indent=2))
    except OSError as e:
        print(f"  Could not write {out_path}: {e}")

if __name__ == "__main__":
    main()
