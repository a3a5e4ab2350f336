# astar_lab/benchmarks/plot_results.py
# Renders results.json (from run_all) as one bar-chart figure per sample problem.
from __future__ import annotations
import io
import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

_PANELS = [
    ("nodes_expanded", "Nodes Expanded", "nodes"),
    ("cost", "Path Cost", "cost"),
    ("time_s", "Wall Time", "seconds"),
]

def load_rows(path: Path = RESULTS_JSON) -> List[dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m astar_lab.benchmarks.run_all")
    return json.loads(path.read_text()).get("results", [])

def group_by_problem(rows: List[dict]) -> Dict[str, List[dict]]:
    """'romania/Beam(k=2)' -> groups['romania'] (variant name kept in row['variant'])."""
    groups: Dict[str, List[dict]] = defaultdict(list)
    for r in rows:
        problem, _, variant = r["algo"].partition("/")
        groups[problem].append(dict(r, variant=variant or problem))
    return dict(groups)

def _bar(ax, rows, metric, title, ylabel):
    names = [r["variant"] for r in rows]
    # failed runs have no cost; draw them as empty bars labelled FAIL
    vals = [r.get(metric) if r.get("success") else None for r in rows]
    x = list(range(len(names)))
    ax.bar(x, [v or 0 for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=20, ha="right")
    top = max([v for v in vals if v] or [1])
    for xi, v in zip(x, vals):
        label = "FAIL" if v is None else (f"{v:.3g}" if isinstance(v, float) else f"{v}")
        ax.text(xi, (v or 0) + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def figure_for(problem: str, rows: List[dict]):
    fig, axs = plt.subplots(1, len(_PANELS), figsize=(13, 4))
    for ax, (metric, title, ylabel) in zip(axs, _PANELS):
        _bar(ax, rows, metric, title, ylabel)
    fig.suptitle(f"A* vs beam filters: {problem}")
    fig.tight_layout(rect=[0, 0, 1, 0.93])
    return fig

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def main():
    groups = group_by_problem(load_rows())
    if not groups:
        raise SystemExit("No rows to plot.")
    for problem, rows in groups.items():
        fig = figure_for(problem, rows)
        out = OUT_DIR / f"{problem}.png"
        out.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {out}")

if __name__ == "__main__":
    main()
