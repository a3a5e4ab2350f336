# astar_lab/config.py
# Tunables for the demo driver and benchmarks, overridable via environment variables.
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .algorithms.beam import CostBoundBeam, KBestBeam

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _env_float(env: Mapping[str, str], name: str) -> Optional[float]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class SearchSettings:
    max_steps: Optional[int] = None      # ASTAR_MAX_STEPS, step budget per run
    beam_k: Optional[int] = None         # ASTAR_BEAM_K, KBestBeam width
    cost_bound: Optional[float] = None   # ASTAR_COST_BOUND, CostBoundBeam bound
    log_level: str = "WARNING"           # ASTAR_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "SearchSettings":
        env = os.environ if env is None else env
        level = env.get("ASTAR_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
        if level not in _LOG_LEVELS:
            raise ValueError(f"ASTAR_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
        return cls(
            max_steps=_env_int(env, "ASTAR_MAX_STEPS"),
            beam_k=_env_int(env, "ASTAR_BEAM_K"),
            cost_bound=_env_float(env, "ASTAR_COST_BOUND"),
            log_level=level,
        )

    def beam_filter(self):
        """KBestBeam when a width is set, else CostBoundBeam when a bound is set, else None (plain A*)."""
        if self.beam_k is not None:
            return KBestBeam(self.beam_k)
        if self.cost_bound is not None:
            return CostBoundBeam(self.cost_bound)
        return None
