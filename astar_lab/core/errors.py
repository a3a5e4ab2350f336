# astar_lab/core/errors.py
from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when the engine is handed inputs it cannot score or call."""
