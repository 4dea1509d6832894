"""Physics helpers for particle kinematics."""

from __future__ import annotations

__all__ = [
    "properties",
    "rotation",
    "triplet",
]
