"""
personality.py — The 6-axis personality vector.

Every axis runs 0 → 1 between two poles:

  0 density      minimal  → rich
  1 tone         playful  → serious
  2 temperature  warm     → cool
  3 weight       light    → bold
  4 era          classic  → modern
  5 energy       calm     → dynamic

Vectors coming from the intake layer are normalised before use: values are
clamped into [0, 1], non-finite values become 0.5 and the length is forced
to 6 (truncate or pad with 0.5).
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

AXES: Tuple[str, ...] = ("density", "tone", "temperature", "weight", "era", "energy")

AXIS_POLES = {
    "density":     ("minimal", "rich"),
    "tone":        ("playful", "serious"),
    "temperature": ("warm", "cool"),
    "weight":      ("light", "bold"),
    "era":         ("classic", "modern"),
    "energy":      ("calm", "dynamic"),
}

NEUTRAL = 0.5

PersonalityVector = Tuple[float, float, float, float, float, float]


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b; t is clamped to [0, 1]."""
    return a + (b - a) * clamp(t)


def normalize_vector(values: Iterable[float]) -> PersonalityVector:
    cleaned = []
    for raw in list(values)[: len(AXES)]:
        try:
            v = float(raw)
        except (TypeError, ValueError):
            v = NEUTRAL
        if not math.isfinite(v):
            v = NEUTRAL
        cleaned.append(clamp(v))
    while len(cleaned) < len(AXES):
        cleaned.append(NEUTRAL)
    return tuple(cleaned)  # type: ignore[return-value]


def axis_value(vector: Sequence[float], axis: str) -> float:
    """Read one named axis from an already-normalised vector."""
    return vector[AXES.index(axis)]


def describe_vector(vector: Sequence[float]) -> str:
    """Short human label, e.g. 'rich · serious · cool · bold · modern · calm'."""
    parts = []
    for name, value in zip(AXES, normalize_vector(vector)):
        low, high = AXIS_POLES[name]
        if value < 0.4:
            parts.append(low)
        elif value > 0.6:
            parts.append(high)
        else:
            parts.append(f"balanced {name}")
    return " · ".join(parts)
