"""Shared fixtures: named personality vectors and a balanced base theme."""

from __future__ import annotations

import pytest

from sitetheme.theme_generator import generate_theme_from_vector
from sitetheme.tokens import ThemeTokens

PERSONALITY_VECTORS = {
    "minimal": [0.1, 0.5, 0.5, 0.3, 0.5, 0.3],
    "rich": [0.9, 0.5, 0.5, 0.7, 0.5, 0.7],
    "playful": [0.5, 0.1, 0.5, 0.4, 0.5, 0.8],
    "serious": [0.5, 0.9, 0.5, 0.6, 0.5, 0.3],
    "warm": [0.5, 0.5, 0.1, 0.5, 0.3, 0.5],
    "cool": [0.5, 0.5, 0.9, 0.5, 0.8, 0.5],
    "light": [0.3, 0.5, 0.5, 0.2, 0.5, 0.5],
    "bold": [0.7, 0.5, 0.5, 0.8, 0.5, 0.5],
    "classic": [0.5, 0.5, 0.5, 0.5, 0.1, 0.5],
    "modern": [0.5, 0.5, 0.5, 0.5, 0.9, 0.5],
    "balanced": [0.5, 0.5, 0.5, 0.5, 0.5, 0.5],
}


@pytest.fixture
def vectors() -> dict:
    return PERSONALITY_VECTORS


@pytest.fixture
def balanced_theme() -> ThemeTokens:
    return generate_theme_from_vector(PERSONALITY_VECTORS["balanced"])


def numeric(value: str) -> float:
    """'1.5rem' → 1.5, '200ms' → 200.0, '-0.02em' → -0.02."""
    digits = "".join(ch for ch in value if ch.isdigit() or ch in ".-")
    return float(digits)
