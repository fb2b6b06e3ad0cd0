"""Tests for sitetheme.personality — vector normalisation and interpolation."""

from __future__ import annotations

import math

import pytest

from sitetheme.personality import AXES, NEUTRAL, axis_value, clamp, describe_vector, lerp, normalize_vector


class TestNormalizeVector:
    def test_in_range_values_pass_through(self) -> None:
        assert normalize_vector([0.1, 0.2, 0.3, 0.4, 0.5, 0.6]) == (0.1, 0.2, 0.3, 0.4, 0.5, 0.6)

    def test_out_of_range_values_are_clamped(self) -> None:
        assert normalize_vector([2, -1, 0.5, 0.5, 0.5, 0.5])[:2] == (1.0, 0.0)

    def test_short_vector_is_padded_with_neutral(self) -> None:
        pv = normalize_vector([0.9])
        assert len(pv) == len(AXES)
        assert pv[1:] == (NEUTRAL,) * 5

    def test_long_vector_is_truncated(self) -> None:
        assert len(normalize_vector([0.1] * 9)) == 6

    def test_non_finite_and_non_numeric_become_neutral(self) -> None:
        pv = normalize_vector([math.nan, math.inf, "x", None, 0.2, 0.8])
        assert pv[:4] == (NEUTRAL,) * 4
        assert pv[4:] == (0.2, 0.8)


class TestHelpers:
    def test_clamp(self) -> None:
        assert clamp(1.4) == 1.0
        assert clamp(-0.2) == 0.0
        assert clamp(5, 0, 10) == 5

    def test_lerp_endpoints_and_midpoint(self) -> None:
        assert lerp(10, 20, 0) == 10
        assert lerp(10, 20, 1) == 20
        assert lerp(10, 20, 0.5) == pytest.approx(15)

    def test_lerp_clamps_t(self) -> None:
        assert lerp(10, 20, 3) == 20

    def test_axis_value_by_name(self) -> None:
        assert axis_value([0.1, 0.2, 0.3, 0.4, 0.5, 0.6], "energy") == pytest.approx(0.6)

    def test_describe_vector_mentions_every_axis(self) -> None:
        text = describe_vector([0.5] * 6)
        assert text.count(" · ") == len(AXES) - 1
