"""Tests for sitetheme.gradients — mesh, placeholder and noise backgrounds."""

from __future__ import annotations

from urllib.parse import unquote

import pytest

from sitetheme.gradients import PLACEHOLDER_VARIANTS, mesh_gradient, noise_overlay, placeholder_gradient

PRIMARY, SECONDARY, ACCENT = "#2563eb", "#0ea5e9", "#f59e0b"


class TestMeshGradient:
    def test_layers(self) -> None:
        assert mesh_gradient(PRIMARY, SECONDARY, ACCENT) == (
            "radial-gradient(ellipse at 20% 50%, #2563eb33 0%, transparent 50%), "
            "radial-gradient(ellipse at 80% 20%, #0ea5e928 0%, transparent 50%), "
            "radial-gradient(ellipse at 50% 80%, #f59e0b22 0%, transparent 50%), "
            "linear-gradient(135deg, #2563eb0d 0%, transparent 100%)"
        )

    def test_angle(self) -> None:
        assert mesh_gradient(PRIMARY, SECONDARY, ACCENT, angle=90).endswith(
            "linear-gradient(90deg, #2563eb0d 0%, transparent 100%)"
        )


class TestPlaceholderGradient:
    def test_soft_is_default(self) -> None:
        assert placeholder_gradient(PRIMARY, SECONDARY) == (
            "linear-gradient(135deg, #2563eb20 0%, #0ea5e918 100%)"
        )

    def test_bold(self) -> None:
        assert placeholder_gradient(PRIMARY, SECONDARY, "bold") == (
            "linear-gradient(135deg, #2563eb40 0%, #0ea5e940 100%)"
        )

    def test_diagonal_returns_to_primary(self) -> None:
        assert placeholder_gradient(PRIMARY, SECONDARY, "diagonal") == (
            "linear-gradient(160deg, #2563eb30 0%, #0ea5e925 50%, #2563eb15 100%)"
        )

    @pytest.mark.parametrize("variant", PLACEHOLDER_VARIANTS)
    def test_variants_are_distinct_from_unknown(self, variant: str) -> None:
        css = placeholder_gradient(PRIMARY, SECONDARY, variant)
        assert css.startswith("linear-gradient(")
        if variant != "soft":
            assert css != placeholder_gradient(PRIMARY, SECONDARY, "glossy")

    def test_unknown_variant_is_soft(self) -> None:
        assert placeholder_gradient(PRIMARY, SECONDARY, "glossy") == placeholder_gradient(PRIMARY, SECONDARY)


class TestNoiseOverlay:
    def test_data_uri(self) -> None:
        css = noise_overlay()
        assert css.startswith('url("data:image/svg+xml,%3Csvg%20xmlns%3D\'http%3A%2F%2Fwww.w3.org')
        assert css.endswith('%3C%2Fsvg%3E")')
        assert "opacity%3D'0.03'" in css

    def test_filter_reference_is_escaped_twice(self) -> None:
        assert "url(%2523n)" in noise_overlay()

    def test_opacity_formatting(self) -> None:
        assert "opacity='0.1'" in unquote(noise_overlay(0.1))
        assert "opacity='1'" in unquote(noise_overlay(1))
