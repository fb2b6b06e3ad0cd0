"""Tests for sitetheme.presets — the curated preset catalogue."""

from __future__ import annotations

import re

from sitetheme import colors
from sitetheme.presets import LUXURY_DARK, THEME_PRESETS, get_preset_by_id
from sitetheme.tokens import COLOR_TOKEN_KEYS, TOKEN_KEYS

HEX6 = re.compile(r"^#[0-9a-f]{6}$")
DARK_PRESETS = {"luxury-dark", "bold-creative", "tech-forward"}


class TestCatalogue:
    def test_seven_presets(self) -> None:
        assert len(THEME_PRESETS) == 7

    def test_ids_and_primaries_are_unique(self) -> None:
        assert len({p.id for p in THEME_PRESETS}) == 7
        assert len({p.tokens.color_primary for p in THEME_PRESETS}) == 7

    def test_metadata(self) -> None:
        for preset in THEME_PRESETS:
            assert preset.name
            assert len(preset.description) > 20
            assert len(preset.personality_vector) == 6
            assert all(0 <= v <= 1 for v in preset.personality_vector)

    def test_tokens_are_complete(self) -> None:
        for preset in THEME_PRESETS:
            data = preset.tokens.to_dict()
            assert set(data) == set(TOKEN_KEYS)
            for key in COLOR_TOKEN_KEYS:
                assert HEX6.match(data[key]), (preset.id, key)


class TestReadability:
    def test_dark_presets(self) -> None:
        for preset in THEME_PRESETS:
            if preset.id in DARK_PRESETS:
                assert colors.relative_luminance(preset.tokens.color_background) < 0.2, preset.id
                assert colors.relative_luminance(preset.tokens.color_text) > 0.5, preset.id

    def test_light_presets(self) -> None:
        for preset in THEME_PRESETS:
            if preset.id not in DARK_PRESETS:
                assert colors.relative_luminance(preset.tokens.color_background) > 0.8, preset.id
                assert colors.relative_luminance(preset.tokens.color_text) < 0.1, preset.id

    def test_text_contrast(self) -> None:
        for preset in THEME_PRESETS:
            assert colors.contrast_ratio(preset.tokens.color_text, preset.tokens.color_background) >= 7


class TestLookup:
    def test_by_id_returns_same_object(self) -> None:
        assert get_preset_by_id("luxury-dark") is LUXURY_DARK

    def test_misses(self) -> None:
        assert get_preset_by_id("") is None
        assert get_preset_by_id(None) is None
        assert get_preset_by_id("dark-luxury") is None

    def test_shadows_use_preset_shadow_colour(self) -> None:
        assert LUXURY_DARK.tokens.shadow_color == "#c9a55c1f"
        assert "#c9a55c1f" in LUXURY_DARK.tokens.shadow_xl
        assert LUXURY_DARK.tokens.color_primary == "#c9a55c"
