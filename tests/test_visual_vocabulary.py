"""Tests for sitetheme.visual_vocabulary — lookup and override pipeline."""

from __future__ import annotations

import pytest

from sitetheme.visual_vocabulary import (
    DEFAULT_VOCABULARY,
    VISUAL_VOCABULARIES,
    VisualVocabulary,
    apply_archetype_overrides,
    apply_personality_overrides,
    get_visual_vocabulary,
    resolve_visual_vocabulary,
)

MID = [0.5] * 6


class TestLookup:
    def test_sub_type_wins(self) -> None:
        assert get_visual_vocabulary("bakery", "restaurant").preferred_image_aspect == "square"

    def test_unknown_sub_type_falls_back_to_site_type(self) -> None:
        assert get_visual_vocabulary("unknown-subtype", "restaurant") == get_visual_vocabulary(None, "restaurant")

    def test_unknown_everything_is_default(self) -> None:
        vocab = get_visual_vocabulary("x", "y")
        assert vocab == DEFAULT_VOCABULARY
        assert vocab.section_divider == "none"
        assert vocab.decorative_opacity == pytest.approx(0.03)
        assert vocab.scroll_reveal_intensity == "subtle"
        assert vocab.enable_parallax is False

    def test_table_size(self) -> None:
        assert len(VISUAL_VOCABULARIES) == 20

    def test_to_dict_uses_camel_case(self) -> None:
        assert set(DEFAULT_VOCABULARY.to_dict()) == {
            "sectionDivider", "accentShape", "imageOverlay", "decorativeOpacity",
            "preferredImageAspect", "enableParallax", "scrollRevealIntensity",
        }


class TestVocabularyModel:
    def test_opacity_is_clamped(self) -> None:
        assert VisualVocabulary(decorative_opacity=3).decorative_opacity == 1.0
        assert VisualVocabulary(decorative_opacity=-1).decorative_opacity == 0.0

    def test_replace_returns_copy(self) -> None:
        copy = DEFAULT_VOCABULARY.replace(accent_shape="circle")
        assert copy.accent_shape == "circle"
        assert DEFAULT_VOCABULARY.accent_shape == "none"


class TestArchetypeOverrides:
    def test_none_is_never_replaced(self) -> None:
        vocab = apply_archetype_overrides(VISUAL_VOCABULARIES["photography"], "guide")
        assert vocab.accent_shape == "none"
        assert vocab.scroll_reveal_intensity == "subtle"

    def test_guide_sets_rectangle_accent(self) -> None:
        vocab = apply_archetype_overrides(VISUAL_VOCABULARIES["restaurant"], "guide")
        assert vocab.accent_shape == "rectangle"
        assert vocab.scroll_reveal_intensity == "subtle"

    def test_rebel(self) -> None:
        vocab = apply_archetype_overrides(VISUAL_VOCABULARIES["restaurant"], "rebel")
        assert vocab.section_divider == "angle"
        assert vocab.scroll_reveal_intensity == "dramatic"
        assert apply_archetype_overrides(VISUAL_VOCABULARIES["photography"], "rebel").section_divider == "none"

    def test_artisan_opacity_is_capped(self) -> None:
        vocab = VISUAL_VOCABULARIES["fitness"]
        for _ in range(10):
            vocab = apply_archetype_overrides(vocab, "artisan")
        assert vocab.decorative_opacity == pytest.approx(0.12)

    def test_expert_opacity_is_floored(self) -> None:
        vocab = VISUAL_VOCABULARIES["restaurant"]
        for _ in range(10):
            vocab = apply_archetype_overrides(vocab, "expert")
        assert vocab.decorative_opacity == 0.0

    def test_unknown_archetype_is_a_no_op(self) -> None:
        vocab = VISUAL_VOCABULARIES["spa"]
        assert apply_archetype_overrides(vocab, "wizard") is vocab
        assert apply_archetype_overrides(vocab, None) is vocab


class TestPersonalityOverrides:
    def test_calm_disables_parallax(self) -> None:
        vocab = apply_personality_overrides(VISUAL_VOCABULARIES["restaurant"], [0.5, 0.5, 0.5, 0.5, 0.5, 0.2])
        assert vocab.enable_parallax is False
        assert vocab.scroll_reveal_intensity == "subtle"

    def test_dynamic_lifts_subtle_reveal(self) -> None:
        vocab = apply_personality_overrides(VISUAL_VOCABULARIES["spa"], [0.5, 0.5, 0.5, 0.5, 0.5, 0.8])
        assert vocab.enable_parallax is True
        assert vocab.scroll_reveal_intensity == "moderate"

    def test_dynamic_keeps_dramatic(self) -> None:
        vocab = apply_personality_overrides(VISUAL_VOCABULARIES["fitness"], [0.5, 0.5, 0.5, 0.5, 0.5, 0.8])
        assert vocab.scroll_reveal_intensity == "dramatic"

    def test_minimal_lowers_opacity(self) -> None:
        vocab = apply_personality_overrides(VISUAL_VOCABULARIES["restaurant"], [0.1, 0.5, 0.5, 0.5, 0.5, 0.5])
        assert vocab.decorative_opacity == pytest.approx(0.05)

    def test_rich_raises_opacity_within_cap(self) -> None:
        vocab = apply_personality_overrides(VISUAL_VOCABULARIES["fitness"], [0.9, 0.5, 0.5, 0.5, 0.5, 0.5])
        assert vocab.decorative_opacity == pytest.approx(0.12)
        assert vocab.decorative_opacity <= 0.15

    def test_mid_range_is_unchanged(self) -> None:
        vocab = VISUAL_VOCABULARIES["restaurant"]
        assert apply_personality_overrides(vocab, MID) == vocab


class TestResolve:
    def test_pipeline_order(self) -> None:
        # archetype sets dramatic, then a calm personality brings it back to subtle
        vocab = resolve_visual_vocabulary(None, "restaurant", "rebel", [0.5, 0.5, 0.5, 0.5, 0.5, 0.1])
        assert vocab.section_divider == "angle"
        assert vocab.scroll_reveal_intensity == "subtle"

    def test_without_vector(self) -> None:
        assert resolve_visual_vocabulary("bakery", "restaurant") == VISUAL_VOCABULARIES["bakery"]
