"""Tests for sitetheme.voice — voice-keyed headlines and CTAs."""

from __future__ import annotations

import pytest

from sitetheme.brand_character import VOICE_TONES
from sitetheme.voice import HEADLINES, get_voice_keyed_cta_text, get_voice_keyed_headline

SITE_TYPES = sorted(HEADLINES["polished"])
GOALS = ("contact", "book", "showcase", "sell", "hire", "attention", "audience", "convert")


class TestHeadline:
    @pytest.mark.parametrize("tone", VOICE_TONES)
    def test_every_site_type_mentions_the_business(self, tone: str) -> None:
        for site_type in SITE_TYPES:
            assert "Sora" in get_voice_keyed_headline("Sora", site_type, tone)

    def test_sub_type_wins(self) -> None:
        assert get_voice_keyed_headline("Sora", "business", "warm", "restaurant") == (
            "Welcome to Sora — pull up a chair, stay a while"
        )

    def test_unknown_site_type_uses_business(self) -> None:
        assert get_voice_keyed_headline("Sora", "space-station", "direct") == "Sora. Better results, less hassle."

    def test_unknown_tone_uses_polished(self) -> None:
        assert get_voice_keyed_headline("Sora", "spa", "sarcastic") == get_voice_keyed_headline("Sora", "spa", "polished")

    def test_braces_in_name_are_kept(self) -> None:
        assert get_voice_keyed_headline("{Curly}", "blog", "direct") == "{Curly}. No fluff. Just substance."


class TestCta:
    @pytest.mark.parametrize("tone", VOICE_TONES)
    def test_every_goal_has_text(self, tone: str) -> None:
        for goal in GOALS:
            assert get_voice_keyed_cta_text(goal, tone, [])

    def test_sub_type_wins(self) -> None:
        assert get_voice_keyed_cta_text("book", "polished", [], "restaurant") == "Reserve Your Table"
        assert get_voice_keyed_cta_text("book", "warm", ["salesy"], "restaurant") == "Come dine with us"

    def test_sub_type_without_goal_falls_through(self) -> None:
        assert get_voice_keyed_cta_text("sell", "direct", [], "spa") == "Shop now"

    def test_salesy_softens_warm_only(self) -> None:
        assert get_voice_keyed_cta_text("book", "warm", ["salesy"]) == "See what's available"
        assert get_voice_keyed_cta_text("sell", "warm", ["salesy"]) == "Browse the collection"
        assert get_voice_keyed_cta_text("sell", "warm", []) == "Shop now"
        assert get_voice_keyed_cta_text("sell", "polished", ["salesy"]) == "Shop the Collection"
        assert get_voice_keyed_cta_text("book", "direct", ["salesy"]) == "Book now"

    def test_unknown_goal(self) -> None:
        assert get_voice_keyed_cta_text("teleport", "direct", []) == "Schedule a Consultation"

    def test_unknown_tone(self) -> None:
        assert get_voice_keyed_cta_text("hire", "sarcastic", None) == "Schedule a Consultation"
        assert get_voice_keyed_cta_text("hire", None, None) == "Schedule a Consultation"

    def test_unknown_tone_skips_sub_type_and_salesy_tables(self) -> None:
        assert get_voice_keyed_cta_text("book", "sarcastic", [], "restaurant") == "Schedule a Consultation"
        assert get_voice_keyed_cta_text("sell", "sarcastic", ["salesy"]) == "Schedule a Consultation"
