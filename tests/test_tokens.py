"""Tests for sitetheme.tokens — the closed token schema and CSS export."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sitetheme.errors import UnknownTokenError
from sitetheme.tokens import (
    COLOR_TOKEN_KEYS,
    TOKEN_KEYS,
    ThemeTokens,
    format_css_number,
    is_color_token,
    missing_keys,
    parse_css_number,
    to_css_property,
    to_token_key,
    tokens_to_css_properties,
    tokens_to_css_string,
)


class TestSchema:
    def test_key_count(self) -> None:
        assert len(TOKEN_KEYS) == 66
        assert len(set(TOKEN_KEYS)) == 66

    def test_colour_family(self) -> None:
        assert len(COLOR_TOKEN_KEYS) == 18
        assert "shadowColor" in TOKEN_KEYS
        assert not is_color_token("shadowColor")
        assert is_color_token("colorTextOnPrimary")

    def test_token_key_conversion(self) -> None:
        assert to_token_key("color_primary_light") == "colorPrimaryLight"
        assert to_token_key("text_2xl") == "text2xl"
        assert "text2xl" in TOKEN_KEYS

    def test_missing_keys(self) -> None:
        assert missing_keys(TOKEN_KEYS) == ()
        assert missing_keys(TOKEN_KEYS[1:]) == (TOKEN_KEYS[0],)


class TestThemeTokens:
    def test_to_dict_uses_camel_case(self, balanced_theme: ThemeTokens) -> None:
        data = balanced_theme.to_dict()
        assert list(data) == list(TOKEN_KEYS)
        assert data["colorPrimary"] == balanced_theme.color_primary

    def test_get(self, balanced_theme: ThemeTokens) -> None:
        assert balanced_theme.get("radiusFull") == "9999px"
        with pytest.raises(UnknownTokenError):
            balanced_theme.get("radiusHuge")

    def test_is_immutable(self, balanced_theme: ThemeTokens) -> None:
        with pytest.raises(ValidationError):
            balanced_theme.color_primary = "#000000"

    def test_merge_returns_new_instance(self, balanced_theme: ThemeTokens) -> None:
        before = balanced_theme.to_dict()
        merged = balanced_theme.merge({"radiusMd": "4px"})
        assert merged.radius_md == "4px"
        assert merged is not balanced_theme
        assert balanced_theme.to_dict() == before

    def test_merge_rejects_unknown_keys(self, balanced_theme: ThemeTokens) -> None:
        with pytest.raises(UnknownTokenError) as exc_info:
            balanced_theme.merge({"bogus": "1", "alsoBogus": "2"})
        assert exc_info.value.keys == ["alsoBogus", "bogus"]
        assert isinstance(exc_info.value, KeyError)

    def test_merge_validates_colours(self, balanced_theme: ThemeTokens) -> None:
        with pytest.raises(ValidationError):
            balanced_theme.merge({"colorAccent": "red"})

    def test_from_dict_rejects_unknown(self, balanced_theme: ThemeTokens) -> None:
        data = dict(balanced_theme.to_dict(), extra="x")
        with pytest.raises(UnknownTokenError):
            ThemeTokens.from_dict(data)

    def test_from_dict_round_trip(self, balanced_theme: ThemeTokens) -> None:
        assert ThemeTokens.from_dict(balanced_theme.to_dict()) == balanced_theme


class TestCssValues:
    def test_parse(self) -> None:
        assert parse_css_number("1.5rem") == (1.5, "rem")
        assert parse_css_number("-0.03em") == (-0.03, "em")
        assert parse_css_number("700") == (700.0, "")
        assert parse_css_number("none") is None
        assert parse_css_number("0 1px 2px #000") is None

    def test_format(self) -> None:
        assert format_css_number(1.5, "rem") == "1.5rem"
        assert format_css_number(2.0, "px") == "2px"
        assert format_css_number(-0.0) == "0"
        assert format_css_number(0.123456, "em") == "0.1235em"


class TestCssExport:
    def test_property_names(self) -> None:
        assert to_css_property("colorPrimary") == "--color-primary"
        assert to_css_property("colorPrimaryLight") == "--color-primary-light"
        assert to_css_property("text2xl") == "--text-2xl"
        assert to_css_property("shadowXl") == "--shadow-xl"

    def test_properties_cover_every_token(self, balanced_theme: ThemeTokens) -> None:
        props = tokens_to_css_properties(balanced_theme)
        assert len(props) == 66
        assert props["--color-primary"] == balanced_theme.color_primary

    def test_css_string(self, balanced_theme: ThemeTokens) -> None:
        css = tokens_to_css_string(balanced_theme)
        assert css.startswith(":root {\n  --color-primary: ")
        assert css.endswith(";\n}")
        assert css.count("\n") == 67

    def test_custom_selector(self, balanced_theme: ThemeTokens) -> None:
        assert tokens_to_css_string(balanced_theme, selector=".theme").startswith(".theme {")
