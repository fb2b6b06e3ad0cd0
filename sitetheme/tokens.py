"""
tokens.py — The closed ThemeTokens schema and its CSS export.

ThemeTokens is an immutable pydantic model. Attributes are snake_case; every
external boundary (dicts, JSON, AI patches, CSS) uses the camelCase key:

    tokens.color_primary          # attribute
    tokens.to_dict()["colorPrimary"]

Layers never mutate a token set. `merge()` returns a new instance and refuses
keys outside the schema.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import is_hex_color
from .errors import UnknownTokenError


def to_token_key(name: str) -> str:
    """snake_case attribute → camelCase token key (text_2xl → text2xl)."""
    head, *rest = name.split("_")
    return head + "".join(p if p[:1].isdigit() else p.capitalize() for p in rest)


def to_css_property(key: str) -> str:
    """camelCase token key → CSS custom property (text2xl → --text-2xl)."""
    kebab = re.sub(r"(?<=[a-z0-9])([A-Z])", r"-\1", key)
    kebab = re.sub(r"(?<=[a-zA-Z])(\d)", r"-\1", kebab)
    return "--" + kebab.lower()


class ThemeTokens(BaseModel):
    """Complete design-token set. Every field is a CSS value string."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_token_key,
        populate_by_name=True,
    )

    # ── Colors ────────────────────────────────────────────────────────────────
    color_primary: str
    color_primary_light: str
    color_primary_dark: str
    color_secondary: str
    color_secondary_light: str
    color_accent: str
    color_background: str
    color_surface: str
    color_surface_elevated: str
    color_text: str
    color_text_secondary: str
    color_text_on_primary: str
    color_text_on_dark: str
    color_border: str
    color_border_light: str
    color_success: str = "#22c55e"
    color_warning: str = "#f59e0b"
    color_error: str = "#ef4444"

    # ── Typography ────────────────────────────────────────────────────────────
    font_heading: str
    font_body: str
    font_accent: str
    font_mono: str = "'JetBrains Mono', monospace"

    text_xs: str
    text_sm: str
    text_base: str
    text_lg: str
    text_xl: str
    text_2xl: str
    text_3xl: str
    text_4xl: str
    text_5xl: str
    text_6xl: str
    text_7xl: str

    leading_tight: str
    leading_normal: str
    leading_relaxed: str

    tracking_tight: str
    tracking_normal: str = "0em"
    tracking_wide: str

    weight_normal: str
    weight_medium: str
    weight_semibold: str
    weight_bold: str

    # ── Spacing ───────────────────────────────────────────────────────────────
    space_section: str
    space_component: str
    space_element: str
    space_tight: str
    container_max: str
    container_narrow: str

    # ── Shape ─────────────────────────────────────────────────────────────────
    radius_sm: str
    radius_md: str
    radius_lg: str
    radius_xl: str
    radius_full: str = "9999px"
    border_width: str

    # ── Shadows ───────────────────────────────────────────────────────────────
    shadow_sm: str
    shadow_md: str
    shadow_lg: str
    shadow_xl: str
    shadow_color: str = Field(description="Shadow tint as #rrggbbaa")

    # ── Motion ────────────────────────────────────────────────────────────────
    transition_fast: str
    transition_base: str
    transition_slow: str
    ease_default: str
    animation_distance: str
    animation_scale: str

    @field_validator(
        "color_primary", "color_primary_light", "color_primary_dark",
        "color_secondary", "color_secondary_light", "color_accent",
        "color_background", "color_surface", "color_surface_elevated",
        "color_text", "color_text_secondary", "color_text_on_primary",
        "color_text_on_dark", "color_border", "color_border_light",
        "color_success", "color_warning", "color_error",
    )
    @classmethod
    def _check_hex(cls, v: str) -> str:
        if not is_hex_color(v):
            raise ValueError(f"expected a hex colour, got {v!r}")
        return v

    # ── Dict interface ────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, str]:
        """camelCase mapping in schema order."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "ThemeTokens":
        unknown = set(data) - TOKEN_KEY_SET
        if unknown:
            raise UnknownTokenError(unknown)
        return cls.model_validate(dict(data))

    def get(self, key: str) -> str:
        if key not in TOKEN_KEY_SET:
            raise UnknownTokenError([key])
        return getattr(self, _ATTR_BY_KEY[key])

    def merge(self, patch: Optional[Mapping[str, str]]) -> "ThemeTokens":
        """New token set with `patch` (camelCase keys) laid over this one."""
        if not patch:
            return self
        data = self.to_dict()
        unknown = set(patch) - TOKEN_KEY_SET
        if unknown:
            raise UnknownTokenError(unknown)
        data.update(patch)
        return ThemeTokens.model_validate(data)


_ATTR_BY_KEY: Dict[str, str] = {
    field.alias or name: name for name, field in ThemeTokens.model_fields.items()
}

TOKEN_KEYS: Tuple[str, ...] = tuple(_ATTR_BY_KEY)
TOKEN_KEY_SET = frozenset(TOKEN_KEYS)


def is_color_token(key: str) -> bool:
    """Colour-family keys start with 'color'; shadowColor is not one of them."""
    return key.startswith("color") and key != "shadowColor"


COLOR_TOKEN_KEYS: Tuple[str, ...] = tuple(k for k in TOKEN_KEYS if is_color_token(k))

# ── CSS values ───────────────────────────────────────────────────────────────

_CSS_NUMBER = re.compile(r"^(-?[\d.]+)([a-z%]*)$")


def parse_css_number(value: str) -> Optional[Tuple[float, str]]:
    """'1.5rem' → (1.5, 'rem'); None if `value` is not a single number."""
    m = _CSS_NUMBER.match(value.strip())
    if not m:
        return None
    try:
        return float(m.group(1)), m.group(2)
    except ValueError:
        return None


def format_css_number(number: float, unit: str = "", places: int = 4) -> str:
    """Format without trailing zeros: (1.50, 'rem') → '1.5rem'."""
    text = f"{round(number, places):.{places}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"{text}{unit}"


# ── CSS export ───────────────────────────────────────────────────────────────

TOKEN_CSS_MAP: Dict[str, str] = {key: to_css_property(key) for key in TOKEN_KEYS}


def tokens_to_css_properties(tokens: ThemeTokens) -> Dict[str, str]:
    """{'--color-primary': '#2563eb', ...} in schema order."""
    return {TOKEN_CSS_MAP[k]: v for k, v in tokens.to_dict().items()}


def tokens_to_css_string(tokens: ThemeTokens, selector: str = ":root") -> str:
    lines = [f"  {prop}: {value};" for prop, value in tokens_to_css_properties(tokens).items()]
    return selector + " {\n" + "\n".join(lines) + "\n}"


def missing_keys(keys: Iterable[str]) -> Tuple[str, ...]:
    """Schema keys absent from `keys`, in schema order."""
    present = set(keys)
    return tuple(k for k in TOKEN_KEYS if k not in present)
