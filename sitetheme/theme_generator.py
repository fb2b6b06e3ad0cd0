"""
theme_generator.py — Personality vector → complete ThemeTokens.

Each axis interpolates between fixed anchor values for the token families it
drives:

  [0] density      spacing, shadows, border width, palette complexity
  [1] tone         fonts, saturation, radius, easing
  [2] temperature  seed hue, neutral tint
  [3] weight       font weight, type scale, dark/light mode
  [4] era          font choice, letter-spacing
  [5] energy       transition speed, animation distance/scale

The generator is a pure function: the same vector and options always return
an identical token set.

Usage:
    from sitetheme.theme_generator import generate_theme_from_vector

    tokens = generate_theme_from_vector([0.5] * 6, business_type="restaurant")
    tokens.to_dict()["colorPrimary"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence

from . import colors
from .fonts import select_font_pairing
from .personality import PersonalityVector, clamp, lerp, normalize_vector
from .tokens import ThemeTokens, format_css_number

logger = logging.getLogger(__name__)

# ── Industry tables ──────────────────────────────────────────────────────────

# Hue each industry pulls the palette toward (blended 70/30 with the personality hue).
INDUSTRY_HUE_NUDGE: Dict[str, float] = {
    "restaurant":  25,   # amber / terracotta
    "spa":         160,  # soft teal / sage
    "photography": 40,   # warm neutral
    "booking":     200,  # professional blue
    "ecommerce":   220,  # trust blue
    "educational": 230,  # knowledge blue
    "nonprofit":   140,  # growth green
    "event":       330,  # vibrant magenta
}

# Negative leans dark (lower threshold on the weight axis), positive leans light.
DARK_MODE_NUDGE: Dict[str, float] = {
    "restaurant":  -0.12,
    "spa":          0.08,
    "photography": -0.05,
    "ecommerce":    0.05,
    "nonprofit":    0.08,
    "educational":  0.08,
    "event":       -0.05,
    "booking":      0.0,
    "business":     0.0,
    "portfolio":   -0.05,
}

DARK_MODE_THRESHOLD = 0.6

TYPE_SCALE_STEPS = (0.75, 0.875, 1, 1.125, 1.25, 1.5, 1.875, 2.25, 3, 3.75, 4.5)
TYPE_SCALE_KEYS = (
    "textXs", "textSm", "textBase", "textLg", "textXl",
    "text2xl", "text3xl", "text4xl", "text5xl", "text6xl", "text7xl",
)

EASE_BOUNCY = "cubic-bezier(0.34, 1.56, 0.64, 1)"
EASE_EXPO = "cubic-bezier(0.22, 1, 0.36, 1)"
EASE_STANDARD = "cubic-bezier(0.4, 0, 0.2, 1)"


def dark_mode_threshold(business_type: Optional[str] = None) -> float:
    nudge = DARK_MODE_NUDGE.get(business_type or "", 0.0)
    return clamp(DARK_MODE_THRESHOLD + nudge, 0.35, 0.85)


def is_dark_mode(vector: Sequence[float], business_type: Optional[str] = None) -> bool:
    return normalize_vector(vector)[3] >= dark_mode_threshold(business_type)


def palette_hue(
    vector: Sequence[float],
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
) -> float:
    """Seed hue for the palette: explicit seed, else temperature + industry nudge."""
    pv = normalize_vector(vector)
    if seed_hue is not None:
        return seed_hue % 360
    hue = lerp(30, 220, pv[2])
    industry_hue = INDUSTRY_HUE_NUDGE.get(business_type or "")
    if industry_hue is not None:
        hue = (hue * 0.7 + industry_hue * 0.3) % 360
    return hue


def base_saturation(vector: PersonalityVector) -> float:
    """Playful + rich → vivid; serious + minimal → muted."""
    return lerp(0.35, 0.75, (1 - vector[1] + vector[0]) / 2)


# ── Palette ──────────────────────────────────────────────────────────────────

def generate_palette(
    vector: Sequence[float],
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
) -> Dict[str, str]:
    """Colour-family tokens plus shadowColor, keyed by camelCase token name."""
    pv = normalize_vector(vector)
    min_rich, _, warm_cool, light_bold = pv[0], pv[1], pv[2], pv[3]

    hue = palette_hue(pv, seed_hue, business_type)
    sat = base_saturation(pv)
    lightness = 0.5

    primary = colors.hsl(hue, sat, lightness)
    secondary = colors.hsl(hue + lerp(30, 180, min_rich), sat * 0.8, lightness)
    accent = colors.hsl(hue + 120, clamp(sat + 0.15), 0.55)

    dark = light_bold >= dark_mode_threshold(business_type)
    if dark:
        bg_hue = lerp(hue, (hue + 240) % 360, warm_cool)
        background = colors.hsl(bg_hue, 0.08, lerp(0.06, 0.1, 1 - light_bold))
        surface = colors.brighten(background, 0.4)
        surface_elevated = colors.brighten(background, 0.7)
        text = colors.hsl(bg_hue, 0.05, 0.92)
        text_secondary = colors.hsl(bg_hue, 0.05, 0.6)
        border = colors.hsl(bg_hue, 0.08, 0.2)
        border_light = colors.hsl(bg_hue, 0.06, 0.14)
    else:
        bg_hue = lerp(hue, 40, 1 - warm_cool if warm_cool < 0.5 else 0)
        background = colors.hsl(bg_hue, lerp(0.02, 0.08, 1 - warm_cool), lerp(0.97, 0.99, light_bold))
        surface = colors.hsl(bg_hue, 0.03, 0.995)
        surface_elevated = "#ffffff"
        text = colors.hsl(bg_hue, 0.1, lerp(0.12, 0.08, light_bold))
        text_secondary = colors.hsl(bg_hue, 0.05, 0.45)
        border = colors.hsl(bg_hue, 0.06, 0.86)
        border_light = colors.hsl(bg_hue, 0.04, 0.92)

    return {
        "colorPrimary": primary,
        "colorPrimaryLight": colors.brighten(primary, 1.2),
        "colorPrimaryDark": colors.darken(primary, 1.2),
        "colorSecondary": secondary,
        "colorSecondaryLight": colors.brighten(secondary, 1.5),
        "colorAccent": accent,
        "colorBackground": background,
        "colorSurface": surface,
        "colorSurfaceElevated": surface_elevated,
        "colorText": text,
        "colorTextSecondary": text_secondary,
        "colorTextOnPrimary": colors.readable_text_on(primary),
        "colorTextOnDark": text if dark else "#f5f5f5",
        "colorBorder": border,
        "colorBorderLight": border_light,
        "colorSuccess": "#22c55e",
        "colorWarning": "#f59e0b",
        "colorError": "#ef4444",
        "shadowColor": colors.with_alpha(primary, 0.15) if dark else colors.with_alpha(text, 0.08),
    }


def shadow_scale(shadow_color: str, density: float) -> Dict[str, str]:
    """Minimal personalities drop the small shadows entirely."""
    c = shadow_color
    return {
        "shadowSm": "none" if density < 0.2 else f"0 1px 2px {c}",
        "shadowMd": "none" if density < 0.15 else f"0 4px 6px -1px {c}, 0 2px 4px -2px {c}",
        "shadowLg": "none" if density < 0.1 else f"0 10px 15px -3px {c}, 0 4px 6px -4px {c}",
        "shadowXl": f"0 20px 25px -5px {c}, 0 8px 10px -6px {c}",
    }


def _ease(tone: float, energy: float) -> str:
    if tone < 0.4 and energy > 0.5:
        return EASE_BOUNCY
    if energy > 0.6:
        return EASE_EXPO
    return EASE_STANDARD


def _px(value: float) -> str:
    return f"{colors.round_half_up(value)}px"


# ── Generator ────────────────────────────────────────────────────────────────

def generate_theme_from_vector(
    vector: Sequence[float],
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ThemeTokens:
    """
    Build the full token set for a personality vector.

    Args:
        vector:        6 floats in [0, 1]; clamped/padded before use
        seed_hue:      Force the palette hue (degrees) instead of deriving it
        business_type: Site type for industry hue and dark-mode biasing
        overrides:     camelCase token values laid over the result

    Returns:
        ThemeTokens with every schema key populated.
    """
    pv = normalize_vector(vector)
    min_rich, play_serious, _, light_bold, era, calm_dynamic = pv

    tokens: Dict[str, str] = generate_palette(pv, seed_hue, business_type)

    fonts = select_font_pairing(pv, business_type)
    tokens.update({
        "fontHeading": fonts.heading,
        "fontBody": fonts.body,
        "fontAccent": fonts.accent,
        "fontMono": "'JetBrains Mono', monospace",
    })

    # Typography
    scale = lerp(0.92, 1.08, (min_rich + light_bold) / 2)
    for key, step in zip(TYPE_SCALE_KEYS, TYPE_SCALE_STEPS):
        tokens[key] = format_css_number(step * scale, "rem")

    tokens.update({
        "leadingTight": format_css_number(lerp(1.15, 1.25, play_serious), places=3),
        "leadingNormal": format_css_number(lerp(1.5, 1.6, 1 - light_bold), places=3),
        "leadingRelaxed": format_css_number(lerp(1.7, 1.85, 1 - light_bold), places=3),
        "trackingTight": format_css_number(lerp(-0.03, -0.01, era), "em"),
        "trackingNormal": "0em",
        "trackingWide": format_css_number(lerp(0.02, 0.08, 1 - era), "em"),
        "weightNormal": str(colors.round_half_up(lerp(300, 400, light_bold))),
        "weightMedium": str(colors.round_half_up(lerp(400, 500, light_bold))),
        "weightSemibold": str(colors.round_half_up(lerp(500, 600, light_bold))),
        "weightBold": str(colors.round_half_up(lerp(600, 800, light_bold))),
    })

    # Spacing: minimal → generous, rich → compact
    tokens.update({
        "spaceSection": format_css_number(lerp(6, 4, min_rich), "rem", places=3),
        "spaceComponent": format_css_number(lerp(3.5, 2, min_rich), "rem", places=3),
        "spaceElement": format_css_number(lerp(1.75, 1, min_rich), "rem", places=3),
        "spaceTight": format_css_number(lerp(1, 0.5, min_rich), "rem", places=3),
        "containerMax": _px(lerp(1200, 1440, min_rich)),
        "containerNarrow": _px(lerp(640, 768, min_rich)),
    })

    # Shape: playful → rounded, serious → sharp
    radius = lerp(12, 2, play_serious)
    tokens.update({
        "radiusSm": _px(radius * 0.5),
        "radiusMd": _px(radius),
        "radiusLg": _px(radius * 1.5),
        "radiusXl": _px(radius * 2.5),
        "radiusFull": "9999px",
        "borderWidth": format_css_number(lerp(1, 2, min_rich), "px", places=2),
    })

    tokens.update(shadow_scale(tokens["shadowColor"], min_rich))

    # Motion: calm → slow and subtle, dynamic → fast and far
    tokens.update({
        "transitionFast": f"{colors.round_half_up(lerp(200, 100, calm_dynamic))}ms",
        "transitionBase": f"{colors.round_half_up(lerp(400, 200, calm_dynamic))}ms",
        "transitionSlow": f"{colors.round_half_up(lerp(800, 400, calm_dynamic))}ms",
        "easeDefault": _ease(play_serious, calm_dynamic),
        "animationDistance": _px(lerp(8, 30, calm_dynamic)),
        "animationScale": format_css_number(lerp(0.98, 0.9, calm_dynamic), places=3),
    })

    theme = ThemeTokens.from_dict(tokens)
    if overrides:
        theme = theme.merge(overrides)
    return theme


# ── Variants ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ThemeVariants:
    variant_a: ThemeTokens
    variant_b: ThemeTokens
    label_a: str = "Variant A"
    label_b: str = "Variant B"


def signal_strength(vector: Sequence[float]) -> float:
    """0 for a perfectly centred vector, 1 when every axis sits at a pole."""
    pv = normalize_vector(vector)
    return sum(abs(v - 0.5) * 2 for v in pv) / len(pv)


def variant_hue_shift(vector: Sequence[float]) -> float:
    """Weak signals leave more room to explore, so they get a wider shift."""
    return lerp(60, 25, signal_strength(vector) * 2)


def generate_theme_variants(
    vector: Sequence[float],
    business_type: Optional[str] = None,
) -> ThemeVariants:
    """Two alternatives: the default theme and a hue-shifted sibling."""
    pv = normalize_vector(vector)
    variant_a = generate_theme_from_vector(pv, business_type=business_type)

    hue_b = (palette_hue(pv, business_type=business_type) + variant_hue_shift(pv)) % 360
    variant_b = generate_theme_from_vector(pv, seed_hue=hue_b, business_type=business_type)
    logger.debug("Variant B hue %.1f° (shift %.1f°)", hue_b, variant_hue_shift(pv))
    return ThemeVariants(variant_a=variant_a, variant_b=variant_b)
