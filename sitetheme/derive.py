"""
derive.py — Harmonious colour family from a single user-chosen primary.

The customisation sidebar lets a user pick one colour. Everything else in the
colour family is regenerated around that hue so the palette stays coherent,
while `colorPrimary` keeps the exact hex the user picked.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from . import colors
from .personality import lerp, normalize_vector
from .theme_generator import generate_theme_from_vector
from .tokens import ThemeTokens

logger = logging.getLogger(__name__)

# Generated colour keys carried over verbatim from the re-seeded base theme.
CARRIED_KEYS = (
    "colorBackground",
    "colorSurface",
    "colorSurfaceElevated",
    "colorText",
    "colorTextSecondary",
    "colorTextOnDark",
    "colorBorder",
    "colorBorderLight",
    "colorSecondary",
    "colorSecondaryLight",
)


def derive_theme_from_primary_color(
    hex_color: str,
    vector: Sequence[float],
    business_type: Optional[str] = None,
) -> Dict[str, str]:
    """
    Derive the colour-family tokens (plus shadow tint) for a primary colour.

    Args:
        hex_color:     '#RGB', '#RRGGBB' (the '#' may be omitted)
        vector:        Personality vector; weight darkens/saturates the accent
        business_type: Passed through to the re-seeded base theme

    Returns:
        Partial token dict (camelCase keys): the colour family plus shadowColor.
        Typography, spacing, shape and shadow-string keys are never included.

    Raises:
        InvalidColorError: `hex_color` is not a hex colour.
    """
    primary = colors.coerce_hex(hex_color)
    pv = normalize_vector(vector)
    weight = pv[3]

    hue, saturation, _ = colors.to_hsl(primary)
    hue = hue or 0.0

    base = generate_theme_from_vector(pv, seed_hue=hue, business_type=business_type).to_dict()

    accent = colors.hsl(
        hue + 120,
        saturation * lerp(0.8, 1.0, weight),
        lerp(0.6, 0.5, weight),
    )

    dark_background = colors.relative_luminance(base["colorBackground"]) < 0.2
    if dark_background:
        shadow_color = colors.with_alpha(primary, 0.15)
    else:
        shadow_color = colors.with_alpha(base["colorText"], 0.08)

    derived: Dict[str, str] = {
        "colorPrimary": primary,
        "colorPrimaryLight": colors.brighten(primary, 1.2),
        "colorPrimaryDark": colors.darken(primary, 1.2),
        "colorAccent": accent,
        "colorTextOnPrimary": colors.readable_text_on(primary),
        "shadowColor": shadow_color,
    }
    derived.update({key: base[key] for key in CARRIED_KEYS})

    logger.debug("Derived palette from %s (hue %.1f°, dark=%s)", primary, hue, dark_background)
    return derived


SHADOW_KEYS = ("shadowSm", "shadowMd", "shadowLg", "shadowXl")


def retint_shadows(tokens: ThemeTokens, shadow_color: str) -> Dict[str, str]:
    """
    Swap the tint inside `tokens`' shadow strings for `shadow_color`.

    Offsets, blur and any "none" entries stay as they are, so a preset's shadow
    geometry survives a primary-colour change.
    """
    old = tokens.shadow_color
    return {key: tokens.get(key).replace(old, shadow_color) for key in SHADOW_KEYS}
