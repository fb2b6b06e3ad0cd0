"""
presets.py — Curated theme presets.

Each preset is a fixed point in the same space the generator covers: the
generator output for the preset's own vector and seed hue, with a hand-tuned
colour family and font pairing laid on top. Presets are built once at import
and never change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .personality import PersonalityVector, normalize_vector
from .theme_generator import generate_theme_from_vector, shadow_scale
from .tokens import ThemeTokens


@dataclass(frozen=True)
class ThemePreset:
    id: str
    name: str
    description: str
    personality_vector: PersonalityVector
    tokens: ThemeTokens


def make_preset(
    id: str,
    name: str,
    description: str,
    vector: Tuple[float, ...],
    seed_hue: float,
    overrides: Dict[str, str],
) -> ThemePreset:
    pv = normalize_vector(vector)
    patch = dict(overrides)
    if "shadowColor" in patch:
        patch.update(shadow_scale(patch["shadowColor"], pv[0]))
    tokens = generate_theme_from_vector(pv, seed_hue=seed_hue, overrides=patch)
    return ThemePreset(id=id, name=name, description=description, personality_vector=pv, tokens=tokens)


def _fonts(heading: str, body: str) -> Dict[str, str]:
    return {"fontHeading": heading, "fontBody": body, "fontAccent": heading}


# Deep navy, gold accents, cream text
LUXURY_DARK = make_preset(
    "luxury-dark",
    "Luxury Dark",
    "Opulent dark theme with deep navy backgrounds, warm gold accents and refined serif "
    "typography. Suits high-end brands, boutiques and premium services.",
    (0.6, 0.9, 0.3, 0.8, 0.3, 0.5),
    40,
    {
        "colorPrimary": "#c9a55c",
        "colorPrimaryLight": "#e0c88a",
        "colorPrimaryDark": "#a37e34",
        "colorSecondary": "#7b8fa6",
        "colorSecondaryLight": "#a3b4c7",
        "colorAccent": "#c9a55c",
        "colorBackground": "#0c0f17",
        "colorSurface": "#141825",
        "colorSurfaceElevated": "#1c2133",
        "colorText": "#ece6d9",
        "colorTextSecondary": "#9a9484",
        "colorTextOnPrimary": "#111111",
        "colorTextOnDark": "#ece6d9",
        "colorBorder": "#2a2f40",
        "colorBorderLight": "#1e2235",
        "shadowColor": "#c9a55c1f",
        **_fonts("'Cormorant Garamond', serif", "'Outfit', sans-serif"),
    },
)

# White base, single blue accent, near-black text
MODERN_CLEAN = make_preset(
    "modern-clean",
    "Modern Clean",
    "Crisp, minimal design with generous whitespace, clean geometry and a single bold "
    "accent colour.",
    (0.2, 0.6, 0.6, 0.5, 0.9, 0.4),
    220,
    {
        "colorPrimary": "#2563eb",
        "colorPrimaryLight": "#60a5fa",
        "colorPrimaryDark": "#1d4ed8",
        "colorSecondary": "#6366f1",
        "colorSecondaryLight": "#a5b4fc",
        "colorAccent": "#2563eb",
        "colorBackground": "#fafafa",
        "colorSurface": "#ffffff",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#111111",
        "colorTextSecondary": "#6b7280",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f5f5",
        "colorBorder": "#e5e7eb",
        "colorBorderLight": "#f3f4f6",
        "shadowColor": "#0000000f",
        **_fonts("'Sora', sans-serif", "'DM Sans', sans-serif"),
    },
)

# Warm whites, terracotta and sage, brown-black text
WARM_PROFESSIONAL = make_preset(
    "warm-professional",
    "Warm Professional",
    "Approachable yet polished design with warm earth tones, comfortable spacing and "
    "inviting typography. Ideal for consulting, wellness and lifestyle brands.",
    (0.4, 0.5, 0.2, 0.5, 0.5, 0.4),
    18,
    {
        "colorPrimary": "#c67a4a",
        "colorPrimaryLight": "#e0a077",
        "colorPrimaryDark": "#a05d31",
        "colorSecondary": "#7a9a7e",
        "colorSecondaryLight": "#a5c3a9",
        "colorAccent": "#c67a4a",
        "colorBackground": "#faf6f0",
        "colorSurface": "#fefcf8",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#2c2420",
        "colorTextSecondary": "#7a6e63",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f0ea",
        "colorBorder": "#e8ddd1",
        "colorBorderLight": "#f0e8de",
        "shadowColor": "#2c24200f",
        **_fonts("'Lora', serif", "'Merriweather Sans', sans-serif"),
    },
)

# Near-black canvas, hot pink and violet, loud yellow accent
BOLD_CREATIVE = make_preset(
    "bold-creative",
    "Bold Creative",
    "High-energy dark theme with saturated pink and violet, punchy motion and a "
    "grotesk headline face. Made for studios, agencies and event brands.",
    (0.8, 0.2, 0.4, 0.85, 0.9, 0.85),
    330,
    {
        "colorPrimary": "#ff3d7f",
        "colorPrimaryLight": "#ff7aa8",
        "colorPrimaryDark": "#c81e5b",
        "colorSecondary": "#7c3aed",
        "colorSecondaryLight": "#a78bfa",
        "colorAccent": "#facc15",
        "colorBackground": "#0a0a0f",
        "colorSurface": "#14141c",
        "colorSurfaceElevated": "#1e1e29",
        "colorText": "#f5f5f7",
        "colorTextSecondary": "#a1a1b5",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f5f7",
        "colorBorder": "#2a2a38",
        "colorBorderLight": "#1c1c26",
        "shadowColor": "#ff3d7f33",
        **_fonts("'Space Grotesk', sans-serif", "'Outfit', sans-serif"),
    },
)

# Paper white, ink black, one deep red
EDITORIAL = make_preset(
    "editorial",
    "Editorial",
    "Magazine-style layout with paper-white pages, ink-black type, a single deep red and "
    "high-contrast serif headlines.",
    (0.3, 0.8, 0.5, 0.4, 0.2, 0.3),
    0,
    {
        "colorPrimary": "#b91c1c",
        "colorPrimaryLight": "#e05252",
        "colorPrimaryDark": "#7f1d1d",
        "colorSecondary": "#44403c",
        "colorSecondaryLight": "#a8a29e",
        "colorAccent": "#d97706",
        "colorBackground": "#fdfcf9",
        "colorSurface": "#ffffff",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#1a1a1a",
        "colorTextSecondary": "#57534e",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f5f4",
        "colorBorder": "#e7e5e4",
        "colorBorderLight": "#f5f5f4",
        "shadowColor": "#1a1a1a0d",
        **_fonts("'Playfair Display', serif", "'Source Sans 3', sans-serif"),
    },
)

# Graphite dark mode, cyan and lime, monospace headings
TECH_FORWARD = make_preset(
    "tech-forward",
    "Tech Forward",
    "Developer-grade dark interface with graphite surfaces, electric cyan highlights and "
    "monospace headings. Fits SaaS, dev tools and startups.",
    (0.5, 0.7, 0.85, 0.75, 1.0, 0.6),
    190,
    {
        "colorPrimary": "#22d3ee",
        "colorPrimaryLight": "#67e8f9",
        "colorPrimaryDark": "#0891b2",
        "colorSecondary": "#818cf8",
        "colorSecondaryLight": "#c7d2fe",
        "colorAccent": "#a3e635",
        "colorBackground": "#0f1117",
        "colorSurface": "#171a23",
        "colorSurfaceElevated": "#1f2330",
        "colorText": "#e6e8ee",
        "colorTextSecondary": "#8b93a7",
        "colorTextOnPrimary": "#111111",
        "colorTextOnDark": "#e6e8ee",
        "colorBorder": "#2a2f3d",
        "colorBorderLight": "#1d212c",
        "shadowColor": "#22d3ee26",
        **_fonts("'JetBrains Mono', monospace", "'DM Sans', sans-serif"),
    },
)

# Linen background, moss green, clay accents
ORGANIC_NATURAL = make_preset(
    "organic-natural",
    "Organic Natural",
    "Soft, grounded palette of moss, clay and linen with gentle motion and a friendly "
    "serif. Suits wellness, food and sustainable brands.",
    (0.4, 0.4, 0.3, 0.3, 0.3, 0.2),
    100,
    {
        "colorPrimary": "#5f7f4a",
        "colorPrimaryLight": "#8fae78",
        "colorPrimaryDark": "#435c33",
        "colorSecondary": "#b08a5a",
        "colorSecondaryLight": "#d4b896",
        "colorAccent": "#d08c60",
        "colorBackground": "#f7f5ee",
        "colorSurface": "#fbfaf5",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#2b2f24",
        "colorTextSecondary": "#6b6f5e",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f3f1e8",
        "colorBorder": "#e3dfd0",
        "colorBorderLight": "#eeebdf",
        "shadowColor": "#2b2f240f",
        **_fonts("'Fraunces', serif", "'Atkinson Hyperlegible', sans-serif"),
    },
)

THEME_PRESETS: Tuple[ThemePreset, ...] = (
    LUXURY_DARK,
    MODERN_CLEAN,
    WARM_PROFESSIONAL,
    BOLD_CREATIVE,
    EDITORIAL,
    TECH_FORWARD,
    ORGANIC_NATURAL,
)

_BY_ID = {p.id: p for p in THEME_PRESETS}


def get_preset_by_id(preset_id: Optional[str]) -> Optional[ThemePreset]:
    return _BY_ID.get(preset_id or "")
