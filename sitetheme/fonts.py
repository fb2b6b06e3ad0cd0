"""
fonts.py — Curated heading/body font pairings and personality-based selection.

Each pairing declares the tone range (axis 1, playful → serious) and era range
(axis 4, classic → modern) it suits, plus the business types it fits best.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .personality import normalize_vector


@dataclass(frozen=True)
class FontPairing:
    id: str
    name: str
    heading: str
    body: str
    accent: str
    seriousness: Tuple[float, float]
    era: Tuple[float, float]
    business_types: Tuple[str, ...] = field(default_factory=tuple)

    def score(self, seriousness: float, era: float, business_type: Optional[str] = None) -> float:
        s_lo, s_hi = self.seriousness
        e_lo, e_hi = self.era
        score = (2.0 if s_lo <= seriousness <= s_hi else 0.0) + (2.0 if e_lo <= era <= e_hi else 0.0)
        score -= abs(seriousness - (s_lo + s_hi) / 2) + abs(era - (e_lo + e_hi) / 2)
        if business_type and business_type in self.business_types:
            score += 1.5
        return score


def _pair(id, name, heading, body, seriousness, era, business_types=()):
    return FontPairing(
        id=id, name=name, heading=heading, body=body, accent=heading,
        seriousness=seriousness, era=era, business_types=tuple(business_types),
    )


FONT_PAIRINGS: Tuple[FontPairing, ...] = (
    _pair("luxury-serif", "Luxury Serif", "'Cormorant Garamond', serif", "'Outfit', sans-serif",
          (0.7, 1.0), (0.0, 0.4), ["restaurant", "spa"]),
    _pair("editorial-serif", "Editorial Serif", "'Playfair Display', serif", "'Source Sans 3', sans-serif",
          (0.6, 1.0), (0.0, 0.5), ["restaurant", "photography"]),
    _pair("classic-serif", "Classic Serif", "'Libre Baskerville', serif", "'Nunito Sans', sans-serif",
          (0.5, 1.0), (0.0, 0.4)),
    _pair("corporate-sans", "Corporate Sans", "'Sora', sans-serif", "'DM Sans', sans-serif",
          (0.5, 1.0), (0.6, 1.0), ["business", "ecommerce"]),
    _pair("clean-sans", "Clean Sans", "'Manrope', sans-serif", "'Karla', sans-serif",
          (0.4, 0.8), (0.5, 1.0)),
    _pair("creative-display", "Creative Display", "'Space Grotesk', sans-serif", "'Outfit', sans-serif",
          (0.0, 0.5), (0.6, 1.0)),
    _pair("warm-traditional", "Warm Traditional", "'Lora', serif", "'Merriweather Sans', sans-serif",
          (0.3, 0.7), (0.0, 0.5), ["nonprofit", "educational"]),
    _pair("warm-classic", "Warm Classic", "'Crimson Pro', serif", "'Work Sans', sans-serif",
          (0.3, 0.7), (0.0, 0.5), ["spa"]),
    _pair("bold-impact", "Bold Impact", "'Oswald', sans-serif", "'Lato', sans-serif",
          (0.0, 0.5), (0.4, 0.9), ["event"]),
    _pair("tech-mono", "Tech Mono", "'JetBrains Mono', monospace", "'DM Sans', sans-serif",
          (0.5, 1.0), (0.8, 1.0)),
    _pair("hospitality-serif", "Hospitality Serif", "'DM Serif Display', serif", "'Jost', sans-serif",
          (0.5, 0.9), (0.2, 0.6), ["restaurant", "booking", "event"]),
    _pair("wellness-organic", "Wellness Organic", "'Fraunces', serif", "'Atkinson Hyperlegible', sans-serif",
          (0.3, 0.7), (0.2, 0.6), ["spa", "nonprofit"]),
    _pair("creative-agency", "Creative Agency", "'Clash Display', sans-serif", "'Satoshi', sans-serif",
          (0.0, 0.5), (0.7, 1.0), ["portfolio", "photography"]),
    _pair("boutique-fashion", "Boutique Fashion", "'Bodoni Moda', serif", "'Figtree', sans-serif",
          (0.6, 1.0), (0.1, 0.5), ["ecommerce", "portfolio"]),
)

# Pairings offered on the free tier.
FREE_FONT_IDS = frozenset({
    "corporate-sans",
    "clean-sans",
    "warm-traditional",
    "creative-display",
    "classic-serif",
})

_BY_ID = {p.id: p for p in FONT_PAIRINGS}


def get_font_pairing_by_id(pairing_id: Optional[str]) -> Optional[FontPairing]:
    if not pairing_id:
        return None
    return _BY_ID.get(pairing_id)


def select_font_pairing(vector: Sequence[float], business_type: Optional[str] = None) -> FontPairing:
    """Highest-scoring pairing for the vector; the earlier entry wins ties."""
    pv = normalize_vector(vector)
    seriousness, era = pv[1], pv[4]

    best = FONT_PAIRINGS[0]
    best_score = float("-inf")
    for pairing in FONT_PAIRINGS:
        score = pairing.score(seriousness, era, business_type)
        if score > best_score:
            best, best_score = pairing, score
    return best
