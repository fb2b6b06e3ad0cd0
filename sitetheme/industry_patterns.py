"""
industry_patterns.py — Default background patterns per business type.

Each mapping names a primary pattern (hero / full-bleed sections), a secondary
pattern for alternating sections and an overlay opacity. "none" is a valid
pattern id meaning no pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .css_patterns import NO_PATTERN, generate_pattern, get_pattern_position, get_pattern_size


@dataclass(frozen=True)
class IndustryPattern:
    primary_pattern: str
    secondary_pattern: str
    opacity: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "primaryPattern": self.primary_pattern,
            "secondaryPattern": self.secondary_pattern,
            "opacity": self.opacity,
        }

    def background(self, color: str, secondary: bool = False) -> Dict[str, str]:
        """CSS background declarations for the primary (or secondary) pattern."""
        pattern_id = self.secondary_pattern if secondary else self.primary_pattern
        return {
            "background-image": generate_pattern(pattern_id, color),
            "background-size": get_pattern_size(pattern_id),
            "background-position": get_pattern_position(pattern_id),
        }


DEFAULT_INDUSTRY_PATTERN = IndustryPattern(NO_PATTERN, NO_PATTERN, 0.0)

_P = IndustryPattern

INDUSTRY_PATTERNS: Mapping[str, IndustryPattern] = MappingProxyType({
    # Restaurants and cuisines
    "restaurant":   _P("herringbone", "waves", 0.06),
    "mexican":      _P("zigzag", "diamonds", 0.07),
    "japanese":     _P("seigaiha", "dots", 0.05),
    "italian":      _P("herringbone", "none", 0.06),
    "french":       _P("cross-hatch", "none", 0.04),
    "bakery":       _P("polka-dots", "waves", 0.07),
    # Services
    "spa":          _P("waves", "topography", 0.04),
    "photography":  _P("none", "none", 0.0),
    "fitness":      _P("diagonal-stripes", "none", 0.08),
    "gym":          _P("diagonal-stripes", "dots", 0.1),
    # Professional
    "business":     _P("dots", "none", 0.04),
    "law-firm":     _P("pinstripe", "none", 0.03),
    "consulting":   _P("grid", "none", 0.03),
    "architecture": _P("grid", "none", 0.04),
    # Tech
    "tech":         _P("circuit-dots", "none", 0.05),
    "startup":      _P("circuit-dots", "dots", 0.05),
    "saas":         _P("grid", "none", 0.04),
    # Creative
    "portfolio":    _P("none", "none", 0.0),
    "creative":     _P("concentric-circles", "none", 0.06),
    # Commerce, education, nonprofit, events
    "ecommerce":    _P("dots", "none", 0.03),
    "educational":  _P("grid", "none", 0.03),
    "nonprofit":    _P("topography", "none", 0.04),
    "event":        _P("diagonal-stripes", "none", 0.06),
    # General
    "landing":      _P("dots", "none", 0.04),
    "personal":     _P("none", "none", 0.0),
    "booking":      _P("dots", "none", 0.04),
})

del _P


def get_industry_pattern(sub_type: Optional[str], site_type: Optional[str]) -> IndustryPattern:
    """Sub-type mapping, else site-type mapping, else no pattern."""
    for key in (sub_type, site_type):
        if key and key in INDUSTRY_PATTERNS:
            return INDUSTRY_PATTERNS[key]
    return DEFAULT_INDUSTRY_PATTERN
