"""
emotional_overrides.py — Emotional-goal and anti-reference token adjustments.

Each goal / anti-reference id maps to a fixed list of small (5–30%) token
adjustments. They are applied to a copy of the base tokens:

  1. emotional goals, in the order given
  2. anti-references (general and industry), in the order given

When two ids touch the same key the effects stack: two ×1.1 scalings give
×1.21. Unknown ids are ignored.

Usage:
    from sitetheme.emotional_overrides import apply_emotional_overrides

    tuned = apply_emotional_overrides(base, ["luxury"], ["corporate"])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from . import colors
from .errors import InvalidColorError
from .tokens import ThemeTokens, format_css_number, parse_css_number

logger = logging.getLogger(__name__)

LENGTH_UNITS = ("px", "rem", "em", "%")
DURATION_UNITS = ("ms", "s")

# Keys allowed below zero; every other numeric token is floored at 0.
_SIGNED_KEYS = frozenset({"trackingTight", "trackingNormal", "trackingWide"})
_WEIGHT_BOUNDS = (100.0, 900.0)


@dataclass(frozen=True)
class ColorShift:
    """Applied in field order: saturate, darken, brighten, then hue shift."""

    saturate: float = 0.0
    darken: float = 0.0
    brighten: float = 0.0
    temperature: float = 0.0  # degrees; negative is warmer

    def apply(self, hex_color: str) -> str:
        c = hex_color
        if self.saturate:
            c = colors.saturate(c, self.saturate)
        if self.darken:
            c = colors.darken(c, self.darken)
        if self.brighten:
            c = colors.brighten(c, self.brighten)
        if self.temperature:
            c = colors.rotate_hue(c, self.temperature)
        return colors.normalize_hex(c)


@dataclass(frozen=True)
class Adjustment:
    key: str
    op: str  # "multiply" | "add" | "set" | "color"
    value: Union[float, str, ColorShift]


def scale(key: str, factor: float) -> Adjustment:
    return Adjustment(key, "multiply", factor)


def add(key: str, amount: float) -> Adjustment:
    return Adjustment(key, "add", amount)


def set_to(key: str, value: str) -> Adjustment:
    return Adjustment(key, "set", value)


def shift(key: str, **kwargs: float) -> Adjustment:
    return Adjustment(key, "color", ColorShift(**kwargs))


Rules = Mapping[str, Tuple[Adjustment, ...]]

# ── Emotional goals ──────────────────────────────────────────────────────────

GOAL_RULES: Rules = MappingProxyType({
    # Breathing room, slower motion, deeper colour
    "luxury": (
        scale("spaceSection", 1.15),
        scale("spaceComponent", 1.1),
        scale("transitionBase", 1.2),
        scale("transitionSlow", 1.15),
        shift("colorPrimary", saturate=0.3, darken=0.2),
        shift("colorPrimaryDark", saturate=0.2, darken=0.15),
        shift("colorAccent", saturate=0.4),
    ),
    "calm": (
        scale("spaceSection", 1.12),
        scale("spaceComponent", 1.08),
        scale("transitionBase", 1.3),
        scale("transitionFast", 1.2),
        scale("animationDistance", 0.7),
        shift("colorPrimary", saturate=-0.2, brighten=0.1),
        shift("colorAccent", saturate=-0.15),
    ),
    "energized": (
        scale("spaceSection", 0.92),
        scale("transitionBase", 0.8),
        scale("transitionFast", 0.75),
        scale("animationDistance", 1.3),
        set_to("animationScale", "1.05"),
        shift("colorPrimary", saturate=0.4),
        shift("colorAccent", saturate=0.3, brighten=0.15),
    ),
    "playful": (
        scale("radiusSm", 1.3),
        scale("radiusMd", 1.25),
        scale("radiusLg", 1.2),
        scale("radiusXl", 1.15),
    ),
    "authoritative": (
        scale("radiusSm", 0.7),
        scale("radiusMd", 0.75),
        scale("radiusLg", 0.8),
        set_to("weightBold", "800"),
        set_to("weightSemibold", "700"),
        shift("colorPrimary", darken=0.25),
    ),
    "trust": (
        scale("spaceComponent", 1.05),
        scale("animationDistance", 0.85),
        shift("colorPrimary", temperature=10),
    ),
    "inspired": (
        scale("text5xl", 1.08),
        scale("text6xl", 1.08),
        set_to("animationScale", "1.04"),
        shift("colorAccent", saturate=0.3, brighten=0.1),
    ),
    "welcomed": (
        scale("spaceComponent", 1.06),
        set_to("leadingRelaxed", "1.85"),
        shift("colorPrimary", temperature=-15),
        shift("colorBackground", temperature=-5),
    ),
    "safe": (
        scale("animationDistance", 0.8),
        set_to("animationScale", "1.01"),
    ),
    "curious": (
        scale("spaceElement", 0.95),
        scale("animationDistance", 1.1),
    ),
})

# ── Anti-references ──────────────────────────────────────────────────────────
# Each rule pushes away from what the id names.

_RESTAURANT_CHAIN = (
    scale("spaceSection", 1.1),
    scale("spaceComponent", 1.08),
    shift("colorPrimary", saturate=0.2, darken=0.1),
    shift("colorAccent", saturate=0.15),
    scale("transitionBase", 1.1),
)
_AMATEUR = (
    scale("spaceSection", 1.08),
    shift("colorPrimary", saturate=0.15, darken=0.1),
    scale("transitionBase", 1.1),
)
_BARGAIN = (
    scale("spaceSection", 1.1),
    scale("spaceComponent", 1.08),
    shift("colorPrimary", saturate=0.2, darken=0.1),
)

ANTI_REFERENCE_RULES: Rules = MappingProxyType({
    "corporate": (
        scale("radiusSm", 1.3),
        scale("radiusMd", 1.25),
        scale("radiusLg", 1.2),
        shift("colorPrimary", temperature=-10),
        shift("colorBackground", temperature=-5),
        set_to("leadingRelaxed", "1.85"),
    ),
    "cheap": (
        scale("spaceSection", 1.08),
        scale("spaceComponent", 1.06),
        shift("colorPrimary", saturate=0.25, darken=0.1),
        shift("colorAccent", saturate=0.2),
    ),
    "clinical": (
        scale("radiusSm", 1.25),
        scale("radiusMd", 1.2),
        add("leadingRelaxed", 0.05),
        shift("colorPrimary", temperature=-12),
        shift("colorBackground", temperature=-6),
    ),
    "salesy": (
        scale("transitionBase", 1.1),
        scale("animationDistance", 0.85),
    ),
    "cluttered": (
        scale("spaceSection", 1.12),
        scale("spaceComponent", 1.1),
        scale("spaceElement", 1.08),
    ),
    "boring": (
        scale("animationDistance", 1.3),
        add("weightBold", 100),
        shift("colorAccent", saturate=0.3, brighten=0.1),
    ),
    "aggressive": (
        scale("transitionFast", 1.25),
        scale("transitionBase", 1.2),
        scale("animationDistance", 0.7),
        shift("colorPrimary", saturate=-0.15),
    ),
    "generic": (
        shift("colorPrimary", saturate=0.3),
        shift("colorAccent", saturate=0.25, brighten=0.1),
        set_to("weightBold", "800"),
    ),

    # Aesthetic trade-offs kept for sessions saved by the older intake flow
    "minimalist": (
        scale("spaceSection", 0.9),
        scale("spaceComponent", 0.92),
        scale("borderWidth", 1.5),
        shift("colorPrimary", saturate=0.2),
    ),
    "maximalist": (
        scale("spaceSection", 1.12),
        scale("spaceComponent", 1.1),
        scale("spaceElement", 1.08),
        shift("colorPrimary", saturate=-0.15),
    ),
    "traditional": (
        scale("radiusSm", 1.4),
        scale("radiusMd", 1.3),
        shift("colorPrimary", temperature=15),
        set_to("weightBold", "800"),
        set_to("trackingTight", "-0.03em"),
    ),
    "trendy": (
        shift("colorPrimary", saturate=-0.15, darken=0.1),
        shift("colorAccent", saturate=-0.1),
        scale("transitionBase", 1.15),
        set_to("leadingRelaxed", "1.85"),
    ),
    "playful": (
        scale("radiusSm", 0.6),
        scale("radiusMd", 0.65),
        scale("radiusLg", 0.7),
        shift("colorPrimary", darken=0.15),
        set_to("leadingTight", "1.15"),
    ),
    "formal": (
        scale("radiusSm", 1.35),
        scale("radiusMd", 1.3),
        scale("radiusLg", 1.25),
        shift("colorPrimary", temperature=-12),
        shift("colorBackground", temperature=-5),
        set_to("weightBold", "600"),
    ),
    "dramatic": (
        scale("transitionBase", 1.3),
        scale("transitionFast", 1.25),
        scale("animationDistance", 0.6),
        set_to("animationScale", "1.01"),
        shift("colorPrimary", saturate=-0.2),
    ),

    # Industry-specific
    "fast-food": _RESTAURANT_CHAIN,
    "cafeteria": _RESTAURANT_CHAIN,
    "chain-restaurant": _RESTAURANT_CHAIN,
    "budget-salon": (
        scale("spaceSection", 1.12),
        scale("spaceComponent", 1.1),
        shift("colorPrimary", saturate=0.25, darken=0.15),
        scale("transitionBase", 1.15),
    ),
    "medical-clinic": (
        shift("colorPrimary", temperature=-15),
        shift("colorBackground", temperature=-8),
        scale("radiusSm", 1.25),
        scale("radiusMd", 1.2),
    ),
    "call-center": (
        shift("colorPrimary", temperature=-10),
        set_to("leadingRelaxed", "1.85"),
        scale("spaceComponent", 1.06),
    ),
    "waiting-room": (
        scale("spaceSection", 1.05),
        shift("colorPrimary", temperature=-8),
        shift("colorBackground", temperature=-4),
    ),
    "stock-agency": (
        set_to("weightBold", "800"),
        shift("colorAccent", saturate=0.3, brighten=0.1),
        shift("colorPrimary", saturate=0.2),
    ),
    "snapshot-studio": _AMATEUR,
    "student-project": _AMATEUR,
    "flea-market": _BARGAIN,
    "dropship": _BARGAIN,
    "mega-retailer": (
        shift("colorPrimary", temperature=-10),
        scale("radiusSm", 1.2),
        scale("radiusMd", 1.15),
        set_to("leadingRelaxed", "1.85"),
    ),
    "content-farm": (
        set_to("weightBold", "800"),
        scale("spaceSection", 1.08),
        shift("colorPrimary", saturate=0.2),
    ),
    "news-wire": (
        shift("colorPrimary", temperature=-10),
        set_to("leadingRelaxed", "1.85"),
    ),
    "government-agency": (
        shift("colorPrimary", temperature=-12),
        scale("radiusSm", 1.3),
        scale("radiusMd", 1.25),
        set_to("weightBold", "600"),
    ),
    "charity-guilt": (
        shift("colorPrimary", brighten=0.15),
        shift("colorAccent", saturate=0.15, brighten=0.1),
    ),
    "textbook": (
        shift("colorPrimary", saturate=0.2),
        scale("spaceSection", 0.92),
        scale("transitionBase", 0.85),
    ),
    "children-site": (
        shift("colorPrimary", saturate=-0.1, darken=0.15),
        scale("radiusSm", 0.7),
        scale("radiusMd", 0.75),
    ),
    "ticket-booth": (
        scale("spaceSection", 1.1),
        shift("colorPrimary", saturate=0.15),
    ),
    "flyer": (
        scale("spaceSection", 1.12),
        scale("spaceComponent", 1.08),
        shift("colorPrimary", saturate=0.2, darken=0.1),
        scale("transitionBase", 1.15),
    ),
})

# ── Applying adjustments ─────────────────────────────────────────────────────


def _bounded(key: str, number: float) -> float:
    if key.startswith("weight"):
        lo, hi = _WEIGHT_BOUNDS
        return max(lo, min(hi, number))
    if key in _SIGNED_KEYS:
        return number
    return max(0.0, number)


def _format(key: str, number: float, unit: str) -> str:
    if unit in DURATION_UNITS or key.startswith("weight"):
        return f"{colors.round_half_up(number)}{unit}"
    return format_css_number(number, unit, places=2)


def _apply_numeric(key: str, value: str, op: str, operand: float) -> str:
    parsed = parse_css_number(value)
    if parsed is None:
        return value
    number, unit = parsed
    if unit and unit not in LENGTH_UNITS + DURATION_UNITS:
        return value
    number = number * operand if op == "multiply" else number + operand
    return _format(key, _bounded(key, number), unit)


def apply_adjustment(values: Dict[str, str], adjustment: Adjustment) -> None:
    """Apply one adjustment in place to a working camelCase token dict."""
    key = adjustment.key
    if key not in values:
        return
    current = values[key]
    if adjustment.op == "set":
        values[key] = str(adjustment.value)
    elif adjustment.op in ("multiply", "add"):
        values[key] = _apply_numeric(key, current, adjustment.op, float(adjustment.value))
    elif adjustment.op == "color":
        try:
            values[key] = adjustment.value.apply(current)
        except InvalidColorError:
            logger.debug("Skipping colour shift on non-hex %s=%r", key, current)


def rules_for(ids: Iterable[str], table: Rules) -> Tuple[Adjustment, ...]:
    """Flatten the rules for `ids` in order, skipping unknown ids."""
    flat = []
    for rule_id in ids:
        rules = table.get(rule_id)
        if rules is None:
            logger.debug("No override rules for %r", rule_id)
            continue
        flat.extend(rules)
    return tuple(flat)


def apply_emotional_overrides(
    base: ThemeTokens,
    goals: Optional[Iterable[str]] = None,
    anti_references: Optional[Iterable[str]] = None,
) -> ThemeTokens:
    """
    Return a new ThemeTokens with goal and anti-reference adjustments applied.

    `base` is never modified. With no known ids the result equals `base`.
    """
    values = base.to_dict()
    for adjustment in rules_for(goals or (), GOAL_RULES) + rules_for(anti_references or (), ANTI_REFERENCE_RULES):
        apply_adjustment(values, adjustment)
    return ThemeTokens.from_dict(values)
