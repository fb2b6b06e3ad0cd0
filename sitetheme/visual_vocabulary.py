"""
visual_vocabulary.py — Non-token visual decisions per business type.

A VisualVocabulary records the divider style, accent shape, image overlay,
decorative opacity, preferred image aspect, parallax and scroll-reveal
intensity a site should use. Resolution is a fixed pipeline:

  lookup (sub-type → site type → default)
    → archetype overrides
    → personality overrides

Every step returns a new record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .personality import normalize_vector

logger = logging.getLogger(__name__)

DividerStyle = Literal["wave", "angle", "curve", "zigzag", "none"]
AccentShape = Literal["circle", "rectangle", "organic", "diamond", "none"]
ImageOverlay = Literal["none", "gradient", "vignette", "duotone"]
ImageAspect = Literal["landscape", "portrait", "square"]
RevealIntensity = Literal["none", "subtle", "moderate", "dramatic"]


class VisualVocabulary(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    section_divider: DividerStyle = "none"
    accent_shape: AccentShape = "none"
    image_overlay: ImageOverlay = "none"
    decorative_opacity: float = Field(default=0.03, ge=0.0, le=1.0)
    preferred_image_aspect: ImageAspect = "landscape"
    enable_parallax: bool = False
    scroll_reveal_intensity: RevealIntensity = "subtle"

    @field_validator("decorative_opacity", mode="before")
    @classmethod
    def _clamp_opacity(cls, v: float) -> float:
        return round(max(0.0, min(1.0, float(v))), 4)

    def replace(self, **changes) -> "VisualVocabulary":
        """Copy with `changes` applied and re-validated."""
        data = self.model_dump()
        data.update(changes)
        return VisualVocabulary(**data)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def _v(divider, accent, overlay, opacity, aspect, parallax, reveal) -> VisualVocabulary:
    return VisualVocabulary(
        section_divider=divider,
        accent_shape=accent,
        image_overlay=overlay,
        decorative_opacity=opacity,
        preferred_image_aspect=aspect,
        enable_parallax=parallax,
        scroll_reveal_intensity=reveal,
    )


DEFAULT_VOCABULARY = _v("none", "none", "none", 0.03, "landscape", False, "subtle")

VISUAL_VOCABULARIES: Mapping[str, VisualVocabulary] = MappingProxyType({
    "restaurant":  _v("curve", "organic", "vignette", 0.08, "landscape", True, "moderate"),
    "bakery":      _v("curve", "circle", "vignette", 0.08, "square", False, "moderate"),
    "spa":         _v("wave", "organic", "gradient", 0.05, "landscape", True, "subtle"),
    "photography": _v("none", "none", "none", 0.0, "portrait", True, "subtle"),
    "business":    _v("angle", "rectangle", "gradient", 0.04, "landscape", False, "subtle"),
    "law-firm":    _v("none", "rectangle", "gradient", 0.03, "landscape", False, "subtle"),
    "consulting":  _v("angle", "rectangle", "gradient", 0.03, "landscape", False, "subtle"),
    "tech":        _v("angle", "rectangle", "gradient", 0.05, "landscape", True, "moderate"),
    "startup":     _v("angle", "rectangle", "gradient", 0.06, "landscape", True, "moderate"),
    "fitness":     _v("angle", "diamond", "gradient", 0.1, "landscape", True, "dramatic"),
    "gym":         _v("angle", "diamond", "gradient", 0.1, "landscape", True, "dramatic"),
    "portfolio":   _v("none", "none", "none", 0.0, "landscape", True, "subtle"),
    "creative":    _v("zigzag", "organic", "duotone", 0.06, "square", True, "moderate"),
    "ecommerce":   _v("none", "rectangle", "gradient", 0.03, "square", False, "subtle"),
    "educational": _v("curve", "circle", "gradient", 0.04, "landscape", False, "subtle"),
    "nonprofit":   _v("wave", "organic", "gradient", 0.04, "landscape", False, "moderate"),
    "event":       _v("zigzag", "diamond", "gradient", 0.06, "landscape", True, "dramatic"),
    "landing":     _v("angle", "rectangle", "gradient", 0.04, "landscape", True, "moderate"),
    "personal":    _v("none", "none", "none", 0.0, "landscape", False, "subtle"),
    "booking":     _v("curve", "circle", "gradient", 0.04, "landscape", False, "moderate"),
})


def get_visual_vocabulary(sub_type: Optional[str], site_type: Optional[str]) -> VisualVocabulary:
    """Sub-type entry, else site-type entry, else DEFAULT_VOCABULARY."""
    for key in (sub_type, site_type):
        if key and key in VISUAL_VOCABULARIES:
            return VISUAL_VOCABULARIES[key]
    logger.debug("No visual vocabulary for %r / %r, using default", sub_type, site_type)
    return DEFAULT_VOCABULARY


# ── Archetype overrides ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class ArchetypeOverride:
    """Divider and accent replacements never turn an existing "none" into a shape."""

    section_divider: Optional[str] = None
    accent_shape: Optional[str] = None
    scroll_reveal_intensity: Optional[str] = None
    opacity_delta: float = 0.0
    opacity_limit: Optional[float] = None  # cap when delta > 0, floor when < 0

    def apply(self, vocab: VisualVocabulary) -> VisualVocabulary:
        changes = {}
        if self.section_divider and vocab.section_divider != "none":
            changes["section_divider"] = self.section_divider
        if self.accent_shape and vocab.accent_shape != "none":
            changes["accent_shape"] = self.accent_shape
        if self.scroll_reveal_intensity:
            changes["scroll_reveal_intensity"] = self.scroll_reveal_intensity
        if self.opacity_delta:
            opacity = vocab.decorative_opacity + self.opacity_delta
            if self.opacity_limit is not None:
                if self.opacity_delta > 0:
                    opacity = min(opacity, self.opacity_limit)
                else:
                    opacity = max(opacity, self.opacity_limit)
            changes["decorative_opacity"] = opacity
        return vocab.replace(**changes)


ARCHETYPE_OVERRIDES: Mapping[str, ArchetypeOverride] = MappingProxyType({
    "guide":     ArchetypeOverride(accent_shape="rectangle", scroll_reveal_intensity="subtle"),
    "creative":  ArchetypeOverride(accent_shape="organic", scroll_reveal_intensity="moderate"),
    "rebel":     ArchetypeOverride(section_divider="angle", scroll_reveal_intensity="dramatic"),
    "artisan":   ArchetypeOverride(section_divider="curve", opacity_delta=0.02, opacity_limit=0.12),
    "caretaker": ArchetypeOverride(section_divider="wave", accent_shape="organic"),
    "expert":    ArchetypeOverride(opacity_delta=-0.02, opacity_limit=0.0, scroll_reveal_intensity="subtle"),
})


def apply_archetype_overrides(vocab: VisualVocabulary, archetype: Optional[str] = None) -> VisualVocabulary:
    """Layer the archetype's fixed field overrides; unknown or missing archetype is a no-op."""
    override = ARCHETYPE_OVERRIDES.get(archetype or "")
    if override is None:
        return vocab
    return override.apply(vocab)


# ── Personality overrides ────────────────────────────────────────────────────

CALM_BELOW = 0.3
DYNAMIC_ABOVE = 0.6
MINIMAL_BELOW = 0.3
RICH_ABOVE = 0.7


def apply_personality_overrides(vocab: VisualVocabulary, vector: Sequence[float]) -> VisualVocabulary:
    """
    Energy (axis 5) drives parallax and reveal; density (axis 0) drives
    decorative opacity. Mid-range values leave the fields untouched.
    """
    pv = normalize_vector(vector)
    min_rich, calm_dynamic = pv[0], pv[5]
    changes = {}

    if calm_dynamic < CALM_BELOW:
        changes.update(enable_parallax=False, scroll_reveal_intensity="subtle")
    elif calm_dynamic > DYNAMIC_ABOVE:
        changes["enable_parallax"] = True
        if vocab.scroll_reveal_intensity == "subtle":
            changes["scroll_reveal_intensity"] = "moderate"

    if min_rich < MINIMAL_BELOW:
        changes["decorative_opacity"] = max(vocab.decorative_opacity - 0.03, 0.0)
    elif min_rich > RICH_ABOVE:
        changes["decorative_opacity"] = min(vocab.decorative_opacity + 0.02, 0.15)

    return vocab.replace(**changes) if changes else vocab


def resolve_visual_vocabulary(
    sub_type: Optional[str],
    site_type: Optional[str],
    archetype: Optional[str] = None,
    vector: Optional[Sequence[float]] = None,
) -> VisualVocabulary:
    vocab = get_visual_vocabulary(sub_type, site_type)
    vocab = apply_archetype_overrides(vocab, archetype)
    if vector is not None:
        vocab = apply_personality_overrides(vocab, vector)
    return vocab
