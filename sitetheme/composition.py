"""
composition.py — The full layered theme pipeline.

Layers, lowest to highest precedence:

  1. preset tokens, or generated variant A when no (known) preset is chosen
  2. emotional-goal / anti-reference overrides
  3. primary-colour derivation (colour family, retinted shadows)
  4. font pairing override
  5. sanitised AI / VLM token patch

Layers 1 and 2 are full token sets. Layers 3 to 5 are partial dicts, merged
rightmost-wins and laid over layer 2 in one step. The visual vocabulary and industry
pattern are resolved alongside from the same request.

Usage:
    from sitetheme.composition import ThemeRequest, compose_theme

    request = ThemeRequest(vector=[0.5] * 6, goals=["luxury"], primary_color="#2563eb")
    result = compose_theme(request)
    result.tokens.to_dict()["colorPrimary"]   # → "#2563eb"
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .adjustments import compose_layers, map_adjustments_to_token_overrides
from .derive import derive_theme_from_primary_color, retint_shadows
from .emotional_overrides import apply_emotional_overrides
from .errors import InvalidColorError
from .fonts import get_font_pairing_by_id
from .industry_patterns import IndustryPattern, get_industry_pattern
from .personality import NEUTRAL, normalize_vector
from .presets import get_preset_by_id
from .theme_generator import generate_theme_variants
from .tokens import ThemeTokens
from .visual_vocabulary import VisualVocabulary, resolve_visual_vocabulary

logger = logging.getLogger(__name__)


class ThemeRequest(BaseModel):
    """Everything the intake and customisation layers can ask for."""

    model_config = ConfigDict(frozen=True)

    vector: List[float] = Field(default_factory=lambda: [NEUTRAL] * 6)
    goals: List[str] = Field(default_factory=list)
    anti_references: List[str] = Field(default_factory=list)
    primary_color: Optional[str] = None
    preset_id: Optional[str] = None
    font_pairing_id: Optional[str] = None
    site_type: Optional[str] = None
    sub_type: Optional[str] = None
    archetype: Optional[str] = None
    ai_patch: Dict[str, object] = Field(default_factory=dict)

    @field_validator("vector", mode="before")
    @classmethod
    def _normalize(cls, v) -> List[float]:
        return list(normalize_vector(v or ()))


class ComposedTheme(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tokens: ThemeTokens
    vocabulary: VisualVocabulary
    pattern: IndustryPattern
    fingerprint: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "fingerprint": self.fingerprint,
            "tokens": self.tokens.to_dict(),
            "vocabulary": self.vocabulary.to_dict(),
            "pattern": self.pattern.to_dict(),
        }


def theme_fingerprint(request: ThemeRequest) -> str:
    """SHA-256 of the canonical request; equal requests give equal fingerprints."""
    payload = json.dumps(request.model_dump(), sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def base_layer(request: ThemeRequest) -> ThemeTokens:
    if request.preset_id:
        preset = get_preset_by_id(request.preset_id)
        if preset is not None:
            return preset.tokens
        logger.warning("Unknown preset %r, falling back to generated theme", request.preset_id)
    return generate_theme_variants(request.vector, business_type=request.site_type).variant_a


def compose_tokens(request: ThemeRequest) -> ThemeTokens:
    theme = base_layer(request)

    if request.goals or request.anti_references:
        theme = apply_emotional_overrides(theme, request.goals, request.anti_references)

    # Partial layers above the emotional one, lowest precedence first.
    primary_layer: Dict[str, str] = {}
    if request.primary_color:
        try:
            primary_layer = derive_theme_from_primary_color(
                request.primary_color, request.vector, request.site_type
            )
        except InvalidColorError as exc:
            logger.warning("Ignoring primary colour override: %s", exc)
        else:
            primary_layer.update(retint_shadows(theme, primary_layer["shadowColor"]))

    font_layer: Dict[str, str] = {}
    if request.font_pairing_id:
        pairing = get_font_pairing_by_id(request.font_pairing_id)
        if pairing is None:
            logger.warning("Unknown font pairing %r", request.font_pairing_id)
        else:
            font_layer = {
                "fontHeading": pairing.heading,
                "fontBody": pairing.body,
                "fontAccent": pairing.accent,
            }

    ai_layer = map_adjustments_to_token_overrides(request.ai_patch)
    return theme.merge(compose_layers(primary_layer, font_layer, ai_layer))


def compose_theme(request: ThemeRequest) -> ComposedTheme:
    tokens = compose_tokens(request)
    vocabulary = resolve_visual_vocabulary(
        request.sub_type, request.site_type, request.archetype, request.vector
    )
    pattern = get_industry_pattern(request.sub_type, request.site_type)
    fingerprint = theme_fingerprint(request)
    logger.debug("Composed theme %s", fingerprint[:12])
    return ComposedTheme(tokens=tokens, vocabulary=vocabulary, pattern=pattern, fingerprint=fingerprint)
