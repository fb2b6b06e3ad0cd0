"""
adjustments.py — Sanitising externally suggested token patches and merging layers.

AI / VLM output is free text that happens to look like a token mapping. It
never reaches a token set without going through
`map_adjustments_to_token_overrides`, which keeps only:

  - keys in the ThemeTokens schema
  - string values
  - for colour-family keys, values that are hex colours

Everything else is dropped silently (logged at debug level).
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from .colors import is_hex_color
from .tokens import TOKEN_KEY_SET, is_color_token

logger = logging.getLogger(__name__)


def map_adjustments_to_token_overrides(raw: Optional[Mapping[str, object]]) -> Dict[str, str]:
    """Filter `raw` down to a safe partial token dict. Never raises."""
    result: Dict[str, str] = {}
    if not raw:
        return result

    for key, value in raw.items():
        if key not in TOKEN_KEY_SET:
            logger.debug("Dropping unknown token key %r", key)
            continue
        if not isinstance(value, str):
            logger.debug("Dropping non-string value for %s: %r", key, value)
            continue
        if is_color_token(key) and not is_hex_color(value):
            logger.debug("Dropping invalid colour for %s: %r", key, value)
            continue
        result[key] = value

    dropped = len(raw) - len(result)
    if dropped:
        logger.info("Sanitised token patch: kept %d, dropped %d", len(result), dropped)
    return result


def compose_layers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Merge token layers left to right; later layers win per key."""
    merged: Dict[str, str] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged
