"""
colors.py — Hex parsing, HSL / CIE Lab / LCH conversion and colour operations.

All functions take and return hex strings so that they can be chained over
token values directly:

    primary = hsl(220, 0.6, 0.5)          # → "#3361cc"
    darker  = darken(primary, 1.2)        # Lab L − 18 × 1.2
    softer  = saturate(primary, -0.2)     # LCH C − 18 × 0.2
    shadow  = with_alpha(primary, 0.15)   # → "#3361cc26"

Output hex is always lowercase `#rrggbb` (or `#rrggbbaa` from with_alpha).
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import Optional, Tuple

from .errors import InvalidColorError

HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{3,8}$")

RGB = Tuple[float, float, float]

# ── Lab constants (D65 reference white) ──────────────────────────────────────

_LAB_KN = 18.0
_XN, _YN, _ZN = 0.950470, 1.0, 1.088830
_T0 = 4 / 29
_T1 = 6 / 29
_T2 = 3 * _T1 ** 2
_T3 = _T1 ** 3


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


# ── Hex parsing ──────────────────────────────────────────────────────────────

def is_hex_color(value: object) -> bool:
    """True for `#` followed by 3, 4, 6 or 8 hex digits."""
    if not isinstance(value, str) or not HEX_PATTERN.match(value):
        return False
    return len(value) - 1 in (3, 4, 6, 8)


def coerce_hex(value: str) -> str:
    """
    Strip whitespace and add a missing '#', keeping the digits as given.

    Raises InvalidColorError if the result is not a hex colour.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    s = value.strip()
    if s and not s.startswith("#"):
        s = "#" + s
    if not is_hex_color(s):
        raise InvalidColorError(value)
    return s


def normalize_hex(value: str) -> str:
    """Like coerce_hex, lowercased."""
    return coerce_hex(value).lower()


def parse_hex(value: str) -> Tuple[int, int, int, float]:
    """'#abc' / '#aabbcc' / '#aabbccdd' → (r, g, b, alpha)."""
    h = normalize_hex(value)[1:]
    if len(h) in (3, 4):
        h = "".join(c * 2 for c in h)
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    alpha = int(h[6:8], 16) / 255 if len(h) == 8 else 1.0
    return r, g, b, alpha


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = [max(0, min(255, round_half_up(c))) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def _rgb(hex_color: str) -> RGB:
    r, g, b, _ = parse_hex(hex_color)
    return float(r), float(g), float(b)


# ── HSL ──────────────────────────────────────────────────────────────────────

def hsl(h: float, s: float, l: float) -> str:
    """HSL (H in degrees, S/L in 0–1) → hex. Hue wraps, S/L are clamped."""
    s = max(0.0, min(1.0, s))
    l = max(0.0, min(1.0, l))
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l, s)
    return rgb_to_hex(r * 255, g * 255, b * 255)


def to_hsl(hex_color: str) -> Tuple[Optional[float], float, float]:
    """hex → (H°, S, L). H is None for achromatic colours."""
    r, g, b = _rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    if max(r, g, b) == min(r, g, b):
        return None, 0.0, l
    return h * 360, s, l


def hue_of(hex_color: str) -> float:
    """Hue in degrees; 0 for greys."""
    h, _, _ = to_hsl(hex_color)
    return 0.0 if h is None else h


def rotate_hue(hex_color: str, degrees: float) -> str:
    h, s, l = to_hsl(hex_color)
    if h is None:
        return rgb_to_hex(*_rgb(hex_color))
    return hsl(h + degrees, s, l)


# ── CIE Lab / LCH ────────────────────────────────────────────────────────────

def _rgb_xyz(c: float) -> float:
    c /= 255
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _xyz_lab(t: float) -> float:
    if t > _T3:
        return t ** (1 / 3)
    return t / _T2 + _T0


def _lab_xyz(t: float) -> float:
    return t * t * t if t > _T1 else _T2 * (t - _T0)


def _xyz_rgb(c: float) -> float:
    v = 12.92 * c if c <= 0.00304 else 1.055 * c ** (1 / 2.4) - 0.055
    return 255 * v


def to_lab(hex_color: str) -> Tuple[float, float, float]:
    r, g, b = (_rgb_xyz(c) for c in _rgb(hex_color))
    x = _xyz_lab((0.4124564 * r + 0.3575761 * g + 0.1804375 * b) / _XN)
    y = _xyz_lab((0.2126729 * r + 0.7151522 * g + 0.0721750 * b) / _YN)
    z = _xyz_lab((0.0193339 * r + 0.1191920 * g + 0.9503041 * b) / _ZN)
    return 116 * y - 16, 500 * (x - y), 200 * (y - z)


def from_lab(L: float, a: float, b: float) -> str:
    y = (L + 16) / 116
    x = y + a / 500
    z = y - b / 200
    x = _XN * _lab_xyz(x)
    y = _YN * _lab_xyz(y)
    z = _ZN * _lab_xyz(z)
    r = _xyz_rgb(3.2404542 * x - 1.5371385 * y - 0.4985314 * z)
    g = _xyz_rgb(-0.9692660 * x + 1.8760108 * y + 0.0415560 * z)
    b_ = _xyz_rgb(0.0556434 * x - 0.2040259 * y + 1.0572252 * z)
    return rgb_to_hex(r, g, b_)


def to_lch(hex_color: str) -> Tuple[float, float, float]:
    L, a, b = to_lab(hex_color)
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a)) % 360
    return L, c, h


def from_lch(L: float, c: float, h: float) -> str:
    rad = math.radians(h)
    return from_lab(L, c * math.cos(rad), c * math.sin(rad))


# ── Operations ───────────────────────────────────────────────────────────────

def brighten(hex_color: str, amount: float = 1.0) -> str:
    L, a, b = to_lab(hex_color)
    return from_lab(L + _LAB_KN * amount, a, b)


def darken(hex_color: str, amount: float = 1.0) -> str:
    return brighten(hex_color, -amount)


def saturate(hex_color: str, amount: float = 1.0) -> str:
    L, c, h = to_lch(hex_color)
    return from_lch(L, max(0.0, c + _LAB_KN * amount), h)


def desaturate(hex_color: str, amount: float = 1.0) -> str:
    return saturate(hex_color, -amount)


def with_alpha(hex_color: str, alpha: float) -> str:
    """Return an 8-digit `#rrggbbaa` hex with the given alpha."""
    alpha = max(0.0, min(1.0, alpha))
    return rgb_to_hex(*_rgb(hex_color)) + f"{round_half_up(alpha * 255):02x}"


def relative_luminance(hex_color: str) -> float:
    """WCAG 2.x relative luminance, 0 (black) → 1 (white)."""
    def _chan(c: float) -> float:
        c /= 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = _rgb(hex_color)
    return 0.2126 * _chan(r) + 0.7152 * _chan(g) + 0.0722 * _chan(b)


def contrast_ratio(a: str, b: str) -> float:
    la, lb = relative_luminance(a), relative_luminance(b)
    if la < lb:
        la, lb = lb, la
    return (la + 0.05) / (lb + 0.05)


def readable_text_on(background: str, light: str = "#ffffff", dark: str = "#111111") -> str:
    """White text if it clears 3:1 contrast on `background`, else near-black."""
    return light if contrast_ratio(background, light) > 3 else dark
