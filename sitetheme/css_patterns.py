"""
css_patterns.py — CSS-only background patterns.

Each pattern turns a colour into a CSS `background-image` value, either from
repeating gradients or from an inline SVG data URI. Patterns are layered over
solid backgrounds at the vocabulary's decorative opacity.

SVG patterns escape the colour inside the SVG and then escape the whole SVG
again, so a hex '#' ends up as '%2523' in the final value. Existing rendered
snapshots depend on that exact string.

Usage:
    from sitetheme.css_patterns import generate_pattern, get_pattern_size

    css = generate_pattern("grid", "#1a1a1a")
    size = get_pattern_size("grid")        # → "50px 50px"
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional
from urllib.parse import quote

NO_PATTERN = "none"


def encode_uri_component(value: str) -> str:
    """Percent-encode everything except A–Z a–z 0–9 - _ . ! ~ * ' ( )."""
    return quote(value, safe="-_.!~*'()")


def _svg_url(svg: str) -> str:
    return f'url("data:image/svg+xml,{encode_uri_component(svg)}")'


def _svg(width: int, height: int, body: str) -> str:
    return (
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{width}' height='{height}' "
        f"viewBox='0 0 {width} {height}'>{body}</svg>"
    )


def _lines(color: str, angle: str, gap: int, thickness: int = 1) -> str:
    return (
        f"repeating-linear-gradient({angle}, {color} 0px, {color} {thickness}px, "
        f"transparent {thickness}px, transparent {gap}px)"
    )


# ── Gradient patterns ────────────────────────────────────────────────────────

def pinstripe(color: str) -> str:
    return _lines(color, "90deg", 40)


def diagonal_stripes(color: str) -> str:
    return _lines(color, "45deg", 16, thickness=2)


def dots(color: str) -> str:
    return f"radial-gradient(circle, {color} 1px, transparent 1px)"


def grid(color: str) -> str:
    return ", ".join([_lines(color, "0deg", 50), _lines(color, "90deg", 50)])


def herringbone(color: str) -> str:
    return ", ".join([_lines(color, "30deg", 12), _lines(color, "-30deg", 12)])


def cross_hatch(color: str) -> str:
    return ", ".join([_lines(color, "45deg", 20), _lines(color, "-45deg", 20)])


def circuit_dots(color: str) -> str:
    return ", ".join([
        f"radial-gradient(circle, {color} 1.5px, transparent 1.5px)",
        f"radial-gradient(circle, {color} 0.5px, transparent 0.5px)",
    ])


def polka_dots(color: str) -> str:
    layer = f"radial-gradient(circle, {color} 3px, transparent 3px)"
    return ", ".join([layer, layer])


# ── SVG patterns ─────────────────────────────────────────────────────────────

def zigzag(color: str) -> str:
    c = encode_uri_component(color)
    return _svg_url(_svg(40, 20, (
        "<path d='M0 10 L10 0 L20 10 L30 0 L40 10 L40 20 L30 10 L20 20 L10 10 L0 20Z' "
        f"fill='{c}'/>"
    )))


def waves(color: str) -> str:
    c = encode_uri_component(color)
    return _svg_url(_svg(100, 20, (
        f"<path d='M0 10 Q25 0 50 10 Q75 20 100 10' fill='none' stroke='{c}' stroke-width='1.5'/>"
    )))


def concentric_circles(color: str) -> str:
    c = encode_uri_component(color)
    return _svg_url(_svg(60, 60, (
        f"<circle cx='30' cy='30' r='20' fill='none' stroke='{c}' stroke-width='1'/>"
        f"<circle cx='30' cy='30' r='12' fill='none' stroke='{c}' stroke-width='0.8'/>"
    )))


def seigaiha(color: str) -> str:
    c = encode_uri_component(color)
    return _svg_url(_svg(56, 28, (
        "<path d='M28 0 A28 28 0 0 0 0 28 M56 0 A28 28 0 0 0 28 28 "
        "M28 0 A14 14 0 0 0 14 14 M42 14 A14 14 0 0 0 28 0' "
        f"fill='none' stroke='{c}' stroke-width='0.8'/>"
    )))


def topography(color: str) -> str:
    c = encode_uri_component(color)
    return _svg_url(_svg(80, 80, (
        "<path d='M10 40 Q30 20 50 40 Q70 60 80 40 M0 60 Q20 40 40 60 Q60 80 80 60' "
        f"fill='none' stroke='{c}' stroke-width='0.8'/>"
    )))


def diamonds(color: str) -> str:
    c = encode_uri_component(color)
    return _svg_url(_svg(30, 30, (
        f"<path d='M15 0 L30 15 L15 30 L0 15Z' fill='none' stroke='{c}' stroke-width='0.8'/>"
    )))


# ── Registry ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CSSPattern:
    id: str
    label: str
    generate: Callable[[str], str]
    size: str = "auto"
    position: str = "0 0"


CSS_PATTERNS: Mapping[str, CSSPattern] = MappingProxyType({
    p.id: p for p in (
        CSSPattern("pinstripe", "Pinstripe", pinstripe, size="40px 40px"),
        CSSPattern("diagonal-stripes", "Diagonal Stripes", diagonal_stripes, size="16px 16px"),
        CSSPattern("dots", "Dots", dots, size="20px 20px"),
        CSSPattern("grid", "Grid", grid, size="50px 50px"),
        CSSPattern("herringbone", "Herringbone", herringbone, size="12px 12px"),
        CSSPattern("cross-hatch", "Cross Hatch", cross_hatch, size="20px 20px"),
        CSSPattern("zigzag", "Zigzag", zigzag),
        CSSPattern("waves", "Waves", waves),
        CSSPattern("concentric-circles", "Concentric Circles", concentric_circles),
        CSSPattern("seigaiha", "Seigaiha", seigaiha),
        CSSPattern("topography", "Topography", topography),
        CSSPattern("diamonds", "Diamonds", diamonds),
        CSSPattern("circuit-dots", "Circuit Dots", circuit_dots,
                   size="30px 30px, 30px 30px", position="0 0, 15px 15px"),
        CSSPattern("polka-dots", "Polka Dots", polka_dots,
                   size="30px 30px, 30px 30px", position="0 0, 15px 15px"),
    )
})


def get_pattern(pattern_id: Optional[str]) -> Optional[CSSPattern]:
    if not pattern_id or pattern_id == NO_PATTERN:
        return None
    return CSS_PATTERNS.get(pattern_id)


def generate_pattern(pattern_id: Optional[str], color: str) -> str:
    """CSS background-image value; "" for "none", empty or unknown ids."""
    pattern = get_pattern(pattern_id)
    return pattern.generate(color) if pattern else ""


def get_pattern_size(pattern_id: Optional[str]) -> str:
    pattern = get_pattern(pattern_id)
    return pattern.size if pattern else "auto"


def get_pattern_position(pattern_id: Optional[str]) -> str:
    pattern = get_pattern(pattern_id)
    return pattern.position if pattern else "0 0"
