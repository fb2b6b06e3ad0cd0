"""
gradients.py — theme-coloured gradient backgrounds.

The colour arguments are 6-digit hex tokens. Each helper appends a 2-digit alpha
suffix to them, so 3-digit shorthand or colours that already carry alpha give
invalid CSS.

Usage:
    from sitetheme.gradients import mesh_gradient, placeholder_gradient

    hero = mesh_gradient(tokens.color_primary, tokens.color_secondary, tokens.color_accent)
    card = placeholder_gradient(tokens.color_primary, tokens.color_secondary, "bold")
"""

from __future__ import annotations

from .css_patterns import encode_uri_component
from .tokens import format_css_number

PLACEHOLDER_VARIANTS = ("soft", "bold", "diagonal")

_NOISE_SVG = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='200' height='200'>"
    "<filter id='n'><feTurbulence type='fractalNoise' baseFrequency='0.65' "
    "numOctaves='3' stitchTiles='stitch'/></filter>"
    "<rect width='100%' height='100%' filter='url(%23n)' opacity='{opacity}'/></svg>"
)


def mesh_gradient(primary: str, secondary: str, accent: str, angle: float = 135) -> str:
    """Three soft radial glows over a faint linear wash of the primary."""
    return ", ".join([
        f"radial-gradient(ellipse at 20% 50%, {primary}33 0%, transparent 50%)",
        f"radial-gradient(ellipse at 80% 20%, {secondary}28 0%, transparent 50%)",
        f"radial-gradient(ellipse at 50% 80%, {accent}22 0%, transparent 50%)",
        f"linear-gradient({format_css_number(angle)}deg, {primary}0d 0%, transparent 100%)",
    ])


def placeholder_gradient(primary: str, secondary: str, variant: str = "soft") -> str:
    """Stand-in background for a missing image. Unknown variants render as soft."""
    if variant == "bold":
        return f"linear-gradient(135deg, {primary}40 0%, {secondary}40 100%)"
    if variant == "diagonal":
        return f"linear-gradient(160deg, {primary}30 0%, {secondary}25 50%, {primary}15 100%)"
    return f"linear-gradient(135deg, {primary}20 0%, {secondary}18 100%)"


def noise_overlay(opacity: float = 0.03) -> str:
    # The '%23n' filter reference is escaped again with the rest of the SVG, same as css_patterns.
    svg = _NOISE_SVG.replace("{opacity}", format_css_number(opacity))
    return f'url("data:image/svg+xml,{encode_uri_component(svg)}")'
