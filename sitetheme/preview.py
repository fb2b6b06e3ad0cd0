"""
preview.py — Render a theme's colour family as a PNG swatch sheet.

Layout:
  ┌──────────────────────────────────────────────┐
  │ THEME PREVIEW                                 │  ← header band
  │ Heading Font / Body Font                      │
  ├──────┬──────┬──────┬──────┬──────┬──────┤
  │      │      │      │      │      │      │  ← one swatch per colour token
  │NAME  │NAME  │NAME  │NAME  │NAME  │NAME  │
  │#HEX  │#HEX  │#HEX  │#HEX  │#HEX  │#HEX  │
  └──────┴──────┴──────┴──────┴──────┴──────┘

Usage:
    from sitetheme.preview import render_theme_preview

    path = render_theme_preview(tokens, "outputs/theme.png")
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .colors import parse_hex, relative_luminance
from .tokens import COLOR_TOKEN_KEYS, ThemeTokens

_FONT_CANDIDATES = [
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
]

_FONT_BOLD_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
]

COLUMNS = 6


def _load_font(size: int, bold: bool = False):
    candidates = _FONT_BOLD_CANDIDATES if bold else _FONT_CANDIDATES
    for path in candidates:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _rgb(hex_color: str) -> Tuple[int, int, int]:
    r, g, b, _ = parse_hex(hex_color)
    return r, g, b


def _label_color(hex_color: str) -> Tuple[int, int, int]:
    """White or near-black label for best contrast on the swatch."""
    return (255, 255, 255) if relative_luminance(hex_color) < 0.35 else (20, 20, 20)


def _short_name(key: str) -> str:
    """colorPrimaryLight → PRIMARY LIGHT."""
    name = key[len("color"):] if key.startswith("color") else key
    words = []
    for ch in name:
        if ch.isupper() and words:
            words.append(" ")
        words.append(ch)
    return "".join(words).upper()


def _font_family(value: str) -> str:
    return value.split(",")[0].strip().strip("'\"")


def render_theme_preview_image(tokens: ThemeTokens, width: int = 1200) -> Image.Image:
    """Swatch grid of every colour token, in schema order."""
    data = tokens.to_dict()
    keys = COLOR_TOKEN_KEYS
    rows = math.ceil(len(keys) / COLUMNS)

    header_h = 72
    pad = 14
    swatch_w = width // COLUMNS
    swatch_h = int(swatch_w * 0.75)
    height = header_h + rows * swatch_h

    img = Image.new("RGB", (width, height), _rgb(data["colorBackground"]))
    draw = ImageDraw.Draw(img)

    font_hdr = _load_font(22, bold=True)
    font_sub = _load_font(14)
    font_name = _load_font(max(10, min(16, swatch_w // 12)), bold=True)
    font_hex = _load_font(max(9, min(14, swatch_w // 14)))

    text_rgb = _rgb(data["colorText"])
    draw.text((pad, 12), "THEME PREVIEW", fill=text_rgb, font=font_hdr)
    fonts_line = f"{_font_family(data['fontHeading'])} / {_font_family(data['fontBody'])}"
    draw.text((pad, 44), fonts_line, fill=_rgb(data["colorTextSecondary"]), font=font_sub)

    for i, key in enumerate(keys):
        hex_val = data[key]
        col, row = i % COLUMNS, i // COLUMNS
        sx = col * swatch_w
        sy = header_h + row * swatch_h
        sw = width - sx if col == COLUMNS - 1 else swatch_w

        draw.rectangle([sx, sy, sx + sw - 1, sy + swatch_h - 1], fill=_rgb(hex_val))
        label = _label_color(hex_val)
        draw.text((sx + pad, sy + swatch_h - 44), _short_name(key), fill=label, font=font_name)
        draw.text((sx + pad, sy + swatch_h - 22), hex_val.upper(), fill=label, font=font_hex)

    return img


def render_theme_preview(
    tokens: ThemeTokens,
    output_path: Union[str, Path],
    width: int = 1200,
) -> Path:
    """Render the swatch sheet and save it as PNG. Returns the saved path."""
    img = render_theme_preview_image(tokens, width=width)
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(out), "PNG")
    return out
