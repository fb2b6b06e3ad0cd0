"""Tests for sitetheme.preview — PNG swatch sheet rendering."""

from __future__ import annotations

from PIL import Image

from sitetheme.preview import render_theme_preview, render_theme_preview_image


class TestPreview:
    def test_image_size(self, balanced_theme) -> None:
        img = render_theme_preview_image(balanced_theme, width=600)
        # header + three rows of 6 swatches at a 4:3 aspect
        assert img.size == (600, 72 + 3 * 75)

    def test_background_colour(self, balanced_theme) -> None:
        img = render_theme_preview_image(balanced_theme, width=600)
        r, g, b, _ = Image.new("RGBA", (1, 1), balanced_theme.color_background).getpixel((0, 0))
        assert img.getpixel((599, 0)) == (r, g, b)

    def test_saves_png(self, balanced_theme, tmp_path) -> None:
        target = tmp_path / "nested" / "theme.png"
        path = render_theme_preview(balanced_theme, target, width=300)
        assert path == target
        assert path.exists()
        with Image.open(path) as img:
            assert img.format == "PNG"
            assert img.width == 300
