"""Tests for sitetheme.main — the command line entry point."""

from __future__ import annotations

import argparse
import json

import pytest
from PIL import Image

from sitetheme.main import main, parse_json_object, parse_vector


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SITETHEME_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("SITETHEME_PREVIEW_WIDTH", "300")
    monkeypatch.delenv("SITETHEME_CSS_SELECTOR", raising=False)
    monkeypatch.setenv("SITETHEME_LOG_LEVEL", "WARNING")


class TestArgumentParsing:
    def test_parse_vector(self) -> None:
        assert parse_vector("0.1, 0.2,0.3,0.4,0.5,0.6") == [0.1, 0.2, 0.3, 0.4, 0.5, 0.6]

    @pytest.mark.parametrize("text", ["1,2", "a,b,c,d,e,f", "0.1,0.2,0.3,0.4,0.5,0.6,0.7"])
    def test_parse_vector_rejects(self, text: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_vector(text)

    def test_parse_json_object(self) -> None:
        assert parse_json_object('{"radiusMd": "4px"}') == {"radiusMd": "4px"}
        with pytest.raises(argparse.ArgumentTypeError):
            parse_json_object("[1, 2]")
        with pytest.raises(argparse.ArgumentTypeError):
            parse_json_object("{not json")

    def test_bad_vector_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--vector", "1,2"])
        assert exc_info.value.code == 2

    def test_output_modes_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            main(["--css", "--json"])

    def test_goal_limit(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--goal", "luxury", "--goal", "calm", "--goal", "trust"])
        assert exc_info.value.code == 2
        assert "--goal" in capsys.readouterr().err

    def test_two_goals_are_fine(self, capsys) -> None:
        assert main(["--json", "--goal", "luxury", "--goal", "calm"]) == 0


class TestOutput:
    def test_json(self, capsys) -> None:
        assert main(["--json", "--goal", "luxury", "--primary", "#2563eb"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["tokens"]["colorPrimary"] == "#2563eb"
        assert len(data["fingerprint"]) == 64
        assert "sectionDivider" in data["vocabulary"]

    def test_json_with_ai_patch(self, capsys) -> None:
        patch = json.dumps({"colorAccent": "#abc123", "bogus": 1})
        assert main(["--json", "--ai-patch", patch]) == 0
        assert json.loads(capsys.readouterr().out)["tokens"]["colorAccent"] == "#abc123"

    def test_css(self, capsys) -> None:
        assert main(["--css", "--primary", "#2563eb"]) == 0
        out = capsys.readouterr().out
        assert out.startswith(":root {")
        assert "  --color-primary: #2563eb;" in out

    def test_css_selector_from_env(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("SITETHEME_CSS_SELECTOR", ".brand")
        assert main(["--css"]) == 0
        assert capsys.readouterr().out.startswith(".brand {")

    def test_list_presets(self, capsys) -> None:
        assert main(["--list-presets"]) == 0
        out = capsys.readouterr().out
        assert "luxury" in out.lower()

    def test_rich_summary(self, capsys) -> None:
        assert main(["--site-type", "restaurant"]) == 0
        out = capsys.readouterr().out
        assert "Theme tokens" in out
        assert "Visual vocabulary" in out


class TestPreview:
    def test_explicit_path(self, tmp_path) -> None:
        target = tmp_path / "theme.png"
        assert main(["--json", "--preview", str(target)]) == 0
        with Image.open(target) as img:
            assert img.width == 300

    def test_default_path_uses_fingerprint(self, tmp_path, capsys) -> None:
        assert main(["--json", "--preview"]) == 0
        fingerprint = json.loads(capsys.readouterr().out)["fingerprint"]
        assert (tmp_path / "out" / f"theme-{fingerprint[:8]}.png").exists()
