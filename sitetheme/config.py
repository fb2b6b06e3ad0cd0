"""Runtime settings for the sitetheme CLI, read from the environment (and .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    output_dir: str = "outputs"
    preview_width: int = 1200
    css_selector: str = ":root"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        return cls(
            log_level=os.environ.get("SITETHEME_LOG_LEVEL", cls.log_level).upper(),
            output_dir=os.environ.get("SITETHEME_OUTPUT_DIR", cls.output_dir),
            preview_width=_int_env("SITETHEME_PREVIEW_WIDTH", cls.preview_width),
            css_selector=os.environ.get("SITETHEME_CSS_SELECTOR", cls.css_selector),
        )
