"""
errors.py — Exception types raised at the explicit validation boundaries.

Lookups and filters never raise: unknown ids fall back to defaults and
invalid external patches are dropped. These exceptions only surface when a
caller asks for strict validation (parsing a colour, building a token set).
"""

from __future__ import annotations


class SiteThemeError(Exception):
    """Base class for all sitetheme errors."""


class InvalidColorError(SiteThemeError, ValueError):
    """A string could not be parsed as a hex colour."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex colour: {value!r}")


class UnknownTokenError(SiteThemeError, KeyError):
    """A token key outside the closed ThemeTokens schema was supplied."""

    def __init__(self, keys):
        self.keys = sorted(keys)
        super().__init__(f"Unknown theme token(s): {', '.join(self.keys)}")

    def __str__(self) -> str:
        return self.args[0]
