"""
Registry of the hosted font families a theme may select.

The catalog is loaded once from the bundled resources and never changes for
the lifetime of the process.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Mapping, Tuple

from .resources import google_fonts_catalog

__all__ = [
    "DEFAULT_FONT",
    "FONT_OPTION_KEYS",
    "GOOGLE_FONTS",
    "get_google_fonts",
    "is_google_font",
]

DEFAULT_FONT: Final[str] = "Open Sans"

# Font roles in the order their CSS rules are written.
FONT_OPTION_KEYS: Final[Tuple[str, ...]] = ("font-body", "font-site-title", "font-header")

GOOGLE_FONTS: Final[Tuple[str, ...]] = tuple(google_fonts_catalog())
_GOOGLE_FONT_SET: Final[frozenset[str]] = frozenset(GOOGLE_FONTS)
_GOOGLE_FONT_MAP: Final[Mapping[str, str]] = MappingProxyType({name: name for name in GOOGLE_FONTS})


def get_google_fonts() -> Mapping[str, str]:
    """Return a read-only mapping of display name to display name."""
    return _GOOGLE_FONT_MAP


def is_google_font(name: Any) -> bool:
    return isinstance(name, str) and name in _GOOGLE_FONT_SET
