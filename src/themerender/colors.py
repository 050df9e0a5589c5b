"""
Hex color sanitizers.

`sanitize_hex_color` is strict and returns None for anything that is not a
3 or 6 digit hex color. `maybe_hash_hex_color` is best-effort: values that
fail validation are handed back untouched, so callers interpolating into
CSS must accept that contract.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

__all__ = [
    "maybe_hash_hex_color",
    "sanitize_hex_color",
    "sanitize_hex_color_no_hash",
]

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"#([A-Fa-f0-9]{3}){1,2}")


def sanitize_hex_color(color: Any) -> Optional[str]:
    """Return `color` if it is `""` or `#` plus 3/6 hex digits, else None."""
    if color == "":
        return ""
    if isinstance(color, str) and _HEX_COLOR_RE.fullmatch(color):
        return color
    return None


def sanitize_hex_color_no_hash(color: Any) -> Optional[str]:
    """Validate a color stored without its leading `#`; returns bare digits."""
    if isinstance(color, int) and not isinstance(color, bool):
        # Numeric documents store colors like 123456 without quotes.
        color = str(color)
    if not isinstance(color, str):
        return None
    color = color.lstrip("#")
    if color == "":
        return ""
    return color if sanitize_hex_color(f"#{color}") else None


def maybe_hash_hex_color(color: Any) -> Any:
    """Ensure a valid hex color carries its `#`; pass anything else through."""
    unhashed = sanitize_hex_color_no_hash(color)
    if unhashed:
        return f"#{unhashed}"
    if color not in ("", None):
        logger.debug("Passing through unvalidated color value %r", color)
    return color
