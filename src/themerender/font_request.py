"""
Build the stylesheet request URL for the hosted fonts a theme uses.

The URL is only built here; fetching it is left to the page that embeds it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .escaping import esc_url
from .fonts import DEFAULT_FONT, is_google_font
from .options import OptionStore

__all__ = ["FONT_REQUEST_BASE", "FONT_REQUEST_KEYS", "get_google_font_request"]

logger = logging.getLogger(__name__)

FONT_REQUEST_BASE = "//fonts.googleapis.com/css?family="
FONT_REQUEST_KEYS: Tuple[str, ...] = ("font-site-title", "font-header", "font-body")


def _configured_fonts(store: OptionStore) -> List[Any]:
    return [store.get(key, DEFAULT_FONT) for key in FONT_REQUEST_KEYS]


def get_google_font_request(store: OptionStore, fonts: Optional[Iterable[Any]] = None) -> str:
    """
    Return the font stylesheet URL for `fonts`, or `""` if none are usable.

    When `fonts` is empty the three configured font roles are used. Names
    are de-duplicated keeping first occurrence, trimmed, and dropped unless
    they are registered fonts.
    """
    if isinstance(fonts, str):
        fonts = [fonts] if fonts else []
    fonts = list(fonts or [])
    if not fonts:
        fonts = _configured_fonts(store)

    family: List[str] = []
    for font in dict.fromkeys(str(font) for font in fonts):
        font = font.strip()
        if not is_google_font(font):
            logger.debug("Dropping unregistered font %r from font request", font)
            continue
        family.append(font.replace(" ", "+"))

    request = ""
    if family:
        request = FONT_REQUEST_BASE + "|".join(family)

    return esc_url(request)
