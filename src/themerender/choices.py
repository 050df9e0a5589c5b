"""
Allow-lists for choice settings and the sanitizer that enforces them.

Every choice setting maps to a closed, ordered domain. The first entry of a
domain is the value used when a stored value is not a member.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Mapping, Tuple, Type

from .fonts import GOOGLE_FONTS

__all__ = [
    "ALLOWED_CHOICES",
    "BackgroundAttachment",
    "BackgroundPosition",
    "BackgroundRepeat",
    "BackgroundSize",
    "FONT_SETTINGS",
    "LAYOUT_SETTINGS",
    "LayoutChoice",
    "SiteLayout",
    "UNKNOWN_SETTING_CHOICES",
    "allowed_choices",
    "legacy_allowed_choices",
    "sanitize_choice",
]

logger = logging.getLogger(__name__)


class SiteLayout(str, Enum):
    FULL_WIDTH = "full-width"
    BOXED = "boxed"


class BackgroundSize(str, Enum):
    AUTO = "auto"
    COVER = "cover"
    CONTAIN = "contain"


class BackgroundRepeat(str, Enum):
    NO_REPEAT = "no-repeat"
    REPEAT = "repeat"
    REPEAT_X = "repeat-x"
    REPEAT_Y = "repeat-y"


class BackgroundPosition(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class BackgroundAttachment(str, Enum):
    FIXED = "fixed"
    SCROLL = "scroll"


class LayoutChoice(str, Enum):
    LAYOUT_1 = "layout-1"
    LAYOUT_2 = "layout-2"
    LAYOUT_3 = "layout-3"
    LAYOUT_4 = "layout-4"


def _values(enum_cls: Type[Enum]) -> Tuple[str, ...]:
    return tuple(member.value for member in enum_cls)


FONT_SETTINGS: Final[frozenset[str]] = frozenset({"font-site-title", "font-header", "font-body"})
LAYOUT_SETTINGS: Final[frozenset[str]] = frozenset({"header-layout", "footer-layout"})

# Settings without a registered domain collapse every value to 0.
UNKNOWN_SETTING_CHOICES: Final[Tuple[Any, ...]] = (0,)

_SIMPLE_CHOICES: Final[Mapping[str, Tuple[str, ...]]] = {
    "site-layout": _values(SiteLayout),
    "background-size": _values(BackgroundSize),
    "background-repeat": _values(BackgroundRepeat),
    "background-position": _values(BackgroundPosition),
    "background-attachment": _values(BackgroundAttachment),
}

ALLOWED_CHOICES: Final[Mapping[str, Tuple[Any, ...]]] = MappingProxyType(
    {
        **_SIMPLE_CHOICES,
        **{key: GOOGLE_FONTS for key in FONT_SETTINGS},
        **{key: _values(LayoutChoice) for key in LAYOUT_SETTINGS},
    }
)


def _setting_id(setting: Any) -> Any:
    """Accept either a setting key or a setting object exposing `id`."""
    if isinstance(setting, str):
        return setting
    return getattr(setting, "id", setting)


def allowed_choices(setting: Any) -> Tuple[Any, ...]:
    """Return the ordered domain for `setting` (a key or a setting object)."""
    key = _setting_id(setting)
    if not isinstance(key, str):
        return UNKNOWN_SETTING_CHOICES
    return ALLOWED_CHOICES.get(key, UNKNOWN_SETTING_CHOICES)


def legacy_allowed_choices(setting: Any) -> Tuple[Any, ...]:
    """
    Resolve a domain the way the original loosely-compared switch did.

    Its font and layout case labels were written as `'a' || 'b' || 'c'`,
    which evaluates to `true` before comparison. Any non-empty string other
    than "0" compares equal to `true`, so every key past the simple cases,
    including the layout and unknown keys, received the font list. Only
    kept to check parity against stored data written by that code.
    """
    key = _setting_id(setting)
    if not isinstance(key, str):
        return UNKNOWN_SETTING_CHOICES
    if key in _SIMPLE_CHOICES:
        return _SIMPLE_CHOICES[key]
    if key not in ("", "0"):
        return GOOGLE_FONTS
    return UNKNOWN_SETTING_CHOICES


def sanitize_choice(value: Any, setting: Any) -> Any:
    """
    Return `value` if it is allowed for `setting`, else the domain default.

    The default is the first entry of the domain. Enum members are reduced
    to their plain value first so the result is always interpolation safe.
    """
    if isinstance(value, Enum):
        value = value.value
    choices = allowed_choices(setting)
    if value in choices:
        return value
    logger.debug(
        "Replacing %r for setting %r with default %r",
        value,
        _setting_id(setting),
        choices[0],
    )
    return choices[0]
