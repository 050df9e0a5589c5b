"""
CSS fragment emitters and the pipeline that folds them into a stylesheet.

Each emitter takes the CSS accumulated so far plus the option store and
returns the CSS with one rule block appended. Emitters target disjoint
selectors and never read each other's output, so registration order only
affects layout of the final string.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Iterable, List, Tuple

from .choices import sanitize_choice
from .colors import maybe_hash_hex_color
from .escaping import esc_html, esc_url_raw, escape_double_quotes
from .fonts import FONT_OPTION_KEYS
from .options import DEFAULT_THEME_MODS, OptionStore

__all__ = [
    "CssPipeline",
    "DEFAULT_EMITTERS",
    "Emitter",
    "FONT_SELECTORS",
    "css_fonts",
    "default_pipeline",
    "display_background",
    "display_colors",
    "display_footer_background",
    "display_header_background",
    "render_css",
    "render_font_css",
]

Emitter = Callable[[str, OptionStore], str]

FONT_SELECTORS = {
    "font-body": ".font-body,body",
    "font-site-title": ".font-site-title,.site-title",
    "font-header": ".font-header,h1,h2,h3,h4,h5,h6",
}


def _theme_mod(store: OptionStore, key: str):
    return store.get(key, DEFAULT_THEME_MODS[key])


def _color(store: OptionStore, key: str):
    return maybe_hash_hex_color(_theme_mod(store, key))


def _choice(store: OptionStore, key: str):
    return sanitize_choice(_theme_mod(store, key), key)


# ---------------------------------------------------------------------- #
# Emitters
# ---------------------------------------------------------------------- #
def display_background(css: str, store: OptionStore) -> str:
    """Append the body background rule, with image properties when set."""
    background_color = _color(store, "background-color")
    background_image = _theme_mod(store, "background-image")

    if background_image in (False, None, ""):
        return css + f"body{{background-color:{background_color};}}"

    background_size = _choice(store, "background-size")
    background_repeat = _choice(store, "background-repeat")
    background_position = _choice(store, "background-position")
    background_attachment = _choice(store, "background-attachment")
    background_image = escape_double_quotes(esc_url_raw(background_image))

    return css + (
        f"body{{background:{background_color} url({background_image}) "
        f"{background_repeat} {background_position} {background_attachment};"
        f"background-size:{background_size};}}"
    )


def display_colors(css: str, store: OptionStore) -> str:
    """Append link, button and paragraph color rules."""
    color_primary = _color(store, "color-primary")
    # Secondary and accent colors are sanitized but not yet used by any rule.
    _color(store, "color-secondary")
    color_text = _color(store, "color-text")
    _color(store, "color-accent")

    return css + (
        f"a{{color:{color_primary};}}"
        f"button{{color:{color_primary};}}"
        f"p{{color:{color_text};}}"
    )


def display_header_background(css: str, store: OptionStore) -> str:
    background_color = _color(store, "header-background-color")
    return css + f".site-header{{background-color:{background_color};}}"


def display_footer_background(css: str, store: OptionStore) -> str:
    background_color = _color(store, "footer-background-color")
    return css + f".site-footer{{background-color:{background_color};}}"


def css_fonts(css: str, store: OptionStore) -> str:
    """
    Append one font-family rule per font role.

    Names are HTML-escaped but not checked against the font registry; only
    the font request builder enforces the registry.
    """
    for key in FONT_OPTION_KEYS:
        name = esc_html(_theme_mod(store, key))
        css += f"{FONT_SELECTORS[key]}{{font-family:{name};}}"
    return css


DEFAULT_EMITTERS: Tuple[Emitter, ...] = (
    display_background,
    display_colors,
    display_header_background,
    display_footer_background,
)


# ---------------------------------------------------------------------- #
# Pipeline
# ---------------------------------------------------------------------- #
class CssPipeline:
    """An ordered list of emitters folded over an initial CSS string."""

    def __init__(self, emitters: Iterable[Emitter] = ()) -> None:
        self._emitters: List[Emitter] = list(emitters)

    @property
    def emitters(self) -> Tuple[Emitter, ...]:
        return tuple(self._emitters)

    def register(self, emitter: Emitter) -> Emitter:
        """Append `emitter`; returns it so this works as a decorator."""
        self._emitters.append(emitter)
        return emitter

    def render(self, store: OptionStore, css: str = "") -> str:
        """Thread `css` through every emitter in registration order."""
        return reduce(lambda acc, emitter: emitter(acc, store), self._emitters, css)


def default_pipeline() -> CssPipeline:
    return CssPipeline(DEFAULT_EMITTERS)


def render_css(store: OptionStore) -> str:
    """Render the default stylesheet for `store`."""
    return default_pipeline().render(store)


def render_font_css(store: OptionStore) -> str:
    return css_fonts("", store)
