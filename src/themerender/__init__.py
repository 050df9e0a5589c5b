"""
ThemeRender package initialization.
Exports the option store, sanitizers, CSS emitters and font request builder.
"""

from .bundle import ResolvedThemeRenderBundle, resolve_theme_render_bundle
from .choices import allowed_choices, legacy_allowed_choices, sanitize_choice
from .colors import maybe_hash_hex_color, sanitize_hex_color, sanitize_hex_color_no_hash
from .emitters import CssPipeline, css_fonts, default_pipeline, render_css, render_font_css
from .escaping import sanitize_text
from .font_request import get_google_font_request
from .fonts import GOOGLE_FONTS, get_google_fonts
from .layout import layout_classes
from .options import DEFAULT_THEME_MODS, OptionStore, ThemeModStore

__all__ = [
    "CssPipeline",
    "DEFAULT_THEME_MODS",
    "GOOGLE_FONTS",
    "OptionStore",
    "ResolvedThemeRenderBundle",
    "ThemeModStore",
    "allowed_choices",
    "css_fonts",
    "default_pipeline",
    "get_google_font_request",
    "get_google_fonts",
    "layout_classes",
    "legacy_allowed_choices",
    "maybe_hash_hex_color",
    "render_css",
    "render_font_css",
    "resolve_theme_render_bundle",
    "sanitize_choice",
    "sanitize_hex_color",
    "sanitize_hex_color_no_hash",
    "sanitize_text",
]
