from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .emitters import CssPipeline, default_pipeline, render_font_css
from .font_request import get_google_font_request
from .layout import layout_classes
from .options import OptionStore

__all__ = ["ResolvedThemeRenderBundle", "resolve_theme_render_bundle"]


@dataclass(frozen=True)
class ResolvedThemeRenderBundle:
    css: str
    font_css: str
    font_request_url: str
    body_classes: Tuple[str, ...]

    @property
    def stylesheet(self) -> str:
        """Pipeline CSS followed by the font-family rules."""
        return self.css + self.font_css


def resolve_theme_render_bundle(
    store: OptionStore,
    classes: Iterable[str] = (),
    *,
    pipeline: Optional[CssPipeline] = None,
) -> ResolvedThemeRenderBundle:
    """Render every theme output for `store` in one pass."""
    pipeline = pipeline or default_pipeline()
    return ResolvedThemeRenderBundle(
        css=pipeline.render(store),
        font_css=render_font_css(store),
        font_request_url=get_google_font_request(store),
        body_classes=tuple(layout_classes(classes, store)),
    )
