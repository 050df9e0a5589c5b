from __future__ import annotations

from typing import Iterable, List

from .options import DEFAULT_THEME_MODS, OptionStore

__all__ = ["layout_classes"]


def layout_classes(classes: Iterable[str], store: OptionStore) -> List[str]:
    """
    Return `classes` extended with the footer then header layout classes.

    Stored layout values are used as-is; they are not re-validated here.
    """
    extended = list(classes)
    extended.append(store.get("footer-layout", DEFAULT_THEME_MODS["footer-layout"]))
    extended.append(store.get("header-layout", DEFAULT_THEME_MODS["header-layout"]))
    return extended
