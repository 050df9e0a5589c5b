from __future__ import annotations

import json
from pathlib import Path

from themerender import ThemeModStore


def empty_store() -> ThemeModStore:
    return ThemeModStore()


def background_image_mods() -> dict:
    return {
        "background-color": "336699",
        "background-image": "https://example.com/img/bg.png",
        "background-size": "cover",
        "background-repeat": "repeat-x",
        "background-position": "left",
        "background-attachment": "scroll",
    }


def full_theme_mods() -> dict:
    return {
        **background_image_mods(),
        "color-primary": "#abc",
        "color-secondary": "#123456",
        "color-text": "222222",
        "color-accent": "#ff0000",
        "header-background-color": "#000",
        "footer-background-color": "eeeeee",
        "header-layout": "header-layout-2",
        "footer-layout": "footer-layout-3",
        "font-body": "Lato",
        "font-site-title": "Abril Fatface",
        "font-header": "Open Sans",
    }


def store_with(**mods) -> ThemeModStore:
    return ThemeModStore({key.replace("_", "-"): value for key, value in mods.items()})


def write_json(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")
