"""
Theme mod storage.

Rendering only needs something with `get(key, default)`; `ThemeModStore` is
the in-memory implementation used by the CLI and the tests. Documents read
from JSON are validated with the `ThemeMods` pydantic model first.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Final, Iterator, Mapping, Optional, Protocol

from pydantic import BaseModel, ValidationError, model_validator

from .fonts import DEFAULT_FONT

__all__ = [
    "DEFAULT_THEME_MODS",
    "OptionStore",
    "ThemeModStore",
    "ThemeMods",
]

DEFAULT_THEME_MODS: Final[Mapping[str, Any]] = MappingProxyType(
    {
        "background-color": "#ffffff",
        "background-image": False,
        "background-size": "auto",
        "background-repeat": "no-repeat",
        "background-position": "center",
        "background-attachment": "fixed",
        "color-primary": "#ffffff",
        "color-secondary": "#ffffff",
        "color-text": "#ffffff",
        "color-accent": "#ffffff",
        "header-background-color": "#ffffff",
        "footer-background-color": "#ffffff",
        "header-layout": "header-layout-1",
        "footer-layout": "footer-layout-1",
        "font-body": DEFAULT_FONT,
        "font-site-title": DEFAULT_FONT,
        "font-header": DEFAULT_FONT,
    }
)


class OptionStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...


class ThemeMods(BaseModel):
    """A theme mods document: a flat object of scalar values."""

    model_config = {"extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def values_are_scalars(cls, data: Any):
        if not isinstance(data, Mapping):
            raise ValueError("theme mods must be an object of key/value pairs")
        for key, value in data.items():
            if not isinstance(key, str):
                raise ValueError(f"theme mod keys must be strings, got {key!r}")
            if value is not None and not isinstance(value, (str, bool, int, float)):
                raise ValueError(f"theme mod '{key}' must be a scalar value")
        return data

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class ThemeModStore:
    """In-memory theme mod storage with `get_theme_mod` semantics."""

    def __init__(self, mods: Optional[Mapping[str, Any]] = None) -> None:
        self._mods: Dict[str, Any] = dict(mods or {})

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or `default` when unset or stored as None."""
        value = self._mods.get(key)
        if value is None:
            return default
        return value

    def set(self, key: str, value: Any) -> None:
        self._mods[key] = value

    def remove(self, key: str) -> None:
        self._mods.pop(key, None)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._mods)

    def __contains__(self, key: object) -> bool:
        return key in self._mods

    def __iter__(self) -> Iterator[str]:
        return iter(self._mods)

    def __len__(self) -> int:
        return len(self._mods)

    # ------------------------------------------------------------------ #
    # Constructors
    # ------------------------------------------------------------------ #
    @classmethod
    def from_dict(cls, data: Any) -> "ThemeModStore":
        """Validate a theme mods document and wrap it."""
        try:
            model = ThemeMods.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid theme mods: {exc.errors()[0]['msg']}") from exc
        return cls(model.as_dict())

    @classmethod
    def from_json(cls, json_str: str) -> "ThemeModStore":
        """Load theme mods from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Theme mods are not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "ThemeModStore":
        """Load theme mods from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Theme mods file not found: {path}")
        return cls.from_json(path.read_text(encoding="utf-8"))
