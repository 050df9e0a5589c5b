from importlib import resources

__all__ = ["google_fonts_catalog"]

def google_fonts_catalog() -> list[str]:
    """Return the bundled font family names in catalog order."""
    text = resources.files("themerender.resources").joinpath("google_fonts.txt").read_text(
        encoding="utf-8"
    )
    return [line.strip() for line in text.splitlines() if line.strip()]
