"""
Escaping helpers used when interpolating option values into CSS, HTML
attributes and URLs, plus the allow-list rich-text sanitizer.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import bleach

__all__ = [
    "ALLOWED_PROTOCOLS",
    "ALLOWED_TAGS",
    "ALLOWED_TAG_ATTRIBUTES",
    "escape_double_quotes",
    "esc_html",
    "esc_url",
    "esc_url_raw",
    "sanitize_text",
]

ALLOWED_PROTOCOLS = (
    "http",
    "https",
    "ftp",
    "ftps",
    "mailto",
    "news",
    "irc",
    "gopher",
    "nntp",
    "feed",
    "telnet",
    "mms",
    "rtsp",
    "svn",
    "tel",
    "fax",
    "xmpp",
    "webcal",
    "urn",
)

# Inline tags accepted in short user-supplied text such as captions.
ALLOWED_TAG_ATTRIBUTES: Dict[str, List[str]] = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "acronym": ["title"],
    "b": [],
    "blockquote": ["cite"],
    "cite": [],
    "code": [],
    "del": ["datetime"],
    "em": [],
    "i": [],
    "q": ["cite"],
    "s": [],
    "strike": [],
    "strong": [],
}
ALLOWED_TAGS = frozenset(ALLOWED_TAG_ATTRIBUTES)

_BARE_AMPERSAND_RE = re.compile(r"&(?!(?:#[0-9]+|#x[0-9A-Fa-f]+|[A-Za-z][A-Za-z0-9]*);)")
_URL_DISALLOWED_RE = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\U0010ffff]", re.IGNORECASE)
_URL_ENCODED_CONTROL_RE = re.compile(r"%0[0ad]", re.IGNORECASE)
_PHP_FILE_RE = re.compile(r"^[a-z0-9-]+?\.php", re.IGNORECASE)


def esc_html(text: Any) -> str:
    """Escape text for HTML without double-encoding existing entities."""
    text = "" if text is None else str(text)
    text = _BARE_AMPERSAND_RE.sub("&amp;", text)
    return (
        text.replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def _strip_encoded_controls(url: str) -> str:
    # Removal can join fragments into a new match ("%0%0dd"), so repeat.
    while True:
        cleaned = _URL_ENCODED_CONTROL_RE.sub("", url)
        if cleaned == url:
            return cleaned
        url = cleaned


def _has_allowed_protocol(url: str, protocols: Sequence[str]) -> bool:
    scheme, sep, _ = url.partition(":")
    if not sep or re.search(r"[/?#]", scheme):
        # No scheme, or the colon belongs to the path/query.
        return True
    return scheme.lower() in protocols


def esc_url_raw(url: Any, protocols: Optional[Sequence[str]] = None) -> str:
    """
    Clean a URL for storage or use in CSS.

    Leading whitespace is dropped, spaces are percent-encoded, characters
    outside the URL alphabet (quotes, angle brackets, backslashes, control
    characters) are removed and encoded CR/LF/NUL sequences are stripped.
    Bare host names get an `http://` prefix. URLs with a scheme outside
    `protocols` collapse to `""`.
    """
    if url is None or url is False:
        return ""
    url = str(url).lstrip()
    if url == "":
        return ""
    url = url.replace(" ", "%20")
    url = _URL_DISALLOWED_RE.sub("", url)
    url = _strip_encoded_controls(url)
    if url == "":
        return ""

    if ":" not in url and url[0] not in "/#?" and not _PHP_FILE_RE.match(url):
        url = f"http://{url}"

    if url[0] != "/" and not _has_allowed_protocol(url, protocols or ALLOWED_PROTOCOLS):
        return ""
    return url


def esc_url(url: Any, protocols: Optional[Sequence[str]] = None) -> str:
    """Clean a URL and entity-encode it for display in HTML."""
    url = esc_url_raw(url, protocols)
    if not url:
        return url
    url = _BARE_AMPERSAND_RE.sub("&#038;", url)
    return url.replace("&amp;", "&#038;").replace("'", "&#039;")


def escape_double_quotes(text: str) -> str:
    """Backslash-escape double quotes for a double-quoted CSS context."""
    return text.replace('"', '\\"')


def sanitize_text(
    text: Any,
    allowed_tags: Optional[Mapping[str, Sequence[str]] | Iterable[str]] = None,
) -> str:
    """
    Strip every tag and attribute not named in `allowed_tags`.

    `allowed_tags` maps tag names to their permitted attributes; a plain
    collection of tag names allows those tags with no attributes.
    """
    if isinstance(allowed_tags, str):
        allowed_tags = [allowed_tags]
    if allowed_tags is None:
        tag_attributes: Mapping[str, Sequence[str]] = ALLOWED_TAG_ATTRIBUTES
    elif isinstance(allowed_tags, Mapping):
        tag_attributes = allowed_tags
    else:
        tag_attributes = {tag: [] for tag in allowed_tags}
    return bleach.clean(
        "" if text is None else str(text),
        tags=frozenset(tag_attributes),
        attributes={tag: list(attrs) for tag, attrs in tag_attributes.items()},
        strip=True,
    )
