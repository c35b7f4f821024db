"""Short display snippets for search results."""

from __future__ import annotations

CONTENT_PREVIEW_CHARS = 500
TITLE_PREVIEW_CHARS = 200
ELLIPSIS = "…"


def content_preview(title: str, content: str | None) -> str:
    """Prefer the cached article text; fall back to the title."""
    if content:
        return _truncate(content, CONTENT_PREVIEW_CHARS)
    return _truncate(title, TITLE_PREVIEW_CHARS)


def _truncate(text: str, max_len: int) -> str:
    # Truncated output is exactly max_len characters, ellipsis included.
    if len(text) > max_len:
        return text[: max_len - 1] + ELLIPSIS
    return text
