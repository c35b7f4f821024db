"""In-memory cache of scraped article text, keyed by publication link."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from models import BulkLoadOutcome

LOGGER = logging.getLogger(__name__)


class ContentStore:
    """Link -> full-text mapping. Insert-only for the life of the process."""

    def __init__(self) -> None:
        self._content: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._content)

    def __contains__(self, link: object) -> bool:
        return link in self._content

    def get(self, link: str) -> str | None:
        return self._content.get(link)

    def put(self, link: str, content: str) -> None:
        self._content[link] = content

    def bulk_load(self, items: Iterable[tuple[str, Any]]) -> BulkLoadOutcome:
        """Load scraped-article payloads, skipping the ones that fail.

        Args:
            items: (doc_id, payload) pairs. The doc_id only identifies the item
                in the outcome; the payload's ``url`` becomes the cache key.

        Returns:
            BulkLoadOutcome with the loaded count and the ids that failed.
        """
        loaded = 0
        failed: list[str] = []

        for doc_id, payload in items:
            try:
                link, content = parse_article_payload(payload)
            except ValueError as exc:
                failed.append(doc_id)
                LOGGER.warning("Content load: skipping doc_id=%s: %s", doc_id, exc)
                continue

            self.put(link, content)
            loaded += 1

        LOGGER.info(
            "Content load: loaded=%s failed=%s cached_total=%s",
            loaded,
            len(failed),
            len(self._content),
        )
        return BulkLoadOutcome(loaded_count=loaded, failed_ids=failed)


def parse_article_payload(payload: Any) -> tuple[str, str]:
    """Extract (url, content) from a scraped-article JSON object.

    Raises:
        ValueError: when the payload is not an object, has no usable url, or
            its content is not a string.
    """
    if not isinstance(payload, dict):
        raise ValueError("Unexpected article payload shape: expected an object")

    url = payload.get("url")
    if not isinstance(url, str) or not url.strip():
        raise ValueError("Article payload is missing 'url'")

    content = payload.get("content")
    if not isinstance(content, str):
        raise ValueError("Article payload 'content' must be a string")

    return url.strip(), content
