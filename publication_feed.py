"""Ingestion helpers for the publication list and pre-scraped articles."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable

import requests

# The bundled PMC publication list and the articles scraped ahead of time.
DEFAULT_CORPUS_SOURCE = "SB_publication_PMC.csv"
DEFAULT_ARTICLES_BASE = "scraped_articles"
DEFAULT_SCRAPED_ARTICLE_IDS = (
    "PMC10020673",
    "PMC10025027",
    "PMC10027818",
    "PMC10030976",
    "PMC10058394",
)
REQUEST_TIMEOUT_SECONDS = 20

LOGGER = logging.getLogger(__name__)


def scraped_article_ids() -> list[str]:
    """Article ids to pre-load, from SCRAPED_ARTICLE_IDS (comma-separated)."""
    raw = os.getenv("SCRAPED_ARTICLE_IDS")
    if raw is None:
        return list(DEFAULT_SCRAPED_ARTICLE_IDS)
    return [doc_id.strip() for doc_id in raw.split(",") if doc_id.strip()]


def fetch_corpus_text(source: str) -> str:
    """Return the raw corpus text from a URL or a local file path.

    Raises:
        requests.RequestException: HTTP fetch failed.
        OSError: local file could not be read.
    """
    if _is_url(source):
        response = requests.get(source, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        text = response.text
    else:
        text = Path(source).read_text(encoding="utf-8")

    LOGGER.info("Corpus fetch: source=%s chars=%s", source, len(text))
    return text


def fetch_article_payloads(
    article_ids: Iterable[str],
    base: str,
) -> tuple[list[tuple[str, Any]], list[str]]:
    """Fetch ``<base>/<doc_id>.json`` for each id.

    Each fetch is independent: a network, file, encoding or JSON error is
    logged and the id is reported as failed; the remaining ids are still
    fetched.

    Returns:
        (items, failed_ids) where items are (doc_id, decoded payload) pairs.
    """
    items: list[tuple[str, Any]] = []
    failed: list[str] = []

    for doc_id in article_ids:
        location = f"{base.rstrip('/')}/{doc_id}.json"
        try:
            payload = _fetch_json(location)
        except (requests.RequestException, OSError, ValueError) as exc:
            failed.append(doc_id)
            LOGGER.warning("Article fetch: failed for doc_id=%s, skipping: %s", doc_id, exc)
            continue
        items.append((doc_id, payload))

    LOGGER.info("Article fetch: fetched=%s failed=%s", len(items), len(failed))
    return items, failed


def _fetch_json(location: str) -> Any:
    if _is_url(location):
        response = requests.get(location, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.json()
    return json.loads(Path(location).read_text(encoding="utf-8"))


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))
