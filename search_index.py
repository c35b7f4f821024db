"""Search facade: owns the corpus and content store and answers queries."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import requests

from content_store import ContentStore
from corpus_loader import parse_corpus
from models import BulkLoadOutcome, PublicationRecord, SearchResult
from publication_feed import fetch_article_payloads, fetch_corpus_text
from scoring import DEFAULT_TOP_K, rank_publications

LOGGER = logging.getLogger(__name__)


class SearchIndex:
    """Publication corpus plus cached article text, built once at start-up.

    The corpus is published only after the content load has finished, so
    ``is_ready()`` doubles as the barrier a multi-threaded host waits on
    before searching.
    """

    def __init__(self, content_store: ContentStore | None = None) -> None:
        self.content_store = content_store if content_store is not None else ContentStore()
        self.content_outcome = BulkLoadOutcome()
        self.malformed_rows = 0
        self._publications: list[PublicationRecord] = []

    def initialize(
        self,
        corpus_text: str,
        article_items: Iterable[tuple[str, Any]] = (),
    ) -> bool:
        """Load the corpus and the scraped articles.

        Content failures are recorded in ``content_outcome`` and never raise.
        Returns False only when the corpus yields no records; any previously
        loaded corpus is dropped so ``is_ready()`` reports False.
        """
        publications, self.malformed_rows = parse_corpus(corpus_text)
        if not publications:
            self._publications = []
            self.content_outcome = BulkLoadOutcome()
            LOGGER.error("Search index: corpus produced no publications")
            return False

        self.content_outcome = self.content_store.bulk_load(article_items)
        self._publications = publications

        LOGGER.info(
            "Search index ready: publications=%s malformed=%s cached_articles=%s",
            len(publications),
            self.malformed_rows,
            len(self.content_store),
        )
        return True

    def is_ready(self) -> bool:
        return bool(self._publications)

    def get_publications(self) -> list[PublicationRecord]:
        return list(self._publications)

    def search(self, query: str, k: int = DEFAULT_TOP_K) -> list[SearchResult]:
        """Top-k publications for ``query``; empty when not ready or nothing matches."""
        if not self.is_ready():
            LOGGER.warning("Search index not initialized; returning no results")
            return []
        return rank_publications(query, self._publications, self.content_store, k)


def build_search_index(
    corpus_source: str,
    articles_base: str,
    article_ids: Iterable[str],
) -> SearchIndex:
    """Fetch the corpus and scraped articles and build an index from them.

    A corpus fetch failure is logged and leaves the index un-initialized.
    Article fetch failures are merged into ``content_outcome.failed_ids``.
    """
    index = SearchIndex()

    try:
        corpus_text = fetch_corpus_text(corpus_source)
    except (requests.RequestException, OSError, UnicodeDecodeError):
        LOGGER.exception("Search index: failed to load corpus from %s", corpus_source)
        return index

    items, fetch_failed = fetch_article_payloads(article_ids, articles_base)
    index.initialize(corpus_text, items)
    index.content_outcome = BulkLoadOutcome(
        loaded_count=index.content_outcome.loaded_count,
        failed_ids=fetch_failed + index.content_outcome.failed_ids,
    )
    return index
