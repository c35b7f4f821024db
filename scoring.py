"""Lexical relevance scoring over the publication corpus (no network calls)."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from content_store import ContentStore
from models import PublicationRecord, SearchResult
from preview import content_preview

LOGGER = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3
CONTENT_SCAN_CHARS = 3000
SUBSTRING_HIT = 1.0
WHOLE_WORD_BONUS = 0.5
# Raw score at which the absolute component saturates to 1.0.
ABSOLUTE_SATURATION = 3.0
DEFAULT_TOP_K = 5


def tokenize_query(query: str) -> list[str]:
    """Lower-case, split on whitespace, drop tokens of two characters or fewer."""
    return [tok for tok in query.lower().split() if len(tok) >= MIN_TOKEN_LENGTH]


def build_search_text(title: str, content: str | None) -> str:
    text = title.lower()
    if content:
        text = f"{text} {content[:CONTENT_SCAN_CHARS].lower()}"
    return text


def score_text(tokens: Sequence[str], search_text: str) -> float:
    """Return the similarity of a lower-cased search text to the query tokens.

    Each token found as a substring scores 1; found as a whole word it scores
    a further 0.5. The result is the larger of the per-token match ratio and
    the raw score saturated at three hits. The match ratio is not clamped, so
    a query whose every token matches as a whole word scores 1.5.
    """
    raw = 0.0
    for token in tokens:
        if token not in search_text:
            continue
        raw += SUBSTRING_HIT
        if re.search(rf"\b{re.escape(token)}\b", search_text, re.IGNORECASE):
            raw += WHOLE_WORD_BONUS

    match_ratio = raw / max(len(tokens), 1)
    absolute = min(raw / ABSOLUTE_SATURATION, 1.0)
    return max(match_ratio, absolute)


def rank_publications(
    query: str,
    publications: Sequence[PublicationRecord],
    store: ContentStore,
    k: int = DEFAULT_TOP_K,
) -> list[SearchResult]:
    """Score every publication and return the top ``k`` with a non-zero score.

    Results are ordered by descending score. ``list.sort`` is stable, so equal
    scores keep corpus order.
    """
    if k <= 0:
        return []

    tokens = tokenize_query(query)
    candidates: list[SearchResult] = []

    for publication in publications:
        content = store.get(publication.link)
        similarity = score_text(tokens, build_search_text(publication.title, content))
        if similarity <= 0:
            continue

        candidates.append(
            SearchResult(
                title=publication.title,
                link=publication.link,
                similarity_score=similarity,
                content_preview=content_preview(publication.title, content),
                has_content=bool(content),
            )
        )

    candidates.sort(key=lambda result: result.similarity_score, reverse=True)
    top = candidates[:k]

    LOGGER.info(
        "Search: query=%r tokens=%s candidates=%s returned=%s",
        query,
        len(tokens),
        len(candidates),
        len(top),
    )
    return top
