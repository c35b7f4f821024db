"""Shared typed models for the publication search engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PublicationRecord:
    """One corpus row: a publication title and its canonical link."""

    title: str
    link: str


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Ranked match returned by a search. Recomputed on every query."""

    title: str
    link: str
    similarity_score: float
    content_preview: str
    has_content: bool


@dataclass(frozen=True, slots=True)
class BulkLoadOutcome:
    """Result of loading scraped articles into the content store."""

    loaded_count: int = 0
    failed_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TopicCategory:
    """A research topic and the keyword searches that make it up."""

    name: str
    description: str
    keywords: tuple[str, ...]
