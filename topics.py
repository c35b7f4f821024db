"""Research-topic browsing built from repeated keyword searches."""

from __future__ import annotations

import logging

from models import SearchResult, TopicCategory
from search_index import SearchIndex

LOGGER = logging.getLogger(__name__)

PER_KEYWORD_TOP_K = 3
TOPIC_RESULT_LIMIT = 10

TOPIC_CATEGORIES: tuple[TopicCategory, ...] = (
    TopicCategory(
        name="Microgravity Effects",
        description="Research on how zero gravity affects biological systems",
        keywords=("microgravity", "zero gravity", "space environment", "biological effects", "cellular changes"),
    ),
    TopicCategory(
        name="Muscle & Bone Loss",
        description="Studies on muscle atrophy and bone density in space",
        keywords=("muscle atrophy", "bone loss", "osteoporosis", "muscle degeneration", "skeletal system"),
    ),
    TopicCategory(
        name="Cardiovascular Health",
        description="Heart and circulatory system changes in space",
        keywords=("cardiovascular", "heart function", "blood pressure", "circulation", "cardiac"),
    ),
    TopicCategory(
        name="Immune System",
        description="How space affects immune function and disease resistance",
        keywords=("immune system", "immunity", "disease resistance", "white blood cells", "inflammation"),
    ),
    TopicCategory(
        name="Radiation Effects",
        description="Impact of cosmic radiation on biological systems",
        keywords=("radiation", "cosmic rays", "DNA damage", "cellular radiation", "space radiation"),
    ),
    TopicCategory(
        name="Sleep & Circadian",
        description="Sleep patterns and biological rhythms in space",
        keywords=("sleep", "circadian rhythm", "biological clock", "melatonin", "sleep disorders"),
    ),
    TopicCategory(
        name="Nutrition & Metabolism",
        description="Food, nutrition, and metabolic changes in space",
        keywords=("nutrition", "metabolism", "food", "vitamins", "diet", "metabolic changes"),
    ),
    TopicCategory(
        name="Vision & Eye Health",
        description="Visual changes and eye health in space",
        keywords=("vision", "eye health", "visual changes", "intracranial pressure", "optic nerve"),
    ),
)


def find_topic(name: str) -> TopicCategory | None:
    """Case-insensitive lookup by topic name."""
    wanted = name.strip().lower()
    for topic in TOPIC_CATEGORIES:
        if topic.name.lower() == wanted:
            return topic
    return None


def search_topic(
    index: SearchIndex,
    topic: TopicCategory,
    per_keyword_k: int = PER_KEYWORD_TOP_K,
    limit: int = TOPIC_RESULT_LIMIT,
) -> list[SearchResult]:
    """Merge per-keyword searches into one ranked, link-deduplicated list.

    Only the public ``SearchIndex.search`` is used; ranking stays in the
    scoring engine. The first occurrence of each link wins.
    """
    if not index.is_ready():
        return []

    results_by_link: dict[str, SearchResult] = {}
    for keyword in topic.keywords:
        for result in index.search(keyword, per_keyword_k):
            results_by_link.setdefault(result.link, result)

    merged = sorted(results_by_link.values(), key=lambda r: r.similarity_score, reverse=True)

    LOGGER.info(
        "Topic search: topic=%r keywords=%s unique=%s returned=%s",
        topic.name,
        len(topic.keywords),
        len(merged),
        min(len(merged), limit),
    )
    return merged[:limit]
