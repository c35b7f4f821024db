"""CLI entrypoint for searching the NASA space-biology publication corpus."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from models import SearchResult
from publication_feed import DEFAULT_ARTICLES_BASE, DEFAULT_CORPUS_SOURCE, scraped_article_ids
from search_index import build_search_index
from topics import TOPIC_CATEGORIES, find_topic, search_topic


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Search NASA space-biology publications")
    parser.add_argument("query", nargs="?", default=None, help="Free-text search query")
    parser.add_argument(
        "--top-k",
        type=int,
        default=int(os.getenv("SEARCH_TOP_K", "5")),
        help="Number of results to return for a query search (default: SEARCH_TOP_K or 5)",
    )
    parser.add_argument("--topic", default=None, help="Browse a research topic by name instead of a query")
    parser.add_argument("--list-topics", action="store_true", help="List the research topics and exit")
    parser.add_argument(
        "--corpus",
        default=os.getenv("NASA_CORPUS_SOURCE", DEFAULT_CORPUS_SOURCE),
        help="Publication list: file path or URL (default: NASA_CORPUS_SOURCE)",
    )
    parser.add_argument(
        "--articles-base",
        default=os.getenv("SCRAPED_ARTICLES_BASE", DEFAULT_ARTICLES_BASE),
        help="Directory or base URL holding <PMC id>.json scraped articles (default: SCRAPED_ARTICLES_BASE)",
    )
    return parser.parse_args(argv)


def format_result(rank: int, result: SearchResult) -> str:
    preview = result.content_preview.replace("\n", " ")
    return (
        f"{rank}. [{result.similarity_score:.2f}] {result.title}\n"
        f"   {result.link}\n"
        f"   {preview}"
    )


def run(args: argparse.Namespace) -> int:
    """Build the index and run one query or topic search. Returns an exit code."""
    if args.list_topics:
        for topic in TOPIC_CATEGORIES:
            print(f"{topic.name}: {topic.description} ({', '.join(topic.keywords)})")
        return 0

    if not args.query and not args.topic:
        logging.error("Provide a query or --topic NAME (see --list-topics)")
        return 2

    index = build_search_index(args.corpus, args.articles_base, scraped_article_ids())
    if not index.is_ready():
        logging.error("Search index unavailable; corpus could not be loaded from %s", args.corpus)
        return 1

    if index.content_outcome.failed_ids:
        logging.warning("Scraped articles not loaded: %s", ", ".join(index.content_outcome.failed_ids))

    if args.topic:
        topic = find_topic(args.topic)
        if topic is None:
            logging.error("Unknown topic %r (see --list-topics)", args.topic)
            return 1
        results = search_topic(index, topic)
    else:
        results = index.search(args.query, args.top_k)

    if not results:
        print("No matching publications.")
        return 0

    for rank, result in enumerate(results, start=1):
        print(format_result(rank, result))
    return 0


def main() -> None:
    """Initialize config and run the search."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    sys.exit(run(parse_args()))


if __name__ == "__main__":
    main()
