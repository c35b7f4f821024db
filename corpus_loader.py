"""Parse the two-column (title, link) publication list into records."""

from __future__ import annotations

import logging

from models import PublicationRecord

LOGGER = logging.getLogger(__name__)

DELIMITER = ","
QUOTE_CHAR = '"'


def parse_corpus(raw_text: str) -> tuple[list[PublicationRecord], int]:
    """Parse raw corpus text into publication records.

    The first line is a header. Every other non-blank line is split at its
    last comma, so titles may contain commas of their own. Quotes are removed
    from both halves before trimming.

    Returns:
        (records, malformed_count). Malformed rows are dropped and counted,
        never raised.
    """
    records: list[PublicationRecord] = []
    malformed = 0

    for line in raw_text.splitlines()[1:]:
        line = line.strip()
        if not line:
            continue

        record = _parse_row(line)
        if record is None:
            malformed += 1
            continue
        records.append(record)

    LOGGER.info("Corpus parse: loaded=%s malformed=%s", len(records), malformed)
    return records, malformed


def _parse_row(line: str) -> PublicationRecord | None:
    split_at = line.rfind(DELIMITER)
    if split_at <= 0:
        return None

    title = _clean(line[:split_at])
    link = _clean(line[split_at + 1:])
    if not title or not link:
        return None
    return PublicationRecord(title=title, link=link)


def _clean(value: str) -> str:
    return value.replace(QUOTE_CHAR, "").strip()
