import pytest

from corpus_loader import parse_corpus
from models import PublicationRecord

HEADER = "Title,Link"


def test_parse_corpus_smoke() -> None:
    raw = "\n".join([
        HEADER,
        "Microgravity and Bone Density,https://www.ncbi.nlm.nih.gov/pmc/articles/PMC1/",
        "Plant Growth Studies,https://www.ncbi.nlm.nih.gov/pmc/articles/PMC2/",
    ])

    records, malformed = parse_corpus(raw)

    assert malformed == 0
    assert records == [
        PublicationRecord("Microgravity and Bone Density", "https://www.ncbi.nlm.nih.gov/pmc/articles/PMC1/"),
        PublicationRecord("Plant Growth Studies", "https://www.ncbi.nlm.nih.gov/pmc/articles/PMC2/"),
    ]


def test_parse_corpus_splits_at_last_comma_and_strips_quotes() -> None:
    raw = f'{HEADER}\n"A, B" Title,http://x/y"\n'

    records, malformed = parse_corpus(raw)

    assert malformed == 0
    assert len(records) == 1
    assert records[0].title == "A, B Title"
    assert records[0].link == "http://x/y"


def test_parse_corpus_header_is_discarded_even_if_it_looks_valid() -> None:
    raw = "First Paper,http://a\nSecond Paper,http://b"

    records, _ = parse_corpus(raw)

    assert [r.link for r in records] == ["http://b"]


def test_parse_corpus_counts_rows_without_delimiter() -> None:
    """N good rows plus M rows with no comma yields exactly N records."""
    good = [f"Paper {i},http://example.org/{i}" for i in range(4)]
    bad = ["no delimiter here", "another broken row", "still broken"]
    raw = "\n".join([HEADER, *good[:2], *bad, *good[2:]])

    records, malformed = parse_corpus(raw)

    assert len(records) == 4
    assert malformed == 3
    assert [r.title for r in records] == ["Paper 0", "Paper 1", "Paper 2", "Paper 3"]


@pytest.mark.parametrize("row", [
    "Title only,",
    ",http://example.org/only-link",
    '"",""',
    '  "  " , http://example.org/blank-title',
])
def test_parse_corpus_drops_rows_with_empty_parts(row: str) -> None:
    records, malformed = parse_corpus(f"{HEADER}\n{row}")

    assert records == []
    assert malformed == 1


def test_parse_corpus_skips_blank_lines_without_counting() -> None:
    raw = f"{HEADER}\n\n   \nPaper,http://a\n\n"

    records, malformed = parse_corpus(raw)

    assert len(records) == 1
    assert malformed == 0


def test_parse_corpus_handles_crlf_line_endings() -> None:
    raw = f"{HEADER}\r\nPaper One,http://a\r\nPaper Two,http://b\r\n"

    records, _ = parse_corpus(raw)

    assert [r.link for r in records] == ["http://a", "http://b"]


@pytest.mark.parametrize("raw", ["", HEADER, f"{HEADER}\n"])
def test_parse_corpus_empty_input_yields_no_records(raw: str) -> None:
    assert parse_corpus(raw) == ([], 0)
