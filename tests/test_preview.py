from preview import ELLIPSIS, content_preview


def test_long_content_truncated_to_500_with_ellipsis() -> None:
    preview = content_preview("Title", "x" * 600)

    assert len(preview) == 500
    assert preview.endswith(ELLIPSIS)
    assert preview[:499] == "x" * 499


def test_content_at_limit_is_not_truncated() -> None:
    content = "y" * 500
    assert content_preview("Title", content) == content


def test_short_title_returned_unmodified_without_content() -> None:
    title = "t" * 50
    assert content_preview(title, None) == title


def test_long_title_truncated_to_200_with_ellipsis() -> None:
    preview = content_preview("z" * 250, None)

    assert len(preview) == 200
    assert preview.endswith(ELLIPSIS)


def test_empty_content_falls_back_to_title() -> None:
    assert content_preview("Plant Growth Studies", "") == "Plant Growth Studies"


def test_content_preferred_over_title() -> None:
    assert content_preview("Plant Growth Studies", "Abstract text.") == "Abstract text."
