from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from src.formatting.models import WORKSHOP_CODES_GREEN, CodePost, WikiArticle, parse_timestamp
from src.formatting.search_results import (
    CODES_EMPTY_MESSAGE,
    CODES_FOUND_MESSAGE,
    FOOTER_ICON_URL,
    FOOTER_TEXT,
    WIKI_EMPTY_MESSAGE,
    WIKI_FOUND_MESSAGE,
    ShapeError,
    format_codes,
    format_wiki,
    truncate,
)

CREATED_AT = "2022-07-01T12:00:00.000Z"
REVISED_AT = "2022-08-15T08:30:00.000Z"


def _post(index: int, categories: list[str] | None = None) -> dict[str, Any]:
    return {
        "title": f"Post {index}",
        "code": f"CODE{index}",
        "thumbnail": f"https://img.example/{index}.png",
        "categories": categories if categories is not None else ["Miscellaneous"],
        "created_at": CREATED_AT,
        "last_revision_created_at": REVISED_AT,
        "user": {"username": f"author{index}"},
    }


def _article(content: str = "Some content") -> dict[str, Any]:
    return {
        "title": "Arrays",
        "slug": "arrays",
        "content": content,
        "category": {"title": "Tutorials"},
        "updated_at": REVISED_AT,
    }


def _epoch(value: str) -> int:
    return int(parse_timestamp(value).timestamp())


class TestParsing:
    def test_parse_timestamp_handles_z_suffix(self) -> None:
        assert parse_timestamp(CREATED_AT) == datetime(2022, 7, 1, 12, 0, tzinfo=timezone.utc)

    def test_code_post_from_json(self) -> None:
        post = CodePost.from_json(_post(1, ["Parkour", "Tools"]))

        assert post.username == "author1"
        assert post.categories == ("Parkour", "Tools")
        assert post.last_revision_created_at.month == 8

    def test_wiki_article_from_json(self) -> None:
        article = WikiArticle.from_json(_article())

        assert article.category_title == "Tutorials"
        assert article.slug == "arrays"


class TestFormatCodes:
    def test_keeps_first_three_in_order(self) -> None:
        reply = format_codes([_post(i) for i in range(5)])

        assert reply.found
        assert reply.content == CODES_FOUND_MESSAGE
        assert [record.title for record in reply.records] == [
            "Post 0 by author0",
            "Post 1 by author1",
            "Post 2 by author2",
        ]

    def test_keeps_short_lists_whole(self) -> None:
        reply = format_codes([_post(1), _post(2)])

        assert len(reply.records) == 2

    def test_empty_list_is_no_results_reply(self) -> None:
        reply = format_codes([])

        assert not reply.found
        assert reply.content == CODES_EMPTY_MESSAGE
        assert reply.records == ()

    @pytest.mark.parametrize("payload", [{"error": "nope"}, "<html></html>", None, 42])
    def test_non_list_raises_shape_error(self, payload: Any) -> None:
        with pytest.raises(ShapeError) as exc_info:
            format_codes(payload)

        assert exc_info.value.tag == "Wombat"
        assert "Expected array from Workshop.codes" in exc_info.value.message

    def test_record_contents(self) -> None:
        record = format_codes([_post(7)]).records[0]

        assert record.url == "https://workshop.codes/CODE7"
        assert record.thumbnail_url == "https://img.example/7.png"
        assert record.description == "Code: **CODE7**"
        assert record.footer_text == FOOTER_TEXT
        assert record.footer_icon_url == FOOTER_ICON_URL
        assert record.color == WORKSHOP_CODES_GREEN

        names = [field.name for field in record.fields]
        assert names == ["Category", "Created", "Last updated"]
        assert all(field.inline for field in record.fields)
        assert record.fields[1].value == f"<t:{_epoch(CREATED_AT)}:D>"
        assert record.fields[2].value == f"<t:{_epoch(REVISED_AT)}:R>"

    def test_multiple_categories_use_plural_label(self) -> None:
        record = format_codes([_post(1, ["Parkour", "Tools", "Fun"])]).records[0]

        assert record.fields[0].name == "Categories"
        assert record.fields[0].value == "Parkour | Tools | Fun"

    def test_single_category_uses_singular_label(self) -> None:
        record = format_codes([_post(1, ["Parkour"])]).records[0]

        assert record.fields[0].name == "Category"
        assert record.fields[0].value == "Parkour"


class TestFormatWiki:
    def test_keeps_only_best_match(self) -> None:
        second = _article()
        second["title"] = "Other"
        reply = format_wiki([_article(), second])

        assert reply.content == WIKI_FOUND_MESSAGE
        assert len(reply.records) == 1
        assert reply.records[0].title == "Arrays"

    def test_empty_list_is_no_results_reply(self) -> None:
        reply = format_wiki([])

        assert not reply.found
        assert reply.content == WIKI_EMPTY_MESSAGE

    def test_object_raises_shape_error(self) -> None:
        with pytest.raises(ShapeError):
            format_wiki({"title": "Arrays"})

    def test_long_content_is_truncated_with_ellipsis(self) -> None:
        content = "a" * 1500
        record = format_wiki([_article(content)]).records[0]

        assert record.description == "a" * 1000 + "..."
        assert len(record.description) == 1003

    def test_short_content_is_left_alone(self) -> None:
        content = "b" * 500
        record = format_wiki([_article(content)]).records[0]

        assert record.description == content

    def test_record_contents(self) -> None:
        record = format_wiki([_article()]).records[0]

        assert record.url == "https://workshop.codes/wiki/articles/arrays"
        assert record.thumbnail_url is None
        assert [(f.name, f.inline) for f in record.fields] == [("Category", True), ("Last updated", True)]
        assert record.fields[0].value == "Tutorials"
        assert record.fields[1].value == f"<t:{_epoch(REVISED_AT)}:R>"
        assert record.footer_text == FOOTER_TEXT


def test_truncate_exact_length_has_no_ellipsis() -> None:
    assert truncate("x" * 1000, 1000) == "x" * 1000
