from datetime import datetime, timezone

import pytest

from fx_monitor.models import RawArticle
from fx_monitor.processors.normalize import (
    UNTITLED,
    batch_normalize,
    clean_html_to_text,
    normalize_plain_text,
    parse_date_to_iso,
    transform_article,
)


class TestTextCleaning:
    def test_clean_html_strips_tags_and_entities(self):
        assert clean_html_to_text("<p>Dollar &amp; yen <b>rally</b></p>") == "Dollar & yen rally"

    def test_clean_html_handles_empty(self):
        assert clean_html_to_text(None) == ""
        assert clean_html_to_text("") == ""

    def test_normalize_plain_text_replaces_typographic_punctuation(self):
        text = "\ufeff\u201cECB\u201d \u2013 Lagarde\u2019s remarks\x07"
        assert normalize_plain_text(text) == "\"ECB\" - Lagarde's remarks"


class TestDateParsing:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-01-15T10:30:00Z", "2024-01-15T10:30:00+00:00"),
            ("2024-01-15T10:30:00+02:00", "2024-01-15T10:30:00+02:00"),
            ("Mon, 15 Jan 2024 10:30:00 GMT", "2024-01-15T10:30:00+00:00"),
            ("15.01.2024", "2024-01-15T00:00:00+00:00"),
        ],
    )
    def test_supported_formats(self, value, expected):
        assert parse_date_to_iso(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date"])
    def test_unparseable_values_become_none(self, value):
        assert parse_date_to_iso(value) is None

    def test_datetime_input(self):
        assert parse_date_to_iso(datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc)) == "2024-01-15T08:00:00+00:00"


class TestTransformArticle:
    def test_full_item(self, source):
        raw = RawArticle(
            title="  <b>Yen</b> slides  ",
            link=" https://example.com/yen ",
            pub_date="Mon, 15 Jan 2024 10:30:00 GMT",
            iso_date="2024-01-15T09:00:00Z",
            content="<p>The yen fell.</p>",
            content_snippet="snippet",
        )
        article = transform_article(source, raw)

        assert article.title == "Yen slides"
        assert article.link == "https://example.com/yen"
        assert article.source_name == "FXStreet"
        assert article.published_at == "2024-01-15T09:00:00+00:00"
        assert article.content == "The yen fell."

    def test_pub_date_used_when_iso_date_missing(self, source):
        article = transform_article(source, RawArticle(title="t", link="l", pub_date="Mon, 15 Jan 2024 10:30:00 GMT"))
        assert article.published_at == "2024-01-15T10:30:00+00:00"

    def test_missing_fields_get_safe_defaults(self, source):
        article = transform_article(source, RawArticle())

        assert article.title == UNTITLED
        assert article.link.startswith(source.url + "#")
        assert article.published_at is None
        assert article.content == ""

    def test_fallback_link_is_stable(self, source):
        first = transform_article(source, RawArticle(title="Same title"))
        second = transform_article(source, RawArticle(title="Same title"))
        other = transform_article(source, RawArticle(title="Other title"))

        assert first.link == second.link
        assert first.link != other.link

    def test_snippet_used_when_content_missing(self, source):
        article = transform_article(source, RawArticle(title="t", link="l", content_snippet="Short &amp; sweet"))
        assert article.content == "Short & sweet"

    def test_article_is_immutable(self, source):
        article = transform_article(source, RawArticle(title="t", link="l"))
        with pytest.raises(AttributeError):
            article.title = "changed"  # type: ignore[misc]


class TestBatchNormalize:
    def test_bad_items_are_skipped(self, source):
        items = [RawArticle(title="good", link="https://example.com/1"), object()]
        result = batch_normalize(source, items)  # type: ignore[list-item]

        assert [a.title for a in result] == ["good"]
