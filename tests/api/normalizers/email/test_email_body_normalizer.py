"""Testes do normalizer de corpo de email."""

from __future__ import annotations

from api.normalizers.email import (
    TRUNCATION_MARKER,
    build_snippet,
    extract_body_text,
    normalize_body,
    strip_markup,
)


class TestStripMarkup:
    def test_removes_tags_and_keeps_entities(self) -> None:
        assert strip_markup("<p>Hi &amp; <b>bye</b></p>") == "Hi &amp; bye"

    def test_removes_unclosed_trailing_tag(self) -> None:
        assert strip_markup("text <br") == "text "

    def test_tag_with_attributes(self) -> None:
        assert strip_markup('<a href="https://x.y">link</a>') == "link"


class TestExtractBodyText:
    def test_prefers_plain_text(self) -> None:
        assert extract_body_text("  plain  ", "<p>html</p>") == "plain"

    def test_falls_back_to_markup_without_tags(self) -> None:
        assert extract_body_text(None, "<div> <b>Hi</b> there </div>") == "Hi there"

    def test_empty_plain_uses_markup(self) -> None:
        assert extract_body_text("", "<p>html</p>") == "html"

    def test_no_body_returns_empty(self) -> None:
        assert extract_body_text(None, None) == ""


class TestBuildSnippet:
    def test_short_text_is_unchanged(self) -> None:
        assert build_snippet("Hello world", 500) == "Hello world"

    def test_text_at_bound_is_not_truncated(self) -> None:
        text = "x" * 500
        assert build_snippet(text, 500) == text

    def test_long_text_is_cut_with_marker(self) -> None:
        text = "a" * 600
        snippet = build_snippet(text, 500)
        assert snippet == "a" * 500 + TRUNCATION_MARKER
        assert snippet.endswith("...\n[Message Truncated]")


class TestNormalizeBody:
    def test_full_text_is_not_truncated(self) -> None:
        body = normalize_body("b" * 800, None, max_snippet_chars=100)
        assert len(body.full_text) == 800
        assert body.snippet == "b" * 100 + TRUNCATION_MARKER

    def test_markup_is_not_html_escaped(self) -> None:
        body = normalize_body(None, "<p>Tom &amp; Jerry</p>")
        assert body.full_text == "Tom &amp; Jerry"
        assert body.snippet == "Tom &amp; Jerry"

    def test_empty_body(self) -> None:
        body = normalize_body(None, None)
        assert body.full_text == ""
        assert body.snippet == ""
