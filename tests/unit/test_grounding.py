"""Tests for citation collection."""

from __future__ import annotations

from link2ink.content.grounding import collect_citations


class TestCollectCitations:

    def test_deduplicates_by_uri_keeping_first_title(self):
        references = [
            {"uri": "https://a.example/1", "title": "First A"},
            {"uri": "https://b.example/2", "title": "B"},
            {"uri": "https://a.example/1", "title": "Second A"},
        ]

        citations = collect_citations(references)

        assert [(c.uri, c.title) for c in citations] == [
            ("https://a.example/1", "First A"),
            ("https://b.example/2", "B"),
        ]

    def test_missing_title_uses_fallback(self):
        citations = collect_citations([{"uri": "https://a.example", "title": None}], fallback_title="Kaynak")
        assert citations[0].title == "Kaynak"

    def test_records_without_uri_are_skipped(self):
        references = [{"uri": None, "title": "Orphan"}, {"uri": "  ", "title": "Blank"}, {"title": "No key"}]
        assert collect_citations(references) == []

    def test_empty_input(self):
        assert collect_citations([]) == []
