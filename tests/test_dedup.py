"""Tests for title dedup, recency ranking and bounding."""

from __future__ import annotations

from trendfeed.process.dedup import DedupProcessor, merge


def test_duplicate_titles_first_seen_wins(article_factory):
    first = article_factory("Same Title", days_old=5, source="DevTo", article_id="devto-1")
    later = article_factory("Same Title", days_old=0, source="HackerNews", article_id="hn-2")
    other = article_factory("Other Title", days_old=1)

    result = merge([first, later, other])

    assert [a.id for a in result if a.title == "Same Title"] == ["devto-1"]
    assert len(result) == 2


def test_title_match_is_case_sensitive(article_factory):
    result = merge([
        article_factory("Resume Tips", days_old=1),
        article_factory("resume tips", days_old=2),
    ])
    assert len(result) == 2


def test_sorted_newest_first(article_factory):
    result = merge([
        article_factory("Old", days_old=10),
        article_factory("Newest", days_old=0),
        article_factory("Middle", days_old=3),
    ])

    assert [a.title for a in result] == ["Newest", "Middle", "Old"]
    for earlier, later in zip(result, result[1:]):
        assert earlier.publish_date >= later.publish_date


def test_equal_dates_keep_input_order(article_factory):
    result = merge([
        article_factory("A", days_old=1),
        article_factory("B", days_old=1),
        article_factory("C", days_old=1),
    ])
    assert [a.title for a in result] == ["A", "B", "C"]


def test_bounded_to_twenty_dropping_oldest(article_factory):
    candidates = [article_factory(f"Article {i}", days_old=i) for i in range(35)]

    result = merge(candidates)

    assert len(result) == 20
    assert result[-1].title == "Article 19"


def test_empty_candidates():
    assert merge([]) == []


def test_processor_uses_configured_limit(article_factory):
    config = {"pipeline": {"max_articles": 3}}
    candidates = [article_factory(f"Article {i}", days_old=i) for i in range(6)]

    result = DedupProcessor(config).process(candidates)

    assert [a.title for a in result] == ["Article 0", "Article 1", "Article 2"]
