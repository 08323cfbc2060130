"""Tests for filtering, sorting and pagination."""

import pytest

from glossary_browser.models import SortDirection, SortField, Term
from glossary_browser.query import filter_terms, paginate, sort_terms, total_pages

from conftest import make_terms


class TestFilterTerms:
    """Case-insensitive substring filter on the name column."""

    def test_empty_query_returns_everything_in_order(self, small_terms):
        """An empty query matches all terms."""
        assert filter_terms("", small_terms) == tuple(small_terms)

    def test_case_insensitive_match(self, small_terms):
        """Query and names are both lower-cased before matching."""
        result = filter_terms("APPLE", small_terms)
        assert [t.name for t in result] == ["Apple", "apple", "Pineapple"]

    def test_result_is_ordered_subsequence(self, small_terms):
        """Matches keep their relative order from the input."""
        result = filter_terms("an", small_terms)
        assert [t.name for t in result] == ["banana"]
        positions = [small_terms.index(t) for t in filter_terms("e", small_terms)]
        assert positions == sorted(positions)

    def test_description_is_not_searched(self, small_terms):
        """Only the name is searched."""
        assert filter_terms("fruit", small_terms) == ()

    def test_no_match(self, small_terms):
        assert filter_terms("zzz-no-match", small_terms) == ()

    def test_duplicates_preserved(self):
        """Terms with the same name are not deduplicated."""
        terms = [Term("Cache", "one"), Term("Cache", "two")]
        assert filter_terms("cache", terms) == tuple(terms)


class TestSortTerms:
    """Stable ascending sort; descending is the reverse of ascending."""

    def test_ascending_by_name_is_case_sensitive(self, small_terms):
        """Native str ordering puts upper-case before lower-case."""
        result = sort_terms(small_terms, SortField.NAME, SortDirection.ASCENDING)
        assert [t.name for t in result] == ["Apple", "Pineapple", "apple", "banana", "cherry"]

    def test_ascending_by_description(self, small_terms):
        result = sort_terms(small_terms, SortField.DESCRIPTION, SortDirection.ASCENDING)
        assert [t.description for t in result] == [
            "lowercase duplicate",
            "red fruit",
            "small red fruit",
            "tropical fruit",
            "yellow fruit",
        ]

    def test_ascending_is_stable_for_ties(self):
        """Equal keys keep insertion order."""
        terms = [Term("same", "first"), Term("other", "x"), Term("same", "second")]
        result = sort_terms(terms, SortField.NAME, SortDirection.ASCENDING)
        assert [t.description for t in result] == ["x", "first", "second"]

    def test_descending_reverses_ties_too(self):
        """Descending is reverse(ascending), not a stable reverse=True sort."""
        terms = [Term("same", "first"), Term("other", "x"), Term("same", "second")]
        result = sort_terms(terms, SortField.NAME, SortDirection.DESCENDING)
        assert [t.description for t in result] == ["second", "first", "x"]

    @pytest.mark.parametrize("field", [SortField.NAME, SortField.DESCRIPTION])
    def test_descending_equals_reversed_ascending(self, small_terms, field):
        asc = sort_terms(small_terms, field, SortDirection.ASCENDING)
        desc = sort_terms(small_terms, field, SortDirection.DESCENDING)
        assert desc == tuple(reversed(asc))

    def test_input_not_modified(self, small_terms):
        before = list(small_terms)
        sort_terms(small_terms, SortField.NAME, SortDirection.DESCENDING)
        assert small_terms == before


class TestTotalPages:
    """total_pages = 1 + count // page_size."""

    @pytest.mark.parametrize(
        "count,expected",
        [(0, 1), (1, 1), (14, 1), (15, 2), (16, 2), (29, 2), (30, 3), (100, 7)],
    )
    def test_values(self, count, expected):
        assert total_pages(count, 15) == expected


class TestPaginate:
    """Slicing one 1-based page."""

    def test_first_page(self):
        terms = make_terms(40)
        assert paginate(terms, 1, 15) == tuple(terms[:15])

    def test_short_collection(self):
        terms = make_terms(4)
        assert paginate(terms, 1, 15) == tuple(terms)

    def test_last_partial_page(self):
        terms = make_terms(100)
        page = paginate(terms, 7, 15)
        assert len(page) == 10
        assert page[0] == terms[90]

    def test_trailing_page_empty_at_exact_multiple(self):
        """With 30 terms the pager offers a third page, which is empty."""
        terms = make_terms(30)
        assert paginate(terms, total_pages(len(terms), 15), 15) == ()

    def test_page_past_end_is_empty(self):
        assert paginate(make_terms(5), 3, 15) == ()
