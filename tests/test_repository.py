"""Tests for TermStore and the seed glossary."""

from glossary_browser.models import Term
from glossary_browser.repository import TermStore
from glossary_browser.terms_data import TERMS, load_terms


class TestTermStore:
    def test_from_pairs_keeps_order(self):
        store = TermStore.from_pairs([("b", "2"), ("a", "1")])
        assert store.snapshot() == (Term("b", "2"), Term("a", "1"))
        assert len(store) == 2

    def test_duplicates_kept(self):
        store = TermStore.from_pairs([("Cache", "one"), ("Cache", "two")])
        assert len(store) == 2
        assert store.find("Cache") == (Term("Cache", "one"), Term("Cache", "two"))

    def test_source_list_changes_do_not_leak(self):
        """The store copies its input once; later edits to the list are not seen."""
        terms = [Term("a", "1")]
        store = TermStore(terms)
        terms.append(Term("b", "2"))
        assert len(store) == 1

    def test_iter(self):
        store = TermStore.from_pairs([("a", "1"), ("b", "2")])
        assert [t.name for t in store] == ["a", "b"]

    def test_empty(self):
        assert TermStore().snapshot() == ()


class TestSeedData:
    def test_load_terms_matches_seed_list(self):
        store = load_terms()
        assert len(store) == len(TERMS)
        assert store.snapshot()[0] == Term(*TERMS[0])

    def test_seed_entries_are_non_empty_pairs(self):
        for name, description in TERMS:
            assert name.strip()
            assert description.strip()

    def test_seed_spans_several_pages(self):
        assert len(TERMS) > 15
