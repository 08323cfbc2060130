"""Shared fixtures for glossary browser tests."""

import pytest

from glossary_browser.models import Term
from glossary_browser.repository import TermStore


def make_terms(count: int) -> list[Term]:
    """Terms named 'term-000' .. in insertion order, descriptions reversed so columns disagree."""
    return [Term(name=f"term-{i:03d}", description=f"desc-{count - i:03d}") for i in range(count)]


@pytest.fixture
def hundred_store() -> TermStore:
    return TermStore(make_terms(100))


@pytest.fixture
def small_terms() -> list[Term]:
    return [
        Term("banana", "yellow fruit"),
        Term("Apple", "red fruit"),
        Term("cherry", "small red fruit"),
        Term("apple", "lowercase duplicate"),
        Term("Pineapple", "tropical fruit"),
    ]
