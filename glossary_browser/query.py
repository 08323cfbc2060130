"""
Design (query.py)
- Purpose: Pure functions that turn the term collection into the rows currently shown:
           filter by name, sort by column, slice one page.
- Inputs: A sequence of Term plus the relevant ViewState values.
- Outputs: New tuples; the input is never modified.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from operator import attrgetter
from typing import Sequence, Tuple

from .models import SortDirection, SortField, Term


def filter_terms(query: str, terms: Sequence[Term]) -> Tuple[Term, ...]:
    """
    Purpose: Keep the terms whose name contains `query`, case-insensitively.
    Inputs: query (raw user text; "" keeps everything), terms.
    Outputs: Matching terms in their original relative order.
    Notes: Only the name is searched, never the description.
    """
    if not query:
        return tuple(terms)
    needle = query.lower()
    return tuple(t for t in terms if needle in t.name.lower())


def sort_terms(terms: Sequence[Term], field: SortField, direction: SortDirection) -> Tuple[Term, ...]:
    """
    Purpose: Order terms by one column.
    Inputs: terms, field (NAME or DESCRIPTION), direction.
    Outputs: Sorted tuple.
    Notes: Ascending is a stable, case-sensitive str sort. Descending is the exact reverse
           of the ascending result, so tied terms also come out reversed
           (sorted(reverse=True) would keep ties in original order).
    """
    ascending = sorted(terms, key=attrgetter(field.value))
    if direction is SortDirection.DESCENDING:
        ascending.reverse()
    return tuple(ascending)


def total_pages(filtered_count: int, page_size: int) -> int:
    """
    Number of pages the pager offers for `filtered_count` rows.

    Computed as 1 + filtered_count // page_size, so an exact multiple of page_size
    gets one extra (empty) trailing page: 15 rows at 15 per page -> 2 pages.
    """
    return 1 + filtered_count // page_size


def paginate(terms: Sequence[Term], page: int, page_size: int) -> Tuple[Term, ...]:
    """
    Purpose: Slice out one 1-based page.
    Inputs: terms, page (>= 1, not range-checked here), page_size (> 0).
    Outputs: Up to page_size terms; empty when the page starts past the end.
    """
    start = (page - 1) * page_size
    return tuple(terms[start:start + page_size])
