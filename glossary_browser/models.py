"""
Design (models.py)
- Purpose: Define simple, typed data structures for the browser (Term, ViewState, read models).
- Inputs: Field values (str, int, enums).
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Term and read models are frozen; ViewState is owned by ViewController only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import PAGE_SIZE, SENTINEL_TEXT


class SortField(Enum):
    NAME = "name"
    DESCRIPTION = "description"


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class Term:
    """
    Design (Term)
    - Purpose: One glossary entry shown as a table row.
    - Fields:
        name: Term as displayed in the Name column; the only field searched by the filter.
        description: Definition text; hidden in the random panel until revealed.
    - Equality is structural; duplicates by name are distinct entries in a collection.
    """
    name: str
    description: str


# Returned by the random picker when there is nothing to draw from.
SENTINEL_TERM = Term(name=SENTINEL_TEXT, description=SENTINEL_TEXT)


@dataclass
class ViewState:
    """
    Design (ViewState)
    - Purpose: The mutable slice of state driving what the window shows.
    - Fields:
        filter_text: raw user input; "" matches everything.
        sort_field / sort_direction: active table ordering.
        page: 1-based page number, always within [1, total_pages].
        page_size: fixed rows per page.
        filtered_count: cached len(filter_terms(filter_text, store)).
        selected_random: last drawn term (None before any draw).
        definition_revealed: reset to False on every draw.
    """
    filter_text: str = ""
    sort_field: SortField = SortField.NAME
    sort_direction: SortDirection = SortDirection.ASCENDING
    page: int = 1
    page_size: int = PAGE_SIZE
    filtered_count: int = 0
    selected_random: Term | None = None
    definition_revealed: bool = False


@dataclass(frozen=True)
class PageView:
    """Rows for the active page plus what the headers and pager need to render."""
    terms: Tuple[Term, ...]
    page: int
    total_pages: int
    filtered_count: int
    sort_field: SortField
    sort_direction: SortDirection


@dataclass(frozen=True)
class RandomTermView:
    term: Term | None
    revealed: bool
