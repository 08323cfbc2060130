"""
Design (repository.py)
- Purpose: Hold the glossary terms behind a tiny read-only API, so the controller and UI
           never touch the seed list directly.
- Inputs: Term objects (or (name, description) pairs) once, at construction.
- Outputs: The ordered collection as a tuple; lookups by name.
- Side effects: None after construction.
- Thread-safety: The collection is an immutable tuple; no lock is needed.
"""

import logging
from typing import Iterable, Iterator, Tuple

from .models import Term

logger = logging.getLogger(__name__)


class TermStore:
    """
    Design (TermStore)
    - State:
        _terms: tuple of Term in insertion order (the base order when no sort applies).
                Duplicate names are kept as separate entries.
    """

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._terms: Tuple[Term, ...] = tuple(terms)
        logger.debug("TermStore loaded with %d terms", len(self._terms))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "TermStore":
        """
        Purpose: Build a store from (name, description) pairs, e.g. the hardcoded seed list.
        Inputs: pairs (iterable of 2-tuples of str)
        Outputs: TermStore
        """
        return cls(Term(name=name, description=description) for name, description in pairs)

    def snapshot(self) -> Tuple[Term, ...]:
        """Return the full collection; the tuple itself is immutable, so no copy is made."""
        return self._terms

    def find(self, name: str) -> Tuple[Term, ...]:
        """Return every term whose name equals `name` exactly (duplicates included)."""
        return tuple(t for t in self._terms if t.name == name)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)
