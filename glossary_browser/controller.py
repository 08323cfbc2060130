"""
View state controller.

Design:
- Owns the single ViewState and is its only writer.
- Each intent method updates the smallest slice of state it needs, keeps `page`
  inside [1, total_pages], logs the transition and calls on_change().
- Read models (PageView, RandomTermView) are recomputed from state on every call;
  the only cached value is filtered_count, refreshed whenever filter_text changes.
 - Methods:
    set_filter_text(q), set_sort(field), go_first(), go_prev(), go_next(), go_last(),
    draw_random(), reveal_definition()
    current_page_view(), random_term_view(), state, total_pages
- Thread-safety: Not locked; call from the UI thread only.
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from .config import PAGE_SIZE
from .models import PageView, RandomTermView, SortField, Term, ViewState
from .picker import RandomPicker
from .query import filter_terms, paginate, sort_terms, total_pages
from .repository import TermStore

logger = logging.getLogger(__name__)


class ViewController:
    def __init__(
        self,
        store: TermStore,
        *,
        page_size: int = PAGE_SIZE,
        picker: Optional[RandomPicker] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.store = store
        self.picker = picker if picker is not None else RandomPicker()
        self.on_change = on_change
        self._state = ViewState(page_size=page_size, filtered_count=len(store))

    # ---------- reads ----------

    @property
    def state(self) -> ViewState:
        """Copy of the current state; mutating it does not affect the controller."""
        return replace(self._state)

    @property
    def total_pages(self) -> int:
        return total_pages(self._state.filtered_count, self._state.page_size)

    def current_page_view(self) -> PageView:
        s = self._state
        matching = filter_terms(s.filter_text, self.store.snapshot())
        ordered = sort_terms(matching, s.sort_field, s.sort_direction)
        return PageView(
            terms=paginate(ordered, s.page, s.page_size),
            page=s.page,
            total_pages=self.total_pages,
            filtered_count=s.filtered_count,
            sort_field=s.sort_field,
            sort_direction=s.sort_direction,
        )

    def random_term_view(self) -> RandomTermView:
        return RandomTermView(term=self._state.selected_random, revealed=self._state.definition_revealed)

    # ---------- intents ----------

    def set_filter_text(self, text: str) -> None:
        s = self._state
        s.filter_text = text
        s.filtered_count = len(filter_terms(text, self.store.snapshot()))
        s.page = 1
        logger.debug("Filter %r matches %d terms", text, s.filtered_count)
        self._changed()

    def set_sort(self, field: SortField) -> None:
        """Clicking the active column flips direction; another column keeps the direction."""
        s = self._state
        if field is s.sort_field:
            s.sort_direction = s.sort_direction.toggled()
        else:
            s.sort_field = field
        s.page = 1
        logger.debug("Sort by %s %s", s.sort_field.value, s.sort_direction.value)
        self._changed()

    def go_first(self) -> None:
        self._go_to(1)

    def go_prev(self) -> None:
        self._go_to(max(1, self._state.page - 1))

    def go_next(self) -> None:
        self._go_to(min(self.total_pages, self._state.page + 1))

    def go_last(self) -> None:
        self._go_to(self.total_pages)

    def draw_random(self) -> Term:
        s = self._state
        s.selected_random = self.picker.pick(self.store.snapshot())
        s.definition_revealed = False
        logger.info("Drew random term %r", s.selected_random.name)
        self._changed()
        return s.selected_random

    def reveal_definition(self) -> None:
        self._state.definition_revealed = True
        logger.debug("Definition revealed")
        self._changed()

    # ---------- internal ----------

    def _go_to(self, page: int) -> None:
        self._state.page = page
        logger.debug("Page %d of %d", page, self.total_pages)
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
