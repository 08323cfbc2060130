"""
Design (utils.py)
- Purpose: Reusable presentation helpers: header sort indicators, pager label, description
           preview, the random panel's definition text, and the desktop notification wrapper.
- Inputs: Read models (PageView, RandomTermView) and plain strings.
- Outputs: Display strings; notify_term returns whether a notification was shown.
- Side effects: notify_term shows an OS notification through plyer.
- Thread-safety: Stateless; safe to call from any thread.
"""

import logging

from plyer import notification

from .config import HIDDEN_DEFINITION_TEXT, NOTIFICATION_TIMEOUT_SEC, NOTIFICATION_TITLE
from .models import PageView, RandomTermView, SortDirection, SortField, Term

logger = logging.getLogger(__name__)

ARROW_UP = "▲"
ARROW_DOWN = "▼"


def heading_text(label: str, field: SortField, view: PageView) -> str:
    """
    Purpose: Header text for one table column, with an arrow on the active sort column.
    Inputs: label ("Name"), field the column sorts by, current PageView.
    Outputs: "Name ▲" / "Name ▼" when active, else the bare label.
    """
    if view.sort_field is not field:
        return label
    arrow = ARROW_UP if view.sort_direction is SortDirection.ASCENDING else ARROW_DOWN
    return f"{label} {arrow}"


def page_label(view: PageView) -> str:
    noun = "term" if view.filtered_count == 1 else "terms"
    return f"Page {view.page} of {view.total_pages} ({view.filtered_count} {noun})"


def preview(text: str, limit: int) -> str:
    """Truncate `text` to at most `limit` characters, ending in an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 1)].rstrip() + "…"


def definition_text(view: RandomTermView) -> str:
    """
    Purpose: Text for the definition line of the random panel.
    Outputs: "" before any draw; the placeholder while hidden; the description once revealed.
    """
    if view.term is None:
        return ""
    if not view.revealed:
        return HIDDEN_DEFINITION_TEXT
    return view.term.description


def notify_term(term: Term) -> bool:
    """
    Purpose: Show an OS notification naming the drawn term (never its definition).
    Outputs: True if plyer delivered it, False if the platform has no usable backend.
    Side Effects: Desktop notification; WARNING log on failure.
    """
    try:
        notification.notify(
            title=NOTIFICATION_TITLE,
            message=f"Do you know: {term.name}?",
            timeout=NOTIFICATION_TIMEOUT_SEC,
        )
    except Exception as exc:  # plyer raises NotImplementedError or backend-specific errors
        logger.warning("Desktop notification failed: %s", exc)
        return False
    return True
