"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (page size, display strings, notification and logging settings).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

import logging

WINDOW_TITLE = "Glossary Browser"

# Rows per table page (fixed, not user-configurable)
PAGE_SIZE = 15

# Name and description of the placeholder term drawn from an empty collection
SENTINEL_TEXT = "-"

# Shown in place of the definition until the user reveals it
HIDDEN_DEFINITION_TEXT = "(definition hidden: press Reveal Definition)"

# Description column is truncated to this many characters in the table
DESCRIPTION_PREVIEW_CHARS = 90

# Maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000

DEFAULT_LOG_LEVEL = logging.INFO

NOTIFICATION_TITLE = "Random Term"
NOTIFICATION_TIMEOUT_SEC = 5
