"""
Entry point: parse flags, set up logging, load the glossary and start the Tk window.
"""

import argparse
import logging
import tkinter as tk

from glossary_browser.config import DEFAULT_LOG_LEVEL
from glossary_browser.controller import ViewController
from glossary_browser.logging_config import setup_logging
from glossary_browser.picker import RandomPicker
from glossary_browser.terms_data import load_terms
from glossary_browser.ui import AppUI


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse, filter and quiz yourself on a glossary of terms.")
    parser.add_argument("--log-level", default=logging.getLevelName(DEFAULT_LOG_LEVEL),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="console/log file verbosity")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random term picker")
    parser.add_argument("--no-notifications", action="store_true",
                        help="start with desktop notifications switched off")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logger = setup_logging(getattr(logging, args.log_level), args.log_file)

    store = load_terms()
    controller = ViewController(store, picker=RandomPicker(seed=args.seed))
    logger.info("Loaded %d terms", len(store))

    root = tk.Tk()
    ui = AppUI(root, controller, notifications=not args.no_notifications)
    logger.addHandler(ui.log_handler())
    root.mainloop()


if __name__ == "__main__":
    main()
