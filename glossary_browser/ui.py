"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (filter box, Treeview, pager, random-term panel, logs).
- Inputs: ViewController (owns all view state).
- Outputs: None (renders UI, fires controller intents).
- Side effects: Creates windows; shows desktop notifications on random draws.
- Thread-safety: UI code runs on main thread; LogPanelHandler posts log lines back via Tk.after().
"""

import logging
import tkinter as tk
from tkinter import ttk

from .config import DESCRIPTION_PREVIEW_CHARS, LOG_MAX_LINES, WINDOW_TITLE
from .controller import ViewController
from .logging_config import make_formatter
from .models import SortField
from .utils import definition_text, heading_text, notify_term, page_label, preview

logger = logging.getLogger(__name__)


class LogPanelHandler(logging.Handler):
    """Forward formatted log records to AppUI's Logs panel on the Tk main thread."""

    def __init__(self, ui: "AppUI", level: int = logging.NOTSET):
        super().__init__(level)
        self.ui = ui
        self.setFormatter(make_formatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record) + "\n"
            self.ui.root.after(0, lambda: self.ui._append_log(line))
        except Exception:
            self.handleError(record)


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        enable_notifications (tk.BooleanVar): notify the OS when a random term is drawn
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
        filter_var (tk.StringVar): bound to the filter Entry; every edit fires set_filter_text
    - Public methods:
        refresh_ui(): repaint table, headers, pager and random panel from the controller
        log_handler(): logging.Handler that writes into the Logs panel
    """

    def __init__(self, root: tk.Tk, controller: ViewController, notifications: bool = True):
        self.root = root
        self.controller = controller
        self.controller.on_change = self.refresh_ui

        # UI state variables
        self.enable_notifications = tk.BooleanVar(value=notifications)
        self.show_logs = tk.BooleanVar(value=False)
        self.filter_var = tk.StringVar(value="")

        # Window
        self.root.title(WINDOW_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg="#1e1e1e")

        # Paned window: top = content, bottom = logs (when shown)
        self.paned = ttk.PanedWindow(self.root, orient=tk.VERTICAL)
        self.paned.grid(row=0, column=0, sticky="nsew")

        content_frame = tk.Frame(self.paned, bg="#1e1e1e")
        content_frame.rowconfigure(1, weight=1)
        content_frame.columnconfigure(0, weight=1)
        self.paned.add(content_frame, weight=1)

        self.bottom_frame = tk.Frame(self.paned, bg="#1e1e1e")
        self.logs_box = tk.Text(self.bottom_frame, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
        self.logs_box.pack_forget()  # hidden by default
        self.paned.add(self.bottom_frame, weight=0)  # start collapsed; expand when Logs checked

        def _keep_sash_collapsed(_event=None):
            """When Logs is unchecked, keep sash at bottom so window can resize down."""
            if not self.show_logs.get():
                self.paned.update_idletasks()
                total = self.paned.winfo_height()
                if total > 0:
                    self.paned.sashpos(0, total)

        self.paned.bind("<Configure>", _keep_sash_collapsed)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background="#2b2b2b",
            foreground="#f0f0f0",
            fieldbackground="#2b2b2b",
            rowheight=24,
            font=("Segoe UI", 10),
        )
        style.configure(
            "Treeview.Heading",
            background="#1e1e1e",
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[('selected', '#444')], foreground=[])

        # Filter row
        filter_frame = tk.Frame(content_frame, bg="#1e1e1e")
        filter_frame.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))
        tk.Label(filter_frame, text="Filter", fg="white", bg="#1e1e1e").pack(side=tk.LEFT, padx=(0, 5))
        e_filter = tk.Entry(filter_frame, textvariable=self.filter_var)
        e_filter.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.filter_var.trace_add("write", self.on_filter_changed)

        # Treeview
        self.columns = ("name", "description")
        self.column_fields = {"name": SortField.NAME, "description": SortField.DESCRIPTION}
        self.headers = {"name": "Name", "description": "Description"}
        self.tree = ttk.Treeview(content_frame, columns=self.columns, show="headings", height=15)
        self.tree.grid(row=1, column=0, sticky="nsew", padx=10, pady=5)
        self.tree.column("name", width=200, stretch=False)
        self.tree.column("description", width=620)
        for col in self.columns:
            self.tree.heading(col, text=self.headers[col], command=lambda c=col: self.sort_by_column(c))

        # Pager
        pager = tk.Frame(content_frame, bg="#1e1e1e")
        pager.grid(row=2, column=0, sticky="ew", padx=10, pady=5)
        ttk.Button(pager, text="«", width=3, command=self.controller.go_first).pack(side=tk.LEFT, padx=2)
        ttk.Button(pager, text="‹", width=3, command=self.controller.go_prev).pack(side=tk.LEFT, padx=2)
        self.page_label = tk.Label(pager, text="", fg="white", bg="#1e1e1e")
        self.page_label.pack(side=tk.LEFT, padx=10)
        ttk.Button(pager, text="›", width=3, command=self.controller.go_next).pack(side=tk.LEFT, padx=2)
        ttk.Button(pager, text="»", width=3, command=self.controller.go_last).pack(side=tk.LEFT, padx=2)

        # Random term panel
        random_frame = tk.Frame(content_frame, bg="#1e1e1e")
        random_frame.grid(row=3, column=0, sticky="ew", padx=10, pady=5)
        random_frame.columnconfigure(1, weight=1)
        ttk.Button(random_frame, text="Random Term", command=self.draw_random).grid(row=0, column=0, sticky="w", padx=5)
        self.random_name = tk.Label(random_frame, text="", fg="#FFA500", bg="#1e1e1e", font=("Segoe UI", 11, "bold"))
        self.random_name.grid(row=0, column=1, sticky="w", padx=5)
        self.reveal_button = ttk.Button(random_frame, text="Reveal Definition", command=self.controller.reveal_definition)
        self.reveal_button.grid(row=1, column=0, sticky="w", padx=5, pady=(5, 0))
        self.random_definition = tk.Label(
            random_frame, text="", fg="#f0f0f0", bg="#1e1e1e", wraplength=640, justify=tk.LEFT
        )
        self.random_definition.grid(row=1, column=1, sticky="w", padx=5, pady=(5, 0))

        # Toggles
        button_frame = tk.Frame(content_frame, bg="#1e1e1e")
        button_frame.grid(row=4, column=0, sticky="ew", padx=10, pady=(0, 10))

        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg="#1e1e1e",
            selectcolor="#2b2b2b",
            activebackground="#1e1e1e",
            activeforeground="white",
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Show Logs",
            variable=self.show_logs,
            fg="white",
            bg="#1e1e1e",
            selectcolor="#2b2b2b",
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Initial paint
        self.refresh_ui()

    def log_handler(self) -> logging.Handler:
        return LogPanelHandler(self)

    # ---------- UI callbacks ----------

    def on_filter_changed(self, *_args) -> None:
        self.controller.set_filter_text(self.filter_var.get())

    def sort_by_column(self, col: str) -> None:
        """Header click: same column flips direction, another column keeps it."""
        self.controller.set_sort(self.column_fields[col])

    def draw_random(self) -> None:
        term = self.controller.draw_random()
        if self.enable_notifications.get():
            notify_term(term)

    def toggle_logs(self) -> None:
        """Show logs in bottom pane. Resize pane to show/hide."""
        if self.show_logs.get():
            self.paned.pane(self.bottom_frame, weight=1)
            self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, int(total * 0.8))
        else:
            self.logs_box.pack_forget()
            self.paned.pane(self.bottom_frame, weight=0)
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, total)

    def refresh_ui(self) -> None:
        """
        Purpose: Repaint from the controller's read models.
        Side effects: Mutates Treeview items, header texts and labels (UI only).
        Thread-safety: Must run on main thread.
        """
        view = self.controller.current_page_view()

        for col in self.columns:
            self.tree.heading(col, text=heading_text(self.headers[col], self.column_fields[col], view))

        self.tree.delete(*self.tree.get_children())
        for term in view.terms:
            self.tree.insert("", "end", values=(term.name, preview(term.description, DESCRIPTION_PREVIEW_CHARS)))

        self.page_label.configure(text=page_label(view))

        random_view = self.controller.random_term_view()
        self.random_name.configure(text=random_view.term.name if random_view.term else "")
        self.random_definition.configure(text=definition_text(random_view))
        if random_view.term is None or random_view.revealed:
            self.reveal_button.state(["disabled"])
        else:
            self.reveal_button.state(["!disabled"])

    # ---------- internal helper for Logs ----------

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")
