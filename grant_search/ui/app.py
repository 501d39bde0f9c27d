"""Terminal interface for searching, filtering and exporting grants."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, LoadingIndicator, Static

from ..config import Config
from ..context import AppContext, build_context
from ..database import GrantStore, SupabaseClient
from ..errors import UserInputError
from ..pagination import ScrollPosition
from ..search import SearchStatus
from .results_view import TextualResultsView
from .screens import EmailScreen, FilterScreen

logger = logging.getLogger(__name__)

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"

CSS = """
#content {
    height: 1fr;
}

#search-bar {
    height: auto;
    padding: 1 2;
    background: $panel;
}

#search-input {
    width: 1fr;
    margin-right: 1;
}

#suggestions {
    height: auto;
    padding: 0 2;
}

#suggestions Button {
    margin-right: 1;
    min-width: 10;
}

#results-area {
    height: 1fr;
}

#results-bar {
    height: auto;
    padding: 0 2;
}

#results-count {
    width: 1fr;
    padding: 1 2;
    color: $text-muted;
}

#grants {
    height: 1fr;
    padding: 0 2;
}

.grant-card {
    border: round $primary;
    padding: 0 1;
    margin-bottom: 1;
}

.grant-card:focus {
    border: round $accent;
}

.no-results {
    padding: 2;
    color: $text-muted;
    text-align: center;
}

#loading {
    height: 3;
}

ModalScreen {
    align: center middle;
}

.dialog {
    background: $surface;
    border: thick $accent;
    padding: 1 2;
    width: 80%;
    max-width: 100;
    height: auto;
    max-height: 90%;
}

.dialog-title {
    text-style: bold;
    color: $accent;
    margin-bottom: 1;
}

.field-label {
    color: $text-muted;
    margin-top: 1;
}

#detail-scroll {
    height: auto;
    max-height: 30;
}

SelectionList {
    height: auto;
    max-height: 8;
}

#funding-range {
    height: auto;
}

#funding-range Input {
    width: 1fr;
}

.dialog-buttons {
    height: auto;
    align: right middle;
    margin-top: 1;
}

.dialog-buttons Button {
    margin-left: 2;
}
"""


class GrantSearchApp(App):
    """Search, filter, page through and export grant records."""

    TITLE = "FTA Grant Database"
    CSS = CSS

    BINDINGS = [
        Binding("f2", "open_filters", "Filters"),
        Binding("f3", "load_more", "Load more"),
        Binding("f4", "toggle_theme", "Dark mode"),
        Binding("f6", "back", "New search"),
        Binding("ctrl+s", "export", "Export CSV"),
    ]

    def __init__(
        self,
        config: Config,
        store: Optional[GrantStore] = None,
        initial_query: str = "",
    ) -> None:
        super().__init__()
        self.config = config
        self.initial_query = initial_query
        self._store = store
        self.ctx: Optional[AppContext] = None
        self._search_input: Optional[Input] = None
        self._grants: Optional[VerticalScroll] = None

    # ── Layout ───────────────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="content"):
            with Horizontal(id="search-bar"):
                yield Input(
                    value=self.initial_query,
                    placeholder="Search sponsors, programs, descriptions or IDs",
                    id="search-input",
                )
                yield Button("Search", variant="primary", id="search-btn")
                yield Button("Filters", id="filter-btn")
            with Horizontal(id="suggestions"):
                for query in self.config.suggested_queries:
                    yield Button(query, name=query, classes="suggestion")
            with Vertical(id="results-area"):
                with Horizontal(id="results-bar"):
                    yield Button("Back", id="back-btn")
                    yield Static("", id="results-count")
                    yield Button("Export CSV", variant="success", id="export-btn")
                yield VerticalScroll(id="grants")
                yield LoadingIndicator(id="loading")
        yield Footer()

    async def on_mount(self) -> None:
        if self._store is None:
            self._store = await SupabaseClient.connect(
                self.config.supabase_url,
                self.config.supabase_key,
                grants_table=self.config.grants_table,
                emails_table=self.config.emails_table,
                years_rpc=self.config.years_rpc,
                programs_rpc=self.config.programs_rpc,
            )
        self.ctx = build_context(self.config, self._store)

        self._search_input = self.query_one("#search-input", Input)
        self._grants = grants = self.query_one("#grants", VerticalScroll)
        self.ctx.bind_view(
            TextualResultsView(
                grants,
                self.query_one("#results-count", Static),
                self.query_one("#loading", LoadingIndicator),
            )
        )
        self.watch(grants, "scroll_y", self._on_grants_scrolled, init=False)

        self._apply_theme(self.ctx.preferences.current.dark_mode)
        self._show_results_area(False)
        self.query_one("#loading").display = False
        self._search_input.focus()

        self._load_filter_options()
        if self.initial_query:
            self._run_search(self.initial_query)
        logger.info("Grant search interface initialized")

    # ── Events ───────────────────────────────────────────────────────────

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self._run_search(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if button.id == "search-btn":
            self._run_search(self._search_input.value)
        elif button.id == "filter-btn":
            self.action_open_filters()
        elif button.id == "back-btn":
            self.action_back()
        elif button.id == "export-btn":
            self.action_export()
        elif button.has_class("suggestion") and button.name:
            self._search_input.value = button.name
            self._run_search(button.name)

    def _on_grants_scrolled(self, scroll_y: float) -> None:
        if self.ctx is None:
            return
        grants = self._grants
        position = ScrollPosition(
            scroll_top=scroll_y,
            viewport_height=grants.scrollable_content_region.height,
            document_height=grants.virtual_size.height,
        )
        if self.ctx.pagination.should_load(position):
            self._load_more()

    # ── Actions ──────────────────────────────────────────────────────────

    def action_open_filters(self) -> None:
        self.push_screen(FilterScreen(self.ctx.filters), callback=self._on_filters_closed)

    def action_load_more(self) -> None:
        if self.ctx.state.has_more:
            self._load_more()

    def action_toggle_theme(self) -> None:
        self._apply_theme(self.ctx.preferences.toggle_dark_mode())

    def action_back(self) -> None:
        self.ctx.search.return_to_search()
        self._search_input.value = ""
        self._show_results_area(False)
        self._search_input.focus()

    def action_export(self) -> None:
        try:
            self.ctx.exporter.open_gate()
        except UserInputError as exc:
            self.notify(str(exc), severity="warning")
            return
        self.push_screen(EmailScreen(self.ctx.exporter), callback=self._on_export_closed)

    # ── Workers ──────────────────────────────────────────────────────────

    @work(group="search")
    async def _run_search(self, term: str, from_filters: bool = False) -> None:
        try:
            if from_filters:
                outcome = await self.ctx.search.apply_filters(term)
            else:
                outcome = await self.ctx.search.search(term)
        except UserInputError as exc:
            self.notify(str(exc), severity="warning")
            return
        if outcome.status is not SearchStatus.STALE:
            self._show_results_area(True)

    @work(group="pagination")
    async def _load_more(self) -> None:
        await self.ctx.pagination.load_batch()

    @work(group="filters")
    async def _load_filter_options(self) -> None:
        await self.ctx.filters.refresh_options()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _on_filters_closed(self, applied: Optional[bool]) -> None:
        if applied:
            self._run_search(self._search_input.value, from_filters=True)

    def _on_export_closed(self, path: Optional[Path]) -> None:
        if path is not None:
            self.notify(f"Saved {path}", title="CSV export")

    def _show_results_area(self, visible: bool) -> None:
        screen = self.screen_stack[0]
        screen.query_one("#results-area").display = visible
        screen.query_one("#suggestions").display = not visible

    def _apply_theme(self, dark: bool) -> None:
        self.theme = DARK_THEME if dark else LIGHT_THEME
