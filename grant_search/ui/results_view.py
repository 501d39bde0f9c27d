"""Textual implementation of the pagination controller's results view."""

from __future__ import annotations

from typing import Sequence

from textual import events
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import LoadingIndicator, Static

from ..models import GrantRecord
from ..views import NO_RESULTS_MESSAGE, card_markup
from .screens import GrantDetailScreen


class GrantCard(Static, can_focus=True):
    """One result card. Click or Enter opens the detail view."""

    BINDINGS = [Binding("enter", "open_detail", "Details", show=False)]

    def __init__(self, record: GrantRecord, index: int) -> None:
        super().__init__(card_markup(record), classes="grant-card")
        self.record = record
        self.index = index

    def on_click(self, event: events.Click) -> None:
        self.action_open_detail()

    def action_open_detail(self) -> None:
        self.app.push_screen(GrantDetailScreen(self.record))


class TextualResultsView:
    """Writes pagination output into the results widgets.

    Holds direct widget references so updates land correctly while a
    modal screen is on top.
    """

    def __init__(
        self,
        container: VerticalScroll,
        count: Static,
        loading: LoadingIndicator,
    ) -> None:
        self.container = container
        self.count = count
        self.loading = loading

    def clear(self) -> None:
        self.container.remove_children()
        self.count.update("")

    def append_batch(self, records: Sequence[GrantRecord], start_index: int) -> None:
        cards = [GrantCard(record, start_index + i) for i, record in enumerate(records)]
        self.container.mount_all(cards)

    def show_no_results(self) -> None:
        self.container.mount(Static(NO_RESULTS_MESSAGE, classes="no-results"))

    def update_count(self, text: str) -> None:
        self.count.update(text)

    def set_loading(self, loading: bool) -> None:
        self.loading.display = loading
