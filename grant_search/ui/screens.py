"""Modal screens: grant detail, filter panel and export email capture."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, SelectionList, Static
from textual.widgets.selection_list import Selection

from ..errors import UserInputError
from ..export import ExportPipeline
from ..filters import FilterPanel
from ..models import GrantRecord
from ..views import detail_fields


class GrantDetailScreen(ModalScreen[None]):
    """Full detail for one grant."""

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, record: GrantRecord) -> None:
        super().__init__()
        self.record = record

    def compose(self) -> ComposeResult:
        with Vertical(id="detail-dialog", classes="dialog"):
            with VerticalScroll(id="detail-scroll"):
                for label, value in detail_fields(self.record):
                    yield Label(label, classes="field-label")
                    yield Static(value, classes="field-value", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("Close", id="detail-close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "detail-close":
            self.action_close()

    def action_close(self) -> None:
        self.dismiss(None)


class FilterScreen(ModalScreen[bool]):
    """Fiscal year and program pickers plus the funding range.

    Dismisses with True when the user applies the filters.
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, panel: FilterPanel) -> None:
        super().__init__()
        self.panel = panel

    def compose(self) -> ComposeResult:
        with Vertical(id="filter-dialog", classes="dialog"):
            yield Label("Filter grants", classes="dialog-title")
            yield Label("Fiscal year", classes="field-label")
            yield SelectionList(id="year-options")
            yield Label("Grant program", classes="field-label")
            yield SelectionList(id="program-options")
            yield Label("Funding range", classes="field-label")
            with Horizontal(id="funding-range"):
                yield Input(self.panel.funding_min_text, placeholder="Minimum", id="funding-min")
                yield Input(self.panel.funding_max_text, placeholder="Maximum", id="funding-max")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Apply", variant="primary", id="apply-filters", disabled=True)
                yield Button("Clear", id="clear-filters")
                yield Button("Close", id="close-filters")

    def on_mount(self) -> None:
        self._populate()

    @work(exclusive=True)
    async def _populate(self) -> None:
        options = await self.panel.refresh_options()
        selected = self.panel.selected

        years = self.query_one("#year-options", SelectionList)
        years.clear_options()
        years.add_options([Selection(o.label, o, o in selected) for o in options.years])

        programs = self.query_one("#program-options", SelectionList)
        programs.clear_options()
        programs.add_options([Selection(o.label, o, o in selected) for o in options.programs])
        self.query_one("#apply-filters", Button).disabled = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "apply-filters":
            self._apply()
        elif button_id == "clear-filters":
            self._clear()
        elif button_id == "close-filters":
            self.action_close()

    def _apply(self) -> None:
        if self.query_one("#apply-filters", Button).disabled:
            return
        years = self.query_one("#year-options", SelectionList)
        programs = self.query_one("#program-options", SelectionList)
        self.panel.set_selected([*years.selected, *programs.selected])
        self.panel.set_funding(
            self.query_one("#funding-min", Input).value,
            self.query_one("#funding-max", Input).value,
        )
        self.dismiss(True)

    def _clear(self) -> None:
        self.panel.clear()
        self.query_one("#year-options", SelectionList).deselect_all()
        self.query_one("#program-options", SelectionList).deselect_all()
        self.query_one("#funding-min", Input).value = ""
        self.query_one("#funding-max", Input).value = ""

    def action_close(self) -> None:
        self.dismiss(False)


class EmailScreen(ModalScreen[Optional[Path]]):
    """Email capture in front of the CSV export.

    Dismisses with the written file path, or None when cancelled.
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, exporter: ExportPipeline) -> None:
        super().__init__()
        self.exporter = exporter

    def compose(self) -> ComposeResult:
        with Vertical(id="email-dialog", classes="dialog"):
            yield Label("Download results", classes="dialog-title")
            yield Label("Enter your email address to download the CSV file.")
            yield Input(placeholder="you@example.com", id="email-input")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Download", variant="primary", id="email-submit")
                yield Button("Cancel", id="email-cancel")

    def on_mount(self) -> None:
        self.query_one("#email-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "email-input":
            self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "email-submit":
            self._submit(self.query_one("#email-input", Input).value)
        elif event.button.id == "email-cancel":
            self.action_cancel()

    @work(exclusive=True)
    async def _submit(self, email: str) -> None:
        try:
            path = await self.exporter.submit(email)
        except UserInputError as exc:
            self.notify(str(exc), severity="error")
            self.query_one("#email-input", Input).focus()
            return
        self.query_one("#email-input", Input).value = ""
        self.dismiss(path)

    def action_cancel(self) -> None:
        self.exporter.cancel()
        self.dismiss(None)
