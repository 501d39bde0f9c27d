"""Lazy pagination: reveals the result set one batch at a time."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from ..models import GrantRecord
from ..views import results_count_text
from .state import ResultState

logger = logging.getLogger(__name__)

PAGE_SIZE = 6
LOADING_DELAY = 0.3
SCROLL_THRESHOLD = 200


class ResultsView(Protocol):
    """UI collaborator that displays the rendered prefix."""

    def clear(self) -> None: ...

    def append_batch(self, records: Sequence[GrantRecord], start_index: int) -> None: ...

    def show_no_results(self) -> None: ...

    def update_count(self, text: str) -> None: ...

    def set_loading(self, loading: bool) -> None: ...


@dataclass(frozen=True)
class ScrollPosition:
    """Viewport geometry reported by the scroll container."""

    scroll_top: float
    viewport_height: float
    document_height: float

    def near_bottom(self, threshold: float) -> bool:
        return self.scroll_top + self.viewport_height >= self.document_height - threshold


class PaginationController:
    """Drives ``ResultState`` through replace and load-batch transitions."""

    def __init__(
        self,
        state: ResultState,
        view: Optional[ResultsView] = None,
        page_size: int = PAGE_SIZE,
        loading_delay: float = LOADING_DELAY,
        scroll_threshold: float = SCROLL_THRESHOLD,
    ) -> None:
        self.state = state
        self.view = view
        self.page_size = page_size
        self.loading_delay = loading_delay
        self.scroll_threshold = scroll_threshold

    def bind_view(self, view: ResultsView) -> None:
        self.view = view

    def replace(self, records: Sequence[GrantRecord]) -> None:
        """Install a new result set and reset the cursor.

        A batch still waiting out its delay belongs to the previous
        generation and is dropped when it wakes.
        """
        state = self.state
        state.full_set = tuple(records)
        state.rendered = []
        state.page_cursor = 0
        state.is_loading = False
        state.generation += 1
        if self.view is not None:
            self.view.clear()
            self.view.set_loading(False)

    async def show(self, records: Sequence[GrantRecord]) -> List[GrantRecord]:
        """Replace the result set and reveal the first batch.

        Returns:
            The first batch, or [] for the no-results state.
        """
        self.replace(records)
        if not self.state.full_set:
            logger.info("No grants matched the current criteria")
            if self.view is not None:
                self.view.show_no_results()
                self.view.update_count(results_count_text(0, 0))
            return []
        return await self.load_batch()

    async def load_batch(self) -> List[GrantRecord]:
        """Append the next page-sized slice to the rendered prefix.

        No-op (returns []) while another batch is loading or once every
        record has been revealed.
        """
        state = self.state
        if state.is_loading:
            return []

        start = state.page_cursor * self.page_size
        end = min(start + self.page_size, len(state.full_set))
        if start >= len(state.full_set):
            return []

        state.is_loading = True
        generation = state.generation
        if self.view is not None:
            self.view.set_loading(True)

        await asyncio.sleep(self.loading_delay)

        if state.generation != generation:
            logger.debug("Dropping batch %d-%d from a replaced result set", start, end)
            return []

        batch = list(state.full_set[start:end])
        state.rendered.extend(batch)
        state.page_cursor += 1
        state.is_loading = False

        if self.view is not None:
            self.view.append_batch(batch, start)
            self.view.set_loading(False)
            self.view.update_count(results_count_text(state.displayed, state.total))
        logger.debug(
            "Revealed grants %d-%d of %d (page %d)",
            start + 1, end, state.total, state.page_cursor,
        )
        return batch

    def should_load(self, position: ScrollPosition) -> bool:
        """Whether a scroll to ``position`` should reveal another batch."""
        state = self.state
        if state.is_loading or not state.has_more:
            return False
        return position.near_bottom(self.scroll_threshold)

    async def on_scroll(self, position: ScrollPosition) -> List[GrantRecord]:
        if not self.should_load(position):
            return []
        return await self.load_batch()
