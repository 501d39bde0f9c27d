"""Search coordinator: runs queries and hands results to pagination."""

from __future__ import annotations

import enum
import itertools
import logging
from dataclasses import dataclass

from ..database import GrantStore
from ..errors import EmptySearchTermError
from ..filters import FilterPanel
from ..models import FilterSelection
from ..models.grant_query import DEFAULT_RESULT_LIMIT
from ..pagination import PaginationController, ResultState
from ..query import build_query

logger = logging.getLogger(__name__)


class SearchStatus(enum.Enum):
    RESULTS = "results"
    NO_RESULTS = "no_results"
    STALE = "stale"


@dataclass(frozen=True)
class SearchOutcome:
    status: SearchStatus
    total: int
    sequence: int


class SearchService:
    """Issues grant queries and installs their results.

    Every request is numbered. With ``discard_stale`` enabled, a response
    that arrives after a newer request was issued is dropped, so the last
    request issued wins. Disabled, the last response received wins.
    """

    def __init__(
        self,
        store: GrantStore,
        pagination: PaginationController,
        panel: FilterPanel,
        result_limit: int = DEFAULT_RESULT_LIMIT,
        discard_stale: bool = True,
    ) -> None:
        self._store = store
        self.pagination = pagination
        self.panel = panel
        self.result_limit = result_limit
        self.discard_stale = discard_stale
        self._sequence = itertools.count(1)
        self.latest_sequence = 0

    @property
    def state(self) -> ResultState:
        return self.pagination.state

    async def search(self, term: str) -> SearchOutcome:
        """Primary search action. An empty term is rejected before any request.

        Raises:
            EmptySearchTermError: If ``term`` is blank.
        """
        if not term.strip():
            raise EmptySearchTermError()
        return await self._run(term, self.panel.selection())

    async def apply_filters(self, term: str = "") -> SearchOutcome:
        """Filter-panel apply; the term may be empty."""
        return await self._run(term, self.panel.selection())

    def return_to_search(self) -> None:
        """Leave the results view and reset every filter."""
        self.state.is_search_active = False
        self.panel.clear()

    async def _run(self, term: str, selection: FilterSelection) -> SearchOutcome:
        query = build_query(term, selection, limit=self.result_limit)
        sequence = next(self._sequence)
        self.latest_sequence = sequence
        view = self.pagination.view

        logger.info("Searching grants seq=%d term=%r", sequence, query.term)
        if view is not None:
            view.set_loading(True)

        records = await self._store.search_grants(query)

        if self.discard_stale and sequence != self.latest_sequence:
            logger.info(
                "Discarding stale response seq=%d latest=%d count=%d",
                sequence, self.latest_sequence, len(records),
            )
            return SearchOutcome(SearchStatus.STALE, len(records), sequence)

        if view is not None:
            view.set_loading(False)
        self.state.is_search_active = True
        logger.info("Found %d grants matching criteria (seq=%d)", len(records), sequence)

        await self.pagination.show(records)
        status = SearchStatus.RESULTS if records else SearchStatus.NO_RESULTS
        return SearchOutcome(status, len(records), sequence)
