"""Loads the distinct filterable values from the remote store."""

import asyncio
import logging

from ..database import GrantStore
from ..models import FilterOptions, ProgramOption, YearOption

logger = logging.getLogger(__name__)


class FilterOptionCache:
    """Holds the fiscal years and programs offered by the filter panel.

    ``load()`` re-fetches on every call; nothing is memoized between
    panel opens.
    """

    def __init__(self, store: GrantStore) -> None:
        self._store = store
        self.options = FilterOptions()

    async def load(self) -> FilterOptions:
        """Fetch both distinct-value lists and replace the current options.

        Returns:
            The new options. Both lists are empty if either call failed.
        """
        logger.info("Loading filter options")
        years, programs = await asyncio.gather(
            self._store.fetch_distinct_years(),
            self._store.fetch_distinct_programs(),
            return_exceptions=True,
        )
        failures = [r for r in (years, programs) if isinstance(r, Exception)]
        if failures:
            logger.warning("Error loading filter options: %s", failures[0])
            self.options = FilterOptions()
            return self.options

        self.options = FilterOptions(
            years=[YearOption(value=year) for year in years],
            programs=[ProgramOption(value=program) for program in programs],
        )
        logger.info(
            "Loaded %d years and %d programs for filters",
            len(self.options.years),
            len(self.options.programs),
        )
        return self.options
