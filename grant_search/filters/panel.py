"""Selection state behind the filter panel."""

import logging
import math
from typing import Iterable, Optional, Set

from ..models import FilterOption, FilterOptions, FilterSelection, ProgramOption, YearOption
from .options import FilterOptionCache

logger = logging.getLogger(__name__)


def parse_funding(text: Optional[str]) -> Optional[float]:
    """Parse a funding bound typed by the user.

    Blank or non-numeric input means "no bound".
    """
    if text is None:
        return None
    cleaned = text.replace("$", "").replace(",", "").strip()
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("Ignoring non-numeric funding bound %r", text)
        return None
    return value if math.isfinite(value) else None


class FilterPanel:
    """Selected filter options plus the funding range inputs."""

    def __init__(self, cache: FilterOptionCache) -> None:
        self._cache = cache
        self.selected: Set[FilterOption] = set()
        self.funding_min_text = ""
        self.funding_max_text = ""

    @property
    def options(self) -> FilterOptions:
        return self._cache.options

    async def refresh_options(self) -> FilterOptions:
        """Reload options from the store, keeping selections that still exist."""
        options = await self._cache.load()
        available = set(options.years) | set(options.programs)
        self.selected &= available
        return options

    def toggle(self, option: FilterOption) -> bool:
        """Flip one option. Returns True if it is now selected."""
        if option in self.selected:
            self.selected.discard(option)
            return False
        self.selected.add(option)
        return True

    def set_selected(self, options: Iterable[FilterOption]) -> None:
        self.selected = set(options)

    def set_funding(self, minimum: str = "", maximum: str = "") -> None:
        self.funding_min_text = minimum
        self.funding_max_text = maximum

    def clear(self) -> None:
        """Deselect every option and blank both funding inputs."""
        self.selected.clear()
        self.funding_min_text = ""
        self.funding_max_text = ""

    def selection(self) -> FilterSelection:
        """Snapshot the panel as a FilterSelection for the next query."""
        return FilterSelection(
            years=frozenset(o.value for o in self.selected if isinstance(o, YearOption)),
            programs=frozenset(o.value for o in self.selected if isinstance(o, ProgramOption)),
            funding_min=parse_funding(self.funding_min_text),
            funding_max=parse_funding(self.funding_max_text),
        )
