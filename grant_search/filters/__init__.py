"""Filter options and the filter panel state."""

from .options import FilterOptionCache
from .panel import FilterPanel, parse_funding

__all__ = ["FilterOptionCache", "FilterPanel", "parse_funding"]
