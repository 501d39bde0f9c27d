"""ResultState - the current result set and the prefix shown to the user."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..models import GrantRecord


@dataclass
class ResultState:
    """Mutable state of the current query's results.

    ``rendered`` is always a prefix of ``full_set``. Only the pagination
    controller writes to it.
    """

    full_set: Tuple[GrantRecord, ...] = ()
    rendered: List[GrantRecord] = field(default_factory=list)
    page_cursor: int = 0
    is_loading: bool = False
    generation: int = 0
    is_search_active: bool = False

    @property
    def total(self) -> int:
        return len(self.full_set)

    @property
    def displayed(self) -> int:
        return len(self.rendered)

    @property
    def has_more(self) -> bool:
        return len(self.rendered) < len(self.full_set)
