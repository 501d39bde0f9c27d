"""GrantQuery - request description sent to the remote grants store."""

from typing import FrozenSet, Optional
from pydantic import BaseModel, Field

from .grant_record import GrantRecord

# Columns searched by the free-text term, in the order they are sent.
TEXT_SEARCH_FIELDS = (
    "project_sponsor",
    "grant_program",
    "project_description",
    "opportunity_id",
)

ORDER_COLUMN = "fiscal_year"
DEFAULT_RESULT_LIMIT = 1000


class GrantQuery(BaseModel):
    """A fully-resolved grant search request.

    Predicates combine with AND; the text term alone is an OR across
    ``TEXT_SEARCH_FIELDS``. Results come back newest fiscal year first,
    capped at ``limit``.
    """

    term: str = ""
    years: FrozenSet[int] = Field(default_factory=frozenset)
    programs: FrozenSet[str] = Field(default_factory=frozenset)
    funding_min: Optional[int] = None
    funding_max: Optional[int] = None
    limit: int = Field(DEFAULT_RESULT_LIMIT, gt=0)

    model_config = {"frozen": True}

    @property
    def has_predicates(self) -> bool:
        return bool(
            self.term
            or self.years
            or self.programs
            or self.funding_min is not None
            or self.funding_max is not None
        )

    def matches(self, record: GrantRecord) -> bool:
        """Evaluate this query's predicates against a single record."""
        if self.term:
            needle = self.term.lower()
            if not any(needle in getattr(record, f).lower() for f in TEXT_SEARCH_FIELDS):
                return False
        if self.years and record.fiscal_year not in self.years:
            return False
        if self.programs and record.grant_program not in self.programs:
            return False
        if self.funding_min is not None and record.funding < self.funding_min:
            return False
        if self.funding_max is not None and record.funding > self.funding_max:
            return False
        return True
