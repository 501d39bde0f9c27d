"""GrantRecord - one funded-program entry from the remote grants table."""

from typing import Any
from pydantic import BaseModel, Field, field_validator


class GrantRecord(BaseModel):
    """A grant row as returned by the remote store.

    Field names match the ``grants`` table columns. Records are frozen once
    fetched; the result state owns them for the lifetime of a query.
    """

    project_sponsor: str = Field("", description="Sponsoring agency or organization")
    grant_program: str = Field("", description="Funding program name")
    fiscal_year: int = Field(..., description="Fiscal year of the award")
    funding: float = Field(0, ge=0, description="Awarded amount in USD")
    project_description: str = Field("", description="Free-text project description")
    opportunity_id: str = Field("", description="Unique opportunity identifier")

    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}

    @field_validator(
        "project_sponsor", "grant_program", "project_description", "opportunity_id",
        mode="before",
    )
    @classmethod
    def _null_text_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("funding", mode="before")
    @classmethod
    def _parse_amount(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, str):
            amount_str = value.replace("$", "").replace(",", "").strip()
            return amount_str or 0
        return value

    @property
    def funding_whole(self) -> int:
        """Funding truncated to whole dollars."""
        return int(self.funding)
