"""Filter selection and selectable filter options."""

from typing import Annotated, FrozenSet, Literal, Optional, Union
from pydantic import BaseModel, Field


class FilterSelection(BaseModel):
    """The user's structured filter criteria for one query.

    Built fresh from the filter panel every time a query runs.
    """

    years: FrozenSet[int] = Field(default_factory=frozenset)
    programs: FrozenSet[str] = Field(default_factory=frozenset)
    funding_min: Optional[float] = None
    funding_max: Optional[float] = None

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return (
            not self.years
            and not self.programs
            and self.funding_min is None
            and self.funding_max is None
        )


class YearOption(BaseModel):
    """A selectable fiscal year."""

    kind: Literal["year"] = "year"
    value: int

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return str(self.value)


class ProgramOption(BaseModel):
    """A selectable grant program."""

    kind: Literal["program"] = "program"
    value: str

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return self.value


FilterOption = Annotated[Union[YearOption, ProgramOption], Field(discriminator="kind")]


class FilterOptions(BaseModel):
    """Distinct values available for filtering."""

    years: list[YearOption] = Field(default_factory=list)
    programs: list[ProgramOption] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.years and not self.programs
