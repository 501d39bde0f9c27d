"""Shared Pydantic models for the grant search interface."""

from .grant_record import GrantRecord
from .grant_query import GrantQuery, TEXT_SEARCH_FIELDS
from .filters import (
    FilterOption,
    FilterOptions,
    FilterSelection,
    ProgramOption,
    YearOption,
)
from .preference import SessionPreference

__all__ = [
    "GrantRecord",
    "GrantQuery",
    "TEXT_SEARCH_FIELDS",
    "FilterOption",
    "FilterOptions",
    "FilterSelection",
    "ProgramOption",
    "YearOption",
    "SessionPreference",
]
