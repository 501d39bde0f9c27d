"""Translate a search term and filter selection into a remote grants query."""

import logging
import math
from typing import Any, Optional

from ..models import FilterSelection, GrantQuery, TEXT_SEARCH_FIELDS
from ..models.grant_query import DEFAULT_RESULT_LIMIT, ORDER_COLUMN

logger = logging.getLogger(__name__)


def _truncate_bound(value: Optional[float]) -> Optional[int]:
    if value is None or not math.isfinite(value):
        return None
    return int(value)


def build_query(
    term: str = "",
    selection: Optional[FilterSelection] = None,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> GrantQuery:
    """Compose a GrantQuery from raw search input.

    Args:
        term: Free-text search term; surrounding whitespace is ignored.
        selection: Structured filters. ``None`` means no filters.
        limit: Maximum number of records to return.

    Returns:
        The request description for the remote store.
    """
    selection = selection or FilterSelection()
    return GrantQuery(
        term=term.strip(),
        years=selection.years,
        programs=selection.programs,
        funding_min=_truncate_bound(selection.funding_min),
        funding_max=_truncate_bound(selection.funding_max),
        limit=limit,
    )


def quote_filter_value(value: str) -> str:
    """Double-quote a value for use inside a PostgREST logic tree."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def text_search_filter(term: str) -> str:
    """Build the ``or`` expression matching ``term`` in any searchable column."""
    pattern = quote_filter_value(f"%{escape_like(term)}%")
    return ",".join(f"{column}.ilike.{pattern}" for column in TEXT_SEARCH_FIELDS)


def apply_query(request: Any, query: GrantQuery) -> Any:
    """Apply a GrantQuery to a PostgREST select request builder.

    Args:
        request: Builder returned by ``client.table(...).select(...)``.
        query: The query to apply.

    Returns:
        The builder with ordering, filters and limit applied.
    """
    request = request.order(ORDER_COLUMN, desc=True)

    if query.term:
        request = request.or_(text_search_filter(query.term))

    if query.years:
        request = request.in_("fiscal_year", sorted(query.years))

    if query.programs:
        request = request.in_("grant_program", sorted(query.programs))

    if query.funding_min is not None:
        request = request.gte("funding", query.funding_min)

    if query.funding_max is not None:
        request = request.lte("funding", query.funding_max)

    logger.debug(
        "query_built term=%r years=%d programs=%d funding_min=%s funding_max=%s limit=%d",
        query.term,
        len(query.years),
        len(query.programs),
        query.funding_min,
        query.funding_max,
        query.limit,
    )
    return request.limit(query.limit)
