"""Query builder for the remote grants table."""

from .builder import apply_query, build_query, text_search_filter

__all__ = ["apply_query", "build_query", "text_search_filter"]
