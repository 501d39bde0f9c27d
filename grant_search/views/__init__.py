"""Presentation helpers shared by the UI."""

from .formatters import (
    NO_RESULTS_MESSAGE,
    card_markup,
    detail_fields,
    format_currency,
    results_count_text,
)

__all__ = [
    "NO_RESULTS_MESSAGE",
    "card_markup",
    "detail_fields",
    "format_currency",
    "results_count_text",
]
