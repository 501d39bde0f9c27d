"""Result state and lazy pagination."""

from .controller import PAGE_SIZE, PaginationController, ResultsView, ScrollPosition
from .state import ResultState

__all__ = [
    "PAGE_SIZE",
    "PaginationController",
    "ResultState",
    "ResultsView",
    "ScrollPosition",
]
