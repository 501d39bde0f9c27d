"""Search coordination."""

from .service import SearchOutcome, SearchService, SearchStatus

__all__ = ["SearchOutcome", "SearchService", "SearchStatus"]
