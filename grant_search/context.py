"""Application context: every stateful component, wired once at startup."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Config
from .database import GrantStore
from .export import ExportPipeline
from .filters import FilterOptionCache, FilterPanel
from .pagination import PaginationController, ResultState, ResultsView
from .preferences import PreferenceStore
from .search import SearchService


@dataclass
class AppContext:
    config: Config
    store: GrantStore
    state: ResultState
    pagination: PaginationController
    filters: FilterPanel
    search: SearchService
    exporter: ExportPipeline
    preferences: PreferenceStore

    def bind_view(self, view: ResultsView) -> None:
        """Attach the UI's results view once its widgets exist."""
        self.pagination.bind_view(view)


def build_context(config: Config, store: GrantStore) -> AppContext:
    """Create the component graph around a shared ResultState."""
    state = ResultState()
    pagination = PaginationController(
        state,
        page_size=config.page_size,
        loading_delay=config.loading_delay,
        scroll_threshold=config.scroll_threshold,
    )
    filters = FilterPanel(FilterOptionCache(store))
    search = SearchService(
        store,
        pagination,
        filters,
        result_limit=config.result_limit,
        discard_stale=config.discard_stale_responses,
    )
    exporter = ExportPipeline(
        state,
        store,
        export_dir=config.export_dir,
        prefix=config.export_prefix,
    )
    return AppContext(
        config=config,
        store=store,
        state=state,
        pagination=pagination,
        filters=filters,
        search=search,
        exporter=exporter,
        preferences=PreferenceStore(config.preferences_path),
    )
