"""Pytest configuration, fixtures and in-memory collaborators."""

import asyncio
from typing import Dict, List, Optional, Sequence

import pytest

from grant_search.config import Config
from grant_search.models import GrantQuery, GrantRecord


def make_grant(
    opportunity_id: str,
    sponsor: str = "Test Transit Agency",
    program: str = "Urbanized Area Formula",
    year: int = 2024,
    funding=100000,
    description: str = "",
) -> GrantRecord:
    return GrantRecord(
        project_sponsor=sponsor,
        grant_program=program,
        fiscal_year=year,
        funding=funding,
        project_description=description,
        opportunity_id=opportunity_id,
    )


class InMemoryGrantStore:
    """In-memory replacement for SupabaseClient.

    Applies GrantQuery predicates the way the remote table does: filter,
    newest fiscal year first, then cap at the query limit.
    """

    def __init__(self, grants: Optional[Sequence[GrantRecord]] = None):
        self.grants: List[GrantRecord] = list(grants or [])
        self.queries: List[GrantQuery] = []
        self.emails: List[str] = []
        self.option_loads = 0
        self.fail_search = False
        self.fail_years = False
        self.fail_programs = False
        self.fail_email = False

    async def search_grants(self, query: GrantQuery) -> List[GrantRecord]:
        self.queries.append(query)
        if self.fail_search:
            return []
        matched = [g for g in self.grants if query.matches(g)]
        matched.sort(key=lambda g: g.fiscal_year, reverse=True)
        return matched[: query.limit]

    async def fetch_distinct_years(self) -> List[int]:
        self.option_loads += 1
        if self.fail_years:
            raise RuntimeError("rpc get_distinct_years failed")
        return sorted({g.fiscal_year for g in self.grants}, reverse=True)

    async def fetch_distinct_programs(self) -> List[str]:
        if self.fail_programs:
            raise RuntimeError("rpc get_distinct_programs failed")
        return sorted({g.grant_program for g in self.grants})

    async def save_email(self, email: str) -> bool:
        if self.fail_email:
            return False
        self.emails.append(email)
        return True


class GatedGrantStore(InMemoryGrantStore):
    """Holds each search until the test releases it, by term."""

    def __init__(self, grants=None):
        super().__init__(grants)
        self.gates: Dict[str, asyncio.Event] = {}

    def gate(self, term: str) -> asyncio.Event:
        return self.gates.setdefault(term, asyncio.Event())

    async def search_grants(self, query: GrantQuery) -> List[GrantRecord]:
        await self.gate(query.term).wait()
        return await super().search_grants(query)


class RecordingView:
    """ResultsView that records what the UI would have displayed."""

    def __init__(self):
        self.cards: List[GrantRecord] = []
        self.batches: List[tuple] = []
        self.cleared = 0
        self.no_results = False
        self.count_text = ""
        self.loading_history: List[bool] = []

    def clear(self) -> None:
        self.cards.clear()
        self.cleared += 1
        self.no_results = False

    def append_batch(self, records, start_index: int) -> None:
        self.batches.append((start_index, list(records)))
        self.cards.extend(records)

    def show_no_results(self) -> None:
        self.no_results = True

    def update_count(self, text: str) -> None:
        self.count_text = text

    def set_loading(self, loading: bool) -> None:
        self.loading_history.append(loading)


@pytest.fixture
def sample_grants() -> List[GrantRecord]:
    """Ten grants; exactly three contain "bus" in a searchable field."""
    return [
        make_grant("FTA-2024-001", "Metro Transit Authority", "Bus and Bus Facilities",
                   2024, 2500000, "Replace 40 diesel coaches"),
        make_grant("FTA-2023-014", "Capital Area Transit", "Low or No Emission Vehicle",
                   2023, "1,750,000.60", "Battery-electric BUS replacement"),
        make_grant("FTA-BUS-2022-017", "Valley Regional Transit", "Urbanized Area Formula",
                   2022, 480000, "Maintenance facility roof"),
        make_grant("FTA-2024-002", "Washington State Ferries", "Passenger Ferry Grant",
                   2024, 3200000, "Harbor terminal rehabilitation"),
        make_grant("FTA-2024-003", "Sound Transit", "Capital Investment Grants",
                   2024, 9000000, "Light rail extension design"),
        make_grant("FTA-2023-004", "Chicago Transit Authority", "State of Good Repair",
                   2023, 1200000, "Rail signal modernization"),
        make_grant("FTA-2023-005", "Regional Transportation District", "Areas of Persistent Poverty",
                   2023, 250000, "Planning study for transit access"),
        make_grant("FTA-2022-006", "Port Authority", "Passenger Ferry Grant",
                   2022, 800000, "Vessel overhaul"),
        make_grant("FTA-2021-007", "Lane Transit District", "Low or No Emission Vehicle",
                   2021, 600000, "Hydrogen fueling station"),
        make_grant("FTA-2021-008", "Tri-County Metropolitan", "State of Good Repair",
                   2021, 150000, "Track inspection equipment"),
    ]


@pytest.fixture
def many_grants() -> List[GrantRecord]:
    """Fourteen grants, enough for three batches of six."""
    return [
        make_grant(f"FTA-{2024 - i // 5}-{i:03d}", year=2024 - i // 5, funding=10000 * (i + 1))
        for i in range(14)
    ]


@pytest.fixture
def store(sample_grants) -> InMemoryGrantStore:
    return InMemoryGrantStore(sample_grants)


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def test_config(tmp_path) -> Config:
    return Config(
        supabase_url="https://test.supabase.co",
        supabase_key="test-key-123",
        loading_delay_ms=0,
        export_dir=tmp_path / "exports",
        preferences_path=tmp_path / "prefs" / "preferences.json",
        log_file=None,
        _env_file=None,
    )
