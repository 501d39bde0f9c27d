"""Tests for the shared pydantic models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from grant_search.models import (
    FilterOption,
    FilterSelection,
    GrantQuery,
    GrantRecord,
    ProgramOption,
    YearOption,
)
from grant_search.tests.conftest import make_grant


class TestGrantRecord:
    def test_funding_string_is_coerced(self):
        record = GrantRecord(fiscal_year="2023", funding="$1,250,000.75", opportunity_id="X")
        assert record.fiscal_year == 2023
        assert record.funding == pytest.approx(1250000.75)
        assert record.funding_whole == 1250000

    def test_null_text_fields_become_empty(self):
        record = GrantRecord(
            fiscal_year=2024,
            funding=None,
            project_sponsor=None,
            project_description=None,
            opportunity_id=None,
        )
        assert record.project_sponsor == ""
        assert record.project_description == ""
        assert record.opportunity_id == ""
        assert record.funding == 0

    def test_numeric_identifier_is_stringified(self):
        record = GrantRecord(fiscal_year=2024, opportunity_id=12345)
        assert record.opportunity_id == "12345"

    def test_negative_funding_rejected(self):
        with pytest.raises(ValidationError):
            GrantRecord(fiscal_year=2024, funding=-5)

    def test_records_are_immutable(self):
        record = make_grant("FTA-1")
        with pytest.raises(ValidationError):
            record.funding = 1

    def test_extra_columns_ignored(self):
        record = GrantRecord(fiscal_year=2024, id=7, created_at="2024-01-01")
        assert not hasattr(record, "created_at")


class TestFilterOption:
    def test_discriminator_selects_year(self):
        option = TypeAdapter(FilterOption).validate_python({"kind": "year", "value": "2024"})
        assert isinstance(option, YearOption)
        assert option.value == 2024
        assert option.label == "2024"

    def test_discriminator_selects_program(self):
        option = TypeAdapter(FilterOption).validate_python(
            {"kind": "program", "value": "Bus and Bus Facilities"}
        )
        assert isinstance(option, ProgramOption)

    def test_options_are_hashable_and_distinct_by_kind(self):
        assert YearOption(value=2024) == YearOption(value=2024)
        assert len({YearOption(value=2024), YearOption(value=2024), ProgramOption(value="2024")}) == 2


class TestFilterSelection:
    def test_default_is_empty(self):
        assert FilterSelection().is_empty

    def test_any_bound_makes_it_non_empty(self):
        assert not FilterSelection(funding_max=10).is_empty
        assert not FilterSelection(years=frozenset({2024})).is_empty


class TestGrantQueryMatches:
    @pytest.fixture
    def record(self):
        return make_grant(
            "FTA-BUS-2022-017",
            sponsor="Valley Regional Transit",
            program="Urbanized Area Formula",
            year=2022,
            funding=480000,
            description="Maintenance facility roof",
        )

    def test_empty_query_matches_everything(self, record):
        query = GrantQuery()
        assert not query.has_predicates
        assert query.matches(record)

    @pytest.mark.parametrize("term", ["valley", "URBANIZED", "facility", "bus-2022", "Roof"])
    def test_term_matches_any_text_field_case_insensitively(self, record, term):
        assert GrantQuery(term=term).matches(record)

    def test_term_missing_from_every_field_does_not_match(self, record):
        assert not GrantQuery(term="ferry").matches(record)

    def test_term_does_not_search_numeric_fields(self, record):
        assert not GrantQuery(term="480000").matches(record)

    def test_filters_combine_with_and(self, record):
        assert GrantQuery(term="valley", years=frozenset({2022})).matches(record)
        assert not GrantQuery(term="valley", years=frozenset({2023})).matches(record)
        assert not GrantQuery(programs=frozenset({"Passenger Ferry Grant"})).matches(record)

    def test_funding_bounds_are_inclusive(self, record):
        assert GrantQuery(funding_min=480000, funding_max=480000).matches(record)
        assert not GrantQuery(funding_min=480001).matches(record)
        assert not GrantQuery(funding_max=479999).matches(record)
