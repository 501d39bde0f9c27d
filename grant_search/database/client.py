"""Supabase database client for the grant search interface."""

import logging
import os
import time
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError
from supabase import AsyncClient, acreate_client

from ..models import GrantQuery, GrantRecord
from ..query import apply_query

logger = logging.getLogger(__name__)


class GrantStore(Protocol):
    """Remote collaborator used by the search core."""

    async def search_grants(self, query: GrantQuery) -> List[GrantRecord]: ...

    async def fetch_distinct_years(self) -> List[int]: ...

    async def fetch_distinct_programs(self) -> List[str]: ...

    async def save_email(self, email: str) -> bool: ...


class SupabaseClient:
    """Client for the grants table, its distinct-value RPCs and the emails table."""

    def __init__(
        self,
        client: AsyncClient,
        grants_table: str = "grants",
        emails_table: str = "emails",
        years_rpc: str = "get_distinct_years",
        programs_rpc: str = "get_distinct_programs",
    ) -> None:
        """Wrap an already-connected Supabase async client.

        Args:
            client: Connected ``supabase.AsyncClient``.
            grants_table: Table holding grant records.
            emails_table: Append-only table of captured export addresses.
            years_rpc: Database function returning distinct fiscal years.
            programs_rpc: Database function returning distinct program names.
        """
        self._client = client
        self.grants_table = grants_table
        self.emails_table = emails_table
        self.years_rpc = years_rpc
        self.programs_rpc = programs_rpc

    @classmethod
    async def connect(
        cls,
        url: Optional[str] = None,
        key: Optional[str] = None,
        **tables: str,
    ) -> "SupabaseClient":
        """Connect from explicit args or env vars.

        Args:
            url: Supabase project URL (falls back to SUPABASE_URL env var).
            key: Supabase anon key (falls back to SUPABASE_KEY env var).
            **tables: Table and RPC name overrides passed to ``__init__``.
        """
        url = url or os.environ["SUPABASE_URL"]
        key = key or os.environ["SUPABASE_KEY"]
        client = await acreate_client(url, key)
        logger.info("Connected to Supabase project %s", url)
        return cls(client, **tables)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def search_grants(self, query: GrantQuery) -> List[GrantRecord]:
        """Run a grant search. Returns [] on any failure (never raises).

        Args:
            query: Request description produced by the query builder.

        Returns:
            Matching records in the store's order (newest fiscal year first).
        """
        start = time.monotonic()
        try:
            request = self._client.table(self.grants_table).select("*")
            response = await apply_query(request, query).execute()
        except Exception as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(
                "search_complete table=%s result=failure error=%s duration_ms=%.0f",
                self.grants_table,
                exc,
                duration_ms,
            )
            return []

        records = self._parse_records(response.data or [])
        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "search_complete table=%s result=success count=%d duration_ms=%.0f",
            self.grants_table,
            len(records),
            duration_ms,
        )
        return records

    async def fetch_distinct_years(self) -> List[int]:
        """Return every distinct fiscal year. Raises on remote failure."""
        response = await self._client.rpc(self.years_rpc).execute()
        return [int(row["fiscal_year"]) for row in response.data or []]

    async def fetch_distinct_programs(self) -> List[str]:
        """Return every distinct grant program name. Raises on remote failure."""
        response = await self._client.rpc(self.programs_rpc).execute()
        return [str(row["grant_program"]) for row in response.data or []]

    async def save_email(self, email: str) -> bool:
        """Append a captured address to the emails table.

        Args:
            email: Address already validated by the export gate.

        Returns:
            True if the row was stored, False if the insert failed.
        """
        record: Dict[str, Any] = {"email": email}
        try:
            await self._client.table(self.emails_table).insert([record]).execute()
        except Exception as exc:
            logger.error("Error saving email to %s: %s", self.emails_table, exc)
            return False
        logger.info("Saved export email to %s", self.emails_table)
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_records(self, rows: List[Dict[str, Any]]) -> List[GrantRecord]:
        records = []
        for row in rows:
            try:
                records.append(GrantRecord(**row))
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed grant row %s: %s",
                    row.get("opportunity_id", "unknown"),
                    exc.errors()[0].get("msg", exc),
                )
        return records
