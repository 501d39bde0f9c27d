"""Email-gated CSV export of the current result set."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Sequence

from ..database import GrantStore
from ..errors import (
    EmptyEmailError,
    ExportGateClosedError,
    InvalidEmailError,
    NoResultsToExportError,
)
from ..models import GrantRecord
from ..pagination import ResultState
from .csv_writer import DEFAULT_PREFIX, export_filename, serialize_grants

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email.strip()) is not None


def validate_email(email: str | None) -> str:
    """Return the trimmed address, or raise the matching user-input error."""
    address = (email or "").strip()
    if not address:
        raise EmptyEmailError()
    if not is_valid_email(address):
        raise InvalidEmailError()
    return address


@dataclass
class EmailGate:
    """The mandatory email-capture step in front of every export."""

    is_open: bool = False
    email_input: str = ""

    def open(self) -> None:
        self.is_open = True
        self.email_input = ""

    def close(self) -> None:
        self.is_open = False
        self.email_input = ""


class ExportPipeline:
    """Exports the complete result set, not just the rendered prefix."""

    def __init__(
        self,
        state: ResultState,
        store: GrantStore,
        export_dir: Path | str = ".",
        prefix: str = DEFAULT_PREFIX,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.state = state
        self._store = store
        self.export_dir = Path(export_dir)
        self.prefix = prefix
        self._today = today
        self.gate = EmailGate()

    def open_gate(self) -> None:
        """Start an export.

        Raises:
            NoResultsToExportError: If there is nothing to export.
        """
        if not self.state.full_set:
            raise NoResultsToExportError()
        self.gate.open()
        logger.debug("Email gate opened for %d grants", len(self.state.full_set))

    def cancel(self) -> None:
        self.gate.close()

    async def submit(self, email: str) -> Path:
        """Validate the address, record it, and write the export file.

        The gate stays open when validation fails so the user can retry.
        A failure to record the address is logged and does not stop the
        export.

        Returns:
            Path of the written CSV file.

        Raises:
            ExportGateClosedError: If ``open_gate`` was not called first.
            EmptyEmailError: If the address is blank.
            InvalidEmailError: If the address is malformed.
        """
        if not self.gate.is_open:
            raise ExportGateClosedError("Open the email gate before submitting an address")
        self.gate.email_input = email
        address = validate_email(email)

        try:
            await self._store.save_email(address)
        except Exception as exc:
            logger.error("Database error while saving export email: %s", exc)

        path = self.write(self.state.full_set)
        self.gate.close()
        return path

    def write(self, records: Sequence[GrantRecord]) -> Path:
        self.export_dir.mkdir(parents=True, exist_ok=True)
        path = self.export_dir / export_filename(self._today(), self.prefix)
        content = serialize_grants(records)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.info("Exported %d grants to %s", len(records), path)
        return path
