"""CSV serialization of grant results."""

import csv
import io
from datetime import date
from typing import Iterable

from ..models import GrantRecord

EXPORT_HEADERS = [
    "Fiscal Year",
    "Opportunity ID",
    "Grant Program",
    "Project Sponsor",
    "Funding Amount",
    "Project Description",
]

DEFAULT_PREFIX = "fta-grants"


def serialize_grants(records: Iterable[GrantRecord]) -> str:
    """Render records as CSV text.

    The header row is written bare. In data rows the fiscal year and the
    whole-dollar funding are unquoted; every text field is double-quoted
    with embedded quotes doubled. Rows are separated by newlines with no
    terminator after the last one.
    """
    buffer = io.StringIO()
    buffer.write(",".join(EXPORT_HEADERS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for record in records:
        writer.writerow([
            record.fiscal_year,
            record.opportunity_id,
            record.grant_program,
            record.project_sponsor,
            record.funding_whole,
            record.project_description,
        ])
    return buffer.getvalue().removesuffix("\n")


def export_filename(today: date, prefix: str = DEFAULT_PREFIX) -> str:
    """``<prefix>-YYYY-MM-DD.csv`` for the given calendar date."""
    return f"{prefix}-{today:%Y-%m-%d}.csv"
