"""Text formatters for grant cards, the detail view and result counts."""

from __future__ import annotations

from rich.markup import escape

from ..models import GrantRecord


def format_currency(amount: float | int) -> str:
    """Whole-dollar USD, e.g. ``$1,250,000``."""
    whole = int(amount)
    sign = "-" if whole < 0 else ""
    return f"{sign}${abs(whole):,}"


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def results_count_text(displayed: int, total: int) -> str:
    if total == 0:
        return "No grants found"
    if displayed >= total:
        return f"{total} grant{_plural(total)} found"
    return f"Showing {displayed} of {total} grant{_plural(total)}"


NO_RESULTS_MESSAGE = "No grants found matching your criteria."


def card_markup(record: GrantRecord) -> str:
    """Rich markup for one result card."""
    return (
        f"[bold]{escape(record.project_sponsor)}[/bold]  [dim]{record.fiscal_year}[/dim]\n"
        f"[italic]{escape(record.grant_program)}[/italic]\n"
        f"{escape(record.project_description)}\n"
        f"[green]{format_currency(record.funding)}[/green]  "
        f"[dim]{escape(record.opportunity_id)}[/dim]"
    )


def detail_fields(record: GrantRecord) -> list[tuple[str, str]]:
    """Label/value pairs shown in the grant detail view."""
    return [
        ("Project Sponsor", record.project_sponsor),
        ("Grant Program", record.grant_program),
        ("Fiscal Year", str(record.fiscal_year)),
        ("Opportunity ID", record.opportunity_id),
        ("Funding Amount", format_currency(record.funding)),
        ("Project Description", record.project_description),
    ]
