"""CSV export behind the email-capture gate."""

from .csv_writer import EXPORT_HEADERS, export_filename, serialize_grants
from .pipeline import EmailGate, ExportPipeline, is_valid_email, validate_email

__all__ = [
    "EXPORT_HEADERS",
    "EmailGate",
    "ExportPipeline",
    "export_filename",
    "is_valid_email",
    "serialize_grants",
    "validate_email",
]
