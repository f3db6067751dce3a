"""Public models for AbuseIPDB responses."""

from abuseipdb_sdk.models.categories import ReportCategory, format_categories
from abuseipdb_sdk.models.responses import (
    Blacklist,
    BlacklistEntry,
    BulkReportResult,
    CheckBlockResult,
    CheckResult,
    ClearAddressResult,
    DataEnvelope,
    InvalidReport,
    ReportedAddress,
    ReportEntry,
    ReportResult,
    ReportsPage,
)

__all__ = [
    "ReportCategory",
    "format_categories",
    "DataEnvelope",
    "CheckResult",
    "ReportEntry",
    "ReportsPage",
    "Blacklist",
    "BlacklistEntry",
    "ReportResult",
    "BulkReportResult",
    "InvalidReport",
    "ClearAddressResult",
    "CheckBlockResult",
    "ReportedAddress",
]
