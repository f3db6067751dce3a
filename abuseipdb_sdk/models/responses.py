"""Pydantic models for AbuseIPDB v2 responses.

Field names are snake_case; the API's camelCase keys are accepted through
aliases, e.g. ``abuseConfidenceScore`` populates ``abuse_confidence_score``.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# =============================================================================
# Base
# =============================================================================


class ApiModel(BaseModel):
    """Base for all response models."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
    }


class DataEnvelope(BaseModel, Generic[T]):
    """Successful response wrapper: {"data": ..., "meta": {...}}."""

    data: T
    meta: dict[str, Any] | None = None


# =============================================================================
# check / reports
# =============================================================================


class ReportEntry(ApiModel):
    """An individual abuse report."""

    reported_at: str | None = None
    comment: str | None = None
    categories: list[int] = Field(default_factory=list)
    reporter_id: int | None = None
    reporter_country_code: str | None = None
    reporter_country_name: str | None = None


class CheckResult(ApiModel):
    """Result of the check endpoint for a single IP address.

    ``country_name`` and ``reports`` are only populated for verbose checks.
    """

    ip_address: str
    is_public: bool | None = None
    ip_version: int | None = None
    is_whitelisted: bool | None = None
    abuse_confidence_score: int = 0
    country_code: str | None = None
    country_name: str | None = None
    usage_type: str | None = None
    isp: str | None = None
    domain: str | None = None
    hostnames: list[str] = Field(default_factory=list)
    is_tor: bool | None = None
    total_reports: int = 0
    num_distinct_users: int = 0
    last_reported_at: str | None = None
    reports: list[ReportEntry] = Field(default_factory=list)


class ReportsPage(ApiModel):
    """One page of the reports endpoint."""

    total: int = 0
    page: int = 1
    count: int = 0
    per_page: int | None = None
    last_page: int | None = None
    next_page_url: str | None = None
    previous_page_url: str | None = None
    results: list[ReportEntry] = Field(default_factory=list)


# =============================================================================
# blacklist
# =============================================================================


class BlacklistEntry(ApiModel):
    ip_address: str
    country_code: str | None = None
    abuse_confidence_score: int | None = None
    last_reported_at: str | None = None


class Blacklist(ApiModel):
    """Blacklist entries plus the time the list was generated."""

    generated_at: str | None = None
    entries: list[BlacklistEntry] = Field(default_factory=list)


# =============================================================================
# report / bulk-report / clear-address
# =============================================================================


class ReportResult(ApiModel):
    ip_address: str
    abuse_confidence_score: int | None = None


class InvalidReport(ApiModel):
    """A CSV row rejected by the bulk-report endpoint."""

    error: str
    input: str | None = None
    row_number: int | None = None


class BulkReportResult(ApiModel):
    saved_reports: int = 0
    invalid_reports: list[InvalidReport] = Field(default_factory=list)


class ClearAddressResult(ApiModel):
    num_reports_deleted: int = 0


# =============================================================================
# check-block
# =============================================================================


class ReportedAddress(ApiModel):
    ip_address: str
    num_reports: int = 0
    most_recent_report: str | None = None
    abuse_confidence_score: int | None = None
    country_code: str | None = None


class CheckBlockResult(ApiModel):
    """Result of the check-block endpoint for a CIDR network."""

    network_address: str
    netmask: str | None = None
    min_address: str | None = None
    max_address: str | None = None
    num_possible_hosts: int | None = None
    address_space_desc: str | None = None
    reported_address: list[ReportedAddress] = Field(default_factory=list)
