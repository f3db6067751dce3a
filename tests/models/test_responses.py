"""Tests for response models."""

import pytest
from pydantic import ValidationError

from abuseipdb_sdk.models import (
    BlacklistEntry,
    CheckResult,
    DataEnvelope,
    ReportCategory,
    ReportResult,
    format_categories,
)


class TestCheckResult:
    """Tests for CheckResult model."""

    def test_accepts_camel_case(self):
        """Should map API keys onto snake_case fields."""
        result = CheckResult.model_validate({
            "ipAddress": "8.8.8.8",
            "abuseConfidenceScore": 0,
            "isWhitelisted": True,
            "numDistinctUsers": 4,
        })
        assert result.ip_address == "8.8.8.8"
        assert result.is_whitelisted is True
        assert result.num_distinct_users == 4

    def test_accepts_field_names(self):
        """Should also accept snake_case names."""
        result = CheckResult(ip_address="8.8.8.8", total_reports=3)
        assert result.total_reports == 3

    def test_defaults_for_non_verbose(self):
        """Should default the verbose-only fields."""
        result = CheckResult.model_validate({"ipAddress": "8.8.8.8"})
        assert result.reports == []
        assert result.country_name is None

    def test_requires_ip_address(self):
        """Should reject a payload without an address."""
        with pytest.raises(ValidationError):
            CheckResult.model_validate({"abuseConfidenceScore": 10})

    def test_serializes_with_aliases(self):
        """Should dump back to API keys when asked."""
        dumped = CheckResult(ip_address="8.8.8.8").model_dump(by_alias=True)
        assert dumped["ipAddress"] == "8.8.8.8"


class TestDataEnvelope:
    """Tests for DataEnvelope model."""

    def test_object_payload(self):
        """Should decode an object under data."""
        envelope = DataEnvelope[ReportResult].model_validate_json(
            '{"data": {"ipAddress": "127.0.0.1", "abuseConfidenceScore": 52}}'
        )
        assert envelope.data.abuse_confidence_score == 52
        assert envelope.meta is None

    def test_list_payload_with_meta(self):
        """Should decode a list under data and keep meta."""
        envelope = DataEnvelope[list[BlacklistEntry]].model_validate_json(
            '{"meta": {"generatedAt": "2020-09-24T19:54:11+00:00"},'
            ' "data": [{"ipAddress": "5.188.10.179"}]}'
        )
        assert envelope.meta == {"generatedAt": "2020-09-24T19:54:11+00:00"}
        assert envelope.data[0].ip_address == "5.188.10.179"

    def test_missing_data(self):
        """Should reject a body without data."""
        with pytest.raises(ValidationError):
            DataEnvelope[ReportResult].model_validate_json("{}")


class TestReportCategory:
    """Tests for report categories."""

    def test_values(self):
        """Should match the published category IDs."""
        assert ReportCategory.DNS_COMPROMISE == 1
        assert ReportCategory.PORT_SCAN == 14
        assert ReportCategory.SSH == 22
        assert ReportCategory.IOT_TARGETED == 23
        assert len(ReportCategory) == 23

    def test_format_categories(self):
        """Should join IDs with commas."""
        assert format_categories([ReportCategory.SSH, 18]) == "22,18"
