"""Tests for redaction logic."""

import httpx

from abuseipdb_sdk._internal.dispatch.redaction import REDACTED_VALUE, redact_headers


class TestRedactHeaders:
    """Tests for redact_headers function."""

    def test_redacts_api_key(self):
        """Should redact the Key header."""
        result = redact_headers({"Key": "secret123", "Accept": "application/json"})
        assert result["Key"] == REDACTED_VALUE
        assert result["Accept"] == "application/json"

    def test_case_insensitive(self):
        """Should match header names regardless of case."""
        result = redact_headers({"KEY": "a", "authorization": "Bearer b", "Cookie": "c"})
        assert result == {
            "KEY": REDACTED_VALUE,
            "authorization": REDACTED_VALUE,
            "Cookie": REDACTED_VALUE,
        }

    def test_accepts_pairs(self):
        """Should accept a sequence of (name, value) pairs."""
        result = redact_headers([("key", "secret"), ("user-agent", "sdk")])
        assert result == {"key": REDACTED_VALUE, "user-agent": "sdk"}

    def test_accepts_httpx_headers(self):
        """Should accept httpx.Headers."""
        headers = httpx.Headers({"Key": "secret", "Accept": "text/plain"})
        result = redact_headers(headers)
        assert "secret" not in result.values()
        assert "text/plain" in result.values()

    def test_does_not_mutate_original(self):
        """Should leave the input untouched."""
        original = {"Key": "secret"}
        redact_headers(original)
        assert original == {"Key": "secret"}

    def test_empty(self):
        """Should handle no headers."""
        assert redact_headers({}) == {}
