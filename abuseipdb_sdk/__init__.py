"""AbuseIPDB SDK for Python.

This SDK provides a typed client for the AbuseIPDB v2 API.

Public API:
    AbuseIPDBClient - Client exposing one method per endpoint
    RequestOverride - Per-call headers, body and timeout for raw requests
    ReportCategory - Report category IDs
    AbuseIPDBError - Base of every error raised by the SDK

Internal (not for direct use):
    _internal.dispatch - Request dispatcher
"""

from abuseipdb_sdk._internal.dispatch.models import RequestOverride
from abuseipdb_sdk._version import __version__
from abuseipdb_sdk.client import AbuseIPDBClient, get_client
from abuseipdb_sdk.exceptions import (
    AbuseIPDBAPIError,
    AbuseIPDBConfigError,
    AbuseIPDBError,
    AbuseIPDBMalformedQueryError,
    AbuseIPDBRequestError,
    AbuseIPDBTransportError,
    AbuseIPDBValidationError,
)
from abuseipdb_sdk.models import ReportCategory

__all__ = [
    "__version__",
    "AbuseIPDBClient",
    "get_client",
    "RequestOverride",
    "ReportCategory",
    "AbuseIPDBError",
    "AbuseIPDBAPIError",
    "AbuseIPDBConfigError",
    "AbuseIPDBMalformedQueryError",
    "AbuseIPDBRequestError",
    "AbuseIPDBTransportError",
    "AbuseIPDBValidationError",
]
