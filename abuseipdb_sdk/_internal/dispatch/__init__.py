"""Request dispatch for the AbuseIPDB SDK.

WARNING: This is a low-level module used by AbuseIPDBClient.
Application code should call the client's endpoint methods instead.
"""

from abuseipdb_sdk._internal.dispatch.dispatcher import RequestDispatcher
from abuseipdb_sdk._internal.dispatch.models import (
    ApiErrorEntry,
    ApiErrorEnvelope,
    RequestOverride,
)

__all__ = [
    "RequestDispatcher",
    "RequestOverride",
    "ApiErrorEntry",
    "ApiErrorEnvelope",
]
