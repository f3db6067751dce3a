"""Public exceptions for the AbuseIPDB SDK."""

from typing import TYPE_CHECKING

# Imported for annotations only; dispatch imports this module at runtime.
if TYPE_CHECKING:
    from abuseipdb_sdk._internal.dispatch.models import ApiErrorEntry


class AbuseIPDBError(Exception):
    """Base exception for all AbuseIPDB SDK errors."""


class AbuseIPDBMalformedQueryError(AbuseIPDBError):
    """Query string could not be parsed. Raised before any network I/O."""

    def __init__(self, query: str, reason: str | None = None) -> None:
        message = f"malformed query: {query}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.query = query


class AbuseIPDBRequestError(AbuseIPDBError):
    """HTTP request could not be constructed. The cause is chained."""


class AbuseIPDBTransportError(AbuseIPDBError):
    """Sending the HTTP request failed. The cause is chained."""


class AbuseIPDBAPIError(AbuseIPDBError):
    """Error reported by the AbuseIPDB API (non-2xx response).

    Attributes:
        detail: Detail message of the first reported error.
        status_code: Status of the first reported error.
        http_status: HTTP status code of the response.
        errors: Every entry of the error envelope, in order.
    """

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        *,
        http_status: int | None = None,
        errors: list["ApiErrorEntry"] | None = None,
    ) -> None:
        super().__init__(f"{detail} [{status_code}]")
        self.detail = detail
        self.status_code = status_code
        self.http_status = http_status if http_status is not None else status_code
        self.errors = list(errors or [])


class AbuseIPDBConfigError(AbuseIPDBError):
    """Configuration error (missing env vars, invalid config)."""


class AbuseIPDBValidationError(AbuseIPDBError):
    """Validation error for request/response data."""
