"""User-facing client for the AbuseIPDB v2 API.

Example usage:
    from abuseipdb_sdk import AbuseIPDBClient, ReportCategory

    with AbuseIPDBClient(api_key="your-api-key") as client:
        result = client.check("118.25.6.39", max_age_in_days=90)
        print(result.abuse_confidence_score)

        client.report(
            "127.0.0.1",
            [ReportCategory.SSH, ReportCategory.BRUTE_FORCE],
            comment="SSH login attempts with user root.",
        )
"""

import os
from datetime import datetime
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from abuseipdb_sdk._internal.dispatch import RequestDispatcher, RequestOverride
from abuseipdb_sdk._internal.http import API_ROOT, create_http_client
from abuseipdb_sdk.exceptions import (
    AbuseIPDBConfigError,
    AbuseIPDBTransportError,
    AbuseIPDBValidationError,
)
from abuseipdb_sdk.models import (
    Blacklist,
    BlacklistEntry,
    BulkReportResult,
    CheckBlockResult,
    CheckResult,
    ClearAddressResult,
    DataEnvelope,
    ReportCategory,
    ReportResult,
    ReportsPage,
    format_categories,
)

DEFAULT_TIMEOUT_MS = 30000
COMMENT_MAX_LENGTH = 1024

M = TypeVar("M", bound=BaseModel)


def _build_query(params: dict[str, Any]) -> str:
    """Encode parameters, dropping the ones left unset."""
    return urlencode({key: value for key, value in params.items() if value is not None})


def _flag(enabled: bool) -> str | None:
    # Presence-only flags such as "verbose" are sent with an empty value.
    return "" if enabled else None


class AbuseIPDBClient:
    """Client for the AbuseIPDB v2 API.

    Every endpoint method goes through a single RequestDispatcher and raises
    an AbuseIPDBError subclass on failure. The client holds no mutable state
    and may be shared between threads.
    """

    def __init__(
        self,
        api_key: str,
        *,
        api_root: str = API_ROOT,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: The AbuseIPDB API key.
            api_root: Base URL of the v2 API.
            timeout_ms: Request timeout in milliseconds. Ignored when
                http_client is given.
            http_client: Optional transport to use instead of a new one. The
                caller stays responsible for closing it.
            debug: Enable debug logging to stderr.

        Raises:
            AbuseIPDBConfigError: If api_key is empty.
        """
        if not api_key:
            raise AbuseIPDBConfigError("api_key must not be empty")

        self._api_root = api_root
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(timeout=timeout_ms / 1000)
        self._dispatcher = RequestDispatcher(
            api_key=api_key,
            http_client=self._http_client,
            api_root=api_root,
            debug=debug,
        )

    @classmethod
    def from_env(cls, *, http_client: httpx.Client | None = None) -> "AbuseIPDBClient":
        """Create a client from environment variables.

        Required environment variables:
            ABUSEIPDB_API_KEY: The API key.

        Optional environment variables:
            ABUSEIPDB_API_ROOT: Base URL of the v2 API.
            ABUSEIPDB_TIMEOUT_MS: Request timeout in milliseconds.
            ABUSEIPDB_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured AbuseIPDBClient.

        Raises:
            AbuseIPDBConfigError: If the API key is missing or the timeout is
                not an integer.
        """
        api_key = os.environ.get("ABUSEIPDB_API_KEY")
        if not api_key:
            raise AbuseIPDBConfigError("ABUSEIPDB_API_KEY is not set")

        api_root = os.environ.get("ABUSEIPDB_API_ROOT") or API_ROOT
        debug = os.environ.get("ABUSEIPDB_DEBUG", "") == "1"

        raw_timeout = os.environ.get("ABUSEIPDB_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
        try:
            timeout_ms = int(raw_timeout)
        except ValueError as e:
            raise AbuseIPDBConfigError(
                f"ABUSEIPDB_TIMEOUT_MS must be an integer, got {raw_timeout!r}"
            ) from e

        return cls(
            api_key,
            api_root=api_root,
            timeout_ms=timeout_ms,
            http_client=http_client,
            debug=debug,
        )

    def __repr__(self) -> str:
        return f"AbuseIPDBClient(api_root={self._api_root!r}, api_key='[REDACTED]')"

    def __enter__(self) -> "AbuseIPDBClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    # =========================================================================
    # Raw Access
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        query: str = "",
        override: RequestOverride | None = None,
    ) -> httpx.Response:
        """Send an arbitrary request through the dispatcher.

        Use for endpoints without a dedicated method. The returned response is
        unread; close it when done.
        """
        return self._dispatcher.send(method, path, query, override)

    def _read(self, response: httpx.Response) -> bytes:
        try:
            return response.read()
        except httpx.RequestError as e:
            raise AbuseIPDBTransportError(f"error reading HTTP response: {e}") from e
        finally:
            response.close()

    def _decode(self, response: httpx.Response, model: type[M]) -> M:
        content = self._read(response)
        try:
            return model.model_validate_json(content)
        except ValidationError as e:
            raise AbuseIPDBValidationError(f"unexpected response body: {e}") from e

    # =========================================================================
    # Endpoints
    # =========================================================================

    def check(
        self,
        ip: str,
        max_age_in_days: int | None = None,
        verbose: bool = False,
    ) -> CheckResult:
        """Check the abuse record of a single IP address.

        Args:
            ip: IPv4 or IPv6 address.
            max_age_in_days: Only consider reports newer than this (1-365).
            verbose: Include country name and the individual reports.

        Returns:
            The CheckResult for the address.
        """
        query = _build_query({
            "ipAddress": ip,
            "maxAgeInDays": max_age_in_days,
            "verbose": _flag(verbose),
        })
        response = self._dispatcher.send("GET", "check", query)
        return self._decode(response, DataEnvelope[CheckResult]).data

    def reports(
        self,
        ip: str,
        max_age_in_days: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ReportsPage:
        """Fetch one page of the reports filed against an IP address."""
        query = _build_query({
            "ipAddress": ip,
            "maxAgeInDays": max_age_in_days,
            "page": page,
            "perPage": per_page,
        })
        response = self._dispatcher.send("GET", "reports", query)
        return self._decode(response, DataEnvelope[ReportsPage]).data

    def _blacklist_query(
        self,
        confidence_minimum: int | None,
        limit: int | None,
        only_countries: list[str] | None,
        except_countries: list[str] | None,
        ip_version: int | None,
        plaintext: bool = False,
    ) -> str:
        return _build_query({
            "confidenceMinimum": confidence_minimum,
            "limit": limit,
            "onlyCountries": ",".join(only_countries) if only_countries else None,
            "exceptCountries": ",".join(except_countries) if except_countries else None,
            "ipVersion": ip_version,
            "plaintext": _flag(plaintext),
        })

    def blacklist(
        self,
        confidence_minimum: int | None = None,
        limit: int | None = None,
        only_countries: list[str] | None = None,
        except_countries: list[str] | None = None,
        ip_version: int | None = None,
    ) -> Blacklist:
        """Fetch the blacklist of the most reported IP addresses.

        Args:
            confidence_minimum: Minimum abuse confidence score (25-100).
            limit: Maximum number of entries.
            only_countries: ISO 3166 alpha-2 codes to include.
            except_countries: ISO 3166 alpha-2 codes to exclude.
            ip_version: 4 or 6 to restrict the address family.

        Returns:
            The Blacklist with its generation timestamp.
        """
        query = self._blacklist_query(
            confidence_minimum, limit, only_countries, except_countries, ip_version
        )
        response = self._dispatcher.send("GET", "blacklist", query)
        envelope = self._decode(response, DataEnvelope[list[BlacklistEntry]])
        meta = envelope.meta or {}
        return Blacklist(generated_at=meta.get("generatedAt"), entries=envelope.data)

    def blacklist_plaintext(
        self,
        confidence_minimum: int | None = None,
        limit: int | None = None,
        only_countries: list[str] | None = None,
        except_countries: list[str] | None = None,
        ip_version: int | None = None,
    ) -> list[str]:
        """Fetch the blacklist as bare IP addresses, one per entry."""
        query = self._blacklist_query(
            confidence_minimum,
            limit,
            only_countries,
            except_countries,
            ip_version,
            plaintext=True,
        )
        override = RequestOverride(headers={"Accept": "text/plain"})
        response = self._dispatcher.send("GET", "blacklist", query, override)
        text = self._read(response).decode("utf-8", errors="replace")
        return [line.strip() for line in text.splitlines() if line.strip()]

    def report(
        self,
        ip: str,
        categories: list[int | ReportCategory],
        comment: str | None = None,
        timestamp: datetime | str | None = None,
    ) -> ReportResult:
        """Report an IP address for abusive behavior.

        Args:
            ip: IPv4 or IPv6 address to report.
            categories: At least one category ID.
            comment: Optional description of the activity.
            timestamp: When the attack happened (ISO 8601 or datetime).

        Returns:
            The reported address and its updated confidence score.

        Raises:
            AbuseIPDBValidationError: If categories is empty or the comment
                is longer than 1024 characters.
        """
        if not categories:
            raise AbuseIPDBValidationError("at least one report category is required")
        if comment is not None and len(comment) > COMMENT_MAX_LENGTH:
            raise AbuseIPDBValidationError(
                f"comment must be at most {COMMENT_MAX_LENGTH} characters"
            )
        if isinstance(timestamp, datetime):
            timestamp = timestamp.isoformat()

        query = _build_query({
            "ip": ip,
            "categories": format_categories(categories),
            "comment": comment,
            "timestamp": timestamp,
        })
        response = self._dispatcher.send("POST", "report", query)
        return self._decode(response, DataEnvelope[ReportResult]).data

    def check_block(
        self,
        network: str,
        max_age_in_days: int | None = None,
    ) -> CheckBlockResult:
        """Check the reported addresses inside a CIDR network, e.g. "127.0.0.1/24"."""
        query = _build_query({"network": network, "maxAgeInDays": max_age_in_days})
        response = self._dispatcher.send("GET", "check-block", query)
        return self._decode(response, DataEnvelope[CheckBlockResult]).data

    def bulk_report(self, csv: str | bytes, filename: str = "report.csv") -> BulkReportResult:
        """Submit many reports at once from a CSV document.

        The CSV uses the columns IP, Categories, ReportDate, Comment.
        """
        if isinstance(csv, str):
            csv = csv.encode("utf-8")

        # Let httpx encode the multipart form, then send it as a raw body.
        form = httpx.Request(
            "POST",
            self._api_root,
            files={"csv": (filename, csv, "text/csv")},
        )
        override = RequestOverride(
            headers={"Content-Type": form.headers["Content-Type"]},
            body=form.read(),
        )
        response = self._dispatcher.send("POST", "bulk-report", "", override)
        return self._decode(response, DataEnvelope[BulkReportResult]).data

    def clear_address(self, ip: str) -> ClearAddressResult:
        """Delete the reports this account has filed against an IP address."""
        query = _build_query({"ipAddress": ip})
        response = self._dispatcher.send("DELETE", "clear-address", query)
        return self._decode(response, DataEnvelope[ClearAddressResult]).data


def get_client() -> AbuseIPDBClient:
    """Get a client configured from environment variables.

    Returns:
        A configured AbuseIPDBClient instance.

    Raises:
        AbuseIPDBConfigError: If ABUSEIPDB_API_KEY is not set.
    """
    return AbuseIPDBClient.from_env()
