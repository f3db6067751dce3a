"""Request dispatcher shared by every AbuseIPDB endpoint."""

import sys

import httpx
from pydantic import ValidationError

from abuseipdb_sdk._internal.dispatch.models import (
    EMPTY_ERROR_DETAIL,
    ApiErrorEnvelope,
    RequestOverride,
)
from abuseipdb_sdk._internal.dispatch.query import (
    QueryParseError,
    encode_query,
    join_url,
    parse_query,
)
from abuseipdb_sdk._internal.dispatch.redaction import redact_headers
from abuseipdb_sdk._internal.http import API_ROOT, USER_AGENT
from abuseipdb_sdk.exceptions import (
    AbuseIPDBAPIError,
    AbuseIPDBMalformedQueryError,
    AbuseIPDBRequestError,
    AbuseIPDBTransportError,
)

AUTH_HEADER = "Key"
DEFAULT_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_ACCEPT = "application/json"


class RequestDispatcher:
    """Builds, authenticates and sends a single API request.

    Every failure is raised as a subclass of AbuseIPDBError:

        AbuseIPDBMalformedQueryError  query string could not be parsed
        AbuseIPDBRequestError         request could not be constructed
        AbuseIPDBTransportError       the send itself failed
        AbuseIPDBAPIError             the API answered outside 2xx

    The first two are raised before any network I/O. There is exactly one
    send attempt per call and no state is kept between calls.
    """

    def __init__(
        self,
        *,
        api_key: str,
        http_client: httpx.Client,
        api_root: str = API_ROOT,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_key: The AbuseIPDB API key, sent in the "Key" header.
            http_client: Transport used to send requests.
            api_root: Absolute URL every path is joined onto.
            debug: Enable debug logging to stderr.
        """
        self._api_key = api_key
        self._http_client = http_client
        self._api_root = api_root
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[abuseipdb-sdk] {message}", file=sys.stderr)

    def default_headers(self) -> dict[str, str]:
        """Headers set on every request before overrides are applied."""
        return {
            AUTH_HEADER: self._api_key,
            "User-Agent": USER_AGENT,
            "Content-Type": DEFAULT_CONTENT_TYPE,
            "Accept": DEFAULT_ACCEPT,
        }

    def merge_headers(self, override: RequestOverride | None) -> httpx.Headers:
        """Apply override headers on top of the defaults.

        Names are case-insensitive; an override replaces the default value
        rather than adding a second header.
        """
        headers = httpx.Headers(self.default_headers())
        if override is not None:
            for name, value in override.headers.items():
                headers[name] = value
        return headers

    def build_url(self, path: str, query: str) -> str:
        """Join path onto the API root and append the re-encoded query.

        Raises:
            AbuseIPDBMalformedQueryError: If the query cannot be parsed.
        """
        try:
            pairs = parse_query(query)
        except QueryParseError as e:
            raise AbuseIPDBMalformedQueryError(query, str(e)) from e

        url = join_url(self._api_root, path)
        encoded = encode_query(pairs)
        if encoded:
            url = f"{url}?{encoded}"
        return url

    def build_request(
        self,
        method: str,
        path: str,
        query: str = "",
        override: RequestOverride | None = None,
    ) -> httpx.Request:
        """Construct the request without sending it."""
        url = self.build_url(path, query)
        headers = self.merge_headers(override)

        body = b""
        timeout = httpx.USE_CLIENT_DEFAULT
        if override is not None:
            if override.body is not None:
                body = override.body
            if override.timeout is not None:
                timeout = override.timeout

        try:
            return self._http_client.build_request(
                method,
                url,
                content=body,
                headers=headers,
                timeout=timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise AbuseIPDBRequestError(f"error creating HTTP request: {e}") from e

    def send(
        self,
        method: str,
        path: str,
        query: str = "",
        override: RequestOverride | None = None,
    ) -> httpx.Response:
        """Send a request to the API.

        Args:
            method: HTTP method, passed through as given.
            path: Path relative to the API root, e.g. "check".
            query: Raw query string, e.g. "ipAddress=1.2.3.4&maxAgeInDays=30".
            override: Optional headers, body and timeout for this call.

        Returns:
            The 2xx response, unread. The caller owns it and must close it.

        Raises:
            AbuseIPDBError: One of the subclasses listed on the class.
        """
        try:
            request = self.build_request(method, path, query, override)
        except AbuseIPDBMalformedQueryError as e:
            self._log_debug(f"Rejected query: {e}")
            raise
        except AbuseIPDBRequestError as e:
            self._log_debug(f"Request construction failed: {e}")
            raise

        self._log_debug(
            f"Sending {request.method} {request.url} "
            f"headers={redact_headers(request.headers.multi_items())}"
        )

        try:
            response = self._http_client.send(request, stream=True)
        except httpx.RequestError as e:
            self._log_debug(f"Transport error: {e}")
            raise AbuseIPDBTransportError(f"error sending HTTP request: {e}") from e

        if 200 <= response.status_code <= 299:
            self._log_debug(f"Received status {response.status_code}")
            return response

        error = self._read_api_error(response)
        self._log_debug(f"API error: {error}")
        raise error

    def _read_api_error(self, response: httpx.Response) -> AbuseIPDBAPIError:
        """Read a non-2xx response and convert it into an API error."""
        try:
            content = response.read()
        except httpx.RequestError as e:
            raise AbuseIPDBTransportError(f"error reading HTTP response: {e}") from e
        finally:
            response.close()

        try:
            envelope = ApiErrorEnvelope.model_validate_json(content)
        except ValidationError:
            envelope = None

        if envelope is None or not envelope.errors:
            return AbuseIPDBAPIError(
                EMPTY_ERROR_DETAIL,
                response.status_code,
                http_status=response.status_code,
            )

        # Message reflects the first entry; the rest stay on .errors.
        first = envelope.errors[0]
        status = first.status if first.status is not None else response.status_code
        return AbuseIPDBAPIError(
            first.detail,
            status,
            http_status=response.status_code,
            errors=envelope.errors,
        )
