"""Pydantic models for request dispatch.

The error envelope mirrors the AbuseIPDB v2 error contract:
    {"errors": [{"detail": "...", "status": 429}]}
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Constants
# =============================================================================

EMPTY_ERROR_DETAIL = "<empty>"

# =============================================================================
# Per-Request Override
# =============================================================================


class RequestOverride(BaseModel):
    """Caller-supplied data applied on top of the dispatcher defaults.

    Fields:
        headers: Headers set after the defaults (case-insensitive, last write wins)
        body: Raw request body; the default body is empty
        timeout: Per-request timeout in seconds; the client timeout applies if unset
    """

    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = Field(default=None, gt=0)

    model_config = {"frozen": True}


# =============================================================================
# Error Envelope
# =============================================================================


class ApiErrorEntry(BaseModel):
    """A single error reported by the API."""

    detail: str = EMPTY_ERROR_DETAIL
    status: int | None = None

    model_config = {"extra": "allow"}

    @field_validator("detail", mode="before")
    @classmethod
    def detail_as_text(cls, v: Any) -> str:
        if v is None:
            return EMPTY_ERROR_DETAIL
        return v if isinstance(v, str) else str(v)


class ApiErrorEnvelope(BaseModel):
    """Body of an unsuccessful API response."""

    errors: list[ApiErrorEntry] = Field(default_factory=list)

    model_config = {"extra": "allow"}
