"""Authentication error classification.

Maps the error bodies returned by the Mojang authentication server onto a
closed set of ``ErrorKind`` values.

See https://wiki.vg/Authentication#Errors
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MojauthError(Exception):
    """Base class for errors raised by mojauth."""


class ErrorKind(str, Enum):
    METHOD_NOT_ALLOWED = "method_not_allowed"              # INTERNAL
    NOT_FOUND = "not_found"                                # INTERNAL
    USER_MIGRATED = "user_migrated"
    INVALID_CREDENTIALS = "invalid_credentials"
    RATE_LIMITED = "rate_limited"
    INVALID_TOKEN = "invalid_token"
    ACCESS_TOKEN_HAS_PROFILE = "access_token_has_profile"  # INTERNAL
    CREDENTIALS_MISSING = "credentials_missing"            # INTERNAL
    INVALID_SALT_VERSION = "invalid_salt_version"          # INTERNAL
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"      # INTERNAL
    GONE = "gone"
    UNREACHABLE = "unreachable"  # Set by the transport, never classified
    NOT_PAID = "not_paid"        # Upstream answers 200 with a special body
    UNKNOWN = "unknown"


class RawErrorBody(BaseModel):
    """Error payload as decoded from the authentication server."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    error: str = ""
    error_message: str = Field(default="", alias="errorMessage")
    cause: str | None = None

    @field_validator("error", "error_message", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("cause", mode="before")
    @classmethod
    def _coerce_cause(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return value if isinstance(value, str) else str(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "RawErrorBody":
        """Build a body from any decoded JSON value; non-objects become empty."""
        if isinstance(payload, RawErrorBody):
            return payload
        if not isinstance(payload, Mapping):
            return cls()
        return cls.model_validate(
            {key: payload.get(key) for key in ("error", "errorMessage", "cause")}
        )


_SIMPLE_ERRORS: dict[str, ErrorKind] = {
    "Method Not Allowed": ErrorKind.METHOD_NOT_ALLOWED,
    "Not Found": ErrorKind.NOT_FOUND,
    "Unsupported Media Type": ErrorKind.UNSUPPORTED_MEDIA_TYPE,
    "ResourceException": ErrorKind.GONE,
    "GoneException": ErrorKind.GONE,
}

# "Invalid credentials." is also what the server sends when rate limiting.
_FORBIDDEN_MESSAGES: dict[str, ErrorKind] = {
    "Invalid credentials. Invalid username or password.": ErrorKind.INVALID_CREDENTIALS,
    "Invalid credentials.": ErrorKind.RATE_LIMITED,
    "Invalid token.": ErrorKind.INVALID_TOKEN,
    "Forbidden": ErrorKind.CREDENTIALS_MISSING,
}

_ILLEGAL_ARGUMENT_MESSAGES: dict[str, ErrorKind] = {
    "Access token already has a profile assigned.": ErrorKind.ACCESS_TOKEN_HAS_PROFILE,
    "Invalid salt version": ErrorKind.INVALID_SALT_VERSION,
}

# These indicate problems with our requests and not with the user's data.
_INTERNAL_KINDS: frozenset[ErrorKind] = frozenset({
    ErrorKind.METHOD_NOT_ALLOWED,        # Wrong HTTP method for the endpoint
    ErrorKind.NOT_FOUND,                 # Endpoint moved
    ErrorKind.ACCESS_TOKEN_HAS_PROFILE,  # Profile selection is not supported
    ErrorKind.CREDENTIALS_MISSING,       # UI should never submit this
    ErrorKind.INVALID_SALT_VERSION,
    ErrorKind.UNSUPPORTED_MEDIA_TYPE,    # Body was not sent as application/json
})


def classify_error(body: RawErrorBody | Mapping[str, Any]) -> ErrorKind:
    """Classify an authentication error body into a specific kind."""
    if not isinstance(body, RawErrorBody):
        body = RawErrorBody.from_payload(body)

    if body.error == "ForbiddenOperationException":
        if body.cause == "UserMigratedException":
            return ErrorKind.USER_MIGRATED
        return _FORBIDDEN_MESSAGES.get(body.error_message, ErrorKind.UNKNOWN)

    if body.error == "IllegalArgumentException":
        return _ILLEGAL_ARGUMENT_MESSAGES.get(body.error_message, ErrorKind.UNKNOWN)

    return _SIMPLE_ERRORS.get(body.error, ErrorKind.UNKNOWN)


def is_internal_error(kind: ErrorKind) -> bool:
    """Return True when the error points at a bug in our own request."""
    return kind in _INTERNAL_KINDS
