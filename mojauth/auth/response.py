"""Response envelope carrying classified authentication errors.

The transport layer owns the HTTP exchange; these helpers only turn what it
received (a decoded body, an ``httpx.Response`` or an ``httpx.HTTPError``)
into an ``AuthResponse`` with ``error_kind`` and ``is_internal_error`` set.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel

from mojauth.auth.display import DisplayMessage, resolve_display
from mojauth.auth.errors import ErrorKind, RawErrorBody, classify_error, is_internal_error
from mojauth.config.schema import Config


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class AuthResponse(BaseModel):
    """Result of an authentication server call."""

    status: ResponseStatus
    data: Any = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    is_internal_error: bool | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.status == ResponseStatus.SUCCESS

    @classmethod
    def success(cls, data: Any = None, status_code: int | None = 200) -> "AuthResponse":
        return cls(status=ResponseStatus.SUCCESS, data=data, status_code=status_code)

    def displayable(
        self,
        locale: str | None = None,
        *,
        config: Config | None = None,
    ) -> DisplayMessage | None:
        """Display message for an error response, None for a success."""
        if self.ok or self.error_kind is None:
            return None
        return resolve_display(self.error_kind, locale=locale, config=config)


def error_response(
    kind: ErrorKind,
    *,
    error: str | None = None,
    data: Any = None,
    status_code: int | None = None,
) -> AuthResponse:
    """Build an error response for a kind decided by the caller.

    Used for kinds the classifier never produces, such as
    ``ErrorKind.NOT_PAID`` (signalled by a 200 response body) and
    ``ErrorKind.UNREACHABLE``.
    """
    internal = is_internal_error(kind)
    if internal:
        # Tagged so configure_logger can route these to the developer log.
        logger.bind(internal_error=True).error(
            f"Internal authentication error {kind.value} (HTTP {status_code}): {error} body={data!r}"
        )
    else:
        logger.debug(f"Authentication error {kind.value} (HTTP {status_code})")
    return AuthResponse(
        status=ResponseStatus.ERROR,
        data=data,
        error=error,
        error_kind=kind,
        is_internal_error=internal,
        status_code=status_code,
    )


def response_from_error_body(payload: Any, *, status_code: int | None = None) -> AuthResponse:
    """Classify a decoded error body into an error response."""
    body = RawErrorBody.from_payload(payload)
    kind = classify_error(body)
    description = ": ".join(part for part in (body.error, body.error_message) if part) or None
    return error_response(kind, error=description, data=payload, status_code=status_code)


def response_from_httpx(response: httpx.Response) -> AuthResponse:
    """Wrap a received ``httpx.Response``; non-2xx bodies are classified."""
    try:
        payload = response.json() if response.content else None
    except ValueError:
        logger.warning(f"Authentication server returned a non-JSON body (HTTP {response.status_code})")
        payload = None

    if response.is_success:
        return AuthResponse.success(payload, status_code=response.status_code)
    return response_from_error_body(payload, status_code=response.status_code)


def response_from_exception(exc: httpx.HTTPError) -> AuthResponse:
    """Turn a transport exception into an error response."""
    if isinstance(exc, httpx.HTTPStatusError):
        return response_from_httpx(exc.response)

    logger.warning(f"Authentication server unreachable: {exc!r}")
    return error_response(ErrorKind.UNREACHABLE, error=str(exc) or type(exc).__name__)
