"""Mojang authentication error handling."""

from mojauth.auth.display import DisplayMessage, UnmappedKindError, resolve_display
from mojauth.auth.errors import (
    ErrorKind,
    MojauthError,
    RawErrorBody,
    classify_error,
    is_internal_error,
)
from mojauth.auth.response import (
    AuthResponse,
    ResponseStatus,
    error_response,
    response_from_error_body,
    response_from_exception,
    response_from_httpx,
)

__all__ = [
    "AuthResponse",
    "DisplayMessage",
    "ErrorKind",
    "MojauthError",
    "RawErrorBody",
    "ResponseStatus",
    "UnmappedKindError",
    "classify_error",
    "error_response",
    "is_internal_error",
    "resolve_display",
    "response_from_error_body",
    "response_from_exception",
    "response_from_httpx",
]
