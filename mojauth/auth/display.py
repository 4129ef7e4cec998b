"""User-facing titles and descriptions for authentication errors."""

from __future__ import annotations

from dataclasses import dataclass

from mojauth.auth.errors import ErrorKind, MojauthError
from mojauth.config.schema import Config
from mojauth.i18n.catalog import has_key, tr


@dataclass(frozen=True)
class DisplayMessage:
    """Title/description pair shown to the user for an error."""

    title: str
    description: str


class UnmappedKindError(MojauthError, LookupError):
    """Raised when an ErrorKind has no display entry (enum/table drift)."""

    def __init__(self, kind: object):
        super().__init__(f"No display message for error kind: {kind!r}")
        self.kind = kind


_DISPLAY_KEYS: dict[ErrorKind, str] = {
    ErrorKind.METHOD_NOT_ALLOWED: "auth.method_not_allowed",
    ErrorKind.NOT_FOUND: "auth.not_found",
    ErrorKind.USER_MIGRATED: "auth.user_migrated",
    ErrorKind.INVALID_CREDENTIALS: "auth.invalid_credentials",
    ErrorKind.RATE_LIMITED: "auth.rate_limited",
    ErrorKind.INVALID_TOKEN: "auth.invalid_token",
    ErrorKind.ACCESS_TOKEN_HAS_PROFILE: "auth.access_token_has_profile",
    ErrorKind.CREDENTIALS_MISSING: "auth.credentials_missing",
    ErrorKind.INVALID_SALT_VERSION: "auth.invalid_salt_version",
    ErrorKind.UNSUPPORTED_MEDIA_TYPE: "auth.unsupported_media_type",
    ErrorKind.GONE: "auth.gone",
    ErrorKind.UNREACHABLE: "auth.unreachable",
    ErrorKind.NOT_PAID: "auth.not_paid",
    ErrorKind.UNKNOWN: "auth.unknown",
}


def resolve_display(
    kind: ErrorKind,
    *,
    locale: str | None = None,
    config: Config | None = None,
) -> DisplayMessage:
    """Return the display message for ``kind``.

    ``locale`` wins over ``config.display.locale``; with neither, English.

    Raises:
        UnmappedKindError: ``kind`` has no entry in the display table or the
            English catalog. This only happens when a kind is added without
            its messages.
    """
    try:
        prefix = _DISPLAY_KEYS.get(kind)
    except TypeError:
        raise UnmappedKindError(kind) from None
    if prefix is None or not (has_key(f"{prefix}.title") and has_key(f"{prefix}.desc")):
        raise UnmappedKindError(kind)
    if locale is None and config is not None:
        locale = config.display.locale
    return DisplayMessage(
        title=tr(f"{prefix}.title", locale=locale),
        description=tr(f"{prefix}.desc", locale=locale),
    )
