"""Localized message catalog for mojauth."""

from mojauth.i18n.catalog import available_locales, tr
from mojauth.i18n.locale import normalize_locale

__all__ = ["available_locales", "normalize_locale", "tr"]
