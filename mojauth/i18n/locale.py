"""Locale helpers for user-facing messages."""

from __future__ import annotations

import re

DEFAULT_LOCALE = "en"

_TAG_SPLIT_RE = re.compile(r"[-_.@]")


def normalize_locale(tag: str | None) -> str:
    """Reduce a locale tag such as ``fr_FR.UTF-8`` to its language code."""
    content = (tag or "").strip().lower()
    if not content:
        return DEFAULT_LOCALE

    language = _TAG_SPLIT_RE.split(content, maxsplit=1)[0]
    if language in ("c", "posix") or not language.isalpha():
        return DEFAULT_LOCALE
    return language
