"""OS locale detection and country code derivation."""

from __future__ import annotations

import locale
import logging
import re

from appenv.services.runtime_env_service import RuntimeEnvService

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "sw"
DEFAULT_COUNTRY_CODE = "TZ"

# Checked in this order, matching POSIX precedence for messages.
LOCALE_ENV_KEYS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")

_NEUTRAL_LOCALES = {"C", "POSIX"}
_ENCODING_SUFFIX_RE = re.compile(r"[.:@].*$")


def _clean_locale(raw: str | None) -> str | None:
    if not raw:
        return None
    # LANGUAGE may hold a priority list ("de_DE:en_US").
    value = _ENCODING_SUFFIX_RE.sub("", raw.strip())
    if not value or value in _NEUTRAL_LOCALES:
        return None
    return value


def detect_os_locale(store: RuntimeEnvService) -> str | None:
    """Best-effort OS locale, e.g. "en_US"; None when nothing is configured."""
    for key in LOCALE_ENV_KEYS:
        value = _clean_locale(store.get(key))
        if value:
            return value

    try:
        language_code, _encoding = locale.getlocale()
    except ValueError as e:
        logger.debug("locale.getlocale() failed: %s", e)
        return None
    return _clean_locale(language_code)


def country_code_from_locale(value: str, default: str) -> str:
    """Last segment of a locale split on "_" or "-" ("-" wins if both apply)."""
    country_code = default
    for separator in ("_", "-"):
        parts = value.split(separator)
        if len(parts) > 1:
            country_code = parts[-1]
    return country_code
