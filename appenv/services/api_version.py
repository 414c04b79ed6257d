"""API version derivation from a semantic version string."""

from __future__ import annotations

import logging
import re

import semver

from appenv.models.options import ApiVersionOptions
from appenv.observability.redaction import redact_text

logger = logging.getLogger(__name__)

FALLBACK_VERSION = semver.Version(1, 0, 0)

# First run of up to three dot-separated digit groups not embedded in a
# longer number, e.g. "v2", "release-2.1", "2.1.3-beta".
_COERCE_RE = re.compile(r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")


def coerce_version(text: str | None) -> semver.Version | None:
    """Leniently parse `text` into a version; missing parts default to 0."""
    if not text:
        return None
    match = _COERCE_RE.search(str(text))
    if match is None:
        return None
    major, minor, patch = (int(part or 0) for part in match.groups())
    return semver.Version(major, minor, patch)


def format_api_version(version: semver.Version, options: ApiVersionOptions) -> str:
    """Render a version at the granularity requested by `options`.

    Major only by default; `minor` adds the minor part and `patch` (which
    wins over `minor`) adds both.
    """
    if options.patch:
        parts = [version.major, version.minor, version.patch]
    elif options.minor:
        parts = [version.major, version.minor]
    else:
        parts = [version.major]
    return options.prefix + ".".join(str(part) for part in parts)


def derive_api_version(raw: str | None, options: ApiVersionOptions) -> str:
    """Coerce `raw` (falling back to `options.version`) and format it."""
    version = coerce_version(raw)
    if version is None:
        logger.warning(
            "Cannot coerce API version %r; using %r",
            redact_text(raw or ""),
            options.version,
        )
        version = coerce_version(options.version) or FALLBACK_VERSION
    return format_api_version(version, options)
