"""Observability utilities (log redaction)."""

from appenv.observability.redaction import looks_sensitive_key, redact_text, redact_value

__all__ = [
    "looks_sensitive_key",
    "redact_text",
    "redact_value",
]
