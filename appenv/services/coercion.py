"""Pure coercion helpers for raw environment strings.

Nothing in this module touches the environment. Every helper accepts the raw
value (or a caller-supplied default) and returns a typed value without
raising: unparseable numbers become ``math.nan`` and unparseable objects
become ``None`` so the caller can substitute its default.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def map_to_number(value: Any) -> int | float:
    """Convert a value to a number.

    - Surrounding whitespace is ignored; an empty string is 0
    - 0x / 0o / 0b literals are read in their base
    - Integer literals give an int, other decimal literals a float
    - Anything else gives math.nan
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value

    text = str(value).strip()
    if not text:
        return 0
    if _RADIX_RE.fullmatch(text):
        return int(text, 0)
    if _INT_RE.fullmatch(text):
        return int(text)
    if text in _INFINITIES:
        return _INFINITIES[text]
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return math.nan


def map_to_string(value: Any) -> str:
    """Convert a value to its environment string form."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def to_storable(value: Any) -> str:
    """Render a value so it can be written into the environment store.

    Sequences are comma-joined (readable back with the array accessors) and
    mappings are JSON encoded (readable back with get_object).
    """
    if isinstance(value, Mapping):
        return json.dumps(dict(value), separators=(",", ":"), default=str)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(map_to_string(item) for item in value)
    return map_to_string(value)


def is_blank(raw: str | None) -> bool:
    """True for an absent or empty raw value."""
    return raw is None or raw == ""


def to_boolean(raw: str) -> bool:
    # Only the exact literal "false" is falsy; any other non-empty text is True.
    if raw == "false":
        return False
    if raw == "true":
        return True
    return bool(raw)


def normalize_sequence(value: Any) -> list[Any]:
    """Wrap a scalar default into a list; copy an iterable default."""
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def split_csv(raw: str) -> list[str]:
    return raw.split(",")


def compact_unique(values: Iterable[Any]) -> list[str]:
    """Trim each element, drop empties, and drop repeats (first one wins)."""
    trimmed = (map_to_string(value).strip() for value in values)
    return list(dict.fromkeys(item for item in trimmed if item))


def parse_object(raw: str | None) -> dict[str, Any] | None:
    """Parse a JSON object literal. Returns None when the text is not one."""
    if is_blank(raw):
        return None
    try:
        parsed = json.loads(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None
