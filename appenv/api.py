"""Module-level functions bound to a shared, process-wide `Env`.

The shared instance wraps os.environ and is created lazily on first use, so
importing appenv has no side effects. Tests swap it with `set_default_env`.
"""

from __future__ import annotations

import threading
from typing import Any

from appenv.models.options import ApiVersionOptions, ArrayOptions
from appenv.models.results import LoadResult
from appenv.services.coercion import map_to_number, map_to_string
from appenv.services.env_service import Env
from appenv.services.locale_service import DEFAULT_COUNTRY_CODE, DEFAULT_LOCALE

_DEFAULT_ENV_LOCK = threading.Lock()
_DEFAULT_ENV: Env | None = None


def get_default_env() -> Env:
    """Return the shared `Env`, creating it on first call."""
    global _DEFAULT_ENV
    env_ = _DEFAULT_ENV
    if env_ is not None:
        return env_
    with _DEFAULT_ENV_LOCK:
        if _DEFAULT_ENV is None:
            _DEFAULT_ENV = Env()
        return _DEFAULT_ENV


def set_default_env(env_: Env) -> Env:
    """Replace the shared `Env` (e.g. with one over an isolated store)."""
    global _DEFAULT_ENV
    with _DEFAULT_ENV_LOCK:
        _DEFAULT_ENV = env_
    return env_


def reset_default_env() -> None:
    """Drop the shared `Env`; the next call builds a fresh one."""
    global _DEFAULT_ENV
    with _DEFAULT_ENV_LOCK:
        _DEFAULT_ENV = None


def load() -> LoadResult:
    return get_default_env().load()


def get(key: str, default: Any = None) -> Any:
    return get_default_env().get(key, default)


# Shorthand kept for callers that read values as `env("KEY", default)`.
env = get


def set(key: str, value: Any) -> Any:  # noqa: A001 (shadows builtin)
    return get_default_env().set(key, value)


def clear(*keys: str) -> None:
    get_default_env().clear(*keys)


def get_string(key: str, default: Any = None) -> Any:
    return get_default_env().get_string(key, default)


def get_number(key: str, default: Any = None) -> Any:
    return get_default_env().get_number(key, default)


def get_boolean(key: str, default: Any = None) -> Any:
    return get_default_env().get_boolean(key, default)


def get_object(key: str, default: dict[str, Any] | None = None) -> dict[str, Any]:
    return get_default_env().get_object(key, default)


def get_array(
    key: str,
    default: Any = None,
    options: ArrayOptions | dict[str, Any] | None = None,
    *,
    merge: bool | None = None,
) -> list[str]:
    return get_default_env().get_array(key, default, options, merge=merge)


def get_strings(
    key: str,
    default: Any = None,
    options: ArrayOptions | dict[str, Any] | None = None,
    *,
    merge: bool | None = None,
) -> list[str]:
    return get_default_env().get_strings(key, default, options, merge=merge)


def get_numbers(
    key: str,
    default: Any = None,
    options: ArrayOptions | dict[str, Any] | None = None,
    *,
    merge: bool | None = None,
) -> list[int | float]:
    return get_default_env().get_numbers(key, default, options, merge=merge)


def get_string_set(
    key: str,
    default: Any = None,
    options: ArrayOptions | dict[str, Any] | None = None,
    *,
    merge: bool | None = None,
) -> list[str]:
    return get_default_env().get_string_set(key, default, options, merge=merge)


def is_env(name: str) -> bool:
    return get_default_env().is_env(name)


def is_test() -> bool:
    return get_default_env().is_test()


def is_development() -> bool:
    return get_default_env().is_development()


def is_production() -> bool:
    return get_default_env().is_production()


def is_local() -> bool:
    return get_default_env().is_local()


def is_heroku() -> bool:
    return get_default_env().is_heroku()


def api_version(
    options: ApiVersionOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> str:
    return get_default_env().api_version(options, **overrides)


def get_locale(default_locale: str = DEFAULT_LOCALE) -> str:
    return get_default_env().get_locale(default_locale)


def get_country_code(default_country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    return get_default_env().get_country_code(default_country_code)


__all__ = [
    "api_version",
    "clear",
    "env",
    "get",
    "get_array",
    "get_boolean",
    "get_country_code",
    "get_default_env",
    "get_locale",
    "get_number",
    "get_numbers",
    "get_object",
    "get_string",
    "get_string_set",
    "get_strings",
    "is_development",
    "is_env",
    "is_heroku",
    "is_local",
    "is_production",
    "is_test",
    "load",
    "map_to_number",
    "map_to_string",
    "reset_default_env",
    "set",
    "set_default_env",
]
