"""Typed access to environment variables.

`Env` owns an environment store and the loader that seeds it from `.env`.
Every accessor loads first, so a fresh process sees file-based values before
its first lookup.

Default handling follows a falsy-passthrough policy for scalars: an absent
*or empty* value yields the caller's default unchanged (the default is never
coerced). Read paths never raise; malformed numbers become ``math.nan`` and
malformed objects fall back to the default.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from appenv.config import AppEnvSettings
from appenv.enums import EnvKey, NodeEnv, RuntimeEnv
from appenv.models.options import ApiVersionOptions, ArrayOptions
from appenv.models.results import LoadResult
from appenv.observability.redaction import redact_value
from appenv.services.api_version import derive_api_version
from appenv.services.coercion import (
    compact_unique,
    is_blank,
    map_to_number,
    map_to_string,
    normalize_sequence,
    parse_object,
    split_csv,
    to_boolean,
    to_storable,
)
from appenv.services.env_loader import EnvFileLoader, EnvFileReader
from appenv.services.locale_service import (
    DEFAULT_COUNTRY_CODE,
    DEFAULT_LOCALE,
    country_code_from_locale,
    detect_os_locale,
)
from appenv.services.runtime_env_service import RuntimeEnvService

logger = logging.getLogger(__name__)


class EnvKeyError(ValueError):
    """Raised when a write is attempted with an empty key."""


class Env:
    """Typed accessors and classification predicates over one store."""

    def __init__(
        self,
        store: RuntimeEnvService | MutableMapping[str, str] | None = None,
        *,
        loader: EnvFileLoader | None = None,
        settings: AppEnvSettings | None = None,
        reader: EnvFileReader | None = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            store: Environment store, or a plain mapping to wrap. Defaults to
                os.environ.
            loader: Pre-built loader. When omitted one is created over `store`
                from `settings` and `reader`.
            settings: Library settings for the created loader.
            reader: File reader for the created loader (tests use this to
                count reads).
        """
        if not isinstance(store, RuntimeEnvService):
            store = RuntimeEnvService(store)
        self.store = store
        self.loader = loader or EnvFileLoader(store, settings=settings, reader=reader)

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def load(self) -> LoadResult:
        return self.loader.load()

    def _raw(self, key: str) -> str | None:
        self.load()
        return self.store.get(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw string at `key`, or `default` when absent."""
        raw = self._raw(key)
        return default if raw is None else raw

    def set(self, key: str, value: Any) -> Any:
        """Store `value` at `key`, overwriting any existing value.

        Non-string values are rendered first: booleans as "true"/"false",
        sequences comma-joined, mappings as JSON. Setting None removes the key.

        Returns:
            The value as passed in.

        Raises:
            EnvKeyError: If `key` is empty.
        """
        if not key:
            raise EnvKeyError("key is required")
        self.load()
        if value is None:
            self.store.unset(key)
        else:
            self.store.set(key, to_storable(value))
        return value

    def clear(self, *keys: str) -> None:
        """Remove `keys` from the store; missing keys are ignored."""
        self.load()
        for key in keys:
            self.store.unset(key)

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def get_string(self, key: str, default: Any = None) -> Any:
        raw = self._raw(key)
        if is_blank(raw):
            return default
        return map_to_string(raw)

    def get_number(self, key: str, default: Any = None) -> Any:
        """Return the value at `key` as a number.

        Non-numeric text yields math.nan rather than an error.
        """
        raw = self._raw(key)
        if is_blank(raw):
            return default
        return map_to_number(raw)

    def get_boolean(self, key: str, default: Any = None) -> Any:
        """Return the value at `key` as a boolean.

        "false" maps to False, "true" to True, and any other non-empty text
        to True. The comparison is exact, so "False" is truthy.
        """
        raw = self._raw(key)
        if is_blank(raw):
            return default
        return to_boolean(raw)

    def get_object(self, key: str, default: dict[str, Any] | None = None) -> dict[str, Any]:
        """Return the JSON object stored at `key`.

        Absent, malformed, and non-object values return `default` (a new
        empty dict when no default is given).
        """
        raw = self._raw(key)
        parsed = parse_object(raw)
        if parsed is not None:
            return parsed
        if not is_blank(raw):
            logger.debug(
                "Ignoring non-object value for %s: %s", key, redact_value(key, raw)
            )
        return {} if default is None else default

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------

    def get_array(
        self,
        key: str,
        default: Any = None,
        options: ArrayOptions | dict[str, Any] | None = None,
        *,
        merge: bool | None = None,
    ) -> list[str]:
        """Return the comma-separated value at `key` as a list of strings.

        Elements are trimmed, empty ones dropped, and repeats removed with the
        first occurrence kept.

        Args:
            key: Variable name.
            default: A sequence, or a scalar treated as a one-element sequence.
            options: `ArrayOptions` or an equivalent dict.
            merge: Shortcut for `options.merge`. With merge on (the default)
                the default elements come first, followed by the environment
                elements. With merge off a present value replaces the default.

        Returns:
            List of unique, non-empty strings.
        """
        opts = ArrayOptions.coerce(options, **({} if merge is None else {"merge": merge}))
        values = normalize_sequence(default)

        raw = self._raw(key)
        if not is_blank(raw):
            env_values = split_csv(raw)  # type: ignore[arg-type]
            values = [*values, *env_values] if opts.merge else env_values

        return compact_unique(values)

    def get_strings(
        self,
        key: str,
        default: Any = None,
        options: ArrayOptions | dict[str, Any] | None = None,
        *,
        merge: bool | None = None,
    ) -> list[str]:
        values = self.get_array(key, default, options, merge=merge)
        return [map_to_string(value) for value in values]

    def get_numbers(
        self,
        key: str,
        default: Any = None,
        options: ArrayOptions | dict[str, Any] | None = None,
        *,
        merge: bool | None = None,
    ) -> list[int | float]:
        values = self.get_array(key, default, options, merge=merge)
        return [map_to_number(value) for value in values]

    def get_string_set(
        self,
        key: str,
        default: Any = None,
        options: ArrayOptions | dict[str, Any] | None = None,
        *,
        merge: bool | None = None,
    ) -> list[str]:
        """Like `get_strings`, with uniqueness enforced after merging."""
        return compact_unique(self.get_strings(key, default, options, merge=merge))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_env(self, name: str) -> bool:
        """Case-insensitive comparison of NODE_ENV with `name`."""
        current = self.get(EnvKey.NODE_ENV) or ""
        return current.lower() == str(name or "").lower()

    def is_test(self) -> bool:
        return self.is_env(NodeEnv.TEST)

    def is_development(self) -> bool:
        return self.is_env(NodeEnv.DEVELOPMENT)

    def is_production(self) -> bool:
        return self.is_env(NodeEnv.PRODUCTION)

    def is_local(self) -> bool:
        return self.is_test() or self.is_development()

    def is_heroku(self) -> bool:
        runtime = self.get(EnvKey.RUNTIME_ENV) or ""
        return runtime.lower() == RuntimeEnv.HEROKU

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def api_version(
        self,
        options: ApiVersionOptions | dict[str, Any] | None = None,
        **overrides: Any,
    ) -> str:
        """Derive a prefixed API version from API_VERSION.

        Args:
            options: `ApiVersionOptions` or an equivalent dict.
            **overrides: Individual option values (version, prefix, major,
                minor, patch) applied over `options`.

        Returns:
            e.g. "v1" by default, "v1.0" with minor, "v1.0.0" with patch.
        """
        opts = ApiVersionOptions.coerce(options, **overrides)
        raw = self.get_string(EnvKey.API_VERSION, opts.version)
        return derive_api_version(raw, opts)

    def get_locale(self, default_locale: str = DEFAULT_LOCALE) -> str:
        """OS locale, else `default_locale`; DEFAULT_LOCALE overrides both."""
        self.load()
        detected = detect_os_locale(self.store) or default_locale
        return self.get_string(EnvKey.DEFAULT_LOCALE, detected)

    def get_country_code(self, default_country_code: str = DEFAULT_COUNTRY_CODE) -> str:
        """Country part of the locale; DEFAULT_COUNTRY_CODE overrides it."""
        derived = country_code_from_locale(self.get_locale(), default_country_code)
        return self.get_string(EnvKey.DEFAULT_COUNTRY_CODE, derived)
