"""Typed access to process environment variables seeded from a .env file.

Example:
    >>> import appenv
    >>> appenv.get_number("PORT", 5000)
    >>> appenv.get_array("LOCALES", ["en"], merge=False)
    >>> appenv.api_version(minor=True)
"""

from appenv.api import (
    api_version,
    clear,
    env,
    get,
    get_array,
    get_boolean,
    get_country_code,
    get_default_env,
    get_locale,
    get_number,
    get_numbers,
    get_object,
    get_string,
    get_string_set,
    get_strings,
    is_development,
    is_env,
    is_heroku,
    is_local,
    is_production,
    is_test,
    load,
    map_to_number,
    map_to_string,
    reset_default_env,
    set,
    set_default_env,
)
from appenv.config import AppEnvSettings
from appenv.enums import EnvKey, NodeEnv, RuntimeEnv
from appenv.models import ApiVersionOptions, ArrayOptions, LoadResult
from appenv.services import Env, EnvFileLoader, EnvKeyError, RuntimeEnvService

__version__ = "0.1.0"

__all__ = [
    "ApiVersionOptions",
    "AppEnvSettings",
    "ArrayOptions",
    "Env",
    "EnvFileLoader",
    "EnvKey",
    "EnvKeyError",
    "LoadResult",
    "NodeEnv",
    "RuntimeEnv",
    "RuntimeEnvService",
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
