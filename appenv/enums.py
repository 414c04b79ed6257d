"""StrEnum definitions for known environment names."""

from enum import StrEnum


class NodeEnv(StrEnum):
    """Values of NODE_ENV recognised by the classification helpers."""

    TEST = "test"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class RuntimeEnv(StrEnum):
    """Values of RUNTIME_ENV recognised by the classification helpers."""

    HEROKU = "heroku"


class EnvKey(StrEnum):
    """Environment variable names read by the library itself."""

    NODE_ENV = "NODE_ENV"
    RUNTIME_ENV = "RUNTIME_ENV"
    BASE_PATH = "BASE_PATH"
    API_VERSION = "API_VERSION"
    DEFAULT_LOCALE = "DEFAULT_LOCALE"
    DEFAULT_COUNTRY_CODE = "DEFAULT_COUNTRY_CODE"
