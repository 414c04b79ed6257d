"""Library settings sourced from APPENV_* environment variables.

These settings configure how the `.env` file is located and parsed. They are
read from the real process environment only; the `.env` file they describe
is never consulted for them.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnvSettings(BaseSettings):
    """Configuration for the env file loader.

    Prefix: APPENV_ (e.g., APPENV_ENV_FILE_NAME)
    """

    model_config = SettingsConfigDict(
        env_prefix="APPENV_",
        env_file=None,
        extra="ignore",
    )

    env_file_name: str = Field(
        default=".env",
        description="File name joined onto BASE_PATH to locate the dotenv file.",
    )
    env_file_encoding: str = Field(default="utf-8")
    interpolate: bool = Field(
        default=False,
        description=(
            "Expand ${VAR} references inside .env values. Off by default so "
            "values are taken literally."
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> AppEnvSettings:
    """Return the process-wide settings instance."""
    return AppEnvSettings()
