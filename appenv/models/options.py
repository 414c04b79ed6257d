"""Option models for the array accessors and the API version deriver."""

from typing import Any

from pydantic import Field, field_validator

from appenv.models.base import EnvModel


class ArrayOptions(EnvModel):
    """Options accepted by the array accessors.

    Attributes:
        merge: Prepend the default sequence to the environment sequence.
            When False and the key is present, the environment value
            replaces the default entirely.
    """

    merge: bool = True


class ApiVersionOptions(EnvModel):
    """Options accepted by `api_version`."""

    version: str = Field(default="1.0.0")
    prefix: str = Field(default="v")
    major: bool = True
    minor: bool = False
    patch: bool = False

    @field_validator("version", "prefix", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # Allow `version=2` or `version=2.1` like the string forms.
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
