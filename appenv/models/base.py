"""EnvModel base class for option and result models."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EnvModel(BaseModel):
    """Immutable base model shared by options and results.

    - Accepts both snake_case names and camelCase aliases on input
    - Unknown keys are ignored so option dicts can be passed through
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def coerce(cls, value: "Self | dict[str, Any] | None" = None, **overrides: Any) -> Self:
        """Build an instance from another instance, a mapping, or nothing.

        Keyword overrides are applied last, after the defaults and `value`.
        """
        if isinstance(value, cls):
            data = value.model_dump()
        elif value is None:
            data = {}
        else:
            data = dict(value)
        data.update(overrides)
        return cls.model_validate(data)

    def to_dict(self, by_alias: bool = False) -> dict[str, Any]:
        """Convert to a plain dictionary, dropping None values."""
        return self.model_dump(exclude_none=True, by_alias=by_alias, mode="json")
