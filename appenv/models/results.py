"""Result models returned by the env file loader."""

from pydantic import Field

from appenv.models.base import EnvModel


class LoadResult(EnvModel):
    """Outcome of the one-time `.env` load.

    A missing file is reported with `found=False` and no error. An
    unreadable file carries a diagnostic in `error`; the load never raises.
    """

    path: str
    found: bool = False
    applied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
