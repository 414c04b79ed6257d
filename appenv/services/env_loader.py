"""One-time `.env` loader.

The loader resolves `${BASE_PATH}/.env` (BASE_PATH defaults to the current
working directory), parses it with python-dotenv, and inserts every entry the
environment store does not already hold. The read and merge happen once per
loader; later calls return the memoized `LoadResult`, including a failed one.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path

from dotenv import dotenv_values

from appenv.config import AppEnvSettings, get_settings
from appenv.enums import EnvKey
from appenv.models.results import LoadResult
from appenv.services.runtime_env_service import RuntimeEnvService

logger = logging.getLogger(__name__)

EnvFileReader = Callable[[Path], Mapping[str, str | None]]


def make_dotenv_reader(settings: AppEnvSettings) -> EnvFileReader:
    """Build the default file reader from library settings."""

    def read(path: Path) -> Mapping[str, str | None]:
        # python-dotenv logs and skips lines it cannot parse.
        return dotenv_values(
            path,
            interpolate=settings.interpolate,
            encoding=settings.env_file_encoding,
        )

    return read


def resolve_base_path(store: RuntimeEnvService) -> Path:
    """Directory holding the `.env` file: BASE_PATH or the working directory."""
    raw = store.get(EnvKey.BASE_PATH)
    base = Path(raw).expanduser() if raw else Path.cwd()
    return base.resolve()


class EnvFileLoader:
    """Seeds an environment store from a dotenv file exactly once.

    Thread-safe: concurrent first callers block on a lock and only one of
    them reads the file.
    """

    def __init__(
        self,
        store: RuntimeEnvService,
        *,
        settings: AppEnvSettings | None = None,
        reader: EnvFileReader | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            store: Environment store to seed.
            settings: Library settings; defaults to the process-wide instance.
            reader: Callable returning the parsed entries of a file. Defaults
                to python-dotenv's `dotenv_values`.
        """
        self.store = store
        self.settings = settings or get_settings()
        self._reader = reader or make_dotenv_reader(self.settings)
        self._lock = threading.Lock()
        self._result: LoadResult | None = None

    @property
    def loaded(self) -> bool:
        return self._result is not None

    def env_file_path(self) -> Path:
        return resolve_base_path(self.store) / self.settings.env_file_name

    def load(self) -> LoadResult:
        """Load the env file on first call; return the memoized result after."""
        result = self._result
        if result is not None:
            return result

        with self._lock:
            if self._result is None:
                self._result = self._load_once()
            return self._result

    def _load_once(self) -> LoadResult:
        # A deleted working directory or an untraversable BASE_PATH is an
        # empty contribution, not a startup failure.
        try:
            path = self.env_file_path()
            logger.debug("Loading env file %s", path)
            found = path.is_file()
        except OSError as e:
            logger.warning("Cannot locate env file %s: %s", self.settings.env_file_name, e)
            return LoadResult(path=self.settings.env_file_name, found=False, error=str(e))

        if not found:
            logger.debug("No env file at %s", path)
            return LoadResult(path=str(path), found=False)

        try:
            entries = self._reader(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read env file %s: %s", path, e)
            return LoadResult(path=str(path), found=True, error=str(e))

        applied: list[str] = []
        skipped: list[str] = []
        for key, value in entries.items():
            # `KEY` with no `=` parses to None; there is nothing to insert.
            if not key or value is None:
                continue
            if self.store.setdefault(key, value):
                applied.append(key)
            else:
                skipped.append(key)

        logger.debug(
            "Env file %s applied %d key(s), kept %d existing",
            path,
            len(applied),
            len(skipped),
        )
        return LoadResult(path=str(path), found=True, applied=applied, skipped=skipped)
