"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from appenv import api
from appenv.config import AppEnvSettings, get_settings
from appenv.services.env_service import Env


@pytest.fixture(autouse=True)
def _isolate_shared_state():
    """Drop the shared Env and cached settings around every test."""
    api.reset_default_env()
    get_settings.cache_clear()
    yield
    api.reset_default_env()
    get_settings.cache_clear()


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Empty directory used as BASE_PATH so the host's .env is never read."""
    d = tmp_path / "base"
    d.mkdir()
    return d


@pytest.fixture
def write_env_file(base_dir: Path) -> Callable[..., Path]:
    """Write a dotenv file into `base_dir`."""

    def write(content: str, name: str = ".env") -> Path:
        path = base_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def environ(base_dir: Path) -> dict[str, str]:
    """Isolated environment store seeded with BASE_PATH only."""
    return {"BASE_PATH": str(base_dir)}


@pytest.fixture
def env(environ: dict[str, str]) -> Env:
    """Env over the isolated store with default settings."""
    return Env(environ, settings=AppEnvSettings())
