"""Tests for the module-level functions bound to the shared Env."""

import math

import pytest

import appenv
from appenv.config import AppEnvSettings
from appenv.services.env_service import Env


@pytest.fixture
def shared(environ) -> Env:
    """Install an Env over the isolated store as the shared instance."""
    return appenv.set_default_env(Env(environ, settings=AppEnvSettings()))


class TestSharedEnv:
    """Tests for default Env lifecycle."""

    def test_default_env_is_created_once(self):
        assert appenv.get_default_env() is appenv.get_default_env()

    def test_reset_builds_a_new_instance(self):
        first = appenv.get_default_env()
        appenv.reset_default_env()
        assert appenv.get_default_env() is not first

    def test_set_default_env(self, shared: Env):
        assert appenv.get_default_env() is shared


class TestFacade:
    """Tests that module-level functions delegate to the shared Env."""

    def test_get_set_clear(self, shared: Env):
        appenv.set("K", "V")
        assert appenv.get("K") == "V"
        assert appenv.env("K") == "V"
        appenv.clear("K")
        assert appenv.get("K") is None

    def test_env_alias_default(self, shared: Env):
        assert appenv.env("Any", "Any") == "Any"

    def test_typed_accessors(self, shared: Env, environ):
        environ.update(
            {
                "DEFAULT_COUNTRY_CODE": "TZ",
                "DEFAULT_AGE": "14",
                "DEBUG": "true",
                "LOCALES": "en,sw,fr",
                "ALLOWED_AGES": "14,15, 16",
                "CATEGORIES": "A,B,B,C",
                "DB": '{"host": "localhost"}',
            }
        )

        assert appenv.get_string("DEFAULT_COUNTRY_CODE") == "TZ"
        assert appenv.get_number("DEFAULT_AGE") == 14
        assert appenv.get_boolean("DEBUG", False) is True
        assert appenv.get_array("LOCALES", ["it"]) == ["it", "en", "sw", "fr"]
        assert appenv.get_array("LOCALES", ["it"], merge=False) == ["en", "sw", "fr"]
        assert appenv.get_strings("ALLOWED_AGES") == ["14", "15", "16"]
        assert appenv.get_numbers("ALLOWED_AGES", [17]) == [17, 14, 15, 16]
        assert appenv.get_string_set("CATEGORIES") == ["A", "B", "C"]
        assert appenv.get_object("DB") == {"host": "localhost"}

    def test_classification(self, shared: Env, environ):
        environ["NODE_ENV"] = "test"
        environ["RUNTIME_ENV"] = "heroku"
        assert appenv.is_env("TEST") is True
        assert appenv.is_test() is True
        assert appenv.is_development() is False
        assert appenv.is_production() is False
        assert appenv.is_local() is True
        assert appenv.is_heroku() is True

    def test_api_version(self, shared: Env):
        assert appenv.api_version() == "v1"
        assert appenv.api_version(minor=True) == "v1.0"
        assert appenv.api_version({"patch": True}) == "v1.0.0"
        assert appenv.api_version(version=2) == "v2"

    def test_locale_overrides(self, shared: Env, environ):
        environ["DEFAULT_LOCALE"] = "en_US"
        assert appenv.get_locale() == "en_US"
        assert appenv.get_country_code() == "US"

    def test_mappers(self):
        assert appenv.map_to_number("14") == 14
        assert math.isnan(appenv.map_to_number("x"))
        assert appenv.map_to_string(14) == "14"

    def test_load_reads_env_file(self, shared: Env, environ, write_env_file):
        write_env_file("PORT=5000\n")
        result = appenv.load()
        assert result.applied == ["PORT"]
        assert appenv.load() is result
        assert appenv.get_number("PORT") == 5000


def test_process_environment_end_to_end(monkeypatch, base_dir, write_env_file):
    """The shared Env reads os.environ and seeds it from BASE_PATH/.env."""
    write_env_file("APPENV_E2E_PORT=5000\nAPPENV_E2E_HOST=from-file\n")
    monkeypatch.setenv("BASE_PATH", str(base_dir))
    monkeypatch.setenv("APPENV_E2E_HOST", "from-process")
    # Register the file-only key so monkeypatch removes it afterwards.
    monkeypatch.setenv("APPENV_E2E_PORT", "placeholder")
    monkeypatch.delenv("APPENV_E2E_PORT")

    assert appenv.get_number("APPENV_E2E_PORT") == 5000
    assert appenv.get_string("APPENV_E2E_HOST") == "from-process"
