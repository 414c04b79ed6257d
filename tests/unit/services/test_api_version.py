"""Unit tests for API version derivation."""

import pytest
import semver

from appenv.models.options import ApiVersionOptions
from appenv.services.api_version import coerce_version, derive_api_version, format_api_version
from appenv.services.env_service import Env


class TestCoerceVersion:
    """Tests for coerce_version."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.0.0", (1, 0, 0)),
            ("2", (2, 0, 0)),
            ("v3.4", (3, 4, 0)),
            ("release-2.1.7-beta", (2, 1, 7)),
            ("1.2.3.4", (1, 2, 3)),
            ("  42  ", (42, 0, 0)),
        ],
    )
    def test_lenient_parsing(self, text: str, expected):
        version = coerce_version(text)
        assert version is not None
        assert (version.major, version.minor, version.patch) == expected

    @pytest.mark.parametrize("text", [None, "", "latest", "v"])
    def test_unparseable(self, text):
        assert coerce_version(text) is None


class TestFormatApiVersion:
    """Tests for format_api_version."""

    def test_granularity(self):
        version = semver.Version(2, 3, 4)
        assert format_api_version(version, ApiVersionOptions()) == "v2"
        assert format_api_version(version, ApiVersionOptions(minor=True)) == "v2.3"
        assert format_api_version(version, ApiVersionOptions(patch=True)) == "v2.3.4"

    def test_patch_wins_over_minor(self):
        version = semver.Version(2, 3, 4)
        options = ApiVersionOptions(minor=True, patch=True)
        assert format_api_version(version, options) == "v2.3.4"

    def test_custom_prefix(self):
        assert format_api_version(semver.Version(1, 0, 0), ApiVersionOptions(prefix="api-v")) == "api-v1"


class TestDeriveApiVersion:
    """Tests for derive_api_version fallbacks."""

    def test_falls_back_to_option_version(self):
        assert derive_api_version("latest", ApiVersionOptions(version="3.0.0")) == "v3"

    def test_falls_back_to_builtin_version(self):
        assert derive_api_version("latest", ApiVersionOptions(version="latest")) == "v1"


class TestEnvApiVersion:
    """Tests for Env.api_version."""

    def test_defaults(self, env: Env):
        assert env.api_version() == "v1"

    def test_minor(self, env: Env):
        assert env.api_version(minor=True) == "v1.0"
        assert env.api_version({"minor": True}) == "v1.0"

    def test_patch(self, env: Env):
        assert env.api_version(patch=True) == "v1.0.0"

    def test_numeric_version_option(self, env: Env):
        assert env.api_version(version=2) == "v2"
        assert env.api_version({"version": 2}) == "v2"

    def test_reads_api_version(self, env: Env, environ):
        environ["API_VERSION"] = "4.2.1"
        assert env.api_version() == "v4"
        assert env.api_version(patch=True) == "v4.2.1"

    def test_env_wins_over_option(self, env: Env, environ):
        environ["API_VERSION"] = "4.2.1"
        assert env.api_version(version="2.0.0") == "v4"

    def test_malformed_env_value_does_not_raise(self, env: Env, environ):
        environ["API_VERSION"] = "latest"
        assert env.api_version(version="2.5.0", minor=True) == "v2.5"
