"""Unit tests for endpoint resolution, ClientConfig and settings."""

import dataclasses

import pytest

from friendly_captcha.config import (
    EU_API_ENDPOINT,
    GLOBAL_API_ENDPOINT,
    ClientConfig,
    ClientSettings,
    LoggingSettings,
    api_endpoint_from_siteverify_url,
    resolve_api_endpoint,
)
from friendly_captcha.errors import ConfigurationError


# ---------------------------------------------------------------------------
# Endpoint resolution
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [
        ("global", GLOBAL_API_ENDPOINT),
        ("eu", EU_API_ENDPOINT),
        ("https://custom.example.com", "https://custom.example.com"),
        # The primary path never strips anything
        ("https://custom.example.com/prefix", "https://custom.example.com/prefix"),
    ],
    ids=["global", "eu", "full_domain", "verbatim_with_path"],
)
def test_resolve_api_endpoint(value, expected):
    assert resolve_api_endpoint(value) == expected


def test_resolve_api_endpoint_rejects_empty():
    with pytest.raises(ConfigurationError):
        resolve_api_endpoint("")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("eu", EU_API_ENDPOINT),
        ("https://eu.frcapi.com/api/v2/captcha/siteverify", EU_API_ENDPOINT),
        ("https://example.com:8080/some/path?x=1", "https://example.com:8080"),
    ],
    ids=["shorthand", "strips_path", "strips_query"],
)
def test_api_endpoint_from_siteverify_url(value, expected):
    assert api_endpoint_from_siteverify_url(value) == expected


@pytest.mark.parametrize("value", ["", "not a url", "/api/v2/captcha/siteverify"])
def test_api_endpoint_from_siteverify_url_rejects(value):
    with pytest.raises(ConfigurationError):
        api_endpoint_from_siteverify_url(value)


# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


class TestClientConfig:
    def test_siteverify_url(self):
        assert (
            ClientConfig(api_key="k").siteverify_url
            == "https://global.frcapi.com/api/v2/captcha/siteverify"
        )

    def test_siteverify_url_trailing_slash(self):
        config = ClientConfig(api_key="k", api_endpoint="http://localhost:1090/")
        assert config.siteverify_url == "http://localhost:1090/api/v2/captcha/siteverify"

    def test_is_frozen(self):
        config = ClientConfig(api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.strict = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [{"api_key": ""}, {"api_key": "k", "api_endpoint": ""}],
        ids=["no_api_key", "no_endpoint"],
    )
    def test_rejects_incomplete_config(self, kwargs):
        with pytest.raises(ConfigurationError):
            ClientConfig(**kwargs)

    def test_repr_hides_api_key(self):
        assert "k-secret" not in repr(ClientConfig(api_key="k-secret"))


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestClientSettings:
    def test_defaults(self):
        s = ClientSettings()
        assert s.api_key == ""
        assert s.sitekey == ""
        assert s.api_endpoint is None
        assert s.siteverify_endpoint is None
        assert s.strict is False
        assert s.timeout == 5.0

    def test_loads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("FRC_API_KEY", "env-key")
        monkeypatch.setenv("FRC_TIMEOUT", "2.5")
        s = ClientSettings()
        assert s.api_key == "env-key"
        assert s.timeout == 2.5

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("FRC_API_KEY=from-dotenv\nFRC_SITEKEY=site\n")
        s = ClientSettings()
        assert s.api_key == "from-dotenv"
        assert s.sitekey == "site"


@pytest.mark.parametrize(
    "env, expected",
    [("production", True), ("development", False)],
    ids=["production", "development"],
)
def test_logging_settings_is_production(monkeypatch, env, expected):
    monkeypatch.setenv("ENV", env)
    assert LoggingSettings().is_production is expected


@pytest.mark.parametrize(
    "env, log_format, expected",
    [
        ("production", None, "json"),
        ("development", None, "console"),
        ("production", "console", "console"),
        ("development", "json", "json"),
    ],
    ids=["production_default", "development_default", "explicit_console", "explicit_json"],
)
def test_logging_settings_resolved_format(monkeypatch, env, log_format, expected):
    monkeypatch.setenv("ENV", env)
    if log_format is not None:
        monkeypatch.setenv("LOG_FORMAT", log_format)
    assert LoggingSettings().resolved_log_format == expected
