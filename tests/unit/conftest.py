"""
Unit test configuration.

Runs every test from an empty temporary directory so pydantic-settings never
reads the project's real .env file. Tests control config exclusively through
monkeypatch.setenv().
"""

import pytest


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch, tmp_path):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "FRC_API_KEY",
        "FRC_SITEKEY",
        "FRC_API_ENDPOINT",
        "FRC_SITEVERIFY_ENDPOINT",
        "FRC_STRICT",
        "FRC_TIMEOUT",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "ENV",
    ):
        monkeypatch.delenv(var, raising=False)
