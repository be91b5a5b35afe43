"""SDK version reported to the API in the X-Frc-Sdk header."""

from importlib.metadata import PackageNotFoundError, version as _dist_version

SDK_NAME = "friendly-captcha-python-sdk"


def get_version() -> str:
    try:
        return _dist_version("friendly-captcha")
    except PackageNotFoundError:
        return "unknown"


def sdk_header_value() -> str:
    return f"{SDK_NAME}@{get_version()}"
