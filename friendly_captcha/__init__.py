"""
Server-side client for verifying Friendly Captcha responses.

    client = ClientBuilder().with_api_key(api_key).with_sitekey(sitekey).build()
    result = await client.verify_captcha_response(form[RESPONSE_FORM_FIELD_NAME])
    if result.should_reject():
        ...
"""

from friendly_captcha.builders.client import ClientBuilder
from friendly_captcha.client import RESPONSE_FORM_FIELD_NAME, FriendlyCaptchaClient
from friendly_captcha.config import (
    EU_API_ENDPOINT,
    GLOBAL_API_ENDPOINT,
    ClientConfig,
    ClientSettings,
)
from friendly_captcha.errors import (
    ClientError,
    ConfigurationError,
    EncodingError,
    ErrorCode,
    FriendlyCaptchaError,
    ImplementationError,
    RequestError,
    VerificationError,
)
from friendly_captcha.result import VerifyResult
from friendly_captcha.version import get_version

__all__ = [
    "ClientBuilder",
    "FriendlyCaptchaClient",
    "RESPONSE_FORM_FIELD_NAME",
    "EU_API_ENDPOINT",
    "GLOBAL_API_ENDPOINT",
    "ClientConfig",
    "ClientSettings",
    "ClientError",
    "ConfigurationError",
    "EncodingError",
    "ErrorCode",
    "FriendlyCaptchaError",
    "ImplementationError",
    "RequestError",
    "VerificationError",
    "VerifyResult",
    "get_version",
]
