"""
Error hierarchy for the Friendly Captcha client.

FriendlyCaptchaError is the base for all typed errors. Only ConfigurationError
(at build time) and ImplementationError (unreachable policy state) are ever
raised by the library.

VerificationError subclasses are never raised: they are returned from
VerifyResult.request_error() so callers can log why a captcha response could
not be verified.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class FriendlyCaptchaError(Exception):
    """Base client error. All typed errors inherit from this."""

    error_code: str = "internal_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(FriendlyCaptchaError):
    error_code = "configuration_error"


class ImplementationError(FriendlyCaptchaError):
    error_code = "implementation_error"


class VerificationError(FriendlyCaptchaError):
    error_code = "verification_error"
    default_message = "verification failed"

    def __init__(
        self, message: Optional[str] = None, *, details: Optional[Any] = None
    ) -> None:
        super().__init__(message or self.default_message, details=details)


class EncodingError(VerificationError):
    """The request body could not be created. Should never happen in practice."""

    error_code = "encoding_error"
    default_message = "could not create verification request body"


class RequestError(VerificationError):
    """The POST to the API could not be completed, or its body made no sense."""

    error_code = "request_error"
    default_message = "verification request failed talking to Friendly Captcha API"


class ClientError(VerificationError):
    """Non-200 response from the API. Usually a wrong API key or sitekey."""

    error_code = "client_error"
    default_message = (
        "verification request failed due to a client error (check your credentials)"
    )


class ErrorCode(str, Enum):
    """Values of ``error.error_code`` in a siteverify response body."""

    # (401) The X-API-Key header is missing.
    AUTH_REQUIRED = "auth_required"
    # (401) The API key is invalid.
    AUTH_INVALID = "auth_invalid"
    # (400) The sitekey in the request is invalid.
    SITEKEY_INVALID = "sitekey_invalid"
    # (400) The response field is missing.
    RESPONSE_MISSING = "response_missing"
    # (200) The response field is invalid.
    RESPONSE_INVALID = "response_invalid"
    # (200) The response has expired.
    RESPONSE_TIMEOUT = "response_timeout"
    # (200) The response has already been used.
    RESPONSE_DUPLICATE = "response_duplicate"
    # (400) Something else is wrong with the request, e.g. an empty body.
    BAD_REQUEST = "bad_request"
