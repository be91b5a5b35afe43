"""
Acceptance policy for a verification outcome.

VerifyResult wraps the outcome of one siteverify call together with the
client's strict flag. In the simplest case, check ``should_accept()`` to decide
whether to let a form submission through: it is true when the captcha was
solved correctly, and also when verification was not possible (API down,
wrong API key) unless strict mode is enabled.

Decision table:

    Decoded (HTTP 200)                     -> response.success
    TransportFailure / EncodingFailure     -> not strict
    ClientFailure (non-200)                -> not strict
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from friendly_captcha.errors import (
    ClientError,
    EncodingError,
    ImplementationError,
    RequestError,
    VerificationError,
)
from friendly_captcha.schemas.outcome import (
    ClientFailure,
    Decoded,
    EncodingFailure,
    TransportFailure,
    VerificationOutcome,
)
from friendly_captcha.schemas.wire import VerifyResponse

# Status reported when no HTTP response was received
NO_RESPONSE_STATUS = -1


@dataclass(frozen=True)
class VerifyResult:
    outcome: VerificationOutcome
    strict: bool = False

    def should_accept(self) -> bool:
        """True if the request should be allowed to pass through."""
        outcome = self.outcome
        if isinstance(outcome, Decoded):
            return outcome.success
        if isinstance(outcome, (TransportFailure, EncodingFailure, ClientFailure)):
            # Fail open on infrastructure problems unless strict
            return not self.strict
        raise ImplementationError(
            "unhandled verification outcome in should_accept",
            details={"outcome": repr(outcome), "strict": self.strict},
        )

    def should_reject(self) -> bool:
        return not self.should_accept()

    def was_able_to_verify(self) -> bool:
        """True if the API actually gave a verdict, whether positive or not.

        If false, log why (see ``request_error()``); ``is_client_error()``
        tells whether the integration itself needs fixing.
        """
        return isinstance(self.outcome, Decoded)

    def is_client_error(self) -> bool:
        """Non-200 from the API, e.g. a wrong API key.

        Log this and notify yourself: the site is unprotected until it is fixed.
        """
        return isinstance(self.outcome, ClientFailure)

    def is_request_error(self) -> bool:
        """The API could not be reached, or its reply could not be understood."""
        return isinstance(self.outcome, (TransportFailure, EncodingFailure))

    @property
    def success(self) -> bool:
        return isinstance(self.outcome, Decoded) and self.outcome.success

    @property
    def status(self) -> int:
        status = getattr(self.outcome, "http_status", None)
        return NO_RESPONSE_STATUS if status is None else status

    def http_status_code(self) -> int:
        return self.status

    def response(self) -> VerifyResponse:
        if isinstance(self.outcome, (Decoded, ClientFailure)):
            return self.outcome.response
        return VerifyResponse()

    def request_error(self) -> Optional[VerificationError]:
        outcome = self.outcome
        if isinstance(outcome, Decoded):
            return None
        if isinstance(outcome, EncodingFailure):
            error: VerificationError = EncodingError(
                details={"cause": str(outcome.cause)}
            )
            error.__cause__ = outcome.cause
            return error
        if isinstance(outcome, TransportFailure):
            error = RequestError(
                details={"cause": str(outcome.cause), "status": outcome.http_status}
            )
            error.__cause__ = outcome.cause
            return error
        if isinstance(outcome, ClientFailure):
            api_error = outcome.error
            return ClientError(
                details={
                    "status": outcome.http_status,
                    "error_code": api_error.error_code if api_error else None,
                    "detail": api_error.detail if api_error else None,
                }
            )
        raise ImplementationError(
            "unhandled verification outcome in request_error",
            details={"outcome": repr(outcome)},
        )
