"""
The outcome of one verification attempt.

Exactly one of these four shapes is produced per call to the siteverify
executor. VerifyResult discriminates them by type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from friendly_captcha.schemas.wire import (
    VerifyResponse,
    VerifyResponseData,
    VerifyResponseError,
)


@dataclass(frozen=True)
class Decoded:
    """HTTP 200 with a well-formed body: the service gave a verdict."""

    response: VerifyResponse
    http_status: int = 200

    @property
    def success(self) -> bool:
        return self.response.success

    @property
    def data(self) -> Optional[VerifyResponseData]:
        return self.response.data

    @property
    def error(self) -> Optional[VerifyResponseError]:
        return self.response.error


@dataclass(frozen=True)
class TransportFailure:
    """The HTTP call failed, or the body could not be decoded.

    ``http_status`` is set only in the second case.
    """

    cause: BaseException
    http_status: Optional[int] = None


@dataclass(frozen=True)
class ClientFailure:
    """Non-200 status: a problem with the caller's credentials or request."""

    http_status: int
    response: VerifyResponse = field(default_factory=VerifyResponse)

    @property
    def error(self) -> Optional[VerifyResponseError]:
        return self.response.error


@dataclass(frozen=True)
class EncodingFailure:
    """The outbound request body could not be built."""

    cause: BaseException


VerificationOutcome = Union[Decoded, TransportFailure, ClientFailure, EncodingFailure]
