"""
Wire models for the /api/v2/captcha/siteverify endpoint.

VerifyRequest   request body, sitekey omitted when empty
VerifyResponse  response body, decoded regardless of HTTP status
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, model_validator

from friendly_captcha.errors import ErrorCode
from friendly_captcha.schemas.risk_intelligence import RiskIntelligenceData


class VerifyRequest(BaseModel):
    """Request body. Built by the client; callers rarely need it directly."""

    model_config = ConfigDict(frozen=True)

    # The value the user submitted in the frc-captcha-response field.
    response: str
    # Optional: the sitekey the puzzle must have been generated from.
    sitekey: str = ""

    def to_json(self) -> bytes:
        return self.model_dump_json(exclude_defaults=True).encode()


class VerifyResponseChallengeData(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Absent in some responses
    timestamp: Optional[datetime] = None
    origin: str = ""


class VerifyResponseData(BaseModel):
    """Present when ``success`` is true."""

    model_config = ConfigDict(frozen=True, extra="allow")

    event_id: str = ""
    challenge: Optional[VerifyResponseChallengeData] = None
    risk_intelligence: Optional[RiskIntelligenceData] = None


class VerifyResponseError(BaseModel):
    """Present when ``success`` is false."""

    model_config = ConfigDict(frozen=True)

    # Unknown codes are kept as plain strings
    error_code: Union[ErrorCode, str] = Field(default="", union_mode="left_to_right")
    detail: str = ""


class VerifyResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Only a JSON true counts; "true" or 1 is a body we do not understand
    success: StrictBool = False
    data: Optional[VerifyResponseData] = None
    error: Optional[VerifyResponseError] = None

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty(cls, value: Any) -> Any:
        # A literal null body decodes to an unsuccessful response
        return {} if value is None else value
