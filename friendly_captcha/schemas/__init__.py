from friendly_captcha.schemas.outcome import (
    ClientFailure,
    Decoded,
    EncodingFailure,
    TransportFailure,
    VerificationOutcome,
)
from friendly_captcha.schemas.risk_intelligence import RiskIntelligenceData, RiskScore
from friendly_captcha.schemas.wire import (
    VerifyRequest,
    VerifyResponse,
    VerifyResponseChallengeData,
    VerifyResponseData,
    VerifyResponseError,
)

__all__ = [
    "ClientFailure",
    "Decoded",
    "EncodingFailure",
    "TransportFailure",
    "VerificationOutcome",
    "RiskIntelligenceData",
    "RiskScore",
    "VerifyRequest",
    "VerifyResponse",
    "VerifyResponseChallengeData",
    "VerifyResponseData",
    "VerifyResponseError",
]
