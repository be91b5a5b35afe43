"""CaptchaVerifier protocol: the client depends on this, not the concrete executor."""

from typing import Optional, Protocol

from friendly_captcha.schemas.outcome import VerificationOutcome


class CaptchaVerifier(Protocol):
    async def verify(
        self, token: str, *, timeout: Optional[float] = None
    ) -> VerificationOutcome: ...
