from friendly_captcha.infrastructure.captcha.protocol import CaptchaVerifier
from friendly_captcha.infrastructure.captcha.siteverify import SiteverifyExecutor

__all__ = ["CaptchaVerifier", "SiteverifyExecutor"]
