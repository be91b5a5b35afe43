from friendly_captcha.builders.client import ClientBuilder

__all__ = ["ClientBuilder"]
