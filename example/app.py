"""
Example FastAPI application protecting a form with Friendly Captcha.

GET  /  render the form with the widget
POST /  verify the widget response and accept or reject the submission

Run with:
    FRC_API_KEY=... FRC_SITEKEY=... uvicorn example.asgi:app --port 8844
"""

from __future__ import annotations

import html
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from pydantic_settings import BaseSettings, SettingsConfigDict

from friendly_captcha import (
    RESPONSE_FORM_FIELD_NAME,
    ClientBuilder,
    ClientSettings,
    FriendlyCaptchaClient,
)
from friendly_captcha.shared.logging import get_logger, setup_logging

log = get_logger(__name__)

DEFAULT_WIDGET_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/@friendlycaptcha/sdk@0.1.8/site.min.js"
)

MESSAGE_REJECTED = "❌ Anti-robot check failed, please try again."
MESSAGE_ACCEPTED = "✅ Your message has been submitted successfully."


class ExampleSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FRC_", env_file=".env", extra="ignore")

    # Optional widget API endpoint, e.g. "eu"
    widget_endpoint: str = ""


_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Friendly Captcha example</title>
  <script type="module" src="{script}" async defer></script>
</head>
<body>
  <p>{message}</p>
  <form method="POST">
    <input type="text" name="subject" placeholder="Subject">
    <textarea name="message" placeholder="Message"></textarea>
    <div class="frc-captcha" data-sitekey="{sitekey}"{endpoint_attr}></div>
    <button type="submit">Submit</button>
  </form>
</body>
</html>
"""


def render_page(message: str, sitekey: str, widget_endpoint: str) -> str:
    endpoint_attr = (
        f' data-api-endpoint="{html.escape(widget_endpoint)}"' if widget_endpoint else ""
    )
    return _PAGE.format(
        script=DEFAULT_WIDGET_SCRIPT,
        message=html.escape(message),
        sitekey=html.escape(sitekey),
        endpoint_attr=endpoint_attr,
    )


def create_app(
    client: Optional[FriendlyCaptchaClient] = None,
    example_settings: Optional[ExampleSettings] = None,
) -> FastAPI:
    """Create the example app. A prebuilt client is used as-is and not closed."""
    if example_settings is None:
        example_settings = ExampleSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_client = client is None
        frc_client = client
        if frc_client is None:
            setup_logging()
            frc_client = ClientBuilder.from_settings(ClientSettings()).build()
        app.state.frc_client = frc_client

        yield

        if owns_client:
            await frc_client.aclose()

    app = FastAPI(title="friendly-captcha example", lifespan=lifespan)

    def _page(request: Request, message: str = "") -> HTMLResponse:
        frc_client: FriendlyCaptchaClient = request.app.state.frc_client
        return HTMLResponse(
            render_page(
                message, frc_client.config.sitekey, example_settings.widget_endpoint
            )
        )

    @app.get("/", response_class=HTMLResponse)
    async def show_form(request: Request) -> HTMLResponse:
        return _page(request)

    @app.post("/", response_class=HTMLResponse)
    async def submit_form(request: Request) -> HTMLResponse:
        form = await request.form()
        subject = form.get("subject", "")
        solution = str(form.get(RESPONSE_FORM_FIELD_NAME, ""))

        frc_client: FriendlyCaptchaClient = request.app.state.frc_client
        result = await frc_client.verify_captcha_response(solution)

        if not result.was_able_to_verify():
            # Network issue or service down; should_accept() still decides below
            if result.is_client_error():
                # Misconfiguration: the site is unprotected until this is fixed
                log.error(
                    "captcha_config_error",
                    status_code=result.http_status_code(),
                    error=str(result.request_error()),
                )
            else:
                log.warning(
                    "captcha_verification_unavailable",
                    error=str(result.request_error()),
                )

        if result.should_reject():
            return _page(request, MESSAGE_REJECTED)

        # The captcha was OK; a real app would store the submission here.
        log.info("form_submitted", subject_length=len(str(subject)))
        return _page(request, MESSAGE_ACCEPTED)

    return app
