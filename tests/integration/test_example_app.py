"""Integration tests for the example form app, end to end against a mock API."""

import httpx
import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from example.app import (
    MESSAGE_ACCEPTED,
    MESSAGE_REJECTED,
    ExampleSettings,
    create_app,
)
from friendly_captcha import RESPONSE_FORM_FIELD_NAME

from tests.payloads import AUTH_INVALID_BODY, SUCCESS_BODY


def _submit(app, token: str) -> httpx.Response:
    with TestClient(app) as client:
        return client.post(
            "/",
            data={
                "subject": "Hello",
                "message": "Is this thing on?",
                RESPONSE_FORM_FIELD_NAME: token,
            },
        )


@pytest.fixture
def build_app(make_client):
    def _build(strict: bool = False, widget_endpoint: str = ""):
        client = make_client(strict=strict, sitekey="FCMTESTSITEKEY")
        settings = ExampleSettings(widget_endpoint=widget_endpoint)
        return create_app(client=client, example_settings=settings)

    return _build


class TestForm:
    def test_get_renders_widget(self, build_app):
        with TestClient(build_app(widget_endpoint="eu")) as client:
            resp = client.get("/")
        assert resp.status_code == 200
        assert 'data-sitekey="FCMTESTSITEKEY"' in resp.text
        assert 'data-api-endpoint="eu"' in resp.text
        assert MESSAGE_ACCEPTED not in resp.text

    def test_form_posts_token_and_sitekey(self, build_app, siteverify):
        _submit(build_app(), "valid-token")
        assert len(siteverify.requests) == 1
        assert b'"response":"valid-token"' in siteverify.requests[0].content
        assert b'"sitekey":"FCMTESTSITEKEY"' in siteverify.requests[0].content


class TestScenarios:
    def test_a_valid_token_accepted(self, build_app, siteverify):
        siteverify.respond(200, json=SUCCESS_BODY)
        resp = _submit(build_app(), "valid-token")
        assert resp.status_code == 200
        assert MESSAGE_ACCEPTED in resp.text

    def test_b_bad_token_rejected(self, build_app, siteverify):
        siteverify.respond(
            200, json={"success": False, "error": {"error_code": "response_invalid"}}
        )
        resp = _submit(build_app(), "bad-token")
        assert MESSAGE_REJECTED in resp.text

    def test_c_unreachable_fails_open(self, build_app, siteverify):
        siteverify.fail(httpx.ConnectError("connection refused"))
        resp = _submit(build_app(), "valid-token")
        assert MESSAGE_ACCEPTED in resp.text

    def test_d_unreachable_strict_rejects(self, build_app, siteverify):
        siteverify.fail(httpx.ConnectError("connection refused"))
        resp = _submit(build_app(strict=True), "valid-token")
        assert MESSAGE_REJECTED in resp.text

    def test_e_auth_invalid_fails_open(self, build_app, siteverify):
        siteverify.respond(401, json=AUTH_INVALID_BODY)
        resp = _submit(build_app(), "valid-token")
        assert MESSAGE_ACCEPTED in resp.text

    def test_e_auth_invalid_strict_rejects(self, build_app, siteverify):
        siteverify.respond(401, json=AUTH_INVALID_BODY)
        resp = _submit(build_app(strict=True), "valid-token")
        assert MESSAGE_REJECTED in resp.text

    def test_missing_field_is_rejected_by_api(self, build_app, siteverify):
        siteverify.respond(
            400, json={"success": False, "error": {"error_code": "response_missing"}}
        )
        with TestClient(build_app(strict=True)) as client:
            resp = client.post("/", data={"subject": "no widget"})
        assert MESSAGE_REJECTED in resp.text
        assert b'"response":""' in siteverify.requests[0].content


class TestLogging:
    def test_config_error_is_logged(self, build_app, siteverify):
        siteverify.respond(401, json=AUTH_INVALID_BODY)
        with capture_logs() as logs:
            _submit(build_app(), "valid-token")
        events = [e for e in logs if e["event"] == "captcha_config_error"]
        assert len(events) == 1
        assert events[0]["log_level"] == "error"
        assert events[0]["status_code"] == 401
        assert all(e["event"] != "captcha_verification_unavailable" for e in logs)

    def test_unreachable_api_is_logged(self, build_app, siteverify):
        siteverify.fail(httpx.ConnectError("connection refused"))
        with capture_logs() as logs:
            _submit(build_app(), "valid-token")
        events = [e for e in logs if e["event"] == "captcha_verification_unavailable"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"
        assert "failed talking to Friendly Captcha API" in events[0]["error"]
        assert all(e["event"] != "captcha_config_error" for e in logs)

    def test_verified_submission_logs_no_error(self, build_app, siteverify):
        siteverify.respond(200, json=SUCCESS_BODY)
        with capture_logs() as logs:
            _submit(build_app(), "valid-token")
        assert {"captcha_config_error", "captcha_verification_unavailable"}.isdisjoint(
            e["event"] for e in logs
        )
