import json

import httpx
import pytest
from fastapi.testclient import TestClient

from contactform.core.config import Settings, get_settings
from contactform.core.emailjs import EmailJSClient, get_email_client
from contactform.main import app

CREDENTIALS = {
    "emailjs_service_id": "service_test",
    "emailjs_notification_template_id": "template_notify",
    "emailjs_autoreply_template_id": "template_reply",
    "emailjs_public_key": "public_key",
    "emailjs_private_key": "private_key",
}


def make_settings(**overrides) -> Settings:
    values = {**CREDENTIALS, "site_owner_name": "Ada Lovelace"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class EmailJSRecorder:
    """Stands in for api.emailjs.com and records every payload it receives."""

    def __init__(self, fail_at=None, status_code=400, body="The template ID is invalid", raise_error=False):
        self.payloads = []
        self.fail_at = fail_at
        self.status_code = status_code
        self.body = body
        self.raise_error = raise_error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.payloads.append(json.loads(request.content))
        if self.fail_at is not None and len(self.payloads) - 1 == self.fail_at:
            if self.raise_error:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(200, text="OK")

    @property
    def template_ids(self):
        return [payload["template_id"] for payload in self.payloads]

    def client(self) -> EmailJSClient:
        return EmailJSClient("https://api.emailjs.com/api/v1.0/email/send", transport=httpx.MockTransport(self))


@pytest.fixture
def emailjs():
    return EmailJSRecorder()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def override(settings, emailjs):
    """Install settings and EmailJS stand-ins; tests may replace them before requesting."""
    state = {"settings": settings, "emailjs": emailjs}
    app.dependency_overrides[get_settings] = lambda: state["settings"]
    app.dependency_overrides[get_email_client] = lambda: state["emailjs"].client()
    yield state
    app.dependency_overrides.clear()


@pytest.fixture
def client(override):
    return TestClient(app)
