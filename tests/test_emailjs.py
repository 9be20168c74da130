import json

import httpx
import pytest

from contactform.core.config import EmailServiceNotConfigured
from contactform.core.emailjs import EmailJSClient, EmailJSError, EmailJSPayload
from tests.conftest import make_settings

PAYLOAD = EmailJSPayload(
    service_id="service_test",
    template_id="template_notify",
    user_id="public_key",
    accessToken="private_key",
    template_params={"from_name": "Jo"},
)


@pytest.mark.asyncio
async def test_send_posts_provider_payload():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="OK")

    client = EmailJSClient("https://api.emailjs.com/api/v1.0/email/send", transport=httpx.MockTransport(handler))
    await client.send(PAYLOAD)

    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://api.emailjs.com/api/v1.0/email/send"
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content) == {
        "service_id": "service_test",
        "template_id": "template_notify",
        "user_id": "public_key",
        "accessToken": "private_key",
        "template_params": {"from_name": "Jo"},
    }


@pytest.mark.asyncio
async def test_non_success_status_raises_with_body():
    client = EmailJSClient(
        "https://api.emailjs.com/api/v1.0/email/send",
        transport=httpx.MockTransport(lambda request: httpx.Response(400, text="The user ID is invalid")),
    )

    with pytest.raises(EmailJSError) as exc:
        await client.send(PAYLOAD)

    assert exc.value.status_code == 400
    assert exc.value.body == "The user ID is invalid"
    assert str(exc.value) == "EmailJS responded with 400: The user ID is invalid"


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = EmailJSClient("https://api.emailjs.com/api/v1.0/email/send", transport=httpx.MockTransport(handler))

    with pytest.raises(EmailJSError) as exc:
        await client.send(PAYLOAD)

    assert exc.value.status_code is None
    assert isinstance(exc.value.__cause__, httpx.ConnectTimeout)


def test_credentials_report_every_missing_variable():
    settings = make_settings(emailjs_service_id=None, emailjs_private_key="")

    assert settings.missing_credentials() == ["EMAILJS_SERVICE_ID", "EMAILJS_PRIVATE_KEY"]
    with pytest.raises(EmailServiceNotConfigured) as exc:
        settings.emailjs_credentials()
    assert exc.value.missing == ["EMAILJS_SERVICE_ID", "EMAILJS_PRIVATE_KEY"]


def test_credentials_resolved_when_complete():
    credentials = make_settings().emailjs_credentials()

    assert credentials.notification_template_id == "template_notify"
    assert credentials.autoreply_template_id == "template_reply"
