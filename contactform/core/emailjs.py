"""
EmailJS REST API integration.

EmailJS only accepts server-side calls when "Allow EmailJS API for
non-browser applications" is enabled in the account security settings and
the private key is sent as `accessToken`.
"""

import httpx
import logging
from typing import Any, Dict, Optional
from fastapi import Depends
from pydantic import BaseModel
from contactform.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class EmailJSError(Exception):
    """EmailJS rejected the request or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class EmailJSPayload(BaseModel):
    """Body of POST /api/v1.0/email/send"""
    service_id: str
    template_id: str
    user_id: str
    accessToken: str
    template_params: Dict[str, Any]


class EmailJSClient:
    def __init__(self, api_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def send(self, payload: EmailJSPayload) -> httpx.Response:
        """
        Send one templated email.

        Args:
            payload: Credentials, template and template params

        Returns:
            httpx.Response: The provider's 2xx response

        Raises:
            EmailJSError: Non-2xx status or transport failure
        """
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=payload.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            raise EmailJSError(f"EmailJS request failed: {str(e)}") from e

        if not response.is_success:
            text = response.text
            raise EmailJSError(
                f"EmailJS responded with {response.status_code}: {text}",
                status_code=response.status_code,
                body=text,
            )

        logger.debug(f"EmailJS accepted template {payload.template_id}")
        return response


def get_email_client(settings: Settings = Depends(get_settings)) -> EmailJSClient:
    return EmailJSClient(settings.emailjs_api_url, timeout=settings.emailjs_timeout_seconds)
