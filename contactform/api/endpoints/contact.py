"""
Contact form submission endpoint.

Public, unauthenticated endpoint called from the website's contact form.
Validates the submission, then relays it to EmailJS as an owner
notification followed by a visitor auto-reply.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from typing import Any, Dict
import logging

from contactform.core.auto_reply import AutoReplyBranding
from contactform.core.config import Settings, EmailServiceNotConfigured, get_settings
from contactform.core.contact_relay import relay_submission
from contactform.core.emailjs import EmailJSClient, EmailJSError, get_email_client
from contactform.models.contact import (
    ContactError, ContactPayload, ContactSuccess, SubmissionRejected,
    REQUIRED_FIELDS_MESSAGE, validate_submission,
)

router = APIRouter()
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

NOT_CONFIGURED_MESSAGE = "Email service is not configured."
SEND_FAILED_MESSAGE = "Failed to send email. Please try again."


def _respond(status_code: int, content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


async def _read_payload(request: Request) -> ContactPayload:
    """Parse the body; anything that is not a JSON object counts as empty."""
    try:
        data = await request.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}
    try:
        return ContactPayload.model_validate(data)
    except ValidationError:
        # Non-string values are as good as missing
        raise SubmissionRejected(REQUIRED_FIELDS_MESSAGE)


@router.options("/contact")
async def contact_preflight():
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.api_route("/contact", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE"], include_in_schema=False)
async def contact_method_not_allowed():
    return _respond(status.HTTP_405_METHOD_NOT_ALLOWED, {"error": "Method Not Allowed"})


@router.post("/contact", responses={400: {"model": ContactError}, 500: {"model": ContactError}})
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    email_client: EmailJSClient = Depends(get_email_client),
):
    """
    Validate a contact form submission and send both emails.

    Returns:
        200 {"success": true} once the notification and the auto-reply were accepted
        400 {"error": ...} for a missing required field or malformed email
        500 {"error": ...} when EmailJS is not configured or rejected a call
    """
    try:
        submission = validate_submission(await _read_payload(request))
    except SubmissionRejected as e:
        logger.info(f"Contact submission rejected: {e.message}")
        return _respond(status.HTTP_400_BAD_REQUEST, ContactError(error=e.message).model_dump(exclude_none=True))

    try:
        credentials = settings.emailjs_credentials()
    except EmailServiceNotConfigured as e:
        logger.error(f"❌ Contact form cannot send: {str(e)}")
        return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, {"error": NOT_CONFIGURED_MESSAGE})

    email_domain = submission.email.split("@")[-1]

    try:
        await relay_submission(
            submission,
            credentials,
            email_client,
            AutoReplyBranding.from_settings(settings),
        )
    except EmailJSError as e:
        logger.error(f"❌ EmailJS error for submission from @{email_domain}: {str(e)}")
        error = ContactError(error=SEND_FAILED_MESSAGE)
        if settings.expose_error_details:
            error.details = str(e)
        return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, error.model_dump(exclude_none=True))

    logger.info(f"✅ Contact submission from @{email_domain} delivered")
    return _respond(status.HTTP_200_OK, ContactSuccess().model_dump())
