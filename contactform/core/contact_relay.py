"""
Relays a validated contact submission to EmailJS.

Two emails are sent, strictly one after the other:
  1. Notification -> site owner (recipient set in the EmailJS template)
  2. Auto-reply   -> the visitor (template addressed to {{reply_to}})

The auto-reply is never attempted if the notification failed. There is no
retry: a client retry produces a fresh pair of emails.
"""

import logging
from typing import Any, Dict
from contactform.core.auto_reply import DEFAULT_SUBJECT as AUTO_REPLY_SUBJECT_PLACEHOLDER
from contactform.core.auto_reply import AutoReplyBranding, build_auto_reply_html
from contactform.core.config import EmailJSCredentials
from contactform.core.emailjs import EmailJSClient, EmailJSPayload
from contactform.models.contact import ContactSubmission

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECT_PLACEHOLDER = "(No subject)"


def notification_params(submission: ContactSubmission) -> Dict[str, Any]:
    return {
        "from_name": submission.name,
        "from_email": submission.email,
        "reply_to": submission.email,
        "subject": submission.subject or NOTIFICATION_SUBJECT_PLACEHOLDER,
        "message": submission.message,
    }


def auto_reply_params(submission: ContactSubmission, branding: AutoReplyBranding) -> Dict[str, Any]:
    return {
        "from_name": submission.name,
        "reply_to": submission.email,
        "subject": submission.subject or AUTO_REPLY_SUBJECT_PLACEHOLDER,
        "auto_reply_html": build_auto_reply_html(submission.name, submission.subject, branding),
    }


async def relay_submission(
    submission: ContactSubmission,
    credentials: EmailJSCredentials,
    client: EmailJSClient,
    branding: AutoReplyBranding,
) -> None:
    """
    Send the owner notification, then the visitor auto-reply.

    Args:
        submission: Validated submission
        credentials: Resolved EmailJS credentials and template IDs
        client: EmailJS REST client
        branding: Values interpolated into the auto-reply body

    Raises:
        EmailJSError: From the first call that failed; later calls are skipped
    """
    await client.send(EmailJSPayload(
        service_id=credentials.service_id,
        template_id=credentials.notification_template_id,
        user_id=credentials.public_key,
        accessToken=credentials.private_key,
        template_params=notification_params(submission),
    ))
    logger.info("Owner notification sent")

    await client.send(EmailJSPayload(
        service_id=credentials.service_id,
        template_id=credentials.autoreply_template_id,
        user_id=credentials.public_key,
        accessToken=credentials.private_key,
        template_params=auto_reply_params(submission, branding),
    ))
    logger.info("Visitor auto-reply sent")
