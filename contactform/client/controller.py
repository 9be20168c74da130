"""
Contact form controller.

Drives a ContactForm the way the website's script does: local validation,
a single in-flight POST to /api/contact guarded by disabling the submit
button, and toast feedback. The success grace period runs as an asyncio
task so the caller's event loop is never blocked.
"""

import asyncio
import enum
import logging
from typing import Optional

import httpx

from contactform.client.form import ContactForm, Notifier, REQUIRED_FIELD_IDS
from contactform.models.contact import is_valid_email

logger = logging.getLogger(__name__)

CONTACT_ENDPOINT = "/api/contact"
RESET_DELAY_SECONDS = 3.0

SENDING_LABEL = "Sending..."
SENT_LABEL = "Message Sent!"

MISSING_FIELDS_TOAST = "Please fill in all required fields."
INVALID_EMAIL_TOAST = "Please enter a valid email address."
SENT_TOAST = "Message sent! Check your inbox for a confirmation email."
FAILED_TOAST = "Something went wrong. Please try again."
UNREACHABLE_TOAST = "Could not reach the server. Please check your connection."


class SubmitOutcome(enum.Enum):
    IGNORED = "ignored"
    REJECTED = "rejected"
    SENT = "sent"
    FAILED = "failed"
    UNREACHABLE = "unreachable"


class ContactFormController:
    def __init__(
        self,
        form: ContactForm,
        http_client: httpx.AsyncClient,
        notifier: Notifier,
        endpoint: str = CONTACT_ENDPOINT,
        reset_delay: float = RESET_DELAY_SECONDS,
    ):
        self.form = form
        self.http_client = http_client
        self.notifier = notifier
        self.endpoint = endpoint
        self.reset_delay = reset_delay
        self.pending_reset: Optional[asyncio.Task] = None

    async def submit(self) -> SubmitOutcome:
        """
        Validate the form and post it.

        Returns:
            SubmitOutcome: What happened; the form and toast tray reflect it too
        """
        button = self.form.submit_button
        if button.disabled:
            return SubmitOutcome.IGNORED

        values = self.form.read()

        if any(not values[field_id] for field_id in REQUIRED_FIELD_IDS):
            self.notifier.show(MISSING_FIELDS_TOAST, "error")
            return SubmitOutcome.REJECTED

        if not is_valid_email(values["email"]):
            self.notifier.show(INVALID_EMAIL_TOAST, "error")
            return SubmitOutcome.REJECTED

        original_label = button.label
        button.label = SENDING_LABEL
        button.disabled = True

        try:
            response = await self.http_client.post(
                self.endpoint,
                json=values,
                headers={"Content-Type": "application/json"},
            )
        except httpx.RequestError as e:
            logger.warning(f"Contact endpoint unreachable: {str(e)}")
            self._restore(original_label)
            self.notifier.show(UNREACHABLE_TOAST, "error")
            return SubmitOutcome.UNREACHABLE

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        if response.is_success and data.get("success") is True:
            button.label = SENT_LABEL
            button.succeeded = True
            self.notifier.show(SENT_TOAST, "success")
            self.pending_reset = asyncio.create_task(self._reset_later(original_label))
            return SubmitOutcome.SENT

        self._restore(original_label)
        error = data.get("error")
        self.notifier.show(error if isinstance(error, str) and error else FAILED_TOAST, "error")
        return SubmitOutcome.FAILED

    def on_blur(self, field_id: str):
        self.form[field_id].blur()

    def on_focus(self, field_id: str):
        self.form[field_id].focus()

    def _restore(self, label: str):
        button = self.form.submit_button
        button.label = label
        button.succeeded = False
        button.disabled = False

    async def _reset_later(self, label: str):
        await asyncio.sleep(self.reset_delay)
        self.form.reset()
        self._restore(label)


def bind_contact_form(
    form: Optional[ContactForm],
    http_client: httpx.AsyncClient,
    notifier: Notifier,
    **kwargs,
) -> Optional[ContactFormController]:
    """Attach a controller to the page's form; pages without one get None."""
    if form is None:
        return None
    return ContactFormController(form, http_client, notifier, **kwargs)
