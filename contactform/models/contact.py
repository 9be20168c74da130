"""
Contact form submission models.

The same email pattern is used by the form client and by the handler so a
submission accepted in the browser is never rejected by the server for its
shape (and vice versa).
"""

import re
from pydantic import BaseModel, ConfigDict
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS_MESSAGE = "Name, email and message are required."
INVALID_EMAIL_MESSAGE = "Invalid email address."


def is_valid_email(value: str) -> bool:
    return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None


class SubmissionRejected(Exception):
    """Raised when a payload is not a complete, valid submission"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ContactPayload(BaseModel):
    """Raw request body. Every key is optional until validated."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactSubmission(BaseModel):
    name: str
    email: str
    subject: str = ""
    message: str


class ContactSuccess(BaseModel):
    success: bool = True


class ContactError(BaseModel):
    error: str
    details: Optional[str] = None


def validate_submission(payload: ContactPayload) -> ContactSubmission:
    """
    Turn a raw payload into a submission or reject it.

    Args:
        payload: Body as received, already trimmed

    Returns:
        ContactSubmission: A complete submission, safe to relay

    Raises:
        SubmissionRejected: A required field is empty or the email is malformed
    """
    if not payload.name or not payload.email or not payload.message:
        raise SubmissionRejected(REQUIRED_FIELDS_MESSAGE)

    if not is_valid_email(payload.email):
        raise SubmissionRejected(INVALID_EMAIL_MESSAGE)

    return ContactSubmission(
        name=payload.name,
        email=payload.email,
        subject=payload.subject or "",
        message=payload.message,
    )
