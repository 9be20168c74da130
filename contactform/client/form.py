"""
In-memory model of the contact form: input fields, the submit button and
the toast tray used for transient notifications.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

FIELD_IDS = ("name", "email", "subject", "message")
REQUIRED_FIELD_IDS = ("name", "email", "message")

DEFAULT_SUBMIT_LABEL = "Send Message"
TOAST_DISMISS_SECONDS = 5.0


@dataclass
class FormField:
    id: str
    value: str = ""
    required: bool = False
    flagged: bool = False  # red border

    def blur(self):
        self.flagged = self.required and self.value.strip() == ""

    def focus(self):
        self.flagged = False


@dataclass
class SubmitButton:
    label: str = DEFAULT_SUBMIT_LABEL
    disabled: bool = False
    succeeded: bool = False


@dataclass
class ContactForm:
    fields: Dict[str, FormField]
    submit_button: SubmitButton = field(default_factory=SubmitButton)

    @classmethod
    def create(cls, submit_label: str = DEFAULT_SUBMIT_LABEL, **values: str) -> "ContactForm":
        """Build a form with the four contact fields, optionally pre-filled."""
        fields = {
            field_id: FormField(
                id=field_id,
                value=values.get(field_id, ""),
                required=field_id in REQUIRED_FIELD_IDS,
            )
            for field_id in FIELD_IDS
        }
        return cls(fields=fields, submit_button=SubmitButton(label=submit_label))

    def __getitem__(self, field_id: str) -> FormField:
        return self.fields[field_id]

    def read(self) -> Dict[str, str]:
        return {field_id: self.fields[field_id].value.strip() for field_id in FIELD_IDS}

    def reset(self):
        for form_field in self.fields.values():
            form_field.value = ""
            form_field.flagged = False


@dataclass
class Toast:
    message: str
    kind: str  # "success" | "error"


class Notifier(Protocol):
    def show(self, message: str, kind: str) -> None:
        ...


class ToastTray:
    """
    Keeps only the latest toast on screen; earlier ones are replaced.

    Inside a running event loop each toast is dismissed after `dismiss_after`
    seconds unless a newer one replaced it first.
    """

    def __init__(self, dismiss_after: Optional[float] = TOAST_DISMISS_SECONDS):
        self.dismiss_after = dismiss_after
        self.current: Optional[Toast] = None
        self.history: List[Toast] = []
        self.pending_dismiss: Optional[asyncio.Task] = None

    def show(self, message: str, kind: str) -> None:
        toast = Toast(message=message, kind=kind)
        self.current = toast
        self.history.append(toast)
        if self.dismiss_after is None:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No loop to time the toast with; it stays until dismiss()
            return
        self.pending_dismiss = asyncio.create_task(self._dismiss_later(toast, self.dismiss_after))

    def dismiss(self):
        self.current = None

    async def _dismiss_later(self, toast: Toast, delay: float):
        await asyncio.sleep(delay)
        if self.current is toast:
            self.dismiss()
