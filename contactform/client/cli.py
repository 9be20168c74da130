"""
Contact form CLI - submit a message to a running backend from the terminal
"""
import argparse
import asyncio
import sys
from typing import List, Optional

import httpx

from contactform.client.controller import ContactFormController, SubmitOutcome
from contactform.client.form import ContactForm


class ConsoleNotifier:
    """Prints toasts instead of rendering them"""

    def show(self, message: str, kind: str) -> None:
        icon = "✅" if kind == "success" else "❌"
        print(f"{icon} {message}")


async def send(base_url: str, form: ContactForm) -> SubmitOutcome:
    async with httpx.AsyncClient(base_url=base_url) as client:
        controller = ContactFormController(form, client, ConsoleNotifier(), reset_delay=0)
        outcome = await controller.submit()
        if controller.pending_reset is not None:
            await controller.pending_reset
        return outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contactform-send",
        description="Submit the contact form to a running backend",
    )
    parser.add_argument("--url", default="http://localhost:8000", help="Backend base URL")
    parser.add_argument("--name", default="", help="Your name")
    parser.add_argument("--email", default="", help="Your email address")
    parser.add_argument("--subject", default="", help="Subject (optional)")
    parser.add_argument("--message", default="", help="Message body")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    form = ContactForm.create(
        name=args.name,
        email=args.email,
        subject=args.subject,
        message=args.message,
    )
    outcome = asyncio.run(send(args.url, form))
    sys.exit(0 if outcome is SubmitOutcome.SENT else 1)
