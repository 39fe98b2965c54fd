import asyncio
import logging
import re
from typing import Dict

from .models import ContactIn

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_MESSAGE_LENGTH = 10

FIELDS = ("name", "email", "message")

CONTACT_INFO = [
    {"icon": "📧", "title": "Email", "value": "grinn2009@gmail.com", "link": "mailto:grinn2009@gmail.com"},
    {"icon": "📱", "title": "Telegram", "value": "@kr0n4k", "link": "https://t.me/kr0n4k"},
    {"icon": "📍", "title": "Address", "value": "Yelets, Russia", "link": "https://maps.google.com/?q=Yelets,Russia"},
    {"icon": "🕒", "title": "Time zone", "value": "MSK (UTC+3)", "link": None},
]


def validate_contact(fields: ContactIn) -> Dict[str, str]:
    """Map each invalid field to its error message. Empty means valid."""
    errors: Dict[str, str] = {}

    if not fields.name.strip():
        errors["name"] = "Name is required"

    if not fields.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_RE.match(fields.email):
        errors["email"] = "Enter a valid email"

    message = fields.message.strip()
    if not message:
        errors["message"] = "Message cannot be empty"
    elif len(message) < MIN_MESSAGE_LENGTH:
        errors["message"] = f"Message must be at least {MIN_MESSAGE_LENGTH} characters"

    return errors


class ContactForm:
    """State of one contact form: field values, per-field errors, submit flags."""

    def __init__(self, fields: ContactIn | None = None):
        self.fields = fields or ContactIn()
        self.errors: Dict[str, str] = {}
        self.is_loading = False
        self.is_submitted = False

    def update(self, name: str, value: str):
        if name not in FIELDS:
            raise KeyError(name)
        self.fields = self.fields.model_copy(update={name: value})
        self.errors.pop(name, None)

    def validate(self) -> bool:
        self.errors = validate_contact(self.fields)
        return not self.errors

    async def submit(self, delay: float) -> bool:
        """
        Validate, then simulate sending. Nothing leaves the process:
        the message is only logged after `delay` seconds.
        """
        if not self.validate():
            return False
        self.is_loading = True
        try:
            await asyncio.sleep(delay)
            logger.info("Contact form submitted by %s <%s>", self.fields.name.strip(), self.fields.email)
            self.is_submitted = True
        finally:
            self.is_loading = False
        return True

    def reset(self):
        self.fields = ContactIn()
        self.errors = {}
        self.is_submitted = False
