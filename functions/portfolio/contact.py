"""
Contact form intake. Messages are logged and acknowledged, never stored.
"""

from __future__ import annotations

import logging
from typing import Any

from shared.types import ContactMessage, ContactReceipt

logger = logging.getLogger(__name__)

ACK_MESSAGE = "Message received successfully"


def submit_contact(
    name: Any = None, email: Any = None, message: Any = None
) -> ContactReceipt:
    """
    Log a contact submission and acknowledge it.

    No field is required or validated; whatever the client sent is logged
    as-is and the caller always gets a success receipt.
    """
    contact = ContactMessage(name=name, email=email, message=message)
    logger.info(
        "New contact message: name=%r email=%r message=%r",
        contact.name,
        contact.email,
        contact.message,
    )
    return ContactReceipt(success=True, message=ACK_MESSAGE)
