"""
storefront/services/contact_service.py
Contact form submission.

Messages are not stored or forwarded anywhere yet; submission waits
for the configured delay and logs the message.
"""
import asyncio
import logging

from storefront.config.settings import contact_delay_seconds
from storefront.schemas.contact import ContactMessage

logger = logging.getLogger(__name__)


async def submit_contact_message(message: ContactMessage) -> None:
    delay = contact_delay_seconds()
    if delay > 0:
        await asyncio.sleep(delay)
    logger.info(f"Contact message from {message.email}: subject='{message.subject}' ({len(message.message)} chars)")
