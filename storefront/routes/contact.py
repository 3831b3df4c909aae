"""
storefront/routes/contact.py
Public contact form
"""
from fastapi import APIRouter

from storefront.schemas.common import Notice, StandardResponse
from storefront.schemas.contact import ContactMessage
from storefront.services import contact_service

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", response_model=StandardResponse)
async def send_message(message: ContactMessage):
    await contact_service.submit_contact_message(message)
    return StandardResponse(
        notice=Notice(
            title="Message Sent!",
            message="Thank you for contacting us. We'll get back to you soon.",
        )
    )
