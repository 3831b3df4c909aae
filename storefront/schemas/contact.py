"""
storefront/schemas/contact.py
Contact form validation.

Each rule raises a custom error whose message is the exact text the
form shows, so the first failure can be surfaced verbatim.
"""
from email_validator import EmailNotValidError, validate_email
from pydantic import field_validator
from pydantic_core import PydanticCustomError

from storefront.schemas.common import StrictModel


def _check_length(value: str, minimum: int, maximum: int, too_short: str, field: str) -> str:
    if len(value) < minimum:
        raise PydanticCustomError("contact_rule", too_short)
    if len(value) > maximum:
        raise PydanticCustomError(
            "contact_rule",
            "{field} must be at most {maximum} characters",
            {"field": field, "maximum": maximum},
        )
    return value


class ContactMessage(StrictModel):
    name: str
    email: str
    subject: str
    message: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_length(v, 1, 100, "Name is required", "Name")

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        if len(v) > 255:
            raise PydanticCustomError("contact_rule", "Email must be at most 255 characters")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("contact_rule", "Invalid email address")
        return v

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, v: str) -> str:
        return _check_length(v, 1, 200, "Subject is required", "Subject")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        return _check_length(v, 10, 1000, "Message must be at least 10 characters", "Message")
