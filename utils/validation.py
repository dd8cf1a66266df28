"""
Validation Module - Request schemas for the public form API
"""

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Za-z0-9_'+\-\.]*)[A-Za-z0-9_+-]"
    r"@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}$"
)


def is_valid_email(value):
    """Check an address against the same pattern the contact form uses"""
    return bool(value) and EMAIL_PATTERN.match(value) is not None


class EmailField(BaseModel):
    email: str

    @field_validator('email')
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        v = v.strip()
        if not is_valid_email(v):
            raise ValueError('Invalid email address')
        return v


class ContactForm(EmailField):
    """Contact form submission."""

    name: str = Field(..., min_length=2)
    subject: Optional[str] = None
    message: str = Field(..., min_length=10)


class NewsletterForm(EmailField):
    """Newsletter subscription request."""

    name: Optional[str] = None
    preferences: List[str] = Field(default_factory=lambda: ['new_work'])


class UnsubscribeForm(BaseModel):
    email: Optional[str] = None
    reason: Optional[str] = None

    @field_validator('reason', mode='before')
    @classmethod
    def ignore_non_text_reason(cls, v):
        return v if isinstance(v, str) else None


class RSVPForm(EmailField):
    """Event RSVP. Field names follow the JSON the RSVP form posts."""

    event_id: str = Field(..., alias='eventId', min_length=1)
    name: str = Field(..., min_length=2)
    phone: Optional[str] = None
    guest_count: int = Field(..., alias='guestCount', ge=1, le=10, strict=True)
    attending: Literal['YES', 'NO', 'MAYBE']
    dietary_restrictions: Optional[str] = Field(None, alias='dietaryRestrictions')
    message: Optional[str] = None

    @field_validator('guest_count', mode='before')
    @classmethod
    def whole_number_guest_count(cls, v):
        # JSON has one number type; 3.0 is a whole count
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


__all__ = [
    'EMAIL_PATTERN',
    'is_valid_email',
    'ContactForm',
    'NewsletterForm',
    'UnsubscribeForm',
    'RSVPForm',
]
