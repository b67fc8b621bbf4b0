"""Contact submission Pydantic schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
)

EMAIL_MAX_LENGTH = 255

_EMAIL = TypeAdapter(EmailStr)


def _check_email(value: str) -> str:
    """Validate an address without rewriting it; the stored value is what was sent."""
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
    try:
        _EMAIL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"Invalid email address: {value}") from e
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class ContactSubmissionBase(BaseModel):
    """Base contact submission schema with common fields."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailAddress
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=2000)


class ContactSubmissionCreate(ContactSubmissionBase):
    """Schema for creating a new contact submission."""

    pass


class ContactSubmission(ContactSubmissionBase):
    """Complete contact submission schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
