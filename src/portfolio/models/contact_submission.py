"""ContactSubmission database model."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from portfolio.database import Base


class ContactSubmission(Base):
    """
    Message left by a visitor through the contact form.

    Attributes:
        id: Primary key
        name: Sender name
        email: Sender email address
        subject: Message subject line
        message: Message body
        created_at: Timestamp when record was created
    """

    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of ContactSubmission."""
        return f"<ContactSubmission(id={self.id}, email='{self.email}', subject='{self.subject}')>"
