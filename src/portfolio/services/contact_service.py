"""Contact form submission persistence."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.errors import StorageError
from portfolio.models.contact_submission import ContactSubmission
from portfolio.schemas.contact import ContactSubmissionCreate

logger = logging.getLogger(__name__)


class ContactService:
    """Stores and lists visitor messages. Submissions are append-only."""

    def __init__(self, db: Session) -> None:
        """
        Initialize the contact service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create_submission(self, data: ContactSubmissionCreate) -> ContactSubmission:
        """
        Persist a validated contact form submission.

        Args:
            data: Validated submission fields

        Returns:
            The stored row, including generated id and created_at

        Raises:
            StorageError: If the insert fails
        """
        submission = ContactSubmission(
            name=data.name,
            email=data.email,
            subject=data.subject,
            message=data.message,
        )
        try:
            self.db.add(submission)
            self.db.commit()
            self.db.refresh(submission)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Contact submission creation failed")
            raise StorageError(f"Contact submission creation failed: {e}") from e
        return submission

    def list_submissions(self) -> list[ContactSubmission]:
        """
        List all submissions, newest first.

        Raises:
            StorageError: If the query fails
        """
        try:
            return (
                self.db.query(ContactSubmission)
                .order_by(ContactSubmission.created_at.desc(), ContactSubmission.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to get contact submissions")
            raise StorageError(f"Failed to get contact submissions: {e}") from e
