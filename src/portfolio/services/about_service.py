"""About-me content persistence."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.errors import StorageError
from portfolio.models.about_me import AboutMe
from portfolio.schemas.about import AboutMeCreate

logger = logging.getLogger(__name__)


class AboutMeService:
    """Reads the current biography; new revisions are inserted, never edited."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_latest(self) -> AboutMe | None:
        """
        Get the most recently updated about-me revision.

        Returns:
            The latest row, or None if no content has been published

        Raises:
            StorageError: If the query fails
        """
        try:
            return (
                self.db.query(AboutMe)
                .order_by(AboutMe.updated_at.desc(), AboutMe.id.desc())
                .first()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch about me content")
            raise StorageError(f"Failed to fetch about me content: {e}") from e

    def publish(self, data: AboutMeCreate) -> AboutMe:
        """
        Insert a new about-me revision, which becomes the latest one.

        Args:
            data: Validated title and content

        Raises:
            StorageError: If the insert fails
        """
        about = AboutMe(title=data.title, content=data.content)
        try:
            self.db.add(about)
            self.db.commit()
            self.db.refresh(about)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("About me publish failed")
            raise StorageError(f"About me publish failed: {e}") from e
        return about
