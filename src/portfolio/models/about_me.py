"""AboutMe database model."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from portfolio.database import Base


class AboutMe(Base):
    """
    Revision of the biography shown in the About section.

    Rows are never edited; the revision with the latest ``updated_at`` is the
    one displayed.

    Attributes:
        id: Primary key
        title: Section heading
        content: Biography text
        updated_at: Timestamp of this revision
    """

    __tablename__ = "about_me"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of AboutMe."""
        return f"<AboutMe(id={self.id}, title='{self.title}')>"
