"""Project database model."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from portfolio.database import Base


class Project(Base):
    """
    Project model representing portfolio work.

    Attributes:
        id: Primary key
        title: Project title
        description: Short project description
        github_url: Source repository URL
        demo_url: Live demo URL
        technologies: Ordered list of technology names
        featured: Whether the project is highlighted
        created_at: Timestamp when record was created
        updated_at: Timestamp of the last change
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    github_url = Column(Text, nullable=True)
    demo_url = Column(Text, nullable=True)
    technologies = Column(JSON, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Project."""
        return f"<Project(id={self.id}, title='{self.title}', featured={self.featured})>"
