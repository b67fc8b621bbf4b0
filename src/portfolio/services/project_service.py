"""Portfolio project persistence."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.errors import StorageError
from portfolio.models.project import Project
from portfolio.schemas.project import ProjectCreate

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Service for creating and listing portfolio projects.

    Both list operations return projects newest first. Rows created within the
    same clock tick are ordered by descending id so the newest insert still
    comes first.
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the project service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create_project(self, data: ProjectCreate) -> Project:
        """
        Persist a validated project.

        Args:
            data: Validated project fields

        Returns:
            The stored row with generated id and timestamps

        Raises:
            StorageError: If the insert fails
        """
        project = Project(
            title=data.title,
            description=data.description,
            github_url=data.github_url,
            demo_url=data.demo_url,
            technologies=list(data.technologies),
            featured=data.featured,
        )
        try:
            self.db.add(project)
            self.db.commit()
            self.db.refresh(project)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Project creation failed")
            raise StorageError(f"Project creation failed: {e}") from e
        return project

    def list_projects(self) -> list[Project]:
        """
        List all projects, newest first.

        Raises:
            StorageError: If the query fails
        """
        try:
            return (
                self.db.query(Project)
                .order_by(Project.created_at.desc(), Project.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch projects")
            raise StorageError(f"Failed to fetch projects: {e}") from e

    def list_featured_projects(self) -> list[Project]:
        """
        List featured projects, newest first.

        Raises:
            StorageError: If the query fails
        """
        try:
            return (
                self.db.query(Project)
                .filter(Project.featured.is_(True))
                .order_by(Project.created_at.desc(), Project.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Featured projects fetch failed")
            raise StorageError(f"Featured projects fetch failed: {e}") from e
