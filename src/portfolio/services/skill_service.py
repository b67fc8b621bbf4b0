"""Skill persistence and listing."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.errors import StorageError
from portfolio.models.skill import Skill
from portfolio.schemas.skill import SkillCategory, SkillCreate

logger = logging.getLogger(__name__)


class SkillService:
    """
    Service for creating and listing skills.

    Handles:
    - Inserting validated skills
    - Listing featured skills first, then by name
    - Filtering by category
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the skill service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def _name_ordering(self):
        """
        Name column with byte-wise collation.

        SQLite compares text with BINARY by default; PostgreSQL follows the
        database locale unless told to use "C".
        """
        if self.db.get_bind().dialect.name == "postgresql":
            return Skill.name.collate("C")
        return Skill.name

    def create_skill(self, data: SkillCreate) -> Skill:
        """
        Persist a validated skill.

        Args:
            data: Validated skill fields

        Returns:
            The stored row with generated id and created_at

        Raises:
            StorageError: If the insert fails
        """
        skill = Skill(
            name=data.name,
            category=data.category.value,
            proficiency_level=data.proficiency_level.value,
            years_experience=data.years_experience,
            is_featured=data.is_featured,
        )
        try:
            self.db.add(skill)
            self.db.commit()
            self.db.refresh(skill)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Skill creation failed")
            raise StorageError(f"Skill creation failed: {e}") from e
        return skill

    def list_skills(self) -> list[Skill]:
        """
        List all skills, featured first, then by name ascending.

        Raises:
            StorageError: If the query fails
        """
        try:
            return (
                self.db.query(Skill)
                .order_by(Skill.is_featured.desc(), self._name_ordering().asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch skills")
            raise StorageError(f"Failed to fetch skills: {e}") from e

    def list_skills_by_category(self, category: SkillCategory) -> list[Skill]:
        """
        List skills in one category, in insertion order.

        Args:
            category: Category to match

        Raises:
            StorageError: If the query fails
        """
        try:
            return (
                self.db.query(Skill)
                .filter(Skill.category == category.value)
                .order_by(Skill.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch skills by category %s", category.value)
            raise StorageError(f"Failed to fetch skills by category: {e}") from e
