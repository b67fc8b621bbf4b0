"""Skill database model."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from portfolio.database import Base


class Skill(Base):
    """
    Skill model representing technologies listed on the portfolio.

    Attributes:
        id: Primary key
        name: Skill name
        category: Skill category (frontend, backend, database, devops, tools, other)
        proficiency_level: beginner, intermediate, advanced or expert
        years_experience: Years of hands-on experience, if known
        is_featured: Whether the skill is highlighted
        created_at: Timestamp when record was created
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    category = Column(String(20), nullable=False)
    proficiency_level = Column(String(20), nullable=False)
    years_experience = Column(Integer, nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Skill."""
        return f"<Skill(id={self.id}, name='{self.name}', category='{self.category}')>"
