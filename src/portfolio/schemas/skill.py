"""Skill Pydantic schemas."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt


class SkillCategory(str, Enum):
    """Skill category enumeration."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    DEVOPS = "devops"
    TOOLS = "tools"
    OTHER = "other"


class ProficiencyLevel(str, Enum):
    """Skill proficiency enumeration, lowest first."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class SkillBase(BaseModel):
    """Base skill schema with common fields."""

    name: str = Field(min_length=1, max_length=100)
    category: SkillCategory
    proficiency_level: ProficiencyLevel
    years_experience: Annotated[StrictInt, Field(ge=0)] | None = None
    is_featured: StrictBool = False


class SkillCreate(SkillBase):
    """Schema for creating a new skill."""

    pass


class Skill(SkillBase):
    """Complete skill schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
