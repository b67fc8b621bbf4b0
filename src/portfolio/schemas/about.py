"""About-me Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AboutMeBase(BaseModel):
    """Base about-me schema with common fields."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)


class AboutMeCreate(AboutMeBase):
    """Schema for publishing a new about-me revision."""

    pass


class AboutMe(AboutMeBase):
    """Complete about-me schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    updated_at: datetime
