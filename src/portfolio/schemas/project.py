"""Project Pydantic schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    TypeAdapter,
    ValidationError,
)

_URL = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Validate a URL while keeping the caller's exact spelling."""
    try:
        _URL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"Invalid URL: {value}") from e
    return value


LinkUrl = Annotated[str, AfterValidator(_check_url)]


class ProjectBase(BaseModel):
    """Base project schema with common fields."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=1000)
    github_url: LinkUrl | None = None
    demo_url: LinkUrl | None = None
    technologies: list[str] = Field(min_length=1)
    featured: StrictBool = False


class ProjectCreate(ProjectBase):
    """Schema for creating a new project."""

    pass


class Project(ProjectBase):
    """Complete project schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime
