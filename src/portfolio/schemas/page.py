"""Schemas backing the rendered portfolio page."""

from pydantic import BaseModel, Field

from portfolio.schemas.about import AboutMe
from portfolio.schemas.project import Project
from portfolio.schemas.skill import Skill


class PageData(BaseModel):
    """Everything the page loads from the API on render."""

    about_me: AboutMe | None = None
    projects: list[Project] = Field(default_factory=list)
    featured_projects: list[Project] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)


class ContactForm(BaseModel):
    """Raw contact form state as typed by the visitor (unvalidated)."""

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class SubmitResult(BaseModel):
    """Outcome of a contact form submission."""

    success: bool
    message: str
    form: ContactForm
