"""Database models package."""

from portfolio.models.about_me import AboutMe
from portfolio.models.contact_submission import ContactSubmission
from portfolio.models.project import Project
from portfolio.models.skill import Skill

__all__ = ["AboutMe", "ContactSubmission", "Project", "Skill"]
