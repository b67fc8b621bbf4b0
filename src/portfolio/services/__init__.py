"""Services package."""

from portfolio.services.about_service import AboutMeService
from portfolio.services.contact_service import ContactService
from portfolio.services.project_service import ProjectService
from portfolio.services.skill_service import SkillService

__all__ = ["AboutMeService", "ContactService", "ProjectService", "SkillService"]
