"""Pydantic schemas package."""

from portfolio.schemas.about import AboutMe, AboutMeBase, AboutMeCreate
from portfolio.schemas.contact import (
    ContactSubmission,
    ContactSubmissionBase,
    ContactSubmissionCreate,
)
from portfolio.schemas.page import ContactForm, PageData, SubmitResult
from portfolio.schemas.project import Project, ProjectBase, ProjectCreate
from portfolio.schemas.rpc import (
    HealthStatus,
    RpcErrorBody,
    RpcErrorData,
    RpcErrorResponse,
    RpcResponse,
    RpcResult,
)
from portfolio.schemas.skill import (
    ProficiencyLevel,
    Skill,
    SkillBase,
    SkillCategory,
    SkillCreate,
)

__all__ = [
    "AboutMe",
    "AboutMeBase",
    "AboutMeCreate",
    "ContactForm",
    "ContactSubmission",
    "ContactSubmissionBase",
    "ContactSubmissionCreate",
    "HealthStatus",
    "PageData",
    "ProficiencyLevel",
    "Project",
    "ProjectBase",
    "ProjectCreate",
    "RpcErrorBody",
    "RpcErrorData",
    "RpcErrorResponse",
    "RpcResponse",
    "RpcResult",
    "Skill",
    "SkillBase",
    "SkillCategory",
    "SkillCreate",
    "SubmitResult",
]
