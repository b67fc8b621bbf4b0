"""Procedure API router - one named query or mutation per handler."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from portfolio.database import get_db
from portfolio.schemas.about import AboutMe
from portfolio.schemas.contact import ContactSubmission, ContactSubmissionCreate
from portfolio.schemas.project import Project, ProjectCreate
from portfolio.schemas.rpc import HealthStatus, RpcResponse
from portfolio.schemas.skill import Skill, SkillCategory, SkillCreate
from portfolio.services.about_service import AboutMeService
from portfolio.services.contact_service import ContactService
from portfolio.services.project_service import ProjectService
from portfolio.services.skill_service import SkillService

router = APIRouter()

_CATEGORY_INPUT = TypeAdapter(SkillCategory)


def _result(data: Any) -> dict[str, Any]:
    """Wrap a procedure output in the success envelope."""
    return {"result": {"data": data}}


def category_input(
    raw: str = Query(..., alias="input", description="JSON-encoded skill category"),
) -> SkillCategory:
    """
    Decode the ``input`` query parameter of getSkillsByCategory.

    Raises:
        RequestValidationError: If the value is not valid JSON or not a known category
    """
    try:
        return _CATEGORY_INPUT.validate_json(raw)
    except ValidationError as exc:
        errors = [{**error, "loc": ("query", "input", *error["loc"])} for error in exc.errors()]
        raise RequestValidationError(errors) from exc


@router.get("/healthcheck", response_model=RpcResponse[HealthStatus])
def healthcheck() -> dict[str, Any]:
    """Report that the server is up."""
    return _result(HealthStatus(status="ok", timestamp=datetime.now(timezone.utc)))


@router.post("/createContactSubmission", response_model=RpcResponse[ContactSubmission])
def create_contact_submission(
    payload: ContactSubmissionCreate,
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """Store a visitor message from the contact form."""
    submission = ContactService(db).create_submission(payload)
    return _result(ContactSubmission.model_validate(submission))


@router.get("/getContactSubmissions", response_model=RpcResponse[list[ContactSubmission]])
def get_contact_submissions(db: Session = Depends(get_db)) -> dict[str, Any]:
    """List all contact submissions, newest first."""
    submissions = ContactService(db).list_submissions()
    return _result([ContactSubmission.model_validate(s) for s in submissions])


@router.post("/createProject", response_model=RpcResponse[Project])
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)) -> dict[str, Any]:
    """Add a project to the portfolio."""
    project = ProjectService(db).create_project(payload)
    return _result(Project.model_validate(project))


@router.get("/getProjects", response_model=RpcResponse[list[Project]])
def get_projects(db: Session = Depends(get_db)) -> dict[str, Any]:
    """List all projects, newest first."""
    projects = ProjectService(db).list_projects()
    return _result([Project.model_validate(p) for p in projects])


@router.get("/getFeaturedProjects", response_model=RpcResponse[list[Project]])
def get_featured_projects(db: Session = Depends(get_db)) -> dict[str, Any]:
    """List featured projects, newest first."""
    projects = ProjectService(db).list_featured_projects()
    return _result([Project.model_validate(p) for p in projects])


@router.post("/createSkill", response_model=RpcResponse[Skill])
def create_skill(payload: SkillCreate, db: Session = Depends(get_db)) -> dict[str, Any]:
    """Add a skill to the portfolio."""
    skill = SkillService(db).create_skill(payload)
    return _result(Skill.model_validate(skill))


@router.get("/getSkills", response_model=RpcResponse[list[Skill]])
def get_skills(db: Session = Depends(get_db)) -> dict[str, Any]:
    """List all skills, featured first, then by name."""
    skills = SkillService(db).list_skills()
    return _result([Skill.model_validate(s) for s in skills])


@router.get("/getSkillsByCategory", response_model=RpcResponse[list[Skill]])
def get_skills_by_category(
    category: SkillCategory = Depends(category_input),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """List the skills of one category."""
    skills = SkillService(db).list_skills_by_category(category)
    return _result([Skill.model_validate(s) for s in skills])


@router.get("/getAboutMe", response_model=RpcResponse[AboutMe | None])
def get_about_me(db: Session = Depends(get_db)) -> dict[str, Any]:
    """Get the current biography, or null when none has been published."""
    about = AboutMeService(db).get_latest()
    return _result(AboutMe.model_validate(about) if about else None)
