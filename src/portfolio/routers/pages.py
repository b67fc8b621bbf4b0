"""Portfolio page router - renders the single page and handles the contact form."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio.client import PortfolioClient
from portfolio.config import settings, site_config
from portfolio.schemas.page import ContactForm, PageData, SubmitResult
from portfolio.utils.presentation import (
    category_icon,
    display_skills,
    group_skills_by_category,
    proficiency_badge,
)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["category_icon"] = category_icon
templates.env.globals["proficiency_badge"] = proficiency_badge

router = APIRouter()


async def get_portfolio_client() -> AsyncIterator[PortfolioClient]:
    """
    Dependency yielding an API client pointed at ``settings.api_url``.

    Yields:
        PortfolioClient: closed after the request finishes
    """
    async with PortfolioClient(settings.api_url) as client:
        yield client


def _render(
    request: Request,
    page: PageData,
    form: ContactForm,
    submit: SubmitResult | None = None,
) -> HTMLResponse:
    """Render the page template with loaded data and form state."""
    skill_sections = group_skills_by_category(display_skills(page.skills))
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "site": site_config,
            "page": page,
            "skill_sections": skill_sections,
            "form": form,
            "submit": submit,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    client: PortfolioClient = Depends(get_portfolio_client),
) -> HTMLResponse:
    """Render the portfolio page."""
    page = await client.load_page()
    return _render(request, page, ContactForm())


@router.post("/", response_class=HTMLResponse)
async def submit_contact(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    client: PortfolioClient = Depends(get_portfolio_client),
) -> HTMLResponse:
    """
    Submit the contact form and re-render the page.

    The outcome is shown inline; failed submissions keep the visitor's input.
    """
    form = ContactForm(name=name, email=email, subject=subject, message=message)
    submit = await client.submit_contact(form)
    page = await client.load_page()
    return _render(request, page, submit.form, submit)
