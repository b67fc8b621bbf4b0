"""Async client for the portfolio procedure API."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from portfolio.schemas.about import AboutMe
from portfolio.schemas.contact import ContactSubmission, ContactSubmissionCreate
from portfolio.schemas.page import ContactForm, PageData, SubmitResult
from portfolio.schemas.project import Project, ProjectCreate
from portfolio.schemas.rpc import HealthStatus
from portfolio.schemas.skill import Skill, SkillCategory, SkillCreate

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUBMIT_SUCCESS_MESSAGE = "✨ Thank you! Your message has been sent successfully."
SUBMIT_FAILURE_MESSAGE = "❌ Sorry, there was an error sending your message. Please try again."

_PROJECT_LIST = TypeAdapter(list[Project])
_SKILL_LIST = TypeAdapter(list[Skill])
_SUBMISSION_LIST = TypeAdapter(list[ContactSubmission])
_OPTIONAL_ABOUT = TypeAdapter(AboutMe | None)


class RpcError(Exception):
    """Raised when a procedure call fails or returns an error envelope."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_SERVER_ERROR",
        http_status: int | None = None,
        field_errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.http_status = http_status
        self.field_errors = field_errors or {}


class PortfolioClient:
    """
    Client for the procedures served under ``/trpc``.

    Queries are sent as GET requests with a JSON-encoded ``input`` parameter,
    mutations as POST requests with a JSON body. Every call unwraps the
    ``{"result": {"data": ...}}`` envelope or raises ``RpcError``.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Server root URL (without the ``/trpc`` suffix)
            transport: Optional httpx transport, used to route calls in tests
            timeout: Per-request timeout in seconds
        """
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/trpc",
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "PortfolioClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def query(self, procedure: str, input: Any = None) -> Any:
        """
        Call a query procedure.

        Args:
            procedure: Procedure name, e.g. ``getSkills``
            input: Optional JSON-serializable input

        Returns:
            The unwrapped ``data`` payload

        Raises:
            RpcError: If the call fails
        """
        params = {"input": json.dumps(input)} if input is not None else None
        return await self._call("GET", procedure, params=params)

    async def mutate(self, procedure: str, input: Any) -> Any:
        """
        Call a mutation procedure.

        Args:
            procedure: Procedure name, e.g. ``createSkill``
            input: JSON-serializable input sent as the request body

        Returns:
            The unwrapped ``data`` payload

        Raises:
            RpcError: If the call fails
        """
        return await self._call("POST", procedure, json=input)

    async def _call(self, method: str, procedure: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, f"/{procedure}", **kwargs)
        except httpx.HTTPError as e:
            raise RpcError(f"{procedure} request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise RpcError(
                f"{procedure} returned a non-JSON response",
                http_status=response.status_code,
            ) from e

        if not isinstance(body, dict):
            raise RpcError(
                f"{procedure} returned an unexpected payload",
                http_status=response.status_code,
            )

        if response.is_error or "error" in body:
            error = body.get("error") or {}
            data = error.get("data") or {}
            raise RpcError(
                error.get("message") or f"{procedure} failed with HTTP {response.status_code}",
                code=error.get("code", "INTERNAL_SERVER_ERROR"),
                http_status=response.status_code,
                field_errors=data.get("fieldErrors"),
            )

        try:
            return body["result"]["data"]
        except (KeyError, TypeError) as e:
            raise RpcError(
                f"{procedure} response is missing the result envelope",
                http_status=response.status_code,
            ) from e

    # ------------------------------------------------------------ procedures

    async def healthcheck(self) -> HealthStatus:
        return HealthStatus.model_validate(await self.query("healthcheck"))

    async def create_contact_submission(self, data: ContactSubmissionCreate) -> ContactSubmission:
        result = await self.mutate("createContactSubmission", data.model_dump(mode="json"))
        return ContactSubmission.model_validate(result)

    async def get_contact_submissions(self) -> list[ContactSubmission]:
        return _SUBMISSION_LIST.validate_python(await self.query("getContactSubmissions"))

    async def create_project(self, data: ProjectCreate) -> Project:
        return Project.model_validate(await self.mutate("createProject", data.model_dump(mode="json")))

    async def get_projects(self) -> list[Project]:
        return _PROJECT_LIST.validate_python(await self.query("getProjects"))

    async def get_featured_projects(self) -> list[Project]:
        return _PROJECT_LIST.validate_python(await self.query("getFeaturedProjects"))

    async def create_skill(self, data: SkillCreate) -> Skill:
        return Skill.model_validate(await self.mutate("createSkill", data.model_dump(mode="json")))

    async def get_skills(self) -> list[Skill]:
        return _SKILL_LIST.validate_python(await self.query("getSkills"))

    async def get_skills_by_category(self, category: SkillCategory) -> list[Skill]:
        return _SKILL_LIST.validate_python(
            await self.query("getSkillsByCategory", SkillCategory(category).value)
        )

    async def get_about_me(self) -> AboutMe | None:
        return _OPTIONAL_ABOUT.validate_python(await self.query("getAboutMe"))

    # ------------------------------------------------------------- page flow

    @staticmethod
    async def _with_fallback(call: Awaitable[T], default: T, label: str) -> T:
        """Await a read call, logging and substituting ``default`` on failure."""
        try:
            return await call
        except (RpcError, ValidationError) as e:
            logger.error("Failed to load %s: %s", label, e)
            return default

    async def load_page(self) -> PageData:
        """
        Fetch everything the page shows, concurrently.

        A failed read is logged and replaced by an empty value so the page can
        still render its default content.
        """
        about_me, projects, featured_projects, skills = await asyncio.gather(
            self._with_fallback(self.get_about_me(), None, "about me"),
            self._with_fallback(self.get_projects(), [], "projects"),
            self._with_fallback(self.get_featured_projects(), [], "featured projects"),
            self._with_fallback(self.get_skills(), [], "skills"),
        )
        return PageData(
            about_me=about_me,
            projects=projects,
            featured_projects=featured_projects,
            skills=skills,
        )

    async def submit_contact(self, form: ContactForm) -> SubmitResult:
        """
        Submit the contact form as typed by the visitor.

        Validation happens server-side. On success the returned form is blank;
        on failure it carries the visitor's input unchanged so they can retry.
        """
        try:
            await self.mutate("createContactSubmission", form.model_dump())
        except RpcError as e:
            logger.error("Failed to submit contact form: %s", e)
            return SubmitResult(success=False, message=SUBMIT_FAILURE_MESSAGE, form=form)
        return SubmitResult(success=True, message=SUBMIT_SUCCESS_MESSAGE, form=ContactForm())
