"""Integration tests for the procedure API endpoints."""

from __future__ import annotations

import json
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from portfolio.database import get_db
from portfolio.main import app
from portfolio.models.about_me import AboutMe
from portfolio.models.skill import Skill

CONTACT = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "subject": "Collaboration",
    "message": "Let's build an analytical engine.",
}


def _data(response):
    """Unwrap the success envelope."""
    assert response.status_code == 200, response.text
    return response.json()["result"]["data"]


def _create_skill(client, name, category, featured=False, years=3):
    return _data(
        client.post(
            "/trpc/createSkill",
            json={
                "name": name,
                "category": category,
                "proficiency_level": "advanced",
                "years_experience": years,
                "is_featured": featured,
            },
        )
    )


def _create_project(client, title, featured=False, technologies=("Python",)):
    return _data(
        client.post(
            "/trpc/createProject",
            json={
                "title": title,
                "description": f"{title} description",
                "github_url": None,
                "demo_url": None,
                "technologies": list(technologies),
                "featured": featured,
            },
        )
    )


class TestHealthcheck:
    """Tests for GET /trpc/healthcheck."""

    def test_healthcheck(self, client):
        data = _data(client.get("/trpc/healthcheck"))
        assert data["status"] == "ok"
        assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))


class TestContactSubmissions:
    """Tests for contact submission procedures."""

    def test_create_returns_stored_row(self, client):
        data = _data(client.post("/trpc/createContactSubmission", json=CONTACT))
        assert isinstance(data["id"], int)
        assert data["created_at"]
        for key, value in CONTACT.items():
            assert data[key] == value

    def test_create_then_list(self, client):
        """The created submission appears exactly once with identical values."""
        created = _data(client.post("/trpc/createContactSubmission", json=CONTACT))
        rows = _data(client.get("/trpc/getContactSubmissions"))
        matches = [row for row in rows if row["id"] == created["id"]]
        assert len(matches) == 1
        assert matches[0] == created

    def test_list_empty(self, client):
        assert _data(client.get("/trpc/getContactSubmissions")) == []

    def test_invalid_input_rejected_before_storage(self, client):
        """Validation errors return 400 with field-level detail and store nothing."""
        response = client.post(
            "/trpc/createContactSubmission",
            json={**CONTACT, "email": "nope", "name": ""},
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["data"]["httpStatus"] == 400
        assert error["data"]["path"] == "createContactSubmission"
        assert set(error["data"]["fieldErrors"]) == {"email", "name"}

        assert _data(client.get("/trpc/getContactSubmissions")) == []

    def test_email_stored_as_sent(self, client):
        """Mixed-case addresses are validated but never rewritten."""
        created = _data(
            client.post("/trpc/createContactSubmission", json={**CONTACT, "email": "Ada@Example.COM"})
        )
        assert created["email"] == "Ada@Example.COM"
        rows = _data(client.get("/trpc/getContactSubmissions"))
        assert rows[0]["email"] == "Ada@Example.COM"

    def test_missing_field(self, client):
        payload = {k: v for k, v in CONTACT.items() if k != "message"}
        response = client.post("/trpc/createContactSubmission", json=payload)
        assert response.status_code == 400
        assert "message" in response.json()["error"]["data"]["fieldErrors"]


class TestProjects:
    """Tests for project procedures."""

    def test_create_project(self, client):
        data = _data(
            client.post(
                "/trpc/createProject",
                json={
                    "title": "Portfolio",
                    "description": "This site",
                    "github_url": "https://github.com/ada/portfolio",
                    "demo_url": "https://ada.dev",
                    "technologies": ["A", "B"],
                },
            )
        )
        assert data["technologies"] == ["A", "B"]
        assert data["featured"] is False
        assert data["github_url"] == "https://github.com/ada/portfolio"
        assert data["demo_url"] == "https://ada.dev"
        assert data["created_at"] and data["updated_at"]

    def test_empty_technologies_rejected(self, client):
        response = client.post(
            "/trpc/createProject",
            json={"title": "T", "description": "D", "technologies": []},
        )
        assert response.status_code == 400
        assert "technologies" in response.json()["error"]["data"]["fieldErrors"]
        assert _data(client.get("/trpc/getProjects")) == []

    def test_invalid_url_rejected(self, client):
        response = client.post(
            "/trpc/createProject",
            json={"title": "T", "description": "D", "technologies": ["X"], "demo_url": "demo"},
        )
        assert response.status_code == 400
        assert "demo_url" in response.json()["error"]["data"]["fieldErrors"]

    def test_featured_visibility(self, client):
        """Featured projects appear in both lists; others only in getProjects."""
        featured = _create_project(client, "Featured", featured=True)
        plain = _create_project(client, "Plain", featured=False)

        all_ids = {p["id"] for p in _data(client.get("/trpc/getProjects"))}
        featured_ids = {p["id"] for p in _data(client.get("/trpc/getFeaturedProjects"))}

        assert all_ids == {featured["id"], plain["id"]}
        assert featured_ids == {featured["id"]}

    def test_lists_newest_first(self, client):
        for i in range(3):
            _create_project(client, f"Project {i}", featured=True)

        for path in ("/trpc/getProjects", "/trpc/getFeaturedProjects"):
            projects = _data(client.get(path))
            assert [p["title"] for p in projects] == ["Project 2", "Project 1", "Project 0"]
            created = [datetime.fromisoformat(p["created_at"]) for p in projects]
            assert all(a >= b for a, b in zip(created, created[1:]))


class TestSkills:
    """Tests for skill procedures."""

    def test_get_skills_ordering(self, client):
        _create_skill(client, "PostgreSQL", "database", featured=False)
        _create_skill(client, "TypeScript", "frontend", featured=True)
        _create_skill(client, "React", "frontend", featured=True)

        names = [s["name"] for s in _data(client.get("/trpc/getSkills"))]
        assert names == ["React", "TypeScript", "PostgreSQL"]

    def test_get_skills_by_category(self, client):
        _create_skill(client, "React", "frontend")
        _create_skill(client, "Node.js", "backend")
        _create_skill(client, "PostgreSQL", "database")
        _create_skill(client, "TypeScript", "frontend")

        skills = _data(
            client.get("/trpc/getSkillsByCategory", params={"input": json.dumps("frontend")})
        )
        assert {s["name"] for s in skills} == {"React", "TypeScript"}
        assert all(s["category"] == "frontend" for s in skills)

    def test_get_skills_by_unknown_category(self, client):
        response = client.get("/trpc/getSkillsByCategory", params={"input": json.dumps("design")})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["data"]["path"] == "getSkillsByCategory"
        assert "input" in error["data"]["fieldErrors"]

    @pytest.mark.parametrize("params", [{}, {"input": "frontend"}])
    def test_get_skills_by_category_bad_input(self, client, params):
        """Missing or non-JSON input is a validation error."""
        response = client.get("/trpc/getSkillsByCategory", params=params)
        assert response.status_code == 400

    def test_null_years_preserved(self, client):
        created = _create_skill(client, "Go", "backend", years=None)
        assert created["years_experience"] is None
        listed = _data(client.get("/trpc/getSkills"))
        assert listed[0]["years_experience"] is None

    def test_negative_years_rejected(self, client):
        response = client.post(
            "/trpc/createSkill",
            json={
                "name": "Go",
                "category": "backend",
                "proficiency_level": "expert",
                "years_experience": -2,
            },
        )
        assert response.status_code == 400
        assert "years_experience" in response.json()["error"]["data"]["fieldErrors"]

    def test_loosely_typed_values_rejected(self, client):
        """Numeric strings and truthy words are not coerced; nothing is stored."""
        response = client.post(
            "/trpc/createSkill",
            json={
                "name": "Go",
                "category": "backend",
                "proficiency_level": "expert",
                "years_experience": "3",
                "is_featured": "yes",
            },
        )
        assert response.status_code == 400
        field_errors = response.json()["error"]["data"]["fieldErrors"]
        assert {"years_experience", "is_featured"} <= set(field_errors)
        assert _data(client.get("/trpc/getSkills")) == []

    def test_is_featured_defaults_false(self, client):
        data = _data(
            client.post(
                "/trpc/createSkill",
                json={"name": "Vim", "category": "tools", "proficiency_level": "beginner"},
            )
        )
        assert data["is_featured"] is False
        assert data["years_experience"] is None


class TestAboutMe:
    """Tests for GET /trpc/getAboutMe."""

    def test_absent(self, client):
        assert _data(client.get("/trpc/getAboutMe")) is None

    def test_latest_revision(self, client, db):
        db.add(AboutMe(title="Old", content="v1", updated_at=datetime(2023, 1, 1)))
        db.add(AboutMe(title="New", content="v2", updated_at=datetime(2024, 1, 1)))
        db.commit()

        data = _data(client.get("/trpc/getAboutMe"))
        assert data["title"] == "New"
        assert data["content"] == "v2"

    def test_no_public_write_procedure(self, client):
        response = client.post("/trpc/createAboutMe", json={"title": "x", "content": "y"})
        assert response.status_code in (404, 405)


class TestStorageErrors:
    """Storage failures are reported as 500 error envelopes."""

    @pytest.fixture
    def broken_client(self):
        def broken_db():
            session = MagicMock()
            error = OperationalError("SELECT 1", {}, Exception("connection refused"))
            session.query.side_effect = error
            session.commit.side_effect = error
            session.get_bind.return_value.dialect.name = "sqlite"
            yield session

        app.dependency_overrides[get_db] = broken_db
        with TestClient(app) as c:
            yield c
        app.dependency_overrides.clear()

    @pytest.mark.parametrize(
        "path",
        ["/trpc/getProjects", "/trpc/getSkills", "/trpc/getAboutMe", "/trpc/getContactSubmissions"],
    )
    def test_read_failure(self, broken_client, path):
        response = broken_client.get(path)
        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_SERVER_ERROR"
        assert error["data"]["httpStatus"] == 500

    def test_write_failure(self, broken_client):
        response = broken_client.post("/trpc/createContactSubmission", json=CONTACT)
        assert response.status_code == 500
        assert "Contact submission creation failed" in response.json()["error"]["message"]


def test_seeded_skill_rows_round_trip(client, db):
    """Rows inserted directly are served with enum values intact."""
    db.add(Skill(name="Rust", category="other", proficiency_level="beginner", is_featured=False))
    db.commit()
    skills = _data(client.get("/trpc/getSkills"))
    assert skills[0]["category"] == "other"
    assert skills[0]["proficiency_level"] == "beginner"
