"""Display helpers for the portfolio page."""

from datetime import datetime

from portfolio.schemas.skill import ProficiencyLevel, Skill, SkillCategory

# Categories rendered on the page, in display order ("other" is not shown)
DISPLAY_CATEGORIES: tuple[SkillCategory, ...] = (
    SkillCategory.FRONTEND,
    SkillCategory.BACKEND,
    SkillCategory.DATABASE,
    SkillCategory.DEVOPS,
    SkillCategory.TOOLS,
)

CATEGORY_ICONS: dict[SkillCategory, str] = {
    SkillCategory.FRONTEND: "🎨",
    SkillCategory.BACKEND: "⚙️",
    SkillCategory.DATABASE: "🗄️",
    SkillCategory.DEVOPS: "🚀",
    SkillCategory.TOOLS: "🛠️",
}

PROFICIENCY_BADGES: dict[ProficiencyLevel, str] = {
    ProficiencyLevel.EXPERT: "badge-expert",
    ProficiencyLevel.ADVANCED: "badge-advanced",
    ProficiencyLevel.INTERMEDIATE: "badge-intermediate",
}

_DEFAULT_SKILL_ROWS: list[tuple[str, str, str, int, bool]] = [
    ("TypeScript", "frontend", "advanced", 4, True),
    ("React", "frontend", "expert", 5, True),
    ("Next.js", "frontend", "advanced", 3, True),
    ("Node.js", "backend", "expert", 5, True),
    ("Express.js", "backend", "advanced", 4, True),
    ("Python", "backend", "advanced", 4, True),
    ("Django", "backend", "intermediate", 2, False),
    ("Flask", "backend", "intermediate", 2, False),
    ("PostgreSQL", "database", "advanced", 4, True),
    ("MongoDB", "database", "intermediate", 3, False),
    ("Docker", "devops", "advanced", 3, True),
    ("Kubernetes", "devops", "intermediate", 2, False),
    ("AWS", "devops", "advanced", 3, True),
    ("GCP", "devops", "intermediate", 2, False),
    ("Azure", "devops", "intermediate", 1, False),
    ("Git", "tools", "expert", 6, True),
    ("GraphQL", "backend", "advanced", 3, True),
    ("RESTful APIs", "backend", "expert", 5, True),
    ("TDD/BDD", "tools", "advanced", 4, True),
]

_DEFAULTS_CREATED_AT = datetime(2024, 1, 1)

# Shown while no skills have been stored yet
DEFAULT_SKILLS: list[Skill] = [
    Skill(
        id=index,
        name=name,
        category=SkillCategory(category),
        proficiency_level=ProficiencyLevel(level),
        years_experience=years,
        is_featured=featured,
        created_at=_DEFAULTS_CREATED_AT,
    )
    for index, (name, category, level, years, featured) in enumerate(_DEFAULT_SKILL_ROWS, start=1)
]


def display_skills(skills: list[Skill]) -> list[Skill]:
    """
    Pick the skills to render.

    Args:
        skills: Skills loaded from the API

    Returns:
        The loaded skills, or the built-in defaults when none are stored
    """
    return skills if skills else DEFAULT_SKILLS


def group_skills_by_category(skills: list[Skill]) -> list[tuple[SkillCategory, list[Skill]]]:
    """
    Group skills into page sections, skipping empty categories.

    Args:
        skills: Skills to group (their order is kept within each section)

    Returns:
        ``(category, skills)`` pairs in ``DISPLAY_CATEGORIES`` order

    Examples:
        >>> [c.value for c, _ in group_skills_by_category(DEFAULT_SKILLS)]
        ['frontend', 'backend', 'database', 'devops', 'tools']
    """
    sections = []
    for category in DISPLAY_CATEGORIES:
        members = [skill for skill in skills if skill.category == category]
        if members:
            sections.append((category, members))
    return sections


def category_icon(category: SkillCategory) -> str:
    """Icon shown next to a category heading."""
    return CATEGORY_ICONS.get(category, "💡")


def proficiency_badge(level: ProficiencyLevel) -> str:
    """CSS class for a skill badge; beginners share the default style."""
    return PROFICIENCY_BADGES.get(level, "badge-beginner")
