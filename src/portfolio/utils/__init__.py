"""Utility functions package."""

from portfolio.utils.presentation import (
    DEFAULT_SKILLS,
    category_icon,
    display_skills,
    group_skills_by_category,
    proficiency_badge,
)

__all__ = [
    "DEFAULT_SKILLS",
    "category_icon",
    "display_skills",
    "group_skills_by_category",
    "proficiency_badge",
]
