"""Database initialization script."""

import argparse
import json
import logging

from portfolio.database import Base, SessionLocal, engine
from portfolio.models import AboutMe, ContactSubmission, Project, Skill  # noqa: F401
from portfolio.schemas.about import AboutMeCreate
from portfolio.services.about_service import AboutMeService

logger = logging.getLogger(__name__)


def init_database() -> None:
    """
    Initialize the database by creating all tables.

    This function creates all tables defined in the models if they don't exist.
    It's safe to run multiple times as it won't recreate existing tables.
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables.keys()))


def publish_about_me(filepath: str) -> AboutMe:
    """
    Publish a new about-me revision from a JSON file.

    Args:
        filepath: Path to a JSON file with ``title`` and ``content`` keys

    Returns:
        The stored revision

    Raises:
        pydantic.ValidationError: If the file content is not a valid revision
        StorageError: If the insert fails
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = AboutMeCreate(**json.load(f))

    db = SessionLocal()
    try:
        about = AboutMeService(db).publish(data)
    finally:
        db.close()
    logger.info("Published about me revision %s: %s", about.id, about.title)
    return about


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    from portfolio.config import settings
    from portfolio.main import configure_logging

    parser = argparse.ArgumentParser(description="Create portfolio tables and load content.")
    parser.add_argument("--about", metavar="FILE", help="JSON file with a new about-me revision")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    init_database()
    if args.about:
        publish_about_me(args.about)


if __name__ == "__main__":
    main()
