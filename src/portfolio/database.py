"""
Engine and request-scoped sessions for the portfolio tables.

Contact submissions, projects, skills and about-me revisions all live in the
database named by ``DATABASE_URL``: a local SQLite file by default, or
PostgreSQL when the ``postgres`` extra is installed.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from portfolio.config import settings

# SQLite connections are shared across FastAPI's worker threads
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Yield one session per procedure call, closed when the response is sent.

    Services commit or roll back themselves; this only guarantees the close.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
