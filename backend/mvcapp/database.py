"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides
small helpers used by the scripts and tests.
"""

from sqlmodel import SQLModel, create_engine, Session

from .config import settings


def build_engine(url: str = None, echo: bool = None):
    """Create an engine for `url`, adding SQLite thread options when needed."""
    url = url or settings.DATABASE_URL
    kwargs = {"echo": settings.DB_ECHO if echo is None else echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)


engine = build_engine()


def create_db_and_tables(bind=None):
    """Create database tables using SQLModel metadata.

    This function is intended for local development and lightweight
    scripts; schema changes in real deployments are managed outside
    this package.
    """
    # models must be imported so the table is registered on the metadata
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Yield a database `Session` and close it when the caller is done."""
    with Session(engine) as session:
        yield session
