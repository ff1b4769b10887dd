import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from mvcapp import models  # noqa: F401
from mvcapp.repositories import InMemoryStudentDao, SqlStudentDao
from mvcapp.services import StudentService


@pytest.fixture()
def engine():
    """A fresh in-memory SQLite database shared across connections."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture(params=["sql", "memory"])
def dao(request, session):
    """Each DAO contract test runs once per store adapter."""
    if request.param == "sql":
        return SqlStudentDao(session)
    return InMemoryStudentDao()


@pytest.fixture()
def service(dao):
    return StudentService(dao)
