import pytest

from mvcapp.config import Settings


def test_defaults(monkeypatch):
    for var in ("ENV", "DATABASE_URL", "STUDENT_STORE", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.ENV == "dev"
    assert s.STUDENT_STORE == "sql"
    assert s.DATABASE_URL.startswith("sqlite:///")
    assert s.LOG_LEVEL == "INFO"


def test_memory_store_rejected_outside_dev(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("STUDENT_STORE", "memory")
    with pytest.raises(RuntimeError):
        Settings()


def test_unknown_store_rejected(monkeypatch):
    monkeypatch.setenv("STUDENT_STORE", "redis")
    with pytest.raises(RuntimeError):
        Settings()
