"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_ECHO: bool
    LOG_LEVEL: str
    STUDENT_STORE: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'students.db'}")
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.STUDENT_STORE = os.getenv("STUDENT_STORE", "sql").lower()
        self._validate()

    def _validate(self):
        if self.STUDENT_STORE not in ("sql", "memory"):
            raise RuntimeError(f"STUDENT_STORE must be 'sql' or 'memory', got {self.STUDENT_STORE!r}")
        if self.ENV != "dev" and self.STUDENT_STORE == "memory":
            raise RuntimeError("the in-memory student store is only allowed when ENV=dev")


settings = Settings()
