"""Shared pytest setup: every test runs against a fresh in-memory database."""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LEGACY_API_ENABLED", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from shop.core.database import Base, engine, init_db  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield
