"""Shared fixtures: an in-memory SQLite database per test."""

import os

# Must be set before catalog.db.session builds its module-level engine.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy.orm import sessionmaker

from catalog.core.config import get_settings
from catalog.db import models  # noqa: F401  registers tables on Base.metadata
from catalog.db.base import Base
from catalog.db.session import build_engine
from catalog.records.product import ProductRecord


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def widget() -> ProductRecord:
    return ProductRecord(
        name="Widget",
        description="A small widget",
        price=19.999,
        category="Electronics",
    )
