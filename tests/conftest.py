"""Shared test fixtures: in-memory SQLite, fresh hook registry, FastAPI client."""

import os

import pytest

# Ensure settings never point at a real database file
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from userfields.api.v1.dependencies import get_hooks
from userfields.core.hooks import HookRegistry
from userfields.db.repositories.field_groups import FieldGroupRepository
from userfields.db.session import get_session, init_db
from userfields.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def hook_registry():
    return HookRegistry()


@pytest.fixture
def repo(session):
    return FieldGroupRepository(session)


@pytest.fixture
def client(engine, hook_registry):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_hooks] = lambda: hook_registry
    yield TestClient(app)
    app.dependency_overrides.clear()
