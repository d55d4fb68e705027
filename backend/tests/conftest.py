from __future__ import annotations

import os

# Settings() is instantiated at import time; required keys must exist first.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

from uuid import uuid4

import pytest
import sqlalchemy as sa
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

import community.models  # noqa: F401
from community.core.config import Settings
from community.db.base import Base
from community.db.session import build_session_factory
from community.main import create_app
from tests.testkit import ApiClient, FrozenClock, IdentityFactory, recording_notifier


@pytest.fixture
def cfg() -> Settings:
    return Settings(
        ENV="dev",
        DATABASE_URL="sqlite+pysqlite:///:memory:",
        JWT_SECRET="test-secret",
        OTP_PEPPER="test-pepper",
        ALLOWED_HOSTS="testserver,localhost",
        PROFILE_REQUIRED_VERIFICATIONS="any",
    )


@pytest.fixture
def engine():
    engine = sa.create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @sa.event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def notifier(cfg):
    return recording_notifier(cfg)


@pytest.fixture
def app(cfg, session_factory, notifier, clock):
    return create_app(cfg, session_factory=session_factory, notifier=notifier, clock=clock)


@pytest.fixture
def api(app) -> ApiClient:
    with TestClient(app) as client:
        yield ApiClient(client)


@pytest.fixture
def identity_factory() -> IdentityFactory:
    return IdentityFactory(seed=uuid4().hex[:8])
