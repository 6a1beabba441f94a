import os

os.environ.setdefault("LOG_FILE", os.devnull)

import fakeredis  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from app.core import sessions  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.core.db import get_db_session  # noqa: E402
from app.main import app  # noqa: E402
from tests.helpers import PROFILES, register  # noqa: E402


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="db_session")
def db_session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch):
    """Back the session store and rate limiter with an in-process Redis."""
    client = fakeredis.FakeRedis(decode_responses=True)
    monkeypatch.setattr(sessions, "redis_client", client)
    return client


@pytest.fixture(autouse=True)
def no_login_delay(monkeypatch):
    monkeypatch.setattr(settings, "LOGIN_DELAY_SECONDS", 0)


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_db_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = get_db_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def tokens(client) -> dict[str, str]:
    return {username: register(client, username) for username in PROFILES}
