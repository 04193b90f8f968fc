import os

import pytest

# Configure the environment before the application reads it at import time.
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("JWT_EXPIRY", "7d")

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from scorekeeper.app import app  # noqa: E402
from scorekeeper.api.deps import get_hasher, get_issuer  # noqa: E402
from scorekeeper.core import get_session  # noqa: E402
from scorekeeper.core.database import build_engine  # noqa: E402


@pytest.fixture()
def engine():
    test_engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture()
def client(engine):
    def _get_test_session():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = _get_test_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def hasher():
    return get_hasher()


@pytest.fixture()
def issuer():
    return get_issuer()


@pytest.fixture()
def auth_headers(issuer):
    token = issuer.issue({"username": "runner", "firstName": "", "lastName": ""})
    return {"Authorization": f"Bearer {token}"}
