import pytest
from fastapi.testclient import TestClient

from scorekeeper.app import app
from scorekeeper.core import get_session


@pytest.fixture()
def broken_store_client():
    def _unreachable_session():
        raise RuntimeError("database unreachable")

    app.dependency_overrides[get_session] = _unreachable_session
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_unexpected_error_is_opaque(broken_store_client):
    res = broken_store_client.get("/api/records/best")
    assert res.status_code == 500
    assert res.json() == {
        "code": 500,
        "reason": "InternalError",
        "message": "Internal server error",
    }
    assert "unreachable" not in res.text
