import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from scorekeeper.models import User
from scorekeeper.services.results import InternalFailure
from scorekeeper.services.users import USERNAME_TAKEN, register_user


def new_user(**overrides):
    payload = {
        "username": "speedy",
        "password": "hunter2hunter2",
        "firstName": "Ada",
        "lastName": "Lovelace",
    }
    payload.update(overrides)
    return payload


def assert_validation_error(res, message, location):
    assert res.status_code == 422
    body = res.json()
    assert body["code"] == 422
    assert body["reason"] == "ValidationError"
    assert body["message"] == message
    assert body["location"] == location


def test_register_user(client, session, hasher):
    res = client.post("/api/users", json=new_user())
    assert res.status_code == 201
    assert res.json() == {"username": "speedy", "firstName": "Ada", "lastName": "Lovelace"}

    user = session.exec(select(User).where(User.username == "speedy")).one()
    assert user.password_hash != "hunter2hunter2"
    assert hasher.verify("hunter2hunter2", user.password_hash)


def test_register_user_without_names(client):
    res = client.post("/api/users", json={"username": "speedy", "password": "hunter2hunter2"})
    assert res.status_code == 201
    assert res.json() == {"username": "speedy", "firstName": "", "lastName": ""}


def test_register_trims_names(client):
    res = client.post("/api/users", json=new_user(firstName="  Ada ", lastName="\tLovelace "))
    assert res.status_code == 201
    assert res.json()["firstName"] == "Ada"
    assert res.json()["lastName"] == "Lovelace"


@pytest.mark.parametrize("field", ["username", "password"])
def test_reject_missing_field(client, field):
    payload = new_user()
    del payload[field]
    assert_validation_error(client.post("/api/users", json=payload), "Missing field", field)


@pytest.mark.parametrize("field", ["username", "password", "firstName", "lastName"])
def test_reject_non_string_field(client, field):
    res = client.post("/api/users", json=new_user(**{field: 1234}))
    assert_validation_error(res, "Incorrect field type: expected string", field)


@pytest.mark.parametrize("field", ["username", "password"])
def test_reject_untrimmed_credentials(client, field):
    res = client.post("/api/users", json=new_user(**{field: f" {new_user()[field]} "}))
    assert_validation_error(res, "Cannot start or end with whitespace", field)


def test_reject_empty_username(client):
    res = client.post("/api/users", json=new_user(username=""))
    assert_validation_error(res, "Must be at least 1 characters long", "username")


def test_reject_short_password(client):
    res = client.post("/api/users", json=new_user(password="x" * 7))
    assert_validation_error(res, "Must be at least 8 characters long", "password")


def test_reject_long_password(client):
    res = client.post("/api/users", json=new_user(password="x" * 73))
    assert_validation_error(res, "Must be at most 72 characters long", "password")


def test_accept_boundary_passwords(client):
    assert client.post("/api/users", json=new_user(username="a", password="x" * 8)).status_code == 201
    assert client.post("/api/users", json=new_user(username="b", password="x" * 72)).status_code == 201


def test_reject_duplicate_username(client, session):
    assert client.post("/api/users", json=new_user()).status_code == 201
    res = client.post("/api/users", json=new_user(password="another-password"))
    assert_validation_error(res, "Username already taken", "username")
    assert len(session.exec(select(User)).all()) == 1


def test_password_never_serialized(client):
    body = client.post("/api/users", json=new_user()).json()
    assert "password" not in body
    assert "password_hash" not in body
    assert "hunter2hunter2" not in str(body)


class _NoRows:
    def first(self):
        return None


class StaleLookupSession:
    """Wraps a session whose username lookups miss rows inserted concurrently."""

    def __init__(self, session):
        self._session = session

    def exec(self, statement):
        return _NoRows()

    def __getattr__(self, name):
        return getattr(self._session, name)


def test_concurrent_duplicate_rejected_by_unique_index(session, hasher):
    session.add(User(username="speedy", password_hash=hasher.hash("hunter2hunter2")))
    session.commit()

    result = register_user(StaleLookupSession(session), hasher, new_user())
    assert result == USERNAME_TAKEN
    assert len(session.exec(select(User)).all()) == 1


def test_store_failure_during_registration(session, hasher, monkeypatch):
    def store_error():
        raise OperationalError("INSERT INTO user", {}, Exception("disk I/O error"))

    monkeypatch.setattr(session, "commit", store_error)
    assert register_user(session, hasher, new_user()) == InternalFailure()


def test_non_object_body_uses_error_shape(client):
    res = client.post("/api/users", json=["username"])
    assert res.status_code == 422
    body = res.json()
    assert body["code"] == 422
    assert body["reason"] == "ValidationError"
    assert body["location"] == "body"
    assert body["message"]
