import os
import sys
import pytest
from werkzeug.security import generate_password_hash

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from config import Config
from bevbook import create_app
from bevbook.extensions import db
from bevbook.models.user import User
from bevbook.utils.auth import decode_token


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SECRET_KEY = "test-secret"


@pytest.fixture(scope="module")
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        # seed user
        if not User.query.filter_by(email="user@example.com").first():
            u = User(name="User Demo", email="user@example.com", password=generate_password_hash("secret"))
            db.session.add(u)
            db.session.commit()
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


def test_login_returns_token_and_profile(client, app):
    r = client.post("/api/auth/login", json={"email": "user@example.com", "password": "secret"})
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["user"]["email"] == "user@example.com"
    assert data["user"]["name"] == "User Demo"
    assert "password" not in data["user"]
    with app.app_context():
        payload = decode_token(data["token"])
    assert payload["sub"] == str(data["user"]["id"])
    assert payload["exp"] > payload["iat"]


def test_login_is_case_insensitive_on_email(client):
    r = client.post("/api/auth/login", json={"email": "  USER@example.com ", "password": "secret"})
    assert r.status_code == 200, r.data


def test_login_wrong_password(client):
    r = client.post("/api/auth/login", json={"email": "user@example.com", "password": "nope"})
    assert r.status_code == 401
    err = r.get_json()["error"]
    assert err["code"] == "INVALID_CREDENTIALS"
    assert err["message"] == "Email or password incorrect"


def test_login_unknown_email(client):
    r = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret"})
    assert r.status_code == 401


def test_login_requires_fields(client):
    r = client.post("/api/auth/login", json={"email": "user@example.com"})
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert "password" in err["details"]


def test_register_signs_user_in(client):
    r = client.post("/api/auth/register", json={
        "name": "Tyson", "email": "Tyson@Example.com", "password": "hunter22",
    })
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["user"]["email"] == "tyson@example.com"
    assert data["user"]["name"] == "Tyson"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.get_json()["user"]["id"] == data["user"]["id"]


def test_register_duplicate_email(client):
    r = client.post("/api/auth/register", json={
        "name": "Again", "email": "user@example.com", "password": "secret1",
    })
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "EMAIL_IN_USE"


@pytest.mark.parametrize("body, field", [
    ({"email": "a@example.com", "password": "secret1"}, "name"),
    ({"name": "   ", "email": "a@example.com", "password": "secret1"}, "name"),
    ({"name": "A", "email": "not-an-email", "password": "secret1"}, "email"),
    ({"name": "A", "email": "a@example.com", "password": "123"}, "password"),
])
def test_register_validation(client, body, field):
    r = client.post("/api/auth/register", json=body)
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert field in err["details"]


def test_logout_confirms(client):
    r = client.post("/api/auth/logout")
    assert r.status_code == 200
    assert r.get_json()["message"] == "Logged out successfully"


def test_me_requires_bearer_token(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "UNAUTHORIZED"

    r2 = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert r2.status_code == 401
    assert r2.get_json()["error"]["message"] == "Invalid token"


def test_token_signed_with_other_secret_rejected(client):
    import jwt
    forged = jwt.encode({"sub": "1"}, "other-secret", algorithm="HS256")
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401


def test_me_for_deleted_account(client, app):
    r = client.post("/api/auth/register", json={"name": "Gone", "email": "gone@example.com", "password": "secret"})
    assert r.status_code == 201, r.data
    token = r.get_json()["token"]
    with app.app_context():
        db.session.delete(User.query.filter_by(email="gone@example.com").first())
        db.session.commit()

    r2 = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r2.status_code == 404
    assert r2.get_json()["error"]["code"] == "USER_NOT_FOUND"


def test_expired_token_rejected(client, app):
    import datetime as dt
    from bevbook.utils.auth import create_token
    with app.app_context():
        user = User.query.filter_by(email="user@example.com").first()
        stale = create_token(user.id, now=dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=13))
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {stale}"})
    assert r.status_code == 401
    err = r.get_json()["error"]
    assert err["code"] == "UNAUTHORIZED"
    assert err["message"] == "Token expired"


def test_register_race_on_unique_email_is_conflict(client, app, monkeypatch):
    from sqlalchemy.exc import IntegrityError
    from sqlalchemy.orm import Session

    def commit_fails(self):
        raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email"))

    monkeypatch.setattr(Session, "commit", commit_fails)
    r = client.post("/api/auth/register", json={"name": "Racer", "email": "racer@example.com", "password": "secret"})
    monkeypatch.undo()

    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "EMAIL_IN_USE"
    with app.app_context():
        assert User.query.filter_by(email="racer@example.com").first() is None
