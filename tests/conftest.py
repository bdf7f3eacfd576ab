"""Shared fixtures: an app on in-memory SQLite, a test client and token helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from flask_jwt_extended import create_access_token

from carecompanion import create_app
from carecompanion.config import TestConfig
from carecompanion.extensions import db
from carecompanion.services.user_service import upsert_user


@pytest.fixture
def app() -> Iterator[Flask]:
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def make_user(app: Flask) -> Callable[..., str]:
    """Create a user and return its id."""

    def _make(user_id: str, email: str | None = None) -> str:
        upsert_user(user_id, email=email or f"{user_id}@example.com", first_name=user_id.title())
        return user_id

    return _make


@pytest.fixture
def auth_headers(app: Flask) -> Callable[[str], dict[str, str]]:
    def _headers(user_id: str) -> dict[str, str]:
        token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def alice(make_user, auth_headers) -> dict[str, str]:
    return auth_headers(make_user("alice"))


@pytest.fixture
def bob(make_user, auth_headers) -> dict[str, str]:
    return auth_headers(make_user("bob"))


MEDICATION = {
    "name": "Lisinopril",
    "dosage": "10mg",
    "frequency": "daily",
    "startDate": "2024-01-01T08:00:00Z",
}


@pytest.fixture
def create_medication(client: FlaskClient) -> Callable[..., dict]:
    def _create(headers: dict[str, str], **overrides) -> dict:
        resp = client.post("/api/medications", json={**MEDICATION, **overrides}, headers=headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _create
