"""
Sign-in, identity lookup and account removal.

The identity provider is patched out; only the claims it hands back matter.
"""

from __future__ import annotations

from unittest.mock import patch

from flask_jwt_extended import create_access_token

from carecompanion.extensions import db
from carecompanion.models import Appointment, HealthMetric, Medication, MedicationLog, User
from carecompanion.services.user_service import delete_user

VERIFY = "carecompanion.services.firebase_service.verify_id_token"

CLAIMS = {
    "uid": "firebase-uid-123",
    "email": "Carol@Example.com",
    "name": "Carol Danvers",
    "picture": "https://example.com/carol.png",
}


def test_login_creates_user_and_issues_token(client) -> None:
    with patch(VERIFY, return_value=CLAIMS) as verify:
        resp = client.post("/api/auth/login", json={"idToken": "good-token"})

    verify.assert_called_once_with("good-token")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["user"]["id"] == "firebase-uid-123"
    assert body["user"]["email"] == "carol@example.com"
    assert body["user"]["firstName"] == "Carol"
    assert body["user"]["lastName"] == "Danvers"

    me = client.get("/api/auth/user", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.get_json()["id"] == "firebase-uid-123"


def test_login_refreshes_existing_profile(client) -> None:
    with patch(VERIFY, return_value=CLAIMS):
        client.post("/api/auth/login", json={"idToken": "t"})
    with patch(VERIFY, return_value={**CLAIMS, "name": "Carol Marvel"}):
        resp = client.post("/api/auth/login", json={"idToken": "t"})

    assert resp.get_json()["user"]["lastName"] == "Marvel"
    assert User.query.count() == 1


def test_login_requires_id_token(client) -> None:
    resp = client.post("/api/auth/login", json={})
    assert resp.status_code == 400
    assert "idToken" in resp.get_json()["errors"]


def test_login_rejects_unverifiable_token(client) -> None:
    with patch(VERIFY, return_value=None):
        resp = client.post("/api/auth/login", json={"idToken": "forged"})
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_missing_token_is_401(client) -> None:
    resp = client.get("/api/auth/user")
    assert resp.status_code == 401


def test_garbage_token_is_401(client) -> None:
    resp = client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_token_for_unknown_user_is_401(app, client) -> None:
    token = create_access_token(identity="ghost")
    resp = client.get("/api/medications", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "User not found"


def test_delete_user_removes_owned_records(client, alice, create_medication) -> None:
    medication = create_medication(alice)
    client.post(
        "/api/medication-logs",
        json={"medicationId": medication["id"], "scheduledDate": "2024-03-01T08:00:00Z", "status": "taken"},
        headers=alice,
    )
    client.post(
        "/api/health-metrics",
        json={"type": "weight", "value": "150", "unit": "lbs", "recordedAt": "2024-03-01T08:00:00Z"},
        headers=alice,
    )
    client.post(
        "/api/appointments",
        json={
            "title": "Checkup",
            "doctorName": "Dr. Smith",
            "location": "Clinic",
            "appointmentDate": "2030-01-01T09:00:00Z",
        },
        headers=alice,
    )

    assert delete_user("alice") is True
    db.session.expire_all()

    assert db.session.get(User, "alice") is None
    assert Medication.query.count() == 0
    assert MedicationLog.query.count() == 0
    assert HealthMetric.query.count() == 0
    assert Appointment.query.count() == 0

    assert client.get("/api/medications", headers=alice).status_code == 401


def test_delete_unknown_user_returns_false(app) -> None:
    assert delete_user("nobody") is False


def test_login_rejects_non_object_body(client) -> None:
    for body in (["tok"], "tok", 42):
        resp = client.post("/api/auth/login", json=body)
        assert resp.status_code == 400, body
        assert "_body" in resp.get_json()["errors"]


def test_login_rejects_non_string_id_token(client) -> None:
    resp = client.post("/api/auth/login", json={"idToken": 123})
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == {"idToken": "must be a string"}
