"""
Dose log endpoints.

Covers:
- Inclusive startDate/endDate window on scheduledDate
- Logs are scoped through the medication's owner
- Logs of soft-deleted medications still resolve their medication
- Status enumeration and immutability of medicationId on update
"""

from __future__ import annotations

import pytest


@pytest.fixture
def medication(create_medication, alice) -> dict:
    return create_medication(alice)


def _log(client, headers, medication_id, scheduled, status="taken", **extra):
    resp = client.post(
        "/api/medication-logs",
        json={"medicationId": medication_id, "scheduledDate": scheduled, "status": status, **extra},
        headers=headers,
    )
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_list_embeds_medication_newest_first(client, alice, medication) -> None:
    older = _log(client, alice, medication["id"], "2024-03-01T08:00:00Z")
    newer = _log(client, alice, medication["id"], "2024-03-02T08:00:00Z", status="missed")

    logs = client.get("/api/medication-logs", headers=alice).get_json()
    assert [log["id"] for log in logs] == [newer["id"], older["id"]]
    assert logs[0]["medication"]["name"] == "Lisinopril"


def test_range_filter_is_inclusive(client, alice, medication) -> None:
    days = ["2024-03-01", "2024-03-02", "2024-03-03", "2024-03-04"]
    created = {day: _log(client, alice, medication["id"], f"{day}T08:00:00Z") for day in days}

    resp = client.get(
        "/api/medication-logs",
        query_string={"startDate": "2024-03-02T08:00:00Z", "endDate": "2024-03-03T08:00:00Z"},
        headers=alice,
    )
    assert resp.status_code == 200
    ids = {log["id"] for log in resp.get_json()}
    assert ids == {created["2024-03-02"]["id"], created["2024-03-03"]["id"]}


def test_range_without_matches_is_empty(client, alice, medication) -> None:
    _log(client, alice, medication["id"], "2024-03-01T08:00:00Z")

    resp = client.get(
        "/api/medication-logs",
        query_string={"startDate": "2025-01-01T00:00:00Z", "endDate": "2025-01-31T00:00:00Z"},
        headers=alice,
    )
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_bad_range_value_is_invalid_input(client, alice) -> None:
    resp = client.get("/api/medication-logs", query_string={"startDate": "soon"}, headers=alice)
    assert resp.status_code == 400
    assert "startDate" in resp.get_json()["errors"]


def test_logs_are_scoped_to_medication_owner(client, alice, bob, medication, create_medication) -> None:
    alice_log = _log(client, alice, medication["id"], "2024-03-01T08:00:00Z")
    bob_med = create_medication(bob, name="Atorvastatin")
    _log(client, bob, bob_med["id"], "2024-03-01T21:00:00Z")

    bob_logs = client.get("/api/medication-logs", headers=bob).get_json()
    assert all(log["medication"]["userId"] == "bob" for log in bob_logs)
    assert alice_log["id"] not in {log["id"] for log in bob_logs}

    assert client.get(f"/api/medication-logs/{alice_log['id']}", headers=bob).status_code == 404
    resp = client.patch(f"/api/medication-logs/{alice_log['id']}", json={"status": "missed"}, headers=bob)
    assert resp.status_code == 404


def test_cannot_log_against_someone_elses_medication(client, bob, medication) -> None:
    resp = client.post(
        "/api/medication-logs",
        json={"medicationId": medication["id"], "scheduledDate": "2024-03-01T08:00:00Z", "status": "taken"},
        headers=bob,
    )
    assert resp.status_code == 404


def test_log_of_soft_deleted_medication_still_joins(client, alice, medication) -> None:
    log = _log(client, alice, medication["id"], "2024-03-01T08:00:00Z")
    client.delete(f"/api/medications/{medication['id']}", headers=alice)

    logs = client.get("/api/medication-logs", headers=alice).get_json()
    assert [entry["id"] for entry in logs] == [log["id"]]
    assert logs[0]["medication"]["id"] == medication["id"]
    assert logs[0]["medication"]["isActive"] is False

    fetched = client.get(f"/api/medication-logs/{log['id']}", headers=alice).get_json()
    assert fetched["medication"]["isActive"] is False


def test_new_logs_rejected_for_inactive_medication(client, alice, medication) -> None:
    client.delete(f"/api/medications/{medication['id']}", headers=alice)
    resp = client.post(
        "/api/medication-logs",
        json={"medicationId": medication["id"], "scheduledDate": "2024-03-01T08:00:00Z", "status": "taken"},
        headers=alice,
    )
    assert resp.status_code == 404


def test_status_must_be_known(client, alice, medication) -> None:
    resp = client.post(
        "/api/medication-logs",
        json={"medicationId": medication["id"], "scheduledDate": "2024-03-01T08:00:00Z", "status": "done"},
        headers=alice,
    )
    assert resp.status_code == 400
    assert "status" in resp.get_json()["errors"]


def test_update_log_partial(client, alice, medication, create_medication) -> None:
    log = _log(client, alice, medication["id"], "2024-03-01T08:00:00Z", status="snoozed", notes="later")
    other = create_medication(alice, name="Aspirin")

    resp = client.patch(
        f"/api/medication-logs/{log['id']}",
        json={"status": "taken", "takenAt": "2024-03-01T08:20:00Z", "medicationId": other["id"]},
        headers=alice,
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "taken"
    assert body["takenAt"] == "2024-03-01T08:20:00"
    assert body["notes"] == "later"
    assert body["medicationId"] == medication["id"]


def test_update_missing_log_is_404(client, alice) -> None:
    resp = client.patch("/api/medication-logs/nope", json={"status": "taken"}, headers=alice)
    assert resp.status_code == 404


def test_out_of_range_query_date_is_invalid_input(client, alice) -> None:
    resp = client.get(
        "/api/medication-logs", query_string={"startDate": "0001-01-01T00:00:00+01:00"}, headers=alice
    )
    assert resp.status_code == 400
    assert "startDate" in resp.get_json()["errors"]
