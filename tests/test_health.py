"""
Health metrics, goals and tips.

Covers:
- Latest-by-type follows recordedAt, not insertion order
- Type filter on the metric list
- Vital-sign value checks for known types, free text for others
- Goal soft delete and owner scoping
- Tips are public; only active ones are listed or picked
"""

from __future__ import annotations

from carecompanion.services.health_service import create_health_tip


def _metric(client, headers, metric_type, value, recorded, unit="bpm"):
    resp = client.post(
        "/api/health-metrics",
        json={"type": metric_type, "value": value, "unit": unit, "recordedAt": recorded},
        headers=headers,
    )
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_latest_metric_follows_recorded_at(client, alice) -> None:
    _metric(client, alice, "heart_rate", "70", "2024-05-01T09:00:00Z")
    latest = _metric(client, alice, "heart_rate", "72", "2024-05-03T09:00:00Z")

    resp = client.get("/api/health-metrics/latest/heart_rate", headers=alice)
    assert resp.get_json()["id"] == latest["id"]

    # an older reading entered later does not win
    _metric(client, alice, "heart_rate", "68", "2024-05-02T09:00:00Z")
    assert client.get("/api/health-metrics/latest/heart_rate", headers=alice).get_json()["id"] == latest["id"]

    # a newer reading does
    newest = _metric(client, alice, "heart_rate", "75", "2024-05-04T09:00:00Z")
    assert client.get("/api/health-metrics/latest/heart_rate", headers=alice).get_json()["id"] == newest["id"]


def test_latest_metric_none_is_null(client, alice) -> None:
    resp = client.get("/api/health-metrics/latest/weight", headers=alice)
    assert resp.status_code == 200
    assert resp.get_json() is None


def test_latest_metric_is_per_user(client, alice, bob) -> None:
    _metric(client, alice, "heart_rate", "70", "2024-05-01T09:00:00Z")
    assert client.get("/api/health-metrics/latest/heart_rate", headers=bob).get_json() is None


def test_list_filters_by_type(client, alice) -> None:
    _metric(client, alice, "heart_rate", "70", "2024-05-01T09:00:00Z")
    bp = _metric(client, alice, "blood_pressure", "120/80", "2024-05-01T09:05:00Z", unit="mmHg")

    all_metrics = client.get("/api/health-metrics", headers=alice).get_json()
    assert len(all_metrics) == 2

    only_bp = client.get("/api/health-metrics", query_string={"type": "blood_pressure"}, headers=alice).get_json()
    assert [m["id"] for m in only_bp] == [bp["id"]]
    assert only_bp[0]["reading"] == {"systolic": 120, "diastolic": 80}


def test_vital_values_are_checked(client, alice) -> None:
    cases = [
        ("blood_pressure", "120-80"),
        ("heart_rate", "250"),
        ("heart_rate", "fast"),
        ("weight", "20"),
        ("temperature", "120"),
    ]
    for metric_type, value in cases:
        resp = client.post(
            "/api/health-metrics",
            json={"type": metric_type, "value": value, "unit": "x", "recordedAt": "2024-05-01T09:00:00Z"},
            headers=alice,
        )
        assert resp.status_code == 400, (metric_type, value)
        assert "value" in resp.get_json()["errors"]


def test_unknown_metric_type_accepts_free_text(client, alice) -> None:
    metric = _metric(client, alice, "blood_glucose", "110 fasting", "2024-05-01T09:00:00Z", unit="mg/dL")
    assert metric["value"] == "110 fasting"
    assert metric["reading"] is None


def test_goals_crud_and_soft_delete(client, alice, bob) -> None:
    resp = client.post(
        "/api/health-goals",
        json={"title": "Walk daily", "frequency": "daily", "targetValue": "30 min"},
        headers=alice,
    )
    assert resp.status_code == 201
    goal = resp.get_json()
    assert goal["isActive"] is True

    resp = client.patch(f"/api/health-goals/{goal['id']}", json={"currentValue": "10 min"}, headers=alice)
    updated = resp.get_json()
    assert updated["currentValue"] == "10 min"
    assert updated["targetValue"] == "30 min"
    assert updated["title"] == "Walk daily"

    assert client.patch(f"/api/health-goals/{goal['id']}", json={"title": "x"}, headers=bob).status_code == 404
    assert client.delete(f"/api/health-goals/{goal['id']}", headers=bob).status_code == 404

    assert client.delete(f"/api/health-goals/{goal['id']}", headers=alice).status_code == 200
    assert client.get("/api/health-goals", headers=alice).get_json() == []
    assert client.get(f"/api/health-goals/{goal['id']}", headers=alice).get_json()["isActive"] is False


def test_goal_requires_title_and_frequency(client, alice) -> None:
    resp = client.post("/api/health-goals", json={"title": "  "}, headers=alice)
    assert resp.status_code == 400
    assert set(resp.get_json()["errors"]) == {"title", "frequency"}


def _tip(title, is_active=True):
    return create_health_tip(
        title=title,
        content="Content",
        category="general",
        author_name="Dr. Example",
        author_credentials="MD",
        is_active=is_active,
    )


def test_tips_are_public_and_active_only(client) -> None:
    active = _tip("Stay hydrated")
    _tip("Retired tip", is_active=False)

    resp = client.get("/api/health-tips")
    assert resp.status_code == 200
    assert [t["id"] for t in resp.get_json()] == [active.id]

    daily = client.get("/api/health-tips/daily")
    assert daily.status_code == 200
    assert daily.get_json()["id"] == active.id


def test_daily_tip_without_tips_is_null(client) -> None:
    resp = client.get("/api/health-tips/daily")
    assert resp.status_code == 200
    assert resp.get_json() is None
