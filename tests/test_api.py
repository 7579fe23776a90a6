"""API tests for the session-scoped scheduling endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from event_scheduler.core.config import SchedulerSettings
from event_scheduler.main import create_app


@pytest.fixture()
def client():
    """Fresh app (and session store) for each test."""
    return TestClient(create_app(SchedulerSettings()))


@pytest.fixture()
def session_id(client: TestClient) -> str:
    resp = client.post("/sessions")
    assert resp.status_code == 201
    return resp.json()["id"]


def _add(client: TestClient, session_id: str, name: str, start: str, end: str):
    return client.post(
        f"/sessions/{session_id}/events",
        json={"name": name, "start_time": start, "end_time": end},
    )


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def test_create_session_uses_default_working_hours(client: TestClient):
    resp = client.post("/sessions")
    assert resp.status_code == 201
    body = resp.json()
    assert body["working_hour_start"] == "08:00"
    assert body["working_hour_end"] == "18:00"
    assert body["slot_step_minutes"] == 30
    assert body["max_suggestions"] == 3


def test_create_session_with_overrides(client: TestClient):
    resp = client.post(
        "/sessions",
        json={"working_hour_start": "09:00", "working_hour_end": "17:00"},
    )
    assert resp.status_code == 201
    session = resp.json()
    assert session["working_hour_start"] == "09:00"

    fetched = client.get(f"/sessions/{session['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["working_hour_end"] == "17:00"


def test_create_session_rejects_inverted_hours(client: TestClient):
    resp = client.post(
        "/sessions",
        json={"working_hour_start": "17:00", "working_hour_end": "09:00"},
    )
    assert resp.status_code == 422


def test_sessions_are_isolated(client: TestClient):
    first = client.post("/sessions").json()["id"]
    second = client.post("/sessions").json()["id"]

    _add(client, first, "A", "09:00", "10:00")

    assert len(client.get(f"/sessions/{first}/events").json()) == 1
    assert client.get(f"/sessions/{second}/events").json() == []


def test_unknown_session_returns_404(client: TestClient):
    resp = _add(client, "bogus-id", "A", "09:00", "10:00")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Session not found"


# ---------------------------------------------------------------------------
# Events and conflicts
# ---------------------------------------------------------------------------


def test_add_event_without_conflict(client: TestClient, session_id: str):
    resp = _add(client, session_id, "A", "09:00", "10:00")
    assert resp.status_code == 200
    body = resp.json()

    assert body["conflicts"] == []
    assert len(body["events"]) == 1
    assert body["events"][0]["name"] == "A"
    assert body["events"][0]["start_time"] == "09:00"
    assert body["events"][0]["duration"] == 60


def test_add_overlapping_event_returns_conflict(client: TestClient, session_id: str):
    _add(client, session_id, "A", "09:00", "10:00")

    resp = _add(client, session_id, "B", "09:30", "10:30")
    assert resp.status_code == 200
    conflicts = resp.json()["conflicts"]

    assert len(conflicts) == 1
    assert conflicts[0]["event1"]["name"] == "A"
    assert conflicts[0]["event2"]["name"] == "B"
    assert conflicts[0]["suggestions"][0] == {"start": "08:00", "end": "09:00"}
    assert len(conflicts[0]["suggestions"]) == 3


def test_events_listed_in_start_order(client: TestClient, session_id: str):
    _add(client, session_id, "Late", "15:00", "16:00")
    _add(client, session_id, "Early", "08:30", "09:00")

    resp = client.get(f"/sessions/{session_id}/events")
    assert [e["name"] for e in resp.json()] == ["Early", "Late"]


def test_conflicts_endpoint_recomputes_from_state(client: TestClient, session_id: str):
    _add(client, session_id, "A", "08:00", "18:00")
    _add(client, session_id, "B", "09:00", "09:30")

    resp = client.get(f"/sessions/{session_id}/conflicts")
    assert resp.status_code == 200
    conflicts = resp.json()
    assert len(conflicts) == 1
    assert conflicts[0]["suggestions"] == []


@pytest.mark.parametrize(
    ("start", "end"),
    [("10:00", "10:00"), ("11:00", "10:00"), ("25:00", "26:00"), ("9:00", "10:00")],
)
def test_invalid_times_rejected_before_insert(
    client: TestClient, session_id: str, start: str, end: str
):
    resp = _add(client, session_id, "Bad", start, end)
    assert resp.status_code == 422
    assert client.get(f"/sessions/{session_id}/events").json() == []


def test_empty_name_rejected(client: TestClient, session_id: str):
    resp = _add(client, session_id, "", "09:00", "10:00")
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Suggestions preview
# ---------------------------------------------------------------------------


def test_suggestions_preview_does_not_insert(client: TestClient, session_id: str):
    _add(client, session_id, "A", "08:00", "09:00")

    resp = client.post(
        f"/sessions/{session_id}/suggestions",
        json={"name": "Probe", "start_time": "09:00", "end_time": "10:00"},
    )
    assert resp.status_code == 200
    # 09:00 is taken by the probe itself
    assert resp.json() == [
        {"start": "10:00", "end": "11:00"},
        {"start": "10:30", "end": "11:30"},
        {"start": "11:00", "end": "12:00"},
    ]
    assert len(client.get(f"/sessions/{session_id}/events").json()) == 1


# ---------------------------------------------------------------------------
# Session removal
# ---------------------------------------------------------------------------


def test_delete_session(client: TestClient, session_id: str):
    _add(client, session_id, "A", "09:00", "10:00")

    resp = client.delete(f"/sessions/{session_id}")
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get(f"/sessions/{session_id}").status_code == 404
    assert client.get(f"/sessions/{session_id}/events").status_code == 404
    assert client.app.state.sessions.get(session_id) is None


def test_delete_unknown_session_returns_404(client: TestClient):
    resp = client.delete("/sessions/bogus-id")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Session not found"


def test_delete_session_leaves_others_intact(client: TestClient):
    keep = client.post("/sessions").json()["id"]
    drop = client.post("/sessions").json()["id"]

    client.delete(f"/sessions/{drop}")

    assert client.get(f"/sessions/{keep}").status_code == 200
