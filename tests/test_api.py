"""HTTP surface: envelopes, status codes and bearer-token identity."""

from datetime import datetime, timedelta

from tzscheduler.auth import create_access_token, decode_access_token


def create(client, headers, **body):
    response = client.post("/schedules", json={"name": "Team sync", **body}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]["schedule"]


def parse_utc(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_returns_camel_case_envelope(client, alice_headers, alice):
    response = client.post(
        "/schedules",
        json={"name": "Team sync", "baseTimeZone": "Asia/Dubai", "durationMinutes": 30},
        headers=alice_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    schedule = body["data"]["schedule"]
    assert schedule["ownerUserId"] == alice.id
    assert schedule["baseTimeZone"] == "Asia/Dubai"
    assert schedule["durationMinutes"] == 30
    assert schedule["description"] is None
    assert {"id", "createdAt", "updatedAt"} <= schedule.keys()


def test_missing_token_is_unauthorized(client):
    response = client.post("/schedules", json={"name": "Team sync"})

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": {
            "code": "UNAUTHORIZED",
            "message": "You must be signed in to perform this action.",
        },
    }


def test_bad_or_expired_token_is_unauthorized(client, alice):
    expired = create_access_token(alice.id, expires_delta=timedelta(minutes=-5))
    for token in ("not-a-jwt", expired):
        response = client.get("/schedules", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_token_round_trip(alice):
    user = decode_access_token(create_access_token(alice.id, alice.email))
    assert user == alice


def test_validation_failure_envelope(client, alice_headers):
    schedule = create(client, alice_headers)

    response = client.patch(f"/schedules/{schedule['id']}", json={}, headers=alice_headers)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "BAD_REQUEST"
    assert error["message"] == "At least one field must be provided to update the schedule."
    assert error["details"]["issues"]


def test_non_object_body_is_bad_request(client, alice_headers):
    response = client.post("/schedules", json=["not", "an", "object"], headers=alice_headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


def test_other_users_schedule_is_not_found(client, alice_headers, bob_headers):
    schedule = create(client, alice_headers)

    for method, path, body in [
        ("GET", f"/schedules/{schedule['id']}", None),
        ("PATCH", f"/schedules/{schedule['id']}", {"name": "Mine now"}),
        ("DELETE", f"/schedules/{schedule['id']}", None),
        ("PUT", f"/schedules/{schedule['id']}/participants", {"name": "Bob", "timeZone": "UTC"}),
        ("GET", f"/schedules/{schedule['id']}/suggestions", None),
    ]:
        response = client.request(method, path, json=body, headers=bob_headers)
        assert response.status_code == 404, (method, path)
        assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Schedule not found."}


def test_list_is_scoped_and_paginated(client, alice_headers, bob_headers):
    for i in range(3):
        create(client, alice_headers, name=f"Alice {i}")
    create(client, bob_headers, name="Bob's")

    response = client.get("/schedules", params={"page": 2, "pageSize": 2}, headers=alice_headers)

    data = response.json()["data"]
    assert data["total"] == 3
    assert data["page"] == 2
    assert data["pageSize"] == 2
    assert len(data["items"]) == 1

    too_big = client.get("/schedules", params={"pageSize": 500}, headers=alice_headers)
    assert too_big.status_code == 400


def test_team_sync_over_http(client, alice_headers):
    schedule = create(client, alice_headers)
    assert schedule["durationMinutes"] is None

    response = client.patch(
        f"/schedules/{schedule['id']}", json={"durationMinutes": 30}, headers=alice_headers
    )
    updated = response.json()["data"]["schedule"]
    assert updated["durationMinutes"] == 30
    assert updated["name"] == "Team sync"
    assert parse_utc(updated["updatedAt"]) > parse_utc(schedule["updatedAt"])

    response = client.put(
        f"/schedules/{schedule['id']}/participants",
        json={"name": "Karthik", "timeZone": "Asia/Dubai"},
        headers=alice_headers,
    )
    participants = response.json()["data"]["participants"]
    assert len(participants) == 1
    assert participants[0]["scheduleId"] == schedule["id"]
    assert participants[0]["timeZone"] == "Asia/Dubai"

    response = client.put(
        f"/schedules/{schedule['id']}/suggestions",
        json={
            "suggestedStartUtc": "2025-03-03T09:00:00Z",
            "suggestedEndUtc": "2025-03-03T10:00:00Z",
            "score": 90,
        },
        headers=alice_headers,
    )
    suggestion = response.json()["data"]["suggestions"][0]
    assert suggestion["score"] == 90

    details = client.get(f"/schedules/{schedule['id']}", headers=alice_headers).json()["data"]
    assert [p["name"] for p in details["participants"]] == ["Karthik"]
    assert [s["id"] for s in details["suggestions"]] == [suggestion["id"]]

    response = client.delete(
        f"/schedules/{schedule['id']}/suggestions/{suggestion['id']}", headers=alice_headers
    )
    assert response.json() == {"success": True}

    response = client.delete(f"/schedules/{schedule['id']}", headers=alice_headers)
    assert response.json() == {"success": True}

    response = client.get(f"/schedules/{schedule['id']}", headers=alice_headers)
    assert response.status_code == 404


def test_bad_suggestion_window_over_http(client, alice_headers):
    schedule = create(client, alice_headers)

    response = client.put(
        f"/schedules/{schedule['id']}/suggestions",
        json={"suggestedStartUtc": "2025-03-03T10:00:00Z", "suggestedEndUtc": "2025-03-03T09:00:00Z"},
        headers=alice_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Suggested end time must be after the start time."


def test_timestamps_carry_utc_offset(client, alice_headers):
    schedule = create(client, alice_headers)

    response = client.put(
        f"/schedules/{schedule['id']}/suggestions",
        json={"suggestedStartUtc": "2025-03-03T13:00:00+04:00", "suggestedEndUtc": "2025-03-03T10:00:00Z"},
        headers=alice_headers,
    )
    suggestion = response.json()["data"]["suggestions"][0]
    response = client.put(
        f"/schedules/{schedule['id']}/participants",
        json={"name": "Karthik", "timeZone": "Asia/Dubai"},
        headers=alice_headers,
    )
    participant = response.json()["data"]["participants"][0]

    stamps = [
        schedule["createdAt"],
        schedule["updatedAt"],
        participant["createdAt"],
        suggestion["createdAt"],
        suggestion["suggestedStartUtc"],
        suggestion["suggestedEndUtc"],
    ]
    for stamp in stamps:
        assert stamp.endswith(("Z", "+00:00")), stamp
    assert parse_utc(suggestion["suggestedStartUtc"]) == datetime.fromisoformat("2025-03-03T09:00:00+00:00")


def test_oversized_integers_are_bad_request(client, alice_headers):
    response = client.post(
        "/schedules", json={"name": "Team sync", "durationMinutes": 10**20}, headers=alice_headers
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"

    response = client.get("/schedules", params={"page": 10**18}, headers=alice_headers)
    assert response.status_code == 400
    assert response.json()["error"]["details"]["issues"][0]["field"] == "page"
