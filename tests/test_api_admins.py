"""
tests.test_api_admins

HTTP surface for the admin registry: caller authentication, status codes that
mirror registry error codes, and the end-to-end bootstrap scenario.
"""

from __future__ import annotations

import httpx
import pytest
import structlog
from structlog.testing import capture_logs

from tests.principals import ALICE, BOB, CAROL


async def _is_admin(client: httpx.AsyncClient, identity: str) -> bool:
    r = await client.get(f"/v1/admins/{identity}")
    assert r.status_code == 200
    return r.json()["is_admin"]


async def _count(client: httpx.AsyncClient, auth) -> int:
    r = await client.get("/v1/admins", headers=auth(ALICE))
    assert r.status_code == 200
    return r.json()["admin_count"]


@pytest.mark.asyncio
async def test_mutations_require_bearer_token(client: httpx.AsyncClient) -> None:
    r = await client.post("/v1/admins/initialize")
    assert r.status_code == 401

    r = await client.post(
        "/v1/admins/initialize", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert r.status_code == 401

    r = await client.post("/v1/admins", json={"identity": BOB})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_is_admin_is_public(client: httpx.AsyncClient, auth) -> None:
    assert await _is_admin(client, ALICE) is False
    await client.post("/v1/admins/initialize", headers=auth(ALICE))
    assert await _is_admin(client, ALICE) is True
    assert await _is_admin(client, ALICE) is True


@pytest.mark.asyncio
async def test_concrete_scenario(client: httpx.AsyncClient, auth) -> None:
    r = await client.post("/v1/admins/initialize", headers=auth(ALICE))
    assert r.status_code == 200
    assert r.json() == {"ok": True, "admin_count": 1}

    r = await client.post("/v1/admins", json={"identity": BOB}, headers=auth(ALICE))
    assert r.json() == {"ok": True, "admin_count": 2}

    r = await client.post("/v1/admins", json={"identity": BOB}, headers=auth(ALICE))
    assert r.status_code == 409
    assert r.json()["error"] == "ALREADY_ADMIN"
    assert await _count(client, auth) == 2

    r = await client.delete(f"/v1/admins/{ALICE}", headers=auth(BOB))
    assert r.status_code == 200
    assert r.json()["admin_count"] == 1
    assert await _is_admin(client, ALICE) is False

    r = await client.delete(f"/v1/admins/{BOB}", headers=auth(BOB))
    assert r.status_code == 400
    assert r.json() == {"detail": "Cannot remove the last admin", "code": 400, "error": "LAST_ADMIN"}

    r = await client.get("/v1/admins", headers=auth(BOB))
    assert r.json() == {"admins": [BOB], "admin_count": 1}


@pytest.mark.asyncio
async def test_second_initialize_conflicts(client: httpx.AsyncClient, auth) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))

    r = await client.post("/v1/admins/initialize", headers=auth(BOB))
    assert r.status_code == 409
    assert r.json()["error"] == "ALREADY_INITIALIZED"
    assert await _is_admin(client, BOB) is False
    assert await _count(client, auth) == 1


@pytest.mark.asyncio
async def test_non_admin_caller_is_forbidden(client: httpx.AsyncClient, auth) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))

    r = await client.post("/v1/admins", json={"identity": BOB}, headers=auth(CAROL))
    assert r.status_code == 403
    assert r.json()["code"] == 403

    r = await client.delete(f"/v1/admins/{ALICE}", headers=auth(CAROL))
    assert r.status_code == 403

    assert await _is_admin(client, BOB) is False
    assert await _count(client, auth) == 1


@pytest.mark.asyncio
async def test_remove_unknown_identity_is_not_found(client: httpx.AsyncClient, auth) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))
    r = await client.delete(f"/v1/admins/{CAROL}", headers=auth(ALICE))
    assert r.status_code == 404
    assert r.json()["error"] == "NOT_ADMIN"


@pytest.mark.asyncio
async def test_add_admin_validates_identity(client: httpx.AsyncClient, auth) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))
    r = await client.post("/v1/admins", json={"identity": ""}, headers=auth(ALICE))
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_audit_trail(client: httpx.AsyncClient, auth) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))
    await client.post("/v1/admins", json={"identity": BOB}, headers=auth(ALICE))

    r = await client.get("/v1/audit", headers=auth(CAROL))
    assert r.status_code == 403

    r = await client.get("/v1/audit", headers=auth(BOB))
    assert r.status_code == 200
    events = r.json()
    assert [(e["event_type"], e["target"]) for e in events] == [
        ("ADMIN_ADDED", BOB),
        ("ADMIN_INITIALIZED", ALICE),
    ]

    r = await client.get("/v1/audit", params={"limit": 1}, headers=auth(BOB))
    assert [e["event_type"] for e in r.json()] == ["ADMIN_ADDED"]


@pytest.mark.asyncio
@pytest.mark.parametrize("identity", ["org/bob", "org/team/bob", "audit", "initialize"])
async def test_any_added_identity_can_be_queried_and_removed(
    client: httpx.AsyncClient, auth, identity: str
) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))

    r = await client.post("/v1/admins", json={"identity": identity}, headers=auth(ALICE))
    assert r.json() == {"ok": True, "admin_count": 2}
    assert await _is_admin(client, identity) is True

    r = await client.delete(f"/v1/admins/{identity}", headers=auth(ALICE))
    assert r.status_code == 200
    assert r.json() == {"ok": True, "admin_count": 1}
    assert await _is_admin(client, identity) is False


@pytest.mark.asyncio
async def test_slashed_identity_can_act_as_caller(client: httpx.AsyncClient, auth) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))
    await client.post("/v1/admins", json={"identity": "org/bob"}, headers=auth(ALICE))

    r = await client.delete(f"/v1/admins/{ALICE}", headers=auth("org/bob"))
    assert r.status_code == 200
    r = await client.delete("/v1/admins/org/bob", headers=auth("org/bob"))
    assert r.status_code == 400
    assert r.json()["error"] == "LAST_ADMIN"


@pytest.mark.asyncio
async def test_identity_length_is_bounded(client: httpx.AsyncClient, auth) -> None:
    too_long = "x" * 257

    r = await client.post("/v1/admins/initialize", headers=auth(too_long))
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid token subject"

    await client.post("/v1/admins/initialize", headers=auth(ALICE))
    r = await client.post("/v1/admins", json={"identity": too_long}, headers=auth(ALICE))
    assert r.status_code == 422

    r = await client.post("/v1/admins", json={"identity": "x" * 256}, headers=auth(ALICE))
    assert r.status_code == 200

    # Queries stay total: an identity that can never be an admin is simply not one.
    assert await _is_admin(client, too_long) is False


@pytest.mark.asyncio
async def test_rejection_log_carries_caller_and_request_id(
    client: httpx.AsyncClient, auth
) -> None:
    await client.post("/v1/admins/initialize", headers=auth(ALICE))

    with capture_logs(processors=[structlog.contextvars.merge_contextvars]) as logs:
        r = await client.post(
            "/v1/admins",
            json={"identity": BOB},
            headers={**auth(CAROL), "x-request-id": "req-403"},
        )
    assert r.status_code == 403

    rejected = [e for e in logs if e["event"] == "registry_rejected"]
    assert len(rejected) == 1
    assert rejected[0]["caller"] == CAROL
    assert rejected[0]["request_id"] == "req-403"
    assert rejected[0]["code"] == 403
