"""Saloon HTTP routes: envelopes, status codes and caller resolution.

Invariants:
    - Every response body carries ``success``; failures carry ``error.code``
    - Write routes need a bearer token; its ``sub`` is the owner/caller
    - Wire format uses camelCase field names
"""

import pytest

BASE = "/api/v1/saloons"

NEW_SALOON = {
    "saloonName": "Fade Masters",
    "saloonLocation": "12 Market Street",
    "attachmentURL": "https://example.com/fade.jpg",
}


@pytest.fixture
async def created(client, auth):
    res = await client.post(f"{BASE}/", json=NEW_SALOON, headers=auth("alice"))
    assert res.status_code == 201
    return res.json()["data"]


async def test_list_empty_returns_404_empty_collection(client):
    res = await client.get(f"{BASE}/")

    assert res.status_code == 404
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "EMPTY_COLLECTION"
    assert body["error"]["message"] == "No saloons found."


async def test_create_returns_saloon_in_camel_case(created):
    assert created["owner"] == "alice"
    assert created["saloonName"] == "Fade Masters"
    assert created["attachmentURL"] == "https://example.com/fade.jpg"
    assert created["rating"] == 1.0
    assert created["servicesRendered"] == []
    assert created["updatedAt"] is None


async def test_list_after_create_has_one_element(client, created):
    res = await client.get(f"{BASE}/")

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert [s["id"] for s in body["data"]] == [created["id"]]


async def test_get_by_id(client, created):
    res = await client.get(f"{BASE}/{created['id']}")

    assert res.status_code == 200
    assert res.json()["data"] == created


async def test_get_unknown_returns_404(client):
    res = await client.get(f"{BASE}/missing")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


async def test_create_without_token_returns_401(client):
    res = await client.post(f"{BASE}/", json=NEW_SALOON)

    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_create_with_bad_token_returns_401(client):
    res = await client.post(f"{BASE}/", json=NEW_SALOON, headers={"Authorization": "Bearer junk"})

    assert res.status_code == 401


async def test_create_with_missing_field_returns_400(client, auth):
    res = await client.post(
        f"{BASE}/", json={"saloonName": "Only a name"}, headers=auth("alice")
    )

    assert res.status_code == 400
    assert res.json()["error"] == {
        "code": "INVALID_ARGUMENT",
        "message": "Missing required fields in payload",
        "details": None,
    }


async def test_add_service_by_owner(client, auth, created):
    res = await client.post(
        f"{BASE}/{created['id']}/services",
        json={"serviceName": "Haircut", "serviceDescription": "Short", "serviceAmount": 25},
        headers=auth("alice"),
    )

    assert res.status_code == 201
    services = res.json()["data"]["servicesRendered"]
    assert len(services) == 1
    assert services[0]["serviceName"] == "Haircut"
    assert services[0]["serviceAmount"] == 25


async def test_add_service_by_stranger_returns_403(client, auth, created):
    res = await client.post(
        f"{BASE}/{created['id']}/services",
        json={"serviceName": "Haircut", "serviceDescription": "Short", "serviceAmount": 25},
        headers=auth("mallory"),
    )

    assert res.status_code == 403
    assert res.json()["error"]["code"] == "PERMISSION_DENIED"
    stored = (await client.get(f"{BASE}/{created['id']}")).json()["data"]
    assert stored["servicesRendered"] == []


async def test_add_service_with_malformed_body_returns_400(client, auth, created):
    res = await client.post(
        f"{BASE}/{created['id']}/services",
        json={"serviceName": "Haircut"},
        headers=auth("alice"),
    )

    assert res.status_code == 400
    body = res.json()
    assert body["error"]["code"] == "INVALID_ARGUMENT"
    assert body["error"]["details"]


async def test_rate(client, auth, created):
    res = await client.post(
        f"{BASE}/{created['id']}/rating", json={"rate": 5}, headers=auth("bob")
    )

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["rating"] == pytest.approx(1.2)
    assert data["updatedAt"] is not None


async def test_rate_out_of_range_returns_400(client, auth, created):
    res = await client.post(
        f"{BASE}/{created['id']}/rating", json={"rate": 6}, headers=auth("bob")
    )

    assert res.status_code == 400
    assert "Invalid rating value" in res.json()["error"]["message"]


@pytest.mark.parametrize("rate", ["abc", None])
async def test_rate_that_is_not_a_number_returns_400(client, auth, created, rate):
    res = await client.post(
        f"{BASE}/{created['id']}/rating", json={"rate": rate}, headers=auth("bob")
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ARGUMENT"


@pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
async def test_non_finite_service_amount_returns_400_and_keeps_list_readable(
    client, auth, created, literal
):
    body = '{"serviceName": "Haircut", "serviceDescription": "Short", "serviceAmount": %s}' % literal
    res = await client.post(
        f"{BASE}/{created['id']}/services",
        content=body,
        headers={**auth("alice"), "Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ARGUMENT"
    listing = await client.get(f"{BASE}/")
    assert listing.status_code == 200
    assert listing.json()["data"][0]["servicesRendered"] == []


async def test_rate_nan_returns_400(client, auth, created):
    res = await client.post(
        f"{BASE}/{created['id']}/rating",
        content='{"rate": NaN}',
        headers={**auth("bob"), "Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert (await client.get(f"{BASE}/{created['id']}")).json()["data"]["rating"] == 1.0


async def test_not_found_error_carries_id_in_details(client):
    res = await client.get(f"{BASE}/missing")

    assert res.json()["error"]["details"] == {"id": "missing"}


async def test_update_by_owner(client, auth, created):
    res = await client.put(
        f"{BASE}/{created['id']}", json={"saloonName": "Renamed"}, headers=auth("alice")
    )

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["saloonName"] == "Renamed"
    assert data["saloonLocation"] == NEW_SALOON["saloonLocation"]
    assert data["updatedAt"] is not None


async def test_update_by_stranger_returns_403(client, auth, created):
    res = await client.put(
        f"{BASE}/{created['id']}", json={"saloonName": "Hijacked"}, headers=auth("mallory")
    )

    assert res.status_code == 403


async def test_delete_by_stranger_keeps_record(client, auth, created):
    res = await client.delete(f"{BASE}/{created['id']}", headers=auth("mallory"))

    assert res.status_code == 403
    assert (await client.get(f"{BASE}/{created['id']}")).status_code == 200


async def test_delete_by_owner_returns_removed_record(client, auth, created):
    res = await client.delete(f"{BASE}/{created['id']}", headers=auth("alice"))

    assert res.status_code == 200
    assert res.json()["data"]["id"] == created["id"]
    assert (await client.get(f"{BASE}/{created['id']}")).status_code == 404


async def test_audit_logs_visible_to_admin_only(client, auth, created):
    denied = await client.get("/api/v1/audit/logs", headers=auth("alice"))
    assert denied.status_code == 403

    res = await client.get("/api/v1/audit/logs", headers=auth("auditor"))

    assert res.status_code == 200
    logs = res.json()["data"]
    assert logs[0]["action"] == "create"
    assert logs[0]["object_id"] == created["id"]
    assert logs[0]["actor"] == "alice"
