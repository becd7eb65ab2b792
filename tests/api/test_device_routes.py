"""Device Routes — owner resolution, counts, brand lookups and cascade over HTTP."""

from uuid import uuid4


async def test_create_device_flattens_owner(api_device, api_user):
    assert api_device["owner_id"] == api_user["id"]
    assert api_device["owner_username"] == "alice"


async def test_create_device_unknown_owner_returns_404(client):
    res = await client.post("/api/v1/devices", json={
        "brand": "Samsung", "model": "S21", "owner_id": str(uuid4()),
    })
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity"] == "Owner"


async def test_owner_routes(client, api_user, api_tech, api_device):
    res = await client.get(f"/api/v1/devices/owner/{api_user['id']}")
    assert [d["id"] for d in res.json()] == [api_device["id"]]
    res = await client.get(f"/api/v1/devices/owner/{api_tech['id']}/count")
    assert res.json() == {"count": 0}
    res = await client.get(f"/api/v1/devices/owner/{uuid4()}/count")
    assert res.status_code == 404


async def test_brand_routes(client, api_device):
    assert len((await client.get("/api/v1/devices/brand/Samsung")).json()) == 1
    res = await client.get("/api/v1/devices/brand/Samsung/model/S21")
    assert [d["id"] for d in res.json()] == [api_device["id"]]
    assert (await client.get("/api/v1/devices/brand/Apple")).json() == []


async def test_update_device_owner(client, api_device, api_tech):
    res = await client.put(f"/api/v1/devices/{api_device['id']}", json={
        "brand": "Samsung", "model": "S21 FE", "owner_id": api_tech["id"],
    })
    assert res.status_code == 200
    assert res.json()["owner_username"] == "tom"
    assert res.json()["model"] == "S21 FE"


async def test_delete_device_removes_repairs(client, api_device, api_repair):
    res = await client.delete(f"/api/v1/devices/{api_device['id']}")
    assert res.status_code == 200
    assert (await client.get(f"/api/v1/devices/{api_device['id']}")).status_code == 404
    assert (await client.get(f"/api/v1/repairs/{api_repair['id']}")).status_code == 404
