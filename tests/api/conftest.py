"""API fixtures — seed records through the HTTP surface itself."""

import pytest


@pytest.fixture
async def api_user(client):
    res = await client.post("/api/v1/users", json={
        "username": "alice", "email": "a@x.com",
        "password": "secret1", "role": "USER",
    })
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def api_tech(client):
    res = await client.post("/api/v1/users", json={
        "username": "tom", "email": "tom@shop.com",
        "password": "wrench1", "role": "TECH",
    })
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def api_device(client, api_user):
    res = await client.post("/api/v1/devices", json={
        "brand": "Samsung", "model": "S21", "owner_id": api_user["id"],
    })
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def api_repair(client, api_device):
    res = await client.post("/api/v1/repairs", json={
        "description": "Cracked screen", "cost": 50.0,
        "device_id": api_device["id"],
    })
    assert res.status_code == 201
    return res.json()
