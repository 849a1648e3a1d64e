"""Stats and health endpoints."""

from datetime import datetime

PREFIX = "/api/table"


async def test_stats_counts(client, store):
    store.rows.create()
    store.rows.create()
    store.columns.create({"name": "Route"})
    res = await client.get(f"{PREFIX}/stats")
    assert res.status_code == 200
    body = res.json()
    assert body["totalRows"] == 2
    assert body["totalColumns"] == 1
    datetime.fromisoformat(body["lastUpdated"].replace("Z", "+00:00"))


async def test_stats_follow_deletes(client, store):
    row = store.rows.create()
    store.rows.delete(row.id)
    body = (await client.get(f"{PREFIX}/stats")).json()
    assert body["totalRows"] == 0


async def test_health(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"
    assert "timestamp" in body
