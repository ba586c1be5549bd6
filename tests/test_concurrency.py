# tests/test_concurrency.py
import asyncio
import httpx
from fastapi.testclient import TestClient
from catalog_api.main import app

client = TestClient(app)

async def _create(ac, n):
    return await ac.post("/api/products", json={"name": f"Widget {n}", "price": 1 + n, "category": "widgets"})

async def _create_many(count):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*[_create(ac, n) for n in range(count)])

async def _update_and_read(pid):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        updates = [
            ac.put(f"/api/products/{pid}", json={"name": f"Name {n}", "price": 100 + n})
            for n in range(10)
        ]
        reads = [ac.get(f"/api/products/{pid}") for _ in range(10)]
        return await asyncio.gather(*updates, *reads)

def test_concurrent_creates_get_distinct_ids():
    client.post("/reset")
    results = asyncio.run(_create_many(20))
    assert all(r.status_code == 201 for r in results)
    ids = [r.json()["id"] for r in results]
    assert len(set(ids)) == 20

    stats = client.get("/api/products/stats").json()
    assert stats["totalProducts"] == 23
    assert stats["stats"]["widgets"] == 20
    client.post("/reset")

def test_concurrent_updates_are_never_half_applied():
    client.post("/reset")
    results = asyncio.run(_update_and_read("1"))
    assert all(r.status_code == 200 for r in results)
    for r in results:
        body = r.json()
        if body["name"] == "Laptop":
            assert body["price"] == 1200
        else:
            n = int(body["name"].split()[-1])
            assert body["price"] == 100 + n
    client.post("/reset")
