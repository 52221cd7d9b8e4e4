"""Health & Readiness — liveness always 200, readiness follows the database."""

import dashboard.infrastructure.database as db_module


async def test_liveness_probe(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_is_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_healthy_database(client, monkeypatch):
    class _HealthyManager:
        async def health_check(self):
            return True

    monkeypatch.setattr(db_module, "db_manager", _HealthyManager())
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}
