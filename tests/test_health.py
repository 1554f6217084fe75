from warehouse_api.main import create_app


async def test_health_endpoint(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


async def test_db_test_returns_probe_rows(client):
    response = await client.get("/db-test")
    assert response.status_code == 200

    data = response.json()
    assert data["ok"] is True
    assert data["rows"] == [{"u": 1}]


async def test_db_test_reports_driver_error(settings):
    from httpx import ASGITransport, AsyncClient

    app = create_app(settings.model_copy(update={"db_probe_sql": "SELECT * FROM no_such_table"}))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/db-test")
    await app.state.database.dispose()

    assert response.status_code == 500
    data = response.json()
    assert data["ok"] is False
    assert "no_such_table" in data["error"]
