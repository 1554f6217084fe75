import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from warehouse_api.config import Settings
from warehouse_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'warehouse.db'}",
        db_probe_sql="SELECT 1 AS u",
        create_tables=True,
    )


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    await app.state.database.create_all()
    yield app
    app.dependency_overrides.clear()
    await app.state.database.dispose()


@pytest.fixture
def database(app):
    return app.state.database


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def row_count(database):
    """Counts rows of a model's table in a separate session"""
    async def _count(model) -> int:
        async with database.session() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count
