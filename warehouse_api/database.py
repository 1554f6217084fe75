from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import Settings

# Base class for models
Base = declarative_base()


class Database:
    """Engine and session factory built once from the settings at startup."""

    def __init__(self, settings: Settings):
        self.settings = settings
        url = make_url(settings.sqlalchemy_url)

        engine_options = {"echo": settings.debug, "pool_pre_ping": True}
        if url.get_backend_name() != "sqlite":
            engine_options.update(
                pool_size=settings.pool_size,
                max_overflow=settings.max_overflow,
            )

        self.engine = create_async_engine(url, **engine_options)
        self.session_factory = sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """One pooled connection, released on every exit path."""
        async with self.session_factory() as session:
            yield session

    async def create_all(self):
        # Import models so their tables and trigger DDL are registered
        from . import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency yielding a request-scoped database session"""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
