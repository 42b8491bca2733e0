"""Tests for database engine and session management."""

from unittest.mock import patch

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.pool import StaticPool

import app.core.db as db_module
from app.core.db import (
    _engine_options,
    create_fresh_async_engine,
    get_async_engine,
    get_async_sessionmaker,
    init_models,
    reset_async_engine,
    session_scope,
)
from app.db.models import Organization


class TestEngineOptions:
    @pytest.mark.anyio
    async def test_sqlite_uses_static_pool(self):
        options = _engine_options("sqlite+aiosqlite:///:memory:")

        assert options["poolclass"] is StaticPool
        assert "pool_size" not in options

    @pytest.mark.anyio
    async def test_postgres_uses_sized_pool(self):
        options = _engine_options("postgresql+asyncpg://user:pass@db/directory")

        assert options["pool_size"] == 20
        assert options["pool_pre_ping"] is True
        assert options["connect_args"]["server_settings"] == {"timezone": "UTC"}


class TestEngineLifecycle:
    @pytest.mark.anyio
    async def test_get_async_engine_is_cached_until_reset(self):
        await reset_async_engine()

        engine1 = get_async_engine()
        engine2 = get_async_engine()
        assert engine1 is engine2

        await reset_async_engine()
        assert db_module._async_engine is None
        assert db_module._async_sessionmaker is None

    @pytest.mark.anyio
    async def test_sessionmaker_does_not_expire_on_commit(self):
        await reset_async_engine()

        session_maker = get_async_sessionmaker()
        assert session_maker.kw["expire_on_commit"] is False
        assert get_async_sessionmaker() is session_maker

        await reset_async_engine()

    @pytest.mark.anyio
    async def test_fresh_engine_requires_url(self):
        with patch("app.core.db.settings") as mock_settings:
            mock_settings.async_url = ""
            with pytest.raises(RuntimeError, match="DATABASE_URL_APP is required"):
                create_fresh_async_engine()


class TestSchemaAndScope:
    @pytest.mark.anyio
    async def test_init_models_creates_tables(self, async_engine):
        async with async_engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert {"organizations", "employees"} <= set(tables)

    @pytest.mark.anyio
    async def test_session_scope_commits_and_rolls_back(self):
        await reset_async_engine()
        await init_models()
        try:
            async with session_scope() as db:
                db.add(Organization(name="Committed"))

            with pytest.raises(RuntimeError):
                async with session_scope() as db:
                    db.add(Organization(name="Rolled back"))
                    await db.flush()
                    raise RuntimeError("abort")

            async with session_scope() as db:
                result = await db.execute(text("SELECT name FROM organizations"))
                assert [row[0] for row in result] == ["Committed"]
        finally:
            await reset_async_engine()

    @pytest.mark.anyio
    async def test_sqlite_enforces_foreign_keys(self, async_engine):
        async with async_engine.connect() as conn:
            enabled = (await conn.execute(text("PRAGMA foreign_keys"))).scalar()

        assert enabled == 1
