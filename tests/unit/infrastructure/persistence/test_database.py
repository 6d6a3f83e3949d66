"""Unit tests for the database manager."""

import pytest
from sqlalchemy import text

from orgadmin.core.config import Settings
from orgadmin.infrastructure.persistence import models  # noqa: F401
from orgadmin.infrastructure.persistence.database import (
    DatabaseManager,
    ensure_sqlite_directory,
)


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path}/db/orgadmin.db")


def test_ensure_sqlite_directory(settings, tmp_path):
    ensure_sqlite_directory(settings)
    assert (tmp_path / "db").is_dir()


def test_ensure_sqlite_directory_ignores_postgres(tmp_path):
    ensure_sqlite_directory(Settings(database_url="postgresql+asyncpg://u:p@localhost/db"))
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_create_tables_and_session(settings):
    ensure_sqlite_directory(settings)
    db = DatabaseManager(settings)

    try:
        assert await db.check_connection() is True
        await db.create_tables()

        async with db.session() as session:
            result = await session.execute(
                text("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
            )
            tables = [row[0] for row in result]

        assert "departments" in tables
        assert "roles" in tables
    finally:
        await db.disconnect()


@pytest.mark.asyncio
async def test_check_connection_failure(tmp_path):
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path}/missing/dir/x.db")
    db = DatabaseManager(settings)

    try:
        assert await db.check_connection() is False
    finally:
        await db.disconnect()


@pytest.mark.asyncio
async def test_disconnect_resets_engine(settings):
    db = DatabaseManager(settings)
    first = db.engine

    await db.disconnect()

    assert db.engine is not first
    await db.disconnect()
