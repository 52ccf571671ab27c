"""Tests for database start-up helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from bookstore.storage.db import create_tables, get_session, wait_and_init_db


def engine_mock(connect_errors=()):
    """Engine whose connect() fails with ``connect_errors`` before working."""
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.side_effect = [
        *connect_errors,
        AsyncMock(),
    ]
    return mock_engine


class TestWaitAndInitDb:
    @pytest.mark.asyncio
    async def test_ready_database(self):
        mock_engine = engine_mock()

        with (
            patch("bookstore.storage.db.engine", mock_engine),
            patch(
                "bookstore.storage.db.create_tables", new_callable=AsyncMock
            ) as mock_create,
        ):
            await wait_and_init_db(retry_interval=0, max_retries=3, create=True)

        mock_create.assert_called_once()

    @pytest.mark.asyncio
    async def test_retries_until_ready(self):
        refused = OperationalError("SELECT 1", {}, Exception("refused"))
        mock_engine = engine_mock([refused, ConnectionRefusedError()])

        with (
            patch("bookstore.storage.db.engine", mock_engine),
            patch("bookstore.storage.db.asyncio.sleep", new_callable=AsyncMock),
        ):
            await wait_and_init_db(retry_interval=0, max_retries=3, create=False)

        assert mock_engine.connect.call_count == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self):
        mock_engine = MagicMock()
        mock_engine.connect.return_value.__aenter__.side_effect = OSError()

        with (
            patch("bookstore.storage.db.engine", mock_engine),
            patch("bookstore.storage.db.asyncio.sleep", new_callable=AsyncMock),
            pytest.raises(RuntimeError),
        ):
            await wait_and_init_db(retry_interval=0, max_retries=2, create=True)

        assert mock_engine.connect.call_count == 2


class TestCreateTables:
    @pytest.mark.asyncio
    async def test_creates_author_table(self, sqlite_engine):
        # Second call is a no-op on existing tables
        await create_tables(sqlite_engine)

        async with sqlite_engine.connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )
            columns = await conn.run_sync(
                lambda sync_conn: {
                    c["name"] for c in inspect(sync_conn).get_columns("author")
                }
            )

        assert "author" in tables
        assert columns == {"id", "first_name", "last_name", "bio", "version"}


class TestGetSession:
    @pytest.mark.asyncio
    async def test_yields_one_session(self):
        session = AsyncMock()
        factory = MagicMock()
        factory.return_value.__aenter__.return_value = session

        with patch("bookstore.storage.db.async_session", factory):
            sessions = [s async for s in get_session()]

        assert sessions == [session]
