"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the database (a temporary SQLite
file driven by aiosqlite), the HTTP client and sample authors.
"""

import os
import tempfile

import pytest
import pytest_asyncio

# Set required environment variables for testing before importing app modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault(
    "LOG_FILE_PATH",
    os.path.join(tempfile.mkdtemp(prefix="bookstore_test_"), "errors.log"),
)


@pytest.fixture
def db_path(tmp_path):
    """
    Path of a fresh SQLite database file for one test.

    Returns:
        Path: Database file location (created lazily by the engines).
    """
    return tmp_path / "bookstore-test.db"


@pytest_asyncio.fixture
async def sqlite_engine(db_path):
    """
    Provides an aiosqlite engine with all tables created.

    NullPool gives every session its own connection, which is what the
    concurrency tests need to act as independent clients.

    Yields:
        AsyncEngine: Engine bound to the temporary database file.
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import NullPool

    from bookstore.storage.db import create_tables

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    """
    Session factory configured like the application's.

    Returns:
        sessionmaker: Factory producing AsyncSession instances.
    """
    from sqlalchemy.orm import sessionmaker
    from sqlmodel.ext.asyncio.session import AsyncSession

    return sessionmaker(
        sqlite_engine, expire_on_commit=False, class_=AsyncSession
    )


@pytest.fixture
def app(db_path):
    """
    Application with ``get_session`` overridden to use the SQLite file.

    Tables are created through a synchronous engine so the fixture does
    not depend on the event loop the test client runs in.

    Returns:
        FastAPI: Fresh application instance.
    """
    from sqlalchemy import create_engine
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import NullPool
    from sqlmodel import SQLModel
    from sqlmodel.ext.asyncio.session import AsyncSession

    from bookstore import application
    from bookstore.storage.db import get_session

    sync_engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(sync_engine)
    sync_engine.dispose()

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool
    )
    factory = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_session():
        async with factory() as session:
            yield session

    test_app = application()
    test_app.dependency_overrides[get_session] = override_get_session
    return test_app


@pytest.fixture
def client(app):
    """
    Create a test client for the FastAPI application.

    The client is not entered as a context manager, so the lifespan (which
    waits for PostgreSQL) does not run.

    Returns:
        TestClient: FastAPI test client instance.
    """
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def author_payload():
    """
    Provides a create payload in the wire format (camelCase keys).

    Returns:
        dict: Author create body.
    """
    return {
        "firstName": "Jane",
        "lastName": "Austen",
        "bio": "English novelist",
    }
