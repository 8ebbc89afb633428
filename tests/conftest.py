"""
Pytest configuration and fixtures for testing.

Unit tests use AsyncMock sessions and repositories. Repository and API
tests run against a throw-away SQLite database (aiosqlite) created in the
test's temporary directory, with foreign keys enforced.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio

# Set required environment variables for testing before importing app modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE_PATH", os.devnull)


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    from sqlmodel.ext.asyncio.session import AsyncSession

    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.commit = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    Provides an engine on a fresh SQLite database with all tables.

    Yields:
        AsyncEngine: Engine with foreign key enforcement enabled.
    """
    from sqlalchemy.ext.asyncio import create_async_engine

    from bookshelf.storage.db import create_tables, enable_sqlite_foreign_keys

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'bookshelf.db'}"
    )
    enable_sqlite_foreign_keys(engine)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """
    Provides a session factory bound to the test database.

    Returns:
        sessionmaker: Factory producing AsyncSession instances.
    """
    from sqlalchemy.orm import sessionmaker
    from sqlmodel.ext.asyncio.session import AsyncSession

    return sessionmaker(db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """
    Provides a session on the test database.

    Yields:
        AsyncSession: Session, closed after the test.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def app():
    """
    Create a fresh FastAPI application.

    Returns:
        FastAPI: Application instance (lifespan is not run).
    """
    from bookshelf import application

    return application()


@pytest_asyncio.fixture
async def api_client(app, session_factory):
    """
    Provides an HTTP client talking to the app over the test database.

    The access predicate is replaced by the allow-all one; tests that need
    the real predicate override ``get_security_manager`` again.

    Yields:
        httpx.AsyncClient: Client bound to the ASGI app.
    """
    from bookshelf.dependencies import get_security_manager
    from bookshelf.managers.security_manager import AllowAllSecurityManager
    from bookshelf.storage.db import get_session

    async def override_get_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except BaseException:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_security_manager] = AllowAllSecurityManager

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
