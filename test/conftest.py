"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application import (log dir, database URL)
- An in-memory aiosqlite engine per test, with tables created from the ORM metadata
- Session maker / Database / Unit of Work fixtures bound to that engine

Architecture:
- Unit tests (test/**/unit/): Use fake units of work from their own conftest.py
- Integration tests (test/**/integration/): Use the real repositories on sqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never reach for a real PostgreSQL from the test suite
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite://'
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.platform.database.db_setting import Base, Database  # noqa: E402
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402

# Register every model on Base.metadata
import src.service.seating.driven_adapter.model  # noqa: E402, F401


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """One in-memory database per test; StaticPool keeps it alive across sessions"""
    engine = create_async_engine(
        'sqlite+aiosqlite://',
        poolclass=StaticPool,
        connect_args={'check_same_thread': False},
    )
    event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def database(session_maker: async_sessionmaker[AsyncSession]) -> Database:
    return Database(session_maker=session_maker)


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    """Fresh unit of work per call, the way the DI container hands them out"""
    return lambda: SqlAlchemyUnitOfWork(session_factory=database.session)
