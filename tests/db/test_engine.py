import pytest
import pytest_asyncio

import devcamper.db.engine as db_engine
from devcamper.config import TestingSettings
from devcamper.db import get_db, init_db, shutdown_db
from devcamper.errors import BadRequestError, DBError


@pytest_asyncio.fixture
async def database():
    await init_db(TestingSettings())
    yield
    await shutdown_db()


@pytest.mark.asyncio
async def test_get_db_requires_initialization():
    assert db_engine.SessionLocal is None
    with pytest.raises(DBError) as exc_info:
        await get_db().__anext__()
    assert exc_info.value.message == "Database not initialized"


@pytest.mark.asyncio
async def test_init_and_shutdown():
    await init_db(TestingSettings())
    assert db_engine.engine is not None
    assert db_engine.engine.pool.__class__.__name__ == "StaticPool"
    await shutdown_db()
    assert db_engine.engine is None
    assert db_engine.SessionLocal is None


@pytest.mark.asyncio
async def test_shutdown_without_engine_is_noop():
    await shutdown_db()
    assert db_engine.engine is None


@pytest.mark.asyncio
async def test_get_db_commits(database):
    gen = get_db()
    session = await gen.__anext__()
    assert session.is_active
    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()


@pytest.mark.asyncio
async def test_get_db_propagates_app_errors(database):
    gen = get_db()
    await gen.__anext__()
    with pytest.raises(BadRequestError):
        await gen.athrow(BadRequestError("Duplicate field value entered"))
