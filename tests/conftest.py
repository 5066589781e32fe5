import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from expense_tracker.core.config import Settings
from expense_tracker.core.database import build_session_factory, create_db_and_tables
from expense_tracker.main import create_app
from expense_tracker.models.budget import Budget
from expense_tracker.models.transaction import Transaction
from expense_tracker.services.records import RecordService


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite://",
        CREATE_TABLES_ON_STARTUP=False,
        ENVIRONMENT="test",
    )


@pytest_asyncio.fixture
async def engine():
    # One shared in-memory connection per test
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async with build_session_factory(engine)() as session:
        yield session


@pytest.fixture
def service(session):
    return RecordService(session)


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def food_category(client):
    """Creates the 'Food' expense category and returns its id."""
    response = await client.post("/api/categories", json={"name": "Food", "type": "expense"})
    assert response.status_code == 201
    return int(response.text.rsplit(":", 1)[1])


@pytest.fixture
def budget_rows(engine):
    """Reads the budget rows of a category through a fresh session."""
    async def fetch(category_id):
        async with build_session_factory(engine)() as session:
            result = await session.execute(select(Budget).where(Budget.category_id == category_id))
            return result.scalars().all()
    return fetch


@pytest.fixture
def transaction_count(engine):
    async def count():
        async with build_session_factory(engine)() as session:
            result = await session.execute(select(func.count()).select_from(Transaction))
            return result.scalar_one()
    return count
