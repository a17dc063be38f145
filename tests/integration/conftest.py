import pytest
import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
import src.domain  # noqa: F401  registers table models
from src.depends import get_session, get_distribution_table
from src.domain.account import Account
from src.domain.distribution_rule import DistributionRuleTable


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Fresh in-memory SQLite database per test"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest.fixture
def distribution_table():
    return DistributionRuleTable.from_config({
        "primary_account_id": 1,
        "default_rule": "standard",
        "accounts": {"hoa": 2, "utilities": 3},
        "rules": {"standard": {"hoa": "35.00", "utilities": "2150.00"}},
    })


@pytest_asyncio.fixture
async def seeded_accounts(db_session):
    """Main=1000.00, HOA=10.00, Utilities=200.00"""
    accounts = [
        Account(id=1, name="Main", current_cleared_balance=Decimal("1000.00")),
        Account(id=2, name="HOA", current_cleared_balance=Decimal("10.00")),
        Account(id=3, name="Utilities", current_cleared_balance=Decimal("200.00")),
    ]
    db_session.add_all(accounts)
    await db_session.commit()
    return accounts


@pytest_asyncio.fixture
async def client(db_session, distribution_table):
    """Create test client with database session and routing table overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_distribution_table] = lambda: distribution_table

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
