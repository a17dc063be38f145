from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.domain.distribution_rule import DistributionRuleTable

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Parsed once at import; read-only for the life of the process
DISTRIBUTION_TABLE = DistributionRuleTable.from_config(ApplicationConfig.DISTRIBUTION)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_distribution_table() -> DistributionRuleTable:
    return DISTRIBUTION_TABLE
