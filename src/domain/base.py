"""Shared base for persisted domain entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, Integer
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for all table models"""
    pass


def id_type():
    """BIGINT identifiers, INTEGER on SQLite so rowid autoincrement applies"""
    return BigInteger().with_variant(Integer(), "sqlite")


def utc_now() -> datetime:
    """Timezone-aware current UTC time for timestamp columns"""
    return datetime.now(timezone.utc)
