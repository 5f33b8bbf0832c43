"""Database engine, session factory and declarative base."""
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from courtbook.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=False, pool_pre_ping=True)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    """Base class for all models."""


async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield one session per request."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db():
    """Create tables that do not exist yet."""
    # Import models so they register on the metadata
    import courtbook.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
