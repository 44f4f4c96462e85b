from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import MetaData, text
import logging

from .settings import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_recycle=300,
)

# Endpoints serialise rows after the repository commits, so attributes must not expire
SessionFactory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

class Base(DeclarativeBase):
    """Declarative base shared by the users and time_logs tables"""
    metadata = MetaData()

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session: committed when the endpoint returns, rolled back if it raises"""
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

async def init_db():
    """Create the users and time_logs tables on startup if they are missing"""
    # models must be imported for their tables to exist on Base.metadata
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Time log schema ready ({len(Base.metadata.tables)} tables)")

async def check_db_connection() -> bool:
    """Run a trivial query to probe the database for /health"""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health probe failed: {e}")
        return False
