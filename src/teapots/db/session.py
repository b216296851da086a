from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from teapots.config import settings

# Predictable constraint names across Postgres and SQLite.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Base.metadata tracks every registered table; init_db() creates them.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_timeout=settings.db_pool_timeout,
    pool_recycle=settings.db_pool_recycle,
    pool_pre_ping=settings.db_pool_pre_ping,
    echo=settings.db_echo,
    # asyncpg driver options, passed directly to asyncpg.connect()
    connect_args={"command_timeout": settings.db_statement_timeout},
)

# expire_on_commit=False keeps objects usable after commit without re-querying.
async_session = async_sessionmaker(engine, expire_on_commit=False)


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """FastAPI dependency returning the session factory.

    Tests override this one dependency to point every session at their own engine.
    """
    return async_session


Sessions = Annotated[async_sessionmaker[AsyncSession], Depends(get_sessionmaker)]


async def get_db(sessions: Sessions) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. This is the single place where
    request transaction boundaries are managed. Services and repositories never
    call commit() or rollback(); the seeder owns its own session.
    """
    async with sessions() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables from Base.metadata."""
    import teapots.models  # noqa: F401  registers models with Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def shutdown() -> None:
    """Close all pooled database connections."""
    await engine.dispose()
