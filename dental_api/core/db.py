from typing import AsyncIterator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from .config import settings
from .base import Base

engine = create_async_engine(settings.RECORDS_DSN, pool_pre_ping=True)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

async def init_models():
    # In "create_all" mode the tables are created on first startup; otherwise the schema is managed outside the app.
    if settings.DB_MANAGE.lower() == "create_all":
        # register mapped tables on Base.metadata
        from dental_api.modules.records import models  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

async def dispose_engine():
    await engine.dispose()

async def get_session() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session
