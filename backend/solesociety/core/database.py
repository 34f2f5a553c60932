from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from solesociety.core.config import settings


def create_engine_for(url: str) -> AsyncEngine:
    return create_async_engine(
        url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
    )


# Async engine for FastAPI
engine = create_engine_for(settings.DATABASE_URL)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create tables for the local user store."""
    # Register models on Base.metadata before create_all
    import solesociety.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db():
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
