# Database connection setup
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import get_settings
from .core.models.base import BaseModel


def build_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Create the async engine; SQLite gets foreign keys switched on."""
    if make_url(database_url).get_backend_name() != "sqlite":
        return create_async_engine(database_url, echo=echo, pool_pre_ping=True, **kwargs)

    engine = create_async_engine(
        database_url, echo=echo, connect_args={"check_same_thread": False}, **kwargs
    )

    # needed for ON DELETE CASCADE from users to notes
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    return engine


settings = get_settings()

engine = build_engine(settings.database_url, echo=settings.database_echo)

# Session factory
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db_session():
    """Yield a session per request; anything left uncommitted is rolled back."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables():
    """Create all tables."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)


async def dispose_engine():
    """Close pooled connections on shutdown."""
    await engine.dispose()
