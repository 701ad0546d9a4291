from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from todo_api.config.settings import Settings

Base = declarative_base()


class Database:
    """Async engine and session factory for one application instance"""

    def __init__(self, settings: Settings):
        self.engine: AsyncEngine = create_async_engine(settings.database_url)
        self.session_factory = async_sessionmaker(
            self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        # Import models so they register on Base.metadata
        from todo_api.models import task, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


# One session per request, closed when the response is done
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.session_factory() as db:
        yield db
