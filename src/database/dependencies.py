"""Database dependencies."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.database.client import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """Get a request-scoped database session.

    The session is committed when the request completes and rolled back if the
    handler raises.
    """
    async with get_session() as session:
        yield session
