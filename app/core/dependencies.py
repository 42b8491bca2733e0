"""
FastAPI dependency injection utilities.

Provides reusable dependencies for database sessions.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_sessionmaker


async def get_async_db_session() -> AsyncGenerator[AsyncSession]:
    """
    Async database session dependency for FastAPI endpoints.

    Usage:
        @router.get("/employees")
        async def list_employees(db: AsyncDbSession):
            ...

    Yields:
        Async SQLAlchemy database session, closed (and rolled back if
        uncommitted) after the request
    """
    session_maker = get_async_sessionmaker()
    async with session_maker() as session:
        yield session


AsyncDbSession = Annotated[AsyncSession, Depends(get_async_db_session)]
