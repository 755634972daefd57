"""FastAPI dependencies and their ``Annotated`` aliases for route signatures."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.config import Settings, get_settings
from hotel_api.core.database import get_session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield a session that is closed when the request finishes."""
    async with get_session_factory()() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_async_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
