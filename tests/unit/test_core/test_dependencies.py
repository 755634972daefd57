"""Tests for FastAPI dependency injection module."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.database import dispose_engine, init_engine
from hotel_api.core.dependencies import get_async_session


class TestGetAsyncSession:
    """Tests for get_async_session."""

    @pytest.mark.asyncio
    async def test_yields_session(self) -> None:
        init_engine("sqlite+aiosqlite:///:memory:")
        try:
            gen = get_async_session()
            session = await anext(gen)
            assert isinstance(session, AsyncSession)
            await gen.aclose()
        finally:
            await dispose_engine()

    @pytest.mark.asyncio
    async def test_raises_without_engine(self) -> None:
        await dispose_engine()
        with pytest.raises(RuntimeError, match="Session factory not initialized"):
            await anext(get_async_session())
