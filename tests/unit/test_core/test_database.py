"""Tests for the database engine and session management module."""

from unittest.mock import MagicMock, patch

import pytest

import hotel_api.core.database as db_module
from hotel_api.core.database import dispose_engine, get_engine, get_session_factory, init_engine, ping


class TestGetEngine:
    """Tests for get_engine."""

    def test_raises_when_not_initialized(self) -> None:
        original_engine = db_module._engine
        db_module._engine = None
        try:
            with pytest.raises(RuntimeError, match="Database engine not initialized"):
                get_engine()
        finally:
            db_module._engine = original_engine

    @pytest.mark.asyncio
    async def test_returns_engine_when_initialized(self) -> None:
        engine = init_engine("sqlite+aiosqlite:///:memory:")
        try:
            assert get_engine() is engine
        finally:
            await dispose_engine()


class TestGetSessionFactory:
    """Tests for get_session_factory."""

    def test_raises_when_not_initialized(self) -> None:
        original_factory = db_module._session_factory
        db_module._session_factory = None
        try:
            with pytest.raises(RuntimeError, match="Session factory not initialized"):
                get_session_factory()
        finally:
            db_module._session_factory = original_factory


class TestInitEngine:
    """Tests for init_engine."""

    def test_pool_settings_derived_from_max_open_conns(self) -> None:
        with patch("hotel_api.core.database.create_async_engine", return_value=MagicMock()) as mock_create:
            init_engine("postgresql+asyncpg://localhost/hotels", max_open_conns=25, max_idle_time=900)
            mock_create.assert_called_once_with(
                "postgresql+asyncpg://localhost/hotels",
                pool_size=12,
                max_overflow=13,
                pool_recycle=900,
                pool_pre_ping=True,
            )

    def test_schema_sets_search_path(self) -> None:
        with patch("hotel_api.core.database.create_async_engine", return_value=MagicMock()) as mock_create:
            init_engine("postgresql+asyncpg://localhost/hotels", schema="pr_42")
            kwargs = mock_create.call_args.kwargs
            assert kwargs["connect_args"] == {"server_settings": {"search_path": "pr_42,public"}}

    def test_sqlite_skips_pool_settings(self) -> None:
        with patch("hotel_api.core.database.create_async_engine", return_value=MagicMock()) as mock_create:
            init_engine("sqlite+aiosqlite:///:memory:", echo=False)
            mock_create.assert_called_once_with("sqlite+aiosqlite:///:memory:", echo=False)

    def test_connect_args_must_be_dict(self) -> None:
        with pytest.raises(TypeError, match="connect_args must be a dict"):
            init_engine("postgresql+asyncpg://localhost/hotels", schema="pr_42", connect_args="nope")


class TestPingAndDispose:
    """Tests for ping and dispose_engine."""

    @pytest.mark.asyncio
    async def test_ping_succeeds(self) -> None:
        init_engine("sqlite+aiosqlite:///:memory:")
        try:
            await ping()
        finally:
            await dispose_engine()

    @pytest.mark.asyncio
    async def test_dispose_clears_state(self) -> None:
        init_engine("sqlite+aiosqlite:///:memory:")
        await dispose_engine()
        assert db_module._engine is None
        assert db_module._session_factory is None

    @pytest.mark.asyncio
    async def test_dispose_without_engine_is_noop(self) -> None:
        db_module._engine = None
        await dispose_engine()
        assert db_module._engine is None
