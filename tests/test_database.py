"""Tests for remote error translation and the shared row helpers."""

import uuid
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from postgrest.exceptions import APIError

from hostelhub.config import Settings
from hostelhub.database import create_supabase_client, delete_row, translate_errors, update_row
from hostelhub.errors import (
    AuthenticationError,
    ConstraintError,
    NotFoundError,
    RemoteStoreError,
    RemoteUnavailableError,
)
from tests.fake_supabase import FakeAuthApiError, FakeSupabase


def _api_error(code: str, message: str = "boom") -> APIError:
    return APIError({"code": code, "message": message, "details": "some details", "hint": "a hint"})


class TestTranslateErrors:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("PGRST116", NotFoundError),
            ("23502", ConstraintError),
            ("23503", ConstraintError),
            ("23505", ConstraintError),
            ("22P02", ConstraintError),
            ("42501", ConstraintError),
            ("PGRST204", ConstraintError),
            ("PGRST301", RemoteStoreError),
            ("57014", RemoteStoreError),
        ],
    )
    async def test_api_error_mapping(self, code: str, expected: type) -> None:
        original = _api_error(code)
        with pytest.raises(RemoteStoreError) as exc_info:
            async with translate_errors():
                raise original

        assert type(exc_info.value) is expected
        assert exc_info.value.code == code
        assert exc_info.value.message == "boom"
        assert exc_info.value.details == "some details"
        assert exc_info.value.hint == "a hint"
        assert exc_info.value.__cause__ is original

    async def test_auth_error(self) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            async with translate_errors():
                raise FakeAuthApiError("Email not confirmed", "email_not_confirmed")
        assert exc_info.value.code == "email_not_confirmed"
        assert exc_info.value.message == "Email not confirmed"

    async def test_transport_error(self) -> None:
        with pytest.raises(RemoteUnavailableError):
            async with translate_errors():
                raise httpx.ReadTimeout("timed out")

    async def test_other_exceptions_pass_through(self) -> None:
        with pytest.raises(KeyError):
            async with translate_errors():
                raise KeyError("not remote")


class TestRowHelpers:
    async def test_update_missing_row(self, client: FakeSupabase) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await update_row(client, "hotels", str(uuid.uuid4()), {"name": "x"})
        assert exc_info.value.code == "PGRST116"

    async def test_empty_update_reads_instead(self, client: FakeSupabase, hotel) -> None:
        row = await update_row(client, "hotels", hotel.id, {})
        assert row["name"] == hotel.name
        assert client.calls[-1] == ("hotels", "select")

    async def test_delete_missing_row(self, client: FakeSupabase) -> None:
        with pytest.raises(NotFoundError):
            await delete_row(client, "rooms", str(uuid.uuid4()))


class TestClientFactory:
    async def test_uses_configured_project(self) -> None:
        settings = Settings(supabase_url="https://abcd1234.supabase.co", supabase_anon_key="anon-key")
        sentinel = object()
        with patch("hostelhub.database.acreate_client", AsyncMock(return_value=sentinel)) as factory:
            assert await create_supabase_client(settings) is sentinel
        factory.assert_awaited_once_with("https://abcd1234.supabase.co", "anon-key")
