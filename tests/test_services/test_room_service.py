"""Tests for room management inside a hostel."""

import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from hostelhub.database import insert_row
from hostelhub.errors import ConstraintError, NotFoundError
from hostelhub.schemas import RoomCreate, RoomDetail, RoomUpdate
from hostelhub.services import room_service
from tests.fake_supabase import FakeSupabase


class TestCreateRoom:
    async def test_create_defaults_to_available(self, client: FakeSupabase, hotel) -> None:
        room = await room_service.create(
            client,
            RoomCreate(hotel_id=hotel.id, room_number="B2", type="Double", price=Decimal("350000")),
        )
        assert room.status == "available"
        assert room.price == Decimal("350000")
        assert room.hotel_id == hotel.id

    def test_price_must_be_positive(self, hotel) -> None:
        with pytest.raises(ValidationError):
            RoomCreate(hotel_id=hotel.id, room_number="B2", type="Double", price=Decimal("0"))

    def test_unknown_status_rejected(self, hotel) -> None:
        with pytest.raises(ValidationError):
            RoomCreate(hotel_id=hotel.id, room_number="B2", type="Double", price=Decimal("1"), status="occupied")

    async def test_missing_required_column_surfaces_store_message(self, client: FakeSupabase, hotel) -> None:
        """The store's not-null message reaches the caller verbatim."""
        payload = RoomCreate(hotel_id=hotel.id, room_number="B2", type="Double", price=Decimal("1"))
        with pytest.raises(ConstraintError) as exc_info:
            await insert_row(client, "rooms", {**payload.model_dump(mode="json"), "type": None})
        assert exc_info.value.code == "23502"
        assert exc_info.value.message == 'null value in column "type" of relation "rooms" violates not-null constraint'


class TestGetRooms:
    async def test_get_by_hotel_lists_rooms(self, client: FakeSupabase, hotel, room) -> None:
        second = await room_service.create(
            client,
            RoomCreate(hotel_id=hotel.id, room_number="A2", type="Double", price=Decimal("350000")),
        )
        rooms = await room_service.get_by_hotel(client, hotel.id)
        assert {r.id for r in rooms} == {room.id, second.id}

    async def test_get_by_id_embeds_hotel(self, client: FakeSupabase, hotel, room) -> None:
        detail = await room_service.get_by_id(client, room.id)
        assert isinstance(detail, RoomDetail)
        assert detail.hotel is not None
        assert detail.hotel.id == hotel.id
        assert detail.hotel.amenities == ["WiFi", "Security", "Study Room"]

    async def test_get_by_id_unknown_raises_not_found(self, client: FakeSupabase) -> None:
        with pytest.raises(NotFoundError):
            await room_service.get_by_id(client, str(uuid.uuid4()))


class TestUpdateRoom:
    async def test_update_price_only(self, client: FakeSupabase, room) -> None:
        updated = await room_service.update(client, room.id, RoomUpdate(price=Decimal("500000")))
        assert updated.price == Decimal("500000")
        assert updated.room_number == room.room_number
        assert updated.status == room.status

    async def test_empty_update_returns_record_unchanged(self, client: FakeSupabase, room) -> None:
        unchanged = await room_service.update(client, room.id, RoomUpdate())
        assert unchanged == room

    async def test_set_status(self, client: FakeSupabase, room) -> None:
        updated = await room_service.set_status(client, room.id, "maintenance")
        assert updated.status == "maintenance"
        assert (await room_service.get_by_id(client, room.id)).status == "maintenance"

    async def test_set_status_rejects_unknown_value(self, client: FakeSupabase, room) -> None:
        with pytest.raises(ValidationError):
            await room_service.set_status(client, room.id, "demolished")

    async def test_update_unknown_raises_not_found(self, client: FakeSupabase) -> None:
        with pytest.raises(NotFoundError):
            await room_service.update(client, str(uuid.uuid4()), RoomUpdate(type="Triple"))


class TestDeleteRoom:
    async def test_delete_room(self, client: FakeSupabase, hotel, room) -> None:
        await room_service.delete(client, room.id)
        assert await room_service.get_by_hotel(client, hotel.id) == []

    async def test_delete_booked_room_is_blocked(self, client: FakeSupabase, room, booking) -> None:
        with pytest.raises(ConstraintError):
            await room_service.delete(client, room.id)
