"""Tests for booking reviews."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from hostelhub.errors import ConstraintError
from hostelhub.schemas import BookingCreate, HotelCreate, ReviewCreate, ReviewUpdate, RoomCreate
from hostelhub.services import booking_service, hotel_service, review_service, room_service
from tests.factories import make_profile, semester_dates
from tests.fake_supabase import FakeSupabase


class TestReviewService:
    async def test_create_and_list_by_hotel(self, client: FakeSupabase, hotel, booking, student) -> None:
        review = await review_service.create(
            client, ReviewCreate(booking_id=booking.id, user_id=student.id, rating=4, comment="Quiet and clean.")
        )

        reviews = await review_service.get_by_hotel(client, hotel.id)
        assert [r.id for r in reviews] == [review.id]
        assert reviews[0].user is not None and reviews[0].user.id == student.id
        assert reviews[0].booking is not None and reviews[0].booking.id == booking.id

    async def test_rating_bounds(self, booking, student) -> None:
        for rating in (0, 6):
            with pytest.raises(ValidationError):
                ReviewCreate(booking_id=booking.id, user_id=student.id, rating=rating)

    async def test_get_by_owner_filters_by_hostel_owner(
        self, client: FakeSupabase, owner, booking, student
    ) -> None:
        rival = await make_profile(client, role="owner")
        rival_hotel = await hotel_service.create(client, HotelCreate(owner_id=rival.id, name="Nakulabye Lodge"))
        rival_room = await room_service.create(
            client, RoomCreate(hotel_id=rival_hotel.id, room_number="N1", type="Single", price=Decimal("250000"))
        )
        check_in, check_out = semester_dates()
        rival_booking = await booking_service.create(
            client,
            BookingCreate(
                room_id=rival_room.id,
                user_id=student.id,
                check_in_date=check_in,
                check_out_date=check_out,
                total_price=Decimal("1000000"),
            ),
        )
        mine = await review_service.create(client, ReviewCreate(booking_id=booking.id, user_id=student.id, rating=5))
        theirs = await review_service.create(
            client, ReviewCreate(booking_id=rival_booking.id, user_id=student.id, rating=2)
        )

        owner_reviews = await review_service.get_by_owner(client, owner.id)
        assert [r.id for r in owner_reviews] == [mine.id]
        assert owner_reviews[0].booking.room.hotel.owner_id == owner.id
        assert [r.id for r in await review_service.get_by_owner(client, rival.id)] == [theirs.id]

    async def test_newest_first(self, client: FakeSupabase, hotel, booking, student) -> None:
        first = await review_service.create(client, ReviewCreate(booking_id=booking.id, user_id=student.id, rating=3))
        second = await review_service.create(client, ReviewCreate(booking_id=booking.id, user_id=student.id, rating=4))
        assert [r.id for r in await review_service.get_by_hotel(client, hotel.id)] == [second.id, first.id]

    async def test_update_comment(self, client: FakeSupabase, booking, student) -> None:
        review = await review_service.create(client, ReviewCreate(booking_id=booking.id, user_id=student.id, rating=3))
        updated = await review_service.update(client, review.id, ReviewUpdate(comment="Water pressure improved."))
        assert updated.comment == "Water pressure improved."
        assert updated.rating == 3

    async def test_review_of_unknown_booking_rejected(self, client: FakeSupabase, student) -> None:
        with pytest.raises(ConstraintError):
            await review_service.create(
                client, ReviewCreate(booking_id="00000000-0000-0000-0000-000000000000", user_id=student.id, rating=5)
            )
