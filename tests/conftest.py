"""Shared test configuration and fixtures.

Every test gets a fresh in-memory :class:`FakeSupabase`, so no Supabase
project is needed. Convenience fixtures create an owner, a student, a
hostel with one room, and a pending booking through the real services.
"""

from decimal import Decimal

import pytest
import pytest_asyncio

from hostelhub.schemas import Booking, BookingCreate, Hotel, HotelCreate, Profile, Room, RoomCreate
from hostelhub.services import booking_service, hotel_service, room_service
from tests.factories import make_profile, semester_dates
from tests.fake_supabase import FakeSupabase

# ---------------------------------------------------------------------------
# Remote store and environment
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> FakeSupabase:
    """A fresh in-memory Supabase stand-in."""
    return FakeSupabase()


@pytest.fixture(autouse=True)
def _supabase_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a developer's real .env and environment out of the tests."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Convenience fixtures: profiles
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def owner(client: FakeSupabase) -> Profile:
    return await make_profile(client, role="owner", name="Hostel Owner")


@pytest_asyncio.fixture
async def student(client: FakeSupabase) -> Profile:
    return await make_profile(client, role="user", name="Student Tenant")


# ---------------------------------------------------------------------------
# Convenience fixtures: hostel, room, booking
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def hotel(client: FakeSupabase, owner: Profile) -> Hotel:
    return await hotel_service.create(
        client,
        HotelCreate(
            owner_id=owner.id,
            name="Olympia Hostel",
            address="23 University Road, Kampala",
            contact_number="+256772000111",
            description="Modern accommodation five minutes from campus.",
            amenities="WiFi, Security, Study Room",
        ),
    )


@pytest_asyncio.fixture
async def room(client: FakeSupabase, hotel: Hotel) -> Room:
    return await room_service.create(
        client,
        RoomCreate(
            hotel_id=hotel.id,
            room_number="A1",
            type="Single",
            price=Decimal("450000"),
            floor_number=1,
            room_category="Standard",
            amenities=["Bed", "Desk", "Wardrobe"],
        ),
    )


@pytest_asyncio.fixture
async def booking(client: FakeSupabase, room: Room, student: Profile) -> Booking:
    check_in, check_out = semester_dates()
    return await booking_service.create(
        client,
        BookingCreate(
            room_id=room.id,
            user_id=student.id,
            check_in_date=check_in,
            check_out_date=check_out,
            total_price=Decimal("1800000"),
        ),
    )
