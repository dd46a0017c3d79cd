"""Owner dashboard summary: hostels, bookings and room occupancy at a glance."""

from collections import Counter
from dataclasses import dataclass, field

from supabase import AsyncClient

from hostelhub.schemas.booking import BookingDetail
from hostelhub.schemas.hotel import VALID_ROOM_STATUSES, HotelDetail
from hostelhub.services import booking_service, hotel_service


@dataclass(frozen=True)
class OwnerOverview:
    """Everything the owner dashboard header shows."""

    hotels: list[HotelDetail]
    bookings: list[BookingDetail]
    pending_count: int
    room_status_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_rooms(self) -> int:
        return sum(self.room_status_counts.values())

    @property
    def occupancy_rate(self) -> float:
        """Share of rooms marked booked, from 0.0 to 1.0."""
        if not self.total_rooms:
            return 0.0
        return self.room_status_counts.get("booked", 0) / self.total_rooms


def _count_room_statuses(hotels: list[HotelDetail]) -> dict[str, int]:
    counts = Counter(room.status for hotel in hotels for room in hotel.rooms)
    return {status: counts.get(status, 0) for status in VALID_ROOM_STATUSES}


async def get_owner_overview(client: AsyncClient, owner_id: str) -> OwnerOverview:
    """Load an owner's hostels and bookings and summarise them.

    Either query failing fails the whole overview.
    """
    hotels = await hotel_service.get_by_owner(client, owner_id)
    bookings = await booking_service.get_by_owner(client, owner_id)
    return OwnerOverview(
        hotels=hotels,
        bookings=bookings,
        pending_count=booking_service.count_pending(bookings),
        room_status_counts=_count_room_statuses(hotels),
    )
