"""Booking service: student reservations and the owner's booking desk.

Ownership rule: an owner sees the bookings of rooms in **their** hostels.
The owner query joins bookings to rooms to hotels and filters on
``hotels.owner_id`` inside the same request.
"""

import logging
from collections.abc import Iterable

from supabase import AsyncClient

from hostelhub.database import execute, insert_row, update_row
from hostelhub.errors import BookingStateError, HostelHubError, RoomStatusSyncError
from hostelhub.schemas.booking import Booking, BookingCreate, BookingDetail, BookingUpdate
from hostelhub.services import room_service

logger = logging.getLogger(__name__)

TABLE = "bookings"

DETAIL_COLUMNS = "*, room:rooms(*), user:profiles(*)"
OWNER_COLUMNS = "*, room:rooms!inner(*, hotel:hotels!inner(*)), user:profiles(*)"


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


async def get_by_id(client: AsyncClient, booking_id: str) -> BookingDetail:
    """Fetch one booking with its room and booker.

    Raises:
        NotFoundError: If no booking has ``booking_id``.
    """
    data = await execute(client.table(TABLE).select(DETAIL_COLUMNS).eq("id", booking_id).single())
    return BookingDetail.model_validate(data)


async def get_by_user(client: AsyncClient, user_id: str) -> list[BookingDetail]:
    """Return a student's bookings, newest first."""
    rows = await execute(
        client.table(TABLE).select(DETAIL_COLUMNS).eq("user_id", user_id).order("created_at", desc=True)
    )
    return [BookingDetail.model_validate(row) for row in rows]


async def get_by_owner(client: AsyncClient, owner_id: str) -> list[BookingDetail]:
    """Return bookings on every room of the owner's hostels, newest first."""
    rows = await execute(
        client.table(TABLE)
        .select(OWNER_COLUMNS)
        .eq("room.hotel.owner_id", owner_id)
        .order("created_at", desc=True)
    )
    return [BookingDetail.model_validate(row) for row in rows]


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


async def create(client: AsyncClient, booking: BookingCreate) -> Booking:
    logger.info("Booking room %s for user %s", booking.room_id, booking.user_id)
    data = await insert_row(client, TABLE, booking.model_dump(mode="json"))
    return Booking.model_validate(data)


async def update(client: AsyncClient, booking_id: str, changes: BookingUpdate) -> Booking:
    data = await update_row(client, TABLE, booking_id, changes.model_dump(mode="json", exclude_unset=True))
    return Booking.model_validate(data)


async def _require_pending(client: AsyncClient, booking_id: str, action: str) -> BookingDetail:
    booking = await get_by_id(client, booking_id)
    if not booking.is_pending:
        raise BookingStateError(
            f"Cannot {action} booking {booking_id}: status is {booking.status!r}, expected 'pending'",
            booking_id=booking_id,
            status=booking.status,
        )
    return booking


async def confirm(client: AsyncClient, booking_id: str) -> Booking:
    """Confirm a pending booking and mark its room as booked.

    These are two separate writes. If the room write fails the booking
    stays confirmed and :class:`RoomStatusSyncError` is raised with the
    confirmed booking attached; nothing is rolled back.

    Raises:
        NotFoundError: If no booking has ``booking_id``.
        BookingStateError: If the booking is not pending.
        RoomStatusSyncError: If the booking was confirmed but the room was not updated.
    """
    await _require_pending(client, booking_id, "confirm")
    confirmed = await update(client, booking_id, BookingUpdate(status="confirmed"))

    try:
        await room_service.set_status(client, confirmed.room_id, "booked")
    except HostelHubError as exc:
        logger.warning("Booking %s confirmed but room %s was not marked booked: %s", booking_id, confirmed.room_id, exc)
        raise RoomStatusSyncError(
            f"Booking {booking_id} is confirmed but room {confirmed.room_id} was not marked booked",
            booking=confirmed,
        ) from exc

    logger.info("Confirmed booking %s (room %s)", booking_id, confirmed.room_id)
    return confirmed


async def cancel(client: AsyncClient, booking_id: str) -> Booking:
    """Cancel a pending booking. The room status is left as it is.

    Raises:
        NotFoundError: If no booking has ``booking_id``.
        BookingStateError: If the booking is not pending.
    """
    await _require_pending(client, booking_id, "cancel")
    cancelled = await update(client, booking_id, BookingUpdate(status="cancelled"))
    logger.info("Cancelled booking %s", booking_id)
    return cancelled


# ---------------------------------------------------------------------------
# Dashboard helpers
# ---------------------------------------------------------------------------


def filter_by_status(bookings: Iterable[Booking], status: str | None) -> list[Booking]:
    """Keep bookings with ``status``; ``None`` or ``"all"`` keeps everything."""
    if status is None or status == "all":
        return list(bookings)
    return [booking for booking in bookings if booking.status == status]


def count_pending(bookings: Iterable[Booking]) -> int:
    """Number of bookings still awaiting the owner's decision."""
    return sum(1 for booking in bookings if booking.is_pending)
