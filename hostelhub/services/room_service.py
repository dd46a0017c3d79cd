"""Room service: rooms inside an owner's hostels."""

import logging

from supabase import AsyncClient

from hostelhub.database import delete_row, execute, insert_row, update_row
from hostelhub.schemas.hotel import Room, RoomCreate, RoomDetail, RoomUpdate

logger = logging.getLogger(__name__)

TABLE = "rooms"

DETAIL_COLUMNS = "*, hotel:hotels(*)"


async def get_by_hotel(client: AsyncClient, hotel_id: str) -> list[Room]:
    """Return the rooms of a hostel; an unknown hostel simply has none."""
    rows = await execute(client.table(TABLE).select("*").eq("hotel_id", hotel_id))
    return [Room.model_validate(row) for row in rows]


async def get_by_id(client: AsyncClient, room_id: str) -> RoomDetail:
    """Fetch one room with its hostel.

    Raises:
        NotFoundError: If no room has ``room_id``.
    """
    data = await execute(client.table(TABLE).select(DETAIL_COLUMNS).eq("id", room_id).single())
    return RoomDetail.model_validate(data)


async def create(client: AsyncClient, room: RoomCreate) -> Room:
    data = await insert_row(client, TABLE, room.model_dump(mode="json"))
    return Room.model_validate(data)


async def update(client: AsyncClient, room_id: str, changes: RoomUpdate) -> Room:
    """Change only the fields set on ``changes``; an empty update returns the room as stored."""
    data = await update_row(client, TABLE, room_id, changes.model_dump(mode="json", exclude_unset=True))
    return Room.model_validate(data)


async def set_status(client: AsyncClient, room_id: str, status: str) -> Room:
    """Move a room to ``available``, ``booked`` or ``maintenance``."""
    logger.info("Setting room %s status to %s", room_id, status)
    return await update(client, room_id, RoomUpdate(status=status))


async def delete(client: AsyncClient, room_id: str) -> None:
    await delete_row(client, TABLE, room_id)
