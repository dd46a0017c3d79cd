"""Hotel service: hostel listings and owner-side hostel management."""

from supabase import AsyncClient

from hostelhub.database import delete_row, execute, insert_row, update_row
from hostelhub.schemas.hotel import Hotel, HotelCreate, HotelDetail, HotelUpdate

TABLE = "hotels"

# Public listing: the owner's profile and every room, in one query
DETAIL_COLUMNS = "*, owner:profiles!hotels_owner_id_fkey(*), rooms(*)"
WITH_ROOMS_COLUMNS = "*, rooms(*)"


async def get_all(client: AsyncClient) -> list[HotelDetail]:
    """Return every listed hostel with its owner and rooms."""
    rows = await execute(client.table(TABLE).select(DETAIL_COLUMNS))
    return [HotelDetail.model_validate(row) for row in rows]


async def get_by_id(client: AsyncClient, hotel_id: str) -> HotelDetail:
    """Fetch one hostel with its owner and rooms.

    Raises:
        NotFoundError: If no hostel has ``hotel_id``.
    """
    data = await execute(client.table(TABLE).select(DETAIL_COLUMNS).eq("id", hotel_id).single())
    return HotelDetail.model_validate(data)


async def get_by_owner(client: AsyncClient, owner_id: str) -> list[HotelDetail]:
    """Return the hostels managed by ``owner_id``, each with its rooms."""
    rows = await execute(client.table(TABLE).select(WITH_ROOMS_COLUMNS).eq("owner_id", owner_id))
    return [HotelDetail.model_validate(row) for row in rows]


async def create(client: AsyncClient, hotel: HotelCreate) -> Hotel:
    data = await insert_row(client, TABLE, hotel.model_dump(mode="json"))
    return Hotel.model_validate(data)


async def update(client: AsyncClient, hotel_id: str, changes: HotelUpdate) -> Hotel:
    """Change only the fields set on ``changes``; an empty update returns the hostel as stored."""
    data = await update_row(client, TABLE, hotel_id, changes.model_dump(mode="json", exclude_unset=True))
    return Hotel.model_validate(data)


async def delete(client: AsyncClient, hotel_id: str) -> None:
    await delete_row(client, TABLE, hotel_id)
