"""Review service: student reviews of their bookings."""

from supabase import AsyncClient

from hostelhub.database import execute, insert_row, update_row
from hostelhub.schemas.review import Review, ReviewCreate, ReviewDetail, ReviewUpdate

TABLE = "reviews"

HOTEL_COLUMNS = "*, booking:bookings!inner(*, room:rooms!inner(*)), user:profiles(*)"
OWNER_COLUMNS = "*, booking:bookings!inner(*, room:rooms!inner(*, hotel:hotels!inner(*))), user:profiles(*)"


async def get_by_hotel(client: AsyncClient, hotel_id: str) -> list[ReviewDetail]:
    """Reviews left on any room of a hostel, newest first."""
    rows = await execute(
        client.table(TABLE)
        .select(HOTEL_COLUMNS)
        .eq("booking.room.hotel_id", hotel_id)
        .order("created_at", desc=True)
    )
    return [ReviewDetail.model_validate(row) for row in rows]


async def get_by_owner(client: AsyncClient, owner_id: str) -> list[ReviewDetail]:
    """Reviews across all hostels of an owner, newest first."""
    rows = await execute(
        client.table(TABLE)
        .select(OWNER_COLUMNS)
        .eq("booking.room.hotel.owner_id", owner_id)
        .order("created_at", desc=True)
    )
    return [ReviewDetail.model_validate(row) for row in rows]


async def create(client: AsyncClient, review: ReviewCreate) -> Review:
    data = await insert_row(client, TABLE, review.model_dump(mode="json"))
    return Review.model_validate(data)


async def update(client: AsyncClient, review_id: str, changes: ReviewUpdate) -> Review:
    data = await update_row(client, TABLE, review_id, changes.model_dump(mode="json", exclude_unset=True))
    return Review.model_validate(data)
