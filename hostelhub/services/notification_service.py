"""Notification service: new-booking notifications for brokers (owners)."""

from supabase import AsyncClient

from hostelhub.database import execute
from hostelhub.schemas.notification import BookingNotificationDetail

TABLE = "booking_notifications"

DETAIL_COLUMNS = "*, booking:bookings(*, room:rooms(*), user:profiles(*))"


async def get_by_broker(client: AsyncClient, broker_id: str) -> list[BookingNotificationDetail]:
    """Notifications addressed to ``broker_id``, newest first, with the booking embedded."""
    rows = await execute(
        client.table(TABLE).select(DETAIL_COLUMNS).eq("broker_id", broker_id).order("created_at", desc=True)
    )
    return [BookingNotificationDetail.model_validate(row) for row in rows]


async def mark_as_read(client: AsyncClient, notification_id: str) -> None:
    await execute(client.table(TABLE).update({"is_read": True}).eq("id", notification_id))
