"""Data-access services, one module per entity.

Every function takes the shared :class:`supabase.AsyncClient` first and
performs a single round trip (``booking_service.confirm`` and
``dashboard_service.get_owner_overview`` are the documented composites)::

    from hostelhub.services import hotel_service

    hotels = await hotel_service.get_by_owner(client, profile.id)
"""

from hostelhub.services import (
    booking_service,
    dashboard_service,
    hotel_service,
    message_service,
    notification_service,
    profile_service,
    review_service,
    room_service,
)

__all__ = [
    "booking_service",
    "dashboard_service",
    "hotel_service",
    "message_service",
    "notification_service",
    "profile_service",
    "review_service",
    "room_service",
]
