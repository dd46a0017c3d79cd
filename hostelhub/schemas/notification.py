"""Pydantic v2 schemas for booking notifications sent to brokers (owners)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from hostelhub.schemas.booking import BookingDetail


class BookingNotification(BaseModel):
    id: str
    broker_id: str
    booking_id: str
    is_read: bool = False
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class BookingNotificationDetail(BookingNotification):
    booking: BookingDetail | None = None
